"""Pydantic schema for the emitted telegram report."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class TelegramReport(BaseModel):
    """Validated report combining placeholder metadata, readings and timestamp."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    kind: str = Field("telegram", alias="_")
    media: str
    meter: str
    id: str
    readings: Dict[str, float] = Field(default_factory=dict)
    meter_datetime: str
    set_date: str
    total_m3: float
    current_status: str
    status: str
    timestamp: str
