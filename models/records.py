"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

ReadingMap = Dict[str, float]


@dataclass(frozen=True, slots=True)
class ReportDefaults:
    """Placeholder report fields that a real decoder would read from the telegram."""

    kind: str = "telegram"
    media: str = "water"
    meter: str = "generic_meter"
    meter_id: str = "unknown"
    meter_datetime: str = "2025-09-26 16:36"
    set_date: str = "2128-03-31"
    total_m3: float = 4.48
    current_status: str = "OK"
    status: str = "OK"


@dataclass(slots=True)
class DecodeResult:
    """Outcome of one pipeline run. Holds no key material."""

    telegram_length: int
    plaintext_length: int
    readings: ReadingMap = field(default_factory=dict)
    timestamp: str = ""
    report: str = ""
