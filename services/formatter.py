"""Serialisation of readings into the JSON telegram report."""

from __future__ import annotations

import json
import math
from typing import Any, Dict

from pydantic import ValidationError

from errors import ReportFormattingError
from models.records import ReadingMap, ReportDefaults
from models.schemas import TelegramReport

_RESERVED_FIELDS = frozenset(
    {
        "_",
        "media",
        "meter",
        "id",
        "meter_datetime",
        "set_date",
        "total_m3",
        "current_status",
        "status",
        "timestamp",
    }
)


class ReportFormatter:
    """Renders a report with a fixed field order.

    Identification fields come first, then the readings sorted by key,
    then the trailing metadata block and finally the timestamp. Reading
    values are rounded to ``precision`` decimal places.
    """

    def __init__(self, defaults: ReportDefaults | None = None, precision: int = 2) -> None:
        if precision < 0:
            raise ValueError("precision must not be negative.")
        self.defaults = defaults or ReportDefaults()
        self.precision = precision

    def build(self, readings: ReadingMap, timestamp: str) -> TelegramReport:
        defaults = self.defaults
        clashing = sorted(_RESERVED_FIELDS.intersection(readings))
        if clashing:
            raise ReportFormattingError(
                f"Reading names clash with report fields: {', '.join(clashing)}"
            )
        try:
            return TelegramReport(
                kind=defaults.kind,
                media=defaults.media,
                meter=defaults.meter,
                id=defaults.meter_id,
                readings={key: self._round(value) for key, value in readings.items()},
                meter_datetime=defaults.meter_datetime,
                set_date=defaults.set_date,
                total_m3=defaults.total_m3,
                current_status=defaults.current_status,
                status=defaults.status,
                timestamp=timestamp,
            )
        except (ValidationError, TypeError) as exc:
            raise ReportFormattingError(f"Could not build report: {exc}") from exc

    def format(self, readings: ReadingMap, timestamp: str) -> str:
        report = self.build(readings, timestamp)
        payload: Dict[str, Any] = {
            "_": report.kind,
            "media": report.media,
            "meter": report.meter,
            "id": report.id,
        }
        for key in sorted(report.readings):
            payload[key] = report.readings[key]
        payload.update(
            {
                "meter_datetime": report.meter_datetime,
                "set_date": report.set_date,
                "total_m3": report.total_m3,
                "current_status": report.current_status,
                "status": report.status,
                "timestamp": report.timestamp,
            }
        )
        return json.dumps(payload, indent=2, allow_nan=False)

    def _round(self, value: float) -> float:
        if not math.isfinite(value):
            raise ReportFormattingError(f"Reading value {value!r} is not finite.")
        return round(value, self.precision)
