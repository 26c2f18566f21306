"""Tests for the JSON report formatter."""

from __future__ import annotations

import json

import pytest

from errors import ReportFormattingError
from models.records import ReportDefaults
from services.formatter import ReportFormatter

HEAD = ["_", "media", "meter", "id"]
TAIL = ["meter_datetime", "set_date", "total_m3", "current_status", "status", "timestamp"]


def _history(*indices: int) -> dict[str, float]:
    return {f"consumption_at_history_{i}_m3": i / 100 for i in indices}


def test_report_contains_fixed_fields_in_order() -> None:
    text = ReportFormatter().format({}, "2025-01-01T00:00:00Z")

    payload = json.loads(text)
    assert list(payload) == HEAD + TAIL
    assert payload == {
        "_": "telegram",
        "media": "water",
        "meter": "generic_meter",
        "id": "unknown",
        "meter_datetime": "2025-09-26 16:36",
        "set_date": "2128-03-31",
        "total_m3": 4.48,
        "current_status": "OK",
        "status": "OK",
        "timestamp": "2025-01-01T00:00:00Z",
    }


def test_readings_sit_between_identification_and_trailing_blocks() -> None:
    payload = json.loads(ReportFormatter().format(_history(1, 2), "ts"))

    assert list(payload) == HEAD + [
        "consumption_at_history_1_m3",
        "consumption_at_history_2_m3",
    ] + TAIL


def test_readings_are_ordered_lexicographically_not_by_insertion() -> None:
    readings = _history(*range(12, 0, -1))

    payload = json.loads(ReportFormatter().format(readings, "ts"))

    reading_keys = list(payload)[len(HEAD):-len(TAIL)]
    assert reading_keys == sorted(readings)
    assert reading_keys[:4] == [
        "consumption_at_history_10_m3",
        "consumption_at_history_11_m3",
        "consumption_at_history_12_m3",
        "consumption_at_history_1_m3",
    ]
    assert reading_keys[-1] == "consumption_at_history_9_m3"


def test_values_are_rounded_to_configured_precision() -> None:
    readings = {"consumption_at_history_1_m3": 102 * 0.01, "consumption_at_history_2_m3": 0.123456}

    default = json.loads(ReportFormatter().format(readings, "ts"))
    precise = json.loads(ReportFormatter(precision=4).format(readings, "ts"))

    assert default["consumption_at_history_1_m3"] == 1.02
    assert default["consumption_at_history_2_m3"] == 0.12
    assert precise["consumption_at_history_2_m3"] == 0.1235


def test_output_uses_two_space_indentation() -> None:
    text = ReportFormatter().format(_history(1), "ts")

    lines = text.splitlines()
    assert lines[0] == "{"
    assert lines[1] == '  "_": "telegram",'
    assert '  "consumption_at_history_1_m3": 0.01,' in lines
    assert lines[-2] == '  "timestamp": "ts"'
    assert lines[-1] == "}"


def test_custom_defaults_are_used() -> None:
    defaults = ReportDefaults(media="heat", meter="calorimeter", meter_id="12345678", total_m3=0.0)

    payload = json.loads(ReportFormatter(defaults=defaults).format({}, "ts"))

    assert payload["media"] == "heat"
    assert payload["meter"] == "calorimeter"
    assert payload["id"] == "12345678"
    assert payload["total_m3"] == 0.0


def test_non_finite_reading_is_rejected() -> None:
    with pytest.raises(ReportFormattingError):
        ReportFormatter().format({"consumption_at_history_1_m3": float("nan")}, "ts")


def test_reading_clashing_with_report_field_is_rejected() -> None:
    with pytest.raises(ReportFormattingError, match="status"):
        ReportFormatter().format({"status": 1.0}, "ts")


def test_negative_precision_is_rejected() -> None:
    with pytest.raises(ValueError):
        ReportFormatter(precision=-1)


def test_zero_reading_renders_as_float_literal() -> None:
    text = ReportFormatter().format({"consumption_at_history_1_m3": 0.0}, "ts")

    assert '  "consumption_at_history_1_m3": 0.0,' in text.splitlines()
