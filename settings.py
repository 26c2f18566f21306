from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


_LOG_LEVEL_ENV = "LOG_LEVEL"
_PRECISION_ENV = "WMBUS_READING_PRECISION"
_HISTORY_LIMIT_ENV = "WMBUS_HISTORY_LIMIT"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_READING_PRECISION = 2
DEFAULT_HISTORY_LIMIT = 15


@dataclass(frozen=True)
class Settings:
    log_level: str
    reading_precision: int
    history_limit: int


def _read_int_env(name: str, default: int, minimum: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    level = candidate.upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@lru_cache
def get_settings() -> Settings:
    return Settings(
        log_level=_read_log_level(DEFAULT_LOG_LEVEL),
        reading_precision=_read_int_env(_PRECISION_ENV, DEFAULT_READING_PRECISION, minimum=0),
        history_limit=_read_int_env(_HISTORY_LIMIT_ENV, DEFAULT_HISTORY_LIMIT, minimum=1),
    )
