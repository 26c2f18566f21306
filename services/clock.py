"""UTC timestamp source for reports."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from errors import TimestampUnavailable

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
UNKNOWN_TIMESTAMP = "unknown_timestamp"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UtcTimestampProvider:

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    def now(self) -> str:
        """Current UTC time, or ``unknown_timestamp`` if the clock fails."""
        try:
            return self._read()
        except TimestampUnavailable as exc:
            logger.warning(
                "Timestamp unavailable; using placeholder",
                extra={"stage": "timestamp", "reason": str(exc)},
            )
            return UNKNOWN_TIMESTAMP

    def _read(self) -> str:
        try:
            current = self._clock()
            if current.tzinfo is not None:
                current = current.astimezone(timezone.utc)
            return current.strftime(TIMESTAMP_FORMAT)
        except (OSError, OverflowError, ValueError, AttributeError) as exc:
            raise TimestampUnavailable(f"Could not read UTC clock: {exc}") from exc
