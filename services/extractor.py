"""Mapping of decrypted payload bytes to named readings."""

from __future__ import annotations

from typing import Protocol

from models.records import ReadingMap

HISTORY_KEY_TEMPLATE = "consumption_at_history_{index}_m3"


class ReadingExtractor(Protocol):
    """Anything that turns decrypted telegram bytes into named numeric readings."""

    def extract(self, plaintext: bytes) -> ReadingMap:
        ...


class HistoryConsumptionExtractor:
    """Treats each leading payload byte as a historic consumption value.

    This stands in for a real OMS/W-MBus application layer decoder; any
    object implementing :class:`ReadingExtractor` can replace it.
    """

    def __init__(self, limit: int = 15, scale: float = 0.01) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative.")
        self.limit = limit
        self.scale = scale

    def extract(self, plaintext: bytes) -> ReadingMap:
        readings: ReadingMap = {}
        for offset, byte_value in enumerate(plaintext[: self.limit]):
            key = HISTORY_KEY_TEMPLATE.format(index=offset + 1)
            readings[key] = byte_value * self.scale
        return readings
