"""Linear decode pipeline: hex -> AES-CTR -> readings -> report."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from cipher.aes_ctr import AesCtrCipher
from codec.hexcodec import decode_hex
from errors import ExtractionFailed, TelegramError
from models.records import DecodeResult, ReportDefaults
from services.clock import UtcTimestampProvider
from services.extractor import HistoryConsumptionExtractor, ReadingExtractor
from services.formatter import ReportFormatter
from settings import get_settings

logger = logging.getLogger(__name__)


class TelegramPipeline:
    """Coordinates decoding, decryption, extraction and formatting of one telegram."""

    def __init__(
        self,
        cipher: AesCtrCipher,
        extractor: ReadingExtractor,
        formatter: ReportFormatter,
        clock: UtcTimestampProvider,
    ) -> None:
        self.cipher = cipher
        self.extractor = extractor
        self.formatter = formatter
        self.clock = clock

    def run(self, key_hex: str, telegram_hex: str) -> DecodeResult:
        """Decode one telegram. Any stage failure propagates as a ``TelegramError``."""
        key = decode_hex(key_hex)
        telegram = decode_hex(telegram_hex)
        logger.debug(
            "Decoded hex input",
            extra={"stage": "hex", "key_length": len(key), "telegram_length": len(telegram)},
        )

        plaintext = self.cipher.decrypt(key, telegram)
        logger.debug(
            "Decrypted telegram",
            extra={"stage": "decrypt", "plaintext_length": len(plaintext)},
        )

        try:
            readings = self.extractor.extract(plaintext)
        except TelegramError:
            raise
        except Exception as exc:  # noqa: BLE001 - extractors are pluggable
            raise ExtractionFailed(f"Reading extraction failed: {exc}") from exc
        logger.debug(
            "Extracted readings",
            extra={"stage": "extract", "reading_count": len(readings)},
        )

        timestamp = self.clock.now()
        report = self.formatter.format(readings, timestamp)
        logger.debug("Formatted report", extra={"stage": "format"})

        return DecodeResult(
            telegram_length=len(telegram),
            plaintext_length=len(plaintext),
            readings=readings,
            timestamp=timestamp,
            report=report,
        )


@lru_cache
def build_default_pipeline(
    precision: Optional[int] = None,
    history_limit: Optional[int] = None,
) -> TelegramPipeline:
    """Factory that wires the pipeline with placeholder extraction and a zero counter block."""
    settings = get_settings()
    digits = settings.reading_precision if precision is None else precision
    limit = settings.history_limit if history_limit is None else history_limit
    return TelegramPipeline(
        cipher=AesCtrCipher(),
        extractor=HistoryConsumptionExtractor(limit=limit),
        formatter=ReportFormatter(defaults=ReportDefaults(), precision=digits),
        clock=UtcTimestampProvider(),
    )
