"""Error taxonomy for the telegram decode pipeline."""

from __future__ import annotations


class TelegramError(Exception):
    """Base class for every fatal decode failure."""


class UsageError(TelegramError):
    """The command line did not supply exactly a key and a telegram."""


class InvalidEncoding(TelegramError, ValueError):
    """Hexadecimal input is malformed."""


class InvalidKeySize(TelegramError, ValueError):
    """AES-128 key is not 16 bytes long."""


class DecryptionFailed(TelegramError):
    """The cipher could not be initialised or could not process the telegram."""


class ExtractionFailed(TelegramError):
    """The reading extractor could not interpret the decrypted payload."""


class ReportFormattingError(TelegramError):
    """The report could not be built from the extracted readings."""


class TimestampUnavailable(TelegramError):
    """The UTC clock could not be read or formatted. Never fatal."""
