"""AES-128-CTR decryption with a pluggable counter block policy."""

from __future__ import annotations

import logging
from typing import Callable

from cryptography.exceptions import AlreadyFinalized, UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from errors import DecryptionFailed, InvalidKeySize

logger = logging.getLogger(__name__)

KEY_SIZE = 16
BLOCK_SIZE = 16

CounterBlockPolicy = Callable[[bytes], bytes]


def zero_counter_block(ciphertext: bytes) -> bytes:
    """Return an all-zero initial counter block.

    Placeholder only. OMS security profiles derive the counter from the
    telegram header (manufacturer, address, access number).
    """
    return bytes(BLOCK_SIZE)


class AesCtrCipher:
    """Decrypts telegram payloads under a 16-byte key."""

    def __init__(self, counter_policy: CounterBlockPolicy = zero_counter_block) -> None:
        self._counter_policy = counter_policy

    def decrypt(self, key: bytes, ciphertext: bytes) -> bytes:
        if len(key) != KEY_SIZE:
            raise InvalidKeySize(
                f"AES-128 key must be {KEY_SIZE} bytes, got {len(key)}."
            )

        try:
            counter_block = self._counter_policy(ciphertext)
            decryptor = Cipher(algorithms.AES(key), modes.CTR(counter_block)).decryptor()
            plaintext = decryptor.update(ciphertext) + decryptor.finalize()
        except (ValueError, TypeError, UnsupportedAlgorithm, AlreadyFinalized) as exc:
            logger.debug(
                "AES-CTR decryption failed",
                extra={"stage": "decrypt", "reason": type(exc).__name__},
            )
            raise DecryptionFailed(f"AES decryption failed: {exc}") from exc

        if len(plaintext) != len(ciphertext):
            raise DecryptionFailed(
                f"AES decryption produced {len(plaintext)} bytes for {len(ciphertext)} input bytes."
            )
        return plaintext


def decrypt(key: bytes, ciphertext: bytes) -> bytes:
    return AesCtrCipher().decrypt(key, ciphertext)
