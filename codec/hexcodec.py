"""Strict conversion between hexadecimal text and bytes."""

from __future__ import annotations

import string

from errors import InvalidEncoding

_HEX_DIGITS = frozenset(string.hexdigits)


def decode_hex(text: str) -> bytes:
    """Decode ``text`` two characters at a time into bytes.

    Unlike :meth:`bytes.fromhex` no whitespace is tolerated: every character
    must be a hexadecimal digit and the length must be even. The first
    offending pair is reported and nothing is returned on failure.
    """
    if len(text) % 2 != 0:
        raise InvalidEncoding("Hex string length must be even.")

    output = bytearray()
    for offset in range(0, len(text), 2):
        pair = text[offset:offset + 2]
        if pair[0] not in _HEX_DIGITS or pair[1] not in _HEX_DIGITS:
            raise InvalidEncoding(f"Invalid hex character found: {pair}")
        output.append(int(pair, 16))
    return bytes(output)


def encode_hex(data: bytes) -> str:
    return data.hex()
