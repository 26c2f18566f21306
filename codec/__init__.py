"""Hexadecimal text codec for keys and telegrams."""

from codec.hexcodec import decode_hex, encode_hex

__all__ = ["decode_hex", "encode_hex"]
