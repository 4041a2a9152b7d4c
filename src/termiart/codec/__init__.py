"""Encoding/decoding of glyph text."""

from termiart.codec.cp437 import (
    cp437_to_unicode,
    decode_glyph,
    encode_glyph,
    unicode_to_cp437,
)

__all__ = ["cp437_to_unicode", "unicode_to_cp437", "encode_glyph", "decode_glyph"]
