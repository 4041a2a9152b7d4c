"""CP437 (IBM PC) character set conversion for cell glyphs."""

from termiart.core.constants import CP437_TO_UNICODE
from termiart.core.errors import CorruptFile, GlyphError


# Build reverse mapping
UNICODE_TO_CP437: dict[str, int] = {
    char: idx for idx, char in enumerate(CP437_TO_UNICODE)
}


def cp437_to_unicode(data: bytes) -> str:
    """Convert CP437-encoded bytes to Unicode string."""
    return ''.join(CP437_TO_UNICODE[b] for b in data)


def unicode_to_cp437(text: str) -> bytes:
    """Convert Unicode string to CP437 bytes, rejecting unmappable chars."""
    result = bytearray()
    for char in text:
        if char not in UNICODE_TO_CP437:
            raise GlyphError(f"Character {char!r} has no CP437 encoding")
        result.append(UNICODE_TO_CP437[char])
    return bytes(result)


def encode_glyph(glyph: str) -> bytes:
    """Encode a glyph as exactly two bytes, space-padded."""
    if len(glyph) > 2:
        raise GlyphError(f"Glyph must be at most 2 characters, got {glyph!r}")
    return unicode_to_cp437(glyph.ljust(2))


def decode_glyph(data: bytes) -> str:
    """Decode the two glyph bytes of a cell record."""
    if len(data) != 2:
        raise CorruptFile(f"Glyph record must be 2 bytes, got {len(data)}")
    return cp437_to_unicode(data)
