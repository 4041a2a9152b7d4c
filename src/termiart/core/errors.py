"""Exceptions raised by the grid engine."""

from contextlib import contextmanager
from typing import Iterator


class GridError(Exception):
    """Base class for all termiart errors."""


class OutOfBounds(GridError, IndexError):
    """A point-addressed operation was given a point outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Invalid point ({x},{y}) in dimensions {width}x{height}")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class VersionMismatch(GridError):
    """A grid file was written with a different format tag."""

    def __init__(self, expected: str, found: str):
        super().__init__(f"Invalid version: current {expected} vs {found}")
        self.expected = expected
        self.found = found


class InvalidGeometry(GridError, ValueError):
    """Shape parameters that cannot describe anything drawable."""


class CorruptFile(GridError):
    """A grid file ended early or holds bytes that cannot be decoded."""


class GlyphError(GridError, ValueError):
    """A glyph that does not fit in a two-byte cell record."""


@contextmanager
def suppress_out_of_bounds() -> Iterator[None]:
    """Ignore a bounds failure so a bad command becomes a no-op."""
    try:
        yield
    except OutOfBounds:
        pass
