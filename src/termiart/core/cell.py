"""Cell - atomic unit of the drawing grid."""

from dataclasses import dataclass, field, replace
from enum import Enum

from termiart.codec.cp437 import unicode_to_cp437
from termiart.core.color import Color


BLANK_GLYPH = "  "


class CellStatus(Enum):
    """Transient tag carried by a cell alongside its colors."""
    PLAIN = 0
    BOUNDARY = 1
    PREVIEW = 2


@dataclass(frozen=True, slots=True)
class Cell:
    """
    One grid position: background color, a two-character glyph drawn in
    its own color, and a status tag.

    The zero value is a white cell with a blank glyph. Glyphs are limited
    to characters with a CP437 encoding so every cell can be saved.
    """
    bg: Color = field(default_factory=lambda: Color.WHITE)
    fg: Color = field(default_factory=lambda: Color.BLACK)
    glyph: str = BLANK_GLYPH
    status: CellStatus = CellStatus.PLAIN

    def __post_init__(self) -> None:
        if len(self.glyph) > 2:
            raise ValueError(f"Glyph must be at most 2 characters, got {self.glyph!r}")
        if len(self.glyph) < 2:
            object.__setattr__(self, "glyph", self.glyph.ljust(2))
        unicode_to_cp437(self.glyph)

    @property
    def is_preview(self) -> bool:
        return self.status is CellStatus.PREVIEW

    @property
    def is_boundary(self) -> bool:
        return self.status is CellStatus.BOUNDARY

    def with_status(self, status: CellStatus) -> "Cell":
        """Copy of this cell with a different status tag."""
        if status is self.status:
            return self
        return replace(self, status=status)

    def assign_onto(self, dest: "Cell") -> "Cell":
        """
        Return what ``dest`` becomes when this cell is written over it.

        A destination in PREVIEW status keeps its value until the preview
        is reverted. A PREVIEW source only tags the destination, leaving
        its colors and glyph underneath the overlay.
        """
        if dest.status is CellStatus.PREVIEW:
            return dest
        if self.status is CellStatus.PREVIEW:
            return dest.with_status(CellStatus.PREVIEW)
        return self


PREVIEW_CELL = Cell(bg=Color.BLACK, status=CellStatus.PREVIEW)
