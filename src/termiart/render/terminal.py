"""Render grid rows to terminal-compatible escape sequences."""

from typing import Iterable

from termiart.core.cell import Cell, CellStatus
from termiart.core.color import Color
from termiart.core.constants import BOUNDARY_GLYPH, CSI, PREVIEW_GLYPH, RESET


def cell_appearance(cell: Cell) -> tuple[Color, Color, str]:
    """Return (background, foreground, text) as a cell is displayed."""
    if cell.status is CellStatus.PREVIEW:
        return Color.WHITE, Color.BLACK, PREVIEW_GLYPH
    if cell.status is CellStatus.BOUNDARY:
        return cell.bg, cell.bg.reverse(), BOUNDARY_GLYPH
    return cell.bg, cell.fg, cell.glyph


class TerminalRenderer:
    """
    Render grid rows to 24-bit ANSI escape sequences.

    Each cell is two terminal columns wide. SGR codes are only emitted
    when the colors change from the previous cell.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render_row(self, row: Iterable[Cell]) -> str:
        """Render one row of cells, resetting attributes at the end."""
        parts: list[str] = []
        last_bg: Color | None = None
        last_fg: Color | None = None

        for cell in row:
            bg, fg, text = cell_appearance(cell)

            sgr_parts: list[str] = []
            if bg != last_bg:
                sgr_parts.append(bg.to_sgr_bg())
                last_bg = bg
            if fg != last_fg:
                sgr_parts.append(fg.to_sgr_fg())
                last_fg = fg

            if sgr_parts:
                parts.append(f"{CSI}{';'.join(sgr_parts)}m")
            parts.append(text)

        # Reset at end of each line to prevent color bleeding
        parts.append(RESET)
        return ''.join(parts)

    def render(self, rows: Iterable[Iterable[Cell]]) -> str:
        """Render every row, newline separated."""
        result = '\n'.join(self.render_row(row) for row in rows)
        if self.reset_at_end:
            result += RESET
        return result
