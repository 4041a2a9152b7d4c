"""Render a grid to plain text (strip colors)."""

from typing import Iterable

from termiart.core.cell import Cell
from termiart.render.terminal import cell_appearance


class TextRenderer:
    """Render grid rows to plain text without any styling."""

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render(self, rows: Iterable[Iterable[Cell]]) -> str:
        """Render rows to plain text, glyphs and markers only."""
        lines: list[str] = []

        for row in rows:
            line = ''.join(cell_appearance(cell)[2] for cell in row)
            if not self.preserve_whitespace:
                line = line.rstrip()
            lines.append(line)

        result = '\n'.join(lines)

        if not self.preserve_whitespace:
            # Remove trailing empty lines
            result = result.rstrip('\n')

        return result
