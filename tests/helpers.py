"""Cells and assertions shared across test modules."""

from termiart.core.cell import Cell
from termiart.core.color import Color
from termiart.core.grid import Grid


RED = Cell(bg=Color.RED)
GREEN = Cell(bg=Color.GREEN)
BLUE = Cell(bg=Color.BLUE)


def painted(grid: Grid, color: Color) -> set[tuple[int, int]]:
    """Positions whose background is ``color``."""
    return {(x, y) for x, y, cell in grid.cells() if cell.bg == color}


def copy_of(grid: Grid) -> Grid:
    """Independent grid with the same dimensions and cells."""
    return Grid.from_cells(grid.width, grid.height, [cell for _, _, cell in grid.cells()])
