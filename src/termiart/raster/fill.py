"""Area fill against the polygon formed by boundary segments."""

from termiart.core.cell import Cell
from termiart.core.geometry import Point
from termiart.core.grid import Grid
from termiart.raster.line import finish_stroke


def fill_area(grid: Grid, seed: tuple[int, int], cell: Cell) -> None:
    """
    Paint every cell in the same even-odd region as ``seed``, plus every
    boundary-marked cell.

    A cell is in the seed's region when the segment from it to the seed
    crosses the recorded boundary segments an even number of times.
    Cost grows with width * height * segments.
    """
    seed = grid.check_point(seed)
    grid.checkpoint()

    for j in range(grid.height):
        for i in range(grid.width):
            current = grid.cell_at(i, j)
            if current.is_boundary or grid.boundaries.same_region(seed, Point(i, j)):
                grid.paint(i, j, cell)

    finish_stroke(grid, cell)
