"""Circles as a fixed-width annulus around the true radius."""

from termiart.core.cell import Cell
from termiart.core.errors import InvalidGeometry
from termiart.core.grid import Grid
from termiart.raster.line import finish_stroke


def on_circle(i: int, j: int, cx: int, cy: int, radius: int) -> bool:
    """Whether (i, j) lies in the band ``r^2 - r <= d^2 <= r^2 + r``."""
    d2 = (i - cx) ** 2 + (j - cy) ** 2
    r2 = radius * radius
    return r2 - radius <= d2 <= r2 + radius


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise InvalidGeometry(f"Radius must not be negative, got {radius}")


def draw_circle(grid: Grid, center: tuple[int, int], radius: int, cell: Cell) -> None:
    """Paint the ring of cells at ``radius`` from ``center``."""
    cx, cy = grid.check_point(center)
    _check_radius(radius)
    grid.checkpoint()

    for j in range(grid.height):
        for i in range(grid.width):
            if on_circle(i, j, cx, cy, radius):
                grid.paint(i, j, cell)

    finish_stroke(grid, cell)


def fill_circle(grid: Grid, center: tuple[int, int], radius: int, cell: Cell) -> None:
    """
    Fill a disk by mirroring the left half of the ring.

    Every ring cell (i, j) left of or on the center column paints the
    span from i to its mirror ``2*cx - i`` on row j. Spans are clipped
    to the grid's right edge, so a disk cut off on the left side is
    not reconstructed.
    """
    cx, cy = grid.check_point(center)
    _check_radius(radius)
    grid.checkpoint()

    for i in range(cx + 1):
        for j in range(grid.height):
            if on_circle(i, j, cx, cy, radius):
                for k in range(i, min(2 * cx - i, grid.width - 1) + 1):
                    grid.paint(k, j, cell)

    finish_stroke(grid, cell)
