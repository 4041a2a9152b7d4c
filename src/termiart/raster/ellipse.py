"""Axis-aligned ellipses via a corner coverage test."""

from termiart.core.cell import Cell
from termiart.core.errors import InvalidGeometry
from termiart.core.grid import Grid
from termiart.raster.line import finish_stroke

# Sub-pixel corners of a cell, relative to its center
CORNERS = ((-0.5, 0.5), (0.5, 0.5), (0.5, -0.5), (-0.5, -0.5))


def on_ellipse(i: int, j: int, cx: int, cy: int, rx: int, ry: int) -> bool:
    """
    Whether the ellipse outline passes through cell (i, j).

    Evaluates ``ry^2*(x-cx)^2 + rx^2*(y-cy)^2`` at the four cell corners
    against ``rx^2*ry^2``; the outline crosses the cell unless all four
    corners are strictly on the same side.
    """
    threshold = rx * rx * ry * ry
    inside = outside = False
    for dx, dy in CORNERS:
        value = ry * ry * (i - cx - dx) ** 2 + rx * rx * (j - cy - dy) ** 2
        if value == threshold:
            return True
        if value < threshold:
            inside = True
        else:
            outside = True
    return inside and outside


def _degenerate(rx: int, ry: int) -> bool:
    if rx < 0 or ry < 0:
        raise InvalidGeometry(f"Radii must not be negative, got ({rx}, {ry})")
    return rx == 0 or ry == 0


def draw_ellipse(grid: Grid, center: tuple[int, int], rx: int, ry: int, cell: Cell) -> None:
    """Paint every cell the ellipse outline passes through."""
    cx, cy = grid.check_point(center)
    if _degenerate(rx, ry):
        return
    grid.checkpoint()

    for j in range(grid.height):
        for i in range(grid.width):
            if on_ellipse(i, j, cx, cy, rx, ry):
                grid.paint(i, j, cell)

    finish_stroke(grid, cell)


def fill_ellipse(grid: Grid, center: tuple[int, int], rx: int, ry: int, cell: Cell) -> None:
    """Fill an ellipse with the same mirrored half-scan as ``fill_circle``."""
    cx, cy = grid.check_point(center)
    if _degenerate(rx, ry):
        return
    grid.checkpoint()

    for i in range(cx + 1):
        for j in range(grid.height):
            if on_ellipse(i, j, cx, cy, rx, ry):
                for k in range(i, min(2 * cx - i, grid.width - 1) + 1):
                    grid.paint(k, j, cell)

    finish_stroke(grid, cell)
