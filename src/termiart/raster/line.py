"""Parametric line stepping."""

from __future__ import annotations

from typing import Iterator

from termiart.core.cell import PREVIEW_CELL, Cell
from termiart.core.errors import InvalidGeometry
from termiart.core.geometry import Point, round_half_away
from termiart.core.grid import Grid


def sample_segment(start: Point, end: Point, steps: int) -> Iterator[Point]:
    """
    Yield ``start + t*(end - start)`` rounded to the nearest cell for
    ``t = 0, 1/steps, ..., 1``.

    Sampling far more densely than the pixel span leaves no gaps on
    diagonals; repeated points are yielded as-is.
    """
    if steps < 1:
        raise InvalidGeometry(f"steps must be at least 1, got {steps}")
    dx = end.x - start.x
    dy = end.y - start.y
    for k in range(steps + 1):
        t = k / steps
        yield Point(round_half_away(start.x + t * dx), round_half_away(start.y + t * dy))


def finish_stroke(grid: Grid, cell: Cell) -> None:
    """Clear stale preview cells after a committing draw."""
    if not cell.is_preview:
        grid.reset_preview()


def draw_line(
    grid: Grid,
    start: tuple[int, int],
    end: tuple[int, int],
    cell: Cell,
    steps: int = 1000,
) -> None:
    """Draw a straight line of ``cell`` from start to end inclusive."""
    a = grid.check_point(start)
    b = grid.check_point(end)
    grid.checkpoint()

    for p in sample_segment(a, b, steps):
        grid.paint(p.x, p.y, cell)

    finish_stroke(grid, cell)


def draw_boundary_line(
    grid: Grid,
    start: tuple[int, int],
    end: tuple[int, int],
    fineness: int = 100,
) -> None:
    """
    Mark the cells along start-end as boundary and record the segment
    for area fill. Colors are left as they are.
    """
    a = grid.check_point(start)
    b = grid.check_point(end)
    grid.checkpoint()

    for p in sample_segment(a, b, fineness):
        grid.mark_boundary(p.x, p.y)

    grid.boundaries.add(a, b)


def preview_rect(grid: Grid, corner: tuple[int, int], opposite: tuple[int, int]) -> None:
    """Outline the rectangle between two corners as a preview overlay."""
    x1, y1 = grid.check_point(corner)
    x2, y2 = grid.check_point(opposite)
    draw_line(grid, (x1, y1), (x2, y1), PREVIEW_CELL)
    draw_line(grid, (x2, y1), (x2, y2), PREVIEW_CELL)
    draw_line(grid, (x2, y2), (x1, y2), PREVIEW_CELL)
    draw_line(grid, (x1, y2), (x1, y1), PREVIEW_CELL)
