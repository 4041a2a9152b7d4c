"""Grid - fixed-size 2D array of cells with dirty-row tracking and undo."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from termiart.core.boundary import BoundarySet
from termiart.core.cell import Cell, CellStatus
from termiart.core.color import Color
from termiart.core.errors import InvalidGeometry, OutOfBounds
from termiart.core.geometry import Point
from termiart.core.history import Snapshot, SnapshotStore

if TYPE_CHECKING:
    from termiart.render.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


class Grid:
    """
    A rectangular grid of Cells stored in row-major order.

    Every mutating operation pushes a full snapshot first, so ``undo``
    can step back through edits, resizes included. ``max_undo`` caps how
    many snapshots are kept. Rows whose rendered appearance changed are
    collected until ``flush_dirty_rows`` emits them.

    The boundary set used by area fill lives alongside the cells but is
    not part of any snapshot: undo and reload leave it untouched.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = Color.WHITE,
        *,
        max_undo: int | None = None,
    ) -> None:
        _check_dimensions(width, height)
        self._width = width
        self._height = height
        self._cells: list[Cell] = [Cell(bg=background)] * (width * height)
        self._dirty_rows: set[int] = set(range(height))
        self._history = SnapshotStore(max_undo)
        self.boundaries = BoundarySet()

    @classmethod
    def from_cells(
        cls,
        width: int,
        height: int,
        cells: list[Cell],
        *,
        max_undo: int | None = None,
    ) -> Grid:
        """Build a grid around existing row-major cell data."""
        _check_dimensions(width, height)
        if len(cells) != width * height:
            raise ValueError(f"Expected {width * height} cells, got {len(cells)}")
        grid = cls.__new__(cls)
        grid._width = width
        grid._height = height
        grid._cells = list(cells)
        grid._dirty_rows = set(range(height))
        grid._history = SnapshotStore(max_undo)
        grid.boundaries = BoundarySet()
        return grid

    @classmethod
    def load(cls, path: str | Path) -> Grid:
        """Load a grid file from disk."""
        from termiart.io.reader import load
        return load(path)

    def save(self, path: str | Path) -> None:
        """Save this grid to disk."""
        from termiart.io.writer import save
        save(self, path)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def dimensions(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def dirty_rows(self) -> frozenset[int]:
        return frozenset(self._dirty_rows)

    @property
    def undo_depth(self) -> int:
        """Number of snapshots currently available to undo."""
        return len(self._history)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def check_point(self, pos: tuple[int, int]) -> Point:
        """Return ``pos`` as a Point, raising OutOfBounds outside the grid."""
        x, y = pos
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self._width, self._height)
        return Point(x, y)

    def cell_at(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        self.check_point((x, y))
        return self._cells[y * self._width + x]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[x, y]."""
        x, y = pos
        return self.cell_at(x, y)

    def row(self, y: int) -> list[Cell]:
        start = y * self._width
        return self._cells[start:start + self._width]

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        for y in range(self._height):
            yield self.row(y)

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for i, cell in enumerate(self._cells):
            y, x = divmod(i, self._width)
            yield x, y, cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height}, dirty={len(self._dirty_rows)}, undo={len(self._history)})"

    # -------------------------------------------------------------------------
    # Low-level writes shared with the rasterisers
    # -------------------------------------------------------------------------

    def checkpoint(self) -> None:
        """Push a full copy of the current grid onto the undo stack."""
        self._history.push(Snapshot(tuple(self._cells), self._width, self._height))

    def paint(self, x: int, y: int, cell: Cell) -> None:
        """Write ``cell`` at an in-bounds position using assignment rules."""
        index = y * self._width + x
        self._cells[index] = cell.assign_onto(self._cells[index])
        self._dirty_rows.add(y)

    def mark_boundary(self, x: int, y: int) -> None:
        """Tag a cell as boundary, keeping its colors."""
        index = y * self._width + x
        current = self._cells[index]
        if current.status is not CellStatus.BOUNDARY:
            self._cells[index] = current.with_status(CellStatus.BOUNDARY)
            self._dirty_rows.add(y)

    def mark_row_dirty(self, row: int) -> None:
        """Request a redraw of ``row`` without changing any cell."""
        if 0 <= row < self._height:
            self._dirty_rows.add(row)

    def reset_preview(self) -> None:
        """Revert every PREVIEW cell to PLAIN, marking its row dirty."""
        for i, cell in enumerate(self._cells):
            if cell.status is CellStatus.PREVIEW:
                self._cells[i] = cell.with_status(CellStatus.PLAIN)
                self._dirty_rows.add(i // self._width)

    # -------------------------------------------------------------------------
    # Editing operations
    # -------------------------------------------------------------------------

    def point(self, cell: Cell, pos: tuple[int, int]) -> None:
        """Set a single cell."""
        x, y = self.check_point(pos)
        self.checkpoint()
        self.paint(x, y, cell)

    def fill_rect(self, p1: tuple[int, int], p2: tuple[int, int], cell: Cell) -> None:
        """Fill the inclusive rectangle spanned by two corners."""
        a = self.check_point(p1)
        b = self.check_point(p2)
        self.checkpoint()

        for y in range(min(a.y, b.y), max(a.y, b.y) + 1):
            for x in range(min(a.x, b.x), max(a.x, b.x) + 1):
                self.paint(x, y, cell)

    def resize(self, new_width: int, new_height: int) -> None:
        """
        Change dimensions, keeping the overlapping top-left rectangle.

        New cells are ``Cell()``, not the background the grid was created
        with.
        """
        _check_dimensions(new_width, new_height)
        self.checkpoint()

        cells = [Cell()] * (new_width * new_height)
        for y in range(min(self._height, new_height)):
            for x in range(min(self._width, new_width)):
                cells[y * new_width + x] = self._cells[y * self._width + x]

        logger.debug("Resized %dx%d -> %dx%d", self._width, self._height, new_width, new_height)
        self._install(cells, new_width, new_height)

    def undo(self, times: int = 1) -> None:
        """
        Step back ``times`` edits, or as many as exist.

        Every row is marked dirty even when there was nothing to undo.
        """
        snapshot = self._history.pop(times)
        if snapshot is not None:
            self._install(list(snapshot.cells), snapshot.width, snapshot.height)
        self._dirty_rows = set(range(self._height))

    def _install(self, cells: list[Cell], width: int, height: int) -> None:
        self._cells = cells
        self._width = width
        self._height = height
        self._dirty_rows = set(range(height))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def flush_dirty_rows(
        self, renderer: TerminalRenderer | None = None
    ) -> list[tuple[int, str]]:
        """
        Render every dirty row, in order, and clear the dirty set.

        Preview cells are reverted afterwards, so their rows come back
        dirty for the next flush.
        """
        if renderer is None:
            from termiart.render.terminal import TerminalRenderer
            renderer = TerminalRenderer()

        lines = [(y, renderer.render_row(self.row(y))) for y in sorted(self._dirty_rows)]
        self._dirty_rows.clear()
        self.reset_preview()
        return lines


def _check_dimensions(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise InvalidGeometry(f"Grid dimensions must be positive, got {width}x{height}")
