"""Tests for cells, colors and the grid (no files needed)."""

import pytest

from termiart.core.cell import PREVIEW_CELL, Cell, CellStatus
from termiart.core.color import Color
from termiart.core.errors import GlyphError, InvalidGeometry, OutOfBounds, suppress_out_of_bounds
from termiart.core.grid import Grid

from helpers import BLUE, GREEN, RED, copy_of, painted


class TestColor:
    """Tests for Color."""

    def test_palette_constants(self) -> None:
        assert Color.WHITE.rgb == (255, 255, 255)
        assert Color.BLACK.rgb == (0, 0, 0)
        assert Color.RED.rgb == (255, 0, 0)
        assert Color.GREEN.rgb == (0, 255, 0)
        assert Color.BLUE.rgb == (0, 0, 255)

    def test_constants_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Color.RED.r = 0  # type: ignore[misc]

    def test_reverse(self) -> None:
        assert Color(10, 20, 30).reverse() == Color(245, 235, 225)

    def test_from_rgb_validates(self) -> None:
        assert Color.from_rgb(1, 2, 3) == Color(1, 2, 3)
        with pytest.raises(ValueError):
            Color.from_rgb(256, 0, 0)

    def test_from_hex(self) -> None:
        assert Color.from_hex("#ff8000") == Color(255, 128, 0)
        assert Color.from_hex("00ff00") == Color.GREEN
        with pytest.raises(ValueError):
            Color.from_hex("#zzzzzz")
        with pytest.raises(ValueError):
            Color.from_hex("#fff")

    def test_sgr(self) -> None:
        assert Color.RED.to_sgr_fg() == "38;2;255;0;0"
        assert Color.BLUE.to_sgr_bg() == "48;2;0;0;255"


class TestCell:
    """Tests for Cell and its assignment rule."""

    def test_zero_value(self) -> None:
        cell = Cell()
        assert cell.bg == Color.WHITE
        assert cell.fg == Color.BLACK
        assert cell.glyph == "  "
        assert cell.status is CellStatus.PLAIN

    def test_short_glyph_is_padded(self) -> None:
        assert Cell(glyph="x").glyph == "x "

    def test_long_glyph_rejected(self) -> None:
        with pytest.raises(ValueError):
            Cell(glyph="abc")

    def test_glyph_without_cp437_encoding_rejected(self) -> None:
        with pytest.raises(GlyphError):
            Cell(glyph="€")

    def test_cp437_glyphs_accepted(self) -> None:
        assert Cell(glyph="▀█").glyph == "▀█"

    def test_plain_replaces_plain(self) -> None:
        assert RED.assign_onto(BLUE) == RED

    def test_preview_source_only_tags(self) -> None:
        result = PREVIEW_CELL.assign_onto(RED)
        assert result.status is CellStatus.PREVIEW
        assert result.bg == Color.RED

    def test_preview_destination_is_sticky(self) -> None:
        overlay = RED.with_status(CellStatus.PREVIEW)
        assert BLUE.assign_onto(overlay) is overlay


class TestGridBasics:
    """Construction and read access."""

    def test_blank_grid(self) -> None:
        grid = Grid(4, 3, Color.BLUE)
        assert grid.dimensions() == (4, 3)
        assert all(cell == Cell(bg=Color.BLUE) for _, _, cell in grid.cells())
        assert grid.dirty_rows == {0, 1, 2}

    def test_invalid_dimensions(self) -> None:
        with pytest.raises(InvalidGeometry):
            Grid(0, 5)

    def test_from_cells_checks_length(self) -> None:
        with pytest.raises(ValueError):
            Grid.from_cells(2, 2, [Cell()] * 3)

    def test_cell_at_out_of_bounds(self, blank_grid: Grid) -> None:
        with pytest.raises(OutOfBounds):
            blank_grid.cell_at(10, 0)
        with pytest.raises(IndexError):
            blank_grid.cell_at(0, -1)

    def test_indexing(self, blank_grid: Grid) -> None:
        blank_grid.point(RED, (3, 4))
        assert blank_grid[3, 4] == RED


class TestPoint:
    """Single-cell edits."""

    def test_point_sets_cell_and_dirty_row(self, blank_grid: Grid) -> None:
        blank_grid.point(RED, (2, 7))
        assert blank_grid.cell_at(2, 7) == RED
        assert blank_grid.dirty_rows == {7}

    def test_point_out_of_bounds(self, blank_grid: Grid) -> None:
        with pytest.raises(OutOfBounds):
            blank_grid.point(RED, (10, 0))
        assert blank_grid.undo_depth == 0

    def test_suppress_out_of_bounds(self, blank_grid: Grid) -> None:
        with suppress_out_of_bounds():
            blank_grid.point(RED, (-1, 3))
        assert painted(blank_grid, Color.RED) == set()

    def test_point_onto_preview_is_rejected(self, blank_grid: Grid) -> None:
        blank_grid.point(PREVIEW_CELL, (1, 1))
        blank_grid.point(RED, (1, 1))
        cell = blank_grid.cell_at(1, 1)
        assert cell.status is CellStatus.PREVIEW
        assert cell.bg == Color.WHITE


class TestFillRect:
    """Rectangle fills."""

    def test_corners_in_any_order(self, blank_grid: Grid) -> None:
        blank_grid.fill_rect((3, 1), (1, 2), GREEN)
        expected = {(x, y) for x in range(1, 4) for y in range(1, 3)}
        assert painted(blank_grid, Color.GREEN) == expected
        assert blank_grid.dirty_rows == {1, 2}

    def test_single_snapshot(self, blank_grid: Grid) -> None:
        blank_grid.fill_rect((0, 0), (9, 9), GREEN)
        assert blank_grid.undo_depth == 1

    def test_out_of_bounds_corner(self, blank_grid: Grid) -> None:
        with pytest.raises(OutOfBounds):
            blank_grid.fill_rect((0, 0), (10, 3), GREEN)


class TestResize:
    """Resizing keeps the overlapping top-left rectangle."""

    def test_grow_uses_zero_value_cells(self) -> None:
        grid = Grid(3, 2, Color.BLUE)
        grid.resize(4, 3)
        assert grid.dimensions() == (4, 3)
        assert grid.cell_at(2, 1) == Cell(bg=Color.BLUE)
        assert grid.cell_at(3, 0) == Cell()
        assert grid.cell_at(0, 2) == Cell()
        assert grid.dirty_rows == {0, 1, 2}

    def test_shrink(self, blank_grid: Grid) -> None:
        blank_grid.point(RED, (1, 1))
        blank_grid.point(BLUE, (5, 5))
        blank_grid.resize(3, 2)
        assert blank_grid.dimensions() == (3, 2)
        assert blank_grid.cell_at(1, 1) == RED
        assert blank_grid.dirty_rows == {0, 1}

    def test_invalid_size(self, blank_grid: Grid) -> None:
        with pytest.raises(InvalidGeometry):
            blank_grid.resize(0, 3)


class TestUndo:
    """Snapshot-based undo."""

    def test_undo_single_edit(self, blank_grid: Grid) -> None:
        before = copy_of(blank_grid)
        blank_grid.fill_rect((2, 2), (5, 5), RED)
        blank_grid.undo()
        assert blank_grid == before

    def test_undo_resize(self, blank_grid: Grid) -> None:
        blank_grid.point(RED, (9, 9))
        before = copy_of(blank_grid)
        blank_grid.resize(4, 12)
        blank_grid.undo(1)
        assert blank_grid.dimensions() == (10, 10)
        assert blank_grid == before

    def test_undo_several(self, blank_grid: Grid) -> None:
        blank_grid.point(RED, (0, 0))
        after_first = copy_of(blank_grid)
        blank_grid.point(GREEN, (1, 0))
        blank_grid.point(BLUE, (2, 0))
        blank_grid.undo(2)
        assert blank_grid == after_first
        assert blank_grid.undo_depth == 1

    def test_undo_more_than_available(self, blank_grid: Grid) -> None:
        before = copy_of(blank_grid)
        blank_grid.point(RED, (0, 0))
        blank_grid.point(GREEN, (1, 0))
        blank_grid.undo(5)
        assert blank_grid == before
        assert blank_grid.undo_depth == 0

    def test_undo_with_empty_history_marks_rows_dirty(self, blank_grid: Grid) -> None:
        assert blank_grid.dirty_rows == frozenset()
        blank_grid.undo()
        assert blank_grid.dirty_rows == set(range(10))

    def test_bounded_history(self) -> None:
        grid = Grid(3, 3, max_undo=2)
        assert grid.undo_depth == 0
        grid.point(RED, (0, 0))
        after_first = copy_of(grid)
        grid.point(GREEN, (1, 0))
        grid.point(BLUE, (2, 0))
        assert grid.undo_depth == 2
        grid.undo(5)
        assert grid == after_first


class TestFlush:
    """Dirty-row rendering and the preview revert pass."""

    def test_flush_returns_sorted_dirty_rows(self, blank_grid: Grid) -> None:
        blank_grid.point(RED, (0, 6))
        blank_grid.point(RED, (0, 2))
        rows = blank_grid.flush_dirty_rows()
        assert [row for row, _ in rows] == [2, 6]
        assert blank_grid.dirty_rows == frozenset()
        assert blank_grid.flush_dirty_rows() == []

    def test_rendered_row_content(self, blank_grid: Grid) -> None:
        blank_grid.point(Cell(bg=Color.RED, fg=Color.GREEN, glyph="ab"), (0, 0))
        blank_grid.mark_boundary(1, 0)
        blank_grid.point(PREVIEW_CELL, (2, 0))
        [(row, text)] = blank_grid.flush_dirty_rows()
        assert row == 0
        assert text.startswith("\x1b[48;2;255;0;0;38;2;0;255;0mab")
        assert "::" in text
        assert "##" in text
        assert text.endswith("\x1b[0m")

    def test_preview_reverts_after_flush(self, blank_grid: Grid) -> None:
        blank_grid.point(RED, (4, 4))
        blank_grid.point(PREVIEW_CELL, (4, 4))
        blank_grid.flush_dirty_rows()
        assert blank_grid.cell_at(4, 4) == RED
        # The reverted row is redrawn on the next flush
        assert blank_grid.dirty_rows == {4}

    def test_mark_row_dirty(self, blank_grid: Grid) -> None:
        blank_grid.mark_row_dirty(3)
        blank_grid.mark_row_dirty(42)
        assert blank_grid.dirty_rows == {3}
        assert blank_grid.undo_depth == 0
