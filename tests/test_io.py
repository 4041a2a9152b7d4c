"""Tests for saving and loading grid files."""

import struct
from pathlib import Path

import pytest

import termiart
from termiart.codec.cp437 import encode_glyph
from termiart.core.cell import Cell, CellStatus
from termiart.core.color import Color
from termiart.core.constants import FORMAT_TAG
from termiart.core.errors import CorruptFile, GlyphError, VersionMismatch
from termiart.core.grid import Grid
from termiart.io.reader import read_header
from termiart.io.writer import to_bytes
from termiart.raster import draw_boundary_line, draw_line

from helpers import RED, painted


class TestFormat:
    """Tests for the binary layout."""

    def test_layout(self) -> None:
        grid = Grid(2, 1)
        grid.point(Cell(bg=Color(1, 2, 3), fg=Color(4, 5, 6), glyph="ab"), (1, 0))
        data = to_bytes(grid)
        header = FORMAT_TAG.encode() + b"\0" + struct.pack("=II", 2, 1)
        assert data.startswith(header)
        records = data[len(header):]
        assert records == bytes([255, 255, 255, 0, 0, 0]) + b"  " + bytes([1, 2, 3, 4, 5, 6]) + b"ab"

    def test_read_header(self, tmp_grid_path: Path) -> None:
        Grid(7, 3).save(tmp_grid_path)
        header = read_header(tmp_grid_path)
        assert header.format_tag == FORMAT_TAG
        assert (header.width, header.height) == (7, 3)


class TestRoundTrip:
    """save followed by load."""

    def test_diagonal_line(self, tmp_grid_path: Path) -> None:
        grid = Grid(10, 10)
        draw_line(grid, (0, 0), (9, 9), RED)
        grid.save(tmp_grid_path)

        loaded = Grid.load(tmp_grid_path)
        assert loaded == grid
        assert painted(loaded, Color.RED) == {(i, i) for i in range(10)}
        assert len(painted(loaded, Color.WHITE)) == 90

    def test_glyphs_and_colors(self, tmp_grid_path: Path) -> None:
        grid = Grid(3, 2, Color.BLUE)
        grid.point(Cell(bg=Color.BLACK, fg=Color.GREEN, glyph="é"), (0, 0))
        grid.point(Cell(bg=Color(9, 8, 7), fg=Color(1, 1, 1), glyph="▀█"), (2, 1))
        termiart.save(grid, tmp_grid_path)

        loaded = termiart.load(tmp_grid_path)
        assert loaded == grid
        assert loaded.cell_at(0, 0).glyph == "é "

    def test_loaded_grid_is_fresh(self, tmp_grid_path: Path) -> None:
        Grid(4, 4).save(tmp_grid_path)
        loaded = Grid.load(tmp_grid_path)
        assert loaded.dirty_rows == {0, 1, 2, 3}
        assert loaded.undo_depth == 0

    def test_boundaries_are_not_stored(self, tmp_grid_path: Path) -> None:
        grid = Grid(5, 5)
        draw_boundary_line(grid, (0, 2), (4, 2))
        grid.save(tmp_grid_path)

        loaded = Grid.load(tmp_grid_path)
        assert len(loaded.boundaries) == 0
        assert loaded.cell_at(1, 2).status is CellStatus.PLAIN
        assert loaded != grid


class TestErrors:
    """Failure modes of load and save."""

    def test_version_mismatch(self, tmp_grid_path: Path) -> None:
        data = to_bytes(Grid(2, 2))
        tmp_grid_path.write_bytes(b"v9.9.9" + data[len(FORMAT_TAG):])
        with pytest.raises(VersionMismatch) as info:
            Grid.load(tmp_grid_path)
        assert info.value.found == "v9.9.9"
        assert info.value.expected == FORMAT_TAG

    def test_truncated_records(self, tmp_grid_path: Path) -> None:
        tmp_grid_path.write_bytes(to_bytes(Grid(3, 3))[:-5])
        with pytest.raises(CorruptFile):
            Grid.load(tmp_grid_path)

    def test_missing_terminator(self, tmp_grid_path: Path) -> None:
        tmp_grid_path.write_bytes(b"v0.1.0")
        with pytest.raises(CorruptFile):
            Grid.load(tmp_grid_path)

    def test_truncated_header(self, tmp_grid_path: Path) -> None:
        tmp_grid_path.write_bytes(FORMAT_TAG.encode() + b"\0\x01\x00")
        with pytest.raises(CorruptFile):
            Grid.load(tmp_grid_path)

    def test_unencodable_glyph(self) -> None:
        with pytest.raises(GlyphError):
            encode_glyph("€")
