"""Shared fixtures for grid tests."""

from pathlib import Path

import pytest

from termiart.core.grid import Grid


@pytest.fixture
def blank_grid() -> Grid:
    """A 10x10 white grid with its initial dirty rows already flushed."""
    grid = Grid(10, 10)
    grid.flush_dirty_rows()
    return grid


@pytest.fixture
def tmp_grid_path(tmp_path: Path) -> Path:
    return tmp_path / "drawing.tart"
