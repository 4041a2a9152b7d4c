"""
termiart: character-grid drawing engine

A persistent 2D grid of colored cells with point edits, line, circle and
ellipse rasterisation, boundary-based area fill, snapshot undo and a
versioned binary file format.

Quick Start:
    >>> import termiart
    >>> grid = termiart.Grid(10, 10)
    >>> termiart.draw_line(grid, (0, 0), (9, 9), termiart.Cell(bg=termiart.Color.RED))
    >>> grid.save("drawing.tart")
    >>> for row, text in termiart.load("drawing.tart").flush_dirty_rows():
    ...     print(text)
"""

__version__ = "0.1.0"

# Core types
from termiart.core.cell import Cell, CellStatus, PREVIEW_CELL
from termiart.core.color import Color
from termiart.core.geometry import Point
from termiart.core.grid import Grid
from termiart.core.errors import (
    GridError,
    OutOfBounds,
    VersionMismatch,
    InvalidGeometry,
    CorruptFile,
    GlyphError,
    suppress_out_of_bounds,
)

# Drawing
from termiart.raster import (
    draw_line,
    draw_boundary_line,
    preview_rect,
    draw_circle,
    fill_circle,
    draw_ellipse,
    fill_ellipse,
    fill_area,
)

# Convenience functions
from termiart.io.reader import load
from termiart.io.writer import save

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "CellStatus",
    "PREVIEW_CELL",
    "Color",
    "Point",
    "Grid",
    # Errors
    "GridError",
    "OutOfBounds",
    "VersionMismatch",
    "InvalidGeometry",
    "CorruptFile",
    "GlyphError",
    "suppress_out_of_bounds",
    # Drawing
    "draw_line",
    "draw_boundary_line",
    "preview_rect",
    "draw_circle",
    "fill_circle",
    "draw_ellipse",
    "fill_ellipse",
    "fill_area",
    # I/O
    "load",
    "save",
]
