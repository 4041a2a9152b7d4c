"""Core data structures: cells, colors, the grid and its undo history."""

from termiart.core.cell import Cell, CellStatus
from termiart.core.color import Color
from termiart.core.geometry import Point
from termiart.core.boundary import BoundarySet
from termiart.core.history import Snapshot, SnapshotStore
from termiart.core.grid import Grid

__all__ = [
    "Cell",
    "CellStatus",
    "Color",
    "Point",
    "BoundarySet",
    "Snapshot",
    "SnapshotStore",
    "Grid",
]
