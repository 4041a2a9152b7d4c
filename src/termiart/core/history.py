"""Snapshot stack behind undo."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from termiart.core.cell import Cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Full copy of a grid's cells and dimensions."""
    cells: tuple[Cell, ...]
    width: int
    height: int


class SnapshotStore:
    """
    Ordered stack of snapshots, most recent last.

    Unbounded unless ``max_depth`` is given, in which case the oldest
    snapshots are dropped as new ones arrive.
    """

    def __init__(self, max_depth: int | None = None):
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self._snapshots: deque[Snapshot] = deque(maxlen=max_depth)

    def push(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)

    def pop(self, times: int = 1) -> Snapshot | None:
        """
        Discard the most recent ``times`` snapshots and return the last
        one discarded, or None if nothing was popped.

        Pops as many as are available when fewer than ``times`` exist.
        """
        popped: Snapshot | None = None
        count = 0
        while count < times and self._snapshots:
            popped = self._snapshots.pop()
            count += 1
        if count:
            logger.debug("Popped %d snapshot(s), %d remain", count, len(self._snapshots))
        return popped

    def __len__(self) -> int:
        return len(self._snapshots)
