"""Boundary segments that define the polygon used by area fill."""

from __future__ import annotations

from typing import Iterator, NamedTuple

from termiart.core.geometry import Point, cross, segments_intersect


class Segment(NamedTuple):
    """A boundary segment stored with its smaller endpoint first."""
    start: Point
    end: Point

    @classmethod
    def canonical(cls, a: Point, b: Point) -> Segment:
        a, b = Point(*a), Point(*b)
        return cls(a, b) if a <= b else cls(b, a)


class BoundarySet:
    """
    Every segment drawn as a boundary, independent of the pixels.

    Segments are unordered pairs: drawing a->b and later b->a stores one
    entry.
    """

    def __init__(self) -> None:
        self._segments: set[Segment] = set()

    def add(self, start: Point, end: Point) -> Segment:
        segment = Segment.canonical(start, end)
        self._segments.add(segment)
        return segment

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return Segment.canonical(*pair) in self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(sorted(self._segments))

    def crossings(self, a: Point, b: Point) -> int:
        """
        Count boundary segments crossed walking from ``a`` to ``b``.

        A segment counts when it meets a-b and its endpoints fall on
        different sides of the line through a and b, with points on the
        line grouped with the negative side. Two segments joined at a
        vertex on the path therefore count once when the path passes
        through the polygon and zero or two times when it only grazes it.
        """
        a, b = Point(*a), Point(*b)
        count = 0
        for segment in self._segments:
            above_start = cross(a, b, segment.start) > 0
            above_end = cross(a, b, segment.end) > 0
            if above_start == above_end:
                continue
            if segments_intersect(segment.start, segment.end, a, b):
                count += 1
        return count

    def same_region(self, a: Point, b: Point) -> bool:
        """Even-odd test: ``a`` and ``b`` are separated by no net boundary."""
        return self.crossings(a, b) % 2 == 0
