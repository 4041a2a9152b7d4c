"""Integer grid points and the segment arithmetic used by area fill."""

from __future__ import annotations

import math
from typing import NamedTuple


class Point(NamedTuple):
    """A grid coordinate. Tuple ordering compares x, then y."""
    x: int
    y: int


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def cross(origin: Point, a: Point, b: Point) -> int:
    """Z component of (a - origin) x (b - origin)."""
    return (a.x - origin.x) * (b.y - origin.y) - (a.y - origin.y) * (b.x - origin.x)


def on_segment(p: Point, start: Point, end: Point) -> bool:
    """Whether ``p`` lies on the closed segment ``start``-``end``."""
    if cross(start, end, p) != 0:
        return False
    return (
        min(start.x, end.x) <= p.x <= max(start.x, end.x)
        and min(start.y, end.y) <= p.y <= max(start.y, end.y)
    )


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """
    Exact test for whether closed segments p1-p2 and p3-p4 share a point.

    Solves ``t*(p1-p2) + s*(p4-p3) = p4-p2`` by Cramer's rule and checks
    both parameters lie in [0, 1] without dividing. When the determinant
    vanishes the segments are parallel or degenerate, and they meet only
    if they lie on one line with overlapping parameter ranges.
    """
    a = p1.x - p2.x
    b = p4.x - p3.x
    c = p1.y - p2.y
    d = p4.y - p3.y
    e = p4.x - p2.x
    f = p4.y - p2.y
    det = a * d - b * c

    if det != 0:
        t = d * e - b * f
        s = a * f - c * e
        if det > 0:
            return 0 <= t <= det and 0 <= s <= det
        return det <= t <= 0 and det <= s <= 0

    first_is_point = p1 == p2
    second_is_point = p3 == p4
    if first_is_point and second_is_point:
        return p1 == p3
    if first_is_point:
        return on_segment(p1, p3, p4)
    if second_is_point:
        return on_segment(p3, p1, p2)

    # Parallel: distinct lines never meet
    if cross(p1, p2, p3) != 0:
        return False

    # Collinear: overlap of the projections onto the dominant axis
    if abs(a) >= abs(c):
        lo1, hi1 = sorted((p1.x, p2.x))
        lo2, hi2 = sorted((p3.x, p4.x))
    else:
        lo1, hi1 = sorted((p1.y, p2.y))
        lo2, hi2 = sorted((p3.y, p4.y))
    return max(lo1, lo2) <= min(hi1, hi2)
