"""Convex hull of a small point set (gift wrapping).

Hull vertices come back counter-clockwise on screen (Y-down), starting at
the left-most input point.

Orientation is evaluated exactly: coordinates are converted to Fractions
(exact for ints and floats), so the zero test in `is_on_left_of` never
depends on rounding in the cross product.
"""
from fractions import Fraction
from typing import List, Optional, Sequence

from models.geometry import Point, DegenerateHullError


class HullConvergenceError(RuntimeError):
    """Gift wrapping failed to return to its starting point."""


def _turn(p1: Point, p2: Point, p: Point) -> Fraction:
    """Exact cross product of (p2 - p1) and (p - p1)."""
    ax, ay = Fraction(p2.x) - Fraction(p1.x), Fraction(p2.y) - Fraction(p1.y)
    bx, by = Fraction(p.x) - Fraction(p1.x), Fraction(p.y) - Fraction(p1.y)
    return ax * by - ay * bx


def _dot(p1: Point, p2: Point, p: Point) -> Fraction:
    """Exact dot product of (p2 - p1) and (p - p1)."""
    ax, ay = Fraction(p2.x) - Fraction(p1.x), Fraction(p2.y) - Fraction(p1.y)
    bx, by = Fraction(p.x) - Fraction(p1.x), Fraction(p.y) - Fraction(p1.y)
    return ax * bx + ay * by


def is_on_left_of(p1: Point, p2: Point, p: Point) -> bool:
    """True if p lies strictly left of the directed line p1 -> p2.

    A point coinciding with either end of the line is never left of it.
    """
    if p1 == p2 or p == p1 or p == p2:
        return False
    return _turn(p1, p2, p) > 0


def _next_vertex(s: List[Point], p: int, prev: Optional[int]) -> Optional[int]:
    """Nearest point q such that no point lies strictly left of s[p] -> s[q].

    Points straight back along the edge we arrived on are skipped. Returns
    None when nothing is left to wrap to.
    """
    best = None
    best_dist = None
    for q in range(len(s)):
        if q == p:
            continue
        if prev is not None and _turn(s[prev], s[p], s[q]) == 0 and _dot(s[p], s[prev], s[q]) > 0:
            continue
        if any(is_on_left_of(s[p], s[q], r) for r in s):
            continue
        dist = _dot(s[p], s[q], s[q])
        if best is None or dist < best_dist:
            best, best_dist = q, dist
    return best


def convex_hull(points: Sequence[Point]) -> List[Point]:
    """Hull boundary of `points`.

    Repeated points are wrapped once, at their first position. Points on a
    straight run of the boundary are kept as vertices. When fewer than three
    distinct points remain the result is that point or segment.

    Args:
        points: At least three points, in any order

    Returns:
        Hull vertices, starting at the left-most point (first one wins ties)

    Raises:
        DegenerateHullError: fewer than three points
        HullConvergenceError: the wrap did not close within len(points) + 1 steps
    """
    if len(points) < 3:
        raise DegenerateHullError(f"Convex hull needs at least three points, got {len(points)}")

    s = list(dict.fromkeys(points))

    # Start with left-most point
    start = 0
    for i in range(1, len(s)):
        if s[i].x < s[start].x:
            start = i

    hull = []
    prev, p = None, start
    for _ in range(len(s) + 1):
        hull.append(s[p])
        q = _next_vertex(s, p, prev)
        if q is None or q == start:
            return hull
        prev, p = p, q

    raise HullConvergenceError(
        f"Gift wrapping did not close after {len(s) + 1} steps over {len(s)} points"
    )
