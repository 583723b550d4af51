"""Geometry primitives for the perspective scene.

Point and Vector are immutable coordinate pairs in scene pixels (Y-down).
Line joins two points; its stop flags only decide how far it is drawn,
intersection always treats it as an infinite line.
"""
import math
from dataclasses import dataclass


class GeometryError(Exception):
    """Base class for unsupported or degenerate geometric configurations."""


class ParallelLinesError(GeometryError):
    """Two lines have collinear directions and never meet in a single point."""


class DegenerateHullError(GeometryError):
    """Convex hull requested for fewer than three points."""


@dataclass(frozen=True)
class Vector:
    """2D displacement."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: dx, dy = vector"""
        return iter((self.x, self.y))

    def times(self, m: float) -> 'Vector':
        return Vector(self.x * m, self.y * m)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def cross(self, other: 'Vector') -> float:
        """Z component of the 2D cross product (self x other)."""
        return self.x * other.y - other.x * self.y


@dataclass(frozen=True)
class Point:
    """Position in scene coordinates."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))

    def vector_from(self, other: 'Point') -> Vector:
        """Displacement that takes `other` to this point."""
        return Vector(self.x - other.x, self.y - other.y)

    def plus(self, v: Vector) -> 'Point':
        return Point(self.x + v.x, self.y + v.y)

    def minus(self, v: Vector) -> 'Point':
        return Point(self.x - v.x, self.y - v.y)

    def distance_to(self, other: 'Point') -> float:
        return self.vector_from(other).length()


@dataclass(frozen=True)
class Line:
    """Segment or ray between two points.

    stop_at_begin / stop_at_end: when False the line keeps going past that
    end when drawn.
    """
    begin: Point
    end: Point
    stop_at_begin: bool = True
    stop_at_end: bool = True

    def direction(self) -> Vector:
        return self.end.vector_from(self.begin)

    def intersect_with(self, other: 'Line') -> Point:
        """Intersection of both lines taken as infinite lines.

        Raises:
            ParallelLinesError: directions are parallel or the lines coincide
        """
        tr = self.direction()
        o = other.direction()

        denom = tr.y * o.x - tr.x * o.y
        if denom == 0:
            raise ParallelLinesError(
                f"Lines are parallel: {self.begin}->{self.end} and {other.begin}->{other.end}"
            )

        t = ((self.begin.x - other.begin.x) * o.y - (self.begin.y - other.begin.y) * o.x) / denom
        return self.begin.plus(tr.times(t))

    def draw_extent(self, length: float):
        """Endpoints to draw, with open ends pushed out by `length` pixels.

        Returns:
            (Point, Point), or None for a zero-length line (nothing to draw)
        """
        r = self.direction()
        r_length = r.length()
        if r_length == 0:
            return None
        large = r.times(length / r_length)

        p1 = self.begin if self.stop_at_begin else self.begin.minus(large)
        p2 = self.end if self.stop_at_end else self.end.plus(large)
        return p1, p2
