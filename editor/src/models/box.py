"""Box projection and shadow construction.

The box is an axis-aligned front rectangle spanned by two corners. Its back
face is the front face pulled a fixed fraction of the way towards the
vanishing point. The shadow is the hull of the four points where light rays
(through the top edge points) meet ground rays (from the light drop through
the bottom edge points), together with the box footprint.

Vertex order (front and back faces alike):
    0: corner1
    1: (corner1.x, corner2.y)
    2: corner2
    3: (corner2.x, corner1.y)
Indices 1 and 2 form the top, 0 and 3 the bottom.
"""
import logging
from dataclasses import dataclass
from typing import Tuple

from constants import DEFAULT_DEPTH_FACTOR, VANISHING_RAY_STOP_AT_VP
from models.geometry import Point, Line
from utils.convex_hull import convex_hull

logger = logging.getLogger(__name__)

# (face, index) pairs for the four vertical box edges
_TOP_EDGE_POINTS = (('front', 1), ('back', 1), ('back', 2), ('front', 2))
_BOTTOM_EDGE_POINTS = (('front', 0), ('back', 0), ('back', 3), ('front', 3))


def _closed_loop(points):
    return tuple(Line(points[i], points[(i + 1) % len(points)], True, True)
                 for i in range(len(points)))


@dataclass(frozen=True)
class BoxGeometry:
    """Everything derived from a box, a vanishing point and a light."""
    vanishing_point: Point
    front: Tuple[Point, ...]
    back: Tuple[Point, ...]
    top: Tuple[Point, ...]
    bottom: Tuple[Point, ...]
    light_lines: Tuple[Line, ...]
    light_drop_lines: Tuple[Line, ...]
    shadow: Tuple[Point, ...]
    shadow_polygon: Tuple[Point, ...]

    @property
    def footprint(self) -> Tuple[Point, ...]:
        """Ground rectangle under the box (the bottom points, in loop order)."""
        return self.bottom

    @property
    def vanishing_lines(self) -> Tuple[Line, ...]:
        return tuple(Line(self.vanishing_point, p, VANISHING_RAY_STOP_AT_VP, True)
                     for p in self.front)

    @property
    def front_lines(self) -> Tuple[Line, ...]:
        return _closed_loop(self.front)

    @property
    def back_lines(self) -> Tuple[Line, ...]:
        return _closed_loop(self.back)

    @property
    def connector_lines(self) -> Tuple[Line, ...]:
        return tuple(Line(f, b, True, True) for f, b in zip(self.front, self.back))

    def wireframe(self) -> Tuple[Line, ...]:
        """Box edges in drawing order: front quad, back quad, connectors."""
        return self.front_lines + self.back_lines + self.connector_lines


@dataclass(frozen=True)
class Box:
    """Box defined by two opposite front corners.

    depth_factor: how far the back face is pulled towards the vanishing
    point, as a fraction of each front vertex's distance to it.
    """
    corner1: Point
    corner2: Point
    depth_factor: float = DEFAULT_DEPTH_FACTOR

    def front_points(self) -> Tuple[Point, ...]:
        return (
            self.corner1,
            Point(self.corner1.x, self.corner2.y),
            self.corner2,
            Point(self.corner2.x, self.corner1.y),
        )

    def back_points(self, vanishing_point: Point) -> Tuple[Point, ...]:
        return tuple(p.plus(vanishing_point.vector_from(p).times(self.depth_factor))
                     for p in self.front_points())

    def project(self, vanishing_point: Point, light: Point, light_drop: Point) -> BoxGeometry:
        """Compute wireframe vertices and the cast shadow.

        Raises:
            ParallelLinesError: a light ray and its ground ray never meet
        """
        faces = {
            'front': self.front_points(),
            'back': self.back_points(vanishing_point),
        }
        top = tuple(faces[face][i] for face, i in _TOP_EDGE_POINTS)
        bottom = tuple(faces[face][i] for face, i in _BOTTOM_EDGE_POINTS)

        light_lines = []
        light_drop_lines = []
        shadow = []
        for top_point, bottom_point in zip(top, bottom):
            light_line = Line(light, top_point, True, False)
            light_drop_line = Line(light_drop, bottom_point, True, False)
            light_lines.append(light_line)
            light_drop_lines.append(light_drop_line)
            shadow.append(light_line.intersect_with(light_drop_line))

        shadow_polygon = convex_hull(shadow + list(bottom))
        logger.debug("Projected box %s -> shadow %s", self, shadow_polygon)

        return BoxGeometry(
            vanishing_point=vanishing_point,
            front=faces['front'],
            back=faces['back'],
            top=top,
            bottom=bottom,
            light_lines=tuple(light_lines),
            light_drop_lines=tuple(light_drop_lines),
            shadow=tuple(shadow),
            shadow_polygon=tuple(shadow_polygon),
        )
