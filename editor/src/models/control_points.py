"""Draggable control points and their select/drag/release state.

ControlPoints is immutable. Every interaction returns a new value:

    cps = cps.select(mouse)      # grasp the first point under the mouse
    cps = cps.move_to(mouse)     # drag it, keeping the grasp offset
    cps = cps.deselect()         # let go

The light and its ground drop share an x coordinate: dragging one moves
the other horizontally.
"""
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from constants import (
    CONTROL_POINT_RADIUS, INITIAL_BOX_WIDTH, INITIAL_BOX_CORNER1_DROP,
    INITIAL_BOX_CORNER2_DROP, INITIAL_LIGHT_X_FRACTION, INITIAL_LIGHT_Y_FRACTION,
    INITIAL_LIGHT_DROP_Y_FRACTION
)
from models.geometry import Point, Vector

logger = logging.getLogger(__name__)


class ControlPointKind(IntEnum):
    """Role of a control point. Declaration order is the hit-test order."""
    VANISHING_POINT = 0
    BOX_POINT_1 = 1
    BOX_POINT_2 = 2
    LIGHT = 3
    LIGHT_DROP = 4


# Dragging one of these forces the other's x to match
_X_COUPLED = {
    ControlPointKind.LIGHT: ControlPointKind.LIGHT_DROP,
    ControlPointKind.LIGHT_DROP: ControlPointKind.LIGHT,
}


@dataclass(frozen=True)
class ControlPoint:
    """A named scene point that can be grabbed with the mouse."""
    kind: ControlPointKind
    position: Point

    RADIUS = CONTROL_POINT_RADIUS

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def is_clicked_on(self, p: Point) -> bool:
        return p.distance_to(self.position) <= self.RADIUS

    def moved_to(self, position: Point) -> 'ControlPoint':
        return ControlPoint(self.kind, position)


@dataclass(frozen=True)
class ControlPoints:
    """One control point per kind plus the current grab, if any.

    points: tuple indexed by ControlPointKind value
    selected: kind being dragged, or None
    delta: mouse position minus point position at grab time, or None
    """
    points: Tuple[ControlPoint, ...]
    selected: Optional[ControlPointKind] = None
    delta: Optional[Vector] = None

    def __post_init__(self):
        if len(self.points) != len(ControlPointKind):
            raise ValueError(f"Expected {len(ControlPointKind)} control points, got {len(self.points)}")
        for kind, cp in zip(ControlPointKind, self.points):
            if cp.kind is not kind:
                raise ValueError(f"Slot {kind.name} holds a {cp.kind!r} control point")
        if (self.selected is None) != (self.delta is None):
            raise ValueError("selected and delta must be set together")

    @classmethod
    def from_positions(cls, positions) -> 'ControlPoints':
        """Build an idle state from a {ControlPointKind: Point} mapping covering every kind."""
        return cls(tuple(ControlPoint(kind, positions[kind]) for kind in ControlPointKind))

    def __iter__(self):
        return iter(self.points)

    @property
    def is_dragging(self) -> bool:
        return self.selected is not None

    def get(self, kind: ControlPointKind) -> ControlPoint:
        if not isinstance(kind, ControlPointKind):
            raise KeyError(f"ControlPointKind {kind!r} not found")
        return self.points[kind]

    def select(self, p: Point) -> 'ControlPoints':
        """Grab the first control point under p, or go idle if there is none."""
        for cp in self.points:
            if cp.is_clicked_on(p):
                logger.debug("Selected %s at %s", cp.kind.name, cp.position)
                return ControlPoints(self.points, cp.kind, p.vector_from(cp.position))

        return ControlPoints(self.points)

    def move_to(self, p: Point) -> 'ControlPoints':
        """Drag the selected point so it keeps its grab offset from p."""
        if self.selected is None:
            return self

        new_position = p.minus(self.delta)
        points = list(self.points)
        points[self.selected] = points[self.selected].moved_to(new_position)

        coupled = _X_COUPLED.get(self.selected)
        if coupled is not None:
            other = points[coupled]
            points[coupled] = other.moved_to(Point(new_position.x, other.y))

        return ControlPoints(tuple(points), self.selected, self.delta)

    def deselect(self) -> 'ControlPoints':
        return ControlPoints(self.points)


def default_control_points(width: float, height: float) -> ControlPoints:
    """Starting layout for a viewport of the given size."""
    return ControlPoints.from_positions({
        ControlPointKind.VANISHING_POINT: Point(width / 2, height / 2),
        ControlPointKind.BOX_POINT_1: Point(width / 4, height / 2 + INITIAL_BOX_CORNER1_DROP),
        ControlPointKind.BOX_POINT_2: Point(width / 4 + INITIAL_BOX_WIDTH, height / 2 + INITIAL_BOX_CORNER2_DROP),
        ControlPointKind.LIGHT: Point(width * INITIAL_LIGHT_X_FRACTION, height * INITIAL_LIGHT_Y_FRACTION),
        ControlPointKind.LIGHT_DROP: Point(width * INITIAL_LIGHT_X_FRACTION, height * INITIAL_LIGHT_DROP_Y_FRACTION),
    })
