"""Scene snapshot: viewport size + control points resolved into a box and light.

A Config is never modified. Any input event builds a new one from the new
ControlPoints value, so derived geometry can't go stale.
"""
from constants import DEFAULT_DEPTH_FACTOR
from models.box import Box, BoxGeometry
from models.control_points import ControlPoints, ControlPointKind
from models.geometry import Point


class Config:
    """Resolved scene for one frame."""

    def __init__(self, width: float, height: float, control_points: ControlPoints,
                 depth_factor: float = DEFAULT_DEPTH_FACTOR):
        self._width = width
        self._height = height
        self._control_points = control_points
        self._vanishing_point = control_points.get(ControlPointKind.VANISHING_POINT).position
        self._box = Box(
            control_points.get(ControlPointKind.BOX_POINT_1).position,
            control_points.get(ControlPointKind.BOX_POINT_2).position,
            depth_factor,
        )
        self._light = control_points.get(ControlPointKind.LIGHT).position
        self._light_drop = control_points.get(ControlPointKind.LIGHT_DROP).position
        self._geometry = None

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def control_points(self) -> ControlPoints:
        return self._control_points

    @property
    def vanishing_point(self) -> Point:
        return self._vanishing_point

    @property
    def box(self) -> Box:
        return self._box

    @property
    def light(self) -> Point:
        return self._light

    @property
    def light_drop(self) -> Point:
        return self._light_drop

    def with_control_points(self, control_points: ControlPoints) -> 'Config':
        return Config(self._width, self._height, control_points, self._box.depth_factor)

    def resized(self, width: float, height: float) -> 'Config':
        """Same control points in a new viewport. Points are not rescaled."""
        return Config(width, height, self._control_points, self._box.depth_factor)

    def geometry(self) -> BoxGeometry:
        """Box wireframe and shadow for this snapshot.

        Raises:
            ParallelLinesError: the light sits where a shadow ray can't be cast
        """
        if self._geometry is None:
            self._geometry = self._box.project(self._vanishing_point, self._light, self._light_drop)
        return self._geometry
