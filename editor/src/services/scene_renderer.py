"""Scene Renderer Service.

Turns a Config into an ordered list of drawing primitives. Painters (the
interactive canvas, the headless PNG renderer) replay the list in order;
later primitives draw over earlier ones, which is how the footprint erase
punches the box's own base out of the shadow.

Frame order:
    background -> horizon -> control points -> shadow -> footprint erase
    -> vanishing point rays -> front quad -> back quad -> connectors
    -> light rays -> light drop rays
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from constants import (
    BACKGROUND_COLOR, SHADOW_COLOR, FILL_CROSS_HATCH, FILL_SOLID,
    STYLE_DARK, STYLE_LIGHT, STYLE_HIGHLIGHT,
    STROKE_WIDTH_NORMAL, STROKE_WIDTH_SELECTED, LINE_EXTENT
)
from models.config import Config
from models.geometry import Point, Line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RectPrimitive:
    """Solid axis-aligned rectangle (background clear)."""
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class LinePrimitive:
    """Stroked segment. sketchy: draw with the hand-drawn stroke."""
    begin: Point
    end: Point
    style: str
    width: float = STROKE_WIDTH_NORMAL
    sketchy: bool = True


@dataclass(frozen=True)
class CirclePrimitive:
    """Stroked circle outline."""
    center: Point
    radius: float
    style: str
    width: float = STROKE_WIDTH_NORMAL


@dataclass(frozen=True)
class PolygonPrimitive:
    """Filled polygon."""
    points: Tuple[Point, ...]
    color: str
    fill_style: str


def _line(line: Line, style: str) -> List[LinePrimitive]:
    """Primitive for a Line, or nothing for a zero-length one."""
    extent = line.draw_extent(LINE_EXTENT)
    if extent is None:
        return []
    begin, end = extent
    return [LinePrimitive(begin, end, style)]


def _lines(lines, style: str) -> List[LinePrimitive]:
    primitives = []
    for line in lines:
        primitives.extend(_line(line, style))
    return primitives


def build_control_points(config: Config) -> list:
    """Control point circles; the grabbed one is highlighted."""
    primitives = []
    cps = config.control_points
    for cp in cps:
        selected = cp.kind == cps.selected
        primitives.append(CirclePrimitive(
            cp.position,
            cp.RADIUS,
            STYLE_HIGHLIGHT if selected else STYLE_LIGHT,
            STROKE_WIDTH_SELECTED if selected else STROKE_WIDTH_NORMAL,
        ))
    return primitives


def build_box(config: Config) -> list:
    """Shadow, footprint erase, wireframe and construction rays.

    Raises:
        GeometryError: degenerate light placement
    """
    geometry = config.geometry()
    primitives = [
        PolygonPrimitive(geometry.shadow_polygon, SHADOW_COLOR, FILL_CROSS_HATCH),
        PolygonPrimitive(geometry.footprint, BACKGROUND_COLOR, FILL_SOLID),
    ]
    primitives += _lines(geometry.vanishing_lines, STYLE_LIGHT)
    primitives += _lines(geometry.front_lines, STYLE_DARK)
    primitives += _lines(geometry.back_lines, STYLE_DARK)
    primitives += _lines(geometry.connector_lines, STYLE_DARK)
    primitives += _lines(geometry.light_lines, STYLE_LIGHT)
    primitives += _lines(geometry.light_drop_lines, STYLE_LIGHT)
    return primitives


def build_scene(config: Config) -> list:
    """Full frame for `config`, in paint order.

    Raises:
        GeometryError: the frame can't be built; callers keep the previous one
    """
    vp = config.vanishing_point
    primitives = [RectPrimitive(0, 0, config.width, config.height, BACKGROUND_COLOR)]
    primitives += _line(Line(Point(0, vp.y), Point(config.width, vp.y), True, True), STYLE_DARK)
    primitives += build_control_points(config)
    primitives += build_box(config)
    logger.debug("Built scene with %d primitives", len(primitives))
    return primitives
