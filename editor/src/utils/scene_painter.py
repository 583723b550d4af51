"""QPainter playback of scene primitives.

Shared by the interactive canvas and the headless renderer so both produce
the same picture from the same primitive list.
"""

import numpy as np
from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QPainter, QPen, QBrush, QColor, QPolygonF

from constants import STROKE_COLORS, STYLE_DARK, FILL_CROSS_HATCH
from services.scene_renderer import RectPrimitive, LinePrimitive, CirclePrimitive, PolygonPrimitive
from utils.sketch_stroke import sketch_line


def _pen(style, width):
    return QPen(QColor(STROKE_COLORS[style]), width)


def _draw_line(painter, prim, rng):
    painter.setPen(_pen(prim.style, prim.width))
    if not prim.sketchy:
        painter.drawLine(QPointF(prim.begin.x, prim.begin.y), QPointF(prim.end.x, prim.end.y))
        return
    for polyline in sketch_line(prim.begin, prim.end, prim.style == STYLE_DARK, rng):
        painter.drawPolyline(QPolygonF([QPointF(x, y) for x, y in polyline]))


def _draw_circle(painter, prim):
    painter.setPen(_pen(prim.style, prim.width))
    painter.setBrush(Qt.NoBrush)
    painter.drawEllipse(QPointF(prim.center.x, prim.center.y), float(prim.radius), float(prim.radius))


def _draw_polygon(painter, prim):
    color = QColor(prim.color)
    if prim.fill_style == FILL_CROSS_HATCH:
        painter.setPen(QPen(color, 1))
        painter.setBrush(QBrush(color, Qt.DiagCrossPattern))
    else:
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(color, Qt.SolidPattern))
    painter.drawPolygon(QPolygonF([QPointF(p.x, p.y) for p in prim.points]))


def paint_primitives(painter: QPainter, primitives, rng: np.random.Generator = None):
    """Draw `primitives` in order.

    Args:
        painter: Active QPainter
        primitives: Output of services.scene_renderer.build_scene
        rng: Random source for sketch strokes (fresh one if None)
    """
    if rng is None:
        rng = np.random.default_rng()

    painter.setRenderHint(QPainter.Antialiasing)
    for prim in primitives:
        if isinstance(prim, RectPrimitive):
            painter.fillRect(QRectF(prim.x, prim.y, prim.width, prim.height), QColor(prim.color))
        elif isinstance(prim, LinePrimitive):
            _draw_line(painter, prim, rng)
        elif isinstance(prim, CirclePrimitive):
            _draw_circle(painter, prim)
        elif isinstance(prim, PolygonPrimitive):
            _draw_polygon(painter, prim)
        else:
            raise TypeError(f"Unknown primitive: {prim!r}")
