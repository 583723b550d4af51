"""
Tests for the interactive SceneCanvas widget.

Covers:
- Press / drag / release drive the control point state machine
- Drags without a selection are ignored
- Resize rebuilds the Config without moving control points
- Degenerate scenes keep the previous frame and emit frameAborted
- Painting fills the background
- Zero-width and collapsed boxes still build a frame
- Internal errors go through loggerRaise, not frameAborted
"""
import pytest
from PyQt5.QtCore import Qt, QPoint, QSize
from PyQt5.QtGui import QResizeEvent, QColor

from constants import BACKGROUND_COLOR
from models.config import Config
from models.control_points import ControlPointKind
from models.geometry import Point
from services.scene_renderer import PolygonPrimitive
from utils.convex_hull import HullConvergenceError


@pytest.fixture
def canvas(qtbot, shadow_config):
    from components.scene_canvas import SceneCanvas
    widget = SceneCanvas(config=shadow_config, seed=3)
    qtbot.addWidget(widget)
    return widget


class TestInteraction:

    def test_initial_frame_built(self, canvas):
        assert len(canvas.primitives) > 0
        assert not canvas.config.control_points.is_dragging

    def test_press_selects(self, canvas):
        canvas.press_at(Point(400, 300))
        assert canvas.config.control_points.selected is ControlPointKind.VANISHING_POINT

    def test_drag_moves_selected_point(self, canvas):
        canvas.press_at(Point(402, 301))
        canvas.drag_to(Point(452, 251))
        assert canvas.config.vanishing_point == Point(450, 250)

    def test_drag_without_selection_ignored(self, canvas):
        before = canvas.config
        canvas.drag_to(Point(10, 10))
        assert canvas.config is before

    def test_release_goes_idle(self, canvas):
        canvas.press_at(Point(100, 100))
        canvas.drag_to(Point(130, 120))
        canvas.release()
        cps = canvas.config.control_points
        assert cps.selected is None
        assert cps.get(ControlPointKind.LIGHT).position == Point(130, 120)
        assert cps.get(ControlPointKind.LIGHT_DROP).position == Point(130, 600)

    def test_config_changed_signal(self, canvas, qtbot):
        with qtbot.waitSignal(canvas.configChanged) as blocker:
            canvas.press_at(Point(200, 500))
        assert blocker.args[0].control_points.selected is ControlPointKind.BOX_POINT_1

    def test_mouse_events(self, canvas, qtbot):
        canvas.show()
        qtbot.waitExposed(canvas)
        qtbot.mousePress(canvas, Qt.LeftButton, pos=QPoint(300, 400))
        assert canvas.config.control_points.selected is ControlPointKind.BOX_POINT_2
        qtbot.mouseRelease(canvas, Qt.LeftButton, pos=QPoint(300, 400))
        assert canvas.config.control_points.selected is None


class TestResize:

    def test_resize_keeps_points(self, canvas):
        points = canvas.config.control_points
        canvas.resizeEvent(QResizeEvent(QSize(500, 400), QSize(800, 700)))
        assert (canvas.config.width, canvas.config.height) == (500, 400)
        assert canvas.config.control_points == points

    def test_resize_rebuilds_background(self, canvas):
        canvas.resizeEvent(QResizeEvent(QSize(500, 400), QSize(800, 700)))
        background = canvas.primitives[0]
        assert (background.width, background.height) == (500, 400)


class TestAbortedFrame:

    def test_degenerate_scene_keeps_previous_frame(self, canvas, qtbot):
        canvas.press_at(Point(100, 100))
        good = canvas.primitives
        with qtbot.waitSignal(canvas.frameAborted):
            canvas.drag_to(Point(200, 100))
        assert canvas.primitives is good
        # New state is still adopted, so the next move starts from it
        assert canvas.config.light == Point(200, 100)

    def test_recovers_on_next_valid_move(self, canvas):
        canvas.press_at(Point(100, 100))
        canvas.drag_to(Point(200, 100))
        canvas.drag_to(Point(150, 100))
        assert canvas.primitives[0].width == canvas.config.width
        assert any(getattr(p, 'center', None) == Point(150, 100) for p in canvas.primitives)


class TestPainting:

    def test_background_painted(self, canvas):
        canvas.resize(800, 700)
        image = canvas.grab().toImage()
        assert image.pixelColor(2, 2) == QColor(BACKGROUND_COLOR)

    def test_default_config(self, qtbot):
        from components.scene_canvas import SceneCanvas
        widget = SceneCanvas()
        qtbot.addWidget(widget)
        assert isinstance(widget.config, Config)
        assert len(widget.primitives) > 0


class TestDegenerateBoxDrag:

    def test_zero_width_box_builds_frame(self, canvas, qtbot):
        corner1 = canvas.config.box.corner1
        canvas.press_at(Point(300, 400))
        with qtbot.assertNotEmitted(canvas.frameAborted):
            canvas.drag_to(Point(corner1.x, 400))
        assert canvas.config.box.corner2 == Point(corner1.x, 400)
        polygon = next(p for p in canvas.primitives if isinstance(p, PolygonPrimitive))
        assert len(set(polygon.points)) == len(polygon.points)

    def test_collapsed_box_builds_frame(self, canvas, qtbot):
        canvas.press_at(Point(300, 400))
        with qtbot.assertNotEmitted(canvas.frameAborted):
            canvas.drag_to(Point(200, 500))
        assert canvas.config.box.corner1 == canvas.config.box.corner2


class TestInternalErrors:

    def test_internal_error_goes_to_logger_raise(self, canvas, monkeypatch):
        import components.scene_canvas as scene_canvas
        handled = []
        failure = HullConvergenceError("did not close")

        def fail(config):
            raise failure

        monkeypatch.setattr(scene_canvas, 'build_scene', fail)
        monkeypatch.setattr(scene_canvas, 'loggerRaise', lambda e, msg=None: handled.append(e))
        good = canvas.primitives
        canvas.press_at(Point(400, 300))
        assert handled == [failure]
        assert canvas.primitives is good

    def test_internal_error_not_reported_as_aborted_frame(self, canvas, monkeypatch, qtbot):
        import components.scene_canvas as scene_canvas

        def fail(config):
            raise HullConvergenceError("did not close")

        monkeypatch.setattr(scene_canvas, 'build_scene', fail)
        with qtbot.assertNotEmitted(canvas.frameAborted):
            with pytest.raises(HullConvergenceError):
                canvas.press_at(Point(400, 300))
