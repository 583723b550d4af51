"""
Scene Canvas - Interactive view of the perspective box and its shadow

Owns the current Config and turns mouse input into control point
transitions:
- press:   select the control point under the cursor
- move:    drag the selected point (ignored when nothing is selected)
- release: drop it
- resize:  same control points, new viewport size
"""

import logging
import numpy as np
from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter

from constants import DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
from models.config import Config
from models.control_points import default_control_points
from models.geometry import Point, GeometryError
from services.scene_renderer import build_scene
from utils.logger import loggerRaise
from utils.scene_painter import paint_primitives

logger = logging.getLogger(__name__)


class SceneCanvas(QWidget):
    """Widget that draws the scene and lets the user drag its control points"""

    # Signals
    configChanged = pyqtSignal(object)  # Config that is now current
    frameAborted = pyqtSignal(str)  # Reason the last frame could not be built

    def __init__(self, parent=None, config=None, seed=None):
        """
        Args:
            parent: Parent widget
            config: Starting scene (default layout for the default window size if None)
            seed: Seed for the sketch stroke wobble
        """
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setMinimumSize(200, 200)

        self._rng = np.random.default_rng(seed)
        self._frame_seed = None
        self._primitives = []
        self._config = None

        if config is None:
            config = Config(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT,
                            default_control_points(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT))
        self.set_config(config)

    @property
    def config(self):
        return self._config

    @property
    def primitives(self):
        """Primitives of the last frame that was built successfully."""
        return self._primitives

    def set_config(self, config):
        """Make `config` current and rebuild the frame.

        A degenerate scene keeps the previous frame on screen; the new config
        is still adopted so the next input event starts from it.
        """
        self._config = config
        try:
            self._primitives = build_scene(config)
            self._frame_seed = int(self._rng.integers(0, 2**31))
        except GeometryError as e:
            logger.warning("Frame aborted, keeping previous frame: %s", e)
            self.frameAborted.emit(str(e))
        except Exception as e:
            # Anything else (e.g. HullConvergenceError) is a bug, not a bad scene
            loggerRaise(e, "Failed to build the scene")
        self.configChanged.emit(config)
        self.update()

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def press_at(self, point: Point):
        self.set_config(self._config.with_control_points(self._config.control_points.select(point)))

    def drag_to(self, point: Point):
        if not self._config.control_points.is_dragging:
            return
        self.set_config(self._config.with_control_points(self._config.control_points.move_to(point)))

    def release(self):
        self.set_config(self._config.with_control_points(self._config.control_points.deselect()))

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------

    def mousePressEvent(self, event):
        """Handle mouse press"""
        if event.button() == Qt.LeftButton:
            self.press_at(Point(event.x(), event.y()))
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        """Handle mouse move"""
        self.drag_to(Point(event.x(), event.y()))
        event.accept()

    def mouseReleaseEvent(self, event):
        """Handle mouse release"""
        if event.button() == Qt.LeftButton:
            self.release()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def resizeEvent(self, event):
        """Rebuild the scene for the new size; control points stay where they are"""
        super().resizeEvent(event)
        size = event.size()
        self.set_config(self._config.resized(size.width(), size.height()))

    def paintEvent(self, event):
        """Draw the last good frame"""
        painter = QPainter(self)
        try:
            paint_primitives(painter, self._primitives, np.random.default_rng(self._frame_seed))
        finally:
            painter.end()
