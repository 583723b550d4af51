import sys
import os
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5.QtWidgets import QMainWindow, QApplication, QLabel

# Component imports
from components.scene_canvas import SceneCanvas

# Utility imports
from utils.logger import configure_logging, set_main_window

from constants import DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT, WINDOW_TITLE
from version import get_version

logger = logging.getLogger(__name__)


class PerspectiveShadowEditor(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} {get_version()}")
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        # Initialize global logger with main window reference
        set_main_window(self)

        self.canvas = SceneCanvas(self)
        self.setCentralWidget(self.canvas)

        # Status bar: what is grabbed and where the light sits
        self.status_label = QLabel()
        self.statusBar().addPermanentWidget(self.status_label)

        self.canvas.configChanged.connect(self._on_config_changed)
        self.canvas.frameAborted.connect(self._on_frame_aborted)
        self._on_config_changed(self.canvas.config)

    def _on_config_changed(self, config):
        """Refresh status bar text for the current scene"""
        cps = config.control_points
        grabbed = cps.selected.name.replace('_', ' ').lower() if cps.is_dragging else "none"
        self.status_label.setText(
            f"Selected: {grabbed}   "
            f"Light: ({config.light.x:.0f}, {config.light.y:.0f})   "
            f"Vanishing point: ({config.vanishing_point.x:.0f}, {config.vanishing_point.y:.0f})"
        )

    def _on_frame_aborted(self, reason):
        self.statusBar().showMessage(f"Cannot cast shadow here: {reason}", 3000)


def main():
    configure_logging(logging.WARNING)

    app = QApplication(sys.argv)
    window = PerspectiveShadowEditor()
    window.show()
    logger.info("Editor started")
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
