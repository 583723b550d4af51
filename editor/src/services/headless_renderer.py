"""Headless Scene Renderer Service.

Paints a scene into an offscreen QImage with the same primitive playback
the interactive canvas uses, then hands the pixels to Pillow for saving.
"""

import sys
import os
import logging
import numpy as np
from PIL import Image

from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QImage, QPainter

from models.config import Config
from services.scene_renderer import build_scene
from utils.scene_painter import paint_primitives

logger = logging.getLogger(__name__)


class HeadlessRenderer:
    """Offscreen renderer that writes scenes as PNG files."""

    def __init__(self, seed=None):
        """
        Args:
            seed: Seed for the sketch stroke wobble (repeatable output when set)
        """
        self._app = self._ensure_qapp()
        self._seed = seed

    @staticmethod
    def _ensure_qapp():
        """Return existing QApplication or create a headless one."""
        app = QApplication.instance()
        if app is None:
            app = QApplication(sys.argv)
        return app

    def render_array(self, config: Config) -> np.ndarray:
        """Paint `config` and return its pixels.

        Returns:
            (height, width, 4) uint8 RGBA array

        Raises:
            GeometryError: the scene is degenerate
        """
        primitives = build_scene(config)
        width, height = int(round(config.width)), int(round(config.height))

        image = QImage(width, height, QImage.Format_RGBA8888)
        painter = QPainter(image)
        try:
            paint_primitives(painter, primitives, np.random.default_rng(self._seed))
        finally:
            painter.end()

        ptr = image.constBits()
        ptr.setsize(image.height() * image.bytesPerLine())
        rows = np.frombuffer(ptr, dtype=np.uint8).reshape(height, image.bytesPerLine())
        return rows[:, :width * 4].reshape(height, width, 4).copy()

    def render(self, config: Config, output_path: str, scale: float = 1.0):
        """Render `config` to a PNG.

        Args:
            config: Scene to draw
            output_path: Destination PNG file path
            scale: Output size relative to the viewport
        """
        img = Image.fromarray(self.render_array(config), "RGBA")
        if scale != 1.0:
            size = (max(1, round(img.width * scale)), max(1, round(img.height * scale)))
            img = img.resize(size, Image.Resampling.LANCZOS)

        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        img.save(output_path, "PNG")
        logger.info("Rendered %dx%d scene to %s", img.width, img.height, output_path)
