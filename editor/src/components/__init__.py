"""UI components for the Perspective Shadow Editor

- scene_canvas: interactive canvas that paints the scene and drags control points
"""

from .scene_canvas import SceneCanvas

__all__ = [
    'SceneCanvas',
]
