"""Utilities for the Perspective Shadow Editor

- convex_hull: gift wrapping hull
- sketch_stroke: hand-drawn stroke polylines
- scene_painter: QPainter playback of scene primitives
- logger: logging setup and loggerRaise
"""
