"""Hand-drawn stroke generation.

A straight segment is resampled into a short polyline whose interior points
wobble sideways by a small random amount. Multi-stroke lines are drawn
several times with independent wobble, which gives the pencil look of the
box wireframe; construction rays use a single stroke.
"""

import numpy as np
from typing import List

from constants import SKETCH_ROUGHNESS, SKETCH_SEGMENTS, SKETCH_MULTI_STROKE_COUNT


def sketch_line(begin, end, multi_stroke: bool, rng: np.random.Generator,
                roughness: float = SKETCH_ROUGHNESS,
                segments: int = SKETCH_SEGMENTS) -> List[np.ndarray]:
    """Polylines approximating the segment begin -> end.

    Args:
        begin, end: Anything unpacking to (x, y)
        multi_stroke: Draw SKETCH_MULTI_STROKE_COUNT strokes instead of one
        rng: Random source (seed it for repeatable frames)
        roughness: Maximum sideways offset in pixels
        segments: Points per polyline, ends included

    Returns:
        List of (segments, 2) float arrays; empty for a zero-length segment
    """
    start = np.array(tuple(begin), dtype=float)
    stop = np.array(tuple(end), dtype=float)
    direction = stop - start
    length = np.hypot(direction[0], direction[1])
    if length == 0:
        return []

    normal = np.array([-direction[1], direction[0]]) / length
    t = np.linspace(0.0, 1.0, segments)[:, None]
    base = start + t * direction

    # Ends wobble less than the middle so strokes still meet at corners
    envelope = np.sin(np.pi * t) * 0.5 + 0.5

    strokes = SKETCH_MULTI_STROKE_COUNT if multi_stroke else 1
    polylines = []
    for _ in range(strokes):
        offsets = rng.uniform(-roughness, roughness, size=(segments, 1)) * envelope
        polylines.append(base + offsets * normal)
    return polylines
