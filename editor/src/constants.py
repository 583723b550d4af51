"""
Perspective Shadow Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Scene palette (background, strokes, fills)
- Control point sizes
- Box projection parameters
- Initial control point layout
- Window defaults

Coordinates are scene pixels, Y-down (0 = top edge of the viewport).
"""

# ======================================================================
# SCENE PALETTE
# ======================================================================

BACKGROUND_COLOR = '#ccccbb'
STROKE_DARK = '#444400'       # Box wireframe
STROKE_LIGHT = '#aaaa88'      # Construction rays, idle control points
STROKE_HIGHLIGHT = '#AA4444'  # Selected control point
SHADOW_COLOR = '#000000'

# Fill styles understood by the canvas painter
FILL_CROSS_HATCH = 'cross-hatch'
FILL_SOLID = 'solid'

# Stroke styles understood by the canvas painter
STYLE_DARK = 'dark'
STYLE_LIGHT = 'light'
STYLE_HIGHLIGHT = 'highlight'

STROKE_COLORS = {
    STYLE_DARK: STROKE_DARK,
    STYLE_LIGHT: STROKE_LIGHT,
    STYLE_HIGHLIGHT: STROKE_HIGHLIGHT,
}

STROKE_WIDTH_NORMAL = 1
STROKE_WIDTH_SELECTED = 2

# ======================================================================
# CONTROL POINTS
# ======================================================================

# Hit-test and draw radius in pixels
CONTROL_POINT_RADIUS = 10

# ======================================================================
# BOX PROJECTION
# ======================================================================

# Fraction of the distance from each front vertex to the vanishing point
# that the back face is pulled in by
DEFAULT_DEPTH_FACTOR = 0.3

# Open line ends are extended this far (pixels) when drawn
LINE_EXTENT = 4000

# Vanishing point rays always stop at the front vertex. When True they also
# stop at the vanishing point instead of running through it.
VANISHING_RAY_STOP_AT_VP = True

# ======================================================================
# SKETCH STROKES
# ======================================================================

# Maximum perpendicular jitter of a hand-drawn stroke, in pixels
SKETCH_ROUGHNESS = 1.5
# Points per hand-drawn stroke (including both ends)
SKETCH_SEGMENTS = 6
# Multi-stroke lines are drawn this many times
SKETCH_MULTI_STROKE_COUNT = 2

# ======================================================================
# INITIAL LAYOUT
# ======================================================================

# Offsets (pixels) of the box corners relative to the viewport
INITIAL_BOX_WIDTH = 300
INITIAL_BOX_CORNER1_DROP = 300
INITIAL_BOX_CORNER2_DROP = 50

# Light position as fractions of the viewport
INITIAL_LIGHT_X_FRACTION = 1 / 5
INITIAL_LIGHT_Y_FRACTION = 1 / 4
INITIAL_LIGHT_DROP_Y_FRACTION = 0.60

# ======================================================================
# WINDOW
# ======================================================================

DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
WINDOW_TITLE = "Perspective Shadow Editor"
