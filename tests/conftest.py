"""
Shared fixtures for Perspective Shadow Editor tests.

Provides the reference control point layout and ready-made Configs.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widgets and QImage painting run without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Reference layouts ───────────────────────────────────────────────────

# Small layout used for state machine checks
SCENARIO_POSITIONS = {
    'VANISHING_POINT': (100, 100),
    'BOX_POINT_1': (50, 150),
    'BOX_POINT_2': (150, 200),
    'LIGHT': (20, 50),
    'LIGHT_DROP': (20, 180),
}

# Box below the horizon, light up and to the left (shadow falls right)
SHADOW_POSITIONS = {
    'VANISHING_POINT': (400, 300),
    'BOX_POINT_1': (200, 500),
    'BOX_POINT_2': (300, 400),
    'LIGHT': (100, 100),
    'LIGHT_DROP': (100, 600),
}


def _control_points(positions):
    from models.control_points import ControlPoints, ControlPointKind
    from models.geometry import Point
    return ControlPoints.from_positions({
        ControlPointKind[name]: Point(*xy) for name, xy in positions.items()
    })


@pytest.fixture
def scenario_points():
    """Idle ControlPoints at the small reference layout"""
    return _control_points(SCENARIO_POSITIONS)


@pytest.fixture
def shadow_points():
    """Idle ControlPoints with a well-formed shadow"""
    return _control_points(SHADOW_POSITIONS)


@pytest.fixture
def shadow_config(shadow_points):
    """800x700 Config built from shadow_points"""
    from models.config import Config
    return Config(800, 700, shadow_points)
