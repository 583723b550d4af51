"""
Tests for the per-frame Config snapshot.

Covers:
- Named points resolved from control points
- Box built from the two box corners
- Rebuild on control point change and on resize
- Geometry memoised per snapshot
"""
import pytest

from models.box import Box
from models.config import Config
from models.control_points import ControlPointKind
from models.geometry import Point, ParallelLinesError


class TestResolvedPoints:

    def test_named_points(self, shadow_config):
        assert shadow_config.vanishing_point == Point(400, 300)
        assert shadow_config.light == Point(100, 100)
        assert shadow_config.light_drop == Point(100, 600)

    def test_box_from_corners(self, shadow_config):
        assert shadow_config.box == Box(Point(200, 500), Point(300, 400), 0.3)

    def test_size(self, shadow_config):
        assert (shadow_config.width, shadow_config.height) == (800, 700)

    def test_custom_depth(self, shadow_points):
        config = Config(800, 700, shadow_points, depth_factor=0.5)
        assert config.box.depth_factor == 0.5


class TestRebuild:

    def test_with_control_points_rederives_box(self, shadow_config):
        cps = shadow_config.control_points.select(Point(300, 400)).move_to(Point(320, 380))
        moved = shadow_config.with_control_points(cps)
        assert moved.box.corner2 == Point(320, 380)
        assert shadow_config.box.corner2 == Point(300, 400)
        assert moved.control_points.selected is ControlPointKind.BOX_POINT_2

    def test_resize_keeps_points(self, shadow_config):
        resized = shadow_config.resized(200, 100)
        assert (resized.width, resized.height) == (200, 100)
        # Points are not rescaled and may now sit outside the viewport
        assert resized.control_points == shadow_config.control_points
        assert resized.vanishing_point == Point(400, 300)

    def test_resize_keeps_depth(self, shadow_points):
        config = Config(800, 700, shadow_points, depth_factor=0.45)
        assert config.resized(10, 10).box.depth_factor == 0.45
        assert config.with_control_points(shadow_points).box.depth_factor == 0.45


class TestGeometry:

    def test_geometry_matches_box_projection(self, shadow_config):
        expected = shadow_config.box.project(
            shadow_config.vanishing_point, shadow_config.light, shadow_config.light_drop)
        assert shadow_config.geometry() == expected

    def test_geometry_memoised(self, shadow_config):
        assert shadow_config.geometry() is shadow_config.geometry()

    def test_degenerate_light_raises(self, shadow_points):
        cps = shadow_points.select(Point(100, 100)).move_to(Point(200, 100))
        config = Config(800, 700, cps)
        assert config.light_drop == Point(200, 600)
        with pytest.raises(ParallelLinesError):
            config.geometry()

    def test_properties_read_only(self, shadow_config):
        with pytest.raises(AttributeError):
            shadow_config.light = Point(0, 0)
