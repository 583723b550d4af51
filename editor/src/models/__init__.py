"""
Perspective Shadow Editor - Data Models

This package contains the scene model. This is the MODEL in MVC architecture.

- geometry: Point, Vector, Line and the GeometryError family
- box: Box projection and shadow construction (BoxGeometry)
- control_points: draggable control points and their select/drag/release state
- config: per-frame Config snapshot

Import from the submodules directly; utils.convex_hull depends on
models.geometry, so this package keeps no re-exports.
"""
