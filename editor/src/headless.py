"""Headless Scene Renderer — CLI entry point.

Renders the perspective box scene to a PNG without opening a window.
Control points start from the default layout for the requested size and
can be overridden one by one.

Usage:
    python editor/src/headless.py [-o OUTPUT] [--size W H] [--light X Y] ...

Examples:
    python editor/src/headless.py -o scene.png
    python editor/src/headless.py --size 800 600 --light 100 80 --light-drop 100 450
    python editor/src/headless.py --vanishing-point 500 200 --seed 7 --scale 0.5
"""

import sys
import os
import argparse
import logging

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from constants import DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT

# (flag, ControlPointKind name)
POINT_OPTIONS = [
    ('--vanishing-point', 'VANISHING_POINT'),
    ('--corner1', 'BOX_POINT_1'),
    ('--corner2', 'BOX_POINT_2'),
    ('--light', 'LIGHT'),
    ('--light-drop', 'LIGHT_DROP'),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Render the perspective box and its shadow to a PNG image (headless).',
    )
    parser.add_argument(
        '-o', '--output',
        default='./scene.png',
        help='Output PNG path (default: ./scene.png).',
    )
    parser.add_argument(
        '--size',
        nargs=2, type=int, metavar=('WIDTH', 'HEIGHT'),
        default=[DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT],
        help=f'Viewport size in pixels (default: {DEFAULT_WINDOW_WIDTH} {DEFAULT_WINDOW_HEIGHT}).',
    )
    for flag, kind in POINT_OPTIONS:
        parser.add_argument(
            flag,
            nargs=2, type=float, metavar=('X', 'Y'),
            help=f'Position of the {kind.replace("_", " ").lower()} control point.',
        )
    parser.add_argument(
        '--seed',
        type=int, default=None,
        help='Seed for the hand-drawn stroke wobble.',
    )
    parser.add_argument(
        '--scale',
        type=float, default=1.0,
        help='Output size relative to the viewport (default: 1.0).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser


def build_config(args):
    """Config from parsed arguments: default layout plus overrides.

    The light drop is kept under the light, so an x given for one of them
    moves both (a later --light-drop x wins over --light).
    """
    from models.config import Config
    from models.control_points import ControlPointKind, ControlPoints, default_control_points
    from models.geometry import Point

    width, height = args.size
    defaults = default_control_points(width, height)
    positions = {cp.kind: cp.position for cp in defaults}

    for flag, kind_name in POINT_OPTIONS:
        value = getattr(args, flag.lstrip('-').replace('-', '_'))
        if value is not None:
            positions[ControlPointKind[kind_name]] = Point(*value)

    light = positions[ControlPointKind.LIGHT]
    drop = positions[ControlPointKind.LIGHT_DROP]
    x = drop.x if args.light_drop is not None else light.x
    positions[ControlPointKind.LIGHT] = Point(x, light.y)
    positions[ControlPointKind.LIGHT_DROP] = Point(x, drop.y)

    return Config(width, height, ControlPoints.from_positions(positions))


def main(argv=None):
    args = build_parser().parse_args(argv)

    from utils.logger import configure_logging
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    # No display needed
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

    from models.geometry import GeometryError
    from services.headless_renderer import HeadlessRenderer

    config = build_config(args)
    output_path = os.path.abspath(args.output)

    renderer = HeadlessRenderer(seed=args.seed)
    try:
        renderer.render(config, output_path, scale=args.scale)
    except GeometryError as e:
        print(f"Error: cannot render this scene: {e}")
        return 1

    print(f"Rendered scene to {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
