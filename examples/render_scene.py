#!/usr/bin/env python3
"""Render a named example scene or a YAML scene file.

Usage:
    python examples/render_scene.py [options]

Options:
    --scene NAME        Named scene from the library (default: shadows)
    --file PATH         YAML scene file; overrides --scene
    --width WIDTH       Image width in pixels (default: scene file or 400)
    --height HEIGHT     Image height in pixels (default: scene file or 200)
    --workers N         Scanlines rendered in parallel (default: TRACY_WORKERS)
    --depth N           Reflection bounces per ray (default: 5)
    --gamma GAMMA       Gamma applied to PNG output (default: 1.0)
    --output OUTPUT     Output file, .ppm or any Pillow format (default: render.png)
    --list              List the named scenes and exit
    --quiet             Only log warnings and errors

Example:
    python examples/render_scene.py --scene reflections --width 640 --height 320
    python examples/render_scene.py --file scenes/cylinders.yml --output cylinders.ppm
"""

from __future__ import annotations

import argparse
import logging
import sys

from tracy import config
from tracy.core.backend import init_backend
from tracy.core.settings import DEFAULT_RECURSION_DEPTH, RenderSettings
from tracy.logging_config import setup_logging
from tracy.preview.export import save_canvas
from tracy.scene.library import describe_scene, get_scene, list_scenes
from tracy.scene.loader import SceneError, load_scene

logger = logging.getLogger("tracy.examples.render_scene")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a Tracy scene to an image file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--scene", type=str, default="shadows", help="Named scene (default: shadows)")
    parser.add_argument("--file", type=str, default=None, help="YAML scene file; overrides --scene")
    parser.add_argument("--width", type=int, default=None, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Image height in pixels")
    parser.add_argument(
        "--workers",
        type=int,
        default=config.WORKERS,
        help=f"Scanlines rendered in parallel (default: {config.WORKERS})",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=DEFAULT_RECURSION_DEPTH,
        help=f"Reflection bounces per ray (default: {DEFAULT_RECURSION_DEPTH})",
    )
    parser.add_argument("--gamma", type=float, default=1.0, help="Gamma for PNG output (default: 1.0)")
    parser.add_argument("--output", type=str, default="render.png", help="Output file (default: render.png)")
    parser.add_argument("--list", action="store_true", help="List the named scenes and exit")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser.parse_args()


def build_settings(args: argparse.Namespace, default_size: tuple[int, int]) -> RenderSettings:
    width, height = default_size
    return RenderSettings(
        width=args.width if args.width is not None else width,
        height=args.height if args.height is not None else height,
        workers=args.workers,
        recursion_depth=args.depth,
        gamma=args.gamma,
        output=args.output,
    )


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging("WARNING" if args.quiet else None)

    if args.list:
        for name in list_scenes():
            print(f"{name:15s} {describe_scene(name)}")
        return 0

    init_backend()

    try:
        if args.file is not None:
            world, camera = load_scene(args.file)
            settings = build_settings(args, (camera.horizontal_size, camera.vertical_size))
            camera.set_size(settings.width, settings.height)
        else:
            settings = build_settings(args, (400, 200))
            world, camera = get_scene(args.scene)(settings.width, settings.height)
    except (SceneError, KeyError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1

    camera.recursion_limit = settings.recursion_depth
    stream = camera.stream(world, settings.workers)
    for done, total in stream.render_progressive():
        if not args.quiet:
            print(f"\r  Progress: {done}/{total} rows ({done / total:.0%})", end="", flush=True)
    if not args.quiet:
        print()

    save_canvas(stream.canvas, settings.output, gamma=settings.gamma)
    return 0


if __name__ == "__main__":
    sys.exit(main())
