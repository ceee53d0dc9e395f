#!/usr/bin/env python3
"""Watch a scene render scanline batch by scanline batch in a GGUI window.

Usage:
    python examples/interactive_scene.py [--scene NAME | --file PATH] [--width W] [--height H]

Click "Export PNG" in the window to save the current image with a timestamp.
"""

from __future__ import annotations

import argparse
import logging
import sys

from tracy import config
from tracy.core.backend import init_backend
from tracy.logging_config import setup_logging
from tracy.preview.interactive import InteractivePreview
from tracy.scene.library import get_scene
from tracy.scene.loader import SceneError, load_scene

logger = logging.getLogger("tracy.examples.interactive_scene")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive Tracy preview.")
    parser.add_argument("--scene", type=str, default="reflections", help="Named scene (default: reflections)")
    parser.add_argument("--file", type=str, default=None, help="YAML scene file; overrides --scene")
    parser.add_argument("--width", type=int, default=512, help="Window width (default: 512)")
    parser.add_argument("--height", type=int, default=256, help="Window height (default: 256)")
    parser.add_argument("--workers", type=int, default=config.WORKERS, help="Scanlines per frame")
    parser.add_argument("--gamma", type=float, default=1.0, help="Display gamma (default: 1.0)")
    return parser.parse_args()


def main() -> int:
    """Main entry point for the interactive preview."""
    args = parse_args()
    setup_logging()

    if not InteractivePreview.is_display_available():
        logger.error("No display available; use examples/render_scene.py instead")
        return 1

    init_backend()

    try:
        if args.file is not None:
            world, camera = load_scene(args.file)
            camera.set_size(args.width, args.height)
        else:
            world, camera = get_scene(args.scene)(args.width, args.height)
    except (SceneError, KeyError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1

    preview = InteractivePreview(args.width, args.height, gamma=args.gamma)
    try:
        preview.run_stream(camera.stream(world, args.workers))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        preview.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
