# main.py
"""Render one of the built-in scenes to an image file.

Usage:
    pathtrace --scene cornell_box --width 300 --samples 64 --output cornell.png

Settings not given on the command line come from PATHTRACER_* environment
variables, then from the RenderSettings defaults.
"""
import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional
import numpy as np
from renderer.config import RenderSettings
from renderer.logging_config import setup_logging
from renderer.raytracer import Renderer
from renderer.tone_mapping import save_image
from scenes import SCENES, build_scene

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Monte Carlo path tracer.")
    parser.add_argument("--scene", default="cornell_box", choices=sorted(SCENES),
                        help="Scene to render (default: cornell_box)")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, help="Maximum bounces per path")
    parser.add_argument("--workers", type=int, help="Worker processes (1 renders in-process)")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible render")
    parser.add_argument("--output", default="image.png",
                        help="Output file; the format follows the extension (default: image.png)")
    parser.add_argument("--texture", default="earthmap.jpg",
                        help="Image used by the earth scene (default: earthmap.jpg)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--log-file", type=Path, help="Also write log records to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = RenderSettings.from_env(
            width=args.width,
            samples_per_pixel=args.samples,
            max_depth=args.max_depth,
            workers=args.workers,
            seed=args.seed,
            log_level=args.log_level,
        )
    except ValueError as e:
        setup_logging("INFO", args.log_file)
        logger.error("Invalid settings: %s", e)
        return 2
    setup_logging(settings.log_level, args.log_file)

    try:
        if settings.seed is not None:
            # Scene construction draws from the global streams too.
            random.seed(settings.seed)
            np.random.seed(settings.seed % (2 ** 32))
        kwargs = {"image_path": args.texture} if args.scene == "earth" else {}
        scene = build_scene(args.scene, **kwargs)
        settings = settings.with_overrides(aspect_ratio=scene.view.aspect_ratio)
        renderer = Renderer(settings)
    except (KeyError, ValueError, FileNotFoundError) as e:
        logger.error("Cannot set up scene %r: %s", args.scene, e)
        return 2

    logger.info("Scene %s: %d light(s)", args.scene, len(scene.lights))
    image = renderer.render(scene.world, scene.lights, scene.view.camera(), scene.view.background)
    try:
        save_image(image, args.output)
    except (ValueError, OSError) as e:
        logger.error("Cannot write %s: %s", args.output, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
