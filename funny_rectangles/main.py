"""Command-line entry point that prints generated rectangles as JSON lines."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence

from funny_rectangles.core.errors import RectangleConfigError
from funny_rectangles.core.factory import RandomRectangleFactory
from funny_rectangles.infra.config import FactorySettings, load_default_env_files, load_factory_settings
from funny_rectangles.infra.json_codec import dumps_text
from funny_rectangles.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def build_parser(defaults: FactorySettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="funny-rectangles",
        description="Generate rectangles with random position, size and color.",
    )
    parser.add_argument("--count", type=int, default=defaults.count, help="Rectangles to generate.")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Seed for reproducible output.")
    parser.add_argument("--scene-width", type=int, default=defaults.scene_width)
    parser.add_argument("--scene-height", type=int, default=defaults.scene_height)
    parser.add_argument("--min-width", type=int, default=defaults.min_rectangle_width)
    parser.add_argument("--min-height", type=int, default=defaults.min_rectangle_height)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator and return the process exit status."""
    load_default_env_files(override_existing=False)
    # Parse first so --help and usage errors exit before any log file is opened.
    args = build_parser(load_factory_settings()).parse_args(argv)
    setup_logging()
    try:
        return _generate(args)
    finally:
        shutdown_logging()


def _generate(args: argparse.Namespace) -> int:
    try:
        factory = RandomRectangleFactory(
            args.scene_width,
            args.scene_height,
            args.min_width,
            args.min_height,
            rng=random.Random(args.seed),
        )
        rectangles = factory.create_rectangles(args.count)
    except RectangleConfigError as exc:
        logger.error(
            "rectangle_config_invalid",
            extra={"field": exc.field, "value": exc.value, "reason": str(exc)},
        )
        print(f"funny-rectangles: error: {exc}", file=sys.stderr)
        return 2

    logger.info("rectangles_generated count=%d seed=%s", len(rectangles), args.seed)
    for rectangle in rectangles:
        sys.stdout.write(dumps_text(rectangle.as_dict()) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
