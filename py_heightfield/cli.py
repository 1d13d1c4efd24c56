#!/usr/bin/env python3
"""
Command-line heightfield generator.

Generates a diamond-square heightfield and prints it as a greyscale PGM on
stdout, or writes it to the PGM and/or PNG paths given.

    py-heightfield --size 257 --seed mountains > terrain.pgm
    py-heightfield --size 513 --png terrain.png --roughness 0.6
"""

import argparse
import sys
from typing import List, Optional

import structlog

from .config import settings
from .core.heightfield_generator import (
    HeightfieldConfig,
    HeightfieldGenerator,
    InvalidSizeError,
    validate_size,
)
from .export import write_pgm
from .logging_config import configure_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-heightfield",
        description="Generate a diamond-square terrain heightfield",
    )
    parser.add_argument(
        "--size", type=int, default=settings.default_size,
        help="Grid side, must be 2^n + 1 (default: %(default)s)",
    )
    parser.add_argument(
        "--seed", default=settings.default_seed,
        help="PRNG seed string (default: time-based)",
    )
    parser.add_argument(
        "--corner", type=float, nargs="+", default=[settings.corner_height],
        help="Corner seed height, or four values for (0,0) (e,0) (0,e) (e,e)",
    )
    parser.add_argument(
        "--variance", type=float, default=settings.initial_variance,
        help="Perturbation bound at the coarsest level (default: %(default)s)",
    )
    parser.add_argument(
        "--roughness", type=float, default=settings.roughness,
        help="Variance ratio between successive levels (default: %(default)s)",
    )
    parser.add_argument(
        "--pgm", default=None,
        help="Write a P2 greymap to this path, '-' for stdout",
    )
    parser.add_argument("--png", default=None, help="Write a PNG preview to this path")
    parser.add_argument(
        "--cmap", default="gray", help="Colormap for the PNG preview (default: %(default)s)"
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument(
        "--log-format", choices=["plain", "json"], default=settings.log_format,
        help="Log output format",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    try:
        validate_size(args.size)
    except InvalidSizeError as e:
        logger.error("Invalid grid size", size=args.size, error=str(e))
        return 2
    if args.size > settings.max_size:
        logger.error("Grid size above configured maximum", size=args.size, max_size=settings.max_size)
        return 2

    if len(args.corner) not in (1, 4):
        logger.error("Expected 1 or 4 corner values", count=len(args.corner))
        return 2
    corners = args.corner[0] if len(args.corner) == 1 else args.corner

    try:
        config = HeightfieldConfig(
            size=args.size,
            corner_heights=corners,
            initial_variance=args.variance,
            roughness=args.roughness,
        )
        generator = HeightfieldGenerator(config, seed=args.seed)
        field = generator.generate()
    except ValueError as e:
        logger.error("Invalid generation parameters", error=str(e))
        return 2

    pgm_target = args.pgm
    if pgm_target is None and args.png is None:
        pgm_target = "-"

    if pgm_target == "-":
        write_pgm(field, sys.stdout)
    elif pgm_target is not None:
        write_pgm(field, pgm_target)

    if args.png is not None:
        # Deferred so PGM-only runs never load matplotlib
        from .visualize import render_heightfield

        render_heightfield(field, args.png, cmap=args.cmap)

    return 0


if __name__ == "__main__":
    sys.exit(main())
