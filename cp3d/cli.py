"""
Командний рядок:

    python -m cp3d points.txt
    python -m cp3d points.txt --backend scipy --log-level INFO
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from . import __version__, config
from .io import PointFormatError, read_points
from .logging_config import setup_logging
from .report import format_report, run_timed

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cp3d",
        description="Minimum pairwise distance among 3-D integer points (divide and conquer).",
    )
    parser.add_argument("file", help="points file: count on the first line, then 'x y z' lines")
    parser.add_argument("--backend", choices=("divide", "brute", "scipy"), default="divide",
                        help="algorithm to use (default: divide)")
    parser.add_argument("--bound", choices=config.STRIP_BOUNDS, default=None,
                        help="strip bound from the two halves (default: CP3D_STRIP_BOUND or max)")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: CP3D_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        level = config.log_level() if args.log_level is None else logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown logging level {args.log_level!r}")
        setup_logging(level, args.log_file)
        bound = args.bound if args.bound is not None else config.strip_bound()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return config.EXIT_INPUT_ERROR

    try:
        points = read_points(args.file)
    except PointFormatError as e:
        print(f"error: {args.file}: {e}", file=sys.stderr)
        return config.EXIT_INPUT_ERROR
    except OSError as e:
        print(f"error: cannot read {args.file}: {e.strerror or e}", file=sys.stderr)
        return config.EXIT_INPUT_ERROR

    report = run_timed(points, backend=args.backend, bound=bound)
    logger.info("done: distance=%s, evaluations=%d", report.distance, report.evaluations)
    for line in format_report(report):
        print(line)
    return 0
