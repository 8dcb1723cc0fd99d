"""Command-line entry point.

Usage::

    avatarme -name banana            # writes ./banana.png
    avatarme -name banana -dir out   # writes out/banana.png

A missing or empty ``-name`` prints usage and exits 0. A failed write is
logged as fatal and exits 1.
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

from avatarme.config import DEFAULT_CONFIG
from avatarme.errors import OutputWriteFailure
from avatarme.pipeline import create_identicon

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="avatarme",
        description="Generate a 250x250 identicon PNG from a string.",
    )
    parser.add_argument(
        "-name",
        default="",
        help="value to be hashed and generate the identicon with",
    )
    parser.add_argument(
        "-dir",
        dest="output_dir",
        default=DEFAULT_CONFIG.output_dir,
        help="directory the <name>.png file is written to (default: %(default)s)",
    )
    parser.add_argument(
        "-v", dest="verbose", action="store_true", help="log progress to stderr"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(format=LOG_FORMAT, level=level)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("avatarme").setLevel(level)

    if not args.name:
        parser.print_usage(sys.stderr)
        return 0

    config = replace(DEFAULT_CONFIG, output_dir=args.output_dir)
    try:
        create_identicon(args.name, config)
    except OutputWriteFailure as exc:
        logger.critical("%s", exc)
        return 1
    return 0
