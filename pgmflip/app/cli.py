from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..conversion import ConversionSettings, PgmConverter
from .diagnostics import configure_logging

DEFAULT_INPUT = "example.pgm"
DEFAULT_OUTPUT = "output.pbm"


def threshold_value(value: str) -> int:
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold: {value!r}") from None
    if not 0 <= level <= 255:
        raise argparse.ArgumentTypeError("threshold must be between 0 and 255")
    return level


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="pgmflip: invert and mirror a P2/P5 grayscale image and save it as a PBM bitmap."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT, help=f"PGM file to read (default: {DEFAULT_INPUT})")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help=f"PBM file to write (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--no-invert", action="store_true", help="Skip intensity inversion")
    parser.add_argument("--no-flip", action="store_true", help="Skip the horizontal flip")
    parser.add_argument("--plain", action="store_true", help="Write ASCII P1 instead of binary P4")
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--dither", action="store_true", help="Use Floyd-Steinberg dithering")
    mode_group.add_argument("--threshold", type=threshold_value, help="Fixed black threshold (0-255)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each processing step")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> ConversionSettings:
    return ConversionSettings(
        invert=not args.no_invert,
        flip=not args.no_flip,
        dither=args.dither,
        threshold=args.threshold,
        plain=args.plain,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    converter = PgmConverter(build_settings(args))
    try:
        converter.convert_to_file(args.path, args.output)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
