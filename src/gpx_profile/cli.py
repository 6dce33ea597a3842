"""``gpx-profile`` command: analyse a GPX file and print its elevation profile."""

from __future__ import annotations

import argparse
import logging
import math
import sys

from pydantic import ValidationError

from .config import OutputFormat, Settings, get_settings
from .errors import ConfigurationError, GpxProfileError, NoPointsError
from .formatters import format_result
from .gpx_reader import read_gpx
from .segments import analyze_elevation

logger = logging.getLogger(__name__)

EXAMPLES = """\
examples:
  gpx-profile route.gpx                  analyse with 1 km segments (JSON)
  gpx-profile -f csv route.gpx           output in CSV format
  gpx-profile -d 0.5 -f csv route.gpx    500 m segments in CSV
  cat route.gpx | gpx-profile -f csv     read from stdin
"""


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid distance value: {value}") from None
    if not math.isfinite(number) or number <= 0:
        raise argparse.ArgumentTypeError(f"distance must be a positive finite number, got {value}")
    return number


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpx-profile",
        description="Split a GPX route or track into fixed-distance segments and report elevation changes.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", default="-", help="GPX file to read (default: stdin)")
    parser.add_argument(
        "-f", "--format",
        choices=[OutputFormat.JSON.value, OutputFormat.CSV.value, OutputFormat.TEXT.value],
        default=None,
        help=f"output format (default: {settings.output_format.value})",
    )
    parser.add_argument(
        "-c", "--csv",
        action="store_true",
        help="deprecated, same as --format csv",
    )
    parser.add_argument(
        "-C", "--compact",
        action="store_true",
        default=settings.compact_json,
        help="compact JSON output",
    )
    parser.add_argument(
        "-d", "--distance",
        type=positive_float,
        default=settings.segment_distance_km,
        metavar="KM",
        help=f"segment distance in km (default: {settings.segment_distance_km})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def resolve_format(args: argparse.Namespace, settings: Settings) -> OutputFormat:
    if args.csv:
        logger.warning("-c/--csv is deprecated, use --format csv")
        fmt = OutputFormat.CSV
    elif args.format is not None:
        fmt = OutputFormat(args.format)
    else:
        fmt = settings.output_format

    if fmt is OutputFormat.JSON and args.compact:
        return OutputFormat.COMPACT_JSON
    return fmt


def load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid GPX_PROFILE_* environment setting: {e}") from e


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    fmt = resolve_format(args, settings)

    try:
        if args.file == "-":
            points = read_gpx(sys.stdin.buffer)
        else:
            points = read_gpx(args.file)

        if not points:
            raise NoPointsError("No points found in GPX file")

        result = analyze_elevation(points, args.distance)
        sys.stdout.write(format_result(result, fmt))
    except GpxProfileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
