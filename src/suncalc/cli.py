"""CLI entry point: sun position and sun times for a place and instant.

Examples:
    suncalc --lat 55 --lng -3 --when 2012-06-22T12:00:00Z
    suncalc --address "Busan" --tz auto --lang ko
    suncalc --format json --chart results/today.png
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from pytz import utc

from suncalc.compute import InvalidCoordinateError, run
from suncalc.config import ConfigError, load_settings
from suncalc.location import GeocodingError, resolve_timezone
from suncalc.models import QueryInput
from suncalc.renderers.static import save_daylight_chart
from suncalc.renderers.text import render_json, render_text

logger = logging.getLogger(__name__)


def parse_when(value: str) -> datetime:
    """Parse an ISO 8601 instant. A trailing 'Z' means UTC; naive means UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid ISO 8601 time: {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suncalc",
        description="Sun position and sunrise/sunset/twilight times for a location.",
    )
    parser.add_argument("--lat", type=float, help="latitude in degrees (north positive)")
    parser.add_argument("--lng", type=float, help="longitude in degrees (east positive)")
    parser.add_argument("--address", help="address to geocode instead of --lat/--lng")
    parser.add_argument(
        "--when", type=parse_when, help="ISO 8601 instant (default: now, UTC)"
    )
    parser.add_argument(
        "--tz", help="display time zone: IANA name or 'auto' (default: UTC)"
    )
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument("--lang", choices=("en", "ko"), default="en")
    parser.add_argument("--chart", help="also write a PNG altitude chart to this path")
    parser.add_argument(
        "--legacy-altitude",
        action="store_true",
        help="report the historical sin-based altitude value instead of the angle",
    )
    parser.add_argument(
        "--strict", action="store_true", help="reject out-of-range coordinates"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if (args.lat is None) != (args.lng is None):
        parser.error("--lat and --lng must be given together")

    try:
        settings = load_settings()
    except ConfigError as e:
        parser.error(str(e))

    lat, lng = args.lat, args.lng
    if lat is None and not args.address:
        lat, lng = settings.observer.lat, settings.observer.lng
        logger.debug("Using configured observer %s", settings.observer)

    query = QueryInput(
        lat=lat, lng=lng, address=args.address, when=args.when or datetime.now(utc)
    )

    try:
        report = run(
            query,
            user_agent=settings.user_agent,
            legacy_altitude=args.legacy_altitude,
            strict=args.strict,
        )
        tz = resolve_timezone(
            report.observer.lat, report.observer.lng, args.tz or settings.timezone
        )
    except (GeocodingError, InvalidCoordinateError) as e:
        parser.error(str(e))

    if args.format == "json":
        print(render_json(report, tz))
    else:
        print(render_text(report, tz, lang=args.lang))

    if args.chart:
        path = save_daylight_chart(report, Path(args.chart), tz=tz, lang=args.lang)
        print(f"Saved: {path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
