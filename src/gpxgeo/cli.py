"""Command-line entry point: convert or summarize a GPX file.

Usage:
    gpxgeo FILE [--summary] [--indent N] [--strict | --no-strict]

Prints the document as GeoJSON, or with --summary one line per track
and route with point count, distance and elevation gain/loss.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from gpxgeo.config import settings
from gpxgeo.errors import GPXError
from gpxgeo.model import BasePath, GPXDocument
from gpxgeo.parsers.gpx import parse_gpx


def _format_path(kind: str, path: BasePath) -> str:
    gain = path.elevation.pos or 0.0
    loss = path.elevation.neg or 0.0
    return (
        f"{kind:<6} {path.name or '(unnamed)':<30} "
        f"{len(path.points):>6} pts  {path.distance.total / 1000:8.2f} km  "
        f"+{gain:.0f} m / -{loss:.0f} m"
    )


def format_summary(document: GPXDocument) -> str:
    """One line per track and route, plus the waypoint count."""
    lines = []
    if document.metadata is not None and document.metadata.name:
        lines.append(document.metadata.name)
    for track in document.tracks:
        lines.append(_format_path("track", track))
    for route in document.routes:
        lines.append(_format_path("route", route))
    lines.append(f"{len(document.waypoints)} waypoints")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert a GPX file to GeoJSON or print route statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("file", type=Path, help="GPX file to read")
    parser.add_argument(
        "--summary", action="store_true",
        help="Print distance/elevation per track and route instead of GeoJSON",
    )
    parser.add_argument(
        "--indent", type=int, default=settings.geojson_indent,
        help=f"GeoJSON indentation (default: {settings.geojson_indent})",
    )
    parser.add_argument(
        "--strict", action=argparse.BooleanOptionalAction,
        default=settings.strict_coordinates,
        help="Fail on missing or non-numeric lat/lon instead of storing NaN",
    )
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    try:
        content = args.file.read_bytes()
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return 1

    try:
        document = parse_gpx(content, strict_coordinates=args.strict)
    except GPXError as e:
        logger.error(f"{args.file}: {e}")
        return 1

    if args.summary:
        print(format_summary(document))
    else:
        print(json.dumps(document.to_geojson(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
