"""Parse GPX 1.0/1.1 XML into a GPXDocument using xml.etree.ElementTree.

Handles metadata (name, desc, time, author, link), wpt (waypoints),
rte/rtept (route points) and trk/trkseg/trkpt (track points, segments
flattened). Every optional field degrades to None; only unparsable XML
is fatal.

Routes and tracks get distance, elevation and slope statistics computed
from their points at parse time.
"""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from datetime import datetime

from loguru import logger

from gpxgeo.errors import MalformedDocumentError, MissingRequiredAttributeError
from gpxgeo.geomath import cumulative_distance, elevation_stats, slope_percent
from gpxgeo.model import (
    Author,
    Email,
    GPXDocument,
    Link,
    Metadata,
    Point,
    Route,
    Track,
    Waypoint,
)
from gpxgeo.parsers.elements import (
    direct_child,
    element_text,
    find_descendants,
    find_first,
    float_attr,
    float_text,
    local_name,
    text_of,
)


def parse_gpx(gpx_string: str | bytes, *, strict_coordinates: bool = False) -> GPXDocument:
    """Parse a GPX XML document into a GPXDocument.

    Args:
        gpx_string: Raw GPX XML content.
        strict_coordinates: Raise instead of storing NaN when a point's
            lat/lon attribute is missing or not a number.

    Returns:
        A fully built, immutable GPXDocument.

    Raises:
        MalformedDocumentError: The content is not well-formed XML.
        MissingRequiredAttributeError: Bad lat/lon with strict_coordinates.
    """
    try:
        root = ET.fromstring(gpx_string)
    except ET.ParseError as e:
        logger.error(f"Failed to parse GPX: {e}")
        raise MalformedDocumentError(f"Invalid GPX document: {e}") from e

    metadata_elem = find_first(root, "metadata")
    metadata = _parse_metadata(metadata_elem) if metadata_elem is not None else None

    waypoints = tuple(
        _parse_waypoint(wpt, strict_coordinates)
        for wpt in find_descendants(root, "wpt")
    )
    routes = tuple(
        _parse_path(rte, "rtept", Route, strict_coordinates)
        for rte in find_descendants(root, "rte")
    )
    tracks = tuple(
        _parse_path(trk, "trkpt", Track, strict_coordinates)
        for trk in find_descendants(root, "trk")
    )

    logger.debug(
        f"Parsed GPX: {len(waypoints)} waypoints, {len(routes)} routes, "
        f"{len(tracks)} tracks, metadata={'yes' if metadata else 'no'}"
    )

    return GPXDocument(
        metadata=metadata,
        waypoints=waypoints,
        routes=routes,
        tracks=tracks,
    )


def _parse_metadata(metadata: ET.Element) -> Metadata:
    """Parse <metadata>; its own <link> is told apart from the author's."""
    author = None
    author_elem = find_first(metadata, "author")
    if author_elem is not None:
        author = _parse_author(author_elem)

    link = None
    link_elem = direct_child(metadata, "link")
    if link_elem is not None:
        link = _parse_link(link_elem)

    return Metadata(
        name=text_of(metadata, "name"),
        desc=text_of(metadata, "desc"),
        time=text_of(metadata, "time"),
        author=author,
        link=link,
    )


def _parse_author(author: ET.Element) -> Author:
    email = None
    email_elem = find_first(author, "email")
    if email_elem is not None:
        email = Email(id=email_elem.get("id"), domain=email_elem.get("domain"))

    link_elem = find_first(author, "link")
    link = _parse_link(link_elem) if link_elem is not None else Link()

    return Author(name=text_of(author, "name"), email=email, link=link)


def _parse_link(link: ET.Element) -> Link:
    return Link(
        href=link.get("href"),
        text=text_of(link, "text"),
        type=text_of(link, "type"),
    )


def _parse_time(text: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp; None when missing or unparsable."""
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Ignoring unparsable GPX time: {text!r}")
        return None


def _parse_lat_lon(elem: ET.Element, strict: bool) -> tuple[float, float]:
    """Read the required lat/lon attributes of a point element."""
    lat = float_attr(elem, "lat")
    lon = float_attr(elem, "lon")

    for name, value in (("lat", lat), ("lon", lon)):
        if not math.isnan(value):
            continue
        tag = local_name(elem.tag)
        if strict:
            raise MissingRequiredAttributeError(tag, name, elem.get(name))
        logger.warning(f"<{tag}> has unusable {name}={elem.get(name)!r}, storing NaN")

    return lat, lon


def _parse_point(elem: ET.Element, strict: bool) -> Point:
    lat, lon = _parse_lat_lon(elem, strict)
    return Point(
        lat=lat,
        lon=lon,
        ele=float_text(elem, "ele"),
        time=_parse_time(text_of(elem, "time")),
    )


def _parse_waypoint(wpt: ET.Element, strict: bool) -> Waypoint:
    """Parse a <wpt> element."""
    lat, lon = _parse_lat_lon(wpt, strict)
    return Waypoint(
        lat=lat,
        lon=lon,
        ele=float_text(wpt, "ele"),
        time=_parse_time(text_of(wpt, "time")),
        name=text_of(wpt, "name"),
        sym=text_of(wpt, "sym"),
        cmt=text_of(wpt, "cmt"),
        desc=text_of(wpt, "desc"),
    )


def _parse_path(
    elem: ET.Element,
    point_tag: str,
    cls: type[Route] | type[Track],
    strict: bool,
) -> Route | Track:
    """Parse a <rte> or <trk> element and compute its statistics.

    Track points from every <trkseg> are concatenated in document order.
    """
    type_elem = direct_child(elem, "type")
    link_elem = direct_child(elem, "link")

    points = tuple(
        _parse_point(pt, strict) for pt in find_descendants(elem, point_tag)
    )
    distance = cumulative_distance(points)

    return cls(
        name=text_of(elem, "name"),
        cmt=text_of(elem, "cmt"),
        desc=text_of(elem, "desc"),
        src=text_of(elem, "src"),
        number=text_of(elem, "number"),
        type=element_text(type_elem) if type_elem is not None else None,
        link=_parse_link(link_elem) if link_elem is not None else None,
        points=points,
        distance=distance,
        elevation=elevation_stats(points),
        slopes=slope_percent(points, distance.cumul),
    )
