"""Export a GPXDocument to a GeoJSON FeatureCollection dict.

Uses only plain dicts and lists so the result serializes with stdlib
json. Coordinates are [lon, lat, ele] (GeoJSON order); ele is None when
the point has no elevation and a NaN lat/lon is also written as None, so
the output stays valid JSON. Features are emitted tracks first, then
routes, then waypoints.
"""

from __future__ import annotations

import math

from gpxgeo.model import Author, BasePath, GPXDocument, Link, Metadata, Point, Waypoint


def export_geojson(document: GPXDocument) -> dict:
    """Export a GPXDocument to a GeoJSON FeatureCollection dict.

    Args:
        document: The parsed document.

    Returns:
        Dict representing a GeoJSON FeatureCollection whose top-level
        properties mirror the document metadata.
    """
    features = []
    for track in document.tracks:
        features.append(_path_to_geojson(track))
    for route in document.routes:
        features.append(_path_to_geojson(route))
    for waypoint in document.waypoints:
        features.append(_waypoint_to_geojson(waypoint))

    return {
        "type": "FeatureCollection",
        "features": features,
        "properties": _metadata_properties(document.metadata),
    }


def _coordinates(point: Point) -> list:
    """[lon, lat, ele] with non-finite values written as None."""
    return [_finite_or_none(v) for v in (point.lon, point.lat, point.ele)]


def _finite_or_none(value: float | None) -> float | None:
    if value is None or not math.isfinite(value):
        return None
    return value


def _link_to_dict(link: Link | None) -> dict | None:
    if link is None:
        return None
    return {"href": link.href, "text": link.text, "type": link.type}


def _author_to_dict(author: Author | None) -> dict | None:
    if author is None:
        return None
    email = None
    if author.email is not None:
        email = {"id": author.email.id, "domain": author.email.domain}
    return {
        "name": author.name,
        "email": email,
        "link": _link_to_dict(author.link),
    }


def _metadata_properties(metadata: Metadata | None) -> dict:
    if metadata is None:
        metadata = Metadata()
    return {
        "name": metadata.name,
        "desc": metadata.desc,
        "time": metadata.time,
        "author": _author_to_dict(metadata.author),
        "link": _link_to_dict(metadata.link),
    }


def _path_to_geojson(path: BasePath) -> dict:
    """Convert a Route or Track to a LineString Feature dict."""
    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [_coordinates(pt) for pt in path.points],
        },
        "properties": {
            "name": path.name,
            "cmt": path.cmt,
            "desc": path.desc,
            "src": path.src,
            "number": path.number,
            "link": _link_to_dict(path.link),
            "type": path.type,
        },
    }


def _waypoint_to_geojson(waypoint: Waypoint) -> dict:
    """Convert a Waypoint to a Point Feature dict."""
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": _coordinates(waypoint),
        },
        "properties": {
            "name": waypoint.name,
            "sym": waypoint.sym,
            "cmt": waypoint.cmt,
            "desc": waypoint.desc,
        },
    }
