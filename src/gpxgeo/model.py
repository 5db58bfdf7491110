"""Frozen dataclasses for a parsed GPX document.

Every entity is immutable once built and sequences are tuples, so a
GPXDocument can be shared between readers without copying. Optional
fields use None; an elevation of 0.0 is a real value, never "missing".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Point:
    """A single route or track point.

    Attributes:
        lat: Latitude in degrees (NaN when the attribute was unusable).
        lon: Longitude in degrees (NaN when the attribute was unusable).
        ele: Elevation in meters, or None.
        time: Timestamp of the fix, or None.
    """

    lat: float
    lon: float
    ele: float | None = None
    time: datetime | None = None


@dataclass(frozen=True)
class Waypoint(Point):
    """A named point of interest (<wpt>)."""

    name: str | None = None
    sym: str | None = None
    cmt: str | None = None
    desc: str | None = None


@dataclass(frozen=True)
class Link:
    href: str | None = None
    text: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class Email:
    id: str | None = None
    domain: str | None = None


@dataclass(frozen=True)
class Author:
    """Metadata author. ``link`` is always present, possibly empty."""

    name: str | None = None
    email: Email | None = None
    link: Link = field(default_factory=Link)


@dataclass(frozen=True)
class Metadata:
    """Document-level <metadata>. ``time`` is kept as the raw text."""

    name: str | None = None
    desc: str | None = None
    time: str | None = None
    author: Author | None = None
    link: Link | None = None


@dataclass(frozen=True)
class Distance:
    """Total and cumulative distance in meters.

    ``cumul[i]`` is the distance from the first point through point i and
    has one entry per point.
    """

    total: float = 0.0
    cumul: tuple[float, ...] = ()


@dataclass(frozen=True)
class Elevation:
    """Elevation aggregates in meters; None when nothing was recorded."""

    max: float | None = None
    min: float | None = None
    pos: float | None = None
    neg: float | None = None
    avg: float | None = None


@dataclass(frozen=True)
class BasePath:
    """Shared shape of routes and tracks."""

    name: str | None = None
    cmt: str | None = None
    desc: str | None = None
    src: str | None = None
    number: str | None = None
    type: str | None = None
    link: Link | None = None
    points: tuple[Point, ...] = ()
    distance: Distance = field(default_factory=Distance)
    elevation: Elevation = field(default_factory=Elevation)
    slopes: tuple[float, ...] = ()


@dataclass(frozen=True)
class Route(BasePath):
    """A planned sequence of <rtept> points."""


@dataclass(frozen=True)
class Track(BasePath):
    """A recorded sequence of <trkpt> points, all segments flattened."""


@dataclass(frozen=True)
class GPXDocument:
    """A fully parsed GPX document.

    Attributes:
        metadata: The <metadata> block, or None if the document has none.
        waypoints: Waypoints in document order.
        routes: Routes in document order.
        tracks: Tracks in document order.
    """

    metadata: Metadata | None = None
    waypoints: tuple[Waypoint, ...] = ()
    routes: tuple[Route, ...] = ()
    tracks: tuple[Track, ...] = ()

    def to_geojson(self) -> dict:
        """Export this document as a GeoJSON FeatureCollection dict."""
        from gpxgeo.exporters.geojson import export_geojson

        return export_geojson(self)
