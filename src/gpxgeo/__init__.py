"""GPX parsing, route statistics and GeoJSON export.

Parsing uses only xml.etree.ElementTree; the resulting GPXDocument is
immutable and holds no references into the XML tree.
"""

from gpxgeo.errors import GPXError, MalformedDocumentError, MissingRequiredAttributeError
from gpxgeo.exporters.geojson import export_geojson
from gpxgeo.model import (
    Author,
    Distance,
    Elevation,
    Email,
    GPXDocument,
    Link,
    Metadata,
    Point,
    Route,
    Track,
    Waypoint,
)
from gpxgeo.parsers.gpx import parse_gpx

__all__ = [
    "Author",
    "Distance",
    "Elevation",
    "Email",
    "GPXDocument",
    "GPXError",
    "Link",
    "MalformedDocumentError",
    "Metadata",
    "MissingRequiredAttributeError",
    "Point",
    "Route",
    "Track",
    "Waypoint",
    "export_geojson",
    "parse_gpx",
]
