"""Distance, elevation and slope over ordered point sequences.

Pure functions with no dependencies beyond math. Distances use the
Vincenty central angle scaled by the local radius of an oblate Earth.
Points only need ``lat``, ``lon`` and ``ele`` attributes.
"""

from __future__ import annotations

import math
from typing import Sequence

from gpxgeo.model import Distance, Elevation, Point

# WGS84 equatorial and polar radii (meters)
EQUATORIAL_RADIUS_M = 6378137.0
POLAR_RADIUS_M = 6356752.3


def earth_radius_at_latitude(lat_deg: float) -> float:
    """Local Earth radius in meters at the given latitude (degrees)."""
    phi = math.radians(lat_deg)
    r1, r2 = EQUATORIAL_RADIUS_M, POLAR_RADIUS_M
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)
    num = (r1 * r1 * cos_phi) ** 2 + (r2 * r2 * sin_phi) ** 2
    den = (r1 * cos_phi) ** 2 + (r2 * sin_phi) ** 2
    return math.sqrt(num / den)


def distance_between(p1: Point, p2: Point) -> float:
    """Great-circle distance between two points in meters.

    Args:
        p1, p2: Points with lat/lon in degrees.

    Returns:
        Distance in meters. NaN if either coordinate is NaN.
    """
    lat1 = math.radians(p1.lat)
    lon1 = math.radians(p1.lon)
    lat2 = math.radians(p2.lat)
    lon2 = math.radians(p2.lon)
    dlon = lon2 - lon1

    a = (math.cos(lat2) * math.sin(dlon)) ** 2 + (
        math.cos(lat1) * math.sin(lat2)
        - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    ) ** 2
    b = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(dlon)
    angle = math.atan2(math.sqrt(a), b)

    return angle * earth_radius_at_latitude((p1.lat + p2.lat) / 2)


def cumulative_distance(points: Sequence[Point]) -> Distance:
    """Total and running distance along a point sequence.

    ``cumul[i]`` is the distance from the first point through point i, so
    ``cumul[0]`` is 0.0 and the last entry equals the total. An empty
    sequence gives ``()``.
    """
    if not points:
        return Distance(total=0.0, cumul=())

    total = 0.0
    cumul: list[float] = [0.0]
    for i in range(len(points) - 1):
        total += distance_between(points[i], points[i + 1])
        cumul.append(total)

    return Distance(total=total, cumul=tuple(cumul))


def elevation_stats(points: Sequence[Point]) -> Elevation:
    """Gain, loss, max, min and mean elevation of a point sequence.

    Pairs with a missing elevation are skipped. ``pos``/``neg`` stay None
    when no climb/descent was accumulated; all fields are None when no
    point carries an elevation.
    """
    gain = 0.0
    loss = 0.0
    for i in range(len(points) - 1):
        ele, next_ele = points[i].ele, points[i + 1].ele
        if ele is None or next_ele is None:
            continue
        diff = next_ele - ele
        if diff < 0:
            loss += diff
        elif diff > 0:
            gain += diff

    elevations = [p.ele for p in points if p.ele is not None]
    if not elevations:
        return Elevation()

    return Elevation(
        max=max(elevations),
        min=min(elevations),
        pos=abs(gain) if gain else None,
        neg=abs(loss) if loss else None,
        avg=sum(elevations) / len(elevations),
    )


def slope_percent(points: Sequence[Point], cumul: Sequence[float]) -> tuple[float, ...]:
    """Percent grade for each consecutive pair of points.

    Entries are NaN when either elevation is missing or the two points
    share the same cumulative distance.
    """
    slopes: list[float] = []
    for i in range(len(points) - 1):
        ele, next_ele = points[i].ele, points[i + 1].ele
        run = cumul[i + 1] - cumul[i]
        if ele is None or next_ele is None or run == 0:
            slopes.append(math.nan)
            continue
        slopes.append((next_ele - ele) * 100 / run)
    return tuple(slopes)
