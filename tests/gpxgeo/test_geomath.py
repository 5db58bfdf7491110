"""Tests for geomath: earth radius, distance, cumulative distance, elevation, slope."""

import math

import pytest

from gpxgeo.geomath import (
    EQUATORIAL_RADIUS_M,
    POLAR_RADIUS_M,
    cumulative_distance,
    distance_between,
    earth_radius_at_latitude,
    elevation_stats,
    slope_percent,
)
from gpxgeo.model import Point

# Latitude offset of ~1000 m along the prime meridian at the equator
_KM_LAT = 0.0089831528

PARIS = Point(lat=48.8566, lon=2.3522)
LONDON = Point(lat=51.5074, lon=-0.1278)


def _pts(*eles):
    """Points 1 km apart along the meridian with the given elevations."""
    return [Point(lat=i * _KM_LAT, lon=0.0, ele=e) for i, e in enumerate(eles)]


@pytest.mark.unit
class TestEarthRadius:
    """Latitude-dependent radius of the oblate Earth."""

    def test_equator_is_equatorial_radius(self):
        assert earth_radius_at_latitude(0.0) == pytest.approx(EQUATORIAL_RADIUS_M)

    def test_pole_is_polar_radius(self):
        assert earth_radius_at_latitude(90.0) == pytest.approx(POLAR_RADIUS_M)
        assert earth_radius_at_latitude(-90.0) == pytest.approx(POLAR_RADIUS_M)

    def test_radius_decreases_towards_pole(self):
        assert earth_radius_at_latitude(30.0) > earth_radius_at_latitude(60.0)


@pytest.mark.unit
class TestDistanceBetween:
    """Great-circle distance between two points."""

    def test_same_point_is_zero(self):
        assert distance_between(PARIS, PARIS) == 0.0

    def test_symmetric(self):
        assert distance_between(PARIS, LONDON) == pytest.approx(
            distance_between(LONDON, PARIS)
        )

    def test_paris_london(self):
        """Roughly 343 km between the two city centres."""
        assert distance_between(PARIS, LONDON) == pytest.approx(343_500, rel=0.01)

    def test_one_km_along_meridian(self):
        a, b = _pts(None, None)
        assert distance_between(a, b) == pytest.approx(1000.0, rel=1e-4)

    def test_nan_coordinate_propagates(self):
        bad = Point(lat=math.nan, lon=2.0)
        assert math.isnan(distance_between(bad, PARIS))


@pytest.mark.unit
class TestCumulativeDistance:
    """Distance object: total plus one cumulative entry per point."""

    def test_empty(self):
        d = cumulative_distance([])
        assert d.total == 0.0
        assert d.cumul == ()

    def test_single_point(self):
        d = cumulative_distance([PARIS])
        assert d.total == 0.0
        assert d.cumul == (0.0,)

    def test_length_matches_points(self):
        pts = _pts(1, 2, 3, 4)
        d = cumulative_distance(pts)
        assert len(d.cumul) == len(pts)

    def test_last_equals_total(self):
        d = cumulative_distance(_pts(1, 2, 3, 4))
        assert d.cumul[-1] == d.total
        assert d.total == pytest.approx(3000.0, rel=1e-4)

    def test_non_decreasing(self):
        pts = [PARIS, LONDON, PARIS, PARIS, LONDON]
        cumul = cumulative_distance(pts).cumul
        assert all(b >= a for a, b in zip(cumul, cumul[1:]))

    def test_starts_at_zero(self):
        assert cumulative_distance(_pts(1, 2)).cumul[0] == 0.0


@pytest.mark.unit
class TestElevationStats:
    """Gain/loss/min/max/avg with absent elevations skipped."""

    def test_flat_profile(self):
        """Zero deltas count as neither gain nor loss."""
        e = elevation_stats(_pts(100, 100, 100))
        assert e.pos is None
        assert e.neg is None
        assert e.avg == 100
        assert e.max == 100
        assert e.min == 100

    def test_no_elevations(self):
        e = elevation_stats(_pts(None, None, None))
        assert e.max is None
        assert e.min is None
        assert e.pos is None
        assert e.neg is None
        assert e.avg is None

    def test_empty_sequence(self):
        e = elevation_stats([])
        assert e.avg is None

    def test_gain_and_loss(self):
        """Pairs touching a missing elevation are skipped."""
        e = elevation_stats(_pts(100, 150, 120, None, 130))
        assert e.pos == pytest.approx(50)
        assert e.neg == pytest.approx(30)
        assert e.max == 150
        assert e.min == 100
        assert e.avg == pytest.approx(125)

    def test_zero_elevation_is_a_value(self):
        e = elevation_stats(_pts(0.0, 0.0))
        assert e.max == 0.0
        assert e.min == 0.0
        assert e.avg == 0.0

    def test_descent_only(self):
        e = elevation_stats(_pts(200, 150, 100))
        assert e.pos is None
        assert e.neg == pytest.approx(100)


@pytest.mark.unit
class TestSlopePercent:
    """Per-pair percent grade."""

    def test_five_percent(self):
        pts = _pts(100, 150)
        slopes = slope_percent(pts, cumulative_distance(pts).cumul)
        assert len(slopes) == 1
        assert slopes[0] == pytest.approx(5.0, rel=1e-4)

    def test_one_entry_per_pair(self):
        pts = _pts(1, 2, 3, 4, 5)
        assert len(slope_percent(pts, cumulative_distance(pts).cumul)) == 4

    def test_empty_and_single(self):
        assert slope_percent([], ()) == ()
        assert slope_percent([PARIS], (0.0,)) == ()

    def test_missing_elevation_is_nan(self):
        pts = _pts(100, None, 120)
        slopes = slope_percent(pts, cumulative_distance(pts).cumul)
        assert math.isnan(slopes[0])
        assert math.isnan(slopes[1])

    def test_duplicate_point_is_nan(self):
        """Zero horizontal distance gives NaN instead of raising."""
        pts = [Point(lat=1.0, lon=1.0, ele=10.0), Point(lat=1.0, lon=1.0, ele=12.0)]
        slopes = slope_percent(pts, cumulative_distance(pts).cumul)
        assert math.isnan(slopes[0])

    def test_negative_grade(self):
        pts = _pts(150, 100)
        slopes = slope_percent(pts, cumulative_distance(pts).cumul)
        assert slopes[0] == pytest.approx(-5.0, rel=1e-4)
