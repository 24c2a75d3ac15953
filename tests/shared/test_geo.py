"""
Tests for shared geographic functions.

Tests the haversine distance, point distance and bounds helpers.
"""

import pytest

from routelog.shared.geo import (
    GeoPoint,
    haversine,
    distance_km,
    total_distance_km,
    bounds,
    EARTH_RADIUS_KM,
)


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        dist = haversine(43.0, 76.0, 43.0, 76.0)
        assert dist == 0.0

    def test_east_west_distance(self):
        """At equator, 1 degree longitude ≈ 111.2 km."""
        dist = haversine(0.0, 0.0, 0.0, 1.0)
        assert dist == pytest.approx(111.19, abs=0.05)

    def test_north_south_distance(self):
        """1 degree latitude ≈ 111 km everywhere."""
        dist = haversine(0.0, 0.0, 1.0, 0.0)
        assert 110 < dist < 112

    def test_earth_radius_constant(self):
        """Verify Earth radius constant is correct."""
        assert EARTH_RADIUS_KM == 6371.0

    def test_negative_coordinates(self):
        """Sydney to Melbourne, ~714 km."""
        dist = haversine(-33.8688, 151.2093, -37.8136, 144.9631)
        assert 700 < dist < 730

    def test_antipodal(self):
        """Antipodal points are half the circumference apart."""
        dist = haversine(0.0, 0.0, 0.0, 180.0)
        assert dist == pytest.approx(EARTH_RADIUS_KM * 3.141592653589793, rel=1e-9)

    def test_short_pedestrian_hop(self):
        """A few meters apart stays positive and sensible."""
        dist = haversine(51.5, -0.09, 51.50001, -0.09)
        assert 0.001 < dist < 0.0012


# =============================================================================
# Test distance_km
# =============================================================================

class TestDistanceKm:
    """Tests for distance_km on GeoPoints."""

    @pytest.mark.parametrize("point", [
        GeoPoint(0.0, 0.0),
        GeoPoint(43.238949, 76.945465),
        GeoPoint(-89.9, 179.9),
        GeoPoint(51.5, -0.09),
    ])
    def test_zero_for_same_point(self, point):
        assert distance_km(point, point) == 0.0

    @pytest.mark.parametrize("a,b", [
        (GeoPoint(43.0, 76.0), GeoPoint(44.0, 77.0)),
        (GeoPoint(-33.8688, 151.2093), GeoPoint(-37.8136, 144.9631)),
        (GeoPoint(51.5, -0.09), GeoPoint(51.5002, -0.0903)),
    ])
    def test_symmetry(self, a, b):
        """Distance A->B should equal B->A."""
        assert distance_km(a, b) == pytest.approx(distance_km(b, a), rel=1e-12)

    def test_matches_haversine(self):
        a, b = GeoPoint(43.0, 76.0), GeoPoint(43.001, 76.0)
        assert distance_km(a, b) == haversine(43.0, 76.0, 43.001, 76.0)


# =============================================================================
# Test total_distance_km / bounds
# =============================================================================

class TestTotalDistance:

    def test_empty_and_single(self):
        assert total_distance_km([]) == 0.0
        assert total_distance_km([GeoPoint(1.0, 1.0)]) == 0.0

    def test_sum_of_legs(self):
        points = [GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0), GeoPoint(1.0, 1.0)]
        expected = distance_km(points[0], points[1]) + distance_km(points[1], points[2])
        assert total_distance_km(points) == expected


class TestBounds:

    def test_corners(self):
        sw, ne = bounds([GeoPoint(1.0, 5.0), GeoPoint(-2.0, 7.0), GeoPoint(0.5, 6.0)])
        assert sw == GeoPoint(-2.0, 5.0)
        assert ne == GeoPoint(1.0, 7.0)

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            bounds([])
