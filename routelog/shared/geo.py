"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    """A map coordinate in degrees."""
    lat: float
    lng: float


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push a a hair past 1 for near-antipodal points
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two GeoPoints, in kilometers."""
    return haversine(a.lat, a.lng, b.lat, b.lng)


def total_distance_km(points: Sequence[GeoPoint]) -> float:
    """
    Calculate total distance along an ordered sequence of points.

    Args:
        points: Route points in travel order

    Returns:
        Total distance in kilometers (0 for fewer than two points)
    """
    total = 0.0

    for i in range(1, len(points)):
        total += distance_km(points[i - 1], points[i])

    return total


def bounds(points: Iterable[GeoPoint]) -> tuple[GeoPoint, GeoPoint]:
    """
    Bounding box of a set of points.

    Returns:
        (south_west, north_east) corners

    Raises:
        ValueError: If points is empty
    """
    points = list(points)
    if not points:
        raise ValueError("Cannot compute bounds of an empty point set")

    lats = [p.lat for p in points]
    lngs = [p.lng for p in points]
    return GeoPoint(min(lats), min(lngs)), GeoPoint(max(lats), max(lngs))
