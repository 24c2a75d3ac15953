"""
Route data types.

Plain dataclasses with no rendering state attached.
"""

from dataclasses import dataclass
from enum import Enum

from routelog.shared.geo import GeoPoint


class RouteState(str, Enum):
    """Lifecycle of a route-building session."""
    IDLE = "idle"           # No points, accepting clicks
    BUILDING = "building"   # One or more points, accepting clicks
    FINISHED = "finished"   # Frozen, awaiting commit


@dataclass(frozen=True)
class RoutePoint:
    """
    A point on a route.

    segment_distance_km is the great-circle distance from the previous
    point of the same route, 0 for the first point.
    """
    point: GeoPoint
    segment_distance_km: float = 0.0

    @property
    def lat(self) -> float:
        return self.point.lat

    @property
    def lng(self) -> float:
        return self.point.lng
