"""
Shared utilities (NOT business logic).

Usage:
    from routelog.shared import GeoPoint, distance_km
    from routelog.shared.formatters import format_workout_title
"""
from .geo import (
    GeoPoint,
    haversine,
    distance_km,
    total_distance_km,
    bounds,
    EARTH_RADIUS_KM,
)
from .formatters import (
    format_distance_km,
    format_metric,
    format_workout_title,
    workout_summary,
)
from .constants import (
    WorkoutKind,
    WORKOUT_LOG_VERSION,
    MONTHS,
)
from .errors import (
    RouteLogError,
    EmptyRouteError,
    InsufficientPointsError,
    RouteFinishedError,
    RouteNotFinishedError,
    InvalidPointError,
    InvalidWorkoutInputError,
    WorkoutNotFoundError,
    CorruptPersistedStateError,
    PersistenceError,
    GeolocationError,
)

__all__ = [
    # geo
    "GeoPoint",
    "haversine",
    "distance_km",
    "total_distance_km",
    "bounds",
    "EARTH_RADIUS_KM",
    # formatters
    "format_distance_km",
    "format_metric",
    "format_workout_title",
    "workout_summary",
    # constants
    "WorkoutKind",
    "WORKOUT_LOG_VERSION",
    "MONTHS",
    # errors
    "RouteLogError",
    "EmptyRouteError",
    "InsufficientPointsError",
    "RouteFinishedError",
    "RouteNotFinishedError",
    "InvalidPointError",
    "InvalidWorkoutInputError",
    "WorkoutNotFoundError",
    "CorruptPersistedStateError",
    "PersistenceError",
    "GeolocationError",
]
