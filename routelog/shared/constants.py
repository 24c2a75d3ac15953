"""
Unified constants for workout kinds and display.

This module provides a single source of truth for workout kind naming
across the entire application.
"""

from enum import Enum


class WorkoutKind(str, Enum):
    """
    Kinds of workout a finished route can be logged as.

    Used in:
    - Form submissions
    - Persisted workout records
    """
    RUNNING = "running"
    HIKING = "hiking"


# Version tag written into every persisted workout log blob
WORKOUT_LOG_VERSION = 1

# Relative tolerance when checking a distance against its route's segment sum
DISTANCE_REL_TOLERANCE = 1e-9

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Renderable id prefixes on the map surface
ROUTE_MARKER_PREFIX = "route-marker"
ROUTE_SEGMENT_PREFIX = "route-segment"
WORKOUT_MARKER_PREFIX = "workout-marker"
LOCATED_PREFIX = "located"

# Key suffix under which an unreadable workout log is kept before it is replaced
CORRUPT_BACKUP_SUFFIX = ".corrupt"
