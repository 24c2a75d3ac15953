"""
Domain exceptions.

Every error raised by the route builder, workout model and store derives
from RouteLogError. The session controller turns them into CommandResult
values, so nothing past it has to catch these.
"""


class RouteLogError(Exception):
    """Base RouteLog error."""

    code = "error"


# =============================================================================
# Route building
# =============================================================================

class EmptyRouteError(RouteLogError):
    """Undo requested on a route with no points."""

    code = "empty_route"


class InsufficientPointsError(RouteLogError):
    """Finish or commit requested with fewer than two points."""

    code = "insufficient_points"


class RouteFinishedError(RouteLogError):
    """Editing requested on a route that is frozen awaiting commit."""

    code = "route_finished"


class RouteNotFinishedError(RouteLogError):
    """Submit requested before the route was finished."""

    code = "route_not_finished"


class InvalidPointError(RouteLogError):
    """Clicked coordinate is not a finite latitude/longitude."""

    code = "invalid_point"


# =============================================================================
# Workouts
# =============================================================================

class InvalidWorkoutInputError(RouteLogError):
    """
    One or more workout fields failed validation.

    Attributes:
        violations: Field name -> message, one entry per offending field
    """

    code = "invalid_input"

    def __init__(self, violations: dict[str, str]):
        self.violations = dict(violations)
        fields = ", ".join(sorted(self.violations))
        super().__init__(f"Invalid workout input: {fields}")


class WorkoutNotFoundError(RouteLogError):
    """No workout with the requested id."""

    code = "not_found"


# =============================================================================
# Persistence
# =============================================================================

class CorruptPersistedStateError(RouteLogError):
    """Persisted workout log could not be parsed or failed validation."""

    code = "corrupt_state"


class PersistenceError(RouteLogError):
    """Writing the workout log to the blob store failed."""

    code = "persistence_failed"


# =============================================================================
# Collaborators
# =============================================================================

class GeolocationError(RouteLogError):
    """Current position could not be determined."""

    code = "geolocation_failed"
