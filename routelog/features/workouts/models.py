"""
Workout model.

Immutable workout records built from a finished route:
- Workout: abstract base with the fields every kind shares
- RunningWorkout: cadence, pace in min/km
- HikingWorkout: elevation gain, speed in km/h

Every variant validates itself on construction and reports all offending
fields at once, so derived metrics are only reachable on valid records.
"""

import math
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from numbers import Real
from typing import ClassVar, Iterable, Optional

from routelog.features.route.models import RoutePoint
from routelog.shared.constants import DISTANCE_REL_TOLERANCE, WorkoutKind
from routelog.shared.errors import InvalidWorkoutInputError

MIN_ROUTE_POINTS = 2


def _is_finite(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _check_positive(violations: dict[str, str], name: str, value) -> None:
    if not _is_finite(value):
        violations[name] = "must be a finite number"
    elif value <= 0:
        violations[name] = "must be greater than 0"


def _check_finite(violations: dict[str, str], name: str, value) -> None:
    if not _is_finite(value):
        violations[name] = "must be a finite number"


@dataclass(frozen=True)
class Workout(ABC):
    """
    A logged workout.

    Attributes:
        id: Unique id assigned at creation
        created_at: Timezone-aware creation time
        route: Immutable copy of the route points
        distance_km: Total distance, equal to the sum of segment distances
        duration_min: Duration in minutes
    """
    id: str
    created_at: datetime
    route: tuple[RoutePoint, ...]
    distance_km: float
    duration_min: float

    kind: ClassVar[WorkoutKind]
    extra_field: ClassVar[str]  # Name of the kind-specific field

    def __post_init__(self):
        # Callers may hand in any sequence; store a tuple
        object.__setattr__(self, "route", tuple(self.route))

        violations: dict[str, str] = {}
        self._validate_common(violations)
        self._validate_extra(violations)
        if violations:
            raise InvalidWorkoutInputError(violations)

    def _validate_common(self, violations: dict[str, str]) -> None:
        _check_positive(violations, "distance_km", self.distance_km)
        _check_positive(violations, "duration_min", self.duration_min)

        if len(self.route) < MIN_ROUTE_POINTS:
            violations["route"] = f"must have at least {MIN_ROUTE_POINTS} points"
        elif any(
            not _is_finite(p.segment_distance_km) or p.segment_distance_km < 0
            for p in self.route
        ):
            violations["route"] = "segment distances must be finite and non-negative"
        elif "distance_km" not in violations:
            segment_sum = sum(p.segment_distance_km for p in self.route)
            if not math.isclose(
                self.distance_km, segment_sum, rel_tol=DISTANCE_REL_TOLERANCE
            ):
                violations["distance_km"] = (
                    f"must equal the route's segment total ({segment_sum:.6f} km)"
                )

        if self.created_at.tzinfo is None:
            violations["created_at"] = "must be timezone-aware"

    @abstractmethod
    def _validate_extra(self, violations: dict[str, str]) -> None:
        """Add violations for the kind-specific field."""
        pass

    # =========================================================================
    # Capabilities
    # =========================================================================

    @abstractmethod
    def derived_metric(self) -> float:
        """Effort metric derived from distance and duration."""
        pass

    @abstractmethod
    def derived_unit(self) -> str:
        pass

    @abstractmethod
    def display_icon(self) -> str:
        pass

    @abstractmethod
    def extra_value(self) -> float:
        """Value of the kind-specific field."""
        pass

    @abstractmethod
    def extra_unit(self) -> str:
        pass

    @abstractmethod
    def extra_icon(self) -> str:
        pass

    @property
    def label(self) -> str:
        """Kind name for display, e.g. 'Running'."""
        return self.kind.value.capitalize()

    @property
    def start(self) -> RoutePoint:
        return self.route[0]

    @property
    def end(self) -> RoutePoint:
        return self.route[-1]


@dataclass(frozen=True)
class RunningWorkout(Workout):
    """Running workout; effort metric is pace in min/km."""
    cadence_spm: float

    kind: ClassVar[WorkoutKind] = WorkoutKind.RUNNING
    extra_field: ClassVar[str] = "cadence_spm"

    def _validate_extra(self, violations: dict[str, str]) -> None:
        _check_positive(violations, "cadence_spm", self.cadence_spm)

    def derived_metric(self) -> float:
        return self.duration_min / self.distance_km

    def derived_unit(self) -> str:
        return "min/km"

    def display_icon(self) -> str:
        return "🏃‍♂️"

    def extra_value(self) -> float:
        return self.cadence_spm

    def extra_unit(self) -> str:
        return "spm"

    def extra_icon(self) -> str:
        return "🦶🏼"


@dataclass(frozen=True)
class HikingWorkout(Workout):
    """Hiking workout; effort metric is speed in km/h. Elevation gain may be negative."""
    elevation_gain_m: float

    kind: ClassVar[WorkoutKind] = WorkoutKind.HIKING
    extra_field: ClassVar[str] = "elevation_gain_m"

    def _validate_extra(self, violations: dict[str, str]) -> None:
        _check_finite(violations, "elevation_gain_m", self.elevation_gain_m)

    def derived_metric(self) -> float:
        return self.distance_km / (self.duration_min / 60)

    def derived_unit(self) -> str:
        return "km/h"

    def display_icon(self) -> str:
        return "🥾"

    def extra_value(self) -> float:
        return self.elevation_gain_m

    def extra_unit(self) -> str:
        return "m"

    def extra_icon(self) -> str:
        return "⛰"


# =============================================================================
# Factories
# =============================================================================

def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_running(
    route: Iterable[RoutePoint],
    distance_km: float,
    duration_min: float,
    cadence_spm: float,
    workout_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> RunningWorkout:
    """
    Create a running workout.

    Args:
        route: Finished route points
        distance_km: Route total in kilometers
        duration_min: Duration in minutes
        cadence_spm: Cadence in steps per minute
        workout_id: Existing id when rebuilding a stored workout
        created_at: Existing creation time when rebuilding a stored workout

    Raises:
        InvalidWorkoutInputError: Listing every invalid field
    """
    return RunningWorkout(
        id=workout_id or _new_id(),
        created_at=created_at or _now(),
        route=tuple(route),
        distance_km=distance_km,
        duration_min=duration_min,
        cadence_spm=cadence_spm,
    )


def create_hiking(
    route: Iterable[RoutePoint],
    distance_km: float,
    duration_min: float,
    elevation_gain_m: float,
    workout_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> HikingWorkout:
    """
    Create a hiking workout.

    Same as create_running, with elevation gain (any finite value) in place
    of cadence.
    """
    return HikingWorkout(
        id=workout_id or _new_id(),
        created_at=created_at or _now(),
        route=tuple(route),
        distance_km=distance_km,
        duration_min=duration_min,
        elevation_gain_m=elevation_gain_m,
    )


# Factory registry: the only place that maps a kind to its variant
WORKOUT_FACTORIES = {
    WorkoutKind.RUNNING: create_running,
    WorkoutKind.HIKING: create_hiking,
}

WORKOUT_CLASSES: dict[WorkoutKind, type[Workout]] = {
    WorkoutKind.RUNNING: RunningWorkout,
    WorkoutKind.HIKING: HikingWorkout,
}


def kindless_violations(duration_min, extra) -> dict[str, str]:
    """
    Violations that can be found without knowing the workout kind.

    Used when the kind itself is invalid, so the caller still gets every
    offending field. The kind-specific value is reported as "extra".
    """
    violations: dict[str, str] = {}
    _check_positive(violations, "duration_min", duration_min)
    _check_finite(violations, "extra", extra)
    return violations
