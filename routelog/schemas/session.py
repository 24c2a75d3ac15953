"""
Session API schemas.

Pydantic models for API request/response.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from routelog.features.route import RoutePoint, RouteState
from routelog.features.workouts import Workout
from routelog.features.workouts.models import WORKOUT_CLASSES
from routelog.shared.constants import WorkoutKind
from routelog.shared.formatters import format_distance_km, format_workout_title, workout_summary


# =============================================================================
# Route
# =============================================================================

class PointIn(BaseModel):
    """Clicked map coordinate."""
    model_config = ConfigDict(allow_inf_nan=False)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class PointOut(BaseModel):
    lat: float
    lng: float


class RoutePointOut(BaseModel):
    lat: float
    lng: float
    segment_distance_km: float

    @classmethod
    def from_point(cls, point: RoutePoint) -> "RoutePointOut":
        return cls(lat=point.lat, lng=point.lng, segment_distance_km=point.segment_distance_km)


class RouteStatus(BaseModel):
    """Current route-building session."""
    state: RouteState
    enabled: bool
    points: List[RoutePointOut]
    total_distance_km: float


class AddPointResponse(BaseModel):
    accepted: bool
    point: Optional[RoutePointOut] = None
    route: RouteStatus


class FinishResponse(BaseModel):
    total_distance_km: float
    distance_display: str


# =============================================================================
# Workouts
# =============================================================================

class WorkoutSubmit(BaseModel):
    """Form submission; only the field matching kind is used."""
    kind: WorkoutKind
    duration_min: float
    cadence_spm: Optional[float] = None
    elevation_gain_m: Optional[float] = None

    @property
    def extra(self) -> Optional[float]:
        return getattr(self, WORKOUT_CLASSES[self.kind].extra_field)


class SummaryRow(BaseModel):
    icon: str
    value: str
    unit: str


class WorkoutOut(BaseModel):
    """Logged workout with its display data."""
    id: str
    kind: WorkoutKind
    title: str
    created_at: datetime
    distance_km: float
    duration_min: float
    derived_metric: float
    derived_unit: str
    icon: str
    cadence_spm: Optional[float] = None
    elevation_gain_m: Optional[float] = None
    route: List[RoutePointOut]
    summary: List[SummaryRow]

    @classmethod
    def from_workout(cls, workout: Workout) -> "WorkoutOut":
        return cls(
            id=workout.id,
            kind=workout.kind,
            title=format_workout_title(workout),
            created_at=workout.created_at,
            distance_km=workout.distance_km,
            duration_min=workout.duration_min,
            derived_metric=workout.derived_metric(),
            derived_unit=workout.derived_unit(),
            icon=workout.display_icon(),
            route=[RoutePointOut.from_point(p) for p in workout.route],
            summary=[SummaryRow(**row) for row in workout_summary(workout)],
            **{workout.extra_field: workout.extra_value()},
        )


# =============================================================================
# Collaborator state
# =============================================================================

class MarkerOut(BaseModel):
    lat: float
    lng: float
    label: Optional[str] = None


class SegmentOut(BaseModel):
    start: PointOut
    end: PointOut


class MapState(BaseModel):
    """Everything the browser map should currently show."""
    center: Optional[PointOut] = None
    zoom: Optional[int] = None
    viewport: Optional[List[PointOut]] = None  # [south_west, north_east]
    markers: Dict[str, MarkerOut]
    segments: Dict[str, SegmentOut]


class FormState(BaseModel):
    visible: bool
    distance_km: Optional[float] = None
    distance_display: Optional[str] = None
    distance_locked: bool

    @classmethod
    def from_values(cls, visible: bool, distance_km: Optional[float], locked: bool) -> "FormState":
        return cls(
            visible=visible,
            distance_km=distance_km,
            distance_display=format_distance_km(distance_km) if distance_km is not None else None,
            distance_locked=locked,
        )
