"""
Workout schemas.

Pydantic models for the persisted workout log blob and for legacy blobs
written by the browser version of the app.
"""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from routelog.shared.constants import WORKOUT_LOG_VERSION, WorkoutKind


class _CamelModel(BaseModel):
    """Base for persisted records: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        allow_inf_nan=False,
    )


class RoutePointRecord(_CamelModel):
    """Single persisted route point."""
    lat: float
    lng: float
    segment_distance_km: float = Field(..., ge=0)


class WorkoutRecord(_CamelModel):
    """
    Persisted workout.

    Exactly one of cadence_spm / elevation_gain_m is set, matching kind;
    the other is written as an explicit null.
    """
    id: str = Field(..., min_length=1)
    kind: WorkoutKind
    created_at: datetime
    route: List[RoutePointRecord]
    distance_km: float
    duration_min: float
    cadence_spm: Optional[float] = None
    elevation_gain_m: Optional[float] = None

    @model_validator(mode="after")
    def check_kind_fields(self):
        if self.kind == WorkoutKind.RUNNING:
            if self.cadence_spm is None or self.elevation_gain_m is not None:
                raise ValueError("running record needs cadenceSpm and a null elevationGainM")
        elif self.elevation_gain_m is None or self.cadence_spm is not None:
            raise ValueError("hiking record needs elevationGainM and a null cadenceSpm")
        return self


class WorkoutLogBlob(_CamelModel):
    """Envelope of the persisted workout log."""
    version: int = WORKOUT_LOG_VERSION
    workouts: List[WorkoutRecord] = Field(default_factory=list)


# =============================================================================
# Legacy format (versionless JSON list from localStorage)
# =============================================================================

class LegacyCoord(BaseModel):
    """Route point as the browser app stored it."""
    lat: float
    lng: float
    segmentDistance: float = 0.0


class LegacyWorkout(BaseModel):
    """Workout as the browser app stored it."""
    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    date: datetime
    type: WorkoutKind
    coords: List[LegacyCoord]
    distance: float
    duration: float
    cadence: Optional[float] = None
    elevationGain: Optional[float] = None

    def to_record(self) -> WorkoutRecord:
        """
        Upgrade to the current record format.

        The legacy distance was the form's 2-decimal display value, so the
        total is taken from the stored segment distances instead.
        """
        is_running = self.type == WorkoutKind.RUNNING
        created_at = self.date
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return WorkoutRecord(
            id=self.id,
            kind=self.type,
            created_at=created_at,
            route=[
                RoutePointRecord(
                    lat=c.lat,
                    lng=c.lng,
                    segment_distance_km=c.segmentDistance,
                )
                for c in self.coords
            ],
            distance_km=sum(c.segmentDistance for c in self.coords),
            duration_min=self.duration,
            cadence_spm=self.cadence if is_running else None,
            elevation_gain_m=None if is_running else self.elevationGain,
        )
