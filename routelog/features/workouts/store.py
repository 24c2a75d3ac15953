"""
Workout Store

Owns the workout log:
- Commits new workouts from a finished route plus form values
- Persists the whole log as one JSON blob after every commit
- Loads the log back, rebuilding the typed variants

A commit either both appends and persists, or leaves the log untouched.
"""

import json
import logging
from typing import Iterable, Optional, Sequence

from pydantic import ValidationError

from routelog.features.route.models import RoutePoint
from routelog.shared.collaborators import BlobStore
from routelog.shared.constants import WORKOUT_LOG_VERSION, WorkoutKind
from routelog.shared.errors import (
    CorruptPersistedStateError,
    InsufficientPointsError,
    InvalidWorkoutInputError,
    PersistenceError,
    WorkoutNotFoundError,
)
from routelog.shared.geo import GeoPoint
from .models import (
    MIN_ROUTE_POINTS,
    WORKOUT_CLASSES,
    WORKOUT_FACTORIES,
    Workout,
    kindless_violations,
)
from .schemas import LegacyWorkout, RoutePointRecord, WorkoutLogBlob, WorkoutRecord

logger = logging.getLogger(__name__)

WorkoutLog = tuple[Workout, ...]


# =============================================================================
# Serialization
# =============================================================================

def to_record(workout: Workout) -> WorkoutRecord:
    """Convert a workout to its persisted record."""
    extra = {"cadence_spm": None, "elevation_gain_m": None}
    extra[workout.extra_field] = workout.extra_value()

    return WorkoutRecord(
        id=workout.id,
        kind=workout.kind,
        created_at=workout.created_at,
        route=[
            RoutePointRecord(
                lat=p.lat,
                lng=p.lng,
                segment_distance_km=p.segment_distance_km,
            )
            for p in workout.route
        ],
        distance_km=workout.distance_km,
        duration_min=workout.duration_min,
        **extra,
    )


def from_record(record: WorkoutRecord) -> Workout:
    """
    Rebuild a typed workout from its persisted record.

    Segment distances are taken as stored, not recomputed.
    """
    factory = WORKOUT_FACTORIES[record.kind]
    extra = getattr(record, WORKOUT_CLASSES[record.kind].extra_field)

    return factory(
        [
            RoutePoint(GeoPoint(p.lat, p.lng), p.segment_distance_km)
            for p in record.route
        ],
        record.distance_km,
        record.duration_min,
        extra,
        workout_id=record.id,
        created_at=record.created_at,
    )


def serialize(log: Iterable[Workout]) -> bytes:
    """Encode a workout log as one self-contained UTF-8 JSON blob."""
    blob = WorkoutLogBlob(
        version=WORKOUT_LOG_VERSION,
        workouts=[to_record(w) for w in log],
    )
    # stdlib json keeps float repr exact across the round trip
    return json.dumps(blob.model_dump(mode="json", by_alias=True)).encode("utf-8")


def deserialize(data: bytes) -> WorkoutLog:
    """
    Decode a blob produced by serialize (or by the legacy browser app).

    Raises:
        CorruptPersistedStateError: If the blob cannot be parsed or any
            workout fails validation
    """
    try:
        raw = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CorruptPersistedStateError(f"Workout log is not valid JSON: {e}") from e

    try:
        if isinstance(raw, list):
            logger.info(f"Upgrading legacy workout log ({len(raw)} entries)")
            records = [LegacyWorkout.model_validate(item).to_record() for item in raw]
        else:
            blob = WorkoutLogBlob.model_validate(raw)
            if blob.version != WORKOUT_LOG_VERSION:
                raise CorruptPersistedStateError(
                    f"Unsupported workout log version: {blob.version}"
                )
            records = blob.workouts
    except ValidationError as e:
        raise CorruptPersistedStateError(f"Workout log failed schema validation: {e}") from e

    workouts = []
    for record in records:
        try:
            workouts.append(from_record(record))
        except InvalidWorkoutInputError as e:
            raise CorruptPersistedStateError(
                f"Stored workout {record.id} is invalid: {e.violations}"
            ) from e

    ids = [w.id for w in workouts]
    if len(set(ids)) != len(ids):
        raise CorruptPersistedStateError("Workout log contains duplicate ids")

    return tuple(workouts)


# =============================================================================
# Store
# =============================================================================

class WorkoutStore:
    """Append-only workout log backed by a single-key blob store."""

    def __init__(self, blob_store: BlobStore, backup_store: Optional[BlobStore] = None):
        """
        Initialize store.

        Args:
            blob_store: Holds the serialized log
            backup_store: Receives an unreadable log on load, so the next
                commit does not destroy the only copy
        """
        self._blob_store = blob_store
        self._backup_store = backup_store
        self._log: WorkoutLog = ()

    @property
    def workouts(self) -> WorkoutLog:
        """Immutable snapshot, oldest first."""
        return self._log

    def __len__(self) -> int:
        return len(self._log)

    def get(self, workout_id: str) -> Workout:
        """
        Look up a workout by id.

        Raises:
            WorkoutNotFoundError: If no workout has this id
        """
        for workout in self._log:
            if workout.id == workout_id:
                return workout
        raise WorkoutNotFoundError(f"Workout not found: {workout_id}")

    def load(self) -> WorkoutLog:
        """
        Read the persisted log into the store.

        An absent blob yields an empty log.

        Raises:
            CorruptPersistedStateError: If the blob is malformed; the store
                is left with an empty log and the raw blob is copied to the
                backup store
        """
        self._log = ()
        data = self._blob_store.get()
        if data is None:
            logger.info("No persisted workout log, starting empty")
            return self._log

        try:
            self._log = deserialize(data)
        except CorruptPersistedStateError:
            self._backup_corrupt(data)
            raise
        logger.info(f"Loaded {len(self._log)} workouts")
        return self._log

    def commit(
        self,
        route: Sequence[RoutePoint],
        kind: WorkoutKind | str,
        duration_min: float,
        extra: Optional[float],
    ) -> Workout:
        """
        Create a workout from a finished route and persist the log.

        Args:
            route: Finished route (at least two points)
            kind: Workout kind
            duration_min: Duration in minutes
            extra: Cadence (running) or elevation gain (hiking)

        Returns:
            The new workout

        Raises:
            InsufficientPointsError: If the route has fewer than two points
            InvalidWorkoutInputError: If kind or any numeric field is invalid
            PersistenceError: If writing the log failed; the log is unchanged
        """
        if len(route) < MIN_ROUTE_POINTS:
            raise InsufficientPointsError(
                f"Cannot commit a route with {len(route)} points"
            )

        try:
            kind = WorkoutKind(kind)
        except ValueError:
            violations = kindless_violations(duration_min, extra)
            violations["kind"] = f"unknown workout kind: {kind!r}"
            raise InvalidWorkoutInputError(violations)

        distance = sum(p.segment_distance_km for p in route)
        workout = WORKOUT_FACTORIES[kind](route, distance, duration_min, extra)

        new_log = self._log + (workout,)
        self._persist(new_log)
        self._log = new_log

        logger.info(
            f"Committed {kind.value} workout {workout.id}: "
            f"{workout.distance_km:.2f} km in {workout.duration_min} min"
        )
        return workout

    def _backup_corrupt(self, data: bytes) -> None:
        if self._backup_store is None:
            logger.warning("Unreadable workout log will be replaced on next commit")
            return
        try:
            self._backup_store.set(data)
        except PersistenceError as e:
            logger.error(f"Failed to back up unreadable workout log: {e}")
            return
        logger.warning(f"Unreadable workout log backed up ({len(data)} bytes)")

    def _persist(self, log: WorkoutLog) -> None:
        data = serialize(log)
        try:
            self._blob_store.set(data)
        except PersistenceError:
            logger.error("Failed to persist workout log")
            raise
        except OSError as e:
            logger.error(f"Failed to persist workout log: {e}")
            raise PersistenceError(f"Failed to persist workout log: {e}") from e
