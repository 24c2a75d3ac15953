"""
Workout logging module.

Usage:
    from routelog.features.workouts import WorkoutStore, create_running
    from routelog.features.workouts import serialize, deserialize

Components:
- Workout, RunningWorkout, HikingWorkout: immutable workout records
- create_running, create_hiking: validating factories
- WorkoutStore: append-only log with blob persistence
- serialize, deserialize: persisted blob round trip
- export_gpx: GPX document for a workout's route
"""
from .models import (
    Workout,
    RunningWorkout,
    HikingWorkout,
    create_running,
    create_hiking,
    WORKOUT_FACTORIES,
)
from .store import WorkoutStore, WorkoutLog, serialize, deserialize
from .gpx_export import export_gpx

__all__ = [
    # Models
    "Workout",
    "RunningWorkout",
    "HikingWorkout",
    "create_running",
    "create_hiking",
    "WORKOUT_FACTORIES",
    # Store
    "WorkoutStore",
    "WorkoutLog",
    "serialize",
    "deserialize",
    # Export
    "export_gpx",
]
