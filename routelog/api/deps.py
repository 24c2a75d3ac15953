"""
API dependencies.

Builds the per-process session (controller plus headless collaborators)
and exposes it to route handlers.
"""

import logging
from dataclasses import dataclass

from fastapi import HTTPException, Request

from routelog.config import Settings
from routelog.db import MemoryBlobStore, SqlBlobStore
from routelog.db.session import build_engine, build_session_factory, init_db
from routelog.features.session import (
    CommandResult,
    HeadlessForm,
    HeadlessMap,
    HeadlessWorkoutList,
    SessionController,
    StaticGeolocation,
)
from routelog.features.workouts import WorkoutStore
from routelog.shared.constants import CORRUPT_BACKUP_SUFFIX
from routelog.shared.geo import GeoPoint

logger = logging.getLogger(__name__)

# Result error code -> HTTP status
ERROR_STATUS = {
    "empty_route": 409,
    "insufficient_points": 409,
    "route_finished": 409,
    "route_not_finished": 409,
    "invalid_input": 422,
    "invalid_point": 422,
    "not_found": 404,
    "persistence_failed": 503,
    "corrupt_state": 500,
}


@dataclass
class SessionContext:
    """One user session with the collaborators the browser reads back."""
    controller: SessionController
    map: HeadlessMap
    form: HeadlessForm
    workout_list: HeadlessWorkoutList


def build_blob_stores(cfg: Settings):
    """Workout log store and its corrupt-log backup for the configured backend."""
    if cfg.storage_backend == "memory":
        return MemoryBlobStore(), MemoryBlobStore()

    engine = build_engine(cfg.database_url)
    init_db(engine)
    logger.info("Database initialized")
    session_factory = build_session_factory(engine)
    return (
        SqlBlobStore(session_factory, cfg.storage_key),
        SqlBlobStore(session_factory, f"{cfg.storage_key}{CORRUPT_BACKUP_SUFFIX}"),
    )


def build_session(cfg: Settings) -> SessionContext:
    """Wire a controller to fresh headless collaborators."""
    map_surface = HeadlessMap()
    form = HeadlessForm()
    workout_list = HeadlessWorkoutList()
    blob_store, backup_store = build_blob_stores(cfg)
    controller = SessionController(
        store=WorkoutStore(blob_store, backup_store=backup_store),
        map_surface=map_surface,
        form=form,
        workout_list=workout_list,
        geolocation=StaticGeolocation(
            GeoPoint(cfg.default_center_lat, cfg.default_center_lng)
        ),
        zoom=cfg.default_zoom,
    )
    return SessionContext(controller, map_surface, form, workout_list)


def get_session(request: Request) -> SessionContext:
    """Dependency for getting the running session."""
    return request.app.state.session


def raise_for_result(result: CommandResult) -> CommandResult:
    """Turn a failed command into an HTTPException."""
    if result.ok:
        return result
    raise HTTPException(
        status_code=ERROR_STATUS.get(result.error, 400),
        detail={
            "error": result.error,
            "message": result.message,
            "violations": result.violations,
        },
    )
