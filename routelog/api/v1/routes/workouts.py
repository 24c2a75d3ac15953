"""
Workout Routes

Endpoints for logging and viewing workouts.
"""

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from routelog.api.deps import SessionContext, get_session, raise_for_result
from routelog.features.workouts import export_gpx
from routelog.schemas.session import WorkoutOut, WorkoutSubmit

router = APIRouter()


@router.get("", response_model=List[WorkoutOut])
async def list_workouts(session: SessionContext = Depends(get_session)):
    """List logged workouts, newest first."""
    workouts = session.controller.workouts()
    return [WorkoutOut.from_workout(w) for w in reversed(workouts)]


@router.post("", response_model=WorkoutOut, status_code=201)
async def submit_workout(
    body: WorkoutSubmit,
    session: SessionContext = Depends(get_session)
):
    """
    Log the finished route as a workout.

    On validation failure the route stays finished and the form stays open.
    """
    result = raise_for_result(
        session.controller.submit(body.kind, body.duration_min, body.extra)
    )
    return WorkoutOut.from_workout(result.value)


@router.get("/{workout_id}", response_model=WorkoutOut)
async def get_workout(
    workout_id: str,
    session: SessionContext = Depends(get_session)
):
    """Get workout by ID."""
    result = raise_for_result(session.controller.get_workout(workout_id))
    return WorkoutOut.from_workout(result.value)


@router.post("/{workout_id}/locate", response_model=WorkoutOut)
async def locate_workout(
    workout_id: str,
    session: SessionContext = Depends(get_session)
):
    """Show a workout's route on the map."""
    result = raise_for_result(session.controller.locate(workout_id))
    return WorkoutOut.from_workout(result.value)


@router.get("/{workout_id}/gpx")
async def download_gpx(
    workout_id: str,
    session: SessionContext = Depends(get_session)
):
    """Download a workout's route as GPX."""
    result = raise_for_result(session.controller.get_workout(workout_id))
    return Response(
        content=export_gpx(result.value),
        media_type="application/gpx+xml",
        headers={"Content-Disposition": f'attachment; filename="workout-{workout_id}.gpx"'},
    )
