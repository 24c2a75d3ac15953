"""
Route Building Routes

Endpoints for the route under construction.
"""

from fastapi import APIRouter, Depends

from routelog.api.deps import SessionContext, get_session, raise_for_result
from routelog.features.route import RouteBuilder
from routelog.schemas.session import (
    AddPointResponse,
    FinishResponse,
    PointIn,
    RoutePointOut,
    RouteStatus,
)
from routelog.shared.formatters import format_distance_km
from routelog.shared.geo import GeoPoint

router = APIRouter()


def _status(builder: RouteBuilder) -> RouteStatus:
    return RouteStatus(
        state=builder.state,
        enabled=builder.enabled,
        points=[RoutePointOut.from_point(p) for p in builder.points],
        total_distance_km=builder.total_distance_km,
    )


@router.get("", response_model=RouteStatus)
async def get_route(session: SessionContext = Depends(get_session)):
    """Get the route being built."""
    return _status(session.controller.builder)


@router.post("/points", response_model=AddPointResponse)
async def add_point(
    point: PointIn,
    session: SessionContext = Depends(get_session)
):
    """
    Add a clicked map point.

    Ignored (accepted=false) while the route is finished.
    """
    result = raise_for_result(session.controller.click(GeoPoint(point.lat, point.lng)))
    route_point = result.value
    return AddPointResponse(
        accepted=route_point is not None,
        point=RoutePointOut.from_point(route_point) if route_point else None,
        route=_status(session.controller.builder),
    )


@router.post("/undo", response_model=RouteStatus)
async def undo(session: SessionContext = Depends(get_session)):
    """Remove the last point."""
    raise_for_result(session.controller.undo())
    return _status(session.controller.builder)


@router.post("/cancel", response_model=RouteStatus)
async def cancel(session: SessionContext = Depends(get_session)):
    """Drop the whole route."""
    raise_for_result(session.controller.cancel())
    return _status(session.controller.builder)


@router.post("/finish", response_model=FinishResponse)
async def finish(session: SessionContext = Depends(get_session)):
    """Freeze the route and open the workout form."""
    result = raise_for_result(session.controller.finish())
    return FinishResponse(
        total_distance_km=result.value,
        distance_display=format_distance_km(result.value),
    )


@router.post("/discard", response_model=RouteStatus)
async def discard(session: SessionContext = Depends(get_session)):
    """Abandon a finished route without logging it."""
    raise_for_result(session.controller.discard())
    return _status(session.controller.builder)
