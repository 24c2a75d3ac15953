"""
View State Routes

What the browser should currently draw: map renderables and form state.
"""

from fastapi import APIRouter, Depends

from routelog.api.deps import SessionContext, get_session
from routelog.schemas.session import FormState, MapState, MarkerOut, PointOut, SegmentOut
from routelog.shared.geo import GeoPoint

router = APIRouter()


def _point(p: GeoPoint) -> PointOut:
    return PointOut(lat=p.lat, lng=p.lng)


@router.get("/map", response_model=MapState)
async def get_map(session: SessionContext = Depends(get_session)):
    """Get markers, segments and viewport."""
    surface = session.map
    return MapState(
        center=_point(surface.center) if surface.center else None,
        zoom=surface.zoom,
        viewport=[_point(p) for p in surface.viewport] if surface.viewport else None,
        markers={
            marker_id: MarkerOut(lat=m.point.lat, lng=m.point.lng, label=m.label)
            for marker_id, m in surface.markers.items()
        },
        segments={
            segment_id: SegmentOut(start=_point(s.start), end=_point(s.end))
            for segment_id, s in surface.segments.items()
        },
    )


@router.get("/form", response_model=FormState)
async def get_form(session: SessionContext = Depends(get_session)):
    """Get workout form state."""
    form = session.form
    return FormState.from_values(form.visible, form.distance_km, form.distance_locked)
