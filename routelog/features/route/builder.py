"""
Route Builder

Mutable session state for tracing a route on the map:
- Accumulates points and their segment distances
- Moves through IDLE -> BUILDING -> FINISHED -> IDLE
- Tells the map surface which markers and segments to create or remove

Map artifacts are tracked in an id arena owned by the builder, so RoutePoint
stays free of rendering state.
"""

import itertools
import logging
import math
from dataclasses import dataclass
from typing import Optional

from routelog.shared.collaborators import MapSurface
from routelog.shared.constants import ROUTE_MARKER_PREFIX, ROUTE_SEGMENT_PREFIX
from routelog.shared.errors import (
    EmptyRouteError,
    InsufficientPointsError,
    InvalidPointError,
    RouteFinishedError,
)
from routelog.shared.geo import GeoPoint, distance_km
from .models import RoutePoint, RouteState

logger = logging.getLogger(__name__)

MIN_POINTS_TO_FINISH = 2


@dataclass(frozen=True)
class _Renderables:
    """Map ids owned by one route point."""
    marker_id: str
    segment_id: Optional[str]  # Segment to the previous point, None for the first


class RouteBuilder:
    """
    Route-construction state machine.

    Operations are expected to be called by a single caller, one at a time.
    """

    def __init__(self, map_surface: Optional[MapSurface] = None):
        self._map = map_surface
        self._points: list[RoutePoint] = []
        self._renderables: list[_Renderables] = []
        self._enabled = True
        self._ids = itertools.count(1)

    # =========================================================================
    # Views
    # =========================================================================

    @property
    def enabled(self) -> bool:
        """True while the session accepts new points."""
        return self._enabled

    @property
    def state(self) -> RouteState:
        if not self._enabled:
            return RouteState.FINISHED
        if self._points:
            return RouteState.BUILDING
        return RouteState.IDLE

    @property
    def points(self) -> tuple[RoutePoint, ...]:
        """Snapshot of the route so far."""
        return tuple(self._points)

    @property
    def total_distance_km(self) -> float:
        return sum(p.segment_distance_km for p in self._points)

    def __len__(self) -> int:
        return len(self._points)

    # =========================================================================
    # Operations
    # =========================================================================

    def add_point(self, point: GeoPoint) -> Optional[RoutePoint]:
        """
        Append a point to the route.

        Ignored while the route is finished.

        Returns:
            The new RoutePoint, or None if the click was ignored

        Raises:
            InvalidPointError: If a coordinate is NaN or infinite
        """
        if not self._enabled:
            logger.debug(f"Ignoring point {point}: route is finished")
            return None
        if not (math.isfinite(point.lat) and math.isfinite(point.lng)):
            raise InvalidPointError(f"Coordinates must be finite, got {point}")

        n = next(self._ids)
        marker_id = f"{ROUTE_MARKER_PREFIX}-{n}"
        segment_id = None

        if self._points:
            previous = self._points[-1].point
            route_point = RoutePoint(point, distance_km(previous, point))
            segment_id = f"{ROUTE_SEGMENT_PREFIX}-{n}"
        else:
            previous = None
            route_point = RoutePoint(point, 0.0)

        self._points.append(route_point)
        self._renderables.append(_Renderables(marker_id, segment_id))

        if self._map is not None:
            self._map.place_marker(point, marker_id)
            if previous is not None:
                self._map.draw_segment(previous, point, segment_id)

        return route_point

    def undo_last(self) -> RoutePoint:
        """
        Remove the most recent point and its map artifacts.

        Raises:
            EmptyRouteError: If there are no points
            RouteFinishedError: If the route is frozen awaiting commit
        """
        if not self._points:
            raise EmptyRouteError("Nothing to undo: route has no points")
        if not self._enabled:
            raise RouteFinishedError("Cannot undo: route is finished")

        removed = self._points.pop()
        self._remove_renderables(self._renderables.pop())
        return removed

    def cancel(self) -> None:
        """Drop every point and return to IDLE. No-op on an empty route."""
        self._clear()

    def finish(self) -> float:
        """
        Freeze the route and compute its total distance.

        Points are kept; they are needed at commit.

        Returns:
            Total distance in kilometers

        Raises:
            InsufficientPointsError: If the route has fewer than two points
        """
        if len(self._points) < MIN_POINTS_TO_FINISH:
            raise InsufficientPointsError(
                f"A route needs at least {MIN_POINTS_TO_FINISH} points, "
                f"got {len(self._points)}"
            )

        self._enabled = False
        total = self.total_distance_km
        logger.info(f"Route finished: {len(self._points)} points, {total:.3f} km")
        return total

    def reset(self) -> None:
        """Clear the route after a commit or an abandoned finished session."""
        self._clear()

    # =========================================================================
    # Internals
    # =========================================================================

    def _clear(self) -> None:
        for renderables in reversed(self._renderables):
            self._remove_renderables(renderables)
        self._points.clear()
        self._renderables.clear()
        self._enabled = True

    def _remove_renderables(self, renderables: _Renderables) -> None:
        if self._map is None:
            return
        self._map.remove_marker(renderables.marker_id)
        if renderables.segment_id is not None:
            self._map.remove_segment(renderables.segment_id)
