"""
Session Controller

Orchestrates one route-building session against its collaborators:
- Forwards map clicks and undo/cancel/finish commands to the RouteBuilder
- Collects workout details through the form and commits them to the store
- Asks the map and the workout list to render

Commands never raise domain errors. Each returns a CommandResult, and the
caller decides how to present failures.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from routelog.features.route import RouteBuilder, RouteState
from routelog.features.workouts import Workout, WorkoutLog, WorkoutStore
from routelog.shared.collaborators import (
    GeolocationProvider,
    MapSurface,
    WorkoutForm,
    WorkoutListView,
)
from routelog.shared.constants import LOCATED_PREFIX, WORKOUT_MARKER_PREFIX, WorkoutKind
from routelog.shared.errors import (
    GeolocationError,
    InvalidWorkoutInputError,
    RouteLogError,
    RouteNotFinishedError,
)
from routelog.shared.formatters import format_workout_title
from routelog.shared.geo import GeoPoint

logger = logging.getLogger(__name__)

DEFAULT_ZOOM = 13


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a controller command."""
    ok: bool
    value: Any = None
    error: Optional[str] = None          # RouteLogError.code
    message: Optional[str] = None
    violations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def success(cls, value: Any = None) -> "CommandResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: RouteLogError) -> "CommandResult":
        violations = error.violations if isinstance(error, InvalidWorkoutInputError) else {}
        return cls(ok=False, error=error.code, message=str(error), violations=violations)


class SessionController:
    """
    Wires a RouteBuilder and a WorkoutStore to the UI collaborators.

    Example:
        controller = SessionController(store, map_surface, form, workout_list)
        controller.start()
        controller.click(GeoPoint(43.23, 76.94))
    """

    def __init__(
        self,
        store: WorkoutStore,
        map_surface: MapSurface,
        form: WorkoutForm,
        workout_list: WorkoutListView,
        geolocation: Optional[GeolocationProvider] = None,
        builder: Optional[RouteBuilder] = None,
        zoom: int = DEFAULT_ZOOM,
    ):
        self.store = store
        self.builder = builder or RouteBuilder(map_surface)
        self._map = map_surface
        self._form = form
        self._list = workout_list
        self._geolocation = geolocation
        self._zoom = zoom
        # Renderables drawn by locate(): (marker ids, segment ids)
        self._located: tuple[list[str], list[str]] = ([], [])

    # =========================================================================
    # Startup
    # =========================================================================

    def start(self) -> CommandResult:
        """
        Load persisted workouts, centre the map and render the log.

        A corrupt or unreadable log leaves the session running with an
        empty log; the failure is reported in the result.
        """
        load_error = None
        try:
            self.store.load()
        except RouteLogError as e:
            logger.error(f"Could not load workout log, starting empty: {e}")
            load_error = e

        self._center_map()

        for workout in self.store.workouts:
            self._render_workout(workout)
        self._list.set_instructions_visible(not self.store.workouts)

        if load_error is not None:
            return CommandResult.failure(load_error)
        return CommandResult.success(len(self.store.workouts))

    def _center_map(self) -> None:
        if self._geolocation is None:
            return
        try:
            position = self._geolocation.get_current_position()
        except GeolocationError as e:
            logger.warning(f"Could not get current position: {e}")
            return
        self._map.set_view(position, self._zoom)

    # =========================================================================
    # Route commands
    # =========================================================================

    @property
    def state(self) -> RouteState:
        return self.builder.state

    def click(self, point: GeoPoint) -> CommandResult:
        """Add a clicked point. Value is the new RoutePoint, or None if ignored."""
        return self._attempt(self.builder.add_point, point)

    def undo(self) -> CommandResult:
        return self._attempt(self.builder.undo_last)

    def cancel(self) -> CommandResult:
        was_finished = self.builder.state == RouteState.FINISHED
        self.builder.cancel()
        if was_finished:
            self._close_form()
        return CommandResult.success()

    def finish(self) -> CommandResult:
        """Freeze the route and open the form with the distance locked in."""
        result = self._attempt(self.builder.finish)
        if result.ok:
            self._form.prefill_distance(result.value, locked=True)
            self._form.show()
        return result

    def discard(self) -> CommandResult:
        """Abandon a finished route without logging it."""
        if self.builder.state != RouteState.FINISHED:
            return CommandResult.failure(RouteNotFinishedError("No finished route to discard"))
        self.builder.reset()
        self._close_form()
        return CommandResult.success()

    # =========================================================================
    # Workout commands
    # =========================================================================

    def submit(
        self,
        kind: WorkoutKind | str,
        duration_min: float,
        extra: Optional[float],
    ) -> CommandResult:
        """
        Commit the finished route as a workout.

        On failure the route stays finished and the form stays open with
        its fields intact, so the user can correct and resubmit.

        Args:
            kind: Workout kind
            duration_min: Duration in minutes
            extra: Cadence (running) or elevation gain (hiking)
        """
        if self.builder.state != RouteState.FINISHED:
            return CommandResult.failure(
                RouteNotFinishedError("Finish the route before logging a workout")
            )

        result = self._attempt(
            self.store.commit, self.builder.points, kind, duration_min, extra
        )
        if not result.ok:
            return result

        workout = result.value
        self.builder.reset()
        self._close_form()
        self._clear_located()
        self._render_workout(workout)
        self._list.set_instructions_visible(False)
        return result

    def locate(self, workout_id: str) -> CommandResult:
        """Fit the map to a logged workout and draw its route."""
        result = self.get_workout(workout_id)
        if not result.ok:
            return result

        workout = result.value
        self._clear_located()
        markers, segments = self._located

        points = [p.point for p in workout.route]
        self._map.fit_to_bounds(points)
        for i in range(1, len(points)):
            segment_id = f"{LOCATED_PREFIX}-segment-{i}"
            self._map.draw_segment(points[i - 1], points[i], segment_id)
            segments.append(segment_id)

        finish_id = f"{LOCATED_PREFIX}-finish"
        self._map.place_marker(points[-1], finish_id, label="Finish")
        markers.append(finish_id)

        self._list.set_active(workout.id)
        return result

    def get_workout(self, workout_id: str) -> CommandResult:
        return self._attempt(self.store.get, workout_id)

    def workouts(self) -> WorkoutLog:
        return self.store.workouts

    # =========================================================================
    # Internals
    # =========================================================================

    def _attempt(self, action: Callable, *args) -> CommandResult:
        try:
            return CommandResult.success(action(*args))
        except RouteLogError as e:
            logger.warning(f"{action.__name__} rejected: {e}")
            return CommandResult.failure(e)

    def _close_form(self) -> None:
        self._form.hide()
        self._form.clear_fields()

    def _render_workout(self, workout: Workout) -> None:
        self._list.render(workout)
        self._map.place_marker(
            workout.start.point,
            f"{WORKOUT_MARKER_PREFIX}-{workout.id}",
            label=format_workout_title(workout),
        )

    def _clear_located(self) -> None:
        markers, segments = self._located
        for marker_id in markers:
            self._map.remove_marker(marker_id)
        for segment_id in segments:
            self._map.remove_segment(segment_id)
        markers.clear()
        segments.clear()
