"""
Headless collaborators.

In-memory implementations of the map, form, workout list and geolocation
interfaces. The HTTP layer serves their state to the browser client, and
tests inspect it directly.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from routelog.shared.errors import GeolocationError
from routelog.shared.geo import GeoPoint, bounds


@dataclass
class Marker:
    point: GeoPoint
    label: Optional[str] = None


@dataclass
class Segment:
    start: GeoPoint
    end: GeoPoint


class HeadlessMap:
    """Map surface that keeps renderables in dicts keyed by id."""

    def __init__(self):
        self.markers: dict[str, Marker] = {}
        self.segments: dict[str, Segment] = {}
        self.center: Optional[GeoPoint] = None
        self.zoom: Optional[int] = None
        self.viewport: Optional[tuple[GeoPoint, GeoPoint]] = None

    def place_marker(self, point: GeoPoint, marker_id: str, label: Optional[str] = None) -> None:
        self.markers[marker_id] = Marker(point, label)

    def remove_marker(self, marker_id: str) -> None:
        self.markers.pop(marker_id, None)

    def draw_segment(self, start: GeoPoint, end: GeoPoint, segment_id: str) -> None:
        self.segments[segment_id] = Segment(start, end)

    def remove_segment(self, segment_id: str) -> None:
        self.segments.pop(segment_id, None)

    def fit_to_bounds(self, points: Sequence[GeoPoint]) -> None:
        self.viewport = bounds(points)

    def set_view(self, center: GeoPoint, zoom: int) -> None:
        self.center = center
        self.zoom = zoom
        self.viewport = None


@dataclass
class HeadlessForm:
    """Workout form state."""
    visible: bool = False
    distance_km: Optional[float] = None
    distance_locked: bool = False

    def prefill_distance(self, km: float, locked: bool) -> None:
        self.distance_km = km
        self.distance_locked = locked

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def clear_fields(self) -> None:
        self.distance_km = None
        self.distance_locked = False


@dataclass
class HeadlessWorkoutList:
    """Workout list state: rendered ids, newest first, plus the active entry."""
    entries: list[str] = field(default_factory=list)
    active_id: Optional[str] = None
    instructions_visible: bool = True

    def render(self, workout) -> None:
        self.entries.insert(0, workout.id)

    def set_active(self, workout_id: str) -> None:
        self.active_id = workout_id

    def set_instructions_visible(self, visible: bool) -> None:
        self.instructions_visible = visible


class StaticGeolocation:
    """Geolocation provider that always reports a fixed position."""

    def __init__(self, position: Optional[GeoPoint]):
        self._position = position

    def get_current_position(self) -> GeoPoint:
        if self._position is None:
            raise GeolocationError("Current position unavailable")
        return self._position
