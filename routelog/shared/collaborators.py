"""
Interfaces of the collaborators the core talks to.

The core never draws, renders forms or touches storage directly; it emits
coordinates and renderable ids through these protocols. This module holds
only protocols, so any layer can import it without circular imports.
"""

from typing import Optional, Protocol, Sequence, TYPE_CHECKING

from .geo import GeoPoint

if TYPE_CHECKING:
    from routelog.features.workouts.models import Workout


class MapSurface(Protocol):
    """Renders markers and line segments addressed by id."""

    def place_marker(self, point: GeoPoint, marker_id: str, label: Optional[str] = None) -> None: ...

    def remove_marker(self, marker_id: str) -> None: ...

    def draw_segment(self, start: GeoPoint, end: GeoPoint, segment_id: str) -> None: ...

    def remove_segment(self, segment_id: str) -> None: ...

    def fit_to_bounds(self, points: Sequence[GeoPoint]) -> None: ...

    def set_view(self, center: GeoPoint, zoom: int) -> None: ...


class WorkoutForm(Protocol):
    """Form that collects workout details after a route is finished."""

    def prefill_distance(self, km: float, locked: bool) -> None: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def clear_fields(self) -> None: ...


class WorkoutListView(Protocol):
    """Sidebar list of logged workouts."""

    def render(self, workout: "Workout") -> None: ...

    def set_active(self, workout_id: str) -> None: ...

    def set_instructions_visible(self, visible: bool) -> None: ...


class BlobStore(Protocol):
    """Single-key byte store holding the serialized workout log."""

    def get(self) -> Optional[bytes]: ...

    def set(self, data: bytes) -> None: ...


class GeolocationProvider(Protocol):
    """Supplies the coordinate the map is centred on at startup."""

    def get_current_position(self) -> GeoPoint: ...
