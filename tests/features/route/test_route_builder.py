"""
Tests for RouteBuilder.

Tests the route-building state machine and the map renderables it emits.
"""

import pytest
from unittest.mock import MagicMock

from routelog.features.route import RouteBuilder, RouteState
from routelog.features.session import HeadlessMap
from routelog.shared.errors import (
    EmptyRouteError,
    InsufficientPointsError,
    InvalidPointError,
    RouteFinishedError,
)
from routelog.shared.geo import GeoPoint, distance_km


# =============================================================================
# Test Data
# =============================================================================

P1 = GeoPoint(0.0, 0.0)
P2 = GeoPoint(0.0, 1.0)
P3 = GeoPoint(1.0, 1.0)

PARK_LOOP = [
    GeoPoint(51.5007, -0.1246),
    GeoPoint(51.5033, -0.1196),
    GeoPoint(51.5055, -0.0754),
    GeoPoint(51.5081, -0.0759),
    GeoPoint(51.5014, -0.1419),
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def map_surface():
    return HeadlessMap()


@pytest.fixture
def builder(map_surface):
    return RouteBuilder(map_surface)


# =============================================================================
# Test add_point
# =============================================================================

class TestAddPoint:

    def test_starts_idle(self, builder):
        assert builder.state == RouteState.IDLE
        assert builder.enabled
        assert builder.points == ()

    def test_first_point_has_zero_segment(self, builder):
        route_point = builder.add_point(P1)
        assert route_point.segment_distance_km == 0.0
        assert builder.state == RouteState.BUILDING

    def test_segment_distance_from_previous(self, builder):
        builder.add_point(P1)
        route_point = builder.add_point(P2)
        assert route_point.segment_distance_km == distance_km(P1, P2)

    def test_first_point_places_marker_only(self, builder, map_surface):
        builder.add_point(P1)
        assert len(map_surface.markers) == 1
        assert map_surface.segments == {}

    def test_next_point_draws_segment(self, builder, map_surface):
        builder.add_point(P1)
        builder.add_point(P2)
        assert len(map_surface.markers) == 2
        (segment,) = map_surface.segments.values()
        assert (segment.start, segment.end) == (P1, P2)

    def test_ignored_when_finished(self, builder, map_surface):
        builder.add_point(P1)
        builder.add_point(P2)
        builder.finish()

        assert builder.add_point(P3) is None
        assert len(builder) == 2
        assert len(map_surface.markers) == 2

    def test_points_is_snapshot(self, builder):
        builder.add_point(P1)
        snapshot = builder.points
        builder.add_point(P2)
        assert len(snapshot) == 1

    def test_works_without_map(self):
        builder = RouteBuilder()
        builder.add_point(P1)
        builder.add_point(P2)
        assert builder.finish() == pytest.approx(111.19, abs=0.05)

    @pytest.mark.parametrize("bad", [
        GeoPoint(0.0, float("nan")),
        GeoPoint(float("inf"), 0.0),
        GeoPoint(0.0, float("-inf")),
    ])
    def test_non_finite_point_rejected(self, builder, map_surface, bad):
        builder.add_point(P1)

        with pytest.raises(InvalidPointError):
            builder.add_point(bad)

        assert len(builder) == 1
        assert len(map_surface.markers) == 1
        assert builder.add_point(P2).segment_distance_km == distance_km(P1, P2)


# =============================================================================
# Test undo_last
# =============================================================================

class TestUndoLast:

    def test_empty_raises(self, builder):
        with pytest.raises(EmptyRouteError):
            builder.undo_last()
        assert builder.state == RouteState.IDLE
        assert builder.points == ()

    def test_removes_last_point_and_artifacts(self, builder, map_surface):
        builder.add_point(P1)
        builder.add_point(P2)

        removed = builder.undo_last()

        assert removed.point == P2
        assert [p.point for p in builder.points] == [P1]
        assert len(map_surface.markers) == 1
        assert map_surface.segments == {}

    def test_undo_first_point_returns_to_idle(self, builder, map_surface):
        builder.add_point(P1)
        builder.undo_last()
        assert builder.state == RouteState.IDLE
        assert map_surface.markers == {}

    def test_emits_remove_by_id(self):
        surface = MagicMock()
        builder = RouteBuilder(surface)
        builder.add_point(P1)
        builder.add_point(P2)
        marker_id = surface.place_marker.call_args.args[1]
        segment_id = surface.draw_segment.call_args.args[2]

        builder.undo_last()

        surface.remove_marker.assert_called_once_with(marker_id)
        surface.remove_segment.assert_called_once_with(segment_id)

    def test_finished_route_raises(self, builder):
        builder.add_point(P1)
        builder.add_point(P2)
        builder.finish()

        with pytest.raises(RouteFinishedError):
            builder.undo_last()
        assert len(builder) == 2

    def test_ids_not_reused_after_undo(self):
        surface = MagicMock()
        builder = RouteBuilder(surface)
        builder.add_point(P1)
        builder.add_point(P2)
        builder.undo_last()
        builder.add_point(P3)

        marker_ids = [c.args[1] for c in surface.place_marker.call_args_list]
        assert len(set(marker_ids)) == 3


# =============================================================================
# Test cancel / reset
# =============================================================================

class TestCancel:

    def test_clears_everything(self, builder, map_surface):
        for point in PARK_LOOP:
            builder.add_point(point)

        builder.cancel()

        assert builder.state == RouteState.IDLE
        assert builder.points == ()
        assert map_surface.markers == {}
        assert map_surface.segments == {}

    def test_empty_is_noop(self, builder):
        builder.cancel()
        assert builder.state == RouteState.IDLE

    def test_cancel_finished_route_reenables(self, builder):
        builder.add_point(P1)
        builder.add_point(P2)
        builder.finish()

        builder.cancel()

        assert builder.enabled
        assert builder.add_point(P3) is not None

    def test_reset_after_finish(self, builder, map_surface):
        builder.add_point(P1)
        builder.add_point(P2)
        builder.finish()

        builder.reset()

        assert builder.state == RouteState.IDLE
        assert builder.enabled
        assert map_surface.markers == {}


# =============================================================================
# Test finish
# =============================================================================

class TestFinish:

    @pytest.mark.parametrize("count", [0, 1])
    def test_too_few_points_raises(self, builder, count):
        for point in [P1][:count]:
            builder.add_point(point)

        with pytest.raises(InsufficientPointsError):
            builder.finish()
        assert builder.enabled
        assert len(builder) == count

    def test_equator_degree(self, builder):
        """(0,0) -> (0,1) is ≈111.2 km."""
        builder.add_point(P1)
        builder.add_point(P2)
        assert builder.finish() == pytest.approx(111.2, abs=0.5)

    def test_total_equals_sum_of_legs_exactly(self, builder):
        for point in PARK_LOOP:
            builder.add_point(point)

        expected = 0.0
        for i in range(1, len(PARK_LOOP)):
            expected += distance_km(PARK_LOOP[i - 1], PARK_LOOP[i])

        assert builder.finish() == expected

    def test_keeps_points_and_disables(self, builder):
        builder.add_point(P1)
        builder.add_point(P2)
        builder.finish()

        assert builder.state == RouteState.FINISHED
        assert not builder.enabled
        assert len(builder) == 2

    def test_finish_twice_returns_same_total(self, builder):
        builder.add_point(P1)
        builder.add_point(P2)
        assert builder.finish() == builder.finish()

    def test_undo_then_finish_fails(self, builder):
        """Add two points, undo one: back to one point, finish rejected."""
        builder.add_point(P1)
        builder.add_point(P2)
        builder.undo_last()

        with pytest.raises(InsufficientPointsError):
            builder.finish()
        assert [p.point for p in builder.points] == [P1]
