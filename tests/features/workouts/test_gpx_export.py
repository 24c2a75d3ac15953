"""
Tests for GPX export.
"""

from datetime import datetime, timezone

import gpxpy

from routelog.features.route import RoutePoint
from routelog.features.workouts import create_hiking, export_gpx
from routelog.shared.geo import GeoPoint


ROUTE = (
    RoutePoint(GeoPoint(46.5581, 7.8356), 0.0),
    RoutePoint(GeoPoint(46.5712, 7.8420), 1.5),
    RoutePoint(GeoPoint(46.5770, 7.9120), 5.4),
)


def test_export_contains_route_points():
    workout = create_hiking(
        ROUTE, 6.9, 150, 420,
        created_at=datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc),
    )

    gpx = gpxpy.parse(export_gpx(workout))

    (track,) = gpx.tracks
    assert track.name == "Hiking on October 18, 2026"
    assert track.type == "hiking"
    points = track.segments[0].points
    assert [(p.latitude, p.longitude) for p in points] == [(p.lat, p.lng) for p in ROUTE]
    assert points[0].time is not None
    assert points[1].time is None
