"""
Tests for display formatters.
"""

from datetime import datetime, timezone

import pytest

from routelog.features.route import RoutePoint
from routelog.features.workouts import create_hiking, create_running
from routelog.shared.formatters import (
    format_distance_km,
    format_metric,
    format_workout_title,
    workout_summary,
)
from routelog.shared.geo import GeoPoint


ROUTE = (
    RoutePoint(GeoPoint(0.0, 0.0), 0.0),
    RoutePoint(GeoPoint(0.0, 0.09), 10.0),
)
CREATED = datetime(2026, 10, 18, 7, 0, tzinfo=timezone.utc)


class TestFormatters:

    @pytest.mark.parametrize("km,expected", [
        (111.19492664455873, "111.19"),
        (12.345678, "12.35"),
        (10, "10.00"),
    ])
    def test_format_distance_km(self, km, expected):
        assert format_distance_km(km) == expected

    def test_format_metric(self):
        assert format_metric(5.0) == "5.0"
        assert format_metric(4.96) == "5.0"

    def test_title(self):
        workout = create_running(ROUTE, 10, 50, 170, created_at=CREATED)
        assert format_workout_title(workout) == "Running on October 18, 2026"


class TestWorkoutSummary:

    def test_running_rows(self):
        workout = create_running(ROUTE, 10, 50, 170, created_at=CREATED)
        rows = workout_summary(workout)

        assert [r["unit"] for r in rows] == ["km", "min", "min/km", "spm"]
        assert rows[2]["value"] == "5.0"
        assert rows[3]["value"] == "170"

    def test_hiking_rows(self):
        workout = create_hiking(ROUTE, 10, 120, -50, created_at=CREATED)
        rows = workout_summary(workout)

        assert [r["unit"] for r in rows] == ["km", "min", "km/h", "m"]
        assert rows[2]["value"] == "5.0"
        assert rows[3]["value"] == "-50"
