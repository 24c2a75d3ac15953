"""
Formatting utilities for display.

Used by the workout list view and the API.
"""

from typing import TYPE_CHECKING

from .constants import MONTHS

if TYPE_CHECKING:
    from routelog.features.workouts.models import Workout


def format_distance_km(km: float) -> str:
    """
    Format distance for the (locked) form field.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.35')
    """
    return f"{km:.2f}"


def format_metric(value: float) -> str:
    """Format a derived metric with one decimal (e.g., '5.0')."""
    return f"{value:.1f}"


def format_workout_title(workout: "Workout") -> str:
    """
    Format the list title of a workout.

    Returns:
        Formatted string (e.g., 'Running on October 18, 2026')
    """
    date = workout.created_at
    return f"{workout.label} on {MONTHS[date.month - 1]} {date.day}, {date.year}"


def workout_summary(workout: "Workout") -> list[dict]:
    """
    Display rows for a workout entry.

    Returns:
        List of {icon, value, unit} dicts: distance, duration,
        derived metric, kind-specific field
    """
    return [
        {"icon": workout.display_icon(), "value": format_distance_km(workout.distance_km), "unit": "km"},
        {"icon": "⏱", "value": f"{workout.duration_min:g}", "unit": "min"},
        {"icon": "⚡️", "value": format_metric(workout.derived_metric()), "unit": workout.derived_unit()},
        {"icon": workout.extra_icon(), "value": f"{workout.extra_value():g}", "unit": workout.extra_unit()},
    ]
