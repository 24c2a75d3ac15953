"""
GPX export for logged workouts.
"""

import gpxpy
import gpxpy.gpx

from routelog.shared.formatters import format_workout_title
from .models import Workout

GPX_CREATOR = "RouteLog"


def export_gpx(workout: Workout) -> str:
    """
    Build a GPX document for a workout's route.

    Args:
        workout: Logged workout

    Returns:
        GPX 1.1 XML as string
    """
    gpx = gpxpy.gpx.GPX()
    gpx.creator = GPX_CREATOR
    gpx.description = f"{workout.label} workout, {workout.distance_km:.2f} km"

    gpx_track = gpxpy.gpx.GPXTrack(name=format_workout_title(workout))
    gpx_track.type = workout.kind.value
    gpx.tracks.append(gpx_track)

    gpx_segment = gpxpy.gpx.GPXTrackSegment()
    gpx_track.segments.append(gpx_segment)

    for i, point in enumerate(workout.route):
        gpx_segment.points.append(
            gpxpy.gpx.GPXTrackPoint(
                point.lat,
                point.lng,
                # Only the start time is known
                time=workout.created_at if i == 0 else None,
            )
        )

    return gpx.to_xml(version="1.1")
