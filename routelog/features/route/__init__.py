"""
Route building module.

Usage:
    from routelog.features.route import RouteBuilder, RoutePoint, RouteState
"""
from .models import RoutePoint, RouteState
from .builder import RouteBuilder, MIN_POINTS_TO_FINISH

__all__ = [
    "RouteBuilder",
    "RoutePoint",
    "RouteState",
    "MIN_POINTS_TO_FINISH",
]
