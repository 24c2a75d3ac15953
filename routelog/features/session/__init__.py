"""
Session orchestration module.

Usage:
    from routelog.features.session import SessionController, CommandResult
    from routelog.features.session import HeadlessMap, HeadlessForm
"""
from .controller import SessionController, CommandResult
from .headless import (
    HeadlessMap,
    HeadlessForm,
    HeadlessWorkoutList,
    StaticGeolocation,
    Marker,
    Segment,
)

__all__ = [
    "SessionController",
    "CommandResult",
    # Headless collaborators
    "HeadlessMap",
    "HeadlessForm",
    "HeadlessWorkoutList",
    "StaticGeolocation",
    "Marker",
    "Segment",
]
