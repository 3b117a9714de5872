"""Screens used while a workout is running."""

from .workout_screens import ActiveWorkoutScreen, ReadyWorkoutScreen

__all__ = [
    "ActiveWorkoutScreen",
    "ReadyWorkoutScreen",
]
