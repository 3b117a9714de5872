"""Screens not directly part of running a workout."""

from .home_screen import HomeScreen
from .info_screens import FinalScreen, IntroScreen, MenuScreen, WorkoutContextScreen
from .recommendation_screen import RecommendationScreen
from .workout_builder_screens import WorkoutSelectScreen, WorkoutSetupScreen

__all__ = [
    "HomeScreen",
    "IntroScreen",
    "MenuScreen",
    "WorkoutContextScreen",
    "FinalScreen",
    "RecommendationScreen",
    "WorkoutSetupScreen",
    "WorkoutSelectScreen",
]
