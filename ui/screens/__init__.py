"""UI screen modules for the knee guide."""

from .session import ActiveWorkoutScreen, ReadyWorkoutScreen
from .general import (
    FinalScreen,
    HomeScreen,
    IntroScreen,
    MenuScreen,
    RecommendationScreen,
    WorkoutContextScreen,
    WorkoutSelectScreen,
    WorkoutSetupScreen,
)

__all__ = [
    "ActiveWorkoutScreen",
    "ReadyWorkoutScreen",
    "FinalScreen",
    "HomeScreen",
    "IntroScreen",
    "MenuScreen",
    "RecommendationScreen",
    "WorkoutContextScreen",
    "WorkoutSelectScreen",
    "WorkoutSetupScreen",
]
