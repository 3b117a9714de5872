"""Shared constants and globals for backend modules."""

from __future__ import annotations

from pathlib import Path

# Bounds for the number of exercises in a custom workout
MIN_EXERCISE_COUNT = 1
MAX_EXERCISE_COUNT = 10
DEFAULT_EXERCISE_COUNT = 4

# Sets shown for each exercise of a custom workout
DEFAULT_SETS_PER_EXERCISE = 3

# Repetitions recommended for every set of a predefined workout
DEFAULT_REPS_PER_SET = 15

# Stopwatch timing in milliseconds
STOPWATCH_TICK_MS = 10
LONG_PRESS_MS = 800

# Languages the catalog is localized into; the first one is the default
LANGUAGES = ("pt", "en")
DEFAULT_LANGUAGE = "pt"

# Path to the bundled SQLite catalog shipped with the application
DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent / "data" / "catalog.db"

# JSON file holding the user's persisted record
USER_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "user_data.json"

# Key the user record is stored under inside the JSON file
USER_DATA_KEY = "kneeGuideData"

__all__ = [
    "MIN_EXERCISE_COUNT",
    "MAX_EXERCISE_COUNT",
    "DEFAULT_EXERCISE_COUNT",
    "DEFAULT_SETS_PER_EXERCISE",
    "DEFAULT_REPS_PER_SET",
    "STOPWATCH_TICK_MS",
    "LONG_PRESS_MS",
    "LANGUAGES",
    "DEFAULT_LANGUAGE",
    "DEFAULT_DB_PATH",
    "USER_DATA_PATH",
    "USER_DATA_KEY",
]
