from __future__ import annotations

from pathlib import Path

from backend import (
    DEFAULT_DB_PATH,
    DEFAULT_EXERCISE_COUNT,
    DEFAULT_LANGUAGE,
    DEFAULT_REPS_PER_SET,
    LONG_PRESS_MS,
    MAX_EXERCISE_COUNT,
    MIN_EXERCISE_COUNT,
    USER_DATA_KEY,
    USER_DATA_PATH,
)
from backend.catalog import Catalog, Exercise, ReadyWorkout, ensure_catalog_db, load_catalog
from backend.localization import LanguageContext
from backend.resume import ResumePrompt
from backend.set_tracker import SetEntry, SetTracker
from backend.stopwatch import Stopwatch, format_elapsed
from backend.user_data import UserData, UserDataStore
from backend.workout_selector import ExerciseCountPicker, WorkoutSelector, clamp_count


def open_app_state(
    db_path: Path = DEFAULT_DB_PATH,
    user_data_path: Path = USER_DATA_PATH,
) -> tuple[Catalog, UserDataStore]:
    """Prepare the catalog and the user's record for a new process."""

    catalog = load_catalog(ensure_catalog_db(db_path))
    store = UserDataStore(user_data_path)
    return catalog, store


__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_EXERCISE_COUNT",
    "DEFAULT_LANGUAGE",
    "DEFAULT_REPS_PER_SET",
    "LONG_PRESS_MS",
    "MAX_EXERCISE_COUNT",
    "MIN_EXERCISE_COUNT",
    "USER_DATA_KEY",
    "USER_DATA_PATH",
    "Catalog",
    "Exercise",
    "ReadyWorkout",
    "ensure_catalog_db",
    "load_catalog",
    "LanguageContext",
    "ResumePrompt",
    "SetEntry",
    "SetTracker",
    "Stopwatch",
    "format_elapsed",
    "UserData",
    "UserDataStore",
    "ExerciseCountPicker",
    "WorkoutSelector",
    "clamp_count",
    "open_app_state",
]
