import os
import sqlite3
import sys
from pathlib import Path

import pytest

# Kivy parses sys.argv on import unless told not to
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")

sys.path.append(str(Path(__file__).resolve().parents[1]))

from backend.catalog import load_catalog  # noqa: E402
from backend.user_data import UserDataStore  # noqa: E402
from tests.utils import FakeClock  # noqa: E402


@pytest.fixture
def sample_db(tmp_path: Path) -> Path:
    """Create a catalog with two exercises and one predefined workout."""
    db_path = tmp_path / "catalog.db"
    sql_path = Path(__file__).resolve().parent.parent / "data" / "catalog_schema.sql"

    conn = sqlite3.connect(db_path)
    with open(sql_path, "r", encoding="utf-8") as fh:
        conn.executescript(fh.read())

    conn.executemany(
        "INSERT INTO library_exercises (id, icon, video_url, position) VALUES (?, ?, ?, ?)",
        [
            ("valid1", "Activity", None, 0),
            ("valid2", "Layers", "https://example.com/v2", 1),
        ],
    )
    conn.executemany(
        "INSERT INTO library_exercise_texts (exercise_id, language, name, quick_fix) VALUES (?, ?, ?, ?)",
        [
            ("valid1", "pt", "Ponte de glúteo", "Suba devagar"),
            ("valid1", "en", "Glute bridge", "Rise slowly"),
            ("valid2", "pt", "Agachamento", "Joelhos alinhados"),
            ("valid2", "en", "Squat", "Knees aligned"),
        ],
    )
    conn.execute(
        "INSERT INTO preset_workouts (id, frequency, number_of_sets, position) VALUES ('w1', '2x', 3, 0)"
    )
    conn.executemany(
        "INSERT INTO preset_workout_titles (workout_id, language, title) VALUES (?, ?, ?)",
        [("w1", "pt", "Treino A"), ("w1", "en", "Workout A")],
    )
    conn.executemany(
        "INSERT INTO preset_workout_exercises (workout_id, exercise_id, position) VALUES (?, ?, ?)",
        [("w1", "valid2", 0), ("w1", "ghost", 1), ("w1", "valid1", 2)],
    )
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture
def catalog(sample_db):
    return load_catalog(sample_db)


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "user_data.json"


@pytest.fixture
def store(store_path: Path) -> UserDataStore:
    return UserDataStore(store_path)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
