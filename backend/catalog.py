"""Read-only exercise and predefined workout catalog.

The catalog lives in a small SQLite database that is created from
``data/catalog_schema.sql`` and ``data/catalog_seed.sql`` the first time the
application starts.  Nothing in the application writes to it afterwards.
"""

from __future__ import annotations

import logging
import os
import re
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path

from . import DEFAULT_DB_PATH, DEFAULT_LANGUAGE

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
SCHEMA_PATH = DATA_DIR / "catalog_schema.sql"
SEED_PATH = DATA_DIR / "catalog_seed.sql"

FREQUENCIES = ("2x", "3x")

# shared-video page suffixes replaced by the embeddable view
_EMBED_SUFFIXES = (re.compile(r"/watch.*"), re.compile(r"/edit.*"))


@dataclass(frozen=True)
class Exercise:
    """Single catalog exercise with its localized texts."""

    id: str
    name: dict[str, str] = field(default_factory=dict)
    quick_fix: dict[str, str] = field(default_factory=dict)
    video_url: str | None = None
    icon: str = "Activity"

    def display_name(self, language: str = DEFAULT_LANGUAGE) -> str:
        return localized(self.name, language)

    def display_quick_fix(self, language: str = DEFAULT_LANGUAGE) -> str:
        return localized(self.quick_fix, language)

    @property
    def embed_url(self) -> str | None:
        return to_embed_url(self.video_url) if self.video_url else None


@dataclass(frozen=True)
class ReadyWorkout:
    """Predefined workout program.

    ``exercises`` may reference ids that are missing from the catalog; use
    :meth:`Catalog.resolve` to obtain the exercises that can be shown.
    """

    id: str
    title: dict[str, str] = field(default_factory=dict)
    frequency: str = "2x"
    exercises: tuple[str, ...] = ()
    sets: int = 1


def to_embed_url(video_url: str) -> str:
    """Rewrite a shared video link to its embeddable ``/view?embed`` form.

    Everything from ``/watch`` or ``/edit`` onwards is replaced; other links
    are returned unchanged.
    """

    for suffix in _EMBED_SUFFIXES:
        video_url = suffix.sub("/view?embed", video_url, count=1)
    return video_url


def localized(texts: dict[str, str], language: str) -> str:
    """Return the text for ``language`` falling back to the default language."""

    if language in texts:
        return texts[language]
    return texts.get(DEFAULT_LANGUAGE, "")


class Catalog:
    """In-memory view of the catalog database."""

    def __init__(
        self,
        exercises: list[Exercise] | None = None,
        ready_workouts: list[ReadyWorkout] | None = None,
    ) -> None:
        self.exercises: list[Exercise] = list(exercises or [])
        self.ready_workouts: list[ReadyWorkout] = list(ready_workouts or [])
        self._by_id = {ex.id: ex for ex in self.exercises}
        self._workouts_by_id = {w.id: w for w in self.ready_workouts}

    def exercise(self, exercise_id: str) -> Exercise | None:
        return self._by_id.get(exercise_id)

    def resolve(self, exercise_ids) -> list[Exercise]:
        """Return exercises for ``exercise_ids`` in order, dropping unknown ids."""

        resolved = []
        for exercise_id in exercise_ids:
            ex = self._by_id.get(exercise_id)
            if ex is not None:
                resolved.append(ex)
        return resolved

    def ready_workout(self, workout_id: str) -> ReadyWorkout | None:
        return self._workouts_by_id.get(workout_id)

    def ready_workouts_by_frequency(self, frequency: str) -> list[ReadyWorkout]:
        return [w for w in self.ready_workouts if w.frequency == frequency]

    def search(self, query: str, language: str = DEFAULT_LANGUAGE) -> list[Exercise]:
        """Return exercises whose localized name contains ``query``.

        Matching is case-insensitive and keeps catalog order.  An empty
        query returns every exercise.
        """

        needle = query.lower()
        return [
            ex for ex in self.exercises if needle in ex.display_name(language).lower()
        ]


def ensure_catalog_db(db_path: Path = DEFAULT_DB_PATH) -> Path:
    """Create the catalog database at ``db_path`` if it does not exist."""

    db_path = Path(db_path)
    if db_path.exists():
        return db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)
    # db_path only appears once the whole seed has been applied
    tmp_path = db_path.with_suffix(".tmp")
    if tmp_path.exists():
        tmp_path.unlink()
    conn = sqlite3.connect(str(tmp_path))
    try:
        conn.executescript(SCHEMA_PATH.read_text(encoding="utf-8"))
        conn.executescript(SEED_PATH.read_text(encoding="utf-8"))
        conn.commit()
    except (sqlite3.Error, OSError):
        conn.close()
        tmp_path.unlink()
        logging.exception("Building the exercise catalog failed")
        raise
    conn.close()
    os.replace(tmp_path, db_path)
    logging.info("Created exercise catalog at %s", db_path)
    return db_path


def load_catalog(db_path: Path = DEFAULT_DB_PATH) -> Catalog:
    """Load every exercise and predefined workout from ``db_path``."""

    with sqlite3.connect(str(db_path)) as conn:
        cursor = conn.cursor()

        cursor.execute(
            "SELECT exercise_id, language, name, quick_fix FROM library_exercise_texts"
        )
        names: dict[str, dict[str, str]] = {}
        quick_fixes: dict[str, dict[str, str]] = {}
        for exercise_id, language, name, quick_fix in cursor.fetchall():
            names.setdefault(exercise_id, {})[language] = name
            quick_fixes.setdefault(exercise_id, {})[language] = quick_fix or ""

        cursor.execute(
            "SELECT id, icon, video_url FROM library_exercises ORDER BY position, id"
        )
        exercises = [
            Exercise(
                id=ex_id,
                name=names.get(ex_id, {}),
                quick_fix=quick_fixes.get(ex_id, {}),
                video_url=video_url,
                icon=icon or "Activity",
            )
            for ex_id, icon, video_url in cursor.fetchall()
        ]

        cursor.execute("SELECT workout_id, language, title FROM preset_workout_titles")
        titles: dict[str, dict[str, str]] = {}
        for workout_id, language, title in cursor.fetchall():
            titles.setdefault(workout_id, {})[language] = title

        cursor.execute(
            "SELECT workout_id, exercise_id FROM preset_workout_exercises"
            " ORDER BY workout_id, position"
        )
        workout_exercises: dict[str, list[str]] = {}
        for workout_id, exercise_id in cursor.fetchall():
            workout_exercises.setdefault(workout_id, []).append(exercise_id)

        cursor.execute(
            "SELECT id, frequency, number_of_sets FROM preset_workouts ORDER BY position, id"
        )
        workouts = [
            ReadyWorkout(
                id=w_id,
                title=titles.get(w_id, {}),
                frequency=frequency,
                exercises=tuple(workout_exercises.get(w_id, [])),
                sets=sets,
            )
            for w_id, frequency, sets in cursor.fetchall()
        ]

    return Catalog(exercises, workouts)
