"""Persistent user record: favorites, notes, custom plans and active workout.

The whole record is stored as one JSON object under :data:`USER_DATA_KEY`.
Every mutation builds a new :class:`UserData` value and rewrites the complete
record, once to the primary file and once to a backup copy next to it, so a
later :meth:`UserDataStore.load` in the same process always sees the change.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from . import USER_DATA_KEY, USER_DATA_PATH


@dataclass(frozen=True)
class UserData:
    """Immutable snapshot of everything the user has saved."""

    favorites: tuple[str, ...] = ()
    notes: Mapping[str, str] = field(default_factory=dict)
    custom_plans: Mapping[str, str] = field(default_factory=dict)
    active_workout: tuple[str, ...] = ()

    def __post_init__(self):
        # read-only views over private copies; changes go through the store
        object.__setattr__(self, "notes", MappingProxyType(dict(self.notes)))
        object.__setattr__(self, "custom_plans", MappingProxyType(dict(self.custom_plans)))
        object.__setattr__(self, "favorites", tuple(self.favorites))
        object.__setattr__(self, "active_workout", tuple(self.active_workout))

    @property
    def has_active_workout(self) -> bool:
        return bool(self.active_workout)

    def to_dict(self) -> dict:
        """Return the JSON-serialisable form of the record."""

        return {
            "favorites": list(self.favorites),
            "notes": dict(self.notes),
            "customPlans": dict(self.custom_plans),
            "activeWorkout": list(self.active_workout),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserData":
        """Build a record from ``data``.

        Missing keys take their default value.  A value of the wrong type
        raises :class:`ValueError`.
        """

        if not isinstance(data, dict):
            raise ValueError("User data must be an object")
        favorites = _string_list(data.get("favorites", []), "favorites")
        notes = _string_map(data.get("notes", {}), "notes")
        plans = _string_map(data.get("customPlans", {}), "customPlans")
        active = _string_list(data.get("activeWorkout", []), "activeWorkout")
        return cls(
            favorites=tuple(favorites),
            notes=notes,
            custom_plans=plans,
            active_workout=tuple(active),
        )


def _string_list(value, name: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"'{name}' must be a list of strings")
    return list(value)


def _string_map(value, name: str) -> dict[str, str]:
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ValueError(f"'{name}' must map strings to strings")
    return dict(value)


class UserDataStore:
    """Load, mutate and persist the user's :class:`UserData` record.

    The record is read once when the store is created.  Observers registered
    with :meth:`bind` are called with the new record after every mutation.
    """

    def __init__(self, path: Path = USER_DATA_PATH, key: str = USER_DATA_KEY):
        self.path = Path(path)
        self.backup_path = self.path.with_name(
            f"{self.path.stem}_backup{self.path.suffix}"
        )
        self.key = key
        self._observers: list[Callable[[UserData], None]] = []
        self.data = self.load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> UserData:
        """Return the stored record or the defaults.

        The primary file is tried first, then the backup copy.  Missing,
        empty or malformed files never raise.
        """

        for path in (self.path, self.backup_path):
            try:
                if not path.exists():
                    continue
                text = path.read_text(encoding="utf-8").strip()
                if not text:
                    continue
                payload = json.loads(text)
                if not isinstance(payload, dict) or self.key not in payload:
                    raise ValueError(f"missing '{self.key}' record")
                return UserData.from_dict(payload[self.key])
            except (OSError, ValueError, RecursionError) as exc:
                logging.warning("Ignoring unreadable user data %s: %s", path, exc)
                continue
        return UserData()

    def save(self, data: UserData) -> None:
        """Write ``data`` in full, replacing any previous record."""

        payload = json.dumps({self.key: data.to_dict()}, ensure_ascii=False)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
            self.backup_path.write_text(payload, encoding="utf-8")
        except OSError:
            logging.exception("Saving user data to %s failed", self.path)
            raise

    def _commit(self, data: UserData) -> UserData:
        self.data = data
        self.save(data)
        for callback in list(self._observers):
            callback(data)
        return data

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def bind(self, callback: Callable[[UserData], None]) -> None:
        if callback not in self._observers:
            self._observers.append(callback)

    def unbind(self, callback: Callable[[UserData], None]) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_active_workout(self, exercise_ids: Iterable[str]) -> UserData:
        """Replace the active workout with ``exercise_ids`` in order."""

        return self._commit(replace(self.data, active_workout=tuple(exercise_ids)))

    def clear_active_workout(self) -> UserData:
        """Abandon or complete the current session."""

        return self._commit(replace(self.data, active_workout=()))

    def toggle_favorite(self, exercise_id: str) -> UserData:
        favorites = self.data.favorites
        if exercise_id in favorites:
            favorites = tuple(f for f in favorites if f != exercise_id)
        else:
            favorites = favorites + (exercise_id,)
        return self._commit(replace(self.data, favorites=favorites))

    def set_note(self, exercise_id: str, text: str) -> UserData:
        notes = {**self.data.notes, exercise_id: text}
        return self._commit(replace(self.data, notes=notes))

    def set_plan(self, plan_id: str, text: str) -> UserData:
        plans = {**self.data.custom_plans, plan_id: text}
        return self._commit(replace(self.data, custom_plans=plans))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_favorite(self, exercise_id: str) -> bool:
        return exercise_id in self.data.favorites

    def note_for(self, exercise_id: str) -> str:
        return self.data.notes.get(exercise_id, "")

    def plan_for(self, plan_id: str) -> str:
        return self.data.custom_plans.get(plan_id, "")
