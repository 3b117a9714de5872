from __future__ import annotations

from . import DEFAULT_EXERCISE_COUNT, DEFAULT_LANGUAGE, MAX_EXERCISE_COUNT, MIN_EXERCISE_COUNT
from .catalog import Catalog, Exercise


def clamp_count(count: int) -> int:
    """Clamp ``count`` to the allowed number of exercises per workout."""

    return max(MIN_EXERCISE_COUNT, min(MAX_EXERCISE_COUNT, int(count)))


class ExerciseCountPicker:
    """The "how many exercises?" stepper shown before selection."""

    def __init__(self, count: int = DEFAULT_EXERCISE_COUNT) -> None:
        self.count = clamp_count(count)

    def increment(self) -> int:
        self.count = clamp_count(self.count + 1)
        return self.count

    def decrement(self) -> int:
        self.count = clamp_count(self.count - 1)
        return self.count


class WorkoutSelector:
    """Pick exactly ``target_count`` distinct exercises for a custom workout.

    Selecting an already selected exercise removes it.  New exercises are only
    accepted while fewer than ``target_count`` are selected; further attempts
    are ignored and leave the selection untouched.
    """

    def __init__(self, target_count: int, catalog: Catalog | None = None) -> None:
        self.target_count = clamp_count(target_count)
        self.catalog = catalog or Catalog()
        self._selected: list[str] = []

    @property
    def selected(self) -> tuple[str, ...]:
        return tuple(self._selected)

    def is_selected(self, exercise_id: str) -> bool:
        return exercise_id in self._selected

    def toggle(self, exercise_id: str) -> bool:
        """Toggle ``exercise_id`` and return whether it is now selected."""

        if exercise_id in self._selected:
            self._selected.remove(exercise_id)
            return False
        if len(self._selected) < self.target_count:
            self._selected.append(exercise_id)
            return True
        return False

    @property
    def can_commit(self) -> bool:
        return len(self._selected) == self.target_count

    @property
    def title_counter(self) -> str:
        return f"({len(self._selected)}/{self.target_count})"

    def visible_exercises(
        self, query: str = "", language: str = DEFAULT_LANGUAGE
    ) -> list[Exercise]:
        return self.catalog.search(query, language)

    def commit(self, store) -> tuple[str, ...] | None:
        """Save the selection as the active workout.

        Returns the saved ids, or ``None`` when the selection is incomplete
        and nothing was written.
        """

        if not self.can_commit:
            return None
        ids = self.selected
        store.set_active_workout(ids)
        return ids
