from __future__ import annotations

from kivy.event import EventDispatcher
from kivy.properties import BooleanProperty, NumericProperty, StringProperty

from . import DEFAULT_REPS_PER_SET


class SetEntry(EventDispatcher):
    """Done flag and free-text load for one rendered set.

    The values only live as long as the card showing them.
    """

    index = NumericProperty(0)
    done = BooleanProperty(False)
    load = StringProperty("")
    reps = NumericProperty(DEFAULT_REPS_PER_SET)

    def tap_card(self, in_load_area: bool = False) -> bool:
        """Flip ``done`` unless the tap landed on the load field."""

        if not in_load_area:
            self.done = not self.done
        return self.done

    def set_load(self, text: str) -> None:
        # no validation; "12kg", "band" and "" are all fine
        self.load = text


class SetTracker:
    """The set cards of one exercise."""

    def __init__(self, set_count: int, reps: int = DEFAULT_REPS_PER_SET) -> None:
        if set_count < 1:
            raise ValueError("A workout needs at least one set")
        self.entries = [SetEntry(index=i, reps=reps) for i in range(set_count)]

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> SetEntry:
        return self.entries[index]

    @property
    def completed_count(self) -> int:
        return sum(1 for entry in self.entries if entry.done)

    @property
    def all_done(self) -> bool:
        return self.completed_count == len(self.entries)
