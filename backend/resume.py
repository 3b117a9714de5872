"""Resume or discard an unfinished custom workout on the home screen."""

from __future__ import annotations

import logging

from .user_data import UserDataStore

ACTIVE_WORKOUT_SCREEN = "active_workout"


class ResumePrompt:
    """Advisory state for the home screen's resume question.

    A new prompt is created every time the home screen is entered, so the
    question is asked again as long as an active workout remains stored.
    """

    def __init__(self, store: UserDataStore) -> None:
        self.store = store
        self.is_open = store.data.has_active_workout

    @property
    def should_prompt(self) -> bool:
        return self.is_open

    def resume(self) -> str:
        """Close the prompt and return the screen that continues the workout."""

        self.is_open = False
        logging.info(
            "Resuming workout with %d exercises", len(self.store.data.active_workout)
        )
        return ACTIVE_WORKOUT_SCREEN

    def discard(self) -> None:
        """Close the prompt and abandon the stored workout."""

        self.is_open = False
        self.store.clear_active_workout()
        logging.info("Discarded unfinished workout")
