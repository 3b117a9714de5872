"""Screens that run a workout: the stored custom one or a predefined program."""

from __future__ import annotations

from kivy.properties import BooleanProperty, StringProperty
from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen

from backend import DEFAULT_SETS_PER_EXERCISE
from backend.catalog import Exercise
from ui.widgets import ExerciseCard, StopwatchWidget, card_labels


class _ExerciseListScreen(MDScreen):
    """Shared accordion behaviour: at most one exercise card is open."""

    _cards: list[ExerciseCard]

    def _fill(self, exercises: list[Exercise], **card_kwargs) -> None:
        app = MDApp.get_running_app()
        ctx = app.context
        labels = card_labels(ctx)
        container = self.ids.exercise_list
        self._clear_cards()
        container.clear_widgets()
        for position, ex in enumerate(exercises, start=1):
            card = ExerciseCard(
                position,
                ex.display_name(ctx.language),
                ex.display_quick_fix(ctx.language),
                labels,
                video_url=ex.video_url,
                on_toggle=self._open_only,
                **card_kwargs,
            )
            self._cards.append(card)
            container.add_widget(card)

    def _open_only(self, card: ExerciseCard) -> None:
        opening = not card.expanded
        for other in self._cards:
            if other is not card:
                other.set_expanded(False)
        card.set_expanded(opening)

    def _clear_cards(self) -> None:
        for card in getattr(self, "_cards", []):
            card.cancel()
        self._cards = []

    def on_leave(self, *args):
        self._clear_cards()
        if "exercise_list" in self.ids:
            self.ids.exercise_list.clear_widgets()
        return super().on_leave(*args)

    def finish(self):
        if self.manager:
            self.manager.current = "final"


class ActiveWorkoutScreen(_ExerciseListScreen):
    """Runs the custom workout stored in the user's record.

    Ids that no longer exist in the catalog are skipped.
    """

    def on_pre_enter(self, *args):
        app = MDApp.get_running_app()
        exercises = app.catalog.resolve(app.user_data.data.active_workout)
        self._fill(
            exercises, set_count=DEFAULT_SETS_PER_EXERCISE, with_stopwatch=True
        )
        return super().on_pre_enter(*args)


class ReadyWorkoutScreen(_ExerciseListScreen):
    """Runs a predefined workout straight from the catalog.

    Nothing is written to the user's record, so leaving this screen never
    leaves a workout to resume.
    """

    title = StringProperty("")
    found = BooleanProperty(True)

    stopwatch_widget: StopwatchWidget | None = None

    def on_pre_enter(self, *args):
        app = MDApp.get_running_app()
        workout = app.catalog.ready_workout(app.ready_workout_id)
        self.found = workout is not None
        if workout is None:
            self.title = app.tr("notFound")
            self._clear_cards()
            self.ids.exercise_list.clear_widgets()
            return super().on_pre_enter(*args)
        self.title = app.context.pick(workout.title)
        self.stopwatch_widget = StopwatchWidget(hint=app.tr("timerHint"))
        self.ids.stopwatch_box.clear_widgets()
        self.ids.stopwatch_box.add_widget(self.stopwatch_widget)
        self._fill(app.catalog.resolve(workout.exercises), set_count=workout.sets)
        return super().on_pre_enter(*args)

    def on_leave(self, *args):
        if self.stopwatch_widget is not None:
            self.stopwatch_widget.cancel()
            self.ids.stopwatch_box.clear_widgets()
            self.stopwatch_widget = None
        return super().on_leave(*args)
