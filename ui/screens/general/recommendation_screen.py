from kivymd.app import MDApp
from kivymd.uix.list import TwoLineListItem
from kivymd.uix.screen import MDScreen

from backend.catalog import FREQUENCIES, ReadyWorkout


class RecommendationScreen(MDScreen):
    """Lists the predefined workouts grouped by weekly frequency."""

    def on_pre_enter(self, *args):
        self.populate()
        return super().on_pre_enter(*args)

    def populate(self):
        app = MDApp.get_running_app()
        lists = {
            "2x": self.ids.get("list_2x"),
            "3x": self.ids.get("list_3x"),
        }
        for frequency in FREQUENCIES:
            target = lists.get(frequency)
            if target is None:
                continue
            target.clear_widgets()
            for workout in app.catalog.ready_workouts_by_frequency(frequency):
                target.add_widget(self._make_item(app, workout))

    def _make_item(self, app, workout: ReadyWorkout) -> TwoLineListItem:
        ctx = app.context
        secondary = (
            f"{len(workout.exercises)} {ctx.t('exercisesLabel')} • "
            f"{workout.sets} {ctx.t('setsLabel')}"
        )
        return TwoLineListItem(
            text=ctx.pick(workout.title),
            secondary_text=secondary,
            on_release=lambda *_: self.open_workout(workout.id),
        )

    def open_workout(self, workout_id: str):
        app = MDApp.get_running_app()
        app.ready_workout_id = workout_id
        if self.manager:
            self.manager.current = "ready_workout"
