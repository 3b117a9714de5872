"""Screens for building a custom workout: pick a count, then pick exercises."""

from __future__ import annotations

from kivy.clock import Clock
from kivy.properties import BooleanProperty, NumericProperty, StringProperty
from kivymd.app import MDApp
from kivymd.uix.list import IconRightWidget, OneLineRightIconListItem
from kivymd.uix.screen import MDScreen

from backend import DEFAULT_EXERCISE_COUNT
from backend.workout_selector import ExerciseCountPicker, WorkoutSelector


class WorkoutSetupScreen(MDScreen):
    """Stepper for the number of exercises, bounded to 1..10."""

    count = NumericProperty(DEFAULT_EXERCISE_COUNT)

    def on_pre_enter(self, *args):
        app = MDApp.get_running_app()
        self.picker = ExerciseCountPicker(app.selected_count)
        self.count = self.picker.count
        return super().on_pre_enter(*args)

    def decrement(self):
        self.count = self.picker.decrement()

    def increment(self):
        self.count = self.picker.increment()

    def choose_exercises(self):
        MDApp.get_running_app().selected_count = self.count
        if self.manager:
            self.manager.current = "workout_select"


class WorkoutSelectScreen(MDScreen):
    """Pick exactly the chosen number of exercises from the catalog."""

    search_text = StringProperty("")
    title = StringProperty("")
    can_start = BooleanProperty(False)

    selector: WorkoutSelector | None = None
    _search_event = None

    def on_pre_enter(self, *args):
        app = MDApp.get_running_app()
        self.selector = WorkoutSelector(app.selected_count, app.catalog)
        self.search_text = ""
        if "search_field" in self.ids:
            self.ids.search_field.text = ""
        self.refresh()
        return super().on_pre_enter(*args)

    def on_leave(self, *args):
        if self._search_event:
            self._search_event.cancel()
            self._search_event = None
        return super().on_leave(*args)

    def update_search(self, text):
        """Update search text with debounce to limit populate frequency."""
        self.search_text = text
        if self._search_event:
            self._search_event.cancel()

        def do_populate(dt):
            self._search_event = None
            self.populate()

        self._search_event = Clock.schedule_once(do_populate, 0.2)

    def refresh(self):
        app = MDApp.get_running_app()
        self.title = f"{app.tr('chooseTitle')} {self.selector.title_counter}"
        self.can_start = self.selector.can_commit
        self.populate()

    def populate(self):
        exercise_list = self.ids.get("exercise_list")
        if exercise_list is None or self.selector is None:
            return
        app = MDApp.get_running_app()
        exercise_list.clear_widgets()
        for ex in self.selector.visible_exercises(self.search_text, app.context.language):
            selected = self.selector.is_selected(ex.id)
            item = OneLineRightIconListItem(
                text=ex.display_name(app.context.language),
                on_release=lambda _item, ex_id=ex.id: self.toggle(ex_id),
            )
            item.add_widget(
                IconRightWidget(
                    icon="checkbox-marked" if selected else "checkbox-blank-outline",
                    on_release=lambda _icon, ex_id=ex.id: self.toggle(ex_id),
                )
            )
            exercise_list.add_widget(item)

    def toggle(self, exercise_id: str):
        self.selector.toggle(exercise_id)
        self.refresh()

    def start_workout(self):
        app = MDApp.get_running_app()
        if self.selector.commit(app.user_data) is None:
            return
        if self.manager:
            self.manager.current = "active_workout"
