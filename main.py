from kivymd.app import MDApp
from kivy.lang import Builder
from kivy.properties import NumericProperty, ObjectProperty, StringProperty
from kivy.core.window import Window
from pathlib import Path
import logging
import os
import sys

from backend import settings
from backend.localization import LanguageContext
from core import DEFAULT_DB_PATH, USER_DATA_PATH, open_app_state

# Screen classes must be importable before ``main.kv`` is loaded
from ui.screens import (  # noqa: F401
    ActiveWorkoutScreen,
    FinalScreen,
    HomeScreen,
    IntroScreen,
    MenuScreen,
    ReadyWorkoutScreen,
    RecommendationScreen,
    WorkoutContextScreen,
    WorkoutSelectScreen,
    WorkoutSetupScreen,
)


if os.name == "nt" or sys.platform.startswith("win"):
    Window.size = (280, 280 * (20 / 9))


class KneeGuideApp(MDApp):
    """Application object owning the catalog, the user record and the language.

    Screens reach these through ``MDApp.get_running_app()``; nothing is kept in
    module-level globals.
    """

    language = StringProperty("pt")
    # number of exercises chosen on the setup screen
    selected_count = NumericProperty(4)
    # predefined workout opened from the recommendation screen
    ready_workout_id = StringProperty("")
    context = ObjectProperty(None)

    def __init__(
        self,
        db_path: Path = DEFAULT_DB_PATH,
        user_data_path: Path = USER_DATA_PATH,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.catalog, self.user_data = open_app_state(db_path, user_data_path)
        self.context = LanguageContext(language=settings.default_language())
        self.language = self.context.language
        self.context.bind(language=self.setter("language"))
        self.selected_count = settings.default_exercise_count()

    def build(self):
        self.theme_cls.theme_style = "Dark"
        self.theme_cls.primary_palette = "Orange"
        return Builder.load_file(str(Path(__file__).with_name("main.kv")))

    def tr(self, key: str, *_language) -> str:
        """Translate ``key``.

        ``main.kv`` passes ``app.language`` as an extra argument so bound
        texts refresh when the language changes.
        """
        return self.context.t(key)

    def finish_workout(self):
        """End the stored custom workout, if any."""
        if self.user_data.data.has_active_workout:
            logging.info("Workout finished")
        self.user_data.clear_active_workout()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    KneeGuideApp().run()
