"""Screens that only show text and navigate; their layout lives in ``main.kv``."""

from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen


class IntroScreen(MDScreen):
    pass


class MenuScreen(MDScreen):
    pass


class WorkoutContextScreen(MDScreen):
    pass


class FinalScreen(MDScreen):
    """Congratulations screen; leaving it ends the stored workout."""

    def back_home(self):
        MDApp.get_running_app().finish_workout()
        if self.manager:
            self.manager.current = "home"
