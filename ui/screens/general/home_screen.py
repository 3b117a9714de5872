from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen
from kivymd.uix.dialog import MDDialog
from kivymd.uix.button import MDFlatButton, MDRaisedButton

from backend.resume import ResumePrompt


class HomeScreen(MDScreen):
    """Landing screen that asks to resume an unfinished custom workout."""

    _resume_dialog = None

    def on_enter(self, *args):
        """Ask again on every visit while a workout is stored."""
        app = MDApp.get_running_app()
        prompt = ResumePrompt(app.user_data)
        if prompt.should_prompt:
            self._show_resume_dialog(prompt)
        return super().on_enter(*args)

    def on_leave(self, *args):
        if self._resume_dialog:
            self._resume_dialog.dismiss()
            self._resume_dialog = None
        return super().on_leave(*args)

    def _show_resume_dialog(self, prompt: ResumePrompt) -> None:
        app = MDApp.get_running_app()

        def resume(*_):
            dialog.dismiss()
            self._resume_dialog = None
            if self.manager:
                self.manager.current = prompt.resume()

        def discard(*_):
            prompt.discard()
            dialog.dismiss()
            self._resume_dialog = None

        dialog = MDDialog(
            title=app.tr("resumeTitle"),
            text=app.tr("resumeDesc"),
            auto_dismiss=False,
            buttons=[
                MDFlatButton(text=app.tr("no"), on_release=discard),
                MDRaisedButton(text=app.tr("yes"), on_release=resume),
            ],
        )
        dialog.open()
        self._resume_dialog = dialog

    def set_language(self, language: str) -> None:
        MDApp.get_running_app().context.language = language
