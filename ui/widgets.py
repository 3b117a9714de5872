import logging
import webbrowser

from kivy.metrics import dp
from kivy.properties import BooleanProperty, ObjectProperty, StringProperty
from kivy.uix.behaviors import ButtonBehavior
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDFillRoundFlatIconButton
from kivymd.uix.gridlayout import MDGridLayout
from kivymd.uix.label import MDLabel
from kivymd.uix.textfield import MDTextField

from backend import settings
from backend.catalog import to_embed_url
from backend.set_tracker import SetEntry, SetTracker
from backend.stopwatch import Stopwatch

PRIMARY = (0.96, 0.45, 0.09, 1)
SURFACE = (0.09, 0.09, 0.09, 1)


class StopwatchWidget(MDBoxLayout):
    """Renders a :class:`Stopwatch`; tap toggles it, a long hold resets it."""

    hint = StringProperty("")
    time_text = StringProperty("00:00.00")
    running = BooleanProperty(False)

    def __init__(self, stopwatch: Stopwatch | None = None, **kwargs):
        kwargs.setdefault("orientation", "vertical")
        kwargs.setdefault("size_hint_y", None)
        kwargs.setdefault("height", dp(64))
        super().__init__(**kwargs)
        self.stopwatch = stopwatch or Stopwatch(long_press_ms=settings.long_press_ms())
        self.stopwatch.bind(formatted=self.setter("time_text"))
        self.stopwatch.bind(running=self.setter("running"))
        self.time_label = MDLabel(
            text=self.time_text,
            halign="center",
            font_style="H5",
            theme_text_color="Custom",
            text_color=PRIMARY,
        )
        self.hint_label = MDLabel(
            text=self.hint, halign="center", font_style="Overline"
        )
        self.bind(time_text=self.time_label.setter("text"))
        self.bind(hint=self.hint_label.setter("text"))
        self.add_widget(self.time_label)
        self.add_widget(self.hint_label)

    def on_touch_down(self, touch):
        if self.collide_point(*touch.pos):
            touch.grab(self)
            self.stopwatch.press()
            return True
        return super().on_touch_down(touch)

    def on_touch_up(self, touch):
        if touch.grab_current is self:
            touch.ungrab(self)
            if not self.stopwatch.release():
                self.stopwatch.tap()
            return True
        return super().on_touch_up(touch)

    def cancel(self):
        self.stopwatch.cancel()


class SetCard(ButtonBehavior, MDBoxLayout):
    """Card for a single set.  Tapping outside the load field marks it done."""

    entry = ObjectProperty(None)

    def __init__(self, entry: SetEntry, labels: dict, **kwargs):
        kwargs.setdefault("orientation", "vertical")
        kwargs.setdefault("size_hint_y", None)
        kwargs.setdefault("height", dp(112))
        kwargs.setdefault("padding", dp(8))
        super().__init__(**kwargs)
        self.entry = entry
        self.add_widget(
            MDLabel(text=f"{labels['serie']} {entry.index + 1}", halign="center", bold=True)
        )
        self.add_widget(
            MDLabel(text=f"{labels['repeticao']}: {entry.reps}", halign="center")
        )
        self.load_field = MDTextField(
            hint_text=labels["carga"], text=entry.load, halign="center"
        )
        self.load_field.bind(text=lambda _inst, value: entry.set_load(value))
        self.add_widget(self.load_field)
        self.add_widget(
            MDLabel(text=labels["intervalValue"], halign="center", font_style="Caption")
        )
        entry.bind(done=self._update_colors)
        self._update_colors(entry, entry.done)

    def on_touch_down(self, touch):
        if self.load_field.collide_point(*touch.pos):
            # editing the load never changes the done flag
            return self.load_field.on_touch_down(touch)
        return super().on_touch_down(touch)

    def on_release(self):
        self.entry.tap_card()

    def _update_colors(self, _entry, done):
        self.md_bg_color = PRIMARY if done else SURFACE


class ExerciseCard(MDBoxLayout):
    """Collapsible exercise entry.

    Collapsed it only shows the position and name.  Expanded it adds the
    quick-fix note, the video link, an optional stopwatch and one
    :class:`SetCard` per set.
    """

    expanded = BooleanProperty(False)

    def __init__(
        self,
        position: int,
        title: str,
        quick_fix: str,
        labels: dict,
        set_count: int = 0,
        with_stopwatch: bool = False,
        video_url: str | None = None,
        on_toggle=None,
        **kwargs,
    ):
        super().__init__(
            orientation="vertical",
            padding=(dp(12), dp(8)),
            spacing=dp(8),
            size_hint_y=None,
            **kwargs,
        )
        self.bind(minimum_height=self.setter("height"))
        self._on_toggle = on_toggle
        self._labels = labels
        self._quick_fix = quick_fix
        self._set_count = set_count
        self._with_stopwatch = with_stopwatch
        self._video_url = video_url
        self.tracker: SetTracker | None = None
        self.stopwatch_widget: StopwatchWidget | None = None
        self.header = _HeaderButton(
            text=f"{position}. {title}", size_hint_y=None, height=dp(48)
        )
        self.header.bind(on_release=lambda *_: self.toggle())
        self.add_widget(self.header)
        self._details: MDBoxLayout | None = None

    def toggle(self):
        if self._on_toggle:
            self._on_toggle(self)
        else:
            self.set_expanded(not self.expanded)

    def set_expanded(self, expanded: bool):
        if expanded == self.expanded:
            return
        self.expanded = expanded
        if expanded:
            self._details = self._build_details()
            self.add_widget(self._details)
        elif self._details is not None:
            self.remove_widget(self._details)
            self.cancel()
            # set state is scratch data owned by the expanded card
            self._details = None
            self.tracker = None
            self.stopwatch_widget = None

    def cancel(self):
        if self.stopwatch_widget is not None:
            self.stopwatch_widget.cancel()

    def _build_details(self) -> MDBoxLayout:
        box = MDBoxLayout(orientation="vertical", spacing=dp(8), size_hint_y=None)
        box.bind(minimum_height=box.setter("height"))
        note = MDLabel(
            text=f"{self._labels['quickFixLabel']}: {self._quick_fix}",
            adaptive_height=True,
        )
        box.add_widget(note)
        box.add_widget(self._build_video_row())
        if self._with_stopwatch:
            self.stopwatch_widget = StopwatchWidget(hint=self._labels["timerHint"])
            box.add_widget(self.stopwatch_widget)
        if self._set_count:
            box.add_widget(
                MDLabel(
                    text=self._labels["setsRecommended"],
                    font_style="Subtitle2",
                    adaptive_height=True,
                )
            )
            self.tracker = SetTracker(self._set_count)
            grid = MDGridLayout(cols=2, spacing=dp(8), size_hint_y=None)
            grid.bind(minimum_height=grid.setter("height"))
            for entry in self.tracker.entries:
                grid.add_widget(SetCard(entry, self._labels))
            box.add_widget(grid)
        return box

    def _build_video_row(self):
        if not self._video_url:
            return MDLabel(
                text=self._labels["videoPlaceholder"],
                halign="center",
                theme_text_color="Hint",
                size_hint_y=None,
                height=dp(48),
            )
        return MDFillRoundFlatIconButton(
            icon="play-circle",
            text=self._labels["tapToWatch"],
            pos_hint={"center_x": 0.5},
            on_release=lambda *_: open_video(self._video_url),
        )


class _HeaderButton(ButtonBehavior, MDBoxLayout):
    text = StringProperty("")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        label = MDLabel(text=self.text, bold=True)
        self.bind(text=label.setter("text"))
        self.add_widget(label)


def open_video(video_url: str) -> None:
    """Open the embeddable form of ``video_url`` in the system browser."""

    url = to_embed_url(video_url)
    logging.info("Opening exercise video %s", url)
    webbrowser.open(url)


CARD_LABEL_KEYS = (
    "serie",
    "repeticao",
    "carga",
    "intervalValue",
    "quickFixLabel",
    "timerHint",
    "setsRecommended",
    "tapToWatch",
    "videoPlaceholder",
)


def card_labels(context) -> dict:
    """Translated labels needed by :class:`ExerciseCard` and :class:`SetCard`."""

    return {key: context.t(key) for key in CARD_LABEL_KEYS}
