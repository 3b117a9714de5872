import importlib.util
import os

import pytest

from tests.utils import FakeTouch, display_available

kivy_available = (
    importlib.util.find_spec("kivy") is not None
    and importlib.util.find_spec("kivymd") is not None
)
# the KivyMD theme reads the window size, so these need a real window
widgets_available = kivy_available and display_available()

if widgets_available:
    os.environ.setdefault("KIVY_UNITTEST", "1")
    from kivy.app import App
    from kivy.properties import ObjectProperty
    from kivymd.theming import ThemeManager
    from kivymd.uix.button import MDFillRoundFlatIconButton
    from kivymd.uix.label import MDLabel

    from backend.localization import LanguageContext
    from backend.set_tracker import SetEntry
    from backend.stopwatch import Stopwatch
    from ui import widgets
    from ui.widgets import ExerciseCard, SetCard, StopwatchWidget, card_labels

    class _ThemedApp:
        theme_cls = None

        def property(self, name, default=None):
            return ObjectProperty(None)

    @pytest.fixture(autouse=True)
    def _provide_app(monkeypatch):
        app = _ThemedApp()
        app.theme_cls = ThemeManager()
        monkeypatch.setattr(App, "get_running_app", lambda: app)
        yield

    @pytest.fixture
    def labels():
        return card_labels(LanguageContext(language="en"))


pytestmark = pytest.mark.skipif(
    not widgets_available, reason="Kivy, KivyMD and a display are required"
)


def _place_stopwatch(widget):
    widget.pos = (0, 0)
    widget.size = (200, 64)
    return FakeTouch(100, 32)


def test_stopwatch_touch_toggles(clock):
    widget = StopwatchWidget(Stopwatch(clock=clock))
    touch = _place_stopwatch(widget)
    widget.on_touch_down(touch)
    widget.on_touch_up(touch)
    assert widget.running
    clock.advance(0.5)
    assert widget.time_text == "00:00.50"


def test_stopwatch_long_press_skips_trailing_tap(clock):
    widget = StopwatchWidget(Stopwatch(clock=clock))
    touch = _place_stopwatch(widget)
    widget.on_touch_down(touch)
    widget.on_touch_up(touch)
    clock.advance(2)

    touch = FakeTouch(100, 32)
    widget.on_touch_down(touch)
    clock.advance(0.9)
    widget.on_touch_up(touch)
    assert not widget.running
    assert widget.stopwatch.elapsed_ms == 0
    assert widget.time_text == "00:00.00"


def test_stopwatch_ignores_touches_elsewhere(clock):
    widget = StopwatchWidget(Stopwatch(clock=clock))
    _place_stopwatch(widget)
    touch = FakeTouch(500, 500)
    widget.on_touch_down(touch)
    widget.on_touch_up(touch)
    assert not widget.running
    assert clock.active() == []


def test_set_card_load_field_touch_keeps_done(labels, monkeypatch):
    entry = SetEntry(index=0)
    card = SetCard(entry, labels)
    card.pos = (0, 0)
    card.size = (200, 112)
    card.load_field.pos = (0, 40)
    card.load_field.size = (200, 30)
    seen = []
    monkeypatch.setattr(
        card.load_field, "on_touch_down", lambda touch: seen.append(touch) or True
    )

    card.on_touch_down(FakeTouch(100, 50))
    assert seen
    assert not entry.done

    card.dispatch("on_release")
    assert entry.done
    assert tuple(card.md_bg_color) == widgets.PRIMARY


def test_set_card_load_text_updates_entry(labels):
    entry = SetEntry(index=1)
    card = SetCard(entry, labels)
    card.load_field.text = "12kg"
    assert entry.load == "12kg"
    assert not entry.done


def _detail_widgets(card):
    return list(card._details.walk(restrict=True))


def test_expanded_card_without_video_shows_placeholder(labels):
    card = ExerciseCard(1, "Squat", "Knees aligned", labels, set_count=2)
    card.set_expanded(True)
    texts = [w.text for w in _detail_widgets(card) if isinstance(w, MDLabel)]
    assert labels["videoPlaceholder"] in texts
    assert labels["setsRecommended"] in texts
    assert len(card.tracker) == 2


def test_expanded_card_opens_embedded_video(labels, monkeypatch):
    opened = []
    monkeypatch.setattr(widgets.webbrowser, "open", opened.append)
    card = ExerciseCard(
        1,
        "Squat",
        "Knees aligned",
        labels,
        video_url="https://host/file/d/abc/edit?usp=sharing",
    )
    card.set_expanded(True)
    buttons = [
        w for w in _detail_widgets(card) if isinstance(w, MDFillRoundFlatIconButton)
    ]
    assert len(buttons) == 1
    buttons[0].dispatch("on_release")
    assert opened == ["https://host/file/d/abc/view?embed"]


def test_collapsing_card_drops_set_state(labels):
    card = ExerciseCard(1, "Squat", "", labels, set_count=3)
    card.set_expanded(True)
    card.tracker[0].tap_card()
    card.set_expanded(False)
    assert card.tracker is None
    card.set_expanded(True)
    assert card.tracker.completed_count == 0
