"""Stopwatch shown above each workout.

A tap starts or pauses the stopwatch.  Holding it for
:data:`~backend.LONG_PRESS_MS` stops it and resets the elapsed time.  The
state lives in Kivy properties so widgets bound to ``formatted`` or
``running`` update whenever the stopwatch changes.
"""

from __future__ import annotations

from kivy.clock import Clock
from kivy.event import EventDispatcher
from kivy.properties import BooleanProperty, NumericProperty, StringProperty

from . import LONG_PRESS_MS, STOPWATCH_TICK_MS


def format_elapsed(ms: int) -> str:
    """Return ``ms`` formatted as ``MM:SS.CC``."""

    ms = int(ms)
    minutes = ms // 60000
    seconds = (ms % 60000) // 1000
    centiseconds = (ms % 1000) // 10
    return f"{minutes:02d}:{seconds:02d}.{centiseconds:02d}"


class Stopwatch(EventDispatcher):
    """Independent tap/hold stopwatch counting in 10 ms steps."""

    elapsed_ms = NumericProperty(0)
    running = BooleanProperty(False)
    formatted = StringProperty("00:00.00")

    def __init__(self, clock=None, long_press_ms: int = LONG_PRESS_MS, **kwargs):
        super().__init__(**kwargs)
        self.clock = clock or Clock
        self.long_press_ms = long_press_ms
        self._tick_event = None
        self._hold_event = None
        self._long_pressed = False
        # frame time not yet converted into whole ticks
        self._pending_ms = 0.0

    def on_elapsed_ms(self, instance, value):
        self.formatted = format_elapsed(value)

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    def tap(self) -> None:
        """Start when stopped, pause when running.  Elapsed time is kept."""

        if self.running:
            self._stop_ticking()
        else:
            self._start_ticking()

    def press(self) -> None:
        """Begin a press; a hold reaching the threshold resets the stopwatch."""

        self._cancel_hold()
        self._long_pressed = False
        self._hold_event = self.clock.schedule_once(
            self._on_long_press, self.long_press_ms / 1000.0
        )

    def release(self) -> bool:
        """End the current press.

        Returns ``True`` when the press was a long press that already reset
        the stopwatch, in which case the caller must not treat it as a tap.
        """

        self._cancel_hold()
        was_long = self._long_pressed
        self._long_pressed = False
        return was_long

    def reset(self) -> None:
        """Stop and zero the stopwatch regardless of its state."""

        self._stop_ticking()
        self.elapsed_ms = 0

    def cancel(self) -> None:
        """Drop every scheduled callback; used when the owning view goes away."""

        self._cancel_hold()
        self._stop_ticking()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _on_long_press(self, dt) -> None:
        self._hold_event = None
        self._long_pressed = True
        self.reset()

    def _cancel_hold(self) -> None:
        if self._hold_event is not None:
            self._hold_event.cancel()
            self._hold_event = None

    def _start_ticking(self) -> None:
        if self._tick_event is None:
            self._pending_ms = 0.0
            self._tick_event = self.clock.schedule_interval(
                self._tick, STOPWATCH_TICK_MS / 1000.0
            )
        self.running = True

    def _stop_ticking(self) -> None:
        if self._tick_event is not None:
            self._tick_event.cancel()
            self._tick_event = None
        self._pending_ms = 0.0
        self.running = False

    def _tick(self, dt) -> None:
        self._pending_ms += dt * 1000.0
        steps = int(round(self._pending_ms, 6) // STOPWATCH_TICK_MS)
        if steps > 0:
            self._pending_ms -= steps * STOPWATCH_TICK_MS
            self.elapsed_ms += steps * STOPWATCH_TICK_MS
