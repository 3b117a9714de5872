import os
import sys


def display_available() -> bool:
    """Whether a real kivy window can be opened."""
    return bool(
        os.environ.get("DISPLAY")
        or os.environ.get("WAYLAND_DISPLAY")
        or sys.platform in ("win32", "darwin")
    )


class FakeEvent:
    """Stand-in for :class:`kivy.clock.ClockEvent`."""

    def __init__(self, clock, callback, interval, repeat):
        self.clock = clock
        self.callback = callback
        self.interval = interval
        self.repeat = repeat
        self.due = clock.now + interval
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeClock:
    """Deterministic replacement for ``kivy.clock.Clock``.

    Time only moves when :meth:`advance` is called.  Interval callbacks fire
    once per ``step`` and receive ``step`` as their ``dt``.
    """

    def __init__(self):
        self.now_ms = 0
        self.events: list[FakeEvent] = []

    @property
    def now(self) -> float:
        return self.now_ms / 1000.0

    def schedule_interval(self, callback, interval):
        event = FakeEvent(self, callback, interval, repeat=True)
        self.events.append(event)
        return event

    def schedule_once(self, callback, timeout=0):
        event = FakeEvent(self, callback, timeout, repeat=False)
        self.events.append(event)
        return event

    def active(self) -> list[FakeEvent]:
        return [e for e in self.events if not e.cancelled]

    def advance(self, seconds: float, step_ms: int = 10) -> None:
        target = self.now_ms + round(seconds * 1000)
        while self.now_ms < target:
            self.now_ms += step_ms
            for event in list(self.events):
                if event.cancelled or self.now + 1e-9 < event.due:
                    continue
                if event.repeat:
                    event.callback(step_ms / 1000.0)
                    event.due = self.now + event.interval
                else:
                    event.cancelled = True
                    event.callback(event.interval)


class FakeTouch:
    """Just enough of a kivy ``MotionEvent`` for widgets that grab touches."""

    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.pos = (x, y)
        self.ud = {}
        self.grab_current = None
        self.is_mouse_scrolling = False

    def grab(self, widget):
        self.grab_current = widget

    def ungrab(self, widget):
        if self.grab_current is widget:
            self.grab_current = None
