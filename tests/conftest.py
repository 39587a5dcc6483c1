import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeTimer:
    def __init__(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        # delivers even after cancel, like a tick that was already queued
        self.callback()


class ManualScheduler:
    """Scheduler whose ticks only happen when a test fires them."""

    def __init__(self):
        self.timers = []

    def schedule_repeating(self, interval_ms, callback):
        timer = FakeTimer(interval_ms, callback)
        self.timers.append(timer)
        return timer

    @property
    def alive(self):
        return [t for t in self.timers if not t.cancelled]

    def tick(self):
        for timer in self.alive:
            timer.fire()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def qapp():
    pytest.importorskip("python_qt_binding")
    from python_qt_binding.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
