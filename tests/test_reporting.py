import threading
import time

from polar_joystick.controller import JoystickController
from polar_joystick.geometry import Circle, Point
from polar_joystick.reporting import ReportingSession, ThreadedScheduler, UiDispatcher


def _wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


def test_session_ticks_until_cancelled(scheduler):
    ticks = []
    session = ReportingSession(scheduler, 25, lambda: ticks.append(1))
    timer = scheduler.timers[0]

    assert timer.interval_ms == 25
    timer.fire()
    timer.fire()
    session.cancel()
    timer.fire()

    assert ticks == [1, 1]
    assert session.cancelled
    assert timer.cancelled


def test_session_cancel_is_idempotent(scheduler):
    session = ReportingSession(scheduler, 25, lambda: None)
    session.cancel()
    session.cancel()
    assert scheduler.alive == []


def test_dispatcher_runs_posted_callables_in_order():
    dispatcher = UiDispatcher()
    seen = []
    for i in range(3):
        dispatcher.post(lambda i=i: seen.append(i))

    assert dispatcher.pending == 3
    assert dispatcher.drain() == 3
    assert seen == [0, 1, 2]
    assert dispatcher.drain() == 0


def test_threaded_scheduler_posts_ticks_from_background_thread():
    dispatcher = UiDispatcher()
    scheduler = ThreadedScheduler(dispatcher.post)
    calling_threads = []

    handle = scheduler.schedule_repeating(5, lambda: calling_threads.append(threading.current_thread()))
    try:
        assert _wait_for(lambda: dispatcher.pending >= 2)
    finally:
        handle.cancel()

    assert not handle.alive
    dispatcher.drain()
    # callbacks run on the draining thread, never on the timer thread
    assert calling_threads
    assert set(calling_threads) == {threading.current_thread()}


def test_threaded_scheduler_has_own_dispatcher_by_default():
    scheduler = ThreadedScheduler()
    assert isinstance(scheduler.dispatcher, UiDispatcher)


def test_cancel_stops_thread_promptly():
    scheduler = ThreadedScheduler()
    handle = scheduler.schedule_repeating(1000, lambda: None)
    started = time.monotonic()
    handle.cancel()

    assert not handle.alive
    assert time.monotonic() - started < 1.0


def test_controller_with_threads_delivers_periodic_reports():
    scheduler = ThreadedScheduler()
    calls = []
    ctrl = JoystickController(scheduler)
    ctrl.set_listener(lambda a, s: calls.append((a, s)), 5)
    ctrl.on_circle_changed(Circle(100, 100, 50))

    ctrl.on_pointer_down(Point(100, 75))
    try:
        assert _wait_for(lambda: scheduler.dispatcher.pending >= 2)
        scheduler.dispatcher.drain()
    finally:
        ctrl.on_pointer_up()

    assert calls[0] == (90, 50)
    assert len(calls) >= 3
    assert set(calls[1:-1]) == {(90, 50)}
    assert calls[-1] == (0, 0)


def test_queued_ticks_are_dropped_after_release():
    scheduler = ThreadedScheduler()
    calls = []
    ctrl = JoystickController(scheduler)
    ctrl.set_listener(lambda a, s: calls.append((a, s)), 5)
    ctrl.on_circle_changed(Circle(100, 100, 50))

    ctrl.on_pointer_down(Point(130, 100))
    assert _wait_for(lambda: scheduler.dispatcher.pending >= 3)
    ctrl.on_pointer_up()
    scheduler.dispatcher.drain()

    assert calls == [(0, 60), (0, 0)]
