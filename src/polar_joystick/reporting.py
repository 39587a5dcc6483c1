"""Periodic report delivery for a held joystick."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Optional, Protocol


logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """
    Source of repeating timers.
    Callbacks must be invoked on the thread that owns the controller.
    """
    def schedule_repeating(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class ReportingSession:
    """
    Periodic notifications bound to one press-and-hold gesture.

    Ticks and cancel() both run on the owning thread, so a tick that was
    already queued when the session got cancelled sees the flag and is dropped.
    """

    def __init__(self, scheduler: Scheduler, interval_ms: int, on_tick: Callable[[], None]) -> None:
        self._on_tick = on_tick
        self._interval_ms = interval_ms
        self._cancelled = False
        self._handle = scheduler.schedule_repeating(interval_ms, self._tick)
        logger.debug("Reporting session started (%d ms)", interval_ms)

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._handle.cancel()
        logger.debug("Reporting session cancelled")

    def _tick(self) -> None:
        if self._cancelled:
            logger.debug("Dropping tick delivered after cancellation")
            return
        self._on_tick()


class UiDispatcher:
    """Thread-safe hand-off queue, drained by the thread that owns the UI state."""

    def __init__(self) -> None:
        self._queue: "queue.Queue[Callable[[], None]]" = queue.Queue()

    def post(self, fn: Callable[[], None]) -> None:
        self._queue.put(fn)

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def drain(self) -> int:
        """Run every queued callable in order; return how many ran."""
        count = 0
        while True:
            try:
                fn = self._queue.get_nowait()
            except queue.Empty:
                return count
            fn()
            count += 1


class _ThreadTimer:
    """Background thread posting a callback every interval until cancelled."""

    def __init__(self, interval_ms: int, callback: Callable[[], None],
                 post: Callable[[Callable[[], None]], None]) -> None:
        self._interval_s = interval_ms / 1000.0
        self._callback = callback
        self._post = post
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name=f"joystick-report-{interval_ms}ms", daemon=True
        )
        self._thread.start()

    @property
    def alive(self) -> bool:
        return self._thread.is_alive()

    def _run(self) -> None:
        while not self._stop.wait(self._interval_s):
            self._post(self._callback)

    def cancel(self) -> None:
        self._stop.set()
        if threading.current_thread() is not self._thread:
            self._thread.join(timeout=self._interval_s + 1.0)


class ThreadedScheduler:
    """
    Scheduler running each timer on its own thread.
    Ticks are marshalled back through `post`, typically UiDispatcher.post.
    """

    def __init__(self, post: Optional[Callable[[Callable[[], None]], None]] = None) -> None:
        if post is None:
            self.dispatcher: Optional[UiDispatcher] = UiDispatcher()
            post = self.dispatcher.post
        else:
            self.dispatcher = None
        self._post = post

    def schedule_repeating(self, interval_ms: int, callback: Callable[[], None]) -> _ThreadTimer:
        return _ThreadTimer(interval_ms, callback, self._post)
