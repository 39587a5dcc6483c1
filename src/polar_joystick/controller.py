from __future__ import annotations
import logging
from enum import Enum, auto
from typing import Callable, Optional

from .geometry import Circle, Point, PolarReading, clamp, polar_reading
from .reporting import ReportingSession, Scheduler


logger = logging.getLogger(__name__)

DEFAULT_LOOP_INTERVAL = 50  # in milliseconds

JoystickListener = Callable[[int, int], None]


class JoystickState(Enum):
    IDLE = auto()
    ACTIVE = auto()


class JoystickController:
    """
    Pointer-to-polar state machine of the joystick.
    Responsibilities:
      - Track the (clamped) button position from raw pointer events
      - Notify the listener on press/release and periodically while held
      - Ask the host to redraw after every position change
    All methods must be called from the thread that owns the host UI.
    """

    def __init__(self, scheduler: Scheduler, redraw: Optional[Callable[[], None]] = None) -> None:
        self._scheduler = scheduler
        self._redraw = redraw
        self._circle: Optional[Circle] = None
        self._position: Optional[Point] = None
        self._state = JoystickState.IDLE
        self._listener: Optional[JoystickListener] = None
        self._interval_ms = DEFAULT_LOOP_INTERVAL
        self._session: Optional[ReportingSession] = None

    # ---- read-only state ----
    @property
    def state(self) -> JoystickState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is JoystickState.ACTIVE

    @property
    def is_reporting(self) -> bool:
        return self._session is not None

    @property
    def circle(self) -> Optional[Circle]:
        return self._circle

    @property
    def position(self) -> Optional[Point]:
        return self._position

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def reading(self) -> Optional[PolarReading]:
        if self._circle is None:
            return None
        return polar_reading(self._position, self._circle)

    # ---- layout ----
    def on_circle_changed(self, circle: Circle) -> None:
        if not circle.is_valid:
            logger.debug("Ignoring geometry until the area has a size: %s", circle)
            self._circle = None
            self._position = None
            if self.is_active:
                self._stop_session()
                self._state = JoystickState.IDLE
            self._request_redraw()
            return

        old_circle = self._circle
        self._circle = circle
        if self.is_active and old_circle is not None:
            # keep the offset from the center, re-clamped to the new radius
            dx = self._position.x - old_circle.center_x
            dy = self._position.y - old_circle.center_y
            self._position = clamp(Point(circle.center_x + dx, circle.center_y + dy), circle)
        else:
            self._position = circle.center
        self._request_redraw()

    # ---- pointer events ----
    def on_pointer_down(self, point: Point) -> None:
        if self._circle is None:
            logger.debug("Pointer down before geometry is known, ignored")
            return

        self._position = clamp(point, self._circle)
        self._state = JoystickState.ACTIVE
        self._start_session()
        self._notify()
        self._request_redraw()

    def on_pointer_move(self, point: Point) -> None:
        if not self.is_active:
            return
        self._position = clamp(point, self._circle)
        self._request_redraw()

    def on_pointer_up(self) -> None:
        if not self.is_active:
            return
        self._position = self._circle.center
        self._state = JoystickState.IDLE
        self._stop_session()
        self._notify()
        self._request_redraw()

    # ---- listener ----
    def set_listener(self, callback: Optional[JoystickListener],
                     interval_ms: int = DEFAULT_LOOP_INTERVAL) -> None:
        """
        Replace the listener binding.
        A running session restarts right away at the new interval.
        """
        if isinstance(interval_ms, bool) or not isinstance(interval_ms, int) or interval_ms <= 0:
            raise ValueError(f"Loop interval must be a positive integer, got {interval_ms!r}")

        self._listener = callback
        self._interval_ms = interval_ms
        if self._session is not None:
            self._start_session()

    def shutdown(self) -> None:
        self._stop_session()
        self._listener = None

    # ---- internal helpers ----
    def _start_session(self) -> None:
        self._stop_session()
        self._session = ReportingSession(self._scheduler, self._interval_ms, self._notify)

    def _stop_session(self) -> None:
        if self._session is not None:
            self._session.cancel()
            self._session = None

    def _notify(self) -> None:
        if self._listener is None:
            return
        reading = polar_reading(self._position, self._circle)
        self._listener(reading.angle, reading.strength)

    def _request_redraw(self) -> None:
        if self._redraw is not None:
            self._redraw()
