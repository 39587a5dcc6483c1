"""Virtual joystick reporting pointer direction and strength as polar readings."""

from .controller import DEFAULT_LOOP_INTERVAL, JoystickController, JoystickState
from .geometry import Circle, Point, PolarReading, angle_of, clamp, fit_circle, strength_of
from .reporting import ReportingSession, ThreadedScheduler, UiDispatcher

__all__ = [
    'DEFAULT_LOOP_INTERVAL',
    'Circle',
    'JoystickController',
    'JoystickState',
    'Point',
    'PolarReading',
    'ReportingSession',
    'ThreadedScheduler',
    'UiDispatcher',
    'angle_of',
    'clamp',
    'fit_circle',
    'strength_of',
]
