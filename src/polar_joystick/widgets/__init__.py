"""Reusable widgets for the polar joystick."""

from .joystick_widget import JoystickWidget, QtTimerScheduler

__all__ = ['JoystickWidget', 'QtTimerScheduler']
