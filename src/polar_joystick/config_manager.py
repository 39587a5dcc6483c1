"""Configuration utilities for the polar joystick."""

from dataclasses import dataclass

from python_qt_binding.QtCore import QObject, pyqtSignal
from python_qt_binding.QtGui import QColor

from .controller import DEFAULT_LOOP_INTERVAL


DEFAULT_SIZE = 200
DEFAULT_COLOR = "#000000"
DEFAULT_BACKGROUND_COLOR = "transparent"
DEFAULT_WIDTH_BORDER = 3

MIN_LOOP_INTERVAL = 1
MAX_LOOP_INTERVAL = 1000
MAX_WIDTH_BORDER = 50


def _check_color(value: str, label: str) -> None:
    if not value or not QColor.isValidColor(value):
        raise ValueError(f"{label} color is not a valid color name: {value!r}")


@dataclass
class JoystickConfig:
    """Container for the user editable joystick configuration."""

    loop_interval_ms: int = DEFAULT_LOOP_INTERVAL
    default_size: int = DEFAULT_SIZE
    button_color: str = DEFAULT_COLOR
    border_color: str = DEFAULT_COLOR
    background_color: str = DEFAULT_BACKGROUND_COLOR
    border_width: int = DEFAULT_WIDTH_BORDER

    def __post_init__(self):
        self.validate()

    def validate(self):
        if not MIN_LOOP_INTERVAL <= self.loop_interval_ms <= MAX_LOOP_INTERVAL:
            raise ValueError(
                f"Loop interval must be between {MIN_LOOP_INTERVAL} and {MAX_LOOP_INTERVAL} ms"
            )

        if self.default_size <= 0:
            raise ValueError("Default size must be positive")

        if not 0 <= self.border_width <= MAX_WIDTH_BORDER:
            raise ValueError(f"Border width must be between 0 and {MAX_WIDTH_BORDER}")

        _check_color(self.button_color, "Button")
        _check_color(self.border_color, "Border")
        _check_color(self.background_color, "Background")


class ConfigurationManager(QObject):
    """Tracks configuration values and emits change notifications."""

    config_changed = pyqtSignal()
    interval_changed = pyqtSignal(int)
    style_changed = pyqtSignal()

    def __init__(self, config: JoystickConfig = None):
        super().__init__()
        self._config = config or JoystickConfig()

    def get_config(self) -> JoystickConfig:
        return self._config

    def get_loop_interval(self) -> int:
        return self._config.loop_interval_ms

    def set_loop_interval(self, interval_ms: int):
        interval_ms = int(interval_ms)
        if not MIN_LOOP_INTERVAL <= interval_ms <= MAX_LOOP_INTERVAL:
            raise ValueError(
                f"Loop interval must be between {MIN_LOOP_INTERVAL} and {MAX_LOOP_INTERVAL} ms"
            )

        if interval_ms != self._config.loop_interval_ms:
            self._config.loop_interval_ms = interval_ms
            self.interval_changed.emit(interval_ms)
            self.config_changed.emit()

    def get_border_width(self) -> int:
        return self._config.border_width

    def set_border_width(self, width: int):
        width = int(width)
        if not 0 <= width <= MAX_WIDTH_BORDER:
            raise ValueError(f"Border width must be between 0 and {MAX_WIDTH_BORDER}")

        if width != self._config.border_width:
            self._config.border_width = width
            self.style_changed.emit()
            self.config_changed.emit()

    def get_button_color(self) -> str:
        return self._config.button_color

    def set_button_color(self, color: str):
        _check_color(color, "Button")
        if color != self._config.button_color:
            self._config.button_color = color
            self.style_changed.emit()
            self.config_changed.emit()

    def get_border_color(self) -> str:
        return self._config.border_color

    def set_border_color(self, color: str):
        _check_color(color, "Border")
        if color != self._config.border_color:
            self._config.border_color = color
            self.style_changed.emit()
            self.config_changed.emit()

    def get_background_color(self) -> str:
        return self._config.background_color

    def set_background_color(self, color: str):
        _check_color(color, "Background")
        if color != self._config.background_color:
            self._config.background_color = color
            self.style_changed.emit()
            self.config_changed.emit()
