"""Main widget for the polar joystick application."""

from __future__ import annotations

import logging
from typing import Optional

from python_qt_binding.QtCore import Qt
from python_qt_binding.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from .config_manager import ConfigurationManager, JoystickConfig
from .control_panels import AppearancePanel, ReportingPanel
from .widgets.joystick_widget import JoystickWidget


logger = logging.getLogger(__name__)


class JoystickMainWidget(QWidget):
    """Compose the joystick, its configuration and the reading display."""

    def __init__(self, config: Optional[JoystickConfig] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self._config = ConfigurationManager(config)
        self._joystick = JoystickWidget(self._config.get_config())
        self._reporting_panel = ReportingPanel(self._config)
        self._appearance_panel = AppearancePanel(self._config)

        self._build_ui()
        self._connect_signals()

        self.setWindowTitle("Virtual Joystick")
        self.setFocusPolicy(Qt.StrongFocus)
        self.setFocusProxy(self._joystick)

    @property
    def joystick(self) -> JoystickWidget:
        return self._joystick

    @property
    def configuration(self) -> ConfigurationManager:
        return self._config

    @property
    def reporting_panel(self) -> ReportingPanel:
        return self._reporting_panel

    # ------------------------------------------------------------------
    # UI / wiring
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        panels_frame = QFrame()
        panels_frame.setFrameShape(QFrame.NoFrame)
        panels_frame.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Preferred)

        panels_layout = QVBoxLayout(panels_frame)
        panels_layout.setContentsMargins(0, 0, 0, 0)
        panels_layout.setSpacing(8)
        panels_layout.addWidget(self._reporting_panel)
        panels_layout.addWidget(self._appearance_panel)
        panels_layout.addStretch(1)

        root_layout = QHBoxLayout(self)
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(12)
        root_layout.addWidget(self._joystick, 3)
        root_layout.addWidget(panels_frame, 2)

    def _connect_signals(self) -> None:
        self._joystick.moved.connect(self._reporting_panel.show_reading)
        self._config.interval_changed.connect(self._on_interval_changed)
        self._config.style_changed.connect(self._apply_style)

    def _on_interval_changed(self, interval_ms: int) -> None:
        logger.info("Loop interval set to %d ms", interval_ms)
        self._joystick.set_loop_interval(interval_ms)

    def _apply_style(self) -> None:
        self._joystick.set_button_color(self._config.get_button_color())
        self._joystick.set_border_color(self._config.get_border_color())
        self._joystick.set_background_color(self._config.get_background_color())
        self._joystick.set_border_width(self._config.get_border_width())

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def shutdown(self) -> None:
        self._joystick.shutdown()

    def closeEvent(self, event) -> None:  # noqa: D401 - Qt signature
        self.shutdown()
        super().closeEvent(event)
