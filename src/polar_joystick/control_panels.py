from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Optional, Protocol

from python_qt_binding.QtCore import Qt, QSize, pyqtSlot
from python_qt_binding.QtGui import QColor
from python_qt_binding.QtWidgets import (
    QColorDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QSizePolicy,
    QSlider,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from .config_manager import MAX_LOOP_INTERVAL, MAX_WIDTH_BORDER, MIN_LOOP_INTERVAL


_QT_MAX_SIZE = 16777215


@contextmanager
def blocked(widget):
    widget.blockSignals(True)
    try:
        yield widget
    finally:
        widget.blockSignals(False)


def swatch_color(color: str) -> str:
    """Style sheet color for a swatch, alpha included."""
    qcolor = QColor(color)
    return f"rgba({qcolor.red()}, {qcolor.green()}, {qcolor.blue()}, {qcolor.alpha()})"


class SliderRow:
    """Convenience wrapper pairing a slider with a display label."""

    def __init__(self, parent, min_v: int, max_v: int, suffix: str = "") -> None:
        self._slider = QSlider(Qt.Horizontal, parent)
        self._slider.setRange(min_v, max_v)
        self._slider.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self._label = QLabel(parent)
        self._suffix = suffix

    def slider(self) -> QSlider:
        return self._slider

    def label(self) -> QLabel:
        return self._label

    def set(self, value: int) -> None:
        with blocked(self._slider):
            self._slider.setValue(value)
        self._label.setText(f"{value}{self._suffix}")


class ReportingAPI(Protocol):
    def get_loop_interval(self) -> int: ...
    def set_loop_interval(self, interval_ms: int) -> None: ...


class AppearanceAPI(Protocol):
    def get_border_width(self) -> int: ...
    def set_border_width(self, width: int) -> None: ...
    def get_button_color(self) -> str: ...
    def set_button_color(self, color: str) -> None: ...
    def get_border_color(self) -> str: ...
    def set_border_color(self, color: str) -> None: ...
    def get_background_color(self) -> str: ...
    def set_background_color(self, color: str) -> None: ...


class _ControlPanel(QFrame):
    LABEL_MIN_WIDTH = 90
    VALUE_PLACEHOLDER_WIDTH = 52

    def __init__(self, title: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("control-panel")

        self._header_button = QToolButton(self)
        self._header_button.setObjectName("control-panel-toggle")
        self._header_button.setText(title)
        self._header_button.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
        self._header_button.setArrowType(Qt.RightArrow)
        self._header_button.setCheckable(True)
        self._header_button.setAutoRaise(True)
        self._header_button.setFocusPolicy(Qt.NoFocus)
        self._header_button.setIconSize(QSize(12, 12))

        header_layout = QHBoxLayout()
        header_layout.setContentsMargins(0, 0, 0, 0)
        header_layout.addWidget(self._header_button)
        header_layout.addStretch(1)

        self._separator = QFrame(self)
        self._separator.setObjectName("control-panel-separator")
        self._separator.setFrameShape(QFrame.HLine)
        self._separator.setFrameShadow(QFrame.Sunken)

        self._body_widget = QWidget(self)
        self._body_layout = QVBoxLayout()
        self._body_layout.setSpacing(12)
        self._body_widget.setLayout(self._body_layout)

        outer_layout = QVBoxLayout()
        outer_layout.setContentsMargins(10, 10, 10, 10)
        outer_layout.setSpacing(6)
        outer_layout.addLayout(header_layout)
        outer_layout.addWidget(self._separator)
        outer_layout.addWidget(self._body_widget)
        self.setLayout(outer_layout)

        self._header_button.toggled.connect(self._on_header_toggled)
        self.setFrameShape(QFrame.NoFrame)
        self.setStyleSheet(
            """
            QFrame#control-panel {
                background-color: #2d3036;
                border: 1px solid #444952;
                border-radius: 8px;
            }
            QToolButton#control-panel-toggle {
                color: #f4f5f7;
                font-weight: 600;
                padding: 4px 8px;
            }
            QFrame#control-panel QLabel {
                color: #d9dce2;
            }
            """
        )
        self._header_button.setChecked(False)
        self._on_header_toggled(False)

    def _grid(self) -> QGridLayout:
        layout = QGridLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setVerticalSpacing(5)
        layout.setColumnStretch(0, 0)
        layout.setColumnStretch(1, 1)
        layout.setColumnStretch(2, 0)
        return layout

    def _label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setMinimumWidth(self.LABEL_MIN_WIDTH)
        return label

    def _value_label(self, label: Optional[QLabel] = None) -> QLabel:
        label = label or QLabel()
        label.setFixedWidth(self.VALUE_PLACEHOLDER_WIDTH)
        label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        return label

    def _on_header_toggled(self, expanded: bool) -> None:
        self._header_button.setArrowType(Qt.DownArrow if expanded else Qt.RightArrow)
        self._separator.setVisible(expanded)
        self._body_widget.setVisible(expanded)
        self._body_widget.setMaximumHeight(_QT_MAX_SIZE if expanded else 0)
        self.setProperty("collapsed", not expanded)
        self.updateGeometry()

    def set_collapsed(self, collapsed: bool) -> None:
        self._header_button.setChecked(not collapsed)

    def is_collapsed(self) -> bool:
        return not self._header_button.isChecked()


class ReportingPanel(_ControlPanel):
    """Loop interval setting and the last (angle, strength) received."""

    def __init__(self, api: ReportingAPI, parent: Optional[QWidget] = None):
        super().__init__("Reporting", parent)
        self._api = api
        self._build_ui()
        self._interval.slider().valueChanged.connect(self._on_interval_changed)
        self.set_collapsed(False)
        self.refresh()

    def refresh(self) -> None:
        self._interval.set(self._api.get_loop_interval())

    def show_reading(self, angle: int, strength: int) -> None:
        self._angle_label.setText(f"{angle}°")
        self._strength_label.setText(f"{strength}%")

    def interval_value(self) -> int:
        return self._interval.slider().value()

    def angle_text(self) -> str:
        return self._angle_label.text()

    def strength_text(self) -> str:
        return self._strength_label.text()

    def _build_ui(self) -> None:
        layout = self._grid()

        row = 0
        layout.addWidget(self._label("Interval:"), row, 0)
        self._interval = SliderRow(self, MIN_LOOP_INTERVAL, MAX_LOOP_INTERVAL, " ms")
        layout.addWidget(self._interval.slider(), row, 1)
        layout.addWidget(self._value_label(self._interval.label()), row, 2)

        row += 1
        layout.addWidget(self._label("Angle:"), row, 0)
        self._angle_label = self._value_label()
        layout.addWidget(self._angle_label, row, 2)

        row += 1
        layout.addWidget(self._label("Strength:"), row, 0)
        self._strength_label = self._value_label()
        layout.addWidget(self._strength_label, row, 2)

        self._body_layout.addLayout(layout)
        self.show_reading(0, 0)

    @pyqtSlot(int)
    def _on_interval_changed(self, value: int) -> None:
        try:
            self._api.set_loop_interval(value)
            self._interval.set(value)
        except ValueError:
            self._interval.set(self._api.get_loop_interval())


class AppearancePanel(_ControlPanel):
    """Border width and the three joystick colors."""

    def __init__(self, api: AppearanceAPI, parent: Optional[QWidget] = None):
        super().__init__("Appearance", parent)
        self._api = api
        self._build_ui()
        self._border_width.slider().valueChanged.connect(self._on_border_width_changed)
        self.refresh()

    def refresh(self) -> None:
        self._border_width.set(self._api.get_border_width())
        self._paint_swatch(self._button_swatch, self._api.get_button_color())
        self._paint_swatch(self._border_swatch, self._api.get_border_color())
        self._paint_swatch(self._background_swatch, self._api.get_background_color())

    def border_width_value(self) -> int:
        return self._border_width.slider().value()

    def _build_ui(self) -> None:
        layout = self._grid()

        row = 0
        layout.addWidget(self._label("Border width:"), row, 0)
        self._border_width = SliderRow(self, 0, MAX_WIDTH_BORDER, " px")
        layout.addWidget(self._border_width.slider(), row, 1)
        layout.addWidget(self._value_label(self._border_width.label()), row, 2)

        row += 1
        layout.addWidget(self._label("Button:"), row, 0)
        self._button_swatch = self._swatch(self._api.get_button_color, self._api.set_button_color)
        layout.addWidget(self._button_swatch, row, 1)

        row += 1
        layout.addWidget(self._label("Border:"), row, 0)
        self._border_swatch = self._swatch(self._api.get_border_color, self._api.set_border_color)
        layout.addWidget(self._border_swatch, row, 1)

        row += 1
        layout.addWidget(self._label("Background:"), row, 0)
        self._background_swatch = self._swatch(self._api.get_background_color,
                                               self._api.set_background_color)
        layout.addWidget(self._background_swatch, row, 1)

        self._body_layout.addLayout(layout)

    def _swatch(self, getter: Callable[[], str], setter: Callable[[str], None]) -> QToolButton:
        button = QToolButton(self)
        button.setFixedSize(48, 20)

        def pick() -> None:
            color = QColorDialog.getColor(QColor(getter()), self, options=QColorDialog.ShowAlphaChannel)
            if color.isValid():
                setter(color.name(QColor.HexArgb))
                self._paint_swatch(button, getter())

        button.clicked.connect(pick)
        return button

    @staticmethod
    def _paint_swatch(button: QToolButton, color: str) -> None:
        button.setStyleSheet(f"QToolButton {{ background-color: {swatch_color(color)}; }}")
        button.setToolTip(color)

    @pyqtSlot(int)
    def _on_border_width_changed(self, value: int) -> None:
        try:
            self._api.set_border_width(value)
            self._border_width.set(value)
        except ValueError:
            self._border_width.set(self._api.get_border_width())
