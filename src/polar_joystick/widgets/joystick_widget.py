from __future__ import annotations
import logging
from typing import Callable, Optional

# Qt
from python_qt_binding.QtCore import Qt, QObject, QPointF, QSize, QTimer, pyqtSignal
from python_qt_binding.QtGui import QPainter, QPen, QBrush, QColor
from python_qt_binding.QtWidgets import QWidget, QSizePolicy

from ..config_manager import JoystickConfig
from ..controller import DEFAULT_LOOP_INTERVAL, JoystickController, JoystickListener
from ..geometry import Point, fit_circle


logger = logging.getLogger(__name__)

RATIO_SIZE_BUTTON = 0.25
RATIO_SIZE_BORDER = 0.75


class _QtTimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtTimerScheduler:
    """Repeating timers driven by the Qt event loop of the owning thread."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent

    def schedule_repeating(self, interval_ms: int, callback: Callable[[], None]) -> _QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return _QtTimerHandle(timer)


# =========================== Widget (View/Host) ===============================

class JoystickWidget(QWidget):
    """
    Circular joystick hosting a JoystickController.
    - Feeds layout and mouse input to the controller.
    - Paints background, border and button from the controller position.
    - Emits (angle, strength) on press/release and every loop interval while pressed.
    """

    # Signals
    moved = pyqtSignal(int, int)  # angle [0, 360), strength [0, 100]

    def __init__(self, config: Optional[JoystickConfig] = None, parent=None) -> None:
        super().__init__(parent)

        cfg = config or JoystickConfig()
        self._default_size = cfg.default_size
        self._button_color = QColor(cfg.button_color)
        self._border_color = QColor(cfg.border_color)
        self._background_color = QColor(cfg.background_color)
        self._border_width = cfg.border_width
        self._button_radius = 0.0
        self._callback: Optional[JoystickListener] = None

        self._controller = JoystickController(QtTimerScheduler(self), redraw=self.update)
        self._controller.set_listener(self._on_controller_move, cfg.loop_interval_ms)

        size_policy = QSizePolicy(QSizePolicy.Preferred, QSizePolicy.Preferred)
        size_policy.setHeightForWidth(True)
        self.setSizePolicy(size_policy)
        self.setMinimumSize(40, 40)

    # ---- public api ----
    @property
    def controller(self) -> JoystickController:
        return self._controller

    def button_radius(self) -> float:
        return self._button_radius

    def set_on_joystick_listener(self, listener: Optional[JoystickListener],
                                 loop_interval: int = DEFAULT_LOOP_INTERVAL) -> None:
        """Plain-callable alternative to the moved signal."""
        self._callback = listener
        self._controller.set_listener(self._on_controller_move, loop_interval)

    def set_loop_interval(self, loop_interval: int) -> None:
        self._controller.set_listener(self._on_controller_move, loop_interval)

    def set_button_color(self, color) -> None:
        self._button_color = self._to_color(color)
        self.update()

    def set_border_color(self, color) -> None:
        self._border_color = self._to_color(color)
        self.update()

    def set_background_color(self, color) -> None:
        self._background_color = self._to_color(color)
        self.update()

    def set_border_width(self, width: int) -> None:
        if width < 0:
            raise ValueError("Border width must be non-negative")
        self._border_width = int(width)
        self.update()

    def button_color(self) -> QColor:
        return QColor(self._button_color)

    def border_color(self) -> QColor:
        return QColor(self._border_color)

    def background_color(self) -> QColor:
        return QColor(self._background_color)

    def border_width(self) -> int:
        return self._border_width

    def layout_for_size(self, width: int, height: int) -> None:
        """Recompute the joystick circles for a drawable area of width x height."""
        logger.debug("Joystick area resized to %dx%d", width, height)
        self._button_radius = max(0.0, min(width, height) / 2 * RATIO_SIZE_BUTTON)
        self._controller.on_circle_changed(fit_circle(width, height, RATIO_SIZE_BORDER))

    def shutdown(self) -> None:
        self._controller.shutdown()

    # ---- sizing ----
    def sizeHint(self) -> QSize:
        return QSize(self._default_size, self._default_size)

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return width

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.layout_for_size(self.width(), self.height())

    # ---- painting ----
    def paintEvent(self, event) -> None:
        circle = self._controller.circle
        if circle is None:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        self._draw_background(painter, circle)
        self._draw_border(painter, circle)
        self._draw_button(painter, self._controller.position)

    def _draw_background(self, painter: QPainter, circle) -> None:
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(self._background_color))
        painter.drawEllipse(QPointF(circle.center_x, circle.center_y), circle.radius, circle.radius)
        painter.restore()

    def _draw_border(self, painter: QPainter, circle) -> None:
        if self._border_width <= 0:
            return
        painter.save()
        painter.setPen(QPen(self._border_color, self._border_width))
        painter.setBrush(Qt.NoBrush)
        painter.drawEllipse(QPointF(circle.center_x, circle.center_y), circle.radius, circle.radius)
        painter.restore()

    def _draw_button(self, painter: QPainter, position: Point) -> None:
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(self._button_color))
        painter.drawEllipse(QPointF(position.x, position.y), self._button_radius, self._button_radius)
        painter.restore()

    # ---- input ----
    def mousePressEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._controller.on_pointer_down(Point(e.x(), e.y()))
        else:
            super().mousePressEvent(e)

    def mouseMoveEvent(self, e) -> None:
        if self._controller.is_active:
            self._controller.on_pointer_move(Point(e.x(), e.y()))

    def mouseReleaseEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._controller.on_pointer_up()
        else:
            super().mouseReleaseEvent(e)

    def hideEvent(self, event) -> None:
        # a hidden widget never gets its release event
        self._controller.on_pointer_up()
        super().hideEvent(event)

    # ---- internal helpers ----
    def _on_controller_move(self, angle: int, strength: int) -> None:
        self.moved.emit(angle, strength)
        if self._callback is not None:
            self._callback(angle, strength)

    @staticmethod
    def _to_color(color) -> QColor:
        qcolor = QColor(color)
        if not qcolor.isValid():
            raise ValueError(f"Invalid color: {color!r}")
        return qcolor
