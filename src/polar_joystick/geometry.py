from __future__ import annotations
import math
from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Circle:
    """Bounding circle of the joystick, in widget coordinates."""
    center_x: float
    center_y: float
    radius: float

    @property
    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    @property
    def is_valid(self) -> bool:
        return self.radius > 0


@dataclass(frozen=True)
class PolarReading:
    """Direction and magnitude of the button offset."""
    angle: int      # degrees [0, 360), 0 = east, counter-clockwise
    strength: int   # percent [0, 100]


def _require_valid(circle: Circle) -> None:
    if not circle.is_valid:
        raise ValueError(f"Circle radius must be positive, got {circle.radius}")


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def clamp(point: Point, circle: Circle) -> Point:
    """Project a point outside the circle onto its edge, along the ray from the center."""
    _require_valid(circle)
    d = distance(point, circle.center)
    if d <= circle.radius:
        return Point(float(point[0]), float(point[1]))

    scale = circle.radius / d
    return Point(
        (point[0] - circle.center_x) * scale + circle.center_x,
        (point[1] - circle.center_y) * scale + circle.center_y,
    )


def angle_of(point: Point, circle: Circle) -> int:
    """
    Angle of the button following the counter-clockwise protractor rules.
    Screen Y grows downward, hence the inverted dy. The center maps to 0.
    """
    _require_valid(circle)
    dx = point[0] - circle.center_x
    dy = circle.center_y - point[1]
    if dx == 0 and dy == 0:
        return 0

    angle = int(math.degrees(math.atan2(dy, dx)))
    return angle + 360 if angle < 0 else angle


def strength_of(point: Point, circle: Circle) -> int:
    """Distance from the center as a percentage of the radius."""
    _require_valid(circle)
    strength = round(100 * distance(point, circle.center) / circle.radius)
    return max(0, min(100, strength))


def polar_reading(point: Point, circle: Circle) -> PolarReading:
    return PolarReading(angle=angle_of(point, circle), strength=strength_of(point, circle))


def fit_circle(width: float, height: float, ratio: float = 1.0) -> Circle:
    """
    Largest circle centered in a width x height area, scaled by ratio.
    Empty areas give a zero-radius (invalid) circle.
    """
    d = min(width, height)
    radius = d / 2 * ratio if d > 0 else 0.0
    return Circle(width / 2, height / 2, radius)
