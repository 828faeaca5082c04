"""Draggable dial controls that ride on the clock rim."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .geometry import Point, polar_point


# Assigning an angle at or beyond this value resets the dial to 0.
ANGLE_RESET_THRESHOLD = 720.0


class Quadrant(Enum):
    """Clock quadrant, counted clockwise from 12 o'clock."""

    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4


def quadrant_of(degrees: float) -> Quadrant:
    """
    Classify an angle into a quadrant.

    Anything outside [0, 270) falls through to Q4, including negative
    angles and angles past a full turn.
    """
    if 0 <= degrees < 90:
        return Quadrant.Q1
    elif 90 <= degrees < 180:
        return Quadrant.Q2
    elif 180 <= degrees < 270:
        return Quadrant.Q3
    else:
        return Quadrant.Q4


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box, left/top inclusive and right/bottom exclusive."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def around(cls, center: Point, size: float) -> "BoundingBox":
        """Square of side ``size`` centred on a point."""
        half = size / 2
        left = center.x - half
        top = center.y - half
        return cls(left, top, left + size, top + size)

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


class ControlLabel:
    """Short text drawn on top of a dial, e.g. "S" for start."""

    def __init__(self, text: str, text_height: float = 0.0):
        self.text = text
        self.text_height = text_height
        self.x = 0.0
        self._y = 0.0

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        # Text is drawn on its baseline; push it down half a line.
        self._y = value + self.text_height / 2

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class Dial:
    """
    A marker constrained to the control radius of the clock.

    The position is cached: every angle assignment recomputes x/y and
    moves the attached label, so readers never pay for trigonometry.
    """

    def __init__(
        self,
        name: str,
        angle: float = 0.0,
        label: Optional[ControlLabel] = None,
        color: tuple[int, int, int] = (31, 158, 217),
        draggable: bool = True,
    ):
        self.name = name
        self.label = label
        self.color = color
        self.draggable = draggable

        self.center_x = 0.0
        self.center_y = 0.0
        self.control_radius = 0.0
        self.diameter = 0.0
        self.radius = 0.0
        self.x = 0.0
        self.y = 0.0

        self._angle = 0.0
        self.angle = angle

    @property
    def angle(self) -> float:
        return self._angle

    @angle.setter
    def angle(self, value: float) -> None:
        # Values in [360, 720) are kept as-is.
        if value >= ANGLE_RESET_THRESHOLD:
            self._angle = 0.0
        else:
            self._angle = float(value)
        self._reposition()

    def set_angle(self, degrees: float) -> None:
        self.angle = degrees

    def place(
        self,
        center_x: float,
        center_y: float,
        control_radius: float,
        diameter: float,
    ) -> None:
        """Attach the dial to a (new) clock size."""
        self.center_x = center_x
        self.center_y = center_y
        self.control_radius = control_radius
        self.diameter = diameter
        self.radius = diameter / 2
        self._reposition()

    def _reposition(self) -> None:
        point = polar_point(
            self.center_x, self.center_y, self.control_radius, self._angle
        )
        self.x = point.x
        self.y = point.y
        if self.label is not None:
            self.label.move_to(self.x, self.y)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def bounds(self) -> BoundingBox:
        return BoundingBox.around(self.position, self.diameter)

    def contains_point(self, x: float, y: float) -> bool:
        """Box hit test, not a true circle test."""
        return self.bounds.contains(x, y)

    @property
    def quadrant(self) -> Quadrant:
        return quadrant_of(self._angle)

    def __repr__(self) -> str:
        return (
            f"Dial(name={self.name!r}, angle={self._angle:.2f}, "
            f"x={self.x:.1f}, y={self.y:.1f})"
        )
