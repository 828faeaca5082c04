"""Radial layout for the clock face: circles, ticks, numerals and labels."""

import math
from dataclasses import dataclass
from typing import Callable, NamedTuple, Tuple

# Returns (width, height) of the rendered glyph box for a string.
TextMeasure = Callable[[str], Tuple[float, float]]

DEFAULT_TICK_COUNT = 12
DEFAULT_TICK_LENGTH = 20
DEFAULT_TICK_PADDING = 10
DEFAULT_NUMERAL_MARGIN = 20

# Segment direction per 30 degree sector, in units of tick length.
# Index 0 is 12 o'clock; every mark points back towards the centre.
TICK_DIRECTIONS: Tuple[Tuple[float, float], ...] = (
    (0.0, 1.0),
    (-0.5, 1.0),
    (-1.0, 0.5),
    (-1.0, 0.0),
    (-1.0, -0.5),
    (-0.5, -1.0),
    (0.0, -1.0),
    (0.5, -1.0),
    (1.0, -0.5),
    (1.0, 0.0),
    (1.0, 0.5),
    (0.5, 1.0),
)


class Point(NamedTuple):
    """Screen coordinate, y grows downward."""

    x: float
    y: float


@dataclass(frozen=True)
class ClockFace:
    """Circle sizes and centre derived from the widget size."""

    center_x: float
    center_y: float
    background_diameter: float
    foreground_radius: float

    @property
    def background_radius(self) -> float:
        return self.background_diameter / 2

    @property
    def control_radius(self) -> float:
        """Radius of the invisible track the dials move on."""
        return (
            self.foreground_radius
            + (self.background_radius - self.foreground_radius) / 2
        )

    @property
    def dial_diameter(self) -> float:
        return self.background_radius - self.foreground_radius


@dataclass(frozen=True)
class Tick:
    """One tick mark segment."""

    index: int
    angle: float
    start: Point
    end: Point


@dataclass(frozen=True)
class Numeral:
    """Hour numeral anchored at its text baseline."""

    index: int
    text: str
    angle: float
    anchor: Point
    baseline_offset: float


@dataclass(frozen=True)
class CenterLabel:
    """Text drawn in the middle of the face."""

    text: str
    anchor: Point


def polar_point(center_x: float, center_y: float, radius: float, degrees: float) -> Point:
    """
    Convert a clock angle to screen coordinates.

    Angle 0 points straight up and grows clockwise.

    Args:
        center_x: Circle centre X
        center_y: Circle centre Y
        radius: Distance from the centre
        degrees: Clock angle in degrees

    Returns:
        Point on the circle
    """
    theta = math.radians(degrees)
    return Point(
        center_x + radius * math.sin(theta),
        center_y - radius * math.cos(theta),
    )


def compute_clock_face(width: int, height: int, padding: int = 0) -> ClockFace:
    """
    Size the clock circles for a widget.

    The background fills the smaller padded dimension and the foreground
    takes two thirds of that diameter.

    Args:
        width: Widget width in pixels
        height: Widget height in pixels
        padding: Inset applied on every side

    Returns:
        ClockFace for the given size
    """
    draw_width = width - 2 * padding
    draw_height = height - 2 * padding
    background_diameter = float(max(min(draw_width, draw_height), 0))
    foreground_diameter = (background_diameter / 3) * 2
    return ClockFace(
        center_x=float(width // 2),
        center_y=float(height // 2),
        background_diameter=background_diameter,
        foreground_radius=foreground_diameter / 2,
    )


def tick_step(tick_count: int) -> float:
    """Angular distance between neighbouring ticks."""
    return 360.0 / tick_count


def tick_direction(index: int, tick_count: int = DEFAULT_TICK_COUNT) -> Tuple[float, float]:
    """
    Look up the segment direction for a tick.

    Faces with other than twelve ticks borrow the entry of the nearest
    30 degree sector.
    """
    if tick_count == len(TICK_DIRECTIONS):
        sector = index % len(TICK_DIRECTIONS)
    else:
        sector = round(index * len(TICK_DIRECTIONS) / tick_count) % len(
            TICK_DIRECTIONS
        )
    return TICK_DIRECTIONS[sector]


def layout_ticks(
    center_x: float,
    center_y: float,
    foreground_radius: float,
    tick_count: int = DEFAULT_TICK_COUNT,
    tick_length: float = DEFAULT_TICK_LENGTH,
    tick_padding: float = DEFAULT_TICK_PADDING,
) -> list[Tick]:
    """
    Compute the tick segments just inside the foreground edge.

    Returns an empty list when there is nothing sensible to draw
    (no ticks requested or the placement radius is negative).
    """
    radius = foreground_radius - tick_padding
    if tick_count < 1 or radius < 0:
        return []

    step = tick_step(tick_count)
    ticks = []
    for index in range(tick_count):
        angle = index * step
        start = polar_point(center_x, center_y, radius, angle)
        dx, dy = tick_direction(index, tick_count)
        end = Point(start.x + dx * tick_length, start.y + dy * tick_length)
        ticks.append(Tick(index=index, angle=angle, start=start, end=end))
    return ticks


def numeral_radius(
    foreground_radius: float,
    tick_length: float = DEFAULT_TICK_LENGTH,
    tick_padding: float = DEFAULT_TICK_PADDING,
    margin: float = DEFAULT_NUMERAL_MARGIN,
) -> float:
    """Radius for numerals, far enough inside the ticks to never overlap."""
    return foreground_radius - (tick_padding * 2 + tick_length * 2) - margin


def baseline_offset(angle: float, text_height: float) -> float:
    """
    Vertical shift for text drawn on its baseline.

    Numerals at the horizontal extremes move down by half their height,
    numerals on the lower half by their full height, the rest stay put.
    """
    angle = angle % 360.0
    if math.isclose(angle, 90.0) or math.isclose(angle, 270.0):
        return text_height / 2
    if 90.0 < angle < 270.0:
        return text_height
    return 0.0


def layout_numerals(
    center_x: float,
    center_y: float,
    foreground_radius: float,
    tick_count: int = DEFAULT_TICK_COUNT,
    tick_length: float = DEFAULT_TICK_LENGTH,
    tick_padding: float = DEFAULT_TICK_PADDING,
    *,
    measure: TextMeasure,
    margin: float = DEFAULT_NUMERAL_MARGIN,
) -> list[Numeral]:
    """Compute numeral anchors 1..N, baseline-corrected."""
    radius = numeral_radius(foreground_radius, tick_length, tick_padding, margin)
    if tick_count < 1 or radius < 0:
        return []

    step = tick_step(tick_count)
    numerals = []
    for index in range(1, tick_count + 1):
        angle = index * step
        text = str(index)
        point = polar_point(center_x, center_y, radius, angle)
        _, text_height = measure(text)
        offset = baseline_offset(angle, text_height)
        numerals.append(
            Numeral(
                index=index,
                text=text,
                angle=angle,
                anchor=Point(point.x, point.y + offset),
                baseline_offset=offset,
            )
        )
    return numerals


def layout(
    center_x: float,
    center_y: float,
    foreground_radius: float,
    tick_count: int = DEFAULT_TICK_COUNT,
    tick_length: float = DEFAULT_TICK_LENGTH,
    tick_padding: float = DEFAULT_TICK_PADDING,
    *,
    measure: TextMeasure,
    margin: float = DEFAULT_NUMERAL_MARGIN,
) -> Tuple[list[Tick], list[Numeral]]:
    """
    Lay out ticks and numerals for one face.

    Args:
        center_x: Circle centre X
        center_y: Circle centre Y
        foreground_radius: Radius of the inner (foreground) circle
        tick_count: Number of divisions on the face
        tick_length: Length of a straight tick in pixels
        tick_padding: Gap between the foreground edge and the ticks
        measure: Text measuring callable for the numeral font (keyword only)
        margin: Extra gap between ticks and numerals

    Returns:
        Tuple of (ticks, numerals)
    """
    ticks = layout_ticks(
        center_x, center_y, foreground_radius, tick_count, tick_length, tick_padding
    )
    numerals = layout_numerals(
        center_x,
        center_y,
        foreground_radius,
        tick_count,
        tick_length,
        tick_padding,
        measure=measure,
        margin=margin,
    )
    return ticks, numerals


def center_label(
    center_x: float, center_y: float, text: str, measure: TextMeasure
) -> CenterLabel:
    """Anchor the centre text so it sits visually in the middle."""
    _, text_height = measure(text)
    return CenterLabel(text=text, anchor=Point(center_x, center_y + text_height / 2))
