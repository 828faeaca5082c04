"""Clock widgets: a static face and the interactive RadClock."""

import datetime
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional

from .animator import AngleAnimator
from .config import ClockSettings
from .controller import DragController
from .dial import ControlLabel, Dial
from .geometry import (
    CenterLabel,
    ClockFace,
    Numeral,
    Tick,
    TextMeasure,
    center_label,
    compute_clock_face,
    layout,
    tick_step,
)
from .text import PillowTextMeasurer

logger = logging.getLogger(__name__)

MeasurerFactory = Callable[[float], TextMeasure]


@dataclass(frozen=True)
class DialSnapshot:
    """Read-only copy of a dial's state for rendering."""

    name: str
    angle: float
    x: float
    y: float
    radius: float
    color: tuple[int, int, int]
    label: str = ""
    label_x: float = 0.0
    label_y: float = 0.0

    @classmethod
    def of(cls, dial: Dial) -> "DialSnapshot":
        label = dial.label
        return cls(
            name=dial.name,
            angle=dial.angle,
            x=dial.x,
            y=dial.y,
            radius=dial.radius,
            color=dial.color,
            label=label.text if label else "",
            label_x=label.x if label else dial.x,
            label_y=label.y if label else dial.y,
        )


@dataclass(frozen=True)
class LayoutResult:
    """Everything a renderer needs to draw one frame."""

    face: ClockFace
    ticks: tuple[Tick, ...]
    numerals: tuple[Numeral, ...]
    center_label: CenterLabel
    dials: tuple[DialSnapshot, ...] = ()


class ClockFaceView:
    """
    Render-only clock face.

    Geometry is rebuilt from scratch on every resize and kept until the
    next one; nothing is recomputed while drawing.
    """

    def __init__(
        self,
        settings: Optional[ClockSettings] = None,
        measurer_factory: MeasurerFactory = PillowTextMeasurer.for_size,
        center_text: Optional[str] = None,
    ):
        """
        Initialize the face.

        Args:
            settings: Resolved clock settings (defaults when None)
            measurer_factory: Builds a text measurer for a font size
            center_text: Text in the middle of the face, defaults to HH:MM now
        """
        self.settings = settings or ClockSettings()
        self.measure_numeral = measurer_factory(self.settings.numeral_text_size)
        self.measure_center = measurer_factory(self.settings.center_text_size)
        self.measure_control = measurer_factory(self.settings.control_text_size)
        if center_text is None:
            center_text = datetime.datetime.now().strftime("%H:%M")
        self.center_text = center_text

        self.width = 0
        self.height = 0
        self.padding = 0
        self.face = compute_clock_face(0, 0)
        self.layout: Optional[LayoutResult] = None

    def on_resize(self, width: int, height: int, padding: int = 0) -> LayoutResult:
        """Recompute the whole layout for a new widget size."""
        self.width = width
        self.height = height
        self.padding = padding
        self.face = compute_clock_face(width, height, padding)
        settings = self.settings

        ticks, numerals = layout(
            self.face.center_x,
            self.face.center_y,
            self.face.foreground_radius,
            tick_count=settings.tick_count,
            tick_length=settings.tick_length,
            tick_padding=settings.tick_padding,
            measure=self.measure_numeral,
            margin=settings.numeral_margin,
        )
        label = center_label(
            self.face.center_x, self.face.center_y, self.center_text, self.measure_center
        )
        logger.debug(
            f"Resized to {width}x{height} (padding {padding}): "
            f"{len(ticks)} ticks, foreground radius {self.face.foreground_radius:.1f}"
        )

        self.layout = LayoutResult(
            face=self.face,
            ticks=tuple(ticks),
            numerals=tuple(numerals),
            center_label=label,
        )
        return self.layout


class RadClock(ClockFaceView):
    """
    Clock face with draggable dials for a start (and optional end) time.

    Pointer moves over a dial nudge it forward by one tick through a
    short animation; see DragController for the exact rule.
    """

    def __init__(
        self,
        settings: Optional[ClockSettings] = None,
        measurer_factory: MeasurerFactory = PillowTextMeasurer.for_size,
        center_text: Optional[str] = None,
        invalidate: Optional[Callable[[], None]] = None,
    ):
        super().__init__(settings, measurer_factory, center_text)
        self.invalidate = invalidate

        self.start = self._make_dial(
            "start", "S", self.settings.start_angle, self.settings.start_color
        )
        self.dials: list[Dial] = [self.start]
        self.end: Optional[Dial] = None
        if self.settings.show_end_dial:
            self.end = self._make_dial(
                "end", "E", self.settings.end_angle, self.settings.end_color
            )
            self.dials.append(self.end)

        self.animator = AngleAnimator(
            increment=tick_step(max(self.settings.tick_count, 1)),
            duration_ms=self.settings.animation_duration_ms,
        )
        self.animator.add_listener(self._on_dial_update)
        self.controller = DragController(self.animator)

        self.previous_x = 0.0
        self.previous_y = 0.0

    def _make_dial(
        self, name: str, text: str, angle: float, color: tuple[int, int, int]
    ) -> Dial:
        _, text_height = self.measure_control(text)
        return Dial(name, angle=angle, label=ControlLabel(text, text_height), color=color)

    def on_resize(self, width: int, height: int, padding: int = 0) -> LayoutResult:
        super().on_resize(width, height, padding)
        for dial in self.dials:
            dial.place(
                self.face.center_x,
                self.face.center_y,
                self.face.control_radius,
                self.face.dial_diameter,
            )
        return self.snapshot()

    def snapshot(self) -> LayoutResult:
        """Current layout with up-to-date dial positions."""
        if self.layout is None:
            self.on_resize(self.width, self.height, self.padding)
        self.layout = replace(
            self.layout, dials=tuple(DialSnapshot.of(dial) for dial in self.dials)
        )
        return self.layout

    def on_pointer_down(self, x: float, y: float) -> None:
        self.previous_x = x
        self.previous_y = y

    def on_pointer_move(self, x: float, y: float) -> LayoutResult:
        """Feed a pointer move; the pointer becomes the new previous position."""
        self.controller.on_pointer_move(
            x, y, self.previous_x, self.previous_y, self.dials
        )
        self.previous_x = x
        self.previous_y = y
        return self.snapshot()

    def on_pointer_up(self) -> None:
        self.controller.release()

    def on_animation_tick(self, fraction: float) -> LayoutResult:
        self.animator.on_tick(fraction)
        return self.snapshot()

    def advance_animation(self, now: Optional[float] = None) -> LayoutResult:
        """Advance the animator from the host clock."""
        self.animator.advance(now)
        return self.snapshot()

    def _on_dial_update(self, dial: Dial, value: float) -> None:
        if self.invalidate is not None:
            self.invalidate()
