"""RadClock - radial clock face with draggable time dials."""

from .animator import AngleAnimator, AnimatorState, accelerate_decelerate, linear
from .config import ClockSettings, Config, load_config
from .controller import DragController, hit_test
from .dial import BoundingBox, ControlLabel, Dial, Quadrant, quadrant_of
from .geometry import (
    CenterLabel,
    ClockFace,
    Numeral,
    Point,
    Tick,
    compute_clock_face,
    layout,
)
from .widget import ClockFaceView, DialSnapshot, LayoutResult, RadClock

__version__ = "1.0.0"

__all__ = [
    "AngleAnimator",
    "AnimatorState",
    "accelerate_decelerate",
    "linear",
    "ClockSettings",
    "Config",
    "load_config",
    "DragController",
    "hit_test",
    "BoundingBox",
    "ControlLabel",
    "Dial",
    "Quadrant",
    "quadrant_of",
    "CenterLabel",
    "ClockFace",
    "Numeral",
    "Point",
    "Tick",
    "compute_clock_face",
    "layout",
    "ClockFaceView",
    "DialSnapshot",
    "LayoutResult",
    "RadClock",
]
