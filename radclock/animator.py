"""Short angle animation used to nudge a dial by one tick."""

import logging
import math
import time
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .dial import Dial

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 10

Interpolator = Callable[[float], float]
UpdateListener = Callable[["Dial", float], None]


def linear(fraction: float) -> float:
    return fraction


def accelerate_decelerate(fraction: float) -> float:
    """Ease in and out; starts and ends slowly."""
    return math.cos((fraction + 1) * math.pi) / 2.0 + 0.5


class AnimatorState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class AngleAnimator:
    """
    Adds a growing angle to a dial over a fixed duration.

    Each tick the interpolated value (0 up to ``increment``) is added to
    the dial's current angle, so the total movement is the sum of every
    intermediate value rather than exactly one increment. The final angle
    is not snapped to the tick grid.

    Ticks are driven from outside, either with an explicit fraction
    (``on_tick``) or a timestamp (``advance``).
    """

    def __init__(
        self,
        increment: float,
        duration_ms: float = DEFAULT_DURATION_MS,
        interpolator: Interpolator = accelerate_decelerate,
    ):
        """
        Initialize animator.

        Args:
            increment: Final animated value, normally one tick step in degrees
            duration_ms: Length of one run in milliseconds
            interpolator: Easing curve mapping [0, 1] onto [0, 1]
        """
        self.increment = increment
        self.duration_ms = duration_ms
        self.interpolator = interpolator
        self.state = AnimatorState.IDLE
        self.dial: Optional["Dial"] = None
        self.value = 0.0
        self._started_at: Optional[float] = None
        self._listeners: list[UpdateListener] = []

    @property
    def is_running(self) -> bool:
        return self.state is AnimatorState.RUNNING

    def add_listener(self, listener: UpdateListener) -> None:
        """Register a callback invoked after every angle update."""
        self._listeners.append(listener)

    def start(self, dial: "Dial", now: Optional[float] = None) -> bool:
        """
        Begin animating a dial.

        Args:
            dial: Dial to move
            now: Start timestamp in seconds (defaults to time.monotonic())

        Returns:
            True if a run started, False if one is already in progress
        """
        if self.is_running:
            return False

        self.dial = dial
        self.value = 0.0
        self._started_at = time.monotonic() if now is None else now
        self.state = AnimatorState.RUNNING
        logger.debug(f"Animating {dial.name} by {self.increment:.1f} degrees")
        return True

    def on_tick(self, fraction: float) -> None:
        """Apply one animation frame at the given elapsed fraction."""
        if not self.is_running or self.dial is None:
            return

        fraction = min(max(fraction, 0.0), 1.0)
        self.value = self.increment * self.interpolator(fraction)

        dial = self.dial
        dial.angle += self.value
        for listener in self._listeners:
            listener(dial, self.value)

        if fraction >= 1.0:
            self.state = AnimatorState.IDLE
            self.dial = None
            self._started_at = None
            logger.debug(f"Animation of {dial.name} finished at {dial.angle:.2f}")

    def elapsed_fraction(self, now: float) -> float:
        """Fraction of the duration elapsed at ``now`` (seconds)."""
        if self._started_at is None:
            return 0.0
        if self.duration_ms <= 0:
            return 1.0
        elapsed_ms = (now - self._started_at) * 1000.0
        return min(max(elapsed_ms / self.duration_ms, 0.0), 1.0)

    def advance(self, now: Optional[float] = None) -> None:
        """Tick using wall time; called once per host frame."""
        if not self.is_running:
            return
        if now is None:
            now = time.monotonic()
        self.on_tick(self.elapsed_fraction(now))
