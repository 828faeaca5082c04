"""Touchscreen input for RadClock.

Raw evdev events are read on a background thread and turned into
pointer events on a queue. The frame loop drains the queue, so the
widget itself is only ever touched from the main thread.
"""

import logging
import queue
import threading
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from .config import TouchConfig

logger = logging.getLogger(__name__)

# Try to import evdev (only available on Linux with input devices)
try:
    from evdev import InputDevice, ecodes

    EVDEV_AVAILABLE = True
except ImportError:
    EVDEV_AVAILABLE = False
    logger.info("evdev not available - touch input disabled")

POINTER_DOWN = "down"
POINTER_MOVE = "move"
POINTER_UP = "up"


class PointerEvent(NamedTuple):
    kind: str
    x: int
    y: int


class TouchHandler:
    """Converts touchscreen events into PointerEvents."""

    def __init__(
        self,
        config: "TouchConfig",
        events: "queue.Queue[PointerEvent]",
        display_width: int = 480,
        display_height: int = 320,
    ):
        """
        Initialize touch handler.

        Args:
            config: Touch configuration
            events: Queue receiving pointer events
            display_width: Display width in pixels
            display_height: Display height in pixels
        """
        self.config = config
        self.events = events
        self.display_width = display_width
        self.display_height = display_height

        self.current_x = 0
        self.current_y = 0
        self.touching = False
        self._pending_down = False

        self._thread: Optional[threading.Thread] = None
        self._running = False
        self._device: Optional["InputDevice"] = None

    def start(self) -> bool:
        """
        Start the touch input thread.

        Returns:
            True if started successfully, False otherwise
        """
        if not EVDEV_AVAILABLE:
            logger.warning("Touch input not available (evdev not installed)")
            return False

        if not self.config.enabled:
            logger.info("Touch input disabled in config")
            return False

        try:
            self._device = InputDevice(self.config.device)
            logger.info(f"Touch device: {self._device.name}")
        except FileNotFoundError:
            logger.error(f"Touch device not found: {self.config.device}")
            return False
        except PermissionError:
            logger.error(
                f"Permission denied for {self.config.device}. "
                "Run as root or add user to 'input' group."
            )
            return False

        self._running = True
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        logger.info("Touch handler started")
        return True

    def stop(self) -> None:
        """Stop the touch input thread."""
        self._running = False
        if self._thread:
            self._thread.join(timeout=1.0)
            self._thread = None
        if self._device:
            self._device.close()
            self._device = None
        logger.info("Touch handler stopped")

    def _run(self) -> None:
        if self._device is None:
            return

        try:
            for event in self._device.read_loop():
                if not self._running:
                    break
                self._process_event(event)
        except OSError as e:
            if self._running:
                logger.error(f"Touch device error: {e}")

    def _process_event(self, event) -> None:
        if event.type == ecodes.EV_ABS:
            self._on_axis(event.code, event.value)
        elif event.type == ecodes.EV_KEY and event.code == ecodes.BTN_TOUCH:
            if event.value == 1:
                # Axes for this contact follow the key; report down at SYN
                self.touching = True
                self._pending_down = True
            elif event.value == 0:
                self.touching = False
                self._pending_down = False
                self._emit(POINTER_UP)
        elif event.type == ecodes.EV_SYN:
            if self._pending_down:
                self._pending_down = False
                self._emit(POINTER_DOWN)
            elif self.touching:
                self._emit(POINTER_MOVE)

    def _on_axis(self, code: int, value: int) -> None:
        if self.config.swap_axes:
            # Panel mounted rotated 90 degrees: raw X is screen Y (inverted)
            if code == ecodes.ABS_X:
                self.current_y = self._scale(value, self.display_height, invert=True)
            elif code == ecodes.ABS_Y:
                self.current_x = self._scale(value, self.display_width)
        else:
            if code == ecodes.ABS_X:
                self.current_x = self._scale(value, self.display_width)
            elif code == ecodes.ABS_Y:
                self.current_y = self._scale(value, self.display_height)

    def _scale(self, raw_value: int, extent: int, invert: bool = False) -> int:
        """Map a raw axis value onto 0..extent."""
        span = self.config.raw_max - self.config.raw_min
        normalized = (raw_value - self.config.raw_min) / span
        if invert:
            normalized = 1.0 - normalized
        return int(normalized * extent)

    def _emit(self, kind: str) -> None:
        self.events.put(PointerEvent(kind, self.current_x, self.current_y))
