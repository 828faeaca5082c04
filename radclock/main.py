"""Main entry point for RadClock."""

import argparse
import logging
import queue
import signal
import sys
import time
from pathlib import Path
from typing import Optional

from PIL import Image

from .config import ClockSettings, Config, load_config
from .display import Display
from .renderer import ClockRenderer
from .touch_handler import POINTER_DOWN, POINTER_MOVE, POINTER_UP, PointerEvent, TouchHandler
from .widget import RadClock

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)


class RadClockApp:
    """Hosts a RadClock on a framebuffer with touch input."""

    def __init__(self, config: Config):
        """
        Initialize the application.

        Args:
            config: Application configuration
        """
        self.config = config
        self.running = False
        self.dirty = True

        settings = ClockSettings.from_config(config)
        self.clock = RadClock(settings, invalidate=self.request_redraw)
        self.clock.on_resize(
            config.display.width, config.display.height, config.display.padding
        )
        self.renderer = ClockRenderer(config.colors, settings)

        self.display = Display(config.display)
        self.events: "queue.Queue[PointerEvent]" = queue.Queue()
        self.touch_handler = TouchHandler(
            config=config.touch,
            events=self.events,
            display_width=config.display.width,
            display_height=config.display.height,
        )

    def request_redraw(self) -> None:
        self.dirty = True

    def render_frame(self) -> Image.Image:
        """Render the clock in its current state."""
        return self.renderer.render(
            self.clock.snapshot(), self.config.display.width, self.config.display.height
        )

    def dispatch_pending(self) -> None:
        """Apply queued pointer events to the clock."""
        while True:
            try:
                event = self.events.get_nowait()
            except queue.Empty:
                return
            if event.kind == POINTER_DOWN:
                self.clock.on_pointer_down(event.x, event.y)
            elif event.kind == POINTER_MOVE:
                self.clock.on_pointer_move(event.x, event.y)
            elif event.kind == POINTER_UP:
                self.clock.on_pointer_up()

    def step(self, now: Optional[float] = None) -> bool:
        """
        Run one iteration of the frame loop.

        Returns:
            True if a frame was written
        """
        self.dispatch_pending()
        self.clock.advance_animation(now)
        if not self.dirty:
            return False
        self.dirty = False
        return self.display.write_frame(self.render_frame())

    def run(self) -> None:
        """Run the main application loop."""
        logger.info("Starting RadClock...")

        if not self.display.open():
            logger.error("Failed to open display")
            return

        self.touch_handler.start()

        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

        self.running = True
        frame_interval = 1.0 / self.config.display.fps
        logger.info("RadClock running. Press Ctrl+C to stop.")

        try:
            while self.running:
                self.step()
                time.sleep(frame_interval)
        finally:
            self._cleanup()

    def _signal_handler(self, signum, frame) -> None:
        logger.info(f"Received signal {signum}, shutting down...")
        self.running = False

    def _cleanup(self) -> None:
        logger.info("Cleaning up...")
        self.touch_handler.stop()
        self.display.close()
        logger.info("Cleanup complete")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="RadClock - radial clock with draggable time dials"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config.json file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        metavar="PATH",
        help="Render a single frame to a PNG file and exit",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        logger.error(f"Config file not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    app = RadClockApp(config)

    if args.snapshot:
        try:
            Display.save_snapshot(app.render_frame(), args.snapshot)
        except OSError as e:
            logger.error(f"Could not write snapshot: {e}")
            return 1
        return 0

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
