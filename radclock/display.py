"""Framebuffer output and PNG snapshots for rendered clock frames."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Optional

import numpy as np
from PIL import Image

if TYPE_CHECKING:
    from .config import DisplayConfig

logger = logging.getLogger(__name__)


def rgb_to_rgb565(image: Image.Image) -> bytes:
    """
    Pack an RGB image as little-endian RGB565.

    Red keeps its top 5 bits, green 6, blue 5.
    """
    arr = np.asarray(image.convert("RGB"), dtype=np.uint16)
    r = arr[:, :, 0] >> 3
    g = arr[:, :, 1] >> 2
    b = arr[:, :, 2] >> 3
    return ((r << 11) | (g << 5) | b).astype("<u2").tobytes()


class Display:
    """Writes frames to a 16-bit Linux framebuffer device."""

    def __init__(self, config: "DisplayConfig"):
        self.width = config.width
        self.height = config.height
        self.framebuffer = config.framebuffer
        self._fb_handle: Optional[BinaryIO] = None

    @property
    def is_open(self) -> bool:
        return self._fb_handle is not None

    def open(self) -> bool:
        """
        Open the framebuffer device.

        Returns:
            True if successful, False otherwise
        """
        try:
            self._fb_handle = open(self.framebuffer, "wb")
        except PermissionError:
            logger.error(
                f"Permission denied opening {self.framebuffer}. "
                "Run as root or add user to 'video' group."
            )
            return False
        except FileNotFoundError:
            logger.error(f"Framebuffer not found: {self.framebuffer}")
            return False
        except OSError as e:
            logger.error(f"Failed to open framebuffer: {e}")
            return False
        logger.info(f"Opened framebuffer: {self.framebuffer}")
        return True

    def close(self) -> None:
        if self._fb_handle is None:
            return
        try:
            self._fb_handle.close()
        except OSError as e:
            logger.warning(f"Error closing framebuffer: {e}")
        finally:
            self._fb_handle = None

    def write_frame(self, image: Image.Image) -> bool:
        """
        Write one frame, resizing it to the panel if needed.

        Returns:
            True if the frame was written
        """
        if self._fb_handle is None:
            logger.error("Framebuffer not open")
            return False

        if image.size != (self.width, self.height):
            image = image.resize((self.width, self.height), Image.Resampling.LANCZOS)

        try:
            self._fb_handle.seek(0)
            self._fb_handle.write(rgb_to_rgb565(image))
            self._fb_handle.flush()
        except OSError as e:
            logger.error(f"Failed to write to framebuffer: {e}")
            return False
        return True

    @staticmethod
    def save_snapshot(image: Image.Image, path: Path) -> None:
        """Save a frame as PNG."""
        image.save(path, format="PNG")
        logger.info(f"Saved snapshot to {path}")

    def __enter__(self) -> "Display":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
