"""Font caching and text measurement backed by Pillow."""

import logging
from typing import Tuple, Union

from PIL import ImageFont

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

# Font paths (in order of preference)
FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",  # Debian/Ubuntu/Raspbian
    "/usr/share/fonts/TTF/DejaVuSans.ttf",  # Arch Linux
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",  # Fedora
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
]


class FontManager:
    """
    Process-wide cache of fonts keyed by pixel size.

    Sizes are rounded to whole pixels so density-scaled sizes share
    cache entries.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not FontManager._initialized:
            self._fonts: dict[int, Font] = {}
            FontManager._initialized = True
            logger.debug("FontManager initialized")

    def get_font(self, size: float) -> Font:
        """
        Get a font at the specified pixel size.

        Falls back to Pillow's built-in font when no system font is found.
        """
        key = max(int(round(size)), 1)
        if key not in self._fonts:
            for path in FONT_PATHS:
                try:
                    self._fonts[key] = ImageFont.truetype(path, key)
                    break
                except OSError:
                    continue
            else:
                self._fonts[key] = ImageFont.load_default(key)
                logger.warning(f"No system fonts found for size {key}, using default")
        return self._fonts[key]


def get_font_manager() -> FontManager:
    return FontManager()


class PillowTextMeasurer:
    """Measures the ink box of a string in a given font."""

    def __init__(self, font: Font):
        self.font = font

    @classmethod
    def for_size(cls, size: float) -> "PillowTextMeasurer":
        return cls(get_font_manager().get_font(size))

    def __call__(self, text: str) -> Tuple[float, float]:
        return self.measure(text)

    def measure(self, text: str) -> Tuple[float, float]:
        """Return (width, height) of the rendered text bounds."""
        if not text:
            return 0.0, 0.0
        left, top, right, bottom = self.font.getbbox(text)
        return float(right - left), float(bottom - top)
