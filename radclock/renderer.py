"""Draw a LayoutResult onto a Pillow image."""

from typing import TYPE_CHECKING, Optional

from PIL import Image, ImageDraw

from .text import get_font_manager

if TYPE_CHECKING:
    from .config import ClockSettings, ColorConfig
    from .widget import LayoutResult

BLACK = (0, 0, 0)
TICK_WIDTH = 5


class ClockRenderer:
    """
    Rasterises a computed layout.

    Holds no geometry of its own; every coordinate comes from the
    LayoutResult. Text is anchored at the middle of its baseline.
    """

    def __init__(self, colors: "ColorConfig", settings: "ClockSettings"):
        self.colors = colors
        fonts = get_font_manager()
        self.numeral_font = fonts.get_font(settings.numeral_text_size)
        self.center_font = fonts.get_font(settings.center_text_size)
        self.control_font = fonts.get_font(settings.control_text_size)

    def render(
        self,
        result: "LayoutResult",
        width: int,
        height: int,
        image: Optional[Image.Image] = None,
    ) -> Image.Image:
        if image is None:
            image = Image.new("RGB", (width, height), BLACK)
        draw = ImageDraw.Draw(image)
        face = result.face
        cx, cy = face.center_x, face.center_y

        self._circle(draw, cx, cy, face.background_radius, self.colors.rgb("background"))
        self._circle(draw, cx, cy, face.foreground_radius, self.colors.rgb("foreground"))

        tick_color = self.colors.rgb("tick")
        for tick in result.ticks:
            draw.line([tick.start, tick.end], fill=tick_color, width=TICK_WIDTH)

        numeral_color = self.colors.rgb("numeral")
        for numeral in result.numerals:
            draw.text(
                numeral.anchor,
                numeral.text,
                fill=numeral_color,
                font=self.numeral_font,
                anchor="ms",
            )

        label = result.center_label
        draw.text(
            label.anchor,
            label.text,
            fill=self.colors.rgb("center_time"),
            font=self.center_font,
            anchor="ms",
        )

        label_color = self.colors.rgb("label")
        for dial in result.dials:
            self._circle(draw, dial.x, dial.y, dial.radius, dial.color)
            if dial.label:
                draw.text(
                    (dial.label_x, dial.label_y),
                    dial.label,
                    fill=label_color,
                    font=self.control_font,
                    anchor="ms",
                )

        return image

    @staticmethod
    def _circle(draw: ImageDraw.ImageDraw, x: float, y: float, radius: float, color) -> None:
        if radius <= 0:
            return
        draw.ellipse([(x - radius, y - radius), (x + radius, y + radius)], fill=color)
