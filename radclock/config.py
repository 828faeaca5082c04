"""Configuration loading and validation for RadClock."""

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from PIL import ImageColor

from .animator import DEFAULT_DURATION_MS
from .geometry import (
    DEFAULT_NUMERAL_MARGIN,
    DEFAULT_TICK_COUNT,
    DEFAULT_TICK_LENGTH,
    DEFAULT_TICK_PADDING,
)

logger = logging.getLogger(__name__)

# Default paths to search for config
CONFIG_PATHS = [
    Path("config.json"),
    Path.home() / ".config" / "radclock" / "config.json",
    Path("/etc/radclock/config.json"),
]

RGB = tuple[int, int, int]


@dataclass
class DisplayConfig:
    """Output surface settings."""

    width: int = 480
    height: int = 320
    padding: int = 0
    framebuffer: str = "/dev/fb1"
    fps: int = 30

    def validate(self) -> list[str]:
        errors = []
        if self.width <= 0 or self.height <= 0:
            errors.append(f"Invalid display dimensions: {self.width}x{self.height}")
        if self.padding < 0:
            errors.append(f"Invalid padding {self.padding}: must not be negative")
        if not 1 <= self.fps <= 120:
            errors.append(f"Invalid fps {self.fps}: must be 1-120")
        return errors


@dataclass
class ClockConfig:
    """Clock face and dial behaviour."""

    tick_count: int = DEFAULT_TICK_COUNT
    tick_length: float = DEFAULT_TICK_LENGTH
    tick_padding: float = DEFAULT_TICK_PADDING
    numeral_margin: float = DEFAULT_NUMERAL_MARGIN
    animation_duration_ms: float = DEFAULT_DURATION_MS
    start_angle: float = 0.0
    end_angle: float = 180.0
    show_end_dial: bool = False
    numeral_text_size: float = 18.0
    center_text_size: float = 22.0
    control_text_size: float = 22.0
    density: float = 1.0

    def validate(self) -> list[str]:
        errors = []
        if self.tick_count < 1:
            errors.append(f"Invalid tick_count {self.tick_count}: must be at least 1")
        if self.tick_length < 0:
            errors.append("Tick length must not be negative")
        if self.tick_padding < 0:
            errors.append("Tick padding must not be negative")
        if self.animation_duration_ms < 0:
            errors.append("Animation duration must not be negative")
        if self.density <= 0:
            errors.append(f"Invalid density {self.density}: must be positive")
        for name in ("numeral_text_size", "center_text_size", "control_text_size"):
            if getattr(self, name) <= 0:
                errors.append(f"Invalid {name}: must be positive")
        return errors


@dataclass
class ColorConfig:
    """Colors as CSS-style strings, e.g. "#7E7E7E"."""

    background: str = "#7E7E7E"
    foreground: str = "#000000"
    tick: str = "#FFFFFF"
    numeral: str = "#FFFFFF"
    center_time: str = "#FFFFFF"
    start: str = "#1F9ED9"
    end: str = "#D9581F"
    label: str = "#FFFFFF"

    def validate(self) -> list[str]:
        errors = []
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            try:
                ImageColor.getrgb(value)
            except ValueError:
                errors.append(f"Invalid color for {f.name}: '{value}'")
        return errors

    def rgb(self, name: str) -> RGB:
        """Resolve a named color to an RGB tuple."""
        return ImageColor.getrgb(getattr(self, name))[:3]


@dataclass
class TouchConfig:
    """Touchscreen settings."""

    enabled: bool = True
    device: str = "/dev/input/event0"
    raw_min: int = 0
    raw_max: int = 4095
    swap_axes: bool = True

    def validate(self) -> list[str]:
        errors = []
        if self.raw_max <= self.raw_min:
            errors.append(
                f"Invalid touch range {self.raw_min}-{self.raw_max}: "
                "raw_max must exceed raw_min"
            )
        return errors


@dataclass
class Config:
    """Main configuration container."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    clock: ClockConfig = field(default_factory=ClockConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)
    touch: TouchConfig = field(default_factory=TouchConfig)

    def validate(self) -> list[str]:
        """Validate all configuration sections. Returns list of errors."""
        errors = []
        errors.extend(self.display.validate())
        errors.extend(self.clock.validate())
        errors.extend(self.colors.validate())
        errors.extend(self.touch.validate())
        return errors


@dataclass(frozen=True)
class ClockSettings:
    """
    Resolved values handed to the widget.

    The widget never looks anything up itself; everything it needs is
    here, already parsed.
    """

    tick_count: int = DEFAULT_TICK_COUNT
    tick_length: float = DEFAULT_TICK_LENGTH
    tick_padding: float = DEFAULT_TICK_PADDING
    numeral_margin: float = DEFAULT_NUMERAL_MARGIN
    animation_duration_ms: float = DEFAULT_DURATION_MS
    start_angle: float = 0.0
    end_angle: float = 180.0
    show_end_dial: bool = False
    numeral_text_size: float = 18.0
    center_text_size: float = 22.0
    control_text_size: float = 22.0
    start_color: RGB = (31, 158, 217)
    end_color: RGB = (217, 88, 31)

    @classmethod
    def from_config(cls, config: Config) -> "ClockSettings":
        clock = config.clock
        return cls(
            tick_count=clock.tick_count,
            tick_length=clock.tick_length,
            tick_padding=clock.tick_padding,
            numeral_margin=clock.numeral_margin,
            animation_duration_ms=clock.animation_duration_ms,
            start_angle=clock.start_angle,
            end_angle=clock.end_angle,
            show_end_dial=clock.show_end_dial,
            numeral_text_size=clock.numeral_text_size * clock.density,
            center_text_size=clock.center_text_size * clock.density,
            control_text_size=clock.control_text_size * clock.density,
            start_color=config.colors.rgb("start"),
            end_color=config.colors.rgb("end"),
        )


def _dataclass_from_dict(cls, data: dict):
    """Create a dataclass instance from a dict, using field defaults for missing keys."""
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name in data:
            kwargs[f.name] = data[f.name]
    unknown = set(data) - set(kwargs)
    if unknown:
        logger.warning(f"Ignoring unknown {cls.__name__} keys: {sorted(unknown)}")
    return cls(**kwargs)


# Mapping from config JSON keys to their dataclass types
_CONFIG_SECTIONS = {
    "display": ("display", DisplayConfig),
    "clock": ("clock", ClockConfig),
    "colors": ("colors", ColorConfig),
    "touch": ("touch", TouchConfig),
}


def _dict_to_config(data: dict) -> Config:
    """Convert a dictionary to a Config object."""
    config = Config()
    for key, (attr, cls) in _CONFIG_SECTIONS.items():
        if key in data:
            setattr(config, attr, _dataclass_from_dict(cls, data[key]))
    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Explicit path to config file. If None, searches default paths.

    Returns:
        Config object with loaded settings.

    Raises:
        FileNotFoundError: If no config file found and config_path was explicit.
        ValueError: If config file has validation errors.
    """
    if config_path is not None:
        paths_to_try = [config_path]
    else:
        paths_to_try = CONFIG_PATHS

    found_path = None
    for path in paths_to_try:
        if path.exists():
            found_path = path
            break

    if found_path is None:
        if config_path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        logger.warning("No config file found, using defaults")
        return Config()

    logger.info(f"Loading config from {found_path}")
    try:
        with open(found_path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {found_path}: {e}")

    config = _dict_to_config(data)

    errors = config.validate()
    if errors:
        error_msg = "Config validation errors:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        raise ValueError(error_msg)

    return config
