"""Pytest fixtures for RadClock tests."""

import json
import sys
from pathlib import Path

import pytest

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from radclock.config import ClockSettings  # noqa: E402

TEXT_HEIGHT = 12
CHAR_WIDTH = 8


def fake_measure(text: str):
    """Deterministic stand-in for font metrics."""
    return float(len(text) * CHAR_WIDTH), float(TEXT_HEIGHT)


def fake_measurer_factory(size: float):
    return fake_measure


@pytest.fixture
def measure():
    return fake_measure


@pytest.fixture
def measurer_factory():
    return fake_measurer_factory


@pytest.fixture
def settings():
    """Default clock settings."""
    return ClockSettings()


@pytest.fixture
def sample_config_dict():
    """Sample configuration dictionary."""
    return {
        "display": {
            "width": 300,
            "height": 300,
            "padding": 0,
            "framebuffer": "/dev/fb1",
            "fps": 30,
        },
        "clock": {
            "tick_count": 12,
            "tick_length": 20,
            "tick_padding": 10,
            "animation_duration_ms": 10,
            "show_end_dial": True,
        },
        "colors": {"background": "#7E7E7E", "start": "#1F9ED9"},
        "touch": {"enabled": False, "device": "/dev/input/event0"},
    }


@pytest.fixture
def temp_config_file(tmp_path, sample_config_dict):
    """Create a temporary config file."""
    config_path = tmp_path / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_dict, f)
    return config_path


@pytest.fixture
def sample_config(sample_config_dict):
    """Create a Config object from sample data."""
    from radclock.config import _dict_to_config

    return _dict_to_config(sample_config_dict)
