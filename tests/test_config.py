"""Tests for configuration loading and validation."""

import pytest

from radclock.config import (
    ClockConfig,
    ClockSettings,
    ColorConfig,
    Config,
    DisplayConfig,
    TouchConfig,
    _dict_to_config,
    load_config,
)


class TestDisplayConfig:
    """Tests for DisplayConfig validation."""

    def test_valid_display(self):
        assert DisplayConfig(width=300, height=300).validate() == []

    def test_invalid_width(self):
        errors = DisplayConfig(width=0, height=320).validate()
        assert any("dimensions" in e.lower() for e in errors)

    def test_negative_padding(self):
        errors = DisplayConfig(padding=-1).validate()
        assert any("padding" in e.lower() for e in errors)

    def test_invalid_fps(self):
        errors = DisplayConfig(fps=0).validate()
        assert any("fps" in e.lower() for e in errors)


class TestClockConfig:
    """Tests for ClockConfig validation."""

    def test_defaults(self):
        clock = ClockConfig()
        assert clock.tick_count == 12
        assert clock.tick_length == 20
        assert clock.tick_padding == 10
        assert clock.animation_duration_ms == 10
        assert clock.validate() == []

    def test_zero_ticks(self):
        errors = ClockConfig(tick_count=0).validate()
        assert any("tick_count" in e for e in errors)

    def test_negative_lengths(self):
        errors = ClockConfig(tick_length=-1, tick_padding=-1).validate()
        assert len(errors) == 2

    def test_bad_text_size(self):
        errors = ClockConfig(center_text_size=0).validate()
        assert any("center_text_size" in e for e in errors)

    def test_bad_density(self):
        errors = ClockConfig(density=0).validate()
        assert any("density" in e.lower() for e in errors)


class TestColorConfig:
    """Tests for color parsing."""

    def test_defaults_valid(self):
        assert ColorConfig().validate() == []

    def test_invalid_color(self):
        errors = ColorConfig(tick="not-a-color").validate()
        assert any("tick" in e for e in errors)

    def test_rgb(self):
        colors = ColorConfig()
        assert colors.rgb("background") == (126, 126, 126)
        assert colors.rgb("start") == (31, 158, 217)

    def test_named_colors(self):
        assert ColorConfig(label="white").rgb("label") == (255, 255, 255)


class TestTouchConfig:
    def test_bad_range(self):
        errors = TouchConfig(raw_min=10, raw_max=10).validate()
        assert len(errors) == 1


class TestClockSettings:
    """Tests for resolving settings from config."""

    def test_from_defaults(self):
        settings = ClockSettings.from_config(Config())
        assert settings == ClockSettings()

    def test_density_scales_text(self):
        config = Config(clock=ClockConfig(density=2.0))
        settings = ClockSettings.from_config(config)
        assert settings.numeral_text_size == 36
        assert settings.center_text_size == 44
        assert settings.control_text_size == 44

    def test_colors_resolved(self):
        config = Config(colors=ColorConfig(start="#FF0000", end="#00FF00"))
        settings = ClockSettings.from_config(config)
        assert settings.start_color == (255, 0, 0)
        assert settings.end_color == (0, 255, 0)


class TestDictToConfig:
    """Tests for dictionary conversion."""

    def test_full_dict(self, sample_config_dict):
        config = _dict_to_config(sample_config_dict)
        assert config.display.width == 300
        assert config.clock.show_end_dial is True
        assert config.touch.enabled is False

    def test_missing_sections_use_defaults(self):
        config = _dict_to_config({"display": {"width": 640}})
        assert config.display.width == 640
        assert config.display.height == 320
        assert config.clock == ClockConfig()

    def test_unknown_keys_ignored(self):
        config = _dict_to_config({"clock": {"tick_count": 6, "bogus": 1}})
        assert config.clock.tick_count == 6


class TestLoadConfig:
    """Tests for loading config files."""

    def test_load_explicit(self, temp_config_file):
        config = load_config(temp_config_file)
        assert config.display.width == 300
        assert config.clock.show_end_dial is True

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_defaults_when_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "radclock.config.CONFIG_PATHS", [tmp_path / "nope.json"]
        )
        assert load_config() == Config()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_validation_errors(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"clock": {"tick_count": 0}}')
        with pytest.raises(ValueError, match="tick_count"):
            load_config(path)

    def test_search_order(self, tmp_path, monkeypatch):
        first = tmp_path / "a.json"
        second = tmp_path / "b.json"
        second.write_text('{"display": {"width": 111}}')
        monkeypatch.setattr("radclock.config.CONFIG_PATHS", [first, second])
        assert load_config().display.width == 111
