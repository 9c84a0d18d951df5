"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
import pytest

from blendr.core.config import AppConfig, ConfigBase, LoggingConfig, PlaybackConfig
from blendr.core.playback import PlaybackTiming


class TestLoggingConfig:
    """Test LoggingConfig validation."""

    def test_defaults(self):
        """Test default logging settings."""
        config = LoggingConfig()

        assert config.level == "INFO"
        assert config.structured is False
        assert config.filename is None
        assert "%(message)s" in config.format

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_valid_levels(self, level):
        """Test that standard level names are accepted."""
        assert LoggingConfig(level=level).level == level

    @pytest.mark.parametrize("level", ["debug", "TRACE", ""])
    def test_invalid_levels(self, level):
        """Test that other level names are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level=level)


class TestPlaybackConfig:
    """Test PlaybackConfig validation and conversion."""

    def test_defaults(self):
        """Test default playback settings."""
        config = PlaybackConfig()

        assert config.delay_ms == 160
        assert config.min_delay_ms == 1
        assert config.max_delay_ms == 10000
        assert config.delay_step_ms == 1
        assert config.ms_per_step == 33
        assert config.check_continuity is False

    def test_unknown_fields_are_rejected(self):
        """Test that typos in playback settings fail loudly."""
        with pytest.raises(ValidationError):
            PlaybackConfig.model_validate({"dealy_ms": 10})

    def test_non_positive_delay_rejected(self):
        """Test that a zero delay is rejected."""
        with pytest.raises(ValidationError):
            PlaybackConfig(delay_ms=0)

    def test_to_timing(self):
        """Test conversion to the runtime timing object."""
        timing = PlaybackConfig(delay_ms=50, min_delay_ms=10, max_delay_ms=100).to_timing()

        assert timing == PlaybackTiming(delay_ms=50, min_delay_ms=10, max_delay_ms=100)

    def test_to_timing_validates_bounds(self):
        """Test that an out-of-bounds delay is caught when building timing."""
        config = PlaybackConfig(delay_ms=500, max_delay_ms=100)

        with pytest.raises(ValidationError, match="delay_ms must be in"):
            config.to_timing()


class TestAppConfig:
    """Test AppConfig composition."""

    def test_default_path(self):
        """Test the default config location."""
        assert AppConfig.default_path() == Path("blendr.yaml")

    def test_sections_are_independent_instances(self):
        """Test that defaults are not shared between instances."""
        first = AppConfig()
        second = AppConfig()

        first.logging.level = "DEBUG"

        assert second.logging.level == "INFO"

    def test_base_requires_default_path(self):
        """Test that ConfigBase subclasses must define default_path()."""

        class Bare(ConfigBase):
            pass

        with pytest.raises(NotImplementedError, match="Bare must implement default_path"):
            Bare.default_path()
