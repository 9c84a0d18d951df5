"""Configuration models for blendr."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from blendr.core.playback.timing import MS_PER_STEP, PlaybackTiming


class ConfigBase(BaseModel):
    """Base class for all blendr configurations.

    Provides common functionality for loading from files with defaults.
    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type.

        Returns:
            Path to the default config file
        """
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, falling back to defaults when the file is absent.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            ValidationError: If config is invalid
        """
        from blendr.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        if not Path(path).exists():
            return cls()
        return cls.model_validate(load_config(path))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file (stdout when None)")


class PlaybackConfig(BaseModel):
    """Playback defaults for the host loop."""

    model_config = ConfigDict(extra="forbid")

    delay_ms: int = Field(default=160, ge=1, description="Milliseconds per playback step")
    min_delay_ms: int = Field(default=1, ge=1)
    max_delay_ms: int = Field(default=10000, ge=1)
    delay_step_ms: int = Field(default=1, ge=1, description="Delay change per faster/slower event")
    ms_per_step: int = Field(default=MS_PER_STEP, gt=0, description="Milliseconds per key step")
    check_continuity: bool = Field(
        default=False, description="Run the continuity check on every tick"
    )

    def to_timing(self) -> PlaybackTiming:
        """Build the runtime timing object."""
        return PlaybackTiming(
            delay_ms=self.delay_ms,
            min_delay_ms=self.min_delay_ms,
            max_delay_ms=self.max_delay_ms,
        )


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    playback: PlaybackConfig = Field(default_factory=PlaybackConfig)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("blendr.yaml")
