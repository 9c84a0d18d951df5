"""Configuration management for blendr."""

from blendr.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from blendr.core.config.models import (
    AppConfig,
    ConfigBase,
    LoggingConfig,
    PlaybackConfig,
)

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "ConfigBase",
    "LoggingConfig",
    "PlaybackConfig",
]
