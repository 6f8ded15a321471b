"""Configuration management for wavecrest."""

from wavecrest.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from wavecrest.core.config.models import AppConfig, ConfigBase, GeometryConfig, LoggingConfig

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "ConfigBase",
    "GeometryConfig",
    "LoggingConfig",
]
