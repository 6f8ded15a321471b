"""Configuration models for wavecrest."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from wavecrest.core.geometry.defaults import (
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_SEED,
    DEFAULT_SIMPLIFY_EPSILON,
    DEFAULT_VIEWBOX_WIDTH,
    DEFAULT_WAVE_HEIGHT,
)


class ConfigBase(BaseModel):
    """Base class for all wavecrest configurations.

    Provides common functionality for loading from files with defaults.
    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type.

        Subclasses must override this to provide their default location.

        Returns:
            Path to the default config file
        """
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path or use default path.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        from wavecrest.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file; stderr when unset")


class GeometryConfig(BaseModel):
    """Defaults applied to generation requests that don't specify them."""

    viewbox_width: float = Field(default=DEFAULT_VIEWBOX_WIDTH, gt=0.0)
    default_height: float = Field(default=DEFAULT_WAVE_HEIGHT, gt=0.0)
    sample_count: int = Field(
        default=DEFAULT_SAMPLE_COUNT, ge=2, description="Samples taken along a curve"
    )
    simplify_epsilon: float = Field(
        default=DEFAULT_SIMPLIFY_EPSILON, ge=0.0, description="RDP tolerance in px"
    )
    seed: int = Field(default=DEFAULT_SEED, description="Seed for organic patterns")


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")
    output_dir: str = Field(default=".", description="Base directory for relative --out paths")
    geometry: GeometryConfig = GeometryConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("wavecrest.json")
