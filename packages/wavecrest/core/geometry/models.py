"""Schema models for the wave geometry engine.

This module defines the value types passed into and out of the engine:
- PatternName / InterlockMode / RegionEdge: closed enumerations
- PatternConfig: fully determines a pattern generator's output
- EdgeConfig: a pattern plus its config, describing one region edge
- WaveSeparationConfig / InterlockOptions: tuning for dual-edge generation
- DualPathResult: two related edges and the curve they derive from
- PolygonPoints: percentage-based region outline

All models are immutable and compare by value.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wavecrest.core.geometry.defaults import (
    DEFAULT_PATTERN_PARAMS,
    DEFAULT_SEED,
    DEFAULT_VIEWBOX_WIDTH,
    DEFAULT_WAVE_HEIGHT,
)

logger = logging.getLogger(__name__)


class PatternName(str, Enum):
    """Identifiers for built-in wave patterns."""

    SMOOTH = "smooth"
    ORGANIC = "organic"
    SHARP = "sharp"
    MOUNTAIN = "mountain"
    FLOWING = "flowing"
    RIBBON = "ribbon"
    LAYERED_ORGANIC = "layered-organic"
    LAYERED = "layered"  # Alias of SMOOTH; the caller does the layering
    CUSTOM = "custom"  # Caller supplies its own path


def coerce_pattern_name(pattern: object) -> PatternName:
    """Convert a pattern name, falling back to ``smooth`` for unknown names.

    Unknown names are not fatal: a warning lists the available patterns.
    """
    try:
        return PatternName(pattern)
    except ValueError:
        available = ", ".join(p.value for p in PatternName)
        logger.warning(
            'Unknown pattern "%s", falling back to "smooth". Available patterns: %s',
            pattern,
            available,
        )
        return PatternName.SMOOTH


class InterlockMode(str, Enum):
    """How two edges derived from one curve diverge."""

    INTERLOCK = "interlock"
    OVERLAP = "overlap"
    APART = "apart"
    FLUSH = "flush"


class RegionEdge(str, Enum):
    """Which side of the clipped region a curve bounds."""

    TOP = "top"
    BOTTOM = "bottom"


class PatternConfig(BaseModel):
    """Input to a pattern generator.

    Amplitude and frequency are not range-checked here; the generator clamps
    them and logs a warning.

    Attributes:
        width: Viewbox width in px.
        height: Viewbox height in px.
        amplitude: Wave height as a fraction of ``height`` (nominally [0, 1]).
        frequency: Target peak count.
        phase: Horizontal shift as a fraction of a cycle.
        mirror: Reflect the finished path about ``width / 2``.
        seed: Seed for organic patterns. None means the default seed.

    Example:
        >>> cfg = PatternConfig(height=200, amplitude=0.6)
        >>> cfg.width
        1440.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: float = Field(default=DEFAULT_VIEWBOX_WIDTH, gt=0.0)
    height: float = Field(default=DEFAULT_WAVE_HEIGHT, gt=0.0)
    amplitude: float = DEFAULT_PATTERN_PARAMS["amplitude"]
    frequency: float = DEFAULT_PATTERN_PARAMS["frequency"]
    phase: float = DEFAULT_PATTERN_PARAMS["phase"]
    mirror: bool = False
    seed: int | None = None

    @property
    def effective_seed(self) -> int:
        return DEFAULT_SEED if self.seed is None else self.seed

    @property
    def wave_height(self) -> float:
        """Vertical extent of the wave in px."""
        return self.height * self.amplitude

    def with_updates(self, **changes: object) -> PatternConfig:
        """Copy with fields replaced (validated)."""
        return PatternConfig.model_validate({**self.model_dump(), **changes})


class EdgeConfig(BaseModel):
    """One region edge: a pattern and its generator config."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: PatternName = PatternName.SMOOTH
    config: PatternConfig = Field(default_factory=PatternConfig)

    @field_validator("pattern", mode="before")
    @classmethod
    def validate_pattern(cls, v: object) -> PatternName:
        """Unknown pattern names fall back to smooth instead of failing."""
        return coerce_pattern_name(v)


class WaveSeparationConfig(BaseModel):
    """Tuning for how two adjacent edges separate.

    Attributes:
        mode: Offset strategy.
        intensity: Scales the maximum vertical offset [0, 1].
        gap: Constant vertical separation between the edges in px.
        stroke_color: Optional outline color carried for the renderer.
        stroke_width: Optional outline width carried for the renderer.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: InterlockMode = InterlockMode.INTERLOCK
    intensity: float = Field(default=0.5, ge=0.0, le=1.0)
    gap: float = Field(default=0.0, ge=0.0)
    stroke_color: str | None = None
    stroke_width: float | None = Field(default=None, ge=0.0)


class InterlockOptions(BaseModel):
    """Options for generating two edges from a single base curve."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: PatternName = PatternName.SMOOTH
    width: float = Field(default=DEFAULT_VIEWBOX_WIDTH, gt=0.0)
    height: float = Field(default=DEFAULT_WAVE_HEIGHT, gt=0.0)
    amplitude: float = DEFAULT_PATTERN_PARAMS["amplitude"]
    frequency: float = DEFAULT_PATTERN_PARAMS["frequency"]
    intensity: float = Field(default=0.5, ge=0.0, le=1.0)
    mode: InterlockMode = InterlockMode.INTERLOCK
    seed: int = DEFAULT_SEED
    gap: float = Field(default=0.0, ge=0.0)
    phase: float = DEFAULT_PATTERN_PARAMS["phase"]
    mirror: bool = False

    @field_validator("pattern", mode="before")
    @classmethod
    def validate_pattern(cls, v: object) -> PatternName:
        """Unknown pattern names fall back to smooth instead of failing."""
        return coerce_pattern_name(v)

    def pattern_config(self) -> PatternConfig:
        return PatternConfig(
            width=self.width,
            height=self.height,
            amplitude=self.amplitude,
            frequency=self.frequency,
            phase=self.phase,
            mirror=self.mirror,
            seed=self.seed,
        )


class DualPathResult(BaseModel):
    """Two related edge paths plus the curve they were derived from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path_a: str
    path_b: str
    base_curve: str


class PolygonPoints(BaseModel):
    """Region outline as percentages of the viewbox.

    An empty point list is the "none" sentinel.

    Example:
        >>> PolygonPoints().serialize()
        'none'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    points: tuple[tuple[float, float], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.points

    def serialize(self) -> str:
        """Render as ``polygon(x% y%, ...)`` or ``none``."""
        if self.is_empty:
            return "none"
        body = ", ".join(f"{x:.2f}% {y:.2f}%" for x, y in self.points)
        return f"polygon({body})"
