"""Built-in region presets.

A preset is a named, fully populated set of generator parameters for a
common layout position (page hero, footer, ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from wavecrest.core.geometry.defaults import DEFAULT_VIEWBOX_WIDTH
from wavecrest.core.geometry.models import PatternConfig, PatternName
from wavecrest.core.geometry.patterns import (
    DEFAULT_LAYER_OPACITY,
    generate_layered_paths,
    layer_opacities,
)


class WavePreset(BaseModel):
    """Named generator parameters.

    Attributes:
        name: Preset identifier.
        pattern: Pattern to generate.
        height: Viewbox height in px.
        amplitude: Wave height fraction.
        frequency: Target peak count.
        layers: Number of stacked layers to render.
        layer_opacity: Base opacity of the layers behind the front one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    pattern: PatternName = PatternName.SMOOTH
    height: float = Field(default=120.0, gt=0.0)
    amplitude: float = Field(default=0.5, ge=0.0, le=1.0)
    frequency: float = Field(default=1.0, gt=0.0)
    layers: int = Field(default=1, ge=1)
    layer_opacity: float = Field(default=DEFAULT_LAYER_OPACITY, ge=0.0, le=1.0)

    def to_pattern_config(self, width: float = DEFAULT_VIEWBOX_WIDTH) -> PatternConfig:
        return PatternConfig(
            width=width,
            height=self.height,
            amplitude=self.amplitude,
            frequency=self.frequency,
        )

    def layered_paths(self, width: float = DEFAULT_VIEWBOX_WIDTH) -> list[str]:
        """Generate this preset's layer stack, front layer first."""
        return generate_layered_paths(self.pattern, self.layers, self.to_pattern_config(width))

    def layer_opacities(self) -> list[float]:
        """Opacity of each layer in ``layered_paths``, front layer first."""
        return layer_opacities(self.layers, self.layer_opacity)


PRESETS: dict[str, WavePreset] = {
    preset.name: preset
    for preset in (
        WavePreset(name="hero", height=200, amplitude=0.6),
        WavePreset(name="footer", height=150, amplitude=0.4),
        WavePreset(name="dark-light", height=120, amplitude=0.5),
        WavePreset(name="dramatic", pattern=PatternName.ORGANIC, height=250, amplitude=0.7),
        WavePreset(name="subtle", height=80, amplitude=0.3),
        WavePreset(name="angular", pattern=PatternName.SHARP, height=120, frequency=2),
        WavePreset(
            name="peaks", pattern=PatternName.MOUNTAIN, height=150, amplitude=0.6, frequency=3
        ),
    )
}


def resolve_preset(name: str) -> WavePreset | None:
    """Look up a built-in preset by name; None if it doesn't exist."""
    return PRESETS.get(name)


def list_presets() -> list[str]:
    return sorted(PRESETS)
