"""Tests for built-in region presets."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wavecrest.core.geometry.models import PatternConfig, PatternName
from wavecrest.core.geometry.patterns import generate_path
from wavecrest.core.geometry.presets import PRESETS, WavePreset, list_presets, resolve_preset


class TestPresets:
    """Tests for preset lookup."""

    def test_known_presets(self) -> None:
        assert list_presets() == [
            "angular",
            "dark-light",
            "dramatic",
            "footer",
            "hero",
            "peaks",
            "subtle",
        ]

    def test_hero(self) -> None:
        hero = resolve_preset("hero")
        assert hero is not None
        assert (hero.pattern, hero.height, hero.amplitude) == (PatternName.SMOOTH, 200, 0.6)

    def test_unknown_returns_none(self) -> None:
        assert resolve_preset("nope") is None

    @pytest.mark.parametrize("name", list(PRESETS))
    def test_every_preset_generates_a_region(self, name: str) -> None:
        preset = PRESETS[name]
        path = generate_path(preset.pattern, preset.to_pattern_config())
        assert path.endswith(f"L 1440 {preset.height:g} Z")


class TestWavePreset:
    """Tests for WavePreset."""

    def test_to_pattern_config(self) -> None:
        preset = WavePreset(name="x", pattern=PatternName.SHARP, height=90, frequency=4)
        assert preset.to_pattern_config(width=800) == PatternConfig(
            width=800, height=90, amplitude=0.5, frequency=4
        )

    def test_layered_paths(self) -> None:
        preset = WavePreset(name="x", pattern=PatternName.FLOWING, layers=3)
        paths = preset.layered_paths()
        assert len(paths) == 3
        assert paths[0] == generate_path("flowing", preset.to_pattern_config())

    def test_layer_opacities_fade_behind_front_layer(self) -> None:
        preset = WavePreset(name="x", layers=3, layer_opacity=0.5)
        assert preset.layer_opacities() == [1.0, 0.4, 0.3]
        assert len(preset.layer_opacities()) == len(preset.layered_paths())

    def test_single_layer_is_opaque(self) -> None:
        assert WavePreset(name="x").layer_opacities() == [1.0]

    def test_layer_opacity_validated(self) -> None:
        with pytest.raises(ValidationError):
            WavePreset(name="x", layer_opacity=1.2)

    def test_amplitude_validated(self) -> None:
        with pytest.raises(ValidationError):
            WavePreset(name="x", amplitude=1.5)

    def test_layers_at_least_one(self) -> None:
        with pytest.raises(ValidationError):
            WavePreset(name="x", layers=0)
