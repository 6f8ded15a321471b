"""Loopable morph keyframes.

A morph is a list of frames, each the same pattern regenerated with its
phase and amplitude nudged by ``sin(2*pi*t)``. The last frame reuses
``t = 0`` so playback loops without a jump.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import NamedTuple

from wavecrest.core.geometry.models import EdgeConfig, PatternConfig, PatternName
from wavecrest.core.geometry.patterns import generate_path, resolve_pattern
from wavecrest.core.utils.logging import geometry_extra
from wavecrest.core.utils.math import round_half_up

logger = logging.getLogger(__name__)


class MorphPreset(str, Enum):
    """Named morph animations."""

    DRIFT = "drift"
    BREATHE = "breathe"
    UNDULATE = "undulate"
    RIPPLE_OUT = "ripple-out"


class MorphSettings(NamedTuple):
    frame_count: int
    phase_range: float
    amplitude_variation: float


MORPH_PRESETS: dict[MorphPreset, MorphSettings] = {
    MorphPreset.DRIFT: MorphSettings(5, 0.4, 0.05),  # horizontal glide
    MorphPreset.BREATHE: MorphSettings(5, 0.05, 0.2),  # amplitude swell
    MorphPreset.UNDULATE: MorphSettings(7, 0.5, 0.15),
    MorphPreset.RIPPLE_OUT: MorphSettings(7, 0.8, 0.1),
}


def frame_schedule(frame_count: int) -> list[float]:
    """Return ``t`` for each frame: ``i / (n - 1)``, with the last frame at 0.

    Raises:
        ValueError: If frame_count < 1.

    Example:
        >>> frame_schedule(5)
        [0.0, 0.25, 0.5, 0.75, 0.0]
    """
    if frame_count < 1:
        raise ValueError(f"frame_count must be >= 1, got {frame_count}")
    last = frame_count - 1
    return [0.0 if i == last else i / last for i in range(frame_count)]


def keyframe_offsets(frame_count: int) -> list[int]:
    """Percent stops for a timeline driving ``frame_count`` frames.

    Example:
        >>> keyframe_offsets(5)
        [0, 25, 50, 75, 100]
    """
    if frame_count < 1:
        raise ValueError(f"frame_count must be >= 1, got {frame_count}")
    if frame_count == 1:
        return [0]
    last = frame_count - 1
    return [round_half_up(i / last * 100) for i in range(frame_count)]


def _frame_config(
    config: PatternConfig, t: float, phase_range: float, amplitude_variation: float
) -> PatternConfig:
    wave = math.sin(2.0 * math.pi * t)
    return config.model_copy(
        update={
            "phase": config.phase + wave * phase_range,
            "amplitude": config.amplitude * (1 + wave * amplitude_variation),
        }
    )


def _morph_pattern(pattern: PatternName | str) -> PatternName:
    name = resolve_pattern(pattern)
    return PatternName.SMOOTH if name is PatternName.CUSTOM else name


def generate_frames(
    pattern: PatternName | str,
    frame_count: int,
    config: PatternConfig | None = None,
    phase_range: float = 0.4,
    amplitude_variation: float = 0.05,
) -> list[str]:
    """Generate a loopable sequence of path frames.

    Frame ``i`` regenerates the pattern with
    ``phase + sin(2*pi*t) * phase_range`` and
    ``amplitude * (1 + sin(2*pi*t) * amplitude_variation)``. Custom patterns
    morph as smooth.

    Args:
        pattern: Pattern to morph.
        frame_count: Number of frames, at least 1.
        config: Base config. Defaults to ``PatternConfig()``.
        phase_range: Peak phase shift.
        amplitude_variation: Peak relative amplitude change.

    Returns:
        ``frame_count`` paths; the first and last are identical.

    Raises:
        ValueError: If frame_count < 1.
    """
    schedule = frame_schedule(frame_count)
    name = _morph_pattern(pattern)
    base = config or PatternConfig()

    return [
        generate_path(name, _frame_config(base, t, phase_range, amplitude_variation))
        for t in schedule
    ]


def generate_preset_frames(
    preset: MorphPreset | str,
    pattern: PatternName | str = PatternName.SMOOTH,
    config: PatternConfig | None = None,
) -> list[str]:
    """Generate frames for a named morph preset."""
    settings = MORPH_PRESETS[MorphPreset(preset)]
    return generate_frames(
        pattern,
        settings.frame_count,
        config,
        phase_range=settings.phase_range,
        amplitude_variation=settings.amplitude_variation,
    )


def generate_dual_frames(
    upper: EdgeConfig,
    lower: EdgeConfig,
    frame_count: int,
    phase_range: float = 0.4,
    amplitude_variation: float = 0.05,
) -> list[tuple[str, str]]:
    """Generate phase-coordinated frames for two edges.

    Both edges are driven by the same ``t`` schedule, so frame ``i`` of the
    upper edge always plays alongside frame ``i`` of the lower edge.

    Returns:
        ``(upper, lower)`` path pairs; the first and last pairs are identical.
    """
    schedule = frame_schedule(frame_count)
    upper_pattern = _morph_pattern(upper.pattern)
    lower_pattern = _morph_pattern(lower.pattern)

    frames = []
    for t in schedule:
        frames.append(
            (
                generate_path(
                    upper_pattern, _frame_config(upper.config, t, phase_range, amplitude_variation)
                ),
                generate_path(
                    lower_pattern, _frame_config(lower.config, t, phase_range, amplitude_variation)
                ),
            )
        )
    logger.debug(
        "Generated %d dual frames",
        len(frames),
        extra=geometry_extra(pattern=upper_pattern, frame_count=len(frames)),
    )
    return frames
