"""Procedural wave pattern generators.

Each generator maps a ``PatternConfig`` to a closed region: it starts at the
bottom-left baseline corner, traces the wave left to right across the full
width, drops to the bottom-right corner and closes. Mirroring is applied
afterwards, uniformly, by ``build_pattern_path``.

The set of patterns is closed (``PatternName``) and dispatched through the
fixed ``PATTERN_GENERATORS`` table.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from wavecrest.core.geometry.defaults import AMPLITUDE_RANGE, FREQUENCY_RANGE
from wavecrest.core.geometry.jitter import (
    LAYERED_ORGANIC_SEED_OFFSET,
    ORGANIC_INDEX_MULTIPLIER,
    RIBBON_HANDLE_SEED_OFFSET,
    RIBBON_SEED_OFFSET,
    pseudo_random,
)
from wavecrest.core.geometry.models import PatternConfig, PatternName, coerce_pattern_name
from wavecrest.core.geometry.path import (
    PathData,
    Point,
    close_region,
    cubic_to,
    line_to,
    quad_to,
    smooth_segments,
)
from wavecrest.core.geometry.transforms import mirror_path_data
from wavecrest.core.utils.math import clamp, round_half_up

logger = logging.getLogger(__name__)

PatternGenerator = Callable[[PatternConfig], PathData]

# Fraction of the width the flowing curve's control points travel with phase
FLOWING_PHASE_TRAVEL = 0.25
RIBBON_POINTS = 5
LAYERED_ORGANIC_SEGMENTS = 5

# Per-layer variation used by generate_layered_paths
LAYER_AMPLITUDE_FALLOFF = 0.15
LAYER_PHASE_STEP = 0.2
LAYER_OPACITY_FALLOFF = 0.2
DEFAULT_LAYER_OPACITY = 0.3


def _peak_count(frequency: float) -> int:
    return max(1, round_half_up(frequency))


def generate_smooth(config: PatternConfig) -> PathData:
    """Classic sine-like hump from two quadratic segments.

    Frequency and phase are ignored.
    """
    width, height = config.width, config.height
    wave = config.wave_height
    cy = height - wave

    return close_region(
        Point(0.0, cy + wave * 0.6),
        [
            quad_to(width * 0.25, cy - wave * 0.4, width * 0.5, cy + wave * 0.2),
            quad_to(width * 0.75, cy + wave * 0.8, width, cy + wave * 0.3),
        ],
        width,
        height,
    )


def generate_organic(config: PatternConfig) -> PathData:
    """Irregular hump from three seeded control offsets."""
    width, height = config.width, config.height
    wave = config.wave_height
    cy = height - wave
    seed = config.effective_seed

    def r(index: int) -> float:
        return pseudo_random(seed, index, index_multiplier=ORGANIC_INDEX_MULTIPLIER)

    r1 = r(1) * 0.4 + 0.1
    r2 = r(2) * 0.4 + 0.3
    r3 = r(3) * 0.4 + 0.2

    return close_region(
        Point(0.0, cy + wave * r1),
        [
            cubic_to(
                width * 0.2, cy - wave * r2,
                width * 0.35, cy + wave * r3,
                width * 0.5, cy + wave * 0.15,
            ),
            cubic_to(
                width * 0.65, cy - wave * r1,
                width * 0.8, cy + wave * r2,
                width, cy + wave * r3,
            ),
        ],
        width,
        height,
    )


def generate_sharp(config: PatternConfig) -> PathData:
    """Angular zig-zag: ``2 * peaks`` straight segments alternating peak/base."""
    width, height = config.width, config.height
    wave = config.wave_height
    cy = height - wave
    peaks = _peak_count(config.frequency)
    segment_width = width / (peaks * 2)

    curve = []
    for i in range(peaks * 2):
        y = cy if i % 2 == 0 else cy + wave
        curve.append(line_to(segment_width * (i + 1), y))

    return close_region(Point(0.0, cy + wave), curve, width, height)


def generate_mountain(config: PatternConfig) -> PathData:
    """Triangular peaks: each a peak line-to followed by a valley line-to."""
    width, height = config.width, config.height
    wave = config.wave_height
    cy = height - wave
    peaks = _peak_count(config.frequency)
    segment_width = width / peaks

    curve = []
    for i in range(peaks):
        curve.append(line_to(segment_width * i + segment_width * 0.5, cy))
        curve.append(line_to(segment_width * (i + 1), cy + wave))

    return close_region(Point(0.0, cy + wave), curve, width, height)


def generate_flowing(config: PatternConfig) -> PathData:
    """One large S-curve; phase slides the control points horizontally."""
    width, height = config.width, config.height
    wave = config.wave_height
    cy = height - wave
    shift = width * FLOWING_PHASE_TRAVEL * math.sin(2.0 * math.pi * config.phase)

    return close_region(
        Point(0.0, cy + wave * 0.85),
        [
            cubic_to(
                width * 0.3 + shift, cy - wave * 0.35,
                width * 0.7 + shift, cy + wave * 0.95,
                width, cy + wave * 0.15,
            ),
        ],
        width,
        height,
    )


def generate_ribbon(config: PatternConfig) -> PathData:
    """Five seeded points with seeded handle lengths.

    Short handles pinch the curve and long ones stretch it, which reads as a
    ribbon of varying thickness.
    """
    width, height = config.width, config.height
    wave = config.wave_height
    cy = height - wave
    seed = config.effective_seed
    segment_width = width / (RIBBON_POINTS - 1)

    points = [
        Point(
            segment_width * i,
            cy + wave * (0.15 + 0.7 * pseudo_random(seed + RIBBON_SEED_OFFSET, i + 1)),
        )
        for i in range(RIBBON_POINTS)
    ]
    handles = [
        segment_width * (0.2 + 0.35 * pseudo_random(seed + RIBBON_HANDLE_SEED_OFFSET, i + 1))
        for i in range(RIBBON_POINTS)
    ]

    return close_region(points[0], smooth_segments(points, handles), width, height)


def generate_layered_organic(config: PatternConfig) -> PathData:
    """Denser organic curve meant to be stacked as near-duplicate layers.

    A phase-driven sine component plus seeded jitter, so small per-layer
    phase and amplitude offsets produce visibly distinct but related layers.
    """
    width, height = config.width, config.height
    wave = config.wave_height
    cy = height - wave
    seed = config.effective_seed + LAYERED_ORGANIC_SEED_OFFSET

    points = []
    for i in range(LAYERED_ORGANIC_SEGMENTS + 1):
        u = i / LAYERED_ORGANIC_SEGMENTS
        swell = 0.3 * math.sin(2.0 * math.pi * (u + config.phase))
        jitter = 0.4 * (pseudo_random(seed, i) - 0.5)
        points.append(Point(width * u, cy + wave * clamp(0.5 + swell + jitter, 0.0, 1.0)))

    return close_region(points[0], smooth_segments(points), width, height)


PATTERN_GENERATORS: dict[PatternName, PatternGenerator] = {
    PatternName.SMOOTH: generate_smooth,
    PatternName.ORGANIC: generate_organic,
    PatternName.SHARP: generate_sharp,
    PatternName.MOUNTAIN: generate_mountain,
    PatternName.FLOWING: generate_flowing,
    PatternName.RIBBON: generate_ribbon,
    PatternName.LAYERED_ORGANIC: generate_layered_organic,
}


def resolve_pattern(pattern: PatternName | str) -> PatternName:
    """Resolve a pattern name, applying aliases and the unknown-name fallback.

    ``layered`` resolves to ``smooth``. Unknown names log a warning and
    resolve to ``smooth``.
    """
    name = coerce_pattern_name(pattern)
    if name is PatternName.LAYERED:
        return PatternName.SMOOTH
    return name


def normalize_config(config: PatternConfig) -> PatternConfig:
    """Clamp amplitude and frequency into their valid ranges.

    Out-of-range values are not fatal; each clamp is logged with the
    original and clamped value.
    """
    updates: dict[str, float] = {}
    for field, (low, high) in (("amplitude", AMPLITUDE_RANGE), ("frequency", FREQUENCY_RANGE)):
        value = getattr(config, field)
        clamped = clamp(value, low, high)
        if clamped != value:
            logger.warning(
                "%s %s outside [%s, %s], clamped to %s", field, value, low, high, clamped
            )
            updates[field] = clamped

    if not updates:
        return config
    return config.model_copy(update=updates)


def build_pattern_path(
    pattern: PatternName | str, config: PatternConfig | None = None
) -> PathData:
    """Generate the typed path for a pattern.

    Args:
        pattern: Pattern name (enum or string).
        config: Generator config. Defaults to ``PatternConfig()``.

    Returns:
        Closed region path; empty for ``custom``.
    """
    name = resolve_pattern(pattern)
    if name is PatternName.CUSTOM:
        return PathData()

    cfg = normalize_config(config or PatternConfig())
    path = PATTERN_GENERATORS[name](cfg)

    if cfg.mirror:
        path = mirror_path_data(path, cfg.width)
    return path


def generate_path(pattern: PatternName | str, config: PatternConfig | None = None) -> str:
    """Generate a serialized path for a pattern.

    Example:
        >>> generate_path("sharp", PatternConfig(frequency=1, amplitude=0.5))
        'M 0 120 L 0 120 L 720 60 L 1440 120 L 1440 120 Z'
    """
    return build_pattern_path(pattern, config).serialize()


def generate_layered_paths(
    pattern: PatternName | str, layers: int, config: PatternConfig | None = None
) -> list[str]:
    """Generate a stack of near-duplicate layers.

    Layer ``i`` scales amplitude by ``1 - 0.15 * i`` and advances phase by
    ``0.2 * i``.

    Raises:
        ValueError: If layers is negative.
    """
    if layers < 0:
        raise ValueError(f"layers must be >= 0, got {layers}")

    base = config or PatternConfig()
    return [
        generate_path(
            pattern,
            base.model_copy(
                update={
                    "amplitude": base.amplitude * (1 - i * LAYER_AMPLITUDE_FALLOFF),
                    "phase": base.phase + i * LAYER_PHASE_STEP,
                }
            ),
        )
        for i in range(layers)
    ]


def layer_opacities(layers: int, base_opacity: float = DEFAULT_LAYER_OPACITY) -> list[float]:
    """Opacity for each layer of a ``generate_layered_paths`` stack.

    The front layer is opaque; layer ``i`` gets ``base_opacity * (1 - 0.2 * i)``,
    never below zero.

    Example:
        >>> layer_opacities(3)
        [1.0, 0.24, 0.18]
    """
    if layers < 0:
        raise ValueError(f"layers must be >= 0, got {layers}")
    return [
        1.0 if i == 0 else round(max(0.0, base_opacity * (1 - i * LAYER_OPACITY_FALLOFF)), 3)
        for i in range(layers)
    ]
