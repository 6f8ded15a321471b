"""Dual-edge path generation.

Two related edges are derived from base curves: each base curve is sampled,
offset vertically by a mode-specific factor of the maximum offset, jittered
independently per edge and rebuilt as a smooth closed region.

- ``generate_interlock``: both edges come from one pattern's curve.
- ``separate`` / ``generate_cross_boundary``: each edge comes from its own
  region's pattern and config, sharing the larger of the two heights.

Flush mode skips the offset step entirely and returns the raw base curve for
both edges.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from wavecrest.core.geometry.defaults import DEFAULT_SAMPLE_COUNT
from wavecrest.core.geometry.jitter import (
    INTERLOCK_EDGE_A_SEED_OFFSET,
    INTERLOCK_EDGE_B_SEED_OFFSET,
    pseudo_random,
)
from wavecrest.core.geometry.models import (
    DualPathResult,
    EdgeConfig,
    InterlockMode,
    InterlockOptions,
    PatternConfig,
    PatternName,
    WaveSeparationConfig,
)
from wavecrest.core.geometry.path import PathData
from wavecrest.core.geometry.patterns import build_pattern_path, normalize_config, resolve_pattern
from wavecrest.core.geometry.sampling import build_from_samples, sample_y
from wavecrest.core.utils.logging import geometry_extra, log_performance

logger = logging.getLogger(__name__)

# (edge A, edge B) multipliers of the maximum offset
MODE_FACTORS: dict[InterlockMode, tuple[float, float]] = {
    InterlockMode.INTERLOCK: (-1.0, 1.0),
    InterlockMode.OVERLAP: (-1.3, 0.7),
    InterlockMode.APART: (-0.6, 1.4),
    InterlockMode.FLUSH: (0.0, 0.0),
}

# Maximum offset is this fraction of (height * amplitude * intensity)
OFFSET_SCALE = 0.5
# Peak-to-peak jitter as a fraction of the maximum offset (+/-15%)
JITTER_SCALE = 0.3


def _base_curve(pattern: PatternName | str, config: PatternConfig) -> PathData:
    """Generate an edge's base curve; custom patterns fall back to smooth."""
    name = resolve_pattern(pattern)
    if name is PatternName.CUSTOM:
        name = PatternName.SMOOTH
    return build_pattern_path(name, config)


def offset_samples(
    samples: Sequence[float], factor: float, max_offset: float, seed: int, shift: float = 0.0
) -> list[float]:
    """Offset a sample array by ``factor * max_offset`` plus seeded jitter.

    Args:
        samples: Base curve samples.
        factor: Mode factor for this edge.
        max_offset: Maximum vertical offset in px.
        seed: Jitter seed for this edge.
        shift: Constant vertical shift (half the gap, signed).

    Returns:
        Offset samples, same length and order as ``samples``.
    """
    return [
        y + factor * max_offset + (pseudo_random(seed, i) - 0.5) * max_offset * JITTER_SCALE + shift
        for i, y in enumerate(samples)
    ]


def _derive_edge(
    curve: PathData,
    config: PatternConfig,
    factor: float,
    intensity: float,
    seed: int,
    shift: float,
) -> str:
    max_offset = config.wave_height * intensity * OFFSET_SCALE
    samples = sample_y(curve, config.width, DEFAULT_SAMPLE_COUNT)
    edge = offset_samples(samples, factor, max_offset, seed, shift)
    return build_from_samples(edge, config.width, config.height).serialize()


def _flush(curve: PathData) -> DualPathResult:
    text = curve.serialize()
    return DualPathResult(path_a=text, path_b=text, base_curve=text)


@log_performance
def generate_interlock(options: InterlockOptions) -> DualPathResult:
    """Generate two interlocking edges from a single base curve.

    Edge A is jittered with ``seed + 1`` and shifted up by half the gap;
    edge B with ``seed + 2`` and shifted down by half the gap.

    Args:
        options: Pattern, dimensions, mode and tuning.

    Returns:
        Both edges plus the base curve. In flush mode all three are the raw
        base curve.

    Example:
        >>> result = generate_interlock(InterlockOptions(mode="flush"))
        >>> result.path_a == result.path_b == result.base_curve
        True
    """
    config = normalize_config(options.pattern_config())
    curve = _base_curve(options.pattern, config)

    if options.mode is InterlockMode.FLUSH:
        return _flush(curve)

    factor_a, factor_b = MODE_FACTORS[options.mode]
    half_gap = options.gap / 2

    path_a = _derive_edge(
        curve,
        config,
        factor_a,
        options.intensity,
        options.seed + INTERLOCK_EDGE_A_SEED_OFFSET,
        -half_gap,
    )
    path_b = _derive_edge(
        curve,
        config,
        factor_b,
        options.intensity,
        options.seed + INTERLOCK_EDGE_B_SEED_OFFSET,
        half_gap,
    )

    logger.debug(
        "Interlock edges generated: pattern=%s mode=%s seed=%d",
        options.pattern.value,
        options.mode.value,
        options.seed,
        extra=geometry_extra(pattern=options.pattern, mode=options.mode, seed=options.seed),
    )
    return DualPathResult(path_a=path_a, path_b=path_b, base_curve=curve.serialize())


@log_performance
def separate(
    upper: EdgeConfig, lower: EdgeConfig, separation: WaveSeparationConfig | None = None
) -> DualPathResult:
    """Derive the boundary between two adjacent regions from both configs.

    Both curves are generated at the larger of the two heights and at the
    upper region's width. Edge A follows the upper region's curve and
    amplitude, edge B the lower region's. The upper curve is reported as
    ``base_curve``; in flush mode it is also returned for both edges.

    Args:
        upper: Edge config of the region above the boundary.
        lower: Edge config of the region below the boundary.
        separation: Mode, intensity and gap. Defaults to interlock at 0.5.

    Returns:
        Both edges plus the upper base curve.
    """
    separation = separation or WaveSeparationConfig()
    height = max(upper.config.height, lower.config.height)
    width = upper.config.width

    size = {"width": width, "height": height}
    upper_config = normalize_config(upper.config.model_copy(update=size))
    upper_curve = _base_curve(upper.pattern, upper_config)

    if separation.mode is InterlockMode.FLUSH:
        return _flush(upper_curve)

    lower_config = normalize_config(lower.config.model_copy(update=size))
    lower_curve = _base_curve(lower.pattern, lower_config)

    factor_a, factor_b = MODE_FACTORS[separation.mode]
    half_gap = separation.gap / 2

    path_a = _derive_edge(
        upper_curve,
        upper_config,
        factor_a,
        separation.intensity,
        upper_config.effective_seed + INTERLOCK_EDGE_A_SEED_OFFSET,
        -half_gap,
    )
    path_b = _derive_edge(
        lower_curve,
        lower_config,
        factor_b,
        separation.intensity,
        lower_config.effective_seed + INTERLOCK_EDGE_B_SEED_OFFSET,
        half_gap,
    )
    logger.debug(
        "Cross-boundary edges generated: upper=%s lower=%s mode=%s",
        upper.pattern.value,
        lower.pattern.value,
        separation.mode.value,
        extra=geometry_extra(
            pattern=upper.pattern, mode=separation.mode, seed=upper_config.effective_seed
        ),
    )
    return DualPathResult(path_a=path_a, path_b=path_b, base_curve=upper_curve.serialize())


def generate_cross_boundary(
    upper: EdgeConfig,
    lower: EdgeConfig,
    mode: InterlockMode | str = InterlockMode.INTERLOCK,
    intensity: float = 0.5,
    gap: float = 0.0,
) -> DualPathResult:
    """Generate the edges between two independently configured regions.

    Convenience wrapper around ``separate``; ``intensity`` and ``gap`` are
    validated as in ``WaveSeparationConfig``.
    """
    return separate(
        upper, lower, WaveSeparationConfig(mode=InterlockMode(mode), intensity=intensity, gap=gap)
    )
