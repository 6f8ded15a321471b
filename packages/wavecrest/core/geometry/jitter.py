"""Deterministic jitter source.

A stateless sine hash: ``frac(sin(seed * 9301 + index * C) * 10000)``. The
same (seed, index) pair gives the same value in every process, with no global
RNG state to seed. Changing the constants changes every generated asset, so
they are fixed.
"""

from __future__ import annotations

import math

from wavecrest.core.utils.math import frac

SEED_MULTIPLIER = 9301
INDEX_MULTIPLIER = 49297
# The organic pattern historically hashed its index with a different stride
ORGANIC_INDEX_MULTIPLIER = 5381
HASH_SCALE = 10000.0

# Per-feature seed offsets so features derived from one seed stay uncorrelated.
# Interlock edges use +1 / +2.
INTERLOCK_EDGE_A_SEED_OFFSET = 1
INTERLOCK_EDGE_B_SEED_OFFSET = 2
RIBBON_SEED_OFFSET = 101
RIBBON_HANDLE_SEED_OFFSET = 103
LAYERED_ORGANIC_SEED_OFFSET = 211

_UINT32 = 2**32


def pseudo_random(seed: int, index: int, *, index_multiplier: int = INDEX_MULTIPLIER) -> float:
    """Return a reproducible pseudo-random value in [0, 1).

    Args:
        seed: Feature seed.
        index: Position in the sequence (sample index, control point, ...).
        index_multiplier: Stride applied to ``index`` inside the hash.

    Returns:
        Value in [0, 1).

    Example:
        >>> pseudo_random(42, 3) == pseudo_random(42, 3)
        True
    """
    value = frac(math.sin(seed * SEED_MULTIPLIER + index * index_multiplier) * HASH_SCALE)
    # frac() of a tiny negative number can round up to exactly 1.0
    return 0.0 if value >= 1.0 else value


def auto_seed(section_index: int, transition_index: int) -> int:
    """Derive a seed in [0, 10000) from a region's position.

    Golden-ratio style multiplicative hashing, reduced to 32 bits.

    Example:
        >>> auto_seed(0, 0)
        0
    """
    mixed = (section_index * 2654435761 + transition_index * 340573321) % _UINT32
    return mixed % 10000
