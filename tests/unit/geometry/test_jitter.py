"""Tests for the deterministic jitter source."""

from __future__ import annotations

import math

import pytest

from wavecrest.core.geometry.jitter import (
    ORGANIC_INDEX_MULTIPLIER,
    auto_seed,
    pseudo_random,
)


class TestPseudoRandom:
    """Tests for pseudo_random."""

    @pytest.mark.parametrize("seed", [0, 1, 42, 77, 1234, 9999, -5])
    def test_values_in_unit_interval(self, seed: int) -> None:
        for index in range(50):
            value = pseudo_random(seed, index)
            assert 0.0 <= value < 1.0

    def test_deterministic(self) -> None:
        assert pseudo_random(42, 3) == pseudo_random(42, 3)

    def test_matches_sine_hash(self) -> None:
        x = math.sin(42 * 9301 + 3 * 49297) * 10000
        assert pseudo_random(42, 3) == x - math.floor(x)

    def test_successive_indices_vary(self) -> None:
        values = {pseudo_random(42, i) for i in range(20)}
        assert len(values) == 20

    def test_seeds_are_independent(self) -> None:
        a = [pseudo_random(43, i) for i in range(10)]
        b = [pseudo_random(44, i) for i in range(10)]
        assert a != b

    def test_index_multiplier_changes_sequence(self) -> None:
        assert pseudo_random(42, 1) != pseudo_random(
            42, 1, index_multiplier=ORGANIC_INDEX_MULTIPLIER
        )


class TestAutoSeed:
    """Tests for auto_seed."""

    def test_origin_is_zero(self) -> None:
        assert auto_seed(0, 0) == 0

    def test_known_value(self) -> None:
        assert auto_seed(1, 0) == 2654435761 % 10000

    def test_wraps_to_32_bits(self) -> None:
        expected = ((3 * 2654435761 + 2 * 340573321) % 2**32) % 10000
        assert auto_seed(3, 2) == expected

    def test_range(self) -> None:
        for section in range(20):
            for transition in range(5):
                assert 0 <= auto_seed(section, transition) < 10000
