"""Shared pytest fixtures for geometry tests."""

from __future__ import annotations

import pytest

from wavecrest.core.geometry.models import PatternConfig


@pytest.fixture
def default_config() -> PatternConfig:
    """Default 1440x120 config at half amplitude."""
    return PatternConfig()


@pytest.fixture
def seeded_config() -> PatternConfig:
    """Config with an explicit seed and a few peaks."""
    return PatternConfig(amplitude=0.6, frequency=3, seed=1234)


@pytest.fixture
def closed_region() -> str:
    """Minimal baseline-closed region."""
    return "M 0 120 L 0 72 L 1440 60 L 1440 120 Z"


@pytest.fixture
def mixed_path() -> str:
    """Path mixing absolute, relative, H/V, curve and arc commands."""
    return "M 10 20 h 30 l 5 -5 C 60 10 70 30 80 20 s 10 5 20 0 V 40 A 10 10 30 0 1 100 50 Z"
