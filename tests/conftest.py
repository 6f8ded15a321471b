"""Shared pytest fixtures for wavecrest tests."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path

import pytest

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Drop handlers installed by configure_logging() so they don't outlive the test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        # pytest's own capture handlers are subclasses and stay in place
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
