"""Shared utilities for wavecrest."""

from wavecrest.core.utils.json import read_json, write_json
from wavecrest.core.utils.math import clamp, frac, round_half_up

__all__ = [
    "clamp",
    "frac",
    "read_json",
    "round_half_up",
    "write_json",
]
