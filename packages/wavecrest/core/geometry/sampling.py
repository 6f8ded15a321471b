"""Path sampling and reconstruction.

This module samples a path's vertical position at evenly spaced horizontal
positions and rebuilds a smooth closed region from such a sample array.
Resampling is lossy: only the endpoints survive a round trip exactly.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from wavecrest.core.geometry.defaults import DEFAULT_SAMPLE_COUNT
from wavecrest.core.geometry.path import (
    PathData,
    PathParseError,
    Point,
    as_path_data,
    close_region,
    smooth_segments,
)
from wavecrest.core.geometry.transforms import contour_path_data

logger = logging.getLogger(__name__)


def sample_y(
    path: str | PathData, width: float, sample_count: int = DEFAULT_SAMPLE_COUNT
) -> list[float]:
    """Sample the y-value of a path at evenly spaced x positions.

    Uses the coordinate pairs of the path's contour (the baseline closure of
    a generated region is ignored), keeps those with x in ``[0, width]`` and
    sorts them by x. Each target x is linearly interpolated between the two
    bracketing points; targets outside the covered range take the first or
    last point's y.

    Args:
        path: Path text or typed path.
        width: Horizontal extent sampled, from 0 to ``width``.
        sample_count: Number of samples. Must be >= 2.

    Returns:
        ``sample_count`` y-values. All zeros (with a warning) when the path
        has fewer than two usable points or does not parse.

    Raises:
        ValueError: If sample_count < 2.

    Example:
        >>> sample_y("M 0 10 L 100 20", 100, 3)
        [10.0, 15.0, 20.0]
    """
    if sample_count < 2:
        raise ValueError(f"sample_count must be >= 2, got {sample_count}")

    try:
        points = contour_path_data(as_path_data(path)).points()
    except PathParseError as e:
        logger.warning("Cannot sample malformed path (%s), using flat samples", e)
        return [0.0] * sample_count

    usable = [p for p in points if 0.0 <= p.x <= width]
    if len(usable) < 2:
        logger.warning(
            "Path has %d usable points in [0, %s], using flat samples", len(usable), width
        )
        return [0.0] * sample_count

    xs = np.array([p.x for p in usable], dtype=float)
    ys = np.array([p.y for p in usable], dtype=float)
    order = np.argsort(xs, kind="stable")
    xs, ys = xs[order], ys[order]

    targets = np.linspace(0.0, width, sample_count)

    # Bracket each target between xs[left] <= target <= xs[right]
    right = np.clip(np.searchsorted(xs, targets, side="left"), 1, len(xs) - 1)
    left = right - 1
    span = xs[right] - xs[left]
    with np.errstate(divide="ignore", invalid="ignore"):
        alpha = np.where(span > 0, (targets - xs[left]) / span, 0.0)
    alpha = np.clip(alpha, 0.0, 1.0)

    values = ys[left] + alpha * (ys[right] - ys[left])
    return [float(v) for v in values]


def build_from_samples(ys: Sequence[float], width: float, height: float) -> PathData:
    """Rebuild a closed region through a sample array.

    Samples sit at ``x = i * width / (n - 1)``. Consecutive samples are joined
    by cubic segments whose control points are 40% of the segment width
    from each endpoint, and the curve is closed against the baseline at
    ``height``.

    Args:
        ys: Sample values, at least two.
        width: Horizontal extent of the curve.
        height: Baseline y.

    Returns:
        Closed region path.

    Raises:
        ValueError: If fewer than two samples are given.
    """
    if len(ys) < 2:
        raise ValueError(f"build_from_samples needs at least 2 samples, got {len(ys)}")

    last = len(ys) - 1
    points = [Point(width * i / last, float(y)) for i, y in enumerate(ys)]
    return close_region(points[0], smooth_segments(points), width, height)
