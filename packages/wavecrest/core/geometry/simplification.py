"""Ramer-Douglas-Peucker path simplification.

This module provides functions for simplifying paths by removing points
that don't contribute significantly to the overall shape. The simplified
path is a polyline: curve control structure is not preserved.
"""

from __future__ import annotations

import logging
import math

from wavecrest.core.geometry.defaults import DEFAULT_SIMPLIFY_EPSILON
from wavecrest.core.geometry.path import (
    PathData,
    PathParseError,
    Point,
    as_path_data,
    close_path,
    line_to,
    move_to,
)
from wavecrest.core.utils.logging import geometry_extra

logger = logging.getLogger(__name__)


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Calculate distance from point to the line through ``line_start`` and ``line_end``.

    The line is unbounded: a point past either endpoint is measured to the
    line's extension. A degenerate line (both ends equal) measures to
    ``line_start``.

    Args:
        point: The point to measure from.
        line_start: First point on the line.
        line_end: Second point on the line.

    Returns:
        Distance in px.

    Example:
        >>> perpendicular_distance(Point(5, 5), Point(0, 0), Point(10, 0))
        5.0
    """
    px, py = point
    ax, ay = line_start
    bx, by = line_end

    dx, dy = bx - ax, by - ay
    length = math.hypot(dx, dy)

    # Degenerate case: line_start == line_end
    if length < 1e-5:
        return math.hypot(px - ax, py - ay)

    return abs(dy * px - dx * py + bx * ay - by * ax) / length


def simplify_rdp(points: list[Point], epsilon: float = DEFAULT_SIMPLIFY_EPSILON) -> list[Point]:
    """Simplify a polyline using the Ramer-Douglas-Peucker algorithm.

    Recursively simplifies a polyline by removing points that are within
    epsilon distance of the chord connecting their range's endpoints.

    Args:
        points: Polyline to simplify.
        epsilon: Maximum distance tolerance in px.

    Returns:
        Simplified polyline with endpoints preserved.

    Example:
        >>> points = [Point(i, i) for i in range(5)]
        >>> len(simplify_rdp(points, epsilon=0.01))  # Only endpoints remain (linear)
        2
    """
    if len(points) <= 2:
        return list(points)

    def rdp_recursive(start_idx: int, end_idx: int) -> list[int]:
        """Recursively find points to keep between start and end indices."""
        if end_idx - start_idx <= 1:
            return []

        max_dist = 0.0
        max_idx = start_idx

        # Find point with maximum distance from the chord
        for i in range(start_idx + 1, end_idx):
            dist = perpendicular_distance(points[i], points[start_idx], points[end_idx])
            if dist > max_dist:
                max_dist = dist
                max_idx = i

        # If max distance exceeds epsilon, keep that point and recurse
        if max_dist > epsilon:
            left = rdp_recursive(start_idx, max_idx)
            right = rdp_recursive(max_idx, end_idx)
            return left + [max_idx] + right
        return []

    keep_indices = [0] + rdp_recursive(0, len(points) - 1) + [len(points) - 1]

    return [points[i] for i in keep_indices]


def polyline_path(points: list[Point]) -> PathData:
    """Rebuild a closed polyline path: ``M`` then ``L`` per point, then ``Z``."""
    if not points:
        return PathData()
    first, *rest = points
    return PathData((move_to(*first), *(line_to(*p) for p in rest), close_path()))


def simplify_path(path: str, epsilon: float = DEFAULT_SIMPLIFY_EPSILON) -> str:
    """Simplify a path by reducing its points with RDP.

    Args:
        path: Path text.
        epsilon: Tolerance in px. Higher means more simplification.

    Returns:
        Simplified polyline path. The input is returned unchanged when
        ``epsilon <= 0``, when it has two points or fewer, or when it does
        not parse.

    Example:
        >>> simplify_path("M 0 0 L 5 0.1 L 10 0", epsilon=1)
        'M 0 0 L 10 0 Z'
    """
    if epsilon <= 0:
        return path

    try:
        points = as_path_data(path).points()
    except PathParseError as e:
        logger.warning("Cannot simplify malformed path (%s), returning it unchanged", e)
        return path

    if len(points) <= 2:
        return path

    simplified = simplify_rdp(points, epsilon)
    logger.debug(
        "Simplified path from %d to %d points",
        len(points),
        len(simplified),
        extra=geometry_extra(points_in=len(points), points_out=len(simplified)),
    )
    return polyline_path(simplified).serialize()
