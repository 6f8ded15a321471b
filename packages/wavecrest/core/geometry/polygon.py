"""Percentage-based polygon outlines for clipping regions.

Converts a path into a list of percentage points so a region can be
described to renderers that clip with polygons instead of paths.
"""

from __future__ import annotations

import logging

from wavecrest.core.geometry.defaults import DEFAULT_VIEWBOX_WIDTH
from wavecrest.core.geometry.models import PolygonPoints, RegionEdge
from wavecrest.core.geometry.path import PathData, PathParseError, Point, as_path_data

logger = logging.getLogger(__name__)

# Percentage points are rounded to this many decimals
POLYGON_PRECISION = 2

_EDGE_CORNERS: dict[RegionEdge, tuple[tuple[float, float], tuple[float, float]]] = {
    RegionEdge.BOTTOM: ((0.0, 0.0), (100.0, 0.0)),
    RegionEdge.TOP: ((0.0, 100.0), (100.0, 100.0)),
}


def _points_or_empty(path: str | PathData, operation: str) -> list[Point]:
    try:
        return as_path_data(path).points()
    except PathParseError as e:
        logger.warning("%s: malformed path treated as empty (%s)", operation, e)
        return []


def _percent(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    return (
        round(x / width * 100, POLYGON_PRECISION),
        round(y / height * 100, POLYGON_PRECISION),
    )


def to_polygon(
    path: str | PathData,
    height: float,
    edge: RegionEdge | str = RegionEdge.BOTTOM,
    width: float = DEFAULT_VIEWBOX_WIDTH,
) -> PolygonPoints:
    """Convert a path to a percentage polygon.

    Every coordinate pair becomes a percentage of ``(width, height)``. For a
    bottom edge the polygon is opened by ``(0%, 0%)`` and closed by
    ``(100%, 0%)``; for a top edge by ``(0%, 100%)`` and ``(100%, 100%)``.

    Args:
        path: Path text or typed path.
        height: Viewbox height.
        edge: Which side of the clipped region the curve bounds.
        width: Viewbox width.

    Returns:
        Polygon points, or the empty sentinel if the path has no
        coordinates or does not parse.

    Example:
        >>> to_polygon("", 120).serialize()
        'none'
    """
    points = _points_or_empty(path, "to_polygon")
    if not points:
        return PolygonPoints()

    first, last = _EDGE_CORNERS[RegionEdge(edge)]
    return PolygonPoints(
        points=(first, *(_percent(x, y, width, height) for x, y in points), last)
    )


def to_dual_polygon(
    top_path: str | PathData,
    bottom_path: str | PathData,
    height: float,
    width: float = DEFAULT_VIEWBOX_WIDTH,
) -> PolygonPoints:
    """Combine a top and a bottom edge into one closed polygon.

    Traces the top edge forward, the right edge at ``(100%, 100%)``, the
    bottom edge in reverse with ``y -> height - y``, and ends at ``(0%, 0%)``.

    Returns:
        Polygon points, or the empty sentinel if neither path has
        coordinates.
    """
    top = _points_or_empty(top_path, "to_dual_polygon")
    bottom = _points_or_empty(bottom_path, "to_dual_polygon")
    if not top and not bottom:
        return PolygonPoints()

    return PolygonPoints(
        points=(
            *(_percent(x, y, width, height) for x, y in top),
            (100.0, 100.0),
            *(_percent(x, height - y, width, height) for x, y in reversed(bottom)),
            (0.0, 0.0),
        )
    )
