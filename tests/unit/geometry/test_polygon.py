"""Tests for percentage polygon conversion."""

from __future__ import annotations

import pytest

from wavecrest.core.geometry.models import PolygonPoints, RegionEdge
from wavecrest.core.geometry.path import parse_path
from wavecrest.core.geometry.polygon import to_dual_polygon, to_polygon


class TestToPolygon:
    """Tests for to_polygon."""

    @pytest.mark.parametrize("path", ["", "   ", "M 0 0 L @"])
    def test_empty_or_malformed_gives_none(self, path: str) -> None:
        polygon = to_polygon(path, 120)
        assert polygon.is_empty
        assert polygon.serialize() == "none"

    def test_bottom_edge_corners(self) -> None:
        polygon = to_polygon("M 0 120 L 720 60 L 1440 120", 120)
        assert polygon.points == (
            (0.0, 0.0),
            (0.0, 100.0),
            (50.0, 50.0),
            (100.0, 100.0),
            (100.0, 0.0),
        )

    def test_top_edge_corners(self) -> None:
        polygon = to_polygon("M 0 120 L 720 60 L 1440 120", 120, edge=RegionEdge.TOP)
        assert polygon.points[0] == (0.0, 100.0)
        assert polygon.points[-1] == (100.0, 100.0)

    def test_edge_accepts_string(self) -> None:
        path = "M 0 0 L 1440 0"
        assert to_polygon(path, 120, edge="top") == to_polygon(path, 120, edge=RegionEdge.TOP)

    def test_serialized_form(self) -> None:
        assert to_polygon("M 0 60 L 1440 60", 120).serialize() == (
            "polygon(0.00% 0.00%, 0.00% 50.00%, 100.00% 50.00%, 100.00% 0.00%)"
        )

    def test_percentages_rounded_to_two_decimals(self) -> None:
        polygon = to_polygon("M 1 1", 120)
        assert polygon.points[1] == (0.07, 0.83)

    def test_custom_width(self) -> None:
        polygon = to_polygon("M 500 0", 100, width=1000)
        assert polygon.points[1] == (50.0, 0.0)

    def test_accepts_typed_path(self, closed_region: str) -> None:
        assert to_polygon(parse_path(closed_region), 120) == to_polygon(closed_region, 120)

    def test_generated_region_has_one_point_per_coordinate(self, closed_region: str) -> None:
        # 4 coordinate pairs plus the two corners
        assert len(to_polygon(closed_region, 120).points) == 6


class TestToDualPolygon:
    """Tests for to_dual_polygon."""

    def test_trace_order(self) -> None:
        polygon = to_dual_polygon("M 0 0 L 1440 12", "M 0 120 L 1440 108", 120)
        assert polygon.points == (
            (0.0, 0.0),
            (100.0, 10.0),
            (100.0, 100.0),
            (100.0, 10.0),
            (0.0, 0.0),
            (0.0, 0.0),
        )

    def test_both_empty_gives_none(self) -> None:
        assert to_dual_polygon("", "", 120) == PolygonPoints()

    def test_one_empty_side(self) -> None:
        polygon = to_dual_polygon("", "M 0 120 L 1440 108", 120)
        assert polygon.points == ((100.0, 100.0), (100.0, 10.0), (0.0, 0.0), (0.0, 0.0))

    def test_malformed_side_treated_as_empty(self) -> None:
        polygon = to_dual_polygon("M 0 0 L 1440 12", "garbage", 120)
        assert polygon.points == ((0.0, 0.0), (100.0, 10.0), (100.0, 100.0), (0.0, 0.0))
