"""Tests for geometric path transforms."""

from __future__ import annotations

import logging

import pytest

from wavecrest.core.geometry.models import PatternConfig, PatternName
from wavecrest.core.geometry.path import parse_path
from wavecrest.core.geometry.patterns import PATTERN_GENERATORS, generate_path
from wavecrest.core.geometry.transforms import (
    contour_path_data,
    extend_below_region,
    extract_contour,
    flip_path_data,
    flip_vertically,
    invert_to_top_region,
    mirror_horizontal,
    mirror_path_data,
)


class TestMirrorHorizontal:
    """Tests for mirror_horizontal."""

    def test_absolute_coordinates_reflect(self) -> None:
        assert mirror_horizontal("M 0 120 L 360 60 L 1440 120 Z", 1440) == (
            "M 1440 120 L 1080 60 L 0 120 Z"
        )

    def test_relative_and_arc_commands(self) -> None:
        path = "M 10 20 h 30 l 5 -5 A 10 10 30 0 1 100 50 Z"
        assert mirror_horizontal(path, 1440) == (
            "M 1430 20 h -30 l -5 -5 A 10 10 -30 0 0 1340 50 Z"
        )

    def test_vertical_line_untouched(self) -> None:
        assert mirror_horizontal("M 0 0 V 50", 100) == "M 100 0 V 50"

    def test_involution_on_mixed_path(self, mixed_path: str) -> None:
        assert mirror_horizontal(mirror_horizontal(mixed_path, 1440), 1440) == mixed_path

    @pytest.mark.parametrize(
        "path",
        [
            "M 0.0004 5 L 10.12345 20",
            "M0,120 L 0 72.00049",
            "M10-20L5.5.25 30,3",
            "m 10.50 0 l -0.125 3",
        ],
    )
    def test_involution_keeps_text(self, path: str) -> None:
        assert mirror_horizontal(mirror_horizontal(path, 100), 100) == path

    def test_keeps_precision_and_separators(self) -> None:
        assert mirror_horizontal("M0,120 L 10.12345,72.00049", 100) == (
            "M100,120 L 89.87655,72.00049"
        )

    def test_separates_operands_that_would_merge(self) -> None:
        assert mirror_horizontal("m5-3", 100) == "m-5-3"
        assert mirror_horizontal("M1 2L3-4-5 6", 10) == "M9 2L7-4 15 6"

    @pytest.mark.parametrize("pattern", list(PATTERN_GENERATORS))
    @pytest.mark.parametrize("width", [1440, 1000, 333.3])
    def test_involution_on_generated_paths(self, pattern: PatternName, width: float) -> None:
        path = generate_path(pattern, PatternConfig(width=width, seed=5, frequency=3))
        assert mirror_horizontal(mirror_horizontal(path, width), width) == path

    def test_empty_path(self) -> None:
        assert mirror_horizontal("", 1440) == ""

    def test_malformed_path_returned_unchanged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert mirror_horizontal("M 0 0 L foo", 100) == "M 0 0 L foo"
        assert "mirror_horizontal" in caplog.text


class TestFlipVertically:
    """Tests for flip_vertically."""

    def test_absolute_line(self) -> None:
        assert flip_vertically("M 0 120 L 0 72 Z", 120) == "M 0 0 L 0 48 Z"

    def test_relative_commands_negate(self) -> None:
        assert flip_vertically("m 0 10 l 5 5", 120) == "m 0 -10 l 5 -5"

    def test_vertical_line_reflects(self) -> None:
        assert flip_vertically("M 0 0 V 20", 120) == "M 0 120 V 100"

    def test_horizontal_line_untouched(self) -> None:
        assert flip_vertically("M 0 0 H 30", 120) == "M 0 120 H 30"

    def test_curve_odd_operands(self) -> None:
        assert flip_vertically("M 0 0 C 1 2 3 4 5 6", 10) == "M 0 10 C 1 8 3 6 5 4"
        assert flip_vertically("M 0 0 S 1 2 3 4", 10) == "M 0 10 S 1 8 3 6"
        assert flip_vertically("M 0 0 Q 1 2 3 4", 10) == "M 0 10 Q 1 8 3 6"
        assert flip_vertically("M 0 0 T 1 2", 10) == "M 0 10 T 1 8"

    def test_arc_toggles_sweep_and_reflects_endpoint(self) -> None:
        assert flip_vertically("M 0 0 A 5 5 0 0 1 10 20", 100) == (
            "M 0 100 A 5 5 0 0 0 10 80"
        )

    def test_arc_rotation_negated(self) -> None:
        assert flip_vertically("M 0 0 A 5 5 45 1 0 10 20", 100) == (
            "M 0 100 A 5 5 -45 1 1 10 80"
        )

    def test_repeated_operand_groups(self) -> None:
        assert flip_vertically("M 0 0 L 1 2 3 4", 10) == "M 0 10 L 1 8 3 6"

    def test_involution_without_arcs(self) -> None:
        path = "M 10 20 h 30 l 5 -5 C 60 10 70 30 80 20 s 10 5 20 0 q 1 2 3 4 V 40 Z"
        assert flip_vertically(flip_vertically(path, 120), 120) == path

    @pytest.mark.parametrize(
        "path",
        ["M0,120 L 0 72.00049", "M 0 0.0004 C 1 2.5 3 4.12345 5 6 v -0.5", "M 0 5 L 1 0.25"],
    )
    def test_involution_keeps_text(self, path: str) -> None:
        assert flip_vertically(flip_vertically(path, 120), 120) == path

    def test_fractional_height(self) -> None:
        assert flip_vertically("M 0 0.1 L 5 100.25", 100.5) == "M 0 100.4 L 5 0.25"

    @pytest.mark.parametrize("pattern", list(PATTERN_GENERATORS))
    def test_involution_on_generated_paths(self, pattern: PatternName) -> None:
        path = generate_path(pattern, PatternConfig(height=150, seed=11, frequency=2))
        assert flip_vertically(flip_vertically(path, 150), 150) == path

    def test_arcs_round_trip_through_two_toggles(self) -> None:
        path = "M 0 0 A 5 5 30 0 1 10 20"
        assert flip_vertically(flip_vertically(path, 100), 100) == path

    def test_malformed_path_returned_unchanged(self) -> None:
        assert flip_vertically("M 0 0 L 5", 120) == "M 0 0 L 5"


class TestTypedTransforms:
    """Tests for the PathData forms."""

    def test_mirror_path_data(self) -> None:
        path = parse_path("M 0 0 L 10 5")
        assert mirror_path_data(path, 100).serialize() == "M 100 0 L 90 5"

    def test_flip_path_data(self) -> None:
        path = parse_path("M 0 0 L 10 5")
        assert flip_path_data(path, 100).serialize() == "M 0 100 L 10 95"

    def test_close_path_unchanged(self) -> None:
        path = parse_path("M 0 0 Z")
        assert flip_path_data(path, 10)[1] == path[1]


class TestContour:
    """Tests for extract_contour."""

    def test_strips_baseline_closure(self, closed_region: str) -> None:
        assert extract_contour(closed_region) == "M 0 72 L 1440 60"

    def test_entry_line_becomes_move(self) -> None:
        path = "M 0 120 L 0 96 Q 360 36 720 72 L 1440 120 Z"
        contour = extract_contour(path)
        assert contour == "M 0 96 Q 360 36 720 72"

    def test_generated_contour_starts_at_entry_point(self, default_config: PatternConfig) -> None:
        contour = parse_path(extract_contour(generate_path("organic", default_config)))
        assert contour[0].code == "M"
        assert all(cmd.kind != "Z" for cmd in contour)

    def test_open_path_unchanged(self) -> None:
        assert extract_contour("M 0 10 L 100 20") == "M 0 10 L 100 20"

    def test_contour_path_data_idempotent_on_open_path(self) -> None:
        contour = contour_path_data(parse_path("M 0 10 L 100 20"))
        assert contour_path_data(contour) == contour

    def test_malformed_path_returned_unchanged(self) -> None:
        assert extract_contour("M 0 0 L @") == "M 0 0 L @"


class TestRegionRewrites:
    """Tests for invert_to_top_region and extend_below_region."""

    def test_invert_to_top_region(self, closed_region: str) -> None:
        assert invert_to_top_region(closed_region) == "M 0 -50 L 0 72 L 1440 60 L 1440 -50 Z"

    def test_extend_below_region(self, closed_region: str) -> None:
        assert extend_below_region(closed_region, 120) == (
            "M 0 170 L 0 72 L 1440 60 L 1440 170 Z"
        )

    def test_curve_untouched(self, default_config: PatternConfig) -> None:
        path = generate_path("smooth", default_config)
        assert extract_contour(invert_to_top_region(path)) == extract_contour(path)

    def test_mirrored_region_keeps_corner_x(self, default_config: PatternConfig) -> None:
        path = generate_path("smooth", default_config.with_updates(mirror=True))
        inverted = invert_to_top_region(path)
        assert inverted.startswith("M 1440 -50")
        assert inverted.endswith("L 0 -50 Z")

    def test_open_path_unchanged(self) -> None:
        assert invert_to_top_region("M 0 10 L 100 20") == "M 0 10 L 100 20"
        assert extend_below_region("M 0 10 L 100 20", 120) == "M 0 10 L 100 20"

    def test_malformed_path_returned_unchanged(self) -> None:
        assert invert_to_top_region("oops") == "oops"
        assert extend_below_region("oops", 120) == "oops"
