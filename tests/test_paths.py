"""Tests for waypoints and SVG path synthesis."""

import pytest
from conftest import make_station, path_numbers

from civ_metro.layout.constants import BRAID_OFFSET
from civ_metro.layout.corridors import CORRIDORS, convergence_y
from civ_metro.layout.paths import (
    BraidedPath,
    build_line_path,
    build_line_waypoints,
    build_metro_paths,
    generate_braided_path,
    generate_smooth_path,
    parse_path_endpoint,
    path_length,
)
from civ_metro.layout.timescale import DEFAULT_TIME_SCALE
from civ_metro.model import LineId, PlacedStation, Point


def _placed(sid, x, y, *lines):
    return PlacedStation(
        station=make_station(sid, 0, *lines), x=x, y=y, original_x=x
    )


class TestGenerateSmoothPath:
    """Tests for generate_smooth_path."""

    @pytest.mark.parametrize("points", [None, [], [Point(0, 0)]])
    def test_degenerate_is_empty(self, points):
        assert generate_smooth_path(points) == ""

    def test_level_segment_is_straight(self):
        assert generate_smooth_path([Point(0, 100), Point(50, 100)]) == "M 0 100 L 50 100"

    def test_height_change_is_cubic_with_flat_tangents(self):
        d = generate_smooth_path([Point(0, 0), Point(100, 50)])
        assert d == "M 0 0 C 50 0, 50 50, 100 50"

    def test_sub_pixel_change_is_straight(self):
        d = generate_smooth_path([Point(0, 0), Point(100, 0.5)])
        assert d == "M 0 0 L 100 0.5"

    def test_decimals_are_trimmed(self):
        d = generate_smooth_path([Point(0.123, 0), Point(10.5, 0)])
        assert d == "M 0.12 0 L 10.5 0"


class TestBraidedPath:
    """Tests for the three-strand variant."""

    def test_strands_offset_symmetrically(self):
        points = [Point(0, 100), Point(200, 300), Point(400, 300)]
        braid = generate_braided_path(points, offset=3)
        main = path_numbers(braid.main)
        up = path_numbers(braid.braid1)
        down = path_numbers(braid.braid2)
        assert len(main) == len(up) == len(down)
        for i, value in enumerate(main):
            if i % 2 == 0:
                assert up[i] == pytest.approx(value)
                assert down[i] == pytest.approx(value)
            else:
                assert up[i] - value == pytest.approx(3)
                assert down[i] - value == pytest.approx(-3)

    def test_degenerate(self):
        braid = generate_braided_path([Point(0, 0)])
        assert braid == BraidedPath("", "", "")

    def test_as_dict(self):
        braid = generate_braided_path([Point(0, 0), Point(10, 0)])
        assert set(braid.as_dict()) == {"main", "braid1", "braid2"}


class TestWaypoints:
    """Tests for build_line_waypoints."""

    def test_empty_corridor(self):
        """A line with no stations still runs from the left edge to the future."""
        corridor = CORRIDORS[LineId.TECH]
        points = build_line_waypoints(corridor, [])
        assert points == [
            Point(0.0, 720.0),
            Point(7600.0, 600.0),
            Point(8000.0, 600.0),
            Point(10000.0, 600.0),
        ]

    def test_stations_in_x_order(self):
        corridor = CORRIDORS[LineId.WAR]
        placed = [
            _placed("b", 3000, 1360, "war"),
            _placed("a", 1000, 720, "tech", "war"),
            _placed("x", 2000, 720, "tech"),
        ]
        points = build_line_waypoints(corridor, placed)
        assert points[1:3] == [Point(1000, 720), Point(3000, 1360)]

    def test_convergence_skipped_when_close(self):
        """A station right at the convergence point replaces it."""
        corridor = CORRIDORS[LineId.TECH]
        points = build_line_waypoints(corridor, [_placed("end", 7995, 720, "tech")])
        assert points == [Point(0.0, 720.0), Point(7995, 720), Point(10000.0, 600.0)]

    def test_pre_convergence_skipped_when_past(self):
        corridor = CORRIDORS[LineId.TECH]
        points = build_line_waypoints(corridor, [_placed("late", 7800, 720, "tech")])
        assert points[-2:] == [Point(8000.0, 600.0), Point(10000.0, 600.0)]


class TestBuildLinePath:
    """Tests for whole-line paths."""

    def test_empty_corridor_path(self):
        d = build_line_path(CORRIDORS[LineId.EMPIRE], [])
        assert d.startswith("M 0 ")
        end = parse_path_endpoint(d)
        assert end == Point(10000.0, convergence_y(CORRIDORS[LineId.EMPIRE]))

    def test_every_line_starts_at_left_edge_and_ends_in_future(self, full_layout):
        conv_x = DEFAULT_TIME_SCALE.year_to_x(2025)
        for lid in LineId:
            d = full_layout.paths.main_path(lid)
            assert d.startswith("M 0 "), lid
            end = parse_path_endpoint(d)
            assert end.x == pytest.approx(conv_x + 2000)
            assert end.y == pytest.approx(convergence_y(CORRIDORS[lid]))

    def test_only_braided_line_has_strands(self, small_layout):
        for lid in LineId:
            path = small_layout.paths[lid]
            assert isinstance(path, BraidedPath) == (lid == LineId.POPULATION)

    def test_braid_offset_on_built_paths(self, small_layout):
        braid = small_layout.paths[LineId.POPULATION]
        main = path_numbers(braid.main)
        up = path_numbers(braid.braid1)
        assert up[1] - main[1] == pytest.approx(BRAID_OFFSET)

    def test_lookup_by_name(self, small_layout):
        assert small_layout.paths["Tech"] == small_layout.paths[LineId.TECH]
        assert set(small_layout.paths.as_dict()) == {lid.value for lid in LineId}

    def test_unbraided_build(self):
        paths = build_metro_paths([], braided_line=None)
        assert all(isinstance(paths[lid], str) for lid in LineId)
        assert set(paths.waypoints) == set(LineId)


class TestPathHelpers:
    def test_endpoint_of_empty_path(self):
        assert parse_path_endpoint("") is None

    def test_endpoint_of_curve(self):
        assert parse_path_endpoint("M 0 0 C 50 0, 50 50, 100 50") == Point(100, 50)

    def test_length_of_straight_path(self):
        assert path_length("M 0 0 L 3 4 L 3 10") == pytest.approx(11)

    def test_length_of_curve_exceeds_chord(self):
        length = path_length("M 0 0 C 50 0, 50 50, 100 50")
        assert 111.8 < length < 150
