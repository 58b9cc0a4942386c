"""Tests for station placement and collision nudging."""

import itertools
import warnings

import pytest
from conftest import make_station

from civ_metro.layout.constants import COLLISION_THRESHOLD
from civ_metro.layout.corridors import line_y
from civ_metro.layout.placement import group_by_line, place_stations
from civ_metro.layout.timescale import TimeScale
from civ_metro.model import LineId, TimeAnchor

# 10 px per year between year 0 and year 800
LINEAR_SCALE = TimeScale(anchors=(TimeAnchor(0, 0.0), TimeAnchor(800, 1.0)), width=8000)


def _by_id(placed):
    return {ps.id: ps for ps in placed}


class TestInitialPlacement:
    """Stations start at their year's x on their primary corridor."""

    def test_coordinates(self):
        placed = _by_id(
            place_stations(
                [make_station("a", 100, "war", "tech")], time_scale=LINEAR_SCALE
            )
        )
        assert placed["a"].x == pytest.approx(1000)
        assert placed["a"].y == pytest.approx(line_y(LineId.WAR))
        assert placed["a"].original_x == pytest.approx(1000)
        assert not placed["a"].was_offset

    def test_empty(self):
        assert place_stations([]) == []

    def test_processing_order(self):
        """Results come back sorted by x, then y, then id."""
        stations = [
            make_station("late", 700),
            make_station("early", 10),
            make_station("mid-b", 400, "empire"),
            make_station("mid-a", 400, "tech"),
        ]
        placed = place_stations(stations, time_scale=LINEAR_SCALE)
        assert [ps.id for ps in placed] == ["early", "mid-a", "mid-b", "late"]


class TestCollisions:
    """Tests for horizontal nudging."""

    def test_close_pair_on_same_corridor(self):
        """A station 10px from a neighbour moves one offset step right."""
        placed = _by_id(
            place_stations(
                [make_station("a", 100), make_station("b", 101)],
                time_scale=LINEAR_SCALE,
            )
        )
        assert placed["a"].x == pytest.approx(1000)
        assert placed["b"].x == pytest.approx(1090)
        assert placed["b"].was_offset
        assert not placed["a"].was_offset
        assert abs(placed["b"].x - placed["a"].x) >= COLLISION_THRESHOLD

    def test_different_corridors_do_not_collide(self):
        placed = _by_id(
            place_stations(
                [make_station("a", 100, "tech"), make_station("b", 100, "war")],
                time_scale=LINEAR_SCALE,
            )
        )
        assert placed["a"].x == placed["b"].x
        assert not placed["b"].was_offset

    def test_right_edge_nudges_left(self):
        """At the canvas edge the rightward attempt is clamped and fails."""
        placed = _by_id(
            place_stations(
                [make_station("a", 800), make_station("b", 800)],
                time_scale=LINEAR_SCALE,
            )
        )
        assert placed["a"].x == pytest.approx(8000)
        assert placed["b"].x == pytest.approx(7920)

    def test_alternating_search(self):
        """Third station at the same year tries +1, -1 steps in turn."""
        placed = _by_id(
            place_stations(
                [make_station(sid, 400) for sid in ("a", "b", "c")],
                time_scale=LINEAR_SCALE,
            )
        )
        assert placed["b"].x == pytest.approx(4080)
        assert placed["c"].x == pytest.approx(3920)

    def test_budget_exhausted_flags_and_warns(self):
        """When no attempt clears the collision the last one is kept."""
        stations = [make_station("a", 400), make_station("b", 400)]
        with pytest.warns(UserWarning, match="exhausted"):
            placed = _by_id(
                place_stations(
                    stations,
                    time_scale=LINEAR_SCALE,
                    threshold=1000,
                    offset_step=10,
                    max_attempts=2,
                )
            )
        assert placed["b"].unresolved
        assert not placed["a"].unresolved
        assert placed["b"].x == pytest.approx(3990)

    def test_never_leaves_canvas(self):
        stations = [make_station(f"s{i}", 0) for i in range(6)]
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            placed = place_stations(stations, time_scale=LINEAR_SCALE)
        assert all(0 <= ps.x <= 8000 for ps in placed)


class TestBuiltInDataset:
    """Properties of placement over the built-in stations."""

    def _placed(self, stations):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            return place_stations(stations)

    def test_collision_free_or_flagged(self):
        from civ_metro.data import STATIONS

        placed = self._placed(STATIONS)
        for a, b in itertools.combinations(placed, 2):
            if a.y != b.y:
                continue
            assert (
                abs(a.x - b.x) >= COLLISION_THRESHOLD or a.unresolved or b.unresolved
            ), (a.id, b.id)

    def test_deterministic(self):
        """Input order does not change the result."""
        from civ_metro.data import STATIONS

        forward = _by_id(self._placed(STATIONS))
        backward = _by_id(self._placed(tuple(reversed(STATIONS))))
        assert forward == backward

    def test_on_primary_corridor(self):
        from civ_metro.data import STATIONS

        for ps in self._placed(STATIONS):
            assert ps.y == pytest.approx(line_y(ps.station.primary_line))


class TestGroupByLine:
    def test_groups_every_line(self):
        placed = place_stations(
            [make_station("a", 300, "tech", "war"), make_station("b", 100, "tech")],
            time_scale=LINEAR_SCALE,
        )
        groups = group_by_line(placed)
        assert set(groups) == set(LineId)
        assert [ps.id for ps in groups[LineId.TECH]] == ["b", "a"]
        assert [ps.id for ps in groups[LineId.WAR]] == ["a"]
        assert groups[LineId.EMPIRE] == []
