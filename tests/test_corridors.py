"""Tests for the corridor table and convergence geometry."""

import dataclasses

import pytest

from civ_metro.layout.corridors import (
    CORRIDORS,
    convergence_point,
    convergence_y,
    line_y,
    validate_corridors,
)
from civ_metro.model import Corridor, LineId


class TestCorridorTable:
    """Tests for the built-in corridor table."""

    def test_every_line_has_a_corridor(self):
        assert set(CORRIDORS) == set(LineId)

    def test_fractions_unique(self):
        fractions = [c.y_fraction for c in CORRIDORS.values()]
        assert len(set(fractions)) == len(fractions)

    def test_offsets_unique(self):
        offsets = [c.convergence_offset for c in CORRIDORS.values()]
        assert len(set(offsets)) == len(offsets)

    def test_line_y(self):
        assert line_y(LineId.TECH, 4000) == pytest.approx(720)
        assert line_y("Empire", 4000) == pytest.approx(3280)

    def test_convergence_point(self):
        point = convergence_point()
        assert point.x == pytest.approx(8000)
        assert point.y == pytest.approx(600)

    def test_convergence_lanes(self):
        """Tech leads the bundle; the other lines stack below in 30px lanes."""
        assert convergence_y(CORRIDORS[LineId.TECH]) == pytest.approx(600)
        assert convergence_y(CORRIDORS[LineId.WAR]) == pytest.approx(660)
        assert convergence_y(CORRIDORS[LineId.PHILOSOPHY]) == pytest.approx(720)


class TestValidateCorridors:
    """Malformed corridor tables raise ValueError."""

    def _with(self, line_id, **changes):
        table = dict(CORRIDORS)
        table[line_id] = dataclasses.replace(table[line_id], **changes)
        return table

    def test_missing_line(self):
        table = dict(CORRIDORS)
        del table[LineId.WAR]
        with pytest.raises(ValueError, match="missing"):
            validate_corridors(table)

    def test_duplicate_fraction(self):
        table = self._with(LineId.WAR, y_fraction=CORRIDORS[LineId.TECH].y_fraction)
        with pytest.raises(ValueError, match="y_fraction"):
            validate_corridors(table)

    def test_duplicate_offset(self):
        table = self._with(LineId.WAR, convergence_offset=0.0)
        with pytest.raises(ValueError, match="offsets"):
            validate_corridors(table)

    def test_fraction_out_of_range(self):
        with pytest.raises(ValueError, match="outside"):
            validate_corridors(self._with(LineId.WAR, y_fraction=1.2))

    def test_negative_offset(self):
        with pytest.raises(ValueError, match="negative"):
            validate_corridors(self._with(LineId.WAR, convergence_offset=-5.0))

    def test_mismatched_key(self):
        table = dict(CORRIDORS)
        table[LineId.WAR] = Corridor(LineId.TECH, 0.34, 60.0)
        with pytest.raises(ValueError, match="describes"):
            validate_corridors(table)
