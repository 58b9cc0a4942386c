"""Shared test fixtures and helpers for civ-metro test suite."""

from __future__ import annotations

import warnings

import pytest

from civ_metro.data import STATIONS
from civ_metro.layout.engine import Layout, clear_layout_cache, compute_layout
from civ_metro.layout.timescale import TimeScale
from civ_metro.model import Station, TimeAnchor
from civ_metro.viewport.animation import ManualFrameScheduler
from civ_metro.viewport.rect import Canvas

# --- Table constants ---

THREE_ANCHORS = (
    TimeAnchor(-10000, 0.0),
    TimeAnchor(0, 0.3),
    TimeAnchor(2025, 1.0),
)

SMALL_STATIONS = (
    Station(id="a", year=-5000, lines=("tech",), name="Alpha"),
    Station(id="b", year=0, lines=("war", "tech"), name="Bravo"),
    Station(id="c", year=1500, lines=("population",), name="Charlie"),
    Station(id="d", year=1900, lines=("empire", "philosophy"), name="Delta"),
)


# --- Helpers ---


def make_station(sid: str, year: int, *lines: str, **kwargs) -> Station:
    """Build a station with a terse signature; lines default to tech."""
    return Station(id=sid, year=year, lines=lines or ("tech",), **kwargs)


def quiet_layout(stations=STATIONS, **kwargs) -> Layout:
    """Compute a layout, ignoring collision-budget warnings."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        return compute_layout(stations, **kwargs)


def path_numbers(d_attr: str) -> list[float]:
    """All numbers in a path string, in order."""
    return [
        float(tok)
        for tok in d_attr.replace(",", " ").split()
        if tok not in {"M", "L", "C", "Q"}
    ]


# --- Pytest fixtures ---


@pytest.fixture(autouse=True)
def _fresh_layout_cache():
    clear_layout_cache()
    yield
    clear_layout_cache()


@pytest.fixture
def three_anchor_scale() -> TimeScale:
    """Scale with anchors at 10,000 BCE, 0 and 2025 on an 8000 px canvas."""
    return TimeScale(anchors=THREE_ANCHORS, width=8000.0)


@pytest.fixture
def unit_canvas() -> Canvas:
    """A 1000 x 1000 canvas with the default zoom bounds."""
    return Canvas(width=1000.0, height=1000.0, min_zoom=0.05, max_zoom=20.0)


@pytest.fixture
def scheduler() -> ManualFrameScheduler:
    return ManualFrameScheduler()


@pytest.fixture
def small_layout() -> Layout:
    """Four stations spread over every line."""
    return compute_layout(SMALL_STATIONS)


@pytest.fixture
def full_layout() -> Layout:
    """The built-in dataset."""
    return quiet_layout()
