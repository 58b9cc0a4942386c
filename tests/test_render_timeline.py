"""Tests for the render_timeline script."""

import importlib.util
from pathlib import Path

import pytest

from civ_metro.data import load_stations
from civ_metro.layout.engine import compute_layout

SCRIPT = Path(__file__).parent.parent / "scripts" / "render_timeline.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("render_timeline", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRenderFile:
    """Tests for render_file."""

    def test_writes_svg(self, script, tmp_path):
        out = tmp_path / "map.svg"
        script.render_file(out)
        assert "<svg" in out.read_text()

    def test_repeat_render_reports_same_issues(self, script, tmp_path):
        first = script.render_file(tmp_path / "first.svg")
        second = script.render_file(tmp_path / "second.svg")
        assert second == first
        assert len(first) == len(compute_layout(load_stations()).unresolved)
