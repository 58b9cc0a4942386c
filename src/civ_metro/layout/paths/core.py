"""Path building for every line of the map."""

from __future__ import annotations

from collections.abc import Sequence

from civ_metro.layout.constants import (
    BRAID_OFFSET,
    BRAIDED_LINE,
    CANVAS_H,
    CURVE_TENSION,
)
from civ_metro.layout.corridors import CORRIDORS
from civ_metro.layout.paths.common import BraidedPath, MetroPaths
from civ_metro.layout.paths.curves import generate_braided_path, generate_smooth_path
from civ_metro.layout.paths.waypoints import build_line_waypoints
from civ_metro.layout.timescale import DEFAULT_TIME_SCALE, TimeScale
from civ_metro.model import Corridor, LineId, PlacedStation, Point


def build_line_path(
    corridor: Corridor,
    placed: Sequence[PlacedStation],
    time_scale: TimeScale = DEFAULT_TIME_SCALE,
    height: float = CANVAS_H,
    tension: float = CURVE_TENSION,
) -> str:
    """Waypoints for one corridor rendered as a single smooth path."""
    points = build_line_waypoints(corridor, placed, time_scale, height)
    return generate_smooth_path(points, tension)


def build_metro_paths(
    placed: Sequence[PlacedStation],
    corridors: dict[LineId, Corridor] = CORRIDORS,
    time_scale: TimeScale = DEFAULT_TIME_SCALE,
    height: float = CANVAS_H,
    braided_line: LineId | None = BRAIDED_LINE,
    braid_offset: float = BRAID_OFFSET,
    tension: float = CURVE_TENSION,
) -> MetroPaths:
    """Build the path of every line; the braided line gets three strands."""
    paths: dict[LineId, str | BraidedPath] = {}
    waypoints: dict[LineId, list[Point]] = {}
    for lid in LineId:
        points = build_line_waypoints(corridors[lid], placed, time_scale, height)
        waypoints[lid] = points
        if lid == braided_line:
            paths[lid] = generate_braided_path(points, braid_offset, tension)
        else:
            paths[lid] = generate_smooth_path(points, tension)
    return MetroPaths(paths=paths, waypoints=waypoints)
