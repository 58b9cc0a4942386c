"""Waypoint assembly for one line: corridor entry, stations, terminal bundle.

Each line connects its stations directly, in x order, at the stations'
placed coordinates. A station whose primary line is another corridor
pulls this line off its own corridor for that stop; there is no forced
return to the corridor between stations.
"""

from __future__ import annotations

from collections.abc import Iterable

from civ_metro.layout.constants import (
    CANVAS_H,
    CONVERGENCE_SNAP,
    CONVERGENCE_YEAR,
    FUTURE_EXTENSION,
    PRE_CONVERGENCE_RUN,
)
from civ_metro.layout.corridors import convergence_y
from civ_metro.layout.timescale import DEFAULT_TIME_SCALE, TimeScale
from civ_metro.model import Corridor, PlacedStation, Point


def line_stations(
    corridor: Corridor,
    placed: Iterable[PlacedStation],
) -> list[PlacedStation]:
    """Stations served by this corridor's line, sorted by x (ties by id)."""
    return sorted(
        (ps for ps in placed if ps.station.on_line(corridor.line_id)),
        key=lambda ps: (ps.x, ps.id),
    )


def build_line_waypoints(
    corridor: Corridor,
    placed: Iterable[PlacedStation],
    time_scale: TimeScale = DEFAULT_TIME_SCALE,
    height: float = CANVAS_H,
    convergence_year: int = CONVERGENCE_YEAR,
    pre_convergence_run: float = PRE_CONVERGENCE_RUN,
    convergence_snap: float = CONVERGENCE_SNAP,
    future_extension: float = FUTURE_EXTENSION,
) -> list[Point]:
    """Ordered waypoints for one line.

    1. Canvas left edge at the corridor height.
    2. Every station on the line, at its placed coordinates.
    3. A pre-convergence point where the line levels off at its bundle lane,
       unless the line already reached that x.
    4. The convergence point, unless the line already ends within
       ``convergence_snap`` of it.
    5. The terminal extension into the future at the bundle lane.
    """
    corridor_y = corridor.y_fraction * height
    bundle_y = convergence_y(corridor, height)
    conv_x = time_scale.year_to_x(convergence_year)

    points = [Point(0.0, corridor_y)]
    for ps in line_stations(corridor, placed):
        points.append(Point(ps.x, ps.y))

    last_x = points[-1].x
    pre_x = conv_x - pre_convergence_run
    if last_x < pre_x:
        points.append(Point(pre_x, bundle_y))

    if points[-1].x < conv_x - convergence_snap:
        points.append(Point(conv_x, bundle_y))

    points.append(Point(conv_x + future_extension, bundle_y))
    return points
