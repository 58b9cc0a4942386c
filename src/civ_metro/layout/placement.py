"""Station placement: time-scale coordinates plus horizontal collision nudging.

A station always sits on its primary line's corridor, so overlaps are
resolved by moving stations sideways only. Processing order is fixed by
(x, y, id), which makes the result repeatable: the earlier station keeps
its slot and later ones are nudged around it.
"""

from __future__ import annotations

__all__ = ["group_by_line", "place_stations"]

import warnings
from collections.abc import Iterable

from civ_metro.layout.constants import (
    CANVAS_H,
    COLLISION_MAX_ATTEMPTS,
    COLLISION_OFFSET_STEP,
    COLLISION_THRESHOLD,
    COORD_TOLERANCE,
)
from civ_metro.layout.corridors import CORRIDORS
from civ_metro.layout.timescale import DEFAULT_TIME_SCALE, TimeScale
from civ_metro.model import Corridor, LineId, PlacedStation, Station


def place_stations(
    stations: Iterable[Station],
    corridors: dict[LineId, Corridor] = CORRIDORS,
    time_scale: TimeScale = DEFAULT_TIME_SCALE,
    height: float = CANVAS_H,
    threshold: float = COLLISION_THRESHOLD,
    offset_step: float = COLLISION_OFFSET_STEP,
    max_attempts: int = COLLISION_MAX_ATTEMPTS,
    min_x: float = 0.0,
    max_x: float | None = None,
) -> list[PlacedStation]:
    """Compute final coordinates for every station.

    Returns placed stations in processing order (ascending x, then y).
    A station whose nudging budget runs out keeps its last attempted
    position and is flagged ``unresolved``; a warning summarises how many
    were affected.
    """
    if max_x is None:
        max_x = time_scale.width

    # Initial coordinates: x from the time scale, y from the primary line
    initial: list[tuple[float, float, Station]] = []
    for station in stations:
        corridor = corridors[station.primary_line]
        x = time_scale.year_to_x(station.year)
        y = corridor.y_fraction * height
        initial.append((x, y, station))

    initial.sort(key=lambda item: (item[0], item[1], item[2].id))

    placed_xy: list[tuple[float, float]] = []
    result: list[PlacedStation] = []
    unresolved_ids: list[str] = []

    for original_x, y, station in initial:
        x, exhausted = _resolve_x(
            original_x,
            y,
            placed_xy,
            threshold,
            offset_step,
            max_attempts,
            min_x,
            max_x,
        )

        placed_xy.append((x, y))
        if exhausted:
            unresolved_ids.append(station.id)
        result.append(
            PlacedStation(
                station=station,
                x=x,
                y=y,
                original_x=original_x,
                was_offset=abs(x - original_x) > COORD_TOLERANCE,
                unresolved=exhausted,
            )
        )

    if unresolved_ids:
        warnings.warn(
            f"Collision budget of {max_attempts} attempts exhausted for "
            f"{len(unresolved_ids)} station(s) ({', '.join(unresolved_ids)}); "
            f"accepting best-effort positions",
            stacklevel=2,
        )

    return result


def _collides(
    x: float,
    y: float,
    placed: list[tuple[float, float]],
    threshold: float,
) -> bool:
    """True when any placed station is within threshold on both axes."""
    return any(
        abs(px - x) < threshold and abs(py - y) < threshold for px, py in placed
    )


def _resolve_x(
    original_x: float,
    y: float,
    placed: list[tuple[float, float]],
    threshold: float,
    offset_step: float,
    max_attempts: int,
    min_x: float,
    max_x: float,
) -> tuple[float, bool]:
    """Search +step, -step, +2*step, -2*step, ... for a free slot.

    Every candidate is clamped to [min_x, max_x] before it is tested.
    Returns (x, exhausted); when no attempt clears the
    collision the last attempted x is returned with ``exhausted=True``.
    """
    x = max(min_x, min(max_x, original_x))
    attempt = 0
    while _collides(x, y, placed, threshold):
        if attempt >= max_attempts:
            return x, True
        attempt += 1
        multiple = (attempt + 1) // 2
        sign = 1 if attempt % 2 == 1 else -1
        x = max(min_x, min(max_x, original_x + sign * multiple * offset_step))
    return x, False


def group_by_line(
    placed: Iterable[PlacedStation],
) -> dict[LineId, list[PlacedStation]]:
    """Group placed stations by every line they serve, each group sorted by year."""
    groups: dict[LineId, list[PlacedStation]] = {lid: [] for lid in LineId}
    for ps in placed:
        for lid in ps.lines:
            groups[lid].append(ps)
    for members in groups.values():
        members.sort(key=lambda ps: (ps.station.year, ps.x))
    return groups
