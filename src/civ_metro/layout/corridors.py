"""Line corridors: fixed vertical band per line plus its terminal bundle lane."""

from __future__ import annotations

__all__ = [
    "CORRIDORS",
    "convergence_point",
    "convergence_y",
    "line_y",
    "validate_corridors",
]

from civ_metro.layout.constants import (
    CANVAS_H,
    CONVERGENCE_OFFSETS,
    CONVERGENCE_Y_FRACTION,
    CONVERGENCE_YEAR,
    LINE_Y_FRACTIONS,
)
from civ_metro.layout.timescale import DEFAULT_TIME_SCALE, TimeScale
from civ_metro.model import Corridor, LineId, Point


def validate_corridors(corridors: dict[LineId, Corridor]) -> None:
    """Check the corridor table is exhaustive and its lanes are distinct.

    Raises ValueError describing the first violation found.
    """
    missing = [lid.value for lid in LineId if lid not in corridors]
    if missing:
        raise ValueError(f"Corridor table is missing lines: {', '.join(missing)}")

    for lid, corridor in corridors.items():
        if corridor.line_id != lid:
            raise ValueError(
                f"Corridor keyed as {lid.value!r} describes {corridor.line_id.value!r}"
            )
        if not 0.0 < corridor.y_fraction < 1.0:
            raise ValueError(
                f"Corridor {lid.value!r} y_fraction {corridor.y_fraction} "
                f"is outside (0, 1)"
            )
        if corridor.convergence_offset < 0:
            raise ValueError(
                f"Corridor {lid.value!r} has negative convergence offset "
                f"{corridor.convergence_offset}"
            )

    fractions = [c.y_fraction for c in corridors.values()]
    if len(set(fractions)) != len(fractions):
        raise ValueError("Corridor y_fraction values must be unique")
    offsets = [c.convergence_offset for c in corridors.values()]
    if len(set(offsets)) != len(offsets):
        raise ValueError("Corridor convergence offsets must be unique")


CORRIDORS: dict[LineId, Corridor] = {
    lid: Corridor(
        line_id=lid,
        y_fraction=LINE_Y_FRACTIONS[lid],
        convergence_offset=CONVERGENCE_OFFSETS[lid],
    )
    for lid in LineId
}
validate_corridors(CORRIDORS)


def line_y(
    line_id: LineId,
    height: float = CANVAS_H,
    corridors: dict[LineId, Corridor] = CORRIDORS,
) -> float:
    """Canvas y of a line's corridor."""
    return corridors[LineId.parse(line_id)].y_fraction * height


def convergence_point(
    time_scale: TimeScale = DEFAULT_TIME_SCALE,
    height: float = CANVAS_H,
    year: int = CONVERGENCE_YEAR,
) -> Point:
    """The terminal point where the bundle's lead line arrives."""
    return Point(time_scale.year_to_x(year), CONVERGENCE_Y_FRACTION * height)


def convergence_y(
    corridor: Corridor,
    height: float = CANVAS_H,
) -> float:
    """Height of this corridor's lane inside the terminal bundle."""
    return CONVERGENCE_Y_FRACTION * height + corridor.convergence_offset
