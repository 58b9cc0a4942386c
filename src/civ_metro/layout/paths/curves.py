"""Curve synthesis: waypoints to SVG path strings with horizontal tangents."""

from __future__ import annotations

from collections.abc import Sequence

from civ_metro.layout.constants import BRAID_OFFSET, CURVE_TENSION, STRAIGHT_TOLERANCE
from civ_metro.layout.paths.common import BraidedPath, fmt
from civ_metro.model import Point


def generate_smooth_path(
    points: Sequence[Point] | None,
    tension: float = CURVE_TENSION,
    straight_tolerance: float = STRAIGHT_TOLERANCE,
) -> str:
    """Convert waypoints to an SVG path 'd' attribute.

    Level segments become ``L`` commands. Any segment that changes height
    becomes a cubic whose control points share the y of their own end, so
    the line leaves and enters every waypoint dead level. Fewer than two
    points yields an empty string.
    """
    if not points or len(points) < 2:
        return ""

    first = points[0]
    parts = [f"M {fmt(first.x)} {fmt(first.y)}"]

    for prev, curr in zip(points, points[1:]):
        dx = curr.x - prev.x
        if abs(curr.y - prev.y) < straight_tolerance:
            parts.append(f"L {fmt(curr.x)} {fmt(curr.y)}")
            continue

        cp1x = prev.x + dx * tension
        cp2x = curr.x - dx * tension
        parts.append(
            f"C {fmt(cp1x)} {fmt(prev.y)}, "
            f"{fmt(cp2x)} {fmt(curr.y)}, "
            f"{fmt(curr.x)} {fmt(curr.y)}"
        )

    return " ".join(parts)


def offset_points(points: Sequence[Point], dy: float) -> list[Point]:
    """Shift every waypoint vertically by ``dy``."""
    return [Point(p.x, p.y + dy) for p in points]


def generate_braided_path(
    points: Sequence[Point] | None,
    offset: float = BRAID_OFFSET,
    tension: float = CURVE_TENSION,
) -> BraidedPath:
    """Build the centre strand and two strands at +offset and -offset."""
    points = list(points or [])
    return BraidedPath(
        main=generate_smooth_path(points, tension),
        braid1=generate_smooth_path(offset_points(points, offset), tension),
        braid2=generate_smooth_path(offset_points(points, -offset), tension),
    )
