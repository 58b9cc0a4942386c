"""Piecewise-linear mapping from historical year to canvas x.

History is not uniformly dense in events, so the scale is defined by
hand-tuned anchors rather than a log transform: each anchor pins a year
to a fraction of the canvas width and years between anchors are
interpolated linearly.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_TIME_SCALE",
    "TimeScale",
    "format_year",
    "time_markers",
    "year_to_x",
]

from bisect import bisect_left
from dataclasses import dataclass

from civ_metro.layout.constants import (
    CANVAS_W,
    TIME_ANCHORS,
    TIME_MARKER_YEARS,
)
from civ_metro.model import TimeAnchor


@dataclass(frozen=True)
class TimeScale:
    """Year-to-x mapping over an anchor table.

    The table is validated on construction; a malformed table raises
    ``ValueError`` here so that ``year_to_x`` never has to.
    """

    anchors: tuple[TimeAnchor, ...] = TIME_ANCHORS
    width: float = CANVAS_W

    def __post_init__(self) -> None:
        anchors = tuple(self.anchors)
        object.__setattr__(self, "anchors", anchors)
        _validate_anchors(anchors)
        if self.width <= 0:
            raise ValueError(f"Time scale width must be positive, got {self.width}")

    @property
    def start(self) -> int:
        return self.anchors[0].year

    @property
    def end(self) -> int:
        return self.anchors[-1].year

    def year_to_x(self, year: float) -> float:
        """Map a year to canvas x, clamping outside the anchor range."""
        anchors = self.anchors
        if year <= anchors[0].year:
            return 0.0
        if year >= anchors[-1].year:
            return self.width

        # Smallest i with year <= anchors[i].year
        i = bisect_left(self._years, year)
        lo, hi = anchors[i - 1], anchors[i]
        t = (year - lo.year) / (hi.year - lo.year)
        position = lo.position + t * (hi.position - lo.position)
        return position * self.width

    def x_to_year(self, x: float) -> float:
        """Inverse of :meth:`year_to_x`, clamped to the timeline range."""
        anchors = self.anchors
        position = x / self.width
        if position <= anchors[0].position:
            return float(anchors[0].year)
        if position >= anchors[-1].position:
            return float(anchors[-1].year)

        i = bisect_left([a.position for a in anchors], position)
        lo, hi = anchors[i - 1], anchors[i]
        t = (position - lo.position) / (hi.position - lo.position)
        return lo.year + t * (hi.year - lo.year)

    @property
    def _years(self) -> list[int]:
        return [a.year for a in self.anchors]


def _validate_anchors(anchors: tuple[TimeAnchor, ...]) -> None:
    if len(anchors) < 2:
        raise ValueError("Time scale needs at least two anchors")
    if anchors[0].position != 0.0:
        raise ValueError(
            f"First anchor must sit at position 0, got {anchors[0].position}"
        )
    if anchors[-1].position != 1.0:
        raise ValueError(
            f"Last anchor must sit at position 1, got {anchors[-1].position}"
        )
    for prev, curr in zip(anchors, anchors[1:]):
        if curr.year <= prev.year:
            raise ValueError(
                f"Anchor years must strictly increase: {prev.year} -> {curr.year}"
            )
        if curr.position <= prev.position:
            raise ValueError(
                f"Anchor positions must strictly increase at year {curr.year}: "
                f"{prev.position} -> {curr.position}"
            )


DEFAULT_TIME_SCALE = TimeScale()


def year_to_x(year: float, time_scale: TimeScale = DEFAULT_TIME_SCALE) -> float:
    """Convenience wrapper around :meth:`TimeScale.year_to_x`."""
    return time_scale.year_to_x(year)


def format_year(year: int) -> str:
    """Human label for a year: ``500 BCE``, ``1 CE`` for year 0, ``1492 CE``."""
    if year < 0:
        return f"{abs(year)} BCE"
    if year == 0:
        return "1 CE"
    return f"{year} CE"


def time_markers(
    years: tuple[int, ...] = TIME_MARKER_YEARS,
    time_scale: TimeScale = DEFAULT_TIME_SCALE,
) -> list[tuple[int, str, float]]:
    """Axis markers as (year, label, x), limited to the timeline range."""
    return [
        (year, format_year(year), time_scale.year_to_x(year))
        for year in years
        if time_scale.start <= year <= time_scale.end
    ]
