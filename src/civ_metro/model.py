"""Data model for the history metro map: lines, stations, geometry primitives."""

from __future__ import annotations

__all__ = [
    "Corridor",
    "LabelCandidate",
    "LineId",
    "PlacedStation",
    "Point",
    "Rect",
    "Significance",
    "Station",
    "TimeAnchor",
]

from dataclasses import dataclass
from enum import Enum


class LineId(str, Enum):
    """The five thematic lines. Closed set; every line table is keyed on it."""

    TECH = "tech"
    WAR = "war"
    POPULATION = "population"
    PHILOSOPHY = "philosophy"
    EMPIRE = "empire"

    @classmethod
    def parse(cls, value: str | LineId) -> LineId:
        """Accept either the enum, its value ("tech") or display key ("Tech")."""
        if isinstance(value, LineId):
            return value
        return cls(value.strip().lower())


class Significance(str, Enum):
    NORMAL = "normal"
    MINOR = "minor"
    MAJOR = "major"
    HUB = "hub"
    CRISIS = "crisis"
    CURRENT = "current"


@dataclass(frozen=True)
class TimeAnchor:
    """A (year, position) pair of the piecewise time-to-space map."""

    year: int
    position: float


@dataclass(frozen=True)
class Corridor:
    """Fixed horizontal band assigned to one line."""

    line_id: LineId
    y_fraction: float
    convergence_offset: float = 0.0


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, used for viewports."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, point: Point) -> bool:
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Station:
    """A historical event on one or more lines.

    ``lines`` is ordered; the first entry is the primary line whose
    corridor the station sits on. Narrative content lives outside the
    layout engine, only ``name`` and ``year_label`` are carried for
    rendering.
    """

    id: str
    year: int
    lines: tuple[LineId, ...]
    significance: Significance = Significance.NORMAL
    name: str = ""
    year_label: str = ""

    def __post_init__(self) -> None:
        parsed: list[LineId] = []
        for line in self.lines:
            lid = LineId.parse(line)
            if lid not in parsed:
                parsed.append(lid)
        if not parsed:
            raise ValueError(f"Station {self.id!r} must belong to at least one line")
        object.__setattr__(self, "lines", tuple(parsed))
        object.__setattr__(self, "significance", Significance(self.significance))

    @property
    def primary_line(self) -> LineId:
        return self.lines[0]

    def on_line(self, line_id: LineId) -> bool:
        return line_id in self.lines


@dataclass(frozen=True)
class PlacedStation:
    """A station with resolved canvas coordinates.

    ``original_x`` is the time-scale position before collision nudging.
    ``unresolved`` is set when the nudging budget ran out while the
    station still overlapped a neighbour.
    """

    station: Station
    x: float
    y: float
    original_x: float
    was_offset: bool = False
    unresolved: bool = False

    @property
    def id(self) -> str:
        return self.station.id

    @property
    def lines(self) -> tuple[LineId, ...]:
        return self.station.lines

    @property
    def coords(self) -> Point:
        return Point(self.x, self.y)


@dataclass
class LabelCandidate:
    """A visible label anchor waiting for vertical placement."""

    station_id: str
    x: float
    top_y: float
    priority: float = 1.0
