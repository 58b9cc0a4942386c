"""Layout coordinator: time scale, station placement and line paths in one call.

The computed layout depends only on the station list, the time scale and
the corridor table, so it is memoised and shared between renders.
"""

from __future__ import annotations

__all__ = ["Layout", "clear_layout_cache", "compute_layout"]

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

from civ_metro.layout.constants import CANVAS_H
from civ_metro.layout.corridors import CORRIDORS, validate_corridors
from civ_metro.layout.paths import MetroPaths, build_metro_paths
from civ_metro.layout.placement import place_stations
from civ_metro.layout.timescale import DEFAULT_TIME_SCALE, TimeScale
from civ_metro.model import Corridor, LineId, PlacedStation, Station


@dataclass(frozen=True)
class Layout:
    """Placed stations and line paths for one station set.

    Cached layouts are shared between callers, so every container is
    read-only.
    """

    placed: tuple[PlacedStation, ...]
    paths: MetroPaths
    time_scale: TimeScale
    corridors: Mapping[LineId, Corridor]
    height: float = CANVAS_H
    _by_id: Mapping[str, PlacedStation] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "placed", tuple(self.placed))
        object.__setattr__(self, "corridors", MappingProxyType(dict(self.corridors)))
        object.__setattr__(
            self, "_by_id", MappingProxyType({ps.id: ps for ps in self.placed})
        )

    @property
    def width(self) -> float:
        return self.time_scale.width

    @property
    def unresolved(self) -> list[str]:
        """Ids of stations whose collision search ran out of attempts."""
        return [ps.id for ps in self.placed if ps.unresolved]

    def station(self, station_id: str) -> PlacedStation:
        """Look up a placed station by id; raises KeyError if unknown."""
        return self._by_id[station_id]

    def get(self, station_id: str) -> PlacedStation | None:
        return self._by_id.get(station_id)


def compute_layout(
    stations: Iterable[Station],
    time_scale: TimeScale = DEFAULT_TIME_SCALE,
    corridors: dict[LineId, Corridor] = CORRIDORS,
    height: float = CANVAS_H,
) -> Layout:
    """Compute (or fetch from cache) the layout for a station set.

    Identical inputs return the same ``Layout`` object. Station ids must
    be unique; a duplicate raises ValueError.
    """
    stations = tuple(stations)
    seen: set[str] = set()
    for st in stations:
        if st.id in seen:
            raise ValueError(f"Duplicate station id {st.id!r}")
        seen.add(st.id)
    validate_corridors(corridors)

    corridor_key = tuple(sorted(corridors.items(), key=lambda kv: kv[0].value))
    return _compute_layout_cached(stations, time_scale, corridor_key, height)


@lru_cache(maxsize=32)
def _compute_layout_cached(
    stations: tuple[Station, ...],
    time_scale: TimeScale,
    corridor_key: tuple[tuple[LineId, Corridor], ...],
    height: float,
) -> Layout:
    corridors = dict(corridor_key)
    placed = place_stations(
        stations,
        corridors=corridors,
        time_scale=time_scale,
        height=height,
    )
    paths = build_metro_paths(
        placed,
        corridors=corridors,
        time_scale=time_scale,
        height=height,
    )
    return Layout(
        placed=tuple(placed),
        paths=paths,
        time_scale=time_scale,
        corridors=corridors,
        height=height,
    )


def clear_layout_cache() -> None:
    """Drop every memoised layout."""
    _compute_layout_cached.cache_clear()
