"""Map UI state as an immutable value plus pure transition functions.

Each ``apply_*`` function takes a ``MapState`` and returns a new one; the
owner of the diagram decides when to swap it in. Viewport changes go
through the same clamped operations as ``ViewportController``.
"""

from __future__ import annotations

__all__ = [
    "MapState",
    "apply_center_on_station",
    "apply_end_journey",
    "apply_hover",
    "apply_journey_step",
    "apply_reset_view",
    "apply_select",
    "apply_set_era_filter",
    "apply_set_search",
    "apply_set_viewport",
    "apply_show_all_lines",
    "apply_start_journey",
    "apply_toggle_labels",
    "apply_toggle_line",
    "apply_zoom_in",
    "apply_zoom_out",
    "filter_stations",
    "initial_state",
]

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from civ_metro.data.stations import JOURNEY_STATIONS
from civ_metro.model import LineId, PlacedStation, Rect, Station
from civ_metro.viewport import rect as ops
from civ_metro.viewport.rect import DEFAULT_CANVAS, Canvas


@dataclass(frozen=True)
class MapState:
    viewport: Rect
    visible_lines: frozenset[LineId] = frozenset(LineId)
    selected_station_id: str | None = None
    hovered_station_id: str | None = None
    show_all_labels: bool = False
    journey_mode: bool = False
    journey_index: int = 0
    search_query: str = ""
    focused_era: tuple[int, int] | None = None

    def line_visible(self, line_id: LineId) -> bool:
        return LineId.parse(line_id) in self.visible_lines


def initial_state(canvas: Canvas = DEFAULT_CANVAS) -> MapState:
    return MapState(viewport=ops.initial_viewport(canvas))


# ---------------------------------------------------------------------------
# Viewport
# ---------------------------------------------------------------------------


def apply_set_viewport(
    state: MapState, rect: Rect, canvas: Canvas = DEFAULT_CANVAS
) -> MapState:
    return replace(state, viewport=ops.clamp(rect, canvas))


def apply_zoom_in(state: MapState, canvas: Canvas = DEFAULT_CANVAS) -> MapState:
    return replace(state, viewport=ops.zoom_in(state.viewport, canvas=canvas))


def apply_zoom_out(state: MapState, canvas: Canvas = DEFAULT_CANVAS) -> MapState:
    return replace(state, viewport=ops.zoom_out(state.viewport, canvas=canvas))


def apply_reset_view(state: MapState, canvas: Canvas = DEFAULT_CANVAS) -> MapState:
    return replace(state, viewport=ops.reset_view(canvas))


def apply_center_on_station(
    state: MapState,
    station: PlacedStation | None,
    canvas: Canvas = DEFAULT_CANVAS,
) -> MapState:
    """Centre on a placed station and select it; ``None`` leaves state alone."""
    if station is None:
        return state
    return replace(
        state,
        viewport=ops.center_on(state.viewport, station.coords, canvas),
        selected_station_id=station.id,
    )


# ---------------------------------------------------------------------------
# Lines, selection, labels
# ---------------------------------------------------------------------------


def apply_toggle_line(state: MapState, line_id: LineId | str) -> MapState:
    lid = LineId.parse(line_id)
    return replace(state, visible_lines=state.visible_lines ^ {lid})


def apply_show_all_lines(state: MapState) -> MapState:
    return replace(state, visible_lines=frozenset(LineId))


def apply_select(state: MapState, station_id: str | None) -> MapState:
    return replace(state, selected_station_id=station_id)


def apply_hover(state: MapState, station_id: str | None) -> MapState:
    return replace(state, hovered_station_id=station_id)


def apply_toggle_labels(state: MapState) -> MapState:
    return replace(state, show_all_labels=not state.show_all_labels)


# ---------------------------------------------------------------------------
# Journey
# ---------------------------------------------------------------------------


def apply_start_journey(
    state: MapState, journey: Sequence[str] = JOURNEY_STATIONS
) -> MapState:
    return replace(
        state,
        journey_mode=True,
        journey_index=0,
        selected_station_id=journey[0] if journey else None,
    )


def apply_end_journey(state: MapState) -> MapState:
    return replace(state, journey_mode=False)


def apply_journey_step(
    state: MapState,
    step: int = 1,
    journey: Sequence[str] = JOURNEY_STATIONS,
) -> MapState:
    """Move along the journey, wrapping at both ends, and select that stop."""
    if not journey:
        return state
    index = (state.journey_index + step) % len(journey)
    return replace(state, journey_index=index, selected_station_id=journey[index])


# ---------------------------------------------------------------------------
# Search and era filter
# ---------------------------------------------------------------------------


def apply_set_search(state: MapState, query: str) -> MapState:
    return replace(state, search_query=query)


def apply_set_era_filter(
    state: MapState, era: tuple[int, int] | None
) -> MapState:
    return replace(state, focused_era=era)


def filter_stations(stations: Iterable[Station], state: MapState) -> list[Station]:
    """Stations matching the search query (name or year label) and era."""
    result = list(stations)
    if state.search_query:
        query = state.search_query.lower()
        result = [
            s
            for s in result
            if query in s.name.lower() or query in s.year_label.lower()
        ]
    if state.focused_era is not None:
        start, end = state.focused_era
        result = [s for s in result if start <= s.year <= end]
    return result
