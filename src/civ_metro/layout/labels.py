"""Label placement for station names.

Labels sit above their station marker. When several visible labels
crowd the same stretch of the timeline they are stacked upwards with a
greedy single pass in x order; interaction priority divides the shift so
the selected or hovered label moves least.
"""

from __future__ import annotations

__all__ = [
    "label_candidates",
    "label_priority",
    "label_visible",
    "place_labels",
    "station_visible",
    "zoom_level",
]

from collections.abc import Collection, Iterable

from civ_metro.layout.constants import (
    LABEL_HEIGHT,
    LABEL_MIN_GAP,
    LABEL_RISE,
    LABEL_WINDOW,
    LOD_LABEL_ZOOM,
    LOD_OVERVIEW_ZOOM,
    PRIORITY_DEFAULT,
    PRIORITY_HOVERED,
    PRIORITY_SELECTED,
    ZOOM_REFERENCE_WIDTH,
)
from civ_metro.model import LabelCandidate, LineId, PlacedStation, Rect, Significance


def _label_span(top_y: float, offset: float, height: float) -> tuple[float, float]:
    """Return (y_min, y_max) of a label block raised by ``offset``."""
    bottom = top_y - offset
    return (bottom - height, bottom)


def _vertical_conflict(
    a: tuple[float, float],
    b: tuple[float, float],
    min_gap: float,
) -> bool:
    """Check if two vertical spans are closer than ``min_gap``."""
    return not (a[1] + min_gap <= b[0] or b[1] + min_gap <= a[0])


def place_labels(
    candidates: Iterable[LabelCandidate],
    window: float = LABEL_WINDOW,
    min_gap: float = LABEL_MIN_GAP,
    label_height: float = LABEL_HEIGHT,
) -> dict[str, float]:
    """Compute vertical offsets for visible labels.

    Candidates are processed in x order. Each one is raised just enough
    to clear every earlier label within ``window`` horizontally, then the
    accumulated raise is divided by the candidate's priority. This gives
    local non-overlap against earlier labels for default-priority labels,
    not a globally minimal layout.

    Returns a dict mapping station_id -> offset (pixels upward). Stations
    that need no shift are omitted; fewer than two candidates gives {}.
    """
    ordered = sorted(candidates, key=lambda c: (c.x, c.station_id))
    if len(ordered) < 2:
        return {}

    processed: list[tuple[LabelCandidate, float]] = []
    offsets: dict[str, float] = {}

    for cand in ordered:
        neighbours = [
            (other, off)
            for other, off in processed
            if abs(other.x - cand.x) < window
        ]

        # Raising the label can push it into a neighbour that was clear
        # before, so rescan until stable. Each pass clears at least one
        # more neighbour, which bounds the loop.
        offset = 0.0
        for _ in range(len(neighbours) + 1):
            span = _label_span(cand.top_y, offset, label_height)
            needed = 0.0
            for other, other_off in neighbours:
                other_span = _label_span(other.top_y, other_off, label_height)
                if not _vertical_conflict(span, other_span, min_gap):
                    continue
                # Lift our bottom edge above the neighbour's top edge
                gap = span[1] - (other_span[0] - min_gap)
                needed = max(needed, gap)
            if needed <= 0:
                break
            offset += needed

        priority = cand.priority if cand.priority > 0 else PRIORITY_DEFAULT
        offset /= priority
        processed.append((cand, offset))
        if offset > 0:
            offsets[cand.station_id] = offset

    return offsets


def label_priority(
    station_id: str,
    selected_id: str | None = None,
    hovered_id: str | None = None,
) -> float:
    """Interaction priority: selected > hovered > default."""
    if station_id == selected_id:
        return PRIORITY_SELECTED
    if station_id == hovered_id:
        return PRIORITY_HOVERED
    return PRIORITY_DEFAULT


# ---------------------------------------------------------------------------
# Level of detail
# ---------------------------------------------------------------------------


def zoom_level(viewport: Rect, reference_width: float = ZOOM_REFERENCE_WIDTH) -> float:
    """Zoom derived from the viewport width; 1.0 at the reference width."""
    return reference_width / viewport.width


def station_visible(
    placed: PlacedStation,
    zoom: float,
    visible_lines: Collection[LineId] | None = None,
    in_journey: bool = False,
    search_match: bool = False,
) -> bool:
    """Whether a station marker is drawn at this zoom level.

    Hidden when every one of its lines is filtered out (unless it matches
    the search). At overview zoom only hubs, crises, journey stops and
    search matches are drawn.
    """
    if visible_lines is not None and not search_match:
        if not any(lid in visible_lines for lid in placed.lines):
            return False
    if zoom < LOD_OVERVIEW_ZOOM:
        return (
            placed.station.significance in (Significance.HUB, Significance.CRISIS)
            or in_journey
            or search_match
        )
    return True


def label_visible(
    placed: PlacedStation,
    zoom: float,
    show_all: bool = False,
    hovered: bool = False,
    selected: bool = False,
    in_journey: bool = False,
    search_match: bool = False,
) -> bool:
    """Whether a station's label is drawn.

    A label needs a reason to show (all labels on, hover, selection,
    journey stop, search match) and, unless the station is active, a zoom
    above the label threshold.
    """
    active = hovered or selected or in_journey
    wanted = show_all or active or search_match
    return wanted and (zoom > LOD_LABEL_ZOOM or active)


def label_candidates(
    placed: Iterable[PlacedStation],
    visible_ids: Collection[str],
    selected_id: str | None = None,
    hovered_id: str | None = None,
    rise: float = LABEL_RISE,
) -> list[LabelCandidate]:
    """Build label anchors for the stations whose labels are visible."""
    return [
        LabelCandidate(
            station_id=ps.id,
            x=ps.x,
            top_y=ps.y - rise,
            priority=label_priority(ps.id, selected_id, hovered_id),
        )
        for ps in placed
        if ps.id in visible_ids
    ]
