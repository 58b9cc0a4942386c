"""SVG renderer: draws a computed layout through a viewport with drawsvg."""

from __future__ import annotations

__all__ = ["render_svg"]

import drawsvg as draw

from civ_metro.data.stations import JOURNEY_STATIONS
from civ_metro.layout.constants import (
    LABEL_RISE,
    LOD_LABEL_ZOOM,
    LOD_OVERVIEW_ZOOM,
    LOD_YEAR_ZOOM,
)
from civ_metro.layout.engine import Layout
from civ_metro.layout.labels import (
    label_candidates,
    label_visible,
    place_labels,
    station_visible,
    zoom_level,
)
from civ_metro.layout.paths import BraidedPath
from civ_metro.layout.timescale import time_markers
from civ_metro.model import LineId, PlacedStation, Rect, Significance
from civ_metro.render.animate import draw_on_path, render_animation
from civ_metro.render.constants import (
    ACTIVE_RING_SCALE,
    AXIS_BOTTOM_INSET,
    AXIS_LABEL_GAP,
    AXIS_TICK_HEIGHT,
    BRAID_STRAND_WIDTH,
    INNER_DOT_RADIUS,
    LABEL_MAX_CHARS,
    LINE_CORE_OPACITY,
    LINE_CORE_WIDTH,
    LINE_MAIN_WIDTH,
    LINE_SHADOW_WIDTH,
    SIGNIFICANCE_SCALE,
    STATION_ACTIVE_RADIUS,
    STATION_ACTIVE_STROKE_WIDTH,
    STATION_BASE_RADIUS,
    STATION_OVERVIEW_SCALE,
    STATION_STROKE_WIDTH,
    YEAR_CAPTION_GAP,
)
from civ_metro.render.style import DARK_THEME, Theme
from civ_metro.viewport.rect import Canvas, clamp
from civ_metro.viewport.state import MapState, filter_stations


def render_svg(
    layout: Layout,
    viewport: Rect | None = None,
    theme: Theme = DARK_THEME,
    labels: dict[str, float] | None = None,
    *,
    state: MapState | None = None,
    journey: tuple[str, ...] = JOURNEY_STATIONS,
    width: float | None = None,
    animate: bool = False,
    draw_on: bool = False,
) -> str:
    """Render the layout to an SVG string.

    ``viewport`` overrides the state's viewport; with neither, the whole
    canvas is drawn with every label on. ``labels`` are precomputed label
    offsets; when omitted they are placed here for the visible labels.
    ``width`` is the output pixel width (default: the viewport width).
    """
    canvas = Canvas(width=layout.width, height=layout.height)
    if state is None:
        state = MapState(viewport=canvas.bounds, show_all_labels=True)
    view = clamp(viewport or state.viewport, canvas)
    zoom = zoom_level(view)

    px_width = width or view.width
    px_height = px_width * view.height / view.width
    d = draw.Drawing(view.width, view.height, origin=(view.x, view.y))
    d.set_render_size(px_width, px_height)

    d.append(
        draw.Rectangle(0, 0, canvas.width, canvas.height, fill=theme.background_color)
    )
    _render_time_axis(d, layout, theme)

    visible_lines = [lid for lid in LineId if state.line_visible(lid)]
    for lid in visible_lines:
        _render_line(d, layout, lid, theme, draw_on)

    if animate:
        render_animation(d, layout, theme, visible_lines)

    search_ids: set[str] = set()
    if state.search_query:
        matches = filter_stations((ps.station for ps in layout.placed), state)
        search_ids = {s.id for s in matches}
    journey_ids = set(journey) if state.journey_mode else set()

    shown: list[PlacedStation] = [
        ps
        for ps in layout.placed
        if station_visible(
            ps,
            zoom,
            state.visible_lines,
            in_journey=ps.id in journey_ids,
            search_match=ps.id in search_ids,
        )
    ]

    active_ids = {state.selected_station_id, state.hovered_station_id} | journey_ids
    label_ids = {
        ps.id
        for ps in shown
        if label_visible(
            ps,
            zoom,
            show_all=state.show_all_labels,
            hovered=ps.id == state.hovered_station_id,
            selected=ps.id == state.selected_station_id,
            in_journey=ps.id in journey_ids,
            search_match=ps.id in search_ids,
        )
    }
    if labels is None:
        labels = place_labels(
            label_candidates(
                shown,
                label_ids,
                selected_id=state.selected_station_id,
                hovered_id=state.hovered_station_id,
            )
        )

    # Markers first so every label paints above every marker
    for ps in shown:
        _render_station(d, ps, zoom, ps.id in active_ids, theme)
    for ps in shown:
        if ps.id in label_ids:
            _render_label(d, ps, zoom, ps.id in active_ids, labels.get(ps.id, 0.0), theme)

    return d.as_svg()


def _render_time_axis(d: draw.Drawing, layout: Layout, theme: Theme) -> None:
    base_y = layout.height - AXIS_BOTTOM_INSET
    for _year, label, x in time_markers(time_scale=layout.time_scale):
        d.append(
            draw.Line(
                x, base_y - AXIS_TICK_HEIGHT, x, base_y,
                stroke=theme.axis_color, stroke_width=2,
            )
        )
        d.append(
            draw.Text(
                label,
                theme.axis_font_size,
                x,
                base_y + AXIS_LABEL_GAP + theme.axis_font_size,
                fill=theme.axis_label_color,
                font_family=theme.font_family,
                text_anchor="middle",
            )
        )


def _path_element(d_attr: str, draw_on: bool, **attrs) -> draw.DrawingElement:
    if draw_on:
        return draw_on_path(d_attr, **attrs)
    return draw.Path(d=d_attr, fill="none", **attrs)


def _render_line(
    d: draw.Drawing,
    layout: Layout,
    line_id: LineId,
    theme: Theme,
    draw_on: bool,
) -> None:
    path = layout.paths[line_id]
    color = theme.line_color(line_id)
    main = path.main if isinstance(path, BraidedPath) else path
    if not main:
        return

    common = {"stroke_linecap": "round", "stroke_linejoin": "round"}
    d.append(
        _path_element(
            main, draw_on,
            stroke=theme.line_shadow_color, stroke_width=LINE_SHADOW_WIDTH,
            stroke_opacity=0.6, **common,
        )
    )
    d.append(
        _path_element(
            main, draw_on,
            stroke=color, stroke_width=LINE_MAIN_WIDTH,
            id=f"line-{line_id.value}", **common,
        )
    )
    if isinstance(path, BraidedPath):
        for strand in (path.braid1, path.braid2):
            d.append(
                _path_element(
                    strand, draw_on,
                    stroke=theme.label_color, stroke_width=BRAID_STRAND_WIDTH,
                    stroke_opacity=0.5, **common,
                )
            )
    d.append(
        _path_element(
            main, draw_on,
            stroke=theme.label_color, stroke_width=LINE_CORE_WIDTH,
            stroke_opacity=LINE_CORE_OPACITY, **common,
        )
    )


def _station_radius(ps: PlacedStation, zoom: float, active: bool) -> float:
    if active:
        return STATION_ACTIVE_RADIUS
    if zoom < LOD_OVERVIEW_ZOOM:
        return STATION_BASE_RADIUS * STATION_OVERVIEW_SCALE
    return STATION_BASE_RADIUS * SIGNIFICANCE_SCALE[ps.station.significance]


def _render_station(
    d: draw.Drawing,
    ps: PlacedStation,
    zoom: float,
    active: bool,
    theme: Theme,
) -> None:
    color = theme.line_color(ps.station.primary_line)
    radius = _station_radius(ps, zoom, active)
    detail = zoom > LOD_LABEL_ZOOM

    group = draw.Group(id=f"station-{ps.id}", class_="station")
    if active:
        group.append(
            draw.Circle(
                ps.x, ps.y, radius * ACTIVE_RING_SCALE,
                fill="none", stroke=color, stroke_width=2, stroke_opacity=0.5,
            )
        )
    group.append(
        draw.Circle(
            ps.x, ps.y, radius,
            fill=theme.station_fill,
            stroke=color,
            stroke_width=STATION_ACTIVE_STROKE_WIDTH if active else STATION_STROKE_WIDTH,
        )
    )
    if detail or active:
        group.append(
            draw.Circle(ps.x, ps.y, INNER_DOT_RADIUS * (2 if active else 1), fill=color)
        )
        if ps.station.significance in (Significance.HUB, Significance.CURRENT):
            group.append(
                draw.Circle(ps.x, ps.y, 5, fill=theme.hub_dot_color, opacity=0.9)
            )
    d.append(group)


def _truncate(name: str, limit: int = LABEL_MAX_CHARS) -> str:
    if len(name) > limit:
        return name[:limit] + "…"
    return name


def _render_label(
    d: draw.Drawing,
    ps: PlacedStation,
    zoom: float,
    active: bool,
    offset: float,
    theme: Theme,
) -> None:
    font_size = theme.active_label_font_size if active else theme.label_font_size
    label_y = ps.y - LABEL_RISE - offset
    d.append(
        draw.Text(
            _truncate(ps.station.name or ps.id),
            font_size,
            ps.x,
            label_y,
            fill=theme.label_color,
            stroke=theme.label_halo_color,
            stroke_width=6,
            paint_order="stroke",
            font_family=theme.font_family,
            font_weight="700",
            text_anchor="middle",
            opacity=1.0 if active else 0.8,
        )
    )
    if (active or zoom > LOD_YEAR_ZOOM) and ps.station.year_label:
        radius = _station_radius(ps, zoom, active)
        d.append(
            draw.Text(
                ps.station.year_label,
                theme.year_font_size,
                ps.x,
                ps.y + radius + YEAR_CAPTION_GAP,
                fill=theme.line_color(ps.station.primary_line),
                font_family=theme.font_family,
                font_weight="600",
                text_anchor="middle",
            )
        )
