"""Pure viewport operations on a fixed-size canvas.

Every operation returns a new ``Rect`` that has already been clamped, so
out-of-range requests are sanitised rather than rejected.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CANVAS",
    "Canvas",
    "center_on",
    "clamp",
    "initial_viewport",
    "pan_by",
    "reset_view",
    "zoom_at_point",
    "zoom_in",
    "zoom_out",
    "zoom_to_year_range",
]

from dataclasses import dataclass

from civ_metro.layout.constants import CANVAS_H, CANVAS_W, MAX_ZOOM, MIN_ZOOM
from civ_metro.layout.timescale import DEFAULT_TIME_SCALE, TimeScale
from civ_metro.model import Point, Rect

ZOOM_IN_FACTOR = 0.8
ZOOM_OUT_FACTOR = 1.25
ERA_PADDING = 0.05


@dataclass(frozen=True)
class Canvas:
    """Canvas size and zoom bounds (fractions of the canvas size)."""

    width: float = CANVAS_W
    height: float = CANVAS_H
    min_zoom: float = MIN_ZOOM
    max_zoom: float = MAX_ZOOM

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )
        if not 0 < self.min_zoom <= self.max_zoom:
            raise ValueError(
                f"Zoom bounds must satisfy 0 < min <= max, "
                f"got [{self.min_zoom}, {self.max_zoom}]"
            )

    @property
    def bounds(self) -> Rect:
        return Rect(0.0, 0.0, self.width, self.height)


DEFAULT_CANVAS = Canvas()


def _clamp_value(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _clamp_size(size: float, extent: float, canvas: Canvas) -> float:
    # The upper bound never exceeds the canvas so the rect can stay inside it
    lo = canvas.min_zoom * extent
    hi = min(canvas.max_zoom * extent, extent)
    return _clamp_value(size, min(lo, hi), hi)


def clamp(rect: Rect, canvas: Canvas = DEFAULT_CANVAS) -> Rect:
    """Clamp size into the zoom bounds, then position into the canvas.

    Idempotent: ``clamp(clamp(r)) == clamp(r)``.
    """
    width = _clamp_size(rect.width, canvas.width, canvas)
    height = _clamp_size(rect.height, canvas.height, canvas)
    x = _clamp_value(rect.x, 0.0, canvas.width - width)
    y = _clamp_value(rect.y, 0.0, canvas.height - height)
    return Rect(x, y, width, height)


def zoom_at_point(
    rect: Rect,
    factor: float,
    anchor: Point,
    canvas: Canvas = DEFAULT_CANVAS,
) -> Rect:
    """Scale the viewport by ``factor`` keeping ``anchor`` fixed on screen.

    ``factor < 1`` zooms in. The anchor keeps its relative position inside
    the rectangle unless the result hits a canvas edge and has to be moved
    back in. A non-positive factor zooms in as far as the canvas allows.
    """
    rect = clamp(rect, canvas)
    factor = max(factor, 0.0)
    width = _clamp_size(rect.width * factor, canvas.width, canvas)
    height = _clamp_size(rect.height * factor, canvas.height, canvas)

    # Use the factor that survived the size clamp so the anchor stays put
    fx = width / rect.width
    fy = height / rect.height
    x = anchor.x - (anchor.x - rect.x) * fx
    y = anchor.y - (anchor.y - rect.y) * fy
    return clamp(Rect(x, y, width, height), canvas)


def pan_by(
    rect: Rect,
    dx: float,
    dy: float,
    canvas: Canvas = DEFAULT_CANVAS,
) -> Rect:
    return clamp(Rect(rect.x + dx, rect.y + dy, rect.width, rect.height), canvas)


def center_on(rect: Rect, point: Point, canvas: Canvas = DEFAULT_CANVAS) -> Rect:
    """Move the viewport so ``point`` is at its centre."""
    return clamp(
        Rect(point.x - rect.width / 2, point.y - rect.height / 2, rect.width, rect.height),
        canvas,
    )


def zoom_in(
    rect: Rect,
    factor: float = ZOOM_IN_FACTOR,
    canvas: Canvas = DEFAULT_CANVAS,
) -> Rect:
    """Zoom in about the viewport centre."""
    return zoom_at_point(rect, factor, rect.center, canvas)


def zoom_out(
    rect: Rect,
    factor: float = ZOOM_OUT_FACTOR,
    canvas: Canvas = DEFAULT_CANVAS,
) -> Rect:
    """Zoom out about the viewport centre."""
    return zoom_at_point(rect, factor, rect.center, canvas)


def reset_view(canvas: Canvas = DEFAULT_CANVAS) -> Rect:
    """The whole canvas."""
    return canvas.bounds


def initial_viewport(canvas: Canvas = DEFAULT_CANVAS) -> Rect:
    """Opening view: the middle 80% of the width, 70% of the height."""
    return clamp(
        Rect(
            canvas.width * 0.1,
            canvas.height * 0.15,
            canvas.width * 0.8,
            canvas.height * 0.7,
        ),
        canvas,
    )


def zoom_to_year_range(
    rect: Rect,
    start_year: float,
    end_year: float,
    time_scale: TimeScale = DEFAULT_TIME_SCALE,
    padding: float = ERA_PADDING,
    canvas: Canvas = DEFAULT_CANVAS,
) -> Rect:
    """Fit a span of years horizontally, keeping aspect ratio and centre height."""
    rect = clamp(rect, canvas)
    if end_year < start_year:
        start_year, end_year = end_year, start_year
    x0 = time_scale.year_to_x(start_year)
    x1 = time_scale.year_to_x(end_year)
    span = max(x1 - x0, canvas.min_zoom * canvas.width)
    width = span * (1 + 2 * padding)
    height = width * rect.height / rect.width
    cx = (x0 + x1) / 2
    cy = rect.center.y
    return clamp(Rect(cx - width / 2, cy - height / 2, width, height), canvas)
