"""Viewport controller: the single owner of the visible rectangle.

The controller is either IDLE (rectangle fixed) or TRANSITIONING (an
animation or a pointer drag is driving it). Only one driver may be active
at a time: starting an animation, a drag or a direct set cancels whatever
was running, leaving the last applied rectangle in place.
"""

from __future__ import annotations

__all__ = ["Mode", "ViewportController"]

import enum
from collections.abc import Callable

from civ_metro.model import Point, Rect
from civ_metro.viewport import rect as ops
from civ_metro.viewport.animation import (
    CancelHandle,
    Easing,
    FrameScheduler,
    animate_to,
    ease_in_out_cubic,
    ease_in_out_quad,
)
from civ_metro.viewport.rect import DEFAULT_CANVAS, Canvas

TRANSITION_MS = 600.0
"""Duration of button-driven transitions (zoom buttons, centring, reset)."""

WHEEL_MS = 200.0
"""Duration of a wheel-zoom step."""

WHEEL_ZOOM_IN = 0.85
WHEEL_ZOOM_OUT = 1.15


class Mode(enum.Enum):
    IDLE = "idle"
    TRANSITIONING = "transitioning"


class ViewportController:
    """Owns the viewport rectangle and every change applied to it.

    ``on_change`` receives each newly applied (already clamped) rectangle.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        rect: Rect | None = None,
        on_change: Callable[[Rect], None] | None = None,
        canvas: Canvas = DEFAULT_CANVAS,
        duration_ms: float = TRANSITION_MS,
    ) -> None:
        self.scheduler = scheduler
        self.canvas = canvas
        self.duration_ms = duration_ms
        self._on_change = on_change
        self._rect = ops.clamp(rect or ops.initial_viewport(canvas), canvas)
        self._animation: CancelHandle | None = None
        self._drag: tuple[Point, Rect] | None = None

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def mode(self) -> Mode:
        if self._drag is not None:
            return Mode.TRANSITIONING
        if self._animation is not None and self._animation.active:
            return Mode.TRANSITIONING
        return Mode.IDLE

    @property
    def dragging(self) -> bool:
        return self._drag is not None

    # -- driver management -------------------------------------------------

    def cancel(self) -> None:
        """Stop any in-flight animation or drag; the rectangle stays put."""
        if self._animation is not None:
            self._animation.cancel()
            self._animation = None
        self._drag = None

    def _apply(self, rect: Rect) -> None:
        rect = ops.clamp(rect, self.canvas)
        if rect == self._rect:
            return
        self._rect = rect
        if self._on_change is not None:
            self._on_change(rect)

    def _transition(
        self,
        target: Rect,
        animate: bool,
        duration_ms: float | None = None,
        easing: Easing = ease_in_out_cubic,
        on_done: Callable[[], None] | None = None,
    ) -> None:
        self.cancel()
        target = ops.clamp(target, self.canvas)
        if not animate:
            self._apply(target)
            if on_done is not None:
                on_done()
            return

        handle: CancelHandle | None = None

        def finished() -> None:
            # A tick may already have started a newer transition
            if self._animation is handle:
                self._animation = None
            if on_done is not None:
                on_done()

        handle = animate_to(
            self._rect,
            target,
            self.duration_ms if duration_ms is None else duration_ms,
            self._apply,
            finished,
            scheduler=self.scheduler,
            easing=easing,
        )
        self._animation = handle

    # -- operations --------------------------------------------------------

    def set_viewport(self, rect: Rect) -> None:
        """Jump straight to ``rect`` (clamped)."""
        self.cancel()
        self._apply(rect)

    def zoom_at(
        self,
        factor: float,
        anchor: Point,
        animate: bool = True,
        duration_ms: float | None = None,
    ) -> None:
        self._transition(
            ops.zoom_at_point(self._rect, factor, anchor, self.canvas),
            animate,
            duration_ms,
        )

    def zoom_in(self, animate: bool = True) -> None:
        self._transition(ops.zoom_in(self._rect, canvas=self.canvas), animate)

    def zoom_out(self, animate: bool = True) -> None:
        self._transition(ops.zoom_out(self._rect, canvas=self.canvas), animate)

    def wheel(self, delta_y: float, anchor: Point) -> None:
        """Wheel step: scrolling down zooms out, up zooms in, about ``anchor``."""
        factor = WHEEL_ZOOM_OUT if delta_y > 0 else WHEEL_ZOOM_IN
        self._transition(
            ops.zoom_at_point(self._rect, factor, anchor, self.canvas),
            animate=True,
            duration_ms=WHEEL_MS,
            easing=ease_in_out_quad,
        )

    def pan_by(self, dx: float, dy: float) -> None:
        self.cancel()
        self._apply(ops.pan_by(self._rect, dx, dy, self.canvas))

    def center_on(self, point: Point, animate: bool = True) -> None:
        self._transition(ops.center_on(self._rect, point, self.canvas), animate)

    def reset(self, animate: bool = True) -> None:
        self._transition(ops.reset_view(self.canvas), animate)

    def fly_to(
        self,
        target: Rect,
        duration_ms: float | None = None,
        easing: Easing = ease_in_out_cubic,
        on_done: Callable[[], None] | None = None,
    ) -> None:
        """Animate to an arbitrary rectangle."""
        self._transition(target, True, duration_ms, easing, on_done)

    # -- pointer drag ------------------------------------------------------

    def begin_drag(self, point: Point) -> None:
        """Start a pan gesture at ``point`` (canvas coordinates)."""
        self.cancel()
        self._drag = (point, self._rect)

    def drag_to(self, point: Point) -> None:
        """Move the viewport so the grabbed point follows the pointer."""
        if self._drag is None:
            return
        origin, start = self._drag
        self._apply(
            ops.pan_by(start, origin.x - point.x, origin.y - point.y, self.canvas)
        )

    def end_drag(self) -> None:
        self._drag = None
