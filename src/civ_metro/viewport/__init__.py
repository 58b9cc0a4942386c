"""Viewport: the visible sub-rectangle of the canvas and everything that moves it.

Public API:
- clamp / zoom_at_point / pan_by / center_on: Pure rectangle operations
- animate_to: Cancellable eased transition over a frame scheduler
- ViewportController: Single-driver state machine (idle / transitioning)
- MapState and the apply_* functions: Pure UI state transitions
"""

from civ_metro.viewport.animation import (
    CancelHandle,
    FrameScheduler,
    ManualFrameScheduler,
    animate_to,
    ease_in_out_cubic,
    ease_in_out_quad,
    ease_in_out_quint,
    ease_out_expo,
    lerp_rect,
)
from civ_metro.viewport.controller import Mode, ViewportController
from civ_metro.viewport.rect import (
    DEFAULT_CANVAS,
    Canvas,
    center_on,
    clamp,
    initial_viewport,
    pan_by,
    reset_view,
    zoom_at_point,
    zoom_in,
    zoom_out,
    zoom_to_year_range,
)
from civ_metro.viewport.state import MapState

__all__ = [
    "DEFAULT_CANVAS",
    "CancelHandle",
    "Canvas",
    "FrameScheduler",
    "ManualFrameScheduler",
    "MapState",
    "Mode",
    "ViewportController",
    "animate_to",
    "center_on",
    "clamp",
    "ease_in_out_cubic",
    "ease_in_out_quad",
    "ease_in_out_quint",
    "ease_out_expo",
    "initial_viewport",
    "lerp_rect",
    "pan_by",
    "reset_view",
    "zoom_at_point",
    "zoom_in",
    "zoom_out",
    "zoom_to_year_range",
]
