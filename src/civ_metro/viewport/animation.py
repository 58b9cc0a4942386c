"""Eased viewport transitions driven by an external frame scheduler.

The core never owns a clock. ``animate_to`` asks a ``FrameScheduler`` for
one callback per rendered frame, so a UI can plug in its frame pump and
tests can use ``ManualFrameScheduler`` to step time explicitly.
"""

from __future__ import annotations

__all__ = [
    "CancelHandle",
    "FrameScheduler",
    "ManualFrameScheduler",
    "animate_to",
    "ease_in_out_cubic",
    "ease_in_out_quad",
    "ease_in_out_quint",
    "ease_out_expo",
    "lerp_rect",
]

from collections.abc import Callable
from typing import Protocol

from civ_metro.model import Rect

FRAME_MS = 1000.0 / 60.0
"""Frame interval used by ``ManualFrameScheduler.advance`` by default."""

FrameCallback = Callable[[float], None]
Easing = Callable[[float], float]


# ---------------------------------------------------------------------------
# Easing
# ---------------------------------------------------------------------------


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        return 16 * t**5
    return 1 - (-2 * t + 2) ** 5 / 2


def ease_out_expo(t: float) -> float:
    if t >= 1:
        return 1.0
    return 1 - 2 ** (-10 * t)


def lerp_rect(a: Rect, b: Rect, t: float) -> Rect:
    """Linear interpolation of every rectangle component."""
    return Rect(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.width + (b.width - a.width) * t,
        a.height + (b.height - a.height) * t,
    )


# ---------------------------------------------------------------------------
# Schedulers
# ---------------------------------------------------------------------------


class FrameScheduler(Protocol):
    """Frame pump interface: one callback per frame, cancellable."""

    def request_frame(self, callback: FrameCallback) -> int: ...

    def cancel_frame(self, handle: int) -> None: ...

    def now(self) -> float: ...


class ManualFrameScheduler:
    """Deterministic scheduler; time only moves when ``advance`` is called."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._time = start_ms
        self._next_handle = 1
        self._pending: dict[int, FrameCallback] = {}

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def now(self) -> float:
        return self._time

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return len(self._pending)

    def advance(self, ms: float = FRAME_MS) -> int:
        """Move the clock forward and run one frame.

        Callbacks requested while the frame runs wait for the next one.
        Returns the number of callbacks run.
        """
        self._time += ms
        callbacks = list(self._pending.values())
        self._pending.clear()
        for callback in callbacks:
            callback(self._time)
        return len(callbacks)

    def run_until_idle(self, ms: float = FRAME_MS, max_frames: int = 10_000) -> int:
        """Pump frames until nothing is pending; returns the frame count."""
        frames = 0
        while self._pending:
            if frames >= max_frames:
                raise RuntimeError(
                    f"Scheduler still busy after {max_frames} frames"
                )
            self.advance(ms)
            frames += 1
        return frames


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


class CancelHandle:
    """Token returned by ``animate_to``; calling it cancels the animation.

    Cancelling leaves the last emitted rectangle in place and suppresses
    ``on_done``. Cancelling a finished or already cancelled animation is
    a no-op.
    """

    def __init__(self, scheduler: FrameScheduler) -> None:
        self._scheduler = scheduler
        self._frame: int | None = None
        self.cancelled = False
        self.finished = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.finished)

    def cancel(self) -> None:
        if not self.active:
            return
        self.cancelled = True
        if self._frame is not None:
            self._scheduler.cancel_frame(self._frame)
            self._frame = None

    def __call__(self) -> None:
        self.cancel()


def animate_to(
    start: Rect,
    end: Rect,
    duration_ms: float,
    on_tick: Callable[[Rect], None],
    on_done: Callable[[], None] | None = None,
    *,
    scheduler: FrameScheduler,
    easing: Easing = ease_in_out_cubic,
) -> CancelHandle:
    """Interpolate from ``start`` to ``end`` over ``duration_ms``.

    ``on_tick`` runs once per frame with the eased rectangle; the last
    frame always emits ``end`` exactly. ``on_done`` runs once after that
    unless the returned handle was used to cancel first. A non-positive
    duration completes on the first frame.
    """
    handle = CancelHandle(scheduler)
    start_time = scheduler.now()

    def frame(now: float) -> None:
        handle._frame = None
        if not handle.active:
            return

        elapsed = now - start_time
        progress = 1.0 if duration_ms <= 0 else min(elapsed / duration_ms, 1.0)

        if progress >= 1.0:
            handle.finished = True
            on_tick(end)
            if on_done is not None:
                on_done()
            return

        on_tick(lerp_rect(start, end, easing(progress)))
        # on_tick may have cancelled us
        if handle.active:
            handle._frame = scheduler.request_frame(frame)

    handle._frame = scheduler.request_frame(frame)
    return handle
