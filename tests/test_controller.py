"""Tests for the single-driver viewport controller."""

import pytest

from civ_metro.model import Point, Rect
from civ_metro.viewport.controller import Mode, ViewportController
from civ_metro.viewport.rect import initial_viewport, reset_view, zoom_in


@pytest.fixture
def changes():
    return []


@pytest.fixture
def controller(scheduler, changes):
    return ViewportController(scheduler, on_change=changes.append)


class TestViewportController:
    """Tests for ViewportController."""

    def test_starts_idle_at_initial_view(self, controller):
        assert controller.mode is Mode.IDLE
        assert controller.rect == initial_viewport()

    def test_animated_zoom(self, controller, scheduler, changes):
        target = zoom_in(controller.rect)
        controller.zoom_in()
        assert controller.mode is Mode.TRANSITIONING
        scheduler.run_until_idle()
        assert controller.mode is Mode.IDLE
        assert controller.rect == target
        assert changes[-1] == target
        assert len(changes) > 1

    def test_immediate_zoom(self, controller, scheduler, changes):
        controller.zoom_in(animate=False)
        assert controller.mode is Mode.IDLE
        assert changes == [controller.rect]
        assert scheduler.pending == 0

    def test_new_animation_replaces_old(self, controller, scheduler):
        controller.zoom_in()
        scheduler.advance()
        controller.reset()
        assert scheduler.pending == 1
        scheduler.run_until_idle()
        assert controller.rect == reset_view()

    def test_cancel_keeps_last_rect(self, controller, scheduler, changes):
        start = controller.rect
        controller.center_on(Point(7000, 3000))
        scheduler.advance(100)
        controller.cancel()
        assert controller.mode is Mode.IDLE
        held = controller.rect
        assert held != start
        assert held == changes[-1]
        scheduler.advance(1000)
        assert controller.rect == held

    def test_drag_cancels_animation(self, controller, scheduler):
        controller.zoom_out()
        scheduler.advance()
        controller.begin_drag(Point(4000, 2000))
        assert controller.mode is Mode.TRANSITIONING
        assert scheduler.pending == 0

    def test_drag_moves_view(self, scheduler):
        ctl = ViewportController(scheduler, rect=Rect(1000, 1000, 2000, 1000))
        ctl.begin_drag(Point(1500, 1500))
        ctl.drag_to(Point(1400, 1450))
        assert ctl.rect == Rect(1100, 1050, 2000, 1000)
        ctl.drag_to(Point(1600, 1500))
        assert ctl.rect == Rect(900, 1000, 2000, 1000)
        ctl.end_drag()
        assert ctl.mode is Mode.IDLE

    def test_drag_to_without_drag_is_ignored(self, controller):
        before = controller.rect
        controller.drag_to(Point(0, 0))
        assert controller.rect == before

    def test_set_viewport_clamps(self, controller, changes):
        controller.set_viewport(Rect(-500, -500, 1000, 500))
        assert controller.rect == Rect(0, 0, 1000, 500)
        assert changes == [Rect(0, 0, 1000, 500)]

    def test_pan_by(self, scheduler):
        ctl = ViewportController(scheduler, rect=Rect(1000, 1000, 2000, 1000))
        ctl.pan_by(-200, 100)
        assert ctl.rect == Rect(800, 1100, 2000, 1000)

    def test_wheel_direction(self, scheduler):
        ctl = ViewportController(scheduler, rect=Rect(1000, 1000, 2000, 1000))
        ctl.wheel(120, Point(2000, 1500))
        scheduler.run_until_idle()
        assert ctl.rect.width == pytest.approx(2300)
        ctl.wheel(-120, Point(2000, 1500))
        scheduler.run_until_idle()
        assert ctl.rect.width == pytest.approx(2300 * 0.85)

    def test_fly_to_calls_done(self, controller, scheduler):
        done = []
        controller.fly_to(Rect(0, 0, 4000, 2000), on_done=lambda: done.append(1))
        scheduler.run_until_idle()
        assert done == [1]
        assert controller.rect == Rect(0, 0, 4000, 2000)

    def test_transition_started_on_final_frame_stays_tracked(self, scheduler):
        """A zoom begun by on_change at the last frame is still the driver."""
        target = Rect(0, 0, 4000, 2000)
        chained = []

        def on_change(rect):
            if rect == target and not chained:
                chained.append(rect)
                ctl.zoom_in()

        ctl = ViewportController(scheduler, on_change=on_change)
        ctl.fly_to(target)
        for _ in range(200):
            if chained:
                break
            scheduler.advance()
        assert chained
        assert ctl.mode is Mode.TRANSITIONING
        assert scheduler.pending == 1

        ctl.begin_drag(Point(1000, 1000))
        assert scheduler.pending == 0
        ctl.end_drag()
        assert ctl.mode is Mode.IDLE
