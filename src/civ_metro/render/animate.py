"""Animation support: lines drawing themselves in, and balls travelling along them."""

from __future__ import annotations

__all__ = ["draw_on_path", "render_animation"]

from collections.abc import Iterable

import drawsvg as draw

from civ_metro.layout.engine import Layout
from civ_metro.layout.paths import path_length
from civ_metro.model import LineId
from civ_metro.render.constants import DRAW_ON_DURATION, MIN_ANIMATION_DURATION
from civ_metro.render.style import Theme


def _svg_attrs(attrs: dict[str, object]) -> str:
    """Format keyword attributes the way drawsvg does (underscores to dashes)."""
    parts = []
    for key, value in attrs.items():
        if value is None:
            continue
        name = key.replace("__", ":").replace("_", "-").rstrip("-")
        parts.append(f'{name}="{value}"')
    return " ".join(parts)


def draw_on_path(
    d_attr: str,
    duration: float = DRAW_ON_DURATION,
    **attrs,
) -> draw.Raw:
    """A path that strokes itself in from its start over ``duration`` seconds.

    The dash pattern is one dash as long as the path, offset by the same
    length, then animated to zero offset.
    """
    length = max(path_length(d_attr), 1.0)
    extra = _svg_attrs(attrs)
    return draw.Raw(
        f'<path d="{d_attr}" fill="none" {extra} '
        f'stroke-dasharray="{length:.1f}" stroke-dashoffset="{length:.1f}">'
        f'<animate attributeName="stroke-dashoffset" from="{length:.1f}" to="0" '
        f'dur="{duration:.2f}s" fill="freeze" calcMode="spline" '
        f'keyTimes="0;1" keySplines="0.65 0 0.35 1"/>'
        f"</path>"
    )


def render_animation(
    d: draw.Drawing,
    layout: Layout,
    theme: Theme,
    lines: Iterable[LineId] | None = None,
) -> None:
    """Add animated balls travelling along each visible line.

    Every ball moves at the same speed (theme.animation_speed px/s). The
    global cycle is the longest line's travel time, and shorter lines hold
    their balls at the terminus until the cycle restarts so all lines loop
    in sync.
    """
    line_paths: list[tuple[LineId, str]] = []
    for lid in lines if lines is not None else LineId:
        d_attr = layout.paths.main_path(lid)
        if d_attr:
            line_paths.append((lid, d_attr))

    durations = {
        lid: max(path_length(d_attr) / theme.animation_speed, MIN_ANIMATION_DURATION)
        for lid, d_attr in line_paths
    }
    max_dur = max(durations.values(), default=MIN_ANIMATION_DURATION)

    for lid, d_attr in line_paths:
        path_id = f"motion-path-{lid.value}"

        # Invisible path for animateMotion to follow
        d.append(
            draw.Raw(f'<path id="{path_id}" d="{d_attr}" fill="none" stroke="none"/>')
        )

        # Fraction of the global cycle spent moving vs holding at end
        move_frac = min(durations[lid] / max_dur, 1.0)
        if move_frac < 0.999:
            kp_attrs = (
                f'keyPoints="0;1;1" '
                f'keyTimes="0;{move_frac:.4f};1" '
                f'calcMode="linear" '
            )
        else:
            kp_attrs = ""

        stroke_attr = ""
        if theme.animation_ball_stroke:
            stroke_attr = (
                f' stroke="{theme.animation_ball_stroke}"'
                f' stroke-width="{theme.animation_ball_stroke_width}"'
            )

        n_balls = theme.animation_balls_per_line
        for i in range(n_balls):
            begin_offset = -i * max_dur / n_balls
            d.append(
                draw.Raw(
                    f'<circle r="{theme.animation_ball_radius}" '
                    f'fill="{theme.animation_ball_color}" opacity="0.9"'
                    f"{stroke_attr}>"
                    f'<animateMotion dur="{max_dur:.2f}s" '
                    f"{kp_attrs}"
                    f'repeatCount="indefinite" '
                    f'begin="{begin_offset:.2f}s">'
                    f'<mpath href="#{path_id}"/>'
                    f"</animateMotion>"
                    f"</circle>"
                )
            )
