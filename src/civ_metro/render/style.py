"""Visual themes for the rendered map."""

from __future__ import annotations

__all__ = ["DARK_THEME", "LIGHT_THEME", "THEMES", "Theme"]

from dataclasses import dataclass, field

from civ_metro.model import LineId


def _default_line_colors() -> dict[LineId, str]:
    return {
        LineId.TECH: "#22d3ee",
        LineId.WAR: "#ef4444",
        LineId.POPULATION: "#22c55e",
        LineId.PHILOSOPHY: "#fbbf24",
        LineId.EMPIRE: "#a855f7",
    }


@dataclass
class Theme:
    """Colours, fonts and animation settings for one look."""

    name: str
    background_color: str
    line_colors: dict[LineId, str] = field(default_factory=_default_line_colors)
    line_shadow_color: str = "#000000"
    station_fill: str = "#0a0a0a"
    hub_dot_color: str = "#ffffff"
    label_color: str = "#ffffff"
    label_halo_color: str = "#000000"
    font_family: str = "ui-monospace, 'JetBrains Mono', monospace"
    label_font_size: float = 26.0
    active_label_font_size: float = 30.0
    year_font_size: float = 22.0
    axis_color: str = "#334155"
    axis_label_color: str = "#94a3b8"
    axis_font_size: float = 28.0
    animation_speed: float = 800.0
    animation_balls_per_line: int = 2
    animation_ball_radius: float = 9.0
    animation_ball_color: str = "#ffffff"
    animation_ball_stroke: str | None = None
    animation_ball_stroke_width: float = 2.0

    def line_color(self, line_id: LineId) -> str:
        return self.line_colors[LineId.parse(line_id)]


DARK_THEME = Theme(name="dark", background_color="#050505")

LIGHT_THEME = Theme(
    name="light",
    background_color="#f8fafc",
    line_shadow_color="#cbd5e1",
    station_fill="#ffffff",
    hub_dot_color="#0f172a",
    label_color="#0f172a",
    label_halo_color="#ffffff",
    axis_color="#cbd5e1",
    axis_label_color="#475569",
    animation_ball_color="#0f172a",
    animation_ball_stroke="#ffffff",
)

THEMES: dict[str, Theme] = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}
