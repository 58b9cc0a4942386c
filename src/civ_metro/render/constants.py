"""Render constants used across render modules.

Centralizes stroke widths, marker radii and typography offsets from
svg.py and animate.py. Theme-dependent values (colours, fonts, animation
speed) remain in style.py.
"""

from civ_metro.model import Significance

# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------
LINE_SHADOW_WIDTH: float = 24.0
"""Stroke width of the dark layer drawn under every line."""

LINE_MAIN_WIDTH: float = 16.0
"""Stroke width of a line."""

LINE_CORE_WIDTH: float = 6.0
"""Stroke width of the bright core drawn on top of a line."""

BRAID_STRAND_WIDTH: float = 3.0
"""Stroke width of each outer strand of the braided line."""

LINE_CORE_OPACITY: float = 0.45
"""Opacity of the bright core stroke."""

# ---------------------------------------------------------------------------
# Stations
# ---------------------------------------------------------------------------
STATION_BASE_RADIUS: float = 28.0
"""Marker radius of a major station at normal zoom."""

STATION_ACTIVE_RADIUS: float = 34.0
"""Marker radius of a hovered, selected or journey station."""

STATION_OVERVIEW_SCALE: float = 0.5
"""Radius multiplier at overview zoom, where markers become dots."""

SIGNIFICANCE_SCALE: dict[Significance, float] = {
    Significance.MINOR: 0.6,
    Significance.NORMAL: 0.8,
    Significance.MAJOR: 1.0,
    Significance.CRISIS: 1.2,
    Significance.HUB: 1.3,
    Significance.CURRENT: 1.4,
}
"""Marker radius multiplier per significance."""

STATION_STROKE_WIDTH: float = 3.0
"""Marker outline width."""

STATION_ACTIVE_STROKE_WIDTH: float = 6.0
"""Marker outline width for active stations."""

ACTIVE_RING_SCALE: float = 1.8
"""Radius of the halo around active stations, relative to the marker."""

INNER_DOT_RADIUS: float = 4.0
"""Radius of the coloured dot drawn inside markers at detail zoom."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_MAX_CHARS: int = 28
"""Longer station names are truncated with an ellipsis."""

YEAR_CAPTION_GAP: float = 28.0
"""Distance from the marker edge down to the year caption baseline."""

# ---------------------------------------------------------------------------
# Time axis
# ---------------------------------------------------------------------------
AXIS_TICK_HEIGHT: float = 40.0
"""Height of the tick mark at each time marker."""

AXIS_LABEL_GAP: float = 16.0
"""Gap between the tick mark and its year label."""

AXIS_BOTTOM_INSET: float = 80.0
"""Distance of the time axis from the canvas bottom."""

# ---------------------------------------------------------------------------
# Animation
# ---------------------------------------------------------------------------
MIN_ANIMATION_DURATION: float = 2.0
"""Minimum duration in seconds for ball animation."""

DRAW_ON_DURATION: float = 4.0
"""Seconds for every line to draw itself in."""
