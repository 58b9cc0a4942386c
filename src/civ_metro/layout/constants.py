"""Layout constants used across layout and viewport modules.

Centralizes the canvas size, timeline range, corridor table, collision
and label tuning values so every public function can take them as
keyword defaults.
"""

from civ_metro.model import LineId, TimeAnchor

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_W: float = 8000.0
"""Width of the fixed diagram canvas."""

CANVAS_H: float = 4000.0
"""Height of the fixed diagram canvas."""

MIN_ZOOM: float = 0.05
"""Smallest viewport size as a fraction of the canvas (most zoomed in)."""

MAX_ZOOM: float = 20.0
"""Largest viewport size as a fraction of the canvas (most zoomed out)."""

# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------
TIMELINE_START: int = -10000
"""10,000 BCE, left edge of the canvas."""

TIMELINE_END: int = 2025
"""2025 CE, right edge of the canvas and the convergence year."""

TIME_ANCHORS: tuple[TimeAnchor, ...] = (
    TimeAnchor(-10000, 0.00),
    TimeAnchor(-3000, 0.10),
    TimeAnchor(-1000, 0.20),
    TimeAnchor(0, 0.30),
    TimeAnchor(500, 0.38),
    TimeAnchor(1000, 0.44),
    TimeAnchor(1500, 0.50),
    TimeAnchor(1800, 0.60),
    TimeAnchor(1900, 0.70),
    TimeAnchor(1950, 0.80),
    TimeAnchor(2000, 0.94),
    TimeAnchor(2025, 1.00),
)
"""Density anchors for the piecewise-linear time scale.

Ancient history is compressed (9,000 years in the first fifth of the
canvas); the last 125 years get close to a third of the width.
"""

TIME_MARKER_YEARS: tuple[int, ...] = (
    -10000, -8000, -6000, -4000, -3000, -2000, -1000,
    -500, 0, 500, 1000, 1200, 1400, 1500, 1600, 1700,
    1800, 1850, 1900, 1950, 2000, 2010, 2025,
)
"""Years labelled on the time axis."""

# ---------------------------------------------------------------------------
# Corridors and convergence
# ---------------------------------------------------------------------------
LINE_Y_FRACTIONS: dict[LineId, float] = {
    LineId.TECH: 0.18,
    LineId.WAR: 0.34,
    LineId.POPULATION: 0.50,
    LineId.PHILOSOPHY: 0.66,
    LineId.EMPIRE: 0.82,
}
"""Vertical position of each line's corridor as a fraction of canvas height."""

CONVERGENCE_YEAR: int = 2025
"""Year at which every line joins the terminal bundle."""

CONVERGENCE_Y_FRACTION: float = 0.15
"""Height of the terminal bundle's lead line as a fraction of canvas height."""

CONVERGENCE_OFFSETS: dict[LineId, float] = {
    LineId.TECH: 0.0,
    LineId.POPULATION: 30.0,
    LineId.WAR: 60.0,
    LineId.EMPIRE: 90.0,
    LineId.PHILOSOPHY: 120.0,
}
"""Per-line vertical offset inside the terminal bundle (30px lanes)."""

CONVERGENCE_SNAP: float = 10.0
"""Skip the explicit convergence waypoint when the line already ends this close."""

PRE_CONVERGENCE_RUN: float = 400.0
"""Distance left of the convergence x where lines level off at bundle height."""

FUTURE_EXTENSION: float = 2000.0
"""How far past the convergence point the lines run into the future."""

# ---------------------------------------------------------------------------
# Station placement
# ---------------------------------------------------------------------------
COLLISION_THRESHOLD: float = 70.0
"""Two stations closer than this in both x and y collide."""

COLLISION_OFFSET_STEP: float = 80.0
"""Horizontal nudge applied per attempt (+1, -1, +2, -2, ... steps)."""

COLLISION_MAX_ATTEMPTS: int = 12
"""Nudging budget per station before accepting a best-effort position."""

COORD_TOLERANCE: float = 1e-6
"""Differences below this are treated as equal coordinates."""

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
CURVE_TENSION: float = 0.5
"""Control point distance as a fraction of a segment's horizontal span."""

STRAIGHT_TOLERANCE: float = 1.0
"""Segments with a smaller vertical change are drawn as straight lines."""

BRAIDED_LINE: LineId = LineId.POPULATION
"""The line rendered as a three-strand braid."""

BRAID_OFFSET: float = 3.0
"""Vertical offset of the two outer braid strands."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_WINDOW: float = 220.0
"""Horizontal distance within which two labels can conflict."""

LABEL_HEIGHT: float = 34.0
"""Height of one label block (name line plus padding)."""

LABEL_MIN_GAP: float = 6.0
"""Minimum vertical clearance between two conflicting labels."""

LABEL_RISE: float = 30.0
"""Distance from the topmost station marker to its label baseline."""

PRIORITY_DEFAULT: float = 1.0
PRIORITY_HOVERED: float = 2.0
PRIORITY_SELECTED: float = 3.0

# ---------------------------------------------------------------------------
# Level of detail
# ---------------------------------------------------------------------------
ZOOM_REFERENCE_WIDTH: float = 1200.0
"""Viewport width that counts as zoom level 1 (full canvas is about 0.15)."""

LOD_OVERVIEW_ZOOM: float = 0.2
"""Below this zoom level only hub and crisis stations are drawn."""

LOD_LABEL_ZOOM: float = 0.6
"""Above this zoom level passive labels are drawn."""

LOD_YEAR_ZOOM: float = 1.2
"""Above this zoom level year captions are drawn under labels."""
