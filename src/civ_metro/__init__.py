"""civ-metro: metro-map layout engine for a zoomable timeline of history."""

__version__ = "0.1.0"
