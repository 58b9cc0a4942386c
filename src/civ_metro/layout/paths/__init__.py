"""Path building subpackage for the metro map.

Public API:
- build_line_waypoints: Waypoint sequence for one corridor
- generate_smooth_path: Horizontal-tangent SVG path from waypoints
- generate_braided_path: Three-strand variant for the braided line
- build_line_path / build_metro_paths: Per-line and whole-map path strings
- BraidedPath, MetroPaths: Result containers
"""

from civ_metro.layout.paths.common import (
    BraidedPath,
    MetroPaths,
    parse_path_endpoint,
    path_length,
)
from civ_metro.layout.paths.core import build_line_path, build_metro_paths
from civ_metro.layout.paths.curves import generate_braided_path, generate_smooth_path
from civ_metro.layout.paths.waypoints import build_line_waypoints, line_stations

__all__ = [
    "BraidedPath",
    "MetroPaths",
    "build_line_path",
    "build_line_waypoints",
    "build_metro_paths",
    "generate_braided_path",
    "generate_smooth_path",
    "line_stations",
    "parse_path_endpoint",
    "path_length",
]
