"""Shared path types and SVG number formatting."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from civ_metro.model import LineId, Point

_TOKEN_RE = re.compile(r"[MLCQ]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_COMMANDS = frozenset("MLCQ")


@dataclass(frozen=True)
class BraidedPath:
    """Three parallel strands built from one waypoint sequence."""

    main: str
    braid1: str
    braid2: str

    def as_dict(self) -> dict[str, str]:
        return {"main": self.main, "braid1": self.braid1, "braid2": self.braid2}


@dataclass(frozen=True)
class MetroPaths:
    """Path strings for every line, plus the waypoints they were built from.

    Both mappings are read-only views; waypoint sequences are tuples.
    """

    paths: Mapping[LineId, str | BraidedPath]
    waypoints: Mapping[LineId, tuple[Point, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "paths", MappingProxyType(dict(self.paths)))
        object.__setattr__(
            self,
            "waypoints",
            MappingProxyType({lid: tuple(pts) for lid, pts in self.waypoints.items()}),
        )

    def __getitem__(self, line_id: LineId) -> str | BraidedPath:
        return self.paths[LineId.parse(line_id)]

    def __iter__(self):
        return iter(self.paths)

    def main_path(self, line_id: LineId) -> str:
        """The single centre-line path of a line, braided or not."""
        path = self[line_id]
        if isinstance(path, BraidedPath):
            return path.main
        return path

    def as_dict(self) -> dict[str, str | dict[str, str]]:
        """String-keyed mapping for renderers."""
        return {
            lid.value: path.as_dict() if isinstance(path, BraidedPath) else path
            for lid, path in self.paths.items()
        }


def fmt(value: float) -> str:
    """Compact SVG number: integers without decimals, else up to 2 places."""
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


def parse_path_endpoint(d_attr: str) -> Point | None:
    """Return the final coordinate pair of a path, or None for an empty path."""
    numbers = [t for t in _TOKEN_RE.findall(d_attr) if t not in _COMMANDS]
    if len(numbers) < 2:
        return None
    return Point(float(numbers[-2]), float(numbers[-1]))


def path_length(d_attr: str, samples: int = 16) -> float:
    """Approximate the length of an SVG path from its commands.

    Parses M, L, C and Q commands. Curves are flattened into ``samples``
    chords, which is plenty for stroke-dash animation timing.
    """
    tokens = _TOKEN_RE.findall(d_attr)

    total = 0.0
    cx, cy = 0.0, 0.0  # current position
    i = 0

    while i < len(tokens):
        token = tokens[i]
        if token == "M":
            cx = float(tokens[i + 1])
            cy = float(tokens[i + 2])
            i += 3
        elif token == "L":
            nx = float(tokens[i + 1])
            ny = float(tokens[i + 2])
            total += math.hypot(nx - cx, ny - cy)
            cx, cy = nx, ny
            i += 3
        elif token == "C":
            c1x, c1y, c2x, c2y, ex, ey = (float(t) for t in tokens[i + 1 : i + 7])
            total += _flattened_length(
                lambda t: _cubic(t, (cx, cy), (c1x, c1y), (c2x, c2y), (ex, ey)),
                samples,
            )
            cx, cy = ex, ey
            i += 7
        elif token == "Q":
            qx, qy, ex, ey = (float(t) for t in tokens[i + 1 : i + 5])
            total += _flattened_length(
                lambda t: _quadratic(t, (cx, cy), (qx, qy), (ex, ey)),
                samples,
            )
            cx, cy = ex, ey
            i += 5
        else:
            i += 1

    return total


def _flattened_length(curve, samples: int) -> float:
    length = 0.0
    prev = curve(0.0)
    for k in range(1, samples + 1):
        pt = curve(k / samples)
        length += math.hypot(pt[0] - prev[0], pt[1] - prev[1])
        prev = pt
    return length


def _cubic(t, p0, p1, p2, p3) -> tuple[float, float]:
    u = 1 - t
    a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
        a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
    )


def _quadratic(t, p0, p1, p2) -> tuple[float, float]:
    u = 1 - t
    a, b, c = u * u, 2 * u * t, t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0],
        a * p0[1] + b * p1[1] + c * p2[1],
    )
