#!/usr/bin/env python3
"""Render the built-in history map (or one era of it) to SVG.

Usage:
    python scripts/render_timeline.py
    python scripts/render_timeline.py --era modern --theme light -o /tmp/modern.svg
"""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from civ_metro.data import ERAS, load_stations  # noqa: E402
from civ_metro.layout.engine import compute_layout  # noqa: E402
from civ_metro.model import LineId  # noqa: E402
from civ_metro.render.style import THEMES  # noqa: E402
from civ_metro.render.svg import render_svg  # noqa: E402
from civ_metro.viewport.rect import Canvas, zoom_to_year_range  # noqa: E402
from civ_metro.viewport.state import MapState  # noqa: E402

OUTPUT_PATH = Path("/tmp/civ_metro.svg")


def render_file(
    output: Path,
    *,
    theme_name: str = "dark",
    era: str | None = None,
    lines: list[str] | None = None,
    width: float | None = None,
    animate: bool = False,
) -> list[str]:
    """Lay out, render and write the map. Returns a list of issues."""
    issues: list[str] = []
    stations = load_stations()

    # Cached layouts skip the placement warning, so report from the layout
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        layout = compute_layout(stations)
    issues.extend(
        f"Station {sid!r} overlaps a neighbour (collision search exhausted)"
        for sid in layout.unresolved
    )

    canvas = Canvas(width=layout.width, height=layout.height)
    state = MapState(viewport=canvas.bounds, show_all_labels=True)
    if lines:
        state = MapState(
            viewport=state.viewport,
            visible_lines=frozenset(LineId.parse(name) for name in lines),
            show_all_labels=True,
        )

    viewport = None
    if era is not None:
        start, end = ERAS[era]
        viewport = zoom_to_year_range(
            canvas.bounds, start, end, layout.time_scale, canvas=canvas
        )

    svg_str = render_svg(
        layout,
        viewport,
        THEMES[theme_name],
        state=state,
        width=width,
        animate=animate,
        draw_on=animate,
    )
    output.write_text(svg_str)
    return issues


def main():
    parser = argparse.ArgumentParser(description="Render the history metro map to SVG")
    parser.add_argument(
        "-o", "--output", type=Path, default=OUTPUT_PATH, help="Output SVG path"
    )
    parser.add_argument("--theme", choices=sorted(THEMES), default="dark")
    parser.add_argument(
        "--era", choices=list(ERAS), default=None, help="Crop the view to one era"
    )
    parser.add_argument(
        "--line",
        action="append",
        choices=[lid.value for lid in LineId],
        help="Only draw this line (repeatable)",
    )
    parser.add_argument("--width", type=float, default=None, help="Output pixel width")
    parser.add_argument(
        "--animate", action="store_true", help="Draw lines in and run trains along them"
    )
    args = parser.parse_args()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    issues = render_file(
        args.output,
        theme_name=args.theme,
        era=args.era,
        lines=args.line,
        width=args.width,
        animate=args.animate,
    )

    status = "OK" if not issues else "ISSUES"
    print(f"  {args.output}  [{status}]")
    for issue in issues:
        print(f"    - {issue}")


if __name__ == "__main__":
    main()
