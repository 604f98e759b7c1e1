from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, Mapping, Sequence

from colorline.colorize import COLORIZERS, resolve_colorizer
from colorline.errors import ChartDataError
from colorline.linechart import LineChart
from colorline.settings import Settings, load_settings

LOGGER = logging.getLogger(__name__)


def build_chart(document: Mapping[str, Any], settings: Settings) -> LineChart:
    """Register every entry of a ``{"series": [...]}`` document on a new chart."""

    entries = document.get("series")
    if not isinstance(entries, list):
        raise ChartDataError("document must contain a `series` list")

    chart = LineChart(settings=settings)
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ChartDataError(f"series[{index}] must be an object")
        kind = entry.get("kind", "markers")
        if kind == "markers":
            chart.add_markers(
                _marker_points(entry.get("points")),
                colors=entry.get("colors"),
                colors_down=entry.get("colors_down"),
            )
        elif kind == "point":
            if "x" not in entry or "y" not in entry:
                raise ChartDataError(f"series[{index}] point requires `x` and `y`")
            chart.add_point(entry["x"], entry["y"], colors=entry.get("colors"), appearance=entry.get("appearance"))
        elif kind == "line":
            if "value" not in entry:
                raise ChartDataError(f"series[{index}] line requires `value`")
            chart.add_line(entry["value"], colors=entry.get("colors"), appearance=entry.get("appearance"))
        else:
            raise ChartDataError(f"series[{index}] has unknown kind: {kind!r}")
    return chart


def _marker_points(points: Any) -> Any:
    # JSON object keys are strings; integral ones become columns.
    if isinstance(points, dict):
        out: dict[Any, Any] = {}
        for key, value in points.items():
            if isinstance(key, str) and key.strip().lstrip("-").isdigit():
                out[int(key)] = value
            else:
                out[key] = value
        return out
    if points is None:
        return []
    return points


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config) if args.config is not None else Settings()
    if args.height is not None:
        settings.set_height(args.height)
    if args.offset is not None:
        settings.set_offset(args.offset)
    if args.colorizer is not None:
        settings.set_colorizer(resolve_colorizer(args.colorizer))
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="colorline")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a JSON series document as a line chart.")
    render.add_argument("data", type=Path)
    render.add_argument("--config", type=Path, default=None, help="TOML file with a [chart] table.")
    render.add_argument("--height", type=int, default=None, help="Plot height in rows for the full data range.")
    render.add_argument("--offset", type=int, default=None, help="Left margin width for axis labels.")
    render.add_argument("--colorizer", choices=sorted(COLORIZERS), default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        try:
            settings = _resolve_settings(args)
            document = json.loads(args.data.read_text(encoding="utf-8"))
            if not isinstance(document, dict):
                raise ChartDataError("document must be a JSON object")
            chart = build_chart(document, settings)
            LOGGER.info("rendering %d series from %s", len(chart.series), args.data)
            result = chart.chart()
        except (OSError, ValueError) as exc:
            print(f"colorline: {exc}", file=sys.stderr)
            return 2
        result.print(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
