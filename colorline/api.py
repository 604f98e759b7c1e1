from __future__ import annotations

from typing import Any

from colorline.colorize import Colorizer
from colorline.linechart import LineChart
from colorline.settings import DEFAULT_OFFSET, Settings


def linechart(
    height: int | None = None,
    *,
    offset: int = DEFAULT_OFFSET,
    width: int | None = None,
    decimals: int | None = None,
    colorizer: Colorizer | None = None,
) -> LineChart:
    kwargs: dict[str, Any] = {"height": height, "offset": offset, "width": width}
    if decimals is not None:
        kwargs["decimals"] = decimals
    if colorizer is not None:
        kwargs["colorizer"] = colorizer
    return LineChart(settings=Settings(**kwargs))
