from __future__ import annotations

import numpy as np

from colorline.colorize import Colorizer
from colorline.raster.grid import put
from colorline.scales import ScaleState
from colorline.series import FULL_LINE, ColorList


FLAT = "─"
DASH = "╌"
VERTICAL = "│"
RISE_START = "╭"
RISE_END = "╯"
FALL_START = "╰"
FALL_END = "╮"


def draw_segment(
    cells: np.ndarray,
    scale: ScaleState,
    x: int,
    y: int,
    y1: int,
    *,
    colors: ColorList,
    colors_down: ColorList,
    context: ColorList,
    colorizer: Colorizer,
) -> ColorList:
    """Connect scaled rows ``y`` (column ``x``) and ``y1`` (column ``x + 1``).

    Returns the color context in effect after the segment: sloped segments
    switch it to ``colors`` or ``colors_down``, flat ones keep ``context``.
    """

    col = x + scale.offset
    rows = scale.rows
    if y == y1:
        put(cells, rows - y, col, colorizer.colorize(FLAT, context))
        return context

    if y1 < y:
        start, end = FALL_START, FALL_END
        context = colors_down
    else:
        start, end = RISE_START, RISE_END
        context = colors

    put(cells, rows - y1, col, colorizer.colorize(start, context))
    put(cells, rows - y, col, colorizer.colorize(end, context))
    for i in range(min(y, y1) + 1, max(y, y1)):
        put(cells, rows - i, col, colorizer.colorize(VERTICAL, context))
    return context


def draw_reference_line(
    cells: np.ndarray,
    scale: ScaleState,
    y: int,
    *,
    appearance: str | None,
    context: ColorList,
    colorizer: Colorizer,
) -> None:
    glyph = FLAT if appearance == FULL_LINE else DASH
    draw_hrule(cells, scale, scale.rows - y, glyph, context=context, colorizer=colorizer)


def draw_hrule(
    cells: np.ndarray,
    scale: ScaleState,
    row: int,
    glyph: str,
    *,
    context: ColorList,
    colorizer: Colorizer,
) -> None:
    painted = colorizer.colorize(glyph, context)
    for col in range(scale.offset, scale.total_width):
        put(cells, row, col, painted)


def draw_vrule(
    cells: np.ndarray,
    scale: ScaleState,
    col: int,
    glyph: str,
    *,
    context: ColorList,
    colorizer: Colorizer,
) -> None:
    painted = colorizer.colorize(glyph, context)
    for row in range(scale.rows + 1):
        put(cells, row, col, painted)
