from __future__ import annotations

import numpy as np

from colorline.colorize import Colorizer
from colorline.raster.draw_lines import DASH, draw_hrule, draw_vrule
from colorline.raster.grid import put
from colorline.scales import ScaleState
from colorline.series import CROSS, ColorList


MARKER = "o"
CROSS_VERTICAL = "╎"


def draw_point(
    cells: np.ndarray,
    scale: ScaleState,
    x: int,
    y: int,
    *,
    appearance: str | None,
    context: ColorList,
    colorizer: Colorizer,
) -> None:
    row = scale.rows - y
    col = x + scale.offset
    if appearance == CROSS:
        draw_hrule(cells, scale, row, DASH, context=context, colorizer=colorizer)
        draw_vrule(cells, scale, col, CROSS_VERTICAL, context=context, colorizer=colorizer)
    put(cells, row, col, colorizer.colorize(MARKER, context))
