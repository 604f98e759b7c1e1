from __future__ import annotations

import numpy as np

from colorline.raster.grid import put
from colorline.scales import ScaleState
from colorline.series import ColorList
from colorline.settings import Settings


TICK = "┤"
REFERENCE_TICK = "┼"


def draw_border(
    cells: np.ndarray,
    scale: ScaleState,
    settings: Settings,
    *,
    colors: ColorList,
    reference: float | None,
) -> int | None:
    """Draw axis labels and ticks, returning the highlighted row if any."""

    colorizer = settings.get_colorizer()
    label_format = settings.get_format()
    highlight = None if reference is None else scale.grid_row(reference)
    labelled_rows = scale.max2 - scale.min2 + 1
    margin = scale.offset - 1

    for index in range(labelled_rows):
        label = label_format(scale.label_value(index), settings)[:margin]
        emphasized = index == highlight
        start = margin - len(label)
        for pos, ch in enumerate(label):
            put(cells, index, start + pos, colorizer.colorize(ch, colors) if emphasized else ch)
        if emphasized:
            put(cells, index, margin, colorizer.colorize(REFERENCE_TICK, colors))
        else:
            put(cells, index, margin, TICK)

    if highlight is None or not 0 <= highlight < labelled_rows:
        return None
    return highlight
