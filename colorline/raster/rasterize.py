from __future__ import annotations

from colorline.raster.draw_border import draw_border
from colorline.raster.draw_lines import draw_reference_line, draw_segment
from colorline.raster.draw_markers import draw_point
from colorline.raster.grid import RasterGrid, new_grid
from colorline.scales import ScaleState
from colorline.series import SeriesData
from colorline.settings import Settings


def rasterize_series(series: SeriesData, scale: ScaleState, settings: Settings) -> RasterGrid:
    """Render one series into a fresh grid sized by ``scale``.

    The axis border is drawn first, then every column of the series: a
    segment when the next column holds a value, otherwise a marker for
    point/cross series. Line series draw their reference row last.
    """

    colorizer = settings.get_colorizer()
    cells = new_grid(scale.rows, scale.total_width)
    context = series.colors
    reference_row = draw_border(cells, scale, settings, colors=context, reference=series.reference)

    values = dict(series.points)
    for x, value in series.points:
        y = scale.scaled(value)
        following = values.get(x + 1)
        if following is not None:
            context = draw_segment(
                cells,
                scale,
                x,
                y,
                scale.scaled(following),
                colors=series.colors,
                colors_down=series.colors_down,
                context=context,
                colorizer=colorizer,
            )
        elif series.is_marker:
            draw_point(cells, scale, x, y, appearance=series.appearance, context=context, colorizer=colorizer)

    if series.is_line and series.reference is not None:
        draw_reference_line(
            cells,
            scale,
            scale.scaled(series.reference),
            appearance=series.appearance,
            context=context,
            colorizer=colorizer,
        )

    return RasterGrid(cells=cells, offset=scale.offset, reference_row=reference_row)
