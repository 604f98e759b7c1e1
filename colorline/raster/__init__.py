from .draw_border import draw_border
from .draw_lines import draw_hrule, draw_reference_line, draw_segment, draw_vrule
from .draw_markers import draw_point
from .grid import BLANK, RasterGrid, grid_lines, new_grid, put
from .rasterize import rasterize_series

__all__ = [
    "BLANK",
    "RasterGrid",
    "draw_border",
    "draw_hrule",
    "draw_point",
    "draw_reference_line",
    "draw_segment",
    "draw_vrule",
    "grid_lines",
    "new_grid",
    "put",
    "rasterize_series",
]
