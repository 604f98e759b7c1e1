from colorline.api import linechart
from colorline.chart import Chart
from colorline.colorize import AnsiColorizer, Colorizer, HtmlColorizer, PlainColorizer
from colorline.errors import ChartDataError, EmptySeriesError
from colorline.linechart import LineChart
from colorline.series import CROSS, DASHED_LINE, FULL_LINE, POINT, SeriesData
from colorline.settings import Settings, load_settings

__all__ = [
    "AnsiColorizer",
    "CROSS",
    "Chart",
    "ChartDataError",
    "Colorizer",
    "DASHED_LINE",
    "EmptySeriesError",
    "FULL_LINE",
    "HtmlColorizer",
    "LineChart",
    "POINT",
    "PlainColorizer",
    "SeriesData",
    "Settings",
    "linechart",
    "load_settings",
]
