from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when chart input cannot be turned into a series."""


class EmptySeriesError(ChartDataError):
    """Raised when a chart is rendered without any plottable value."""
