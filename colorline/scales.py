from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from colorline.errors import EmptySeriesError
from colorline.series import SeriesData


@dataclass(frozen=True)
class DataExtents:
    ymin: float
    ymax: float
    width: int


@dataclass(frozen=True)
class ScaleState:
    ymin: float
    ymax: float
    width: int
    range: float
    ratio: float
    min2: int
    max2: int
    rows: int
    offset: int

    @property
    def total_width(self) -> int:
        return self.width + self.offset

    def scaled(self, value: float) -> int:
        """Row coordinate of ``value`` counted upwards from the lowest row."""
        return round_half_away(value * self.ratio) - self.min2

    def grid_row(self, value: float) -> int:
        return self.rows - self.scaled(value)

    def label_value(self, row_index: int) -> float:
        return self.ymax - row_index * self.range / self.rows


def find_extents(series: Sequence[SeriesData], *, min_width: int | None = None) -> DataExtents:
    ymin = float("inf")
    ymax = float("-inf")
    max_x = 0
    for item in series:
        max_x = max(max_x, item.max_x)
        for value in item.values():
            ymin = min(ymin, value)
            ymax = max(ymax, value)
    if ymin > ymax:
        raise EmptySeriesError("at least one series with a value is required to render a chart")
    width = max_x + 1
    if min_width is not None:
        width = max(width, int(min_width))
    return DataExtents(ymin=ymin, ymax=ymax, width=width)


def value_range(extents: DataExtents) -> float:
    return max(1.0, abs(extents.ymax - extents.ymin))


def build_scale(extents: DataExtents, *, height: float, offset: int) -> ScaleState:
    if height <= 0:
        raise ValueError("height must be > 0")
    span = value_range(extents)
    ratio = height / span
    min2 = round_half_away(extents.ymin * ratio)
    max2 = round_half_away(extents.ymax * ratio)
    if max2 == min2:
        # Flat data still spans one row step so its value sits on a labelled row.
        min2 = max2 - 1
    rows = max(1, abs(max2 - min2))
    return ScaleState(
        ymin=extents.ymin,
        ymax=extents.ymax,
        width=extents.width,
        range=span,
        ratio=ratio,
        min2=min2,
        max2=max2,
        rows=rows,
        offset=offset,
    )


def round_half_away(value: float) -> int:
    # Halves round away from zero so negative series mirror positive ones.
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
