from __future__ import annotations

from dataclasses import dataclass

import numpy as np


BLANK = " "


@dataclass(frozen=True)
class RasterGrid:
    """Character cells produced for one series.

    ``reference_row`` is the grid row whose axis label was highlighted for the
    series, or None when the reference value falls outside the labelled rows.
    """

    cells: np.ndarray
    offset: int
    reference_row: int | None = None

    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    def lines(self) -> list[str]:
        return grid_lines(self.cells)


def new_grid(rows: int, width: int) -> np.ndarray:
    return np.full((rows + 1, width), BLANK, dtype=object)


def put(cells: np.ndarray, row: int, col: int, glyph: str) -> None:
    if row < 0 or row >= cells.shape[0] or col < 0 or col >= cells.shape[1]:
        return
    cells[row, col] = glyph


def grid_lines(cells: np.ndarray) -> list[str]:
    return ["".join(row).rstrip() for row in cells.tolist()]
