from __future__ import annotations

from dataclasses import dataclass, field
import sys
from typing import TextIO

import numpy as np

from colorline.raster.grid import BLANK, RasterGrid, grid_lines
from colorline.settings import Settings


@dataclass
class Chart:
    """Accumulates the per-series grids of one render into a single frame.

    Plot cells overlay in registration order, skipping blanks. Axis margin
    cells only fill blanks, except on the row a series highlights for its own
    reference value, so each series keeps its highlighted label.
    """

    settings: Settings = field(default_factory=Settings)
    min: float = 0.0
    max: float = 0.0
    width: int = 0
    alltime_max_height: int = 0
    results: list[RasterGrid] = field(default_factory=list)

    def add_result(self, result: RasterGrid) -> Chart:
        if result.width != self.width:
            raise ValueError(f"grid width {result.width} does not match chart width {self.width}")
        self.results.append(result)
        return self

    @property
    def frame_height(self) -> int:
        tallest = max((result.rows for result in self.results), default=0)
        return max(tallest, self.alltime_max_height + 1)

    def composite(self) -> np.ndarray:
        out = np.full((self.frame_height, self.width), BLANK, dtype=object)
        for result in self.results:
            cells = result.cells
            view = out[: cells.shape[0], : cells.shape[1]]
            take = cells != BLANK
            margin = min(result.offset, cells.shape[1])
            protected = view[:, :margin] != BLANK
            if result.reference_row is not None:
                protected[result.reference_row, :] = False
            take[:, :margin] &= ~protected
            view[take] = cells[take]
        return out

    def lines(self) -> list[str]:
        return grid_lines(self.composite())

    def render(self) -> str:
        return "\n".join(self.lines())

    def print(self, stream: TextIO | None = None) -> None:
        target = stream if stream is not None else sys.stdout
        target.write(self.render())
        target.write("\n")

    def __str__(self) -> str:
        return self.render()
