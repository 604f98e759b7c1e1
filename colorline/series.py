from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


POINT = "point"
CROSS = "cross"
DASHED_LINE = "dashedLine"
FULL_LINE = "fullLine"

Appearance = Literal["point", "cross", "dashedLine", "fullLine"]
ColorList = tuple[object, ...]

MARKER_APPEARANCES = (POINT, CROSS)
LINE_APPEARANCES = (DASHED_LINE, FULL_LINE)


@dataclass(frozen=True)
class SeriesData:
    points: tuple[tuple[int, float], ...]
    reference: float | None
    colors: ColorList = ()
    colors_down: ColorList = ()
    appearance: Appearance | None = None

    @property
    def is_marker(self) -> bool:
        return self.appearance in MARKER_APPEARANCES

    @property
    def is_line(self) -> bool:
        return self.appearance in LINE_APPEARANCES

    @property
    def max_x(self) -> int:
        if not self.points:
            return 0
        return self.points[-1][0]

    def values(self) -> list[float]:
        out = [y for _, y in self.points]
        if self.reference is not None:
            out.append(self.reference)
        return out
