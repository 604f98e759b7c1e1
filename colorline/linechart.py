from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Any

from colorline.adapters import coerce_colors, coerce_value, normalize_markers
from colorline.chart import Chart
from colorline.colorize import AnsiColorizer, sgr_code
from colorline.errors import ChartDataError
from colorline.raster import rasterize_series
from colorline.scales import build_scale, find_extents, value_range
from colorline.series import (
    DASHED_LINE,
    LINE_APPEARANCES,
    MARKER_APPEARANCES,
    POINT,
    SeriesData,
)
from colorline.settings import Settings

LOGGER = logging.getLogger(__name__)


class LineChart:
    """Registers data series and renders them as a character-grid chart.

    Series are append-only until ``clear_all_markers``. Every ``chart()`` call
    recomputes the scale from the registered series; only the tallest row count
    seen so far is kept between calls so repeated frames never shrink.

    An instance is meant to be used from a single thread.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._series: list[SeriesData] = []
        self._alltime_max_height = 0

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    @settings.setter
    def settings(self, settings: Settings) -> None:
        self._settings = settings

    def get_settings(self) -> Settings:
        return self.settings

    def set_settings(self, settings: Settings) -> LineChart:
        self._settings = settings
        return self

    @property
    def series(self) -> tuple[SeriesData, ...]:
        return tuple(self._series)

    @property
    def alltime_max_height(self) -> int:
        return self._alltime_max_height

    def add_point(
        self,
        x: int,
        y: float,
        colors: Iterable[object] | None = None,
        appearance: str | None = None,
    ) -> LineChart:
        if appearance not in MARKER_APPEARANCES:
            if appearance is not None:
                LOGGER.debug("unknown point appearance %r; using %r", appearance, POINT)
            appearance = POINT
        return self._add_series(
            points=normalize_markers({x: y}),
            reference=coerce_value(y),
            colors=colors,
            colors_down=None,
            appearance=appearance,
        )

    def add_markers(
        self,
        points: Any,
        colors: Iterable[object] | None = None,
        colors_down: Iterable[object] | None = None,
    ) -> LineChart:
        normalized = normalize_markers(points)
        reference = normalized[0][1] if normalized else None
        return self._add_series(
            points=normalized,
            reference=reference,
            colors=colors,
            colors_down=colors_down,
            appearance=None,
        )

    def add_line(
        self,
        value: float,
        colors: Iterable[object] | None = None,
        appearance: str | None = None,
    ) -> LineChart:
        if appearance not in LINE_APPEARANCES:
            if appearance is not None:
                LOGGER.debug("unknown line appearance %r; using %r", appearance, DASHED_LINE)
            appearance = DASHED_LINE
        return self._add_series(
            points=(),
            reference=coerce_value(value),
            colors=colors,
            colors_down=None,
            appearance=appearance,
        )

    def clear_all_markers(self) -> LineChart:
        self._series = []
        return self

    def chart(self) -> Chart:
        settings = self.settings
        extents = find_extents(self._series, min_width=settings.get_width())
        settings.set_computed_height(value_range(extents))
        scale = build_scale(extents, height=settings.get_height(), offset=settings.get_offset())
        self._alltime_max_height = max(self._alltime_max_height, scale.rows)
        LOGGER.debug(
            "scale min=%s max=%s range=%s ratio=%s rows=%d width=%d series=%d",
            scale.ymin,
            scale.ymax,
            scale.range,
            scale.ratio,
            scale.rows,
            scale.total_width,
            len(self._series),
        )

        canvas = Chart(
            settings=settings,
            min=scale.ymin,
            max=scale.ymax,
            width=scale.total_width,
            alltime_max_height=self._alltime_max_height,
        )
        for series in self._series:
            canvas.add_result(rasterize_series(series, scale, settings))
        return canvas

    def _add_series(
        self,
        *,
        points: tuple[tuple[int, float], ...],
        reference: float | None,
        colors: Iterable[object] | None,
        colors_down: Iterable[object] | None,
        appearance: str | None,
    ) -> LineChart:
        up = coerce_colors(colors)
        down = coerce_colors(colors_down) if colors_down is not None else up
        if isinstance(self.settings.get_colorizer(), AnsiColorizer):
            for token in up + down:
                try:
                    sgr_code(token)
                except ValueError as exc:
                    raise ChartDataError(str(exc)) from exc
        self._series.append(
            SeriesData(
                points=points,
                reference=reference,
                colors=up,
                colors_down=down,
                appearance=appearance,  # type: ignore[arg-type]
            )
        )
        return self
