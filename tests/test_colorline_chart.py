from __future__ import annotations

import io
import unittest

import numpy as np

from colorline.chart import Chart
from colorline.raster import BLANK, RasterGrid, new_grid


def _grid(rows: list[str], offset: int = 2, reference_row: int | None = None) -> RasterGrid:
    cells = new_grid(len(rows) - 1, len(rows[0]))
    for r, text in enumerate(rows):
        for c, ch in enumerate(text):
            cells[r, c] = ch
    return RasterGrid(cells=cells, offset=offset, reference_row=reference_row)


class ChartCompositeTests(unittest.TestCase):
    def test_plot_cells_overlay_skipping_blanks(self) -> None:
        chart = Chart(width=5, alltime_max_height=1)
        chart.add_result(_grid(["a┤x  ", "b┤ y "]))
        chart.add_result(_grid(["a┤ z ", "b┤  w"]))
        self.assertEqual(chart.lines(), ["a┤xz", "b┤ yw"])

    def test_later_series_wins_on_conflict(self) -> None:
        chart = Chart(width=3, alltime_max_height=0)
        chart.add_result(_grid(["a┤x"]))
        chart.add_result(_grid(["a┤o"]))
        self.assertEqual(chart.render(), "a┤o")

    def test_margin_only_replaced_on_own_reference_row(self) -> None:
        chart = Chart(width=3, alltime_max_height=1)
        chart.add_result(_grid(["A┼ ", "b┤ "], reference_row=0))
        chart.add_result(_grid(["a┤ ", "B┼ "], reference_row=1))
        chart.add_result(_grid(["a┤ ", "b┤ "]))
        self.assertEqual(chart.lines(), ["A┼", "B┼"])

    def test_frame_is_padded_to_alltime_height(self) -> None:
        chart = Chart(width=3, alltime_max_height=3)
        chart.add_result(_grid(["a┤x"]))
        self.assertEqual(chart.lines(), ["a┤x", "", "", ""])
        self.assertEqual(chart.composite().shape, (4, 3))

    def test_width_mismatch_is_rejected(self) -> None:
        chart = Chart(width=4)
        with self.assertRaises(ValueError):
            chart.add_result(_grid(["a┤x"]))

    def test_print_and_str(self) -> None:
        chart = Chart(width=3, alltime_max_height=0)
        chart.add_result(_grid(["a┤x"]))
        stream = io.StringIO()
        chart.print(stream)
        self.assertEqual(stream.getvalue(), "a┤x\n")
        self.assertEqual(str(chart), "a┤x")

    def test_empty_chart_renders_blank_frame(self) -> None:
        chart = Chart(width=2, alltime_max_height=1)
        self.assertTrue(np.all(chart.composite() == BLANK))
        self.assertEqual(chart.render(), "\n")


if __name__ == "__main__":
    unittest.main()
