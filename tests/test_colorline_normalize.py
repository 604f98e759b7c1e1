from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np
import pandas as pd
import torch

from colorline.adapters.normalize import coerce_colors, coerce_value, normalize_markers
from colorline.errors import ChartDataError


class NormalizeMarkersTests(unittest.TestCase):
    def test_mapping_keeps_non_negative_integer_keys_sorted(self) -> None:
        out = normalize_markers({5: 1.0, 0: 2.0, -2: 3.0, "1": 4.0, 2.0: 5.0, np.int64(3): 6.0})
        self.assertEqual(out, ((0, 2.0), (3, 6.0), (5, 1.0)))

    def test_absent_values_are_dropped(self) -> None:
        out = normalize_markers([1.0, None, float("nan"), float("inf"), 2.5])
        self.assertEqual(out, ((0, 1.0), (4, 2.5)))

    def test_decimal_and_integer_values(self) -> None:
        self.assertEqual(normalize_markers([Decimal("1.25"), 3]), ((0, 1.25), (1, 3.0)))

    def test_numpy_array(self) -> None:
        out = normalize_markers(np.asarray([3.0, np.nan, 1.0]))
        self.assertEqual(out, ((0, 3.0), (2, 1.0)))
        with self.assertRaises(ChartDataError):
            normalize_markers(np.zeros((2, 2)))

    def test_pandas_series_uses_index(self) -> None:
        series = pd.Series([1.0, None, 4.0], index=[2, 3, 7])
        self.assertEqual(normalize_markers(series), ((2, 1.0), (7, 4.0)))

    def test_torch_tensor(self) -> None:
        out = normalize_markers(torch.tensor([0.5, 1.5], dtype=torch.float32))
        self.assertEqual(out, ((0, 0.5), (1, 1.5)))
        with self.assertRaises(ChartDataError):
            normalize_markers(torch.zeros((2, 2)))

    def test_rejects_non_numeric_and_unsupported(self) -> None:
        with self.assertRaises(ChartDataError):
            normalize_markers({0: "high"})
        with self.assertRaises(ChartDataError):
            normalize_markers(42)
        with self.assertRaises(ChartDataError):
            normalize_markers("123")

    def test_none_is_empty(self) -> None:
        self.assertEqual(normalize_markers(None), ())


class CoerceTests(unittest.TestCase):
    def test_coerce_value(self) -> None:
        self.assertIsNone(coerce_value(None))
        self.assertIsNone(coerce_value(float("-inf")))
        self.assertEqual(coerce_value(torch.tensor(2.0)), 2.0)
        self.assertEqual(coerce_value("3.5"), 3.5)

    def test_coerce_colors(self) -> None:
        self.assertEqual(coerce_colors(None), ())
        self.assertEqual(coerce_colors("red"), ("red",))
        self.assertEqual(coerce_colors(31), (31,))
        self.assertEqual(coerce_colors([31, "bold"]), (31, "bold"))


if __name__ == "__main__":
    unittest.main()
