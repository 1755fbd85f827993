from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from rastergraph import (
    ChartDataError,
    ChartMode,
    LinearScale,
    LineStyle,
    int_linear_array,
    linear_array,
    new_chart,
    scale_array,
    to_float_array,
    uniform_array,
)
from rastergraph.adapters.normalize import coerce_grid, coerce_labels, coerce_vector


class CoerceTests(unittest.TestCase):
    def test_decimal_and_none_values(self) -> None:
        out = coerce_vector([Decimal("1.5"), None, 3], label="y")
        self.assertEqual(out[0], 1.5)
        self.assertTrue(np.isnan(out[1]))
        self.assertEqual(out[2], 3.0)

    def test_none_is_empty(self) -> None:
        self.assertEqual(coerce_vector(None, label="x").size, 0)

    def test_rejects_two_dimensional_vectors(self) -> None:
        with self.assertRaises(ChartDataError):
            coerce_vector(np.zeros((2, 2)), label="x")
        with self.assertRaises(ChartDataError):
            coerce_vector([[1, 2], [3, 4]], label="x")

    def test_rejects_strings(self) -> None:
        with self.assertRaises(ChartDataError):
            coerce_vector("123", label="x")
        with self.assertRaises(ChartDataError):
            coerce_labels("abc")

    def test_grid_keeps_ragged_rows(self) -> None:
        rows = coerce_grid([[1, 2], [3]])
        self.assertEqual([r.tolist() for r in rows], [[1.0, 2.0], [3.0]])

    def test_grid_from_ndarray(self) -> None:
        rows = coerce_grid(np.arange(6).reshape(2, 3))
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1].tolist(), [3.0, 4.0, 5.0])

    def test_empty_grids_have_no_rows(self) -> None:
        self.assertEqual(coerce_grid(np.array([])), [])
        self.assertEqual(coerce_grid(np.empty((0, 3))), [])
        self.assertEqual(coerce_grid([]), [])
        with self.assertRaises(ChartDataError):
            coerce_grid(np.arange(3))

    def test_labels_are_stringified(self) -> None:
        self.assertEqual(coerce_labels([1, "b"]), ("1", "b"))
        self.assertIsNone(coerce_labels(None))

    def test_pandas_inputs(self) -> None:
        try:
            import pandas as pd
        except ImportError:
            self.skipTest("pandas is not installed")

        chart = new_chart(200, 120)
        chart.add_series(pd.Series([0, 1, 2]), pd.Series([1.0, 2.0, 0.5]), LineStyle().with_solid())
        self.assertEqual(chart.series[0].y.tolist(), [1.0, 2.0, 0.5])

        heat = new_chart(200, 120)
        heat.set_heatmap([0, 1], [0, 1], pd.DataFrame([[1, 2], [3, 4]]))
        self.assertEqual(heat.mode, ChartMode.HEATMAP)

        empty = new_chart(200, 120)
        empty.set_heatmap([0], [0], pd.DataFrame())
        self.assertEqual(empty.mode, ChartMode.UNSET)

    def test_torch_inputs(self) -> None:
        try:
            import torch
        except ImportError:
            self.skipTest("torch is not installed")

        out = coerce_vector(torch.tensor([1, 2, 3], dtype=torch.int32), label="y")
        self.assertEqual(out.dtype, np.float64)
        self.assertEqual(out.tolist(), [1.0, 2.0, 3.0])


class ArrayConstructorTests(unittest.TestCase):
    def test_int_linear_array_is_half_open(self) -> None:
        self.assertEqual(int_linear_array(-2, 3).tolist(), [-2.0, -1.0, 0.0, 1.0, 2.0])
        self.assertEqual(int_linear_array(4, 4).size, 0)

    def test_uniform_array(self) -> None:
        self.assertEqual(uniform_array(1.0, 0.5, 4).tolist(), [1.0, 1.5, 2.0, 2.5])
        self.assertEqual(uniform_array(1.0, 0.5, 0).size, 0)

    def test_linear_array_endpoints(self) -> None:
        self.assertEqual(linear_array(0.0, 1.0, 5).tolist(), [0.0, 0.25, 0.5, 0.75, 1.0])
        self.assertEqual(linear_array(2.0, 5.0, 1).tolist(), [2.0])
        self.assertEqual(linear_array(2.0, 2.0, 3).size, 0)
        self.assertEqual(linear_array(0.0, 1.0, -1).size, 0)

    def test_to_float_array_and_scale_array(self) -> None:
        self.assertEqual(to_float_array([1, 2]).dtype, np.float64)
        scale = LinearScale(offset=10.0, anchor=0.0, factor=2.0)
        self.assertEqual(scale_array([0.0, 1.0, 2.5], scale).tolist(), [10.0, 12.0, 15.0])


if __name__ == "__main__":
    unittest.main()
