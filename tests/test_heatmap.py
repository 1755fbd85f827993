from __future__ import annotations

import unittest

import numpy as np

from rastergraph import ChartStyle, LineStyle, new_chart
from rastergraph.axes import draw_axes
from rastergraph.heatmap import bin_edges, cell_rect, draw_legend
from rastergraph.palette import color_for_value, to_rgba8
from rastergraph.raster import get_font_asset, new_canvas
from rastergraph.scales import Bounds, PlotArea, build_scales


def _rgb(frame: np.ndarray, x: float, y: float) -> tuple[int, int, int]:
    return tuple(int(c) for c in frame[int(round(y)), int(round(x)), :3])


class HeatmapGeometryTests(unittest.TestCase):
    def test_bin_edges_divide_range_by_count(self) -> None:
        edges = bin_edges(-0.2, 1.1, 2)
        np.testing.assert_allclose(edges, [-0.2, 0.45, 1.1])
        self.assertEqual(float(edges[-1]), 1.1)

    def test_single_bin_covers_whole_range(self) -> None:
        self.assertEqual(bin_edges(-1.0, 3.0, 1).tolist(), [-1.0, 3.0])

    def test_cell_rect_is_clipped_to_plot_area(self) -> None:
        bounds = Bounds(min_x=0.0, max_x=10.0, min_y=0.0, max_y=10.0)
        area = PlotArea(x0=10.0, y0=10.0, width=100.0, height=100.0)
        x_scale, y_scale = build_scales(bounds, area)

        inside = cell_rect(0.0, 5.0, 0.0, 5.0, x_scale=x_scale, y_scale=y_scale, area=area)
        self.assertEqual(inside, (10.0, 60.0, 50.0, 50.0))

        partial = cell_rect(-5.0, 5.0, 8.0, 12.0, x_scale=x_scale, y_scale=y_scale, area=area)
        assert partial is not None
        left, top, w, h = partial
        self.assertAlmostEqual(left, 10.0)
        self.assertAlmostEqual(w, 50.0)
        self.assertAlmostEqual(top, 10.0)
        self.assertAlmostEqual(h, 20.0)

        self.assertIsNone(cell_rect(11.0, 14.0, 0.0, 5.0, x_scale=x_scale, y_scale=y_scale, area=area))


class HeatmapRenderTests(unittest.TestCase):
    def test_cells_are_colored_through_the_ramp(self) -> None:
        chart = new_chart(800, 400)
        chart.set_heatmap([0, 1], [0, 1], [[1, 2], [3, 4]])
        frame = chart.render()
        layout = chart.last_layout()
        assert layout is not None

        # The legend reserve narrows the plot area.
        self.assertEqual(layout.area.width, 620.0)
        x_edges = bin_edges(layout.bounds.min_x, layout.bounds.max_x, 2)
        y_edges = bin_edges(layout.bounds.min_y, layout.bounds.max_y, 2)

        def center(row: int, col: int) -> tuple[float, float]:
            cx = (x_edges[col] + x_edges[col + 1]) / 2.0
            cy = (y_edges[row] + y_edges[row + 1]) / 2.0
            return layout.x_scale.apply(cx), layout.y_scale.apply(cy)

        self.assertEqual(_rgb(frame, *center(0, 0)), to_rgba8(color_for_value(1.0, 1.0, 4.0))[:3])
        self.assertEqual(_rgb(frame, *center(0, 0)), (0, 0, 255))
        self.assertEqual(_rgb(frame, *center(0, 1)), (0, 255, 170))
        self.assertEqual(_rgb(frame, *center(1, 0)), to_rgba8(color_for_value(3.0, 1.0, 4.0))[:3])
        self.assertEqual(_rgb(frame, *center(1, 1)), (255, 0, 0))

    def test_row_zero_is_drawn_at_the_bottom(self) -> None:
        chart = new_chart(400, 300)
        chart.set_heatmap([0], [0, 1], [[0.0], [10.0]])
        frame = chart.render()
        layout = chart.last_layout()
        assert layout is not None
        cx = layout.area.x0 + layout.area.width / 2.0
        self.assertEqual(_rgb(frame, cx, layout.area.y1 - 5), (0, 0, 255))
        self.assertEqual(_rgb(frame, cx, layout.area.y0 + 5), (255, 0, 0))

    def test_constant_grid_renders(self) -> None:
        chart = new_chart(300, 200)
        chart.set_heatmap([0, 1, 2], [0], [[5.0, 5.0, 5.0]])
        frame = chart.render()
        self.assertEqual(frame.shape, (200, 300, 4))

    def test_legend_runs_from_max_at_top_to_min_at_bottom(self) -> None:
        chart = new_chart(800, 400)
        chart.set_heatmap([0, 1], [0, 1], [[1, 2], [3, 4]])
        frame = chart.render()
        layout = chart.last_layout()
        assert layout is not None
        style = chart.style
        bar_x = layout.area.x1 + style.legend_gap + style.legend_bar_width / 2.0
        r, _, b = _rgb(frame, bar_x, layout.area.y0 + 2)
        self.assertEqual((r, b), (255, 0))
        r, _, b = _rgb(frame, bar_x, layout.area.y1 - 2)
        self.assertEqual((r, b), (0, 255))

    def test_draw_legend_adds_labels_right_of_bar(self) -> None:
        font = get_font_asset().face
        style = ChartStyle()
        canvas = new_canvas(200, 240)
        draw_legend(canvas, vmin=0.0, vmax=1.0, x=20.0, y=10.0, height=200.0, style=style, font=font)
        label_zone = canvas[:, 20 + int(style.legend_bar_width) + style.legend_tick_len + 2 :, :3]
        self.assertTrue(np.any(label_zone < 128))

    def test_legend_ticks_are_offset_by_the_minimum(self) -> None:
        font = get_font_asset().face
        style = ChartStyle()
        canvas = new_canvas(200, 240)
        draw_legend(canvas, vmin=2.0, vmax=6.0, x=20.0, y=10.0, height=200.0, style=style, font=font)
        # Tick marks run from the bar's right edge; sample a column inside them.
        col = 20 + int(style.legend_bar_width) + style.legend_tick_len // 2
        black_rows = np.flatnonzero(np.all(canvas[:, col, :3] == 0, axis=1)).tolist()
        self.assertEqual(black_rows, [10, 50, 90, 130, 170, 210])


GRID_STYLE = ChartStyle(grid_color=(10, 200, 30, 255))


class GridlineTests(unittest.TestCase):
    def _grid_pixels(self, show_grid: bool) -> int:
        style = GRID_STYLE
        bounds = Bounds(min_x=-0.4, max_x=2.2, min_y=-0.8, max_y=4.4)
        area = PlotArea(x0=60.0, y0=40.0, width=400.0, height=220.0)
        x_scale, y_scale = build_scales(bounds, area)
        canvas = new_canvas(520, 300)
        draw_axes(
            canvas,
            area=area,
            bounds=bounds,
            x_scale=x_scale,
            y_scale=y_scale,
            style=style,
            font=get_font_asset().face,
            show_grid=show_grid,
        )
        grid = np.asarray(style.grid_color[:3], dtype=np.uint8)
        return int(np.count_nonzero(np.all(canvas[:, :, :3] == grid, axis=2)))

    def test_gridlines_only_when_requested(self) -> None:
        self.assertEqual(self._grid_pixels(False), 0)
        self.assertGreater(self._grid_pixels(True), 0)

    def test_heatmap_chart_has_no_gridlines_outside_cells(self) -> None:
        series_chart = new_chart(320, 200, style=GRID_STYLE)
        series_chart.add_series([0, 1], [0, 1], LineStyle().with_solid())
        heat_chart = new_chart(320, 200, style=GRID_STYLE)
        heat_chart.set_heatmap([0, 1], [0, 1], [[1, 2], [3, 4]])
        grid = np.asarray(GRID_STYLE.grid_color[:3], dtype=np.uint8)
        series_frame = series_chart.render()
        heat_frame = heat_chart.render()
        self.assertTrue(np.any(np.all(series_frame[:, :, :3] == grid, axis=2)))
        self.assertFalse(np.any(np.all(heat_frame[:, :, :3] == grid, axis=2)))


if __name__ == "__main__":
    unittest.main()
