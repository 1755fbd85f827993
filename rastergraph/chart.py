from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Any

import numpy as np

from rastergraph.adapters import coerce_grid, coerce_labels, coerce_vector
from rastergraph.axes import AxisPlacement, draw_axes
from rastergraph.config import ChartStyle, FontConfig
from rastergraph.errors import ChartLayoutError, ChartModeError, EmptyChartError, SeriesLengthError
from rastergraph.export import write_png
from rastergraph.heatmap import draw_heatmap
from rastergraph.plotting import draw_series
from rastergraph.raster import fill_rect, get_font_asset, new_canvas, stroke_rect
from rastergraph.scales import Bounds, LinearScale, PlotArea, build_scales, compute_bounds
from rastergraph.series import (
    ChartContent,
    ChartMode,
    EmptyContent,
    HeatmapContent,
    HeatmapDataset,
    LineStyle,
    Series,
    SeriesContent,
)


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartLayout:
    area: PlotArea
    bounds: Bounds
    x_scale: LinearScale
    y_scale: LinearScale
    axes: AxisPlacement


class Chart:
    """A fixed-size raster chart holding either series or a single heatmap.

    The chart owns its RGBA surface and all accumulated data. Call ``render``
    to draw the current data, then ``to_rgba`` or ``export_image`` to read it.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        style: ChartStyle | None = None,
        font_config: FontConfig | None = None,
    ) -> None:
        _validate_size(width, height)
        self.width = int(width)
        self.height = int(height)
        self.style = style if style is not None else ChartStyle()
        self.font_config = font_config
        self._content: ChartContent = EmptyContent()
        self._surface = new_canvas(self.width, self.height, color=self.style.background)
        self._last_layout: ChartLayout | None = None

    @property
    def mode(self) -> ChartMode:
        return self._content.mode

    @property
    def series(self) -> tuple[Series, ...]:
        if isinstance(self._content, SeriesContent):
            return self._content.series
        return ()

    @property
    def heatmap(self) -> HeatmapDataset | None:
        if isinstance(self._content, HeatmapContent):
            return self._content.dataset
        return None

    def add_series(self, x: Any, y: Any, style: LineStyle | None, labels: Any = None) -> "Chart":
        if isinstance(self._content, HeatmapContent):
            raise ChartModeError("chart already holds a heatmap; cannot add a series")

        x_arr = coerce_vector(x, label="x")
        y_arr = coerce_vector(y, label="y")
        label_items = coerce_labels(labels)
        if x_arr.size == 0 or y_arr.size == 0 or style is None:
            LOGGER.debug("ignoring empty series or missing line style")
            return self
        if label_items is not None and len(label_items) != x_arr.size:
            LOGGER.debug("ignoring series: %d labels for %d points", len(label_items), x_arr.size)
            return self
        if x_arr.size != y_arr.size:
            raise SeriesLengthError(f"x and y must have the same length: {x_arr.size} != {y_arr.size}")

        item = Series(x=x_arr, y=y_arr, style=style, labels=label_items or ())
        if not np.any(item.finite_mask):
            LOGGER.debug("ignoring series without finite points")
            return self

        content = self._content
        if isinstance(content, SeriesContent):
            self._content = content.appended(item)
        else:
            self._content = SeriesContent(series=(item,))
        return self

    def set_heatmap(self, x: Any, y: Any, values: Any) -> "Chart":
        if not isinstance(self._content, EmptyContent):
            raise ChartModeError(f"chart mode already set to {self.mode.value}; cannot set a heatmap")

        x_arr = coerce_vector(x, label="x")
        y_arr = coerce_vector(y, label="y")
        rows = coerce_grid(values)
        if x_arr.size == 0 or y_arr.size == 0 or not rows:
            LOGGER.debug("ignoring empty heatmap input")
            return self
        if len(rows) != y_arr.size or any(row.size != x_arr.size for row in rows):
            LOGGER.debug("ignoring heatmap: grid does not match %d rows x %d columns", y_arr.size, x_arr.size)
            return self

        grid = np.vstack(rows)
        if not (np.any(np.isfinite(grid)) and np.any(np.isfinite(x_arr)) and np.any(np.isfinite(y_arr))):
            LOGGER.debug("ignoring heatmap without finite values")
            return self

        self._content = HeatmapContent(dataset=HeatmapDataset(x=x_arr, y=y_arr, values=grid))
        return self

    def clear(self) -> "Chart":
        self._content = EmptyContent()
        self._surface = new_canvas(self.width, self.height, color=self.style.background)
        self._last_layout = None
        return self

    def clear_with_resize(self, width: int, height: int) -> "Chart":
        _validate_size(width, height)
        self.width = int(width)
        self.height = int(height)
        return self.clear()

    def render(self) -> np.ndarray:
        content = self._content
        if isinstance(content, EmptyContent):
            raise EmptyChartError("no data to plot")

        font = get_font_asset(self.font_config).face
        style = self.style
        area = self._plot_area()
        canvas = new_canvas(self.width, self.height, color=style.background)
        fill_rect(
            canvas,
            int(round(area.x0)),
            int(round(area.y0)),
            int(round(area.x1)),
            int(round(area.y1)),
            style.plot_bg_color,
        )

        bounds = self._compute_bounds()
        x_scale, y_scale = build_scales(bounds, area)
        placement = draw_axes(
            canvas,
            area=area,
            bounds=bounds,
            x_scale=x_scale,
            y_scale=y_scale,
            style=style,
            font=font,
            show_grid=isinstance(content, SeriesContent),
        )

        if isinstance(content, SeriesContent):
            draw_series(
                canvas,
                content.series,
                x_scale=x_scale,
                y_scale=y_scale,
                baseline_y=placement.baseline_y,
                style=style,
                font=font,
            )
        else:
            draw_heatmap(
                canvas,
                content.dataset,
                bounds=bounds,
                area=area,
                x_scale=x_scale,
                y_scale=y_scale,
                style=style,
                font=font,
            )
        stroke_rect(
            canvas,
            int(round(area.x0)),
            int(round(area.y0)),
            int(round(area.x1)),
            int(round(area.y1)),
            style.frame_color,
        )

        LOGGER.debug("rendered %s chart %dx%d with bounds %s", self.mode.value, self.width, self.height, bounds)
        self._surface = canvas
        self._last_layout = ChartLayout(area=area, bounds=bounds, x_scale=x_scale, y_scale=y_scale, axes=placement)
        return canvas.copy()

    def to_rgba(self) -> np.ndarray:
        return self._surface.copy()

    def last_layout(self) -> ChartLayout | None:
        return self._last_layout

    def export_image(self, path: str | os.PathLike[str], overwrite_existing: bool = True) -> Path:
        return write_png(self._surface, path, overwrite_existing=overwrite_existing)

    def _plot_area(self) -> PlotArea:
        style = self.style
        pad = min(style.padding, max(1.0, min(self.width, self.height) / 8.0))
        legend = 0.0
        if isinstance(self._content, HeatmapContent):
            legend = min(style.legend_reserve, self.width / 4.0)
        width = self.width - 2.0 * pad - legend
        height = self.height - 2.0 * pad
        if width <= 1 or height <= 1:
            raise ChartLayoutError(f"canvas {self.width}x{self.height} too small for a plot area")
        return PlotArea(x0=pad * style.left_padding_ratio, y0=pad, width=width, height=height)

    def _compute_bounds(self) -> Bounds:
        content = self._content
        if isinstance(content, SeriesContent):
            xs = np.concatenate([item.x[item.finite_mask] for item in content.series])
            ys = np.concatenate([item.y[item.finite_mask] for item in content.series])
            return compute_bounds(xs, ys)
        if isinstance(content, HeatmapContent):
            return compute_bounds(content.dataset.x, content.dataset.y)
        raise EmptyChartError("no data to plot")


def _validate_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("chart width/height must be > 0")
