from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from rastergraph.config import ChartStyle
from rastergraph.raster import draw_hline, draw_segment, draw_text, draw_vline
from rastergraph.raster.fonts import FontFace
from rastergraph.scales import (
    Bounds,
    LinearScale,
    PlotArea,
    compute_ticks,
    format_tick,
    is_inside_axis,
    thin_tick_positions,
)


@dataclass(frozen=True)
class AxisPlacement:
    origin_x: float
    origin_y: float
    x_axis_inside: bool
    y_axis_inside: bool
    baseline_y: float
    baseline_x: float
    tick_x: tuple[float, ...] = ()
    tick_y: tuple[float, ...] = ()
    labeled_x: tuple[float, ...] = ()
    labeled_y: tuple[float, ...] = ()


def place_axes(area: PlotArea, x_scale: LinearScale, y_scale: LinearScale) -> AxisPlacement:
    origin_x = x_scale.apply(0.0)
    origin_y = y_scale.apply(0.0)
    # The x axis is horizontal, so its visibility depends on the origin's row.
    x_inside = is_inside_axis(origin_y, area.y0, area.y1)
    y_inside = is_inside_axis(origin_x, area.x0, area.x1)
    return AxisPlacement(
        origin_x=origin_x,
        origin_y=origin_y,
        x_axis_inside=x_inside,
        y_axis_inside=y_inside,
        baseline_y=origin_y if x_inside else area.y1,
        baseline_x=origin_x if y_inside else area.x0,
    )


def draw_axes(
    canvas: np.ndarray,
    *,
    area: PlotArea,
    bounds: Bounds,
    x_scale: LinearScale,
    y_scale: LinearScale,
    style: ChartStyle,
    font: FontFace,
    show_grid: bool,
) -> AxisPlacement:
    placement = place_axes(area, x_scale, y_scale)
    tick_x = compute_ticks(bounds.min_x, bounds.max_x)
    tick_y = compute_ticks(bounds.min_y, bounds.max_y)
    px = x_scale.apply_array(tick_x)
    py = y_scale.apply_array(tick_y)

    if show_grid:
        _draw_grid(canvas, area, px, py, style)

    if placement.x_axis_inside:
        draw_segment(canvas, area.x0, placement.origin_y, area.x1, placement.origin_y, style.axis_color, width=style.axis_width)
    if placement.y_axis_inside:
        draw_segment(canvas, placement.origin_x, area.y0, placement.origin_x, area.y1, style.axis_color, width=style.axis_width)

    tick = style.tick_mark_len
    labeled_x = thin_tick_positions(px, style.min_label_distance)
    for idx in labeled_x:
        xv = float(px[idx])
        draw_segment(canvas, xv, placement.baseline_y - tick, xv, placement.baseline_y + tick, style.text_color)
        draw_text(
            canvas,
            xv,
            placement.baseline_y + style.x_label_offset,
            format_tick(float(tick_x[idx]), decimals=style.tick_decimals),
            style.text_color,
            font,
            anchor=(0.5, 0.5),
        )

    labeled_y = thin_tick_positions(py, style.min_label_distance)
    for idx in labeled_y:
        yv = float(py[idx])
        draw_segment(canvas, placement.baseline_x - tick, yv, placement.baseline_x + tick, yv, style.text_color)
        draw_text(
            canvas,
            placement.baseline_x - style.y_label_offset,
            yv,
            format_tick(float(tick_y[idx]), decimals=style.tick_decimals),
            style.text_color,
            font,
            anchor=(1.0, 0.5),
        )

    return replace(
        placement,
        tick_x=tuple(tick_x.tolist()),
        tick_y=tuple(tick_y.tolist()),
        labeled_x=tuple(float(tick_x[i]) for i in labeled_x),
        labeled_y=tuple(float(tick_y[i]) for i in labeled_y),
    )


def _draw_grid(canvas: np.ndarray, area: PlotArea, px: np.ndarray, py: np.ndarray, style: ChartStyle) -> None:
    left, right = int(round(area.x0)), int(round(area.x1))
    top, bottom = int(round(area.y0)), int(round(area.y1))
    for xv in np.rint(px).astype(np.int64).tolist():
        # Ticks at the bounds coincide with the plot frame.
        if left < xv < right:
            draw_vline(canvas, xv, top + 1, bottom - 1, style.grid_color)
    for yv in np.rint(py).astype(np.int64).tolist():
        if top < yv < bottom:
            draw_hline(canvas, left + 1, right - 1, yv, style.grid_color)
