from __future__ import annotations

import math

import numpy as np

from rastergraph.config import ChartStyle
from rastergraph.palette import RAMP_EPSILON, color_for_value, to_rgba8
from rastergraph.raster import draw_segment, draw_text, fill_rect, stroke_rect
from rastergraph.raster.fonts import FontFace
from rastergraph.scales import (
    Bounds,
    LinearScale,
    PlotArea,
    compute_ticks,
    format_tick,
    thin_tick_positions,
)
from rastergraph.series import HeatmapDataset


def bin_edges(lo: float, hi: float, count: int) -> np.ndarray:
    """``count + 1`` evenly spaced edges covering ``[lo, hi]``.

    Cells are uniform regardless of the spacing of the category coordinates.
    """
    step = (hi - lo) / float(count)
    edges = lo + step * np.arange(count + 1, dtype=np.float64)
    edges[-1] = hi
    return edges


def cell_rect(
    x_left: float,
    x_right: float,
    y_low: float,
    y_high: float,
    *,
    x_scale: LinearScale,
    y_scale: LinearScale,
    area: PlotArea,
) -> tuple[float, float, float, float] | None:
    """Pixel rectangle ``(x, y, w, h)`` of one cell, clipped to ``area``."""
    x0, x1 = x_scale.apply(x_left), x_scale.apply(x_right)
    y0, y1 = y_scale.apply(y_low), y_scale.apply(y_high)
    left = min(x0, x1)
    top = min(y0, y1)
    w = abs(x1 - x0)
    h = abs(y1 - y0)

    if left < area.x0:
        w -= area.x0 - left
        left = area.x0
    if top < area.y0:
        h -= area.y0 - top
        top = area.y0
    if left + w > area.x1:
        w = area.x1 - left
    if top + h > area.y1:
        h = area.y1 - top

    if w <= 0 or h <= 0:
        return None
    return (left, top, w, h)


def draw_heatmap(
    canvas: np.ndarray,
    dataset: HeatmapDataset,
    *,
    bounds: Bounds,
    area: PlotArea,
    x_scale: LinearScale,
    y_scale: LinearScale,
    style: ChartStyle,
    font: FontFace,
) -> None:
    vmin, vmax = dataset.value_range()
    if vmax == vmin:
        vmax = vmin + RAMP_EPSILON

    draw_legend(
        canvas,
        vmin=vmin,
        vmax=vmax,
        x=area.x1 + style.legend_gap,
        y=area.y0,
        height=area.height,
        style=style,
        font=font,
    )

    rows, cols = dataset.shape
    x_edges = bin_edges(bounds.min_x, bounds.max_x, cols)
    # Row 0 covers the lowest y band.
    y_edges = bin_edges(bounds.min_y, bounds.max_y, rows)

    for j in range(rows):
        for i in range(cols):
            value = float(dataset.values[j, i])
            if not math.isfinite(value):
                continue
            rect = cell_rect(
                float(x_edges[i]),
                float(x_edges[i + 1]),
                float(y_edges[j]),
                float(y_edges[j + 1]),
                x_scale=x_scale,
                y_scale=y_scale,
                area=area,
            )
            if rect is None:
                continue
            left, top, w, h = rect
            fill_rect(
                canvas,
                int(round(left)),
                int(round(top)),
                int(round(left + w)),
                int(round(top + h)),
                to_rgba8(color_for_value(value, vmin, vmax)),
            )


def draw_legend(
    canvas: np.ndarray,
    *,
    vmin: float,
    vmax: float,
    x: float,
    y: float,
    height: float,
    style: ChartStyle,
    font: FontFace,
) -> None:
    width = style.legend_bar_width
    steps = max(math.ceil(height), 2)
    strip_h = height / steps
    for s in range(steps):
        t = s / (steps - 1)
        value = vmax - t * (vmax - vmin)
        y0 = y + s * strip_h
        fill_rect(
            canvas,
            int(round(x)),
            int(math.floor(y0)),
            int(round(x + width)),
            int(math.ceil(y0 + strip_h)),
            to_rgba8(color_for_value(value, vmin, vmax)),
        )
    stroke_rect(
        canvas,
        int(round(x)),
        int(round(y)),
        int(round(x + width)),
        int(round(y + height)),
        style.frame_color,
    )

    ticks = compute_ticks(vmin, vmax)
    span = vmax - vmin
    positions = y + height * (1.0 - (ticks - vmin) / span)
    for idx in thin_tick_positions(positions, style.min_label_distance):
        ty = float(positions[idx])
        draw_segment(canvas, x + width, ty, x + width + style.legend_tick_len, ty, style.frame_color)
        draw_text(
            canvas,
            x + width + style.legend_tick_len + 4,
            ty,
            format_tick(float(ticks[idx]), decimals=style.legend_decimals),
            style.text_color,
            font,
            anchor=(0.0, 0.5),
        )
