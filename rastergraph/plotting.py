from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from rastergraph.config import ChartStyle
from rastergraph.palette import series_color, to_rgba8
from rastergraph.raster import draw_markers, draw_polyline, draw_segment, draw_text
from rastergraph.raster.fonts import FontFace
from rastergraph.scales import LinearScale
from rastergraph.series import Series


def draw_series(
    canvas: np.ndarray,
    series: Sequence[Series],
    *,
    x_scale: LinearScale,
    y_scale: LinearScale,
    baseline_y: float,
    style: ChartStyle,
    font: FontFace,
) -> None:
    """Draw every series in insertion order, colour chosen by position."""
    for index, item in enumerate(series):
        color = to_rgba8(series_color(index))
        px = x_scale.apply_array(item.x)
        py = y_scale.apply_array(item.y)
        mask = item.finite_mask
        line = item.style

        if line.solid:
            for start, stop in _contiguous_true_runs(mask):
                draw_polyline(canvas, px[start:stop], py[start:stop], color, width=line.solid_width)

        if line.dots:
            draw_markers(canvas, px[mask], py[mask], color, radius=line.dots_radius)

        if line.pillars:
            for xv, yv in zip(px[mask].tolist(), py[mask].tolist(), strict=False):
                draw_segment(canvas, xv, baseline_y, xv, yv, color, width=line.pillars_width)

        if item.labels:
            offset = style.point_label_offset
            for i in np.flatnonzero(mask).tolist():
                draw_text(canvas, px[i] + offset, py[i] + offset, item.labels[i], style.text_color, font)


def _contiguous_true_runs(mask: np.ndarray) -> list[tuple[int, int]]:
    idx = np.flatnonzero(mask)
    if idx.size == 0:
        return []
    runs: list[tuple[int, int]] = []
    start = int(idx[0])
    prev = int(idx[0])
    for v in idx[1:]:
        iv = int(v)
        if iv == prev + 1:
            prev = iv
            continue
        runs.append((start, prev + 1))
        start = iv
        prev = iv
    runs.append((start, prev + 1))
    return runs
