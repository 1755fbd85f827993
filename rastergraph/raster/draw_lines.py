from __future__ import annotations

import numpy as np

from rastergraph.config import RGBA
from rastergraph.raster.canvas import draw_pixel


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: int = 1) -> None:
    if xs.size < 2:
        return
    px = np.rint(xs).astype(np.int64)
    py = np.rint(ys).astype(np.int64)
    for i in range(px.size - 1):
        _draw_line_segment(dst, int(px[i]), int(py[i]), int(px[i + 1]), int(py[i + 1]), color=color, width=width)


def draw_segment(dst: np.ndarray, x0: float, y0: float, x1: float, y1: float, color: RGBA, width: int = 1) -> None:
    _draw_line_segment(
        dst,
        int(round(x0)),
        int(round(y0)),
        int(round(x1)),
        int(round(y1)),
        color=color,
        width=width,
    )


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    # Brush spans `width` pixels, starting half a width before the centre.
    lo = -(max(1, width) // 2)
    hi = lo + max(1, width)
    for yy in range(y + lo, y + hi):
        for xx in range(x + lo, x + hi):
            draw_pixel(dst, xx, yy, color)
