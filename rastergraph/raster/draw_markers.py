from __future__ import annotations

import numpy as np

from rastergraph.config import RGBA
from rastergraph.raster.canvas import draw_pixel


def draw_markers(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, radius: float = 1.0) -> None:
    r = max(0.0, float(radius))
    for x, y in zip(xs.tolist(), ys.tolist(), strict=False):
        _draw_disc(dst, float(x), float(y), color=color, radius=r)


def _draw_disc(dst: np.ndarray, cx: float, cy: float, color: RGBA, radius: float) -> None:
    x0 = int(np.floor(cx - radius))
    x1 = int(np.ceil(cx + radius))
    y0 = int(np.floor(cy - radius))
    y1 = int(np.ceil(cy + radius))
    r2 = radius * radius
    for yy in range(y0, y1 + 1):
        for xx in range(x0, x1 + 1):
            if (xx - cx) ** 2 + (yy - cy) ** 2 <= r2:
                draw_pixel(dst, xx, yy, color)
