from __future__ import annotations

import numpy as np

from rastergraph.config import RGBA


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    a = color[3] / 255.0
    inv = 1.0 - a
    current = dst[y, x, :3].astype(np.float32)
    dst[y, x, 0:3] = (np.asarray(color[0:3], dtype=np.float32) * a + current * inv).astype(np.uint8)
    dst[y, x, 3] = 255


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    _blend(dst[y, xa : xb + 1], color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    _blend(dst[ya : yb + 1, x], color)


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Fill the half-open pixel box ``[x0, x1) x [y0, y1)``, clipped to the canvas."""
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1], max(x0, x1))
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0], max(y0, y1))
    if xa >= xb or ya >= yb:
        return
    _blend(dst[ya:yb, xa:xb], color)


def stroke_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Outline the inclusive pixel box with corners ``(x0, y0)`` and ``(x1, y1)``."""
    draw_hline(dst, x0, x1, y0, color)
    draw_hline(dst, x0, x1, y1, color)
    draw_vline(dst, x0, y0, y1, color)
    draw_vline(dst, x1, y0, y1, color)


def _blend(view: np.ndarray, color: RGBA) -> None:
    a = color[3] / 255.0
    if a >= 1.0:
        view[..., :3] = color[0:3]
    else:
        inv = 1.0 - a
        view[..., :3] = (np.asarray(color[0:3], dtype=np.float32) * a + view[..., :3].astype(np.float32) * inv).astype(np.uint8)
    view[..., 3] = 255
