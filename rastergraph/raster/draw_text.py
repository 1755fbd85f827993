from __future__ import annotations

from functools import lru_cache

import numpy as np
from PIL import Image, ImageDraw

from rastergraph.config import RGBA
from rastergraph.raster.fonts import FontFace


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    font: FontFace,
    *,
    anchor: tuple[float, float] = (0.0, 0.0),
) -> None:
    """Draw ``text`` so that the point ``(x, y)`` sits at ``anchor`` of its box.

    ``anchor`` is a fraction of the text box: ``(0, 0)`` is the top-left corner,
    ``(0.5, 0.5)`` the centre and ``(1, 0.5)`` the middle of the right edge.
    """
    if not text:
        return
    mask = _render_mask(text, font)
    h, w = mask.shape
    left = int(round(x - anchor[0] * w))
    top = int(round(y - anchor[1] * h))
    _blend_mask(dst, left, top, mask, color)


def text_size(text: str, font: FontFace) -> tuple[int, int]:
    if not text:
        return (0, 1)
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


@lru_cache(maxsize=256)
def _render_mask(text: str, font: FontFace) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    src_alpha = (color[3] / 255.0) * cov
    if not np.any(src_alpha > 0):
        return

    patch = dst[y0:y1, x0:x1]
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    dst_rgb = patch[:, :, :3].astype(np.float32)
    out_rgb = src_rgb * src_alpha[:, :, None] + dst_rgb * (1.0 - src_alpha[:, :, None])
    patch[:, :, :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    patch[:, :, 3] = 255
