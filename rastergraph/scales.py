from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np


MIN_PADDING = 0.1
PADDING_RATIO = 0.1
DEFAULT_MIN_LABEL_DISTANCE = 20.0


@dataclass(frozen=True)
class Bounds:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class PlotArea:
    x0: float
    y0: float
    width: float
    height: float

    @property
    def x1(self) -> float:
        return self.x0 + self.width

    @property
    def y1(self) -> float:
        return self.y0 + self.height


@dataclass(frozen=True)
class LinearScale:
    """Affine data-to-pixel map: ``offset + direction * (value - anchor) * factor``."""

    offset: float
    anchor: float
    factor: float
    direction: int = 1

    def apply(self, value: float) -> float:
        return self.offset + self.direction * (float(value) - self.anchor) * self.factor

    def apply_array(self, values: np.ndarray) -> np.ndarray:
        return self.offset + self.direction * (np.asarray(values, dtype=np.float64) - self.anchor) * self.factor


def compute_bounds(x: np.ndarray, y: np.ndarray) -> Bounds:
    min_x, max_x = _pad_range(x, label="x")
    min_y, max_y = _pad_range(y, label="y")
    return Bounds(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


def _pad_range(values: np.ndarray, *, label: str) -> tuple[float, float]:
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        raise ValueError(f"{label} has no finite values")
    raw_min = float(np.min(finite))
    raw_max = float(np.max(finite))
    margin = max((raw_max - raw_min) * PADDING_RATIO, MIN_PADDING)
    # Both ends lean towards zero so the origin is usually inside the plot.
    lo = min(raw_min, -raw_max * PADDING_RATIO) - margin
    hi = max(raw_max, -lo * PADDING_RATIO) + margin
    return lo, hi


def build_scales(bounds: Bounds, area: PlotArea) -> tuple[LinearScale, LinearScale]:
    if bounds.width <= 0 or bounds.height <= 0:
        raise ValueError("bounds must have a positive extent on both axes")
    x_scale = LinearScale(offset=area.x0, anchor=bounds.min_x, factor=area.width / bounds.width)
    # Pixel rows grow downwards, data y grows upwards.
    y_scale = LinearScale(offset=area.y0, anchor=bounds.max_y, factor=area.height / bounds.height, direction=-1)
    return x_scale, y_scale


def tick_count_for_span(vmin: float, vmax: float) -> int:
    span = math.ceil(vmax - vmin)
    if span <= 6:
        return 6
    if span <= 12:
        return 8
    return 10


def compute_ticks(vmin: float, vmax: float) -> np.ndarray:
    if not vmax > vmin:
        return np.asarray([vmin], dtype=np.float64)
    ticks = np.linspace(vmin, vmax, tick_count_for_span(vmin, vmax), dtype=np.float64)
    ticks[-1] = vmax
    return ticks


def thin_tick_positions(pixels: np.ndarray, min_distance: float = DEFAULT_MIN_LABEL_DISTANCE) -> list[int]:
    """Indices of ticks whose labels can be drawn, walking left to right.

    A tick is kept when it lies more than ``min_distance`` pixels away from the
    last kept tick.
    """
    kept: list[int] = []
    last: float | None = None
    for idx, pos in enumerate(np.asarray(pixels, dtype=np.float64).tolist()):
        if last is not None and abs(pos - last) <= min_distance:
            continue
        kept.append(idx)
        last = pos
    return kept


def format_tick(value: float, *, decimals: int = 2) -> str:
    out = f"{value:.{decimals}f}"
    if out.startswith("-") and float(out) == 0.0:
        out = out[1:]
    return out


def format_ticks(ticks: np.ndarray, *, decimals: int = 2) -> list[str]:
    return [format_tick(float(v), decimals=decimals) for v in ticks.tolist()]


def is_inside_axis(position: float, lo: float, hi: float) -> bool:
    return lo <= position <= hi
