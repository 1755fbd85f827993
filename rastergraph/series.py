from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

import numpy as np


class ChartMode(Enum):
    UNSET = "unset"
    SERIES = "series"
    HEATMAP = "heatmap"


@dataclass(frozen=True)
class LineStyle:
    """Independent drawing modes for one series.

    Every enabled mode is drawn, stacked in the order solid, dots, pillars.
    A style with no mode enabled draws nothing.
    """

    solid: bool = False
    dots: bool = False
    pillars: bool = False
    solid_width: int = 2
    dots_radius: float = 3.0
    pillars_width: int = 2

    def with_solid(self, width: int | None = None) -> "LineStyle":
        if width is not None and width <= 0:
            raise ValueError("solid width must be > 0")
        return replace(self, solid=True, solid_width=self.solid_width if width is None else int(width))

    def with_dots(self, radius: float | None = None) -> "LineStyle":
        if radius is not None and radius <= 0:
            raise ValueError("dots radius must be > 0")
        return replace(self, dots=True, dots_radius=self.dots_radius if radius is None else float(radius))

    def with_pillars(self, width: int | None = None) -> "LineStyle":
        if width is not None and width <= 0:
            raise ValueError("pillars width must be > 0")
        return replace(self, pillars=True, pillars_width=self.pillars_width if width is None else int(width))

    @property
    def is_empty(self) -> bool:
        return not (self.solid or self.dots or self.pillars)


@dataclass(frozen=True)
class Series:
    x: np.ndarray
    y: np.ndarray
    style: LineStyle
    labels: tuple[str, ...] = ()

    @property
    def finite_mask(self) -> np.ndarray:
        return np.isfinite(self.x) & np.isfinite(self.y)


@dataclass(frozen=True)
class HeatmapDataset:
    x: np.ndarray
    y: np.ndarray
    values: np.ndarray

    @property
    def shape(self) -> tuple[int, int]:
        return (self.y.size, self.x.size)

    def value_range(self) -> tuple[float, float]:
        finite = self.values[np.isfinite(self.values)]
        return float(np.min(finite)), float(np.max(finite))


@dataclass(frozen=True)
class EmptyContent:
    mode: ChartMode = ChartMode.UNSET


@dataclass(frozen=True)
class SeriesContent:
    series: tuple[Series, ...]
    mode: ChartMode = ChartMode.SERIES

    def appended(self, item: Series) -> "SeriesContent":
        return SeriesContent(series=self.series + (item,))


@dataclass(frozen=True)
class HeatmapContent:
    dataset: HeatmapDataset
    mode: ChartMode = ChartMode.HEATMAP


ChartContent = EmptyContent | SeriesContent | HeatmapContent
