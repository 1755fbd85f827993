from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path


RGBA = tuple[int, int, int, int]

DEFAULT_FONT_SIZE_PX = 14.0


@dataclass(frozen=True)
class ChartStyle:
    background: RGBA = (255, 255, 255, 255)
    plot_bg_color: RGBA = (250, 250, 250, 255)
    frame_color: RGBA = (0, 0, 0, 255)
    axis_color: RGBA = (77, 77, 77, 255)
    grid_color: RGBA = (217, 217, 217, 255)
    text_color: RGBA = (0, 0, 0, 255)

    # plot region gutters
    padding: float = 40.0
    left_padding_ratio: float = 1.5
    legend_reserve: float = 100.0
    legend_gap: float = 20.0
    legend_bar_width: float = 20.0

    axis_width: int = 2
    tick_mark_len: int = 5
    legend_tick_len: int = 6
    min_label_distance: float = 20.0
    x_label_offset: float = 14.0
    y_label_offset: float = 12.0
    point_label_offset: float = 10.0
    tick_decimals: int = 2
    legend_decimals: int = 3


@dataclass(frozen=True)
class FontConfig:
    path: Path | None = None
    size_px: float = DEFAULT_FONT_SIZE_PX

    @classmethod
    def from_env(
        cls,
        *,
        path_env_var: str = "RASTERGRAPH_FONT_PATH",
        size_env_var: str = "RASTERGRAPH_FONT_SIZE",
    ) -> "FontConfig":
        raw_path = os.getenv(path_env_var, "").strip()
        path = Path(raw_path).expanduser() if raw_path else None
        return cls(path=path, size_px=_parse_font_size(size_env_var))


def _parse_font_size(env_var: str) -> float:
    raw = os.getenv(env_var, "").strip()
    if raw == "":
        return DEFAULT_FONT_SIZE_PX
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_FONT_SIZE_PX
    if value <= 0:
        return DEFAULT_FONT_SIZE_PX
    return value
