from __future__ import annotations

from rastergraph.chart import Chart
from rastergraph.config import ChartStyle, FontConfig


DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 400


def new_chart(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    *,
    style: ChartStyle | None = None,
    font_config: FontConfig | None = None,
) -> Chart:
    if width <= 0:
        raise ValueError("width must be > 0")
    if height <= 0:
        raise ValueError("height must be > 0")
    return Chart(width=width, height=height, style=style, font_config=font_config)
