from rastergraph.api import new_chart
from rastergraph.arrays import int_linear_array, linear_array, scale_array, to_float_array, uniform_array
from rastergraph.chart import Chart, ChartLayout
from rastergraph.config import ChartStyle, FontConfig
from rastergraph.errors import (
    ChartDataError,
    ChartError,
    ChartLayoutError,
    ChartModeError,
    EmptyChartError,
    FontLoadError,
    SeriesLengthError,
)
from rastergraph.scales import Bounds, LinearScale, PlotArea
from rastergraph.series import ChartMode, HeatmapDataset, LineStyle, Series

__all__ = [
    "Bounds",
    "Chart",
    "ChartDataError",
    "ChartError",
    "ChartLayout",
    "ChartLayoutError",
    "ChartMode",
    "ChartModeError",
    "ChartStyle",
    "EmptyChartError",
    "FontConfig",
    "FontLoadError",
    "HeatmapDataset",
    "LineStyle",
    "LinearScale",
    "PlotArea",
    "Series",
    "SeriesLengthError",
    "int_linear_array",
    "linear_array",
    "new_chart",
    "scale_array",
    "to_float_array",
    "uniform_array",
]
