from __future__ import annotations


class ChartError(Exception):
    """Base class for every error raised by rastergraph."""


class ChartDataError(ChartError, ValueError):
    """Input data violates a precondition of the chart."""


class SeriesLengthError(ChartDataError):
    pass


class ChartModeError(ChartError):
    """A series and a heatmap were mixed on the same chart."""


class EmptyChartError(ChartError):
    pass


class ChartLayoutError(ChartError):
    pass


class FontLoadError(ChartError):
    pass
