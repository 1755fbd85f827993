from __future__ import annotations

from rastergraph.config import RGBA


RGB = tuple[float, float, float]

SERIES_PALETTE: tuple[RGB, ...] = (
    (1.0, 0.0, 0.0),  # red
    (0.0, 0.0, 1.0),  # blue
    (0.0, 1.0, 0.0),  # green
    (1.0, 0.5, 0.0),  # orange
    (0.5, 0.0, 0.5),  # purple
    (0.0, 0.7, 0.7),  # teal
)

RAMP_EPSILON = 1e-9


def series_color(index: int) -> RGB:
    return SERIES_PALETTE[index % len(SERIES_PALETTE)]


def color_for_value(value: float, vmin: float, vmax: float) -> RGB:
    """Blue -> cyan -> green -> yellow -> red over four equal segments."""
    if vmax == vmin:
        vmax = vmin + RAMP_EPSILON
    t = (value - vmin) / (vmax - vmin)
    t = min(1.0, max(0.0, t))

    if t < 0.25:
        return (0.0, t / 0.25, 1.0)
    if t < 0.5:
        return (0.0, 1.0, 1.0 - (t - 0.25) / 0.25)
    if t < 0.75:
        return ((t - 0.5) / 0.25, 1.0, 0.0)
    return (1.0, 1.0 - (t - 0.75) / 0.25, 0.0)


def to_rgba8(color: RGB, alpha: int = 255) -> RGBA:
    r, g, b = (int(round(max(0.0, min(1.0, c)) * 255)) for c in color)
    return (r, g, b, alpha)
