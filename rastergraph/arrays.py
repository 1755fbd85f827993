from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from rastergraph.scales import LinearScale


def int_linear_array(lo: int, hi: int) -> np.ndarray:
    """Integers ``lo, lo + 1, ..., hi - 1`` as floats."""
    if hi == lo:
        return np.empty(0, dtype=np.float64)
    return np.arange(lo, hi, dtype=np.float64)


def uniform_array(start: float, step: float, length: int) -> np.ndarray:
    if length <= 0:
        return np.empty(0, dtype=np.float64)
    return start + step * np.arange(length, dtype=np.float64)


def linear_array(lo: float, hi: float, length: int) -> np.ndarray:
    """``length`` evenly spaced values from ``lo`` to ``hi`` inclusive."""
    if hi == lo or length <= 0:
        return np.empty(0, dtype=np.float64)
    if length == 1:
        return np.asarray([lo], dtype=np.float64)
    return np.linspace(lo, hi, length, dtype=np.float64)


def to_float_array(ints: Sequence[int]) -> np.ndarray:
    return np.asarray(ints, dtype=np.float64).reshape(-1)


def scale_array(values: Sequence[float] | np.ndarray, scale: LinearScale) -> np.ndarray:
    return scale.apply_array(np.asarray(values, dtype=np.float64))
