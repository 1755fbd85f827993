from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from rastergraph.errors import ChartDataError


try:
    import pandas as pd
except ImportError:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except ImportError:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_vector(value: Any, *, label: str) -> np.ndarray:
    """Convert a 1-D input into a float64 array; ``None`` becomes an empty array."""
    if value is None:
        return np.empty(0, dtype=np.float64)

    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy().copy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def coerce_grid(values: Any) -> list[np.ndarray]:
    """Split a 2-D input into float64 rows without requiring equal row lengths.

    Empty inputs of any dimensionality yield no rows.
    """
    if values is None:
        return []
    if pd is not None and isinstance(values, pd.DataFrame):
        values = values.to_numpy()
    if torch is not None and isinstance(values, torch.Tensor):
        values = values.detach().cpu().to(torch.float64).numpy()
    if isinstance(values, np.ndarray):
        if values.size == 0:
            return []
        if values.ndim != 2:
            raise ChartDataError("values must be 2-D")
        return [_coerce_ndarray(row, label="values") for row in values]
    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return [coerce_vector(row, label="values") for row in values]
    raise ChartDataError(f"unsupported values input type: {type(values)!r}")


def coerce_labels(labels: Any) -> tuple[str, ...] | None:
    if labels is None:
        return None
    if isinstance(labels, (str, bytes)):
        raise ChartDataError("labels must be a sequence of strings")
    return tuple(str(item) for item in labels)


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=True)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
