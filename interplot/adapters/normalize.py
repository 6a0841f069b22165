from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from interplot.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_values(values: Any = None, *, x: Any = None, y: Any = None) -> np.ndarray:
    """Coerce series input to a float64 ``(n, 2)`` array of ``(x, y)`` rows.

    Accepts either ``values`` (an ``(n, 2)`` array-like, a two-column
    DataFrame or a sequence of pairs) or separate ``x``/``y`` columns. When
    only ``y`` is given, x defaults to the sample index. Non-finite entries
    are kept; items skip them when computing bounds.
    """

    if values is not None:
        if x is not None or y is not None:
            raise PlotDataError("pass either values or x/y, not both")
        return _coerce_pairs(values)

    if y is None:
        raise PlotDataError("y input is required")
    y_arr = _coerce_1d_numeric(y, label="y")
    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = _coerce_1d_numeric(x, label="x")
    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
    return np.column_stack((x_arr, y_arr)).astype(np.float64, copy=False)


def _coerce_pairs(values: Any) -> np.ndarray:
    if pd is not None and isinstance(values, pd.DataFrame):
        numeric_cols = [c for c in values.columns if _is_numeric_dtype(values[c])]
        if len(numeric_cols) != 2:
            raise PlotDataError("DataFrame input must contain exactly two numeric columns")
        return np.column_stack(
            (
                _coerce_ndarray(values[numeric_cols[0]].to_numpy(), label="x"),
                _coerce_ndarray(values[numeric_cols[1]].to_numpy(), label="y"),
            )
        )

    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        values = tensor.to(torch.float64).numpy()

    if isinstance(values, np.ndarray):
        arr = values
    elif isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        if len(values) == 0:
            return np.empty((0, 2), dtype=np.float64)
        arr = np.asarray(values, dtype=object)
    else:
        raise PlotDataError(f"unsupported values input type: {type(values)!r}")

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise PlotDataError(f"values must have shape (n, 2), got {arr.shape}")
    return np.column_stack(
        (
            _coerce_ndarray(arr[:, 0], label="x"),
            _coerce_ndarray(arr[:, 1], label="y"),
        )
    )


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

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
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
