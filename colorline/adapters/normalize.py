from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
import math
from typing import Any

import numpy as np

from colorline.errors import ChartDataError
from colorline.series import ColorList


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_markers(points: Any) -> tuple[tuple[int, float], ...]:
    """Coerce marker input into ``(x, y)`` pairs sorted by ``x``.

    Keys that are not non-negative integers are dropped, as are absent values
    (``None``, NaN and infinities). Mappings, pandas ``Series`` (index used as
    ``x``), numpy arrays, torch tensors and plain sequences (position used as
    ``x``) are accepted.
    """

    out: dict[int, float] = {}
    for key, raw in _iter_items(points):
        if not _is_column_key(key):
            continue
        value = coerce_value(raw, label=f"y[{key}]")
        if value is None:
            continue
        out[int(key)] = value
    return tuple(sorted(out.items()))


def coerce_value(raw: Any, *, label: str = "y") -> float | None:
    if raw is None:
        return None
    if isinstance(raw, Decimal):
        value = float(raw)
    elif torch is not None and isinstance(raw, torch.Tensor):
        value = float(raw.detach().cpu().item())
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} is not numeric: {raw!r}") from exc
    if not math.isfinite(value):
        return None
    return value


def coerce_colors(colors: Iterable[object] | None) -> ColorList:
    if colors is None:
        return ()
    if isinstance(colors, (str, int)):
        return (colors,)
    return tuple(colors)


def _is_column_key(key: Any) -> bool:
    if isinstance(key, (bool, np.bool_)):
        return False
    if not isinstance(key, (int, np.integer)):
        return False
    return int(key) >= 0


def _iter_items(points: Any) -> Iterable[tuple[Any, Any]]:
    if points is None:
        return ()

    if pd is not None and isinstance(points, pd.Series):
        return list(points.items())

    if torch is not None and isinstance(points, torch.Tensor):
        tensor = points.detach()
        if tensor.ndim != 1:
            raise ChartDataError("marker tensor must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return enumerate(tensor.to(torch.float64).numpy().tolist())

    if isinstance(points, np.ndarray):
        if points.ndim != 1:
            raise ChartDataError("marker array must be 1-D")
        return enumerate(points.tolist())

    if isinstance(points, Mapping):
        return list(points.items())

    if isinstance(points, Sequence) and not isinstance(points, (str, bytes, bytearray)):
        return enumerate(points)

    raise ChartDataError(f"unsupported marker input type: {type(points)!r}")
