from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from .contracts.errors import NoDataError


def as_float_array(values: Iterable[float]) -> np.ndarray:
    return np.asarray(list(values), dtype=float)


def variance_stats(values: Iterable[float]) -> Tuple[float, float]:
    """Return ``(mean, error)`` where error is the standard error of the mean.

    A single sample has zero error.
    """
    arr = as_float_array(values)
    if arr.size == 0:
        raise NoDataError("cannot compute mean and error of an empty sample")
    mean = float(np.mean(arr))
    if arr.size < 2:
        return mean, 0.0
    error = float(np.sqrt(np.var(arr, ddof=1) / arr.size))
    return mean, error


def bounds(values: Iterable[float]) -> Tuple[float, float, int]:
    """``(min, max, count)`` of a non-empty sample."""
    arr = as_float_array(values)
    if arr.size == 0:
        raise NoDataError("No data to plot: there are no realizations, so no script can be prepared.")
    return float(np.min(arr)), float(np.max(arr)), int(arr.size)
