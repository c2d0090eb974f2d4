"""Sliding-window statistics and p-value combination."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import numpy as np
from scipy import special


def fast_sum(x: Sequence[float]) -> float:
    """Sum of the values."""
    total = 0.0
    for v in x:
        total += v
    return total


def fast_product(x: Sequence[float]) -> float:
    """Product of the values."""
    product = 1.0
    for v in x:
        product *= v
    return product


def fishers_combined(x: Sequence[float]) -> float:
    """Combined p-value of the p-values x by Fisher's method."""
    values = np.asarray(x, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        chi = -2.0 * float(np.sum(np.log(values)))
    return float(special.chdtrc(2.0 * len(values), chi))


def stouffers_z(x: Sequence[float]) -> float:
    """Combined p-value of the p-values x by Stouffer's Z method."""
    values = np.asarray(x, dtype=float)
    s = float(np.sum(special.ndtri(1.0 - values)))
    z = s / math.sqrt(len(values))
    return float(special.ndtr(-z))


def weighted_stouffers_z(x: Sequence[float], w: Sequence[float]) -> float:
    """Combined p-value of the p-values x by Stouffer's Z method with weights w."""
    values = np.asarray(x, dtype=float)
    weights = np.asarray(w, dtype=float)
    if values.shape != weights.shape:
        raise ValueError("values and weights must have the same length")
    s = float(np.sum(weights * special.ndtri(1.0 - values)))
    sw = float(np.sum(weights * weights))
    z = s / math.sqrt(sw)
    return float(special.ndtr(-z))


def _check_half_width(hw: int) -> None:
    if hw < 0:
        raise ValueError("half window width must not be negative")


def windowing(x: Sequence[float], hw: int, func: Callable[[np.ndarray], float]) -> np.ndarray:
    """Apply func to each window of 2 * hw + 1 values centred on a position.

    Positions too near the ends for a full window are left at zero.
    """
    _check_half_width(hw)
    data = np.asarray(x, dtype=float)
    n = len(data)
    result = np.zeros(n)
    for i in range(hw, n - hw):
        result[i] = func(data[i - hw : i + hw + 1].copy())
    return result


def weighted_windowing(
    x: Sequence[float],
    w: Sequence[float],
    hw: int,
    func: Callable[[np.ndarray, np.ndarray], float],
) -> np.ndarray:
    """Apply func to matching windows of values and weights.

    Positions too near the ends for a full window are left at zero.
    """
    _check_half_width(hw)
    data = np.asarray(x, dtype=float)
    weights = np.asarray(w, dtype=float)
    if data.shape != weights.shape:
        raise ValueError("values and weights must have the same length")
    n = len(data)
    result = np.zeros(n)
    for i in range(hw, n - hw):
        window = slice(i - hw, i + hw + 1)
        result[i] = func(data[window].copy(), weights[window].copy())
    return result