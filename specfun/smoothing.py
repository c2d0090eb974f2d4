"""Order statistics and windowed trimmed means."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def quickselect(values: Sequence[float], k: int) -> float:
    """Return the k-th smallest of values, counting from zero.

    The input is not modified.
    """
    arr = [float(v) for v in values]
    n = len(arr)
    if n == 0:
        raise ValueError("values must not be empty")
    if not 0 <= k < n:
        raise IndexError(f"k must lie in [0, {n}), got {k}")

    def swap(p: int, q: int) -> None:
        arr[p], arr[q] = arr[q], arr[p]

    lo = 0
    hi = n - 1
    while True:
        if hi <= lo + 1:
            if hi == lo + 1 and arr[hi] < arr[lo]:
                swap(lo, hi)
            return arr[k]
        mid = (lo + hi) >> 1
        swap(mid, lo + 1)
        if arr[lo] > arr[hi]:
            swap(lo, hi)
        if arr[lo + 1] > arr[hi]:
            swap(lo + 1, hi)
        if arr[lo] > arr[lo + 1]:
            swap(lo, lo + 1)
        i = lo + 1
        j = hi
        pivot = arr[lo + 1]
        while True:
            i += 1
            while arr[i] < pivot:
                i += 1
            j -= 1
            while arr[j] > pivot:
                j -= 1
            if j < i:
                break
            swap(i, j)
        arr[lo + 1] = arr[j]
        arr[j] = pivot
        if j >= k:
            hi = j - 1
        if j <= k:
            lo = i


def _check_trim(n: int, k: int) -> None:
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if n - 2 * k <= 0:
        raise ValueError(f"cannot trim {k} values from each end of {n}")


def trimmed_sum(values: Sequence[float], k: int) -> float:
    """Sum of values after dropping the k smallest and the k largest.

    Ties at the cut points are shared out by weight.
    """
    x = [float(v) for v in values]
    n = len(x)
    _check_trim(n, k)
    low = quickselect(x, k)
    high = quickselect(x, n - k - 1)

    below_low = sum(1 for r in x if r < low)
    at_low = sum(1 for r in x if r == low)
    below_high = sum(1 for r in x if r < high)
    at_high = sum(1 for r in x if r == high)
    w_low = (at_low + below_low - k) / at_low
    w_high = (n - k - below_high) / at_high

    total = 0.0
    for r in x:
        if low < r < high:
            total += r
        elif r < low or r > high:
            continue
        elif r == low:
            total += w_low * r
        else:
            total += w_high * r
    return total


def trimmed_mean(values: Sequence[float], k: int) -> float:
    """Mean of values after dropping the k smallest and the k largest."""
    return trimmed_sum(values, k) / (len(values) - 2 * k)


def windowed_trimmed_mean(values: Sequence[float], half_window_width: int, clip: float) -> np.ndarray:
    """Trimmed mean over a sliding window centred on each position.

    The window holds 2 * half_window_width + 1 values and int(width * clip)
    are dropped from each end. Positions too near the ends for a full
    window are left at zero.
    """
    if half_window_width < 0:
        raise ValueError("half_window_width must not be negative")
    data = np.asarray(values, dtype=float)
    length = len(data)
    width = 2 * half_window_width + 1
    k = int(width * clip)
    result = np.zeros(length)
    for i in range(half_window_width, length - half_window_width):
        window = data[i - half_window_width : i + half_window_width + 1].tolist()
        result[i] = trimmed_mean(window, k)
    return result