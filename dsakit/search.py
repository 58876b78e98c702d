"""Binary-search based lookups."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from math import inf

__all__ = ["lower_bound", "median_of_sorted"]


def lower_bound(values: Sequence[int], x: int) -> int:
    """Index of the first element not less than ``x`` in sorted ``values``, or -1."""
    index = bisect_left(values, x)
    return index if index < len(values) else -1


def median_of_sorted(first: Sequence[int], second: Sequence[int]) -> float:
    """Median of the union of two sorted sequences, found by partitioning the shorter one."""
    a, b = list(first), list(second)
    if len(a) > len(b):
        a, b = b, a
    n, m = len(a), len(b)
    if n + m == 0:
        raise ValueError("median of two empty sequences is undefined")
    half = (n + m + 1) // 2
    low, high = 0, n
    while low <= high:
        cut = (low + high) // 2
        cut2 = half - cut
        left1 = a[cut - 1] if cut > 0 else -inf
        right1 = a[cut] if cut < n else inf
        left2 = b[cut2 - 1] if cut2 > 0 else -inf
        right2 = b[cut2] if cut2 < m else inf
        if left1 <= right2 and left2 <= right1:
            if (n + m) % 2:
                return float(max(left1, left2))
            return (max(left1, left2) + min(right1, right2)) / 2
        if left1 > right2:
            high = cut - 1
        else:
            low = cut + 1
    raise ValueError("inputs must be sorted")