"""Dynamic-programming style problems over integer lists."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["has_subarray_sum", "rob"]


def has_subarray_sum(nums: Iterable[int], k: int) -> bool:
    """True when some non-empty contiguous run of ``nums`` sums exactly to ``k``."""
    seen = {0}
    running = 0
    for value in nums:
        running += value
        if running - k in seen:
            return True
        seen.add(running)
    return False


def rob(nums: Iterable[int]) -> int:
    """Largest total from picking values no two of which are adjacent."""
    before_previous = previous = 0
    for value in nums:
        before_previous, previous = previous, max(previous, before_previous + value)
    return previous