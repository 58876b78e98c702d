"""Array algorithms: pair/triplet search, duplicates, stacks, partitioning, sorting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import isqrt

__all__ = [
    "three_sum_triplets",
    "find_duplicates",
    "count_perfect_squares",
    "next_smaller_or_equal",
    "sort_colors",
    "max_subarray_sum",
    "merge_sort",
]


def three_sum_triplets(values: Iterable[int], target: int = 0) -> list[tuple[int, int, int]]:
    """Return triplets summing to ``target``.

    For every pair ``(first, second)`` with ``first`` before ``second``, a
    triplet ``(third, first, second)`` is reported when ``third`` occurred
    strictly before ``first``.
    """
    items = list(values)
    seen: set[int] = set()
    triplets: list[tuple[int, int, int]] = []
    for position, first in enumerate(items):
        for second in items[position + 1:]:
            third = target - first - second
            if third in seen:
                triplets.append((third, first, second))
        seen.add(first)
    return triplets


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Return the values occurring twice in ``nums``, whose values lie in 1..len(nums).

    Values are reported in the order their second occurrence is met.
    The input is left untouched.
    """
    marks = list(nums)
    size = len(marks)
    for value in marks:
        if not 1 <= value <= size:
            raise ValueError(f"value {value} outside the range 1..{size}")
    duplicates: list[int] = []
    # The sign of marks[v - 1] records whether v has been met; iteration
    # reads the live (possibly negated) entries, hence abs().
    for entry in marks:
        value = abs(entry)
        if marks[value - 1] < 0:
            duplicates.append(value)
        else:
            marks[value - 1] = -marks[value - 1]
    return duplicates


def count_perfect_squares(line: str) -> int:
    """Count the whitespace-separated integers in ``line`` that are perfect squares."""
    count = 0
    for token in line.split():
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None
        if value >= 0 and isqrt(value) ** 2 == value:
            count += 1
    return count


def next_smaller_or_equal(values: Iterable[int]) -> list[int]:
    """For each element, the nearest element to its right that is not larger, or -1."""
    stack: list[int] = []
    result: list[int] = []
    for value in reversed(list(values)):
        while stack and stack[-1] > value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    result.reverse()
    return result


def sort_colors(values: Iterable[int]) -> list[int]:
    """Three-way partition: zeros first, twos last, everything else in between."""
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        current = items[mid]
        if current == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif current == 2:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
        else:
            mid += 1
    return items


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new, stably sorted list."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))