"""Classic recursive enumerations and computations."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from functools import lru_cache

__all__ = [
    "binary_strings_without_consecutive_ones",
    "combination_sum",
    "fibonacci",
    "reverse_in_place",
    "subsequences",
    "sum_accumulated",
    "sum_recursive",
]


def binary_strings_without_consecutive_ones(length: int) -> list[str]:
    """All binary strings of ``length`` with no two adjacent ones, '0' branches first."""
    if length < 0:
        raise ValueError("length must not be negative")
    results: list[str] = []

    def extend(prefix: str, last_was_one: bool) -> None:
        if len(prefix) == length:
            results.append(prefix)
            return
        extend(prefix + "0", False)
        if not last_was_one:
            extend(prefix + "1", True)

    extend("", False)
    return results


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Combinations of candidates (reuse allowed) that sum to ``target``."""
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []

    def explore(start: int, remaining: int, chosen: list[int]) -> None:
        if start == len(pool):
            if remaining == 0:
                results.append(list(chosen))
            return
        value = pool[start]
        if remaining >= value:
            chosen.append(value)
            explore(start, remaining - value, chosen)
            chosen.pop()
        explore(start + 1, remaining, chosen)

    explore(0, target, [])
    return results


@lru_cache(maxsize=None)
def fibonacci(n: int) -> int:
    """The n-th Fibonacci number; values of n below 2 are returned unchanged."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def reverse_in_place(values: MutableSequence) -> None:
    """Reverse ``values`` by swapping from both ends."""
    left, right = 0, len(values) - 1
    while left < right:
        values[left], values[right] = values[right], values[left]
        left += 1
        right -= 1


def subsequences(values: Iterable[int]) -> list[list[int]]:
    """Every subsequence, branches that take an element coming first."""
    items = list(values)
    results: list[list[int]] = []

    def walk(index: int, chosen: list[int]) -> None:
        if index >= len(items):
            results.append(list(chosen))
            return
        chosen.append(items[index])
        walk(index + 1, chosen)
        chosen.pop()
        walk(index + 1, chosen)

    walk(0, [])
    return results


def sum_accumulated(n: int) -> int:
    """Sum of 1..n carried along in an accumulator; 0 when n < 1."""
    total = 0
    while n >= 1:
        total += n
        n -= 1
    return total


def sum_recursive(n: int) -> int:
    """Sum of 1..n computed as n plus the sum below it."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return n + sum_recursive(n - 1)