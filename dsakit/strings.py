"""String searching: KMP, Z-array, substring lookup and palindromes."""

from __future__ import annotations

__all__ = ["build_lps", "kmp_search", "z_array", "find_substring", "is_palindrome"]


def build_lps(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for each prefix of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Start indices of every (possibly overlapping) occurrence of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = build_lps(pattern)
    matches: list[int] = []
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                matches.append(i - j)
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    return matches


def z_array(text: str) -> list[int]:
    """Length of the longest common prefix of ``text`` and each suffix; position 0 is 0."""
    n = len(text)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and text[z[i]] == text[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def find_substring(text: str, substring: str) -> int | None:
    """Index of the first occurrence of ``substring``, or None when absent."""
    index = text.find(substring)
    return None if index < 0 else index


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same forwards and backwards."""
    left, right = 0, len(text) - 1
    while left < right:
        if text[left] != text[right]:
            return False
        left += 1
        right -= 1
    return True