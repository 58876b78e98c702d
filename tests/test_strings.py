import re

import pytest

from dsakit.strings import build_lps, find_substring, is_palindrome, kmp_search, z_array


def test_z_array_documented_example():
    result = z_array("aabxaabxcaabxaabxay")
    assert result == [0, 1, 0, 0, 4, 1, 0, 0, 0, 8, 1, 0, 0, 5, 1, 0, 0, 1, 0]


@pytest.mark.parametrize("text", ["abacaba", "aaaaa", "xyz", "", "abab"])
def test_z_array_invariant(text):
    z = z_array(text)
    assert len(z) == len(text)
    for i in range(1, len(text)):
        assert text[i:i + z[i]] == text[:z[i]]
        if i + z[i] < len(text):
            assert text[i + z[i]] != text[z[i]]


def test_build_lps_repeated():
    assert build_lps("aaaa") == [0, 1, 2, 3]


@pytest.mark.parametrize("pattern", ["abab", "aabaaab", "abc", "a"])
def test_build_lps_invariant(pattern):
    lps = build_lps(pattern)
    for i, length in enumerate(lps):
        prefix = pattern[:i + 1]
        assert length < len(prefix)
        assert prefix[:length] == prefix[len(prefix) - length:]


@pytest.mark.parametrize(
    "text,pattern",
    [("abababab", "abab"), ("aaaaa", "aa"), ("hello world", "o"), ("abc", "d"), ("ab", "abc")],
)
def test_kmp_search_matches_regex(text, pattern):
    expected = [m.start() for m in re.finditer(f"(?={re.escape(pattern)})", text)]
    assert kmp_search(text, pattern) == expected


def test_kmp_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("abc", "")


def test_find_substring():
    text = "Hello, world!"
    assert find_substring(text, "world") == text.index("world")
    assert find_substring(text, "planet") is None


def test_is_palindrome():
    assert is_palindrome("ggabagg") is True
    assert is_palindrome("ggabag") is False
    assert is_palindrome("") is True