import pytest

from dsakit.arrays import (
    count_perfect_squares,
    find_duplicates,
    max_subarray_sum,
    merge_sort,
    next_smaller_or_equal,
    sort_colors,
    three_sum_triplets,
)


def test_three_sum_triplets_sum_to_target():
    values = [-1, 0, 1, 2, -1, -4]
    triplets = three_sum_triplets(values, 0)
    assert len(triplets) > 0
    for triplet in triplets:
        assert sum(triplet) == 0
        assert all(item in values for item in triplet)


def test_three_sum_triplets_custom_target():
    values = [1, 2, 3, 4, 5]
    triplets = three_sum_triplets(values, 9)
    assert len(triplets) > 0
    assert all(sum(t) == 9 for t in triplets)


def test_find_duplicates_example():
    data = [4, 3, 2, 7, 8, 2, 3, 1]
    assert find_duplicates(data) == [2, 3]
    assert data == [4, 3, 2, 7, 8, 2, 3, 1]


def test_find_duplicates_out_of_range():
    with pytest.raises(ValueError):
        find_duplicates([1, 5])


def test_count_perfect_squares():
    assert count_perfect_squares("1 4 5 9 10") == 3


def test_count_perfect_squares_rejects_text():
    with pytest.raises(ValueError):
        count_perfect_squares("4 x")


def test_next_smaller_or_equal_increasing_has_none():
    assert next_smaller_or_equal([1, 2, 3, 4]) == [-1, -1, -1, -1]


def test_next_smaller_or_equal_invariant():
    values = [4, 8, 5, 2, 25, 5, 7, 1]
    result = next_smaller_or_equal(values)
    assert len(result) == len(values)
    assert result[-1] == -1
    for index, (value, found) in enumerate(zip(values, result)):
        if found != -1:
            assert found <= value
            assert found in values[index + 1:]


@pytest.mark.parametrize(
    "values",
    [[2, 0, 2, 1, 1, 0], [0, 0, 0], [2, 2, 1], [1], [], [2, 1, 0, 0, 1, 2, 0]],
)
def test_sort_colors_matches_sorted(values):
    original = list(values)
    assert sort_colors(values) == sorted(values)
    assert values == original


def test_max_subarray_sum_example():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_sum_all_negative():
    assert max_subarray_sum([-5, -1, -3]) == -1


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


@pytest.mark.parametrize(
    "values",
    [[4, 8, 6, 2, 9, 7, 3], [], [1], [3, 3, 1, 1], list(range(20, 0, -1))],
)
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)