import io

import pytest

from dsakit.matrix import (
    add,
    format_matrix,
    from_column_major,
    from_row_major,
    main,
    multiply,
    transpose,
)


def test_row_major_round_trip():
    values = list(range(1, 13))
    matrix = from_row_major(values, 3, 4)
    assert len(matrix) == 3
    assert all(len(row) == 4 for row in matrix)
    assert [v for row in matrix for v in row] == values


def test_column_major_is_transpose_of_row_major():
    values = list(range(1, 7))
    assert from_column_major(values, 2, 3) == transpose(from_row_major(values, 3, 2))


def test_wrong_value_count():
    with pytest.raises(ValueError):
        from_row_major([1, 2, 3], 2, 2)


def test_transpose_twice_is_identity():
    matrix = from_row_major(range(6), 2, 3)
    assert transpose(transpose(matrix)) == matrix


def test_add_zero_and_commutative():
    a = from_row_major(range(9), 3, 3)
    b = from_row_major(range(9, 18), 3, 3)
    zero = from_row_major([0] * 9, 3, 3)
    assert add(a, zero) == a
    assert add(a, b) == add(b, a)


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add([[1, 2]], [[1], [2]])


def test_multiply_identity():
    a = from_row_major(range(1, 10), 3, 3)
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert multiply(a, identity) == a
    assert multiply(identity, a) == a


def test_multiply_transpose_symmetry():
    a = from_row_major(range(1, 7), 2, 3)
    b = from_row_major(range(3, 9), 3, 2)
    assert transpose(multiply(a, b)) == multiply(transpose(b), transpose(a))


def test_multiply_shape_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_format_matrix():
    assert format_matrix([[1, 2], [3, 4]]) == "1 2\n3 4"


def test_main_row_major(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1 2 3 4 5 6 7 8 9\n6\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Resultant Array:\n1 2 3\n4 5 6\n7 8 9" in out


def test_main_transpose_and_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1 2 3 4 5 6 7 8 9"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Transposed matrix:\n1 4 7\n2 5 8\n3 6 9" in out