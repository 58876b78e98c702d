"""Small dense matrices built from flat input, with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

__all__ = [
    "from_row_major",
    "from_column_major",
    "transpose",
    "add",
    "multiply",
    "format_matrix",
    "main",
]

Matrix = list[list[int]]

MENU = (
    "MENU:-\n1. Row major display\n2. Column major display\n3. Display transpose\n"
    "4. Matrix addition\n5. Matrix Multiplication\n6. Exit\n"
)


def from_row_major(values: Iterable[int], rows: int, cols: int) -> Matrix:
    """Build a ``rows`` x ``cols`` matrix filling one row after another."""
    items = list(values)
    if rows < 0 or cols < 0 or len(items) != rows * cols:
        raise ValueError(f"expected {rows * cols} values for a {rows}x{cols} matrix, got {len(items)}")
    return [items[r * cols:(r + 1) * cols] for r in range(rows)]


def from_column_major(values: Iterable[int], rows: int, cols: int) -> Matrix:
    """Build a ``rows`` x ``cols`` matrix filling one column after another."""
    columns = from_row_major(values, cols, rows)
    if rows == 0:
        return []
    if cols == 0:
        return [[] for _ in range(rows)]
    return transpose(columns)


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    width = len(matrix[0]) if matrix else 0
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows differ in length")
    return len(matrix), width


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Swap rows and columns."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Matrix product ``a`` times ``b``."""
    _, inner = _shape(a)
    rows_b, _ = _shape(b)
    if inner != rows_b:
        raise ValueError("columns of the first matrix must equal rows of the second")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render rows on separate lines with values separated by spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def _run_choice(choice: int, size: int, tokens: Iterator[str], out) -> None:
    cells = size * size
    if choice in (1, 2, 3):
        out.write("Enter elements one by one:\n")
        values = _read(tokens, cells)
        if choice == 1:
            out.write("Resultant Array:\n" + format_matrix(from_row_major(values, size, size)) + "\n")
        elif choice == 2:
            out.write("Resultant Array:\n" + format_matrix(from_column_major(values, size, size)) + "\n")
        else:
            result = transpose(from_row_major(values, size, size))
            out.write("\nTransposed matrix:\n" + format_matrix(result) + "\n")
    elif choice in (4, 5):
        out.write("Enter first matrix:\n")
        first = from_row_major(_read(tokens, cells), size, size)
        out.write("Enter Second matrix:\n")
        second = from_row_major(_read(tokens, cells), size, size)
        if choice == 4:
            out.write("Result matrix:\n" + format_matrix(add(first, second)) + "\n")
        else:
            out.write("Resultant matrix:\n" + format_matrix(multiply(first, second)) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive matrix menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="dsakit-matrix", description="Interactive matrix operations.")
    parser.add_argument("--size", type=int, default=3, help="rows and columns of the square matrices")
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("--size must be positive")
    tokens = _tokens(sys.stdin)
    out = sys.stdout
    while True:
        out.write(MENU)
        try:
            raw = next(tokens)
        except StopIteration:
            return 0
        try:
            choice = int(raw)
        except ValueError:
            continue
        if choice == 6:
            return 0
        try:
            _run_choice(choice, args.size, tokens, out)
        except StopIteration:
            return 0
        except ValueError as error:
            out.write(f"Invalid input: {error}\n")