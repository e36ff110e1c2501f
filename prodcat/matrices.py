"""Element-wise and algebraic operations on rectangular matrices stored as lists of rows."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

Matrix = list[list[Any]]


def _rows(m: Iterable[Sequence[Any]]) -> tuple[Matrix, tuple[int, int]]:
    """Copy a matrix into lists and return it with its (rows, columns) shape."""
    rows = [list(row) for row in m]
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows have unequal lengths")
    return rows, (len(rows), width)


def add(a: Iterable[Sequence[Any]], b: Iterable[Sequence[Any]]) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    rows_a, shape_a = _rows(a)
    rows_b, shape_b = _rows(b)
    if shape_a != shape_b:
        raise ValueError(f"cannot add matrices of shapes {shape_a} and {shape_b}")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(rows_a, rows_b)]


def transpose(m: Iterable[Sequence[Any]]) -> Matrix:
    """Return the transpose: rows become columns."""
    rows, _ = _rows(m)
    return [list(column) for column in zip(*rows)]


def multiply(a: Iterable[Sequence[Any]], b: Iterable[Sequence[Any]]) -> Matrix:
    """Return the matrix product a x b."""
    rows_a, (_, inner_a) = _rows(a)
    rows_b, (inner_b, _) = _rows(b)
    if inner_a != inner_b:
        raise ValueError(
            f"cannot multiply: {inner_a} columns against {inner_b} rows"
        )
    columns = list(zip(*rows_b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in rows_a
    ]


def total(m: Iterable[Sequence[Any]]) -> Any:
    """Return the sum of every element."""
    rows, _ = _rows(m)
    return sum(x for row in rows for x in row)


def find_positions(m: Iterable[Sequence[Any]], value: Any) -> list[tuple[int, int]]:
    """Return every (row, column) holding value, in row-major order."""
    rows, _ = _rows(m)
    return [
        (i, j)
        for i, row in enumerate(rows)
        for j, element in enumerate(row)
        if element == value
    ]


def scale(m: Iterable[Sequence[Any]], factor: Any = 2) -> Matrix:
    """Return a new matrix with every element multiplied by factor."""
    rows, _ = _rows(m)
    return [[x * factor for x in row] for row in rows]