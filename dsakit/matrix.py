"""Algorithms over two-dimensional grids stored as lists of rows."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of a rectangular matrix in clockwise spiral order."""
    if not matrix:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(row[right] for row in matrix[top:bottom + 1])
        right -= 1
        if top <= bottom:
            result.extend(reversed(matrix[bottom][left:right + 1]))
            bottom -= 1
        if left <= right:
            result.extend(row[left] for row in reversed(matrix[top:bottom + 1]))
            left += 1
    return result


def set_zeroes(matrix: Sequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if any(v == 0 for v in row)}
    zero_cols = {j for row in matrix for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def rotate_clockwise(matrix: Sequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("rotate_clockwise() needs a square matrix")
    for i in range(size):
        for j in range(i + 1, size):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()