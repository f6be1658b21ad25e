import copy
import random

import pytest

from dsakit.matrix import rotate_clockwise, set_zeroes, spiral_order


def _grid(rows, cols, seed=0, low=1, high=9):
    rng = random.Random(seed)
    return [[rng.randint(low, high) for _ in range(cols)] for _ in range(rows)]


def test_spiral_example():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize("rows,cols", [(1, 1), (1, 5), (5, 1), (3, 4), (4, 3), (6, 6)])
def test_spiral_visits_every_cell_once(rows, cols):
    matrix = [[r * cols + c for c in range(cols)] for r in range(rows)]
    order = spiral_order(matrix)
    assert sorted(order) == list(range(rows * cols))
    assert order[:cols] == matrix[0]


def test_spiral_single_column_and_empty():
    column = [[4], [5], [6]]
    assert spiral_order(column) == [4, 5, 6]
    assert spiral_order([]) == []


def test_set_zeroes_example():
    matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    set_zeroes(matrix)
    assert matrix == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]


def test_set_zeroes_property():
    for seed in range(10):
        matrix = _grid(4, 5, seed=seed, low=0, high=4)
        original = copy.deepcopy(matrix)
        set_zeroes(matrix)
        for i, row in enumerate(matrix):
            for j, value in enumerate(row):
                struck = 0 in original[i] or any(r[j] == 0 for r in original)
                assert value == (0 if struck else original[i][j])


def test_set_zeroes_without_zero_changes_nothing():
    matrix = _grid(3, 3, seed=1)
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    assert matrix == original


def test_rotate_example():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotate_clockwise(matrix)
    assert matrix == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


def test_rotate_four_times_is_identity():
    matrix = _grid(5, 5, seed=2)
    original = copy.deepcopy(matrix)
    for _ in range(4):
        rotate_clockwise(matrix)
    assert matrix == original


def test_rotate_first_row_is_reversed_first_column():
    matrix = _grid(4, 4, seed=3)
    first_column = [row[0] for row in matrix]
    rotate_clockwise(matrix)
    assert matrix[0] == first_column[::-1]


def test_rotate_non_square_raises():
    with pytest.raises(ValueError):
        rotate_clockwise([[1, 2, 3], [4, 5, 6]])