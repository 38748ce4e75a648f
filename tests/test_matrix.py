import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.matrix import oranges_rotting, set_zeroes, spiral_order


@st.composite
def grids(draw, low=0, high=3):
    rows = draw(st.integers(1, 5))
    cols = draw(st.integers(1, 5))
    return [
        draw(st.lists(st.integers(low, high), min_size=cols, max_size=cols))
        for _ in range(rows)
    ]


def test_spiral_square_example():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert spiral_order(matrix) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_single_row_and_column():
    assert spiral_order([[1, 2, 3]]) == [1, 2, 3]
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


def test_spiral_empty():
    assert spiral_order([]) == []


@given(grids(high=100))
def test_spiral_visits_every_cell_once(matrix):
    rows, cols = len(matrix), len(matrix[0])
    numbered = [[r * cols + c for c in range(cols)] for r in range(rows)]
    order = spiral_order(numbered)
    assert sorted(order) == list(range(rows * cols))
    assert order[:cols] == numbered[0]


def test_set_zeroes_example():
    matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    set_zeroes(matrix)
    assert matrix == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]


def test_set_zeroes_without_zero_leaves_matrix():
    matrix = [[1, 2], [3, 4]]
    set_zeroes(matrix)
    assert matrix == [[1, 2], [3, 4]]


@given(grids())
def test_set_zeroes_rows_and_columns(matrix):
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            crossed = 0 in original[r] or any(line[c] == 0 for line in original)
            assert value == (0 if crossed else original[r][c])


def test_oranges_example():
    assert oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]]) == 4


def test_oranges_unreachable():
    assert oranges_rotting([[2, 1, 1], [0, 1, 1], [1, 0, 1]]) == -1


def test_oranges_nothing_fresh():
    assert oranges_rotting([[0, 2]]) == 0


def test_oranges_grid_not_changed():
    grid = [[2, 1], [1, 1]]
    oranges_rotting(grid)
    assert grid == [[2, 1], [1, 1]]


@pytest.mark.parametrize("length", [1, 2, 5, 9])
def test_oranges_row_takes_one_minute_per_cell(length):
    assert oranges_rotting([[2] + [1] * length]) == length


@given(grids(high=2))
def test_oranges_no_rotten_means_minus_one_or_zero(grid):
    without_rot = [[1 if v == 2 else v for v in row] for row in grid]
    has_fresh = any(1 in row for row in without_rot)
    assert oranges_rotting(without_rot) == (-1 if has_fresh else 0)