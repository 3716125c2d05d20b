import pytest

from algoshelf.arrays import (
    find_repeating_and_missing,
    insert_at_start,
    spiral_order,
    wave_order,
)

SQUARE = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
WIDE = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]


def test_insert_at_start_example():
    assert insert_at_start([1, 2, 3, 4, 5], 6) == [6, 1, 2, 3, 4, 5]


def test_insert_at_start_leaves_input_alone():
    original = [1, 2, 3]
    result = insert_at_start(original, 0)
    assert original == [1, 2, 3]
    assert result[1:] == original


def test_insert_at_start_empty():
    assert insert_at_start([], "x") == ["x"]


@pytest.mark.parametrize(
    "values, expected",
    [([4, 1, 3, 2, 1], (1, 5)), ([1, 4, 5, 2, 3, 4], (4, 6))],
)
def test_find_repeating_and_missing(values, expected):
    assert find_repeating_and_missing(values) == expected


def test_find_repeating_and_missing_does_not_modify_input():
    values = [4, 1, 3, 2, 1]
    find_repeating_and_missing(values)
    assert values == [4, 1, 3, 2, 1]


def test_find_repeating_and_missing_out_of_range():
    with pytest.raises(ValueError):
        find_repeating_and_missing([1, 2, 7])


def test_find_repeating_and_missing_permutation():
    with pytest.raises(ValueError):
        find_repeating_and_missing([3, 1, 2])


def test_spiral_example():
    assert spiral_order(SQUARE) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize("matrix", [SQUARE, WIDE, [list(r) for r in zip(*WIDE)]])
def test_spiral_visits_every_cell_once(matrix):
    result = spiral_order(matrix)
    assert sorted(result) == sorted(x for row in matrix for x in row)
    assert result[: len(matrix[0])] == list(matrix[0])


def test_spiral_single_row_and_column():
    assert spiral_order([[1, 2, 3]]) == [1, 2, 3]
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


def test_spiral_empty():
    assert spiral_order([]) == []


def test_spiral_ragged_rows():
    with pytest.raises(ValueError):
        spiral_order([[1, 2], [3]])


def test_wave_example():
    assert wave_order(SQUARE) == [1, 4, 7, 8, 5, 2, 3, 6, 9]


def test_wave_visits_every_cell_once():
    result = wave_order(WIDE)
    assert sorted(result) == sorted(x for row in WIDE for x in row)
    assert result[:3] == [row[0] for row in WIDE]
    assert result[3:6] == [row[1] for row in reversed(WIDE)]


def test_wave_empty():
    assert wave_order([]) == []


def test_wave_ragged_rows():
    with pytest.raises(ValueError):
        wave_order([[1], [2, 3]])