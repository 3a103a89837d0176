import copy

import pytest

from algobox.bfs import min_jumps, oranges_rotting


def test_single_element_needs_no_jump():
    assert min_jumps([42]) == 0


@pytest.mark.parametrize("length", [2, 3, 7, 20])
def test_distinct_values_walk_step_by_step(length):
    assert min_jumps(list(range(length))) == length - 1


def test_equal_ends_allow_one_jump():
    assert min_jumps([7, 1, 2, 3, 4, 5, 7]) == 1


def test_empty_array_is_rejected():
    with pytest.raises(ValueError):
        min_jumps([])


@pytest.mark.parametrize(
    "arr",
    [[100, -23, -23, 404, 100, 23, 23, 23, 3, 404], [6, 1, 9], [11, 22, 7, 7, 7, 7, 7, 7, 7, 22, 13]],
)
def test_jumps_never_exceed_walking(arr):
    assert 0 <= min_jumps(arr) <= len(arr) - 1


def test_no_fresh_oranges_takes_no_time():
    assert oranges_rotting([[2, 0], [0, 0]]) == 0


def test_unreachable_orange():
    assert oranges_rotting([[2, 0, 1]]) == -1


@pytest.mark.parametrize("fresh", [1, 2, 5])
def test_row_rots_one_cell_per_minute(fresh):
    assert oranges_rotting([[2] + [1] * fresh]) == fresh


def test_grid_is_left_unchanged():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    before = copy.deepcopy(grid)
    first = oranges_rotting(grid)
    assert grid == before
    assert oranges_rotting(grid) == first


def test_transposed_grid_takes_same_time():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    transposed = [list(column) for column in zip(*grid)]
    assert oranges_rotting(transposed) == oranges_rotting(grid)