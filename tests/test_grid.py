from __future__ import annotations

import numpy as np
import pytest

from falling_blocks.game import GameGrid


def _fill_row(grid: GameGrid, row: int, value: int = 1) -> None:
    for col in range(grid.width):
        grid.set_cell(row, col, value)


def test_dimensions_include_buffer():
    grid = GameGrid(width=10, height=20, buffer_rows=2)
    assert grid.total_rows == 22
    assert grid.grid.shape == (22, 10)
    assert grid.visible().shape == (20, 10)


@pytest.mark.parametrize(
    "row, col, expected",
    [
        (0, 0, True),
        (21, 9, True),
        (22, 0, False),
        (-1, 0, False),
        (0, -1, False),
        (0, 10, False),
        (100, 100, False),
    ],
)
def test_in_bounds(row, col, expected):
    grid = GameGrid(width=10, height=20, buffer_rows=2)
    assert grid.in_bounds(row, col) is expected


def test_row_is_full():
    grid = GameGrid(width=4, height=4, buffer_rows=0)
    _fill_row(grid, 3)
    assert grid.row_is_full(3)
    grid.set_cell(3, 2, 0)
    assert not grid.row_is_full(3)


def test_can_place_rejects_occupied_and_out_of_bounds():
    grid = GameGrid(width=4, height=4, buffer_rows=0)
    grid.set_cell(1, 1, 2)
    assert grid.can_place([(0, 0), (0, 1)])
    assert not grid.can_place([(1, 1)])
    assert not grid.can_place([(4, 0)])
    assert not grid.can_place([(0, -1)])


def test_clear_and_compact_without_rows_is_a_no_op():
    grid = GameGrid(width=5, height=6, buffer_rows=0)
    rng = np.random.default_rng(7)
    grid.grid[:] = rng.integers(0, 8, size=grid.grid.shape)
    grid.grid[:, 0] = 0  # no row is full
    before = grid.clone_state()
    assert grid.clear_and_compact(set()) == 0
    assert np.array_equal(grid.grid, before)


def test_clear_and_compact_non_contiguous_rows():
    grid = GameGrid(width=4, height=10, buffer_rows=0)
    for row in range(10):
        if row in (2, 5, 7):
            _fill_row(grid, row, 7)
        else:
            # distinct, not-full pattern per row
            grid.set_cell(row, row % 4, (row % 6) + 1)
    before = grid.clone_state()

    assert grid.clear_and_compact({2, 5, 7}) == 3

    survivors = [0, 1, 3, 4, 6, 8, 9]
    for original in survivors:
        removed_below = sum(1 for r in (2, 5, 7) if r > original)
        assert np.array_equal(grid.grid[original + removed_below], before[original])
    assert not grid.grid[0:3].any()


def test_clear_and_compact_contiguous_bottom_rows():
    grid = GameGrid(width=3, height=5, buffer_rows=0)
    grid.set_cell(0, 0, 4)
    grid.set_cell(2, 1, 5)
    _fill_row(grid, 3)
    _fill_row(grid, 4)
    grid.clear_and_compact([3, 4])
    assert grid.cell(2, 0) == 4
    assert grid.cell(4, 1) == 5
    assert not grid.grid[0:2].any()


def test_clear_and_compact_moves_buffer_rows_down():
    grid = GameGrid(width=3, height=3, buffer_rows=2)
    grid.set_cell(0, 2, 6)
    _fill_row(grid, 4)
    grid.clear_and_compact({4})
    assert grid.cell(1, 2) == 6
    assert not grid.grid[0].any()


def test_clear_row_and_reset():
    grid = GameGrid(width=3, height=3, buffer_rows=0)
    _fill_row(grid, 1, 2)
    grid.set_cell(2, 0, 1)
    grid.clear_row(1)
    assert not grid.grid[1].any()
    grid.reset()
    assert not grid.grid.any()
