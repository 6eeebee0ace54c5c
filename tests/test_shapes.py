from __future__ import annotations

import pytest

from falling_blocks.game import Extent, TetrominoType, rotation_states, shape_extent
from falling_blocks.game.shapes import tallest_state_height, widest_state_width


@pytest.mark.parametrize(
    "kind, count",
    [
        (TetrominoType.I, 2),
        (TetrominoType.O, 1),
        (TetrominoType.J, 4),
        (TetrominoType.L, 4),
        (TetrominoType.S, 2),
        (TetrominoType.Z, 2),
        (TetrominoType.T, 4),
    ],
)
def test_state_counts(kind, count):
    assert len(rotation_states(kind)) == count


def test_every_state_has_four_distinct_cells():
    for kind in TetrominoType:
        for state in rotation_states(kind):
            assert len(state) == 4
            assert len(set(state)) == 4


def test_lookup_accepts_plain_ints():
    assert rotation_states(1) is rotation_states(TetrominoType.O)


def test_shape_extent_of_vertical_i():
    ext = shape_extent(rotation_states(TetrominoType.I)[1])
    assert ext == Extent(row_min=-2, row_max=1, col_min=0, col_max=0)
    assert ext.height == 4
    assert ext.width == 1


def test_shape_extent_accepts_generators():
    ext = shape_extent((r, c) for r, c in rotation_states(TetrominoType.O)[0])
    assert ext == Extent(0, 1, 0, 1)


def test_catalog_limits():
    assert widest_state_width() == 4
    assert tallest_state_height() == 4
