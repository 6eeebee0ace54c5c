from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Tuple


class TetrominoType(IntEnum):
    I = 0
    O = 1
    J = 2
    L = 3
    S = 4
    Z = 5
    T = 6


Offset = Tuple[int, int]  # (row_delta, col_delta)
RotationState = Tuple[Offset, ...]


@dataclass(frozen=True)
class Extent:
    row_min: int
    row_max: int
    col_min: int
    col_max: int

    @property
    def height(self) -> int:
        return self.row_max - self.row_min + 1

    @property
    def width(self) -> int:
        return self.col_max - self.col_min + 1


# Right-handed Nintendo rotation system; index + 1 is one clockwise turn.
ROTATION_STATES: Dict[TetrominoType, Tuple[RotationState, ...]] = {
    TetrominoType.I: (
        ((0, -2), (0, -1), (0, 0), (0, 1)),
        ((-2, 0), (-1, 0), (0, 0), (1, 0)),
    ),
    TetrominoType.O: (
        ((0, 0), (0, 1), (1, 0), (1, 1)),
    ),
    TetrominoType.J: (
        ((1, 1), (0, 1), (0, 0), (0, -1)),
        ((1, -1), (1, 0), (0, 0), (-1, 0)),
        ((-1, -1), (0, -1), (0, 0), (0, 1)),
        ((-1, 1), (-1, 0), (0, 0), (1, 0)),
    ),
    TetrominoType.L: (
        ((1, -1), (0, -1), (0, 0), (0, 1)),
        ((-1, -1), (-1, 0), (0, 0), (1, 0)),
        ((-1, 1), (0, 1), (0, 0), (0, -1)),
        ((1, 1), (1, 0), (0, 0), (-1, 0)),
    ),
    TetrominoType.S: (
        ((-1, 0), (0, 0), (0, 1), (1, 1)),
        ((0, 1), (0, 0), (1, 0), (1, -1)),
    ),
    TetrominoType.Z: (
        ((-1, 1), (0, 1), (0, 0), (1, 0)),
        ((1, 1), (1, 0), (0, 0), (0, -1)),
    ),
    TetrominoType.T: (
        ((0, 0), (-1, 0), (0, -1), (0, 1)),
        ((0, 0), (-1, 0), (1, 0), (0, 1)),
        ((0, 0), (0, -1), (1, 0), (0, 1)),
        ((0, 0), (0, -1), (1, 0), (-1, 0)),
    ),
}


def rotation_states(kind: TetrominoType) -> Tuple[RotationState, ...]:
    return ROTATION_STATES[TetrominoType(kind)]


def shape_extent(offsets: Iterable[Offset]) -> Extent:
    """Bounding box of a set of offsets (assumes at least one offset)."""
    offsets = tuple(offsets)
    rows = [r for r, _ in offsets]
    cols = [c for _, c in offsets]
    return Extent(min(rows), max(rows), min(cols), max(cols))


def widest_state_width() -> int:
    return max(shape_extent(state).width for states in ROTATION_STATES.values() for state in states)


def tallest_state_height() -> int:
    return max(shape_extent(state).height for states in ROTATION_STATES.values() for state in states)
