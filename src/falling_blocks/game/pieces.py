from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Set, Tuple

from .shapes import Extent, RotationState, TetrominoType, rotation_states, shape_extent


Cell = Tuple[int, int]  # (row, col) in board coordinates


class Rotation(IntEnum):
    CW = 1
    CCW = -1


@dataclass
class Piece:
    kind: TetrominoType
    rotation: int = 0  # index into the kind's rotation states
    row: int = 0
    col: int = 0
    color: int = 1  # 1..7

    @property
    def state_count(self) -> int:
        return len(rotation_states(self.kind))

    def offsets(self, rotation: Optional[int] = None) -> RotationState:
        if rotation is None:
            rotation = self.rotation
        return rotation_states(self.kind)[rotation]

    def rotated_state_index(self, direction: Rotation) -> int:
        """Rotation index after turning once in `direction`; does not mutate."""
        return (self.rotation + int(direction)) % self.state_count

    def cells_at(self, row: int, col: int, rotation: Optional[int] = None) -> List[Cell]:
        return [(row + dr, col + dc) for dr, dc in self.offsets(rotation)]

    def occupied_cells(self) -> Set[Cell]:
        return set(self.cells_at(self.row, self.col))

    def extent(self) -> Extent:
        # Relative to the anchor, not the board.
        return shape_extent(self.offsets())
