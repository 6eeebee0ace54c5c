from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]  # (row, col)


class GameGrid:
    """Discrete 2D board of cell tags.

    The grid uses 0 for empty cells and 1..7 for occupied cells (color tags).
    Row 0 is the top of the invisible buffer; the visible area starts at
    `buffer_rows` and spans `height` rows.
    """

    def __init__(self, width: int, height: int, buffer_rows: int = 2) -> None:
        self.width = int(width)
        self.height = int(height)
        self.buffer_rows = int(buffer_rows)
        self.total_rows = self.height + self.buffer_rows
        self.grid = np.zeros((self.total_rows, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.total_rows and 0 <= col < self.width

    def cell(self, row: int, col: int) -> int:
        return int(self.grid[row, col])

    def set_cell(self, row: int, col: int, value: int) -> None:
        self.grid[row, col] = value

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        for row, col in cells:
            if not self.in_bounds(row, col):
                return False
            if self.grid[row, col] != 0:
                return False
        return True

    def row_is_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row, :] != 0))

    def clear_row(self, row: int) -> None:
        self.grid[row, :] = 0

    def clear_and_compact(self, rows_to_remove: Iterable[int]) -> int:
        """Remove `rows_to_remove` and let everything above fall into place.

        Surviving rows keep their relative order and drop by the number of
        removed rows beneath them; the rows vacated at the top are zeroed.
        Returns the number of rows removed.
        """
        removed = {int(r) for r in rows_to_remove}
        if not removed:
            return 0
        src = self.total_rows - 1
        for dst in range(self.total_rows - 1, -1, -1):
            # Skip every marked row, not just the nearest one.
            while src >= 0 and src in removed:
                src -= 1
            if src >= 0:
                if src != dst:
                    self.grid[dst, :] = self.grid[src, :]
                src -= 1
            else:
                self.clear_row(dst)
        return len(removed)

    def visible(self) -> np.ndarray:
        return self.grid[self.buffer_rows :].copy()

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
