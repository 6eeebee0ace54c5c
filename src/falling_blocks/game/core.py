from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Optional, Tuple

import numpy as np

from .errors import ConfigurationError
from .grid import Coordinate, GameGrid
from .pieces import Piece, Rotation
from .randomizer import Randomizer
from .shapes import TetrominoType, tallest_state_height, widest_state_width


logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    HARD_DROP = 4
    NONE = 5


class GamePhase(Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    LINE_CLEARING = "line_clearing"
    GAME_OVER = "game_over"


class Status(Enum):
    OK = "ok"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class StepResult:
    status: Status = Status.OK
    changed: bool = False  # whether the board needs to be redrawn
    lines_cleared: int = 0

    @property
    def game_over(self) -> bool:
        return self.status is Status.GAME_OVER


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    gravity_interval: float = 0.5  # seconds per automatic downward step
    tick_rate: int = 100  # ticks per second
    buffer_rows: int = 2
    random_seed: Optional[int] = None

    @property
    def gravity_ticks(self) -> int:
        return max(1, math.floor(self.tick_rate * self.gravity_interval))

    def validate(self) -> None:
        if self.height < 1:
            raise ConfigurationError(f"height must be positive, got {self.height}")
        if self.buffer_rows < 0:
            raise ConfigurationError(f"buffer_rows must be non-negative, got {self.buffer_rows}")
        if self.tick_rate <= 0 or self.gravity_interval <= 0:
            raise ConfigurationError("tick_rate and gravity_interval must be positive")
        widest = widest_state_width()
        if self.width < widest:
            raise ConfigurationError(f"space too small: width {self.width} cannot fit a piece {widest} cells wide")
        tallest = tallest_state_height()
        if self.height + self.buffer_rows < tallest:
            raise ConfigurationError(
                f"space too small: {self.height + self.buffer_rows} rows cannot fit a piece {tallest} cells tall"
            )


class FallingBlockGame:
    """Falling-block engine: one active piece over a board of locked cells.

    The active piece is stamped onto the board while it falls, so renderers
    only ever need to read cells. Gravity is driven by `tick()`, which the
    caller invokes at `config.tick_rate` per second.
    """

    def __init__(self, config: Optional[GameConfig] = None, randomizer: Optional[Randomizer] = None) -> None:
        self.config = config or GameConfig()
        self.config.validate()
        self.randomizer = randomizer or Randomizer(seed=self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height, self.config.buffer_rows)
        self.gravity_ticks = self.config.gravity_ticks
        self.score = 0
        self.pieces_placed = 0
        self.tick_count = 0
        self.phase = GamePhase.SPAWNING
        self.current_piece: Optional[Piece] = None
        self.previous_kind: Optional[TetrominoType] = None
        self.reset()

    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.pieces_placed = 0
        self.tick_count = 0
        self.current_piece = None
        self.previous_kind = None
        self._spawn_piece()

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    # -- piece bookkeeping -------------------------------------------------

    def _stamp(self, value: int) -> None:
        # No bounds check: the piece only ever sits on validated cells.
        assert self.current_piece is not None
        for row, col in self.current_piece.occupied_cells():
            self.grid.set_cell(row, col, value)

    def _fits(self, cells: Iterable[Coordinate]) -> bool:
        assert self.current_piece is not None
        self._stamp(0)
        try:
            return self.grid.can_place(cells)
        finally:
            self._stamp(self.current_piece.color)

    def _spawn_piece(self) -> bool:
        self.phase = GamePhase.SPAWNING
        kind = self.randomizer.next_kind(self.previous_kind)
        self.previous_kind = kind
        piece = Piece(
            kind=kind,
            rotation=self.randomizer.random_rotation(kind),
            color=self.randomizer.random_color(),
        )
        ext = piece.extent()
        # Topmost cell on row 0, extent fully inside [0, width).
        piece.row = -ext.row_min
        piece.col = self.randomizer.random_column(-ext.col_min, self.grid.width - 1 - ext.col_max)
        self.current_piece = piece
        if not self.grid.can_place(piece.occupied_cells()):
            self.phase = GamePhase.GAME_OVER
            logger.info("Game over: %s piece cannot spawn at (%d, %d), score=%d",
                        kind.name, piece.row, piece.col, self.score)
            return False
        self._stamp(piece.color)
        self.phase = GamePhase.FALLING
        logger.debug("Spawned %s rot=%d at (%d, %d)", kind.name, piece.rotation, piece.row, piece.col)
        return True

    def _clear_lines(self) -> int:
        assert self.current_piece is not None
        piece = self.current_piece
        ext = piece.extent()
        # Only rows covered by the landed piece can have just become full.
        rows = [
            row
            for row in range(piece.row + ext.row_min, piece.row + ext.row_max + 1)
            if self.grid.row_is_full(row)
        ]
        if not rows:
            return 0
        removed = self.grid.clear_and_compact(rows)
        self.score += removed
        logger.debug("Cleared rows %s, score=%d", rows, self.score)
        return removed

    def _lock_and_spawn(self) -> StepResult:
        # The piece is already stamped; locking just means letting it go.
        self.phase = GamePhase.LOCKING
        self.pieces_placed += 1
        self.phase = GamePhase.LINE_CLEARING
        lines = self._clear_lines()
        status = Status.OK if self._spawn_piece() else Status.GAME_OVER
        return StepResult(status=status, changed=True, lines_cleared=lines)

    # -- driver commands ---------------------------------------------------

    def try_move(self, row_delta: int, col_delta: int) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        piece = self.current_piece
        if not self._fits(piece.cells_at(piece.row + row_delta, piece.col + col_delta)):
            return False
        self._stamp(0)
        piece.row += row_delta
        piece.col += col_delta
        self._stamp(piece.color)
        return True

    def try_rotate(self, direction: Rotation = Rotation.CW) -> bool:
        # No wall kicks: the rotated state must fit at the current anchor.
        if self.game_over or self.current_piece is None:
            return False
        piece = self.current_piece
        rotation = piece.rotated_state_index(direction)
        if not self._fits(piece.cells_at(piece.row, piece.col, rotation)):
            return False
        self._stamp(0)
        piece.rotation = rotation
        self._stamp(piece.color)
        return True

    def tick(self) -> StepResult:
        if self.game_over:
            return StepResult(status=Status.GAME_OVER)
        self.tick_count += 1
        if self.tick_count < self.gravity_ticks:
            return StepResult()
        self.tick_count = 0
        if self.try_move(1, 0):
            return StepResult(changed=True)
        return self._lock_and_spawn()

    def hard_drop(self) -> StepResult:
        if self.game_over:
            return StepResult(status=Status.GAME_OVER)
        while self.try_move(1, 0):
            pass
        self.tick_count = 0
        return self._lock_and_spawn()

    def step(self, action: Action) -> StepResult:
        if self.game_over:
            return StepResult(status=Status.GAME_OVER)

        if action == Action.LEFT:
            return StepResult(changed=self.try_move(0, -1))
        elif action == Action.RIGHT:
            return StepResult(changed=self.try_move(0, 1))
        elif action == Action.ROTATE_CW:
            return StepResult(changed=self.try_rotate(Rotation.CW))
        elif action == Action.ROTATE_CCW:
            return StepResult(changed=self.try_rotate(Rotation.CCW))
        elif action == Action.HARD_DROP:
            return self.hard_drop()
        return StepResult()

    # -- read-only surface for renderers -----------------------------------

    def board_dimensions(self) -> Tuple[int, int]:
        """(height, width) of the visible area."""
        return self.grid.height, self.grid.width

    def cell(self, row: int, col: int) -> int:
        """Color tag at a visible (row, col); row 0 is the top visible row."""
        return self.grid.cell(row + self.grid.buffer_rows, col)

    def current_score(self) -> int:
        return self.score

    def is_game_over(self) -> bool:
        return self.game_over

    def get_state(self) -> np.ndarray:
        return self.grid.visible()

    def get_game_stats(self) -> dict:
        return {
            "score": self.score,
            "lines_cleared": self.score,
            "pieces_placed": self.pieces_placed,
            "game_over": self.game_over,
        }
