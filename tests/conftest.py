from __future__ import annotations

from collections import deque
from typing import Iterable, Optional, Tuple

import pytest

from falling_blocks.game import FallingBlockGame, GameConfig, Randomizer, TetrominoType


Spawn = Tuple[TetrominoType, int, int]  # (kind, rotation, column)


class ScriptedRandomizer(Randomizer):
    """Hands out a fixed sequence of spawns, then keeps repeating the last."""

    def __init__(self, spawns: Iterable[Spawn], color: int = 3) -> None:
        super().__init__(seed=0)
        self.spawns = deque(spawns)
        self.color = color
        self._current: Optional[Spawn] = None

    def next_kind(self, previous_kind=None) -> TetrominoType:
        if self.spawns:
            self._current = self.spawns.popleft()
        assert self._current is not None
        return self._current[0]

    def random_rotation(self, kind) -> int:
        assert self._current is not None
        return self._current[1]

    def random_color(self) -> int:
        return self.color

    def random_column(self, low: int, high: int) -> int:
        assert self._current is not None
        col = self._current[2]
        assert low <= col <= high
        return col


@pytest.fixture
def make_game():
    def _make(spawns: Iterable[Spawn], **config_kwargs) -> FallingBlockGame:
        return FallingBlockGame(GameConfig(**config_kwargs), randomizer=ScriptedRandomizer(spawns))

    return _make
