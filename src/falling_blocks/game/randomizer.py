from __future__ import annotations

import random
from typing import Optional

from .shapes import ROTATION_STATES, TetrominoType


NUM_COLORS = 7


class Randomizer:
    """Piece generator in the style of the NES randomizer.

    A draw over K kinds plus one extra slot; landing on the extra slot or on
    the previous kind triggers a single uniform reroll over the K kinds. Long
    run frequencies stay uniform while back-to-back repeats become rare.
    See https://tetris.wiki/Tetris_(NES,_Nintendo)
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.num_kinds = len(TetrominoType)

    def next_kind(self, previous_kind: Optional[int] = None) -> TetrominoType:
        draw = self.rng.randint(0, self.num_kinds)
        if draw == self.num_kinds or (previous_kind is not None and draw == int(previous_kind)):
            draw = self.rng.randint(0, self.num_kinds - 1)
        return TetrominoType(draw)

    def random_rotation(self, kind: TetrominoType) -> int:
        return self.rng.randrange(len(ROTATION_STATES[TetrominoType(kind)]))

    def random_color(self) -> int:
        return self.rng.randint(1, NUM_COLORS)

    def random_column(self, low: int, high: int) -> int:
        return self.rng.randint(low, high)
