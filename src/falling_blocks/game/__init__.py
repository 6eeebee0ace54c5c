"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- TetrominoType: Enum of available piece kinds
- rotation_states / shape_extent: Shape catalog lookups
- GameGrid: Board of cell tags with row clearing and compaction
- Piece: Active piece with table-driven rotation
- Randomizer: Next-piece generator with repeat reroll
- FallingBlockGame: Spawn / fall / lock / clear state machine
"""

from .shapes import Extent, TetrominoType, rotation_states, shape_extent
from .grid import GameGrid
from .pieces import Piece, Rotation
from .randomizer import Randomizer
from .errors import ConfigurationError
from .core import Action, FallingBlockGame, GameConfig, GamePhase, Status, StepResult

__all__ = [
    "Extent",
    "TetrominoType",
    "rotation_states",
    "shape_extent",
    "GameGrid",
    "Piece",
    "Rotation",
    "Randomizer",
    "ConfigurationError",
    "Action",
    "FallingBlockGame",
    "GameConfig",
    "GamePhase",
    "Status",
    "StepResult",
]
