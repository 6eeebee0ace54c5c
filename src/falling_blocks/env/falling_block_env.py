from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, FallingBlockGame, GameConfig
from falling_blocks.visualization.renderer import color_for_value


class FallingBlockEnv(gym.Env):
    """Gymnasium wrapper around `FallingBlockGame`.

    Each step applies one `Action` and then advances the engine by
    `ticks_per_step` ticks (one gravity interval by default), so the piece
    keeps falling whatever the agent does. Reward is the number of rows
    cleared during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 ticks_per_step: Optional[int] = None,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.game = FallingBlockGame(config)
        self.render_mode = render_mode
        self.ticks_per_step = int(ticks_per_step or self.game.gravity_ticks)
        self.max_episode_steps = int(max_episode_steps)

        height, width = self.game.board_dimensions()
        self.observation_space = spaces.Box(low=0, high=7, shape=(height, width), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        info: Dict[str, Any] = dict(self.game.get_game_stats())
        info["steps"] = self._steps
        return info

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.randomizer.rng.seed(seed)
        self.game.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        result = self.game.step(Action(int(action)))
        lines = result.lines_cleared
        for _ in range(self.ticks_per_step):
            if result.game_over:
                break
            result = self.game.tick()
            lines += result.lines_cleared

        self._steps += 1
        terminated = bool(self.game.game_over)
        truncated = not terminated and self._steps >= self.max_episode_steps
        return self._get_obs(), float(lines), terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(grid[y, x]))
            return img
        # human rendering is the pygame driver's job
        return None

    def close(self) -> None:
        pass
