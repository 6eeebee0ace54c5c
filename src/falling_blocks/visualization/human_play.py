from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from falling_blocks.game import Action, FallingBlockGame, GameConfig
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_a: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_d: Action.RIGHT,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_w: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_DOWN: Action.HARD_DROP,
    pygame.K_s: Action.HARD_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard.")
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--gravity", type=float, default=0.5, help="Seconds per automatic downward step")
    p.add_argument("--tick-rate", type=int, default=100, help="Engine ticks per second")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="INFO")
    return p


def run(config: Optional[GameConfig] = None, cell_size: int = 28) -> None:
    config = config or GameConfig()
    game = FallingBlockGame(config)
    pygame.init()
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=cell_size)
        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Falling Blocks")
        renderer.draw(screen, game)

        running = True
        while running:
            dirty = game.tick().changed

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in QUIT_KEYS:
                        running = False
                    elif event.key == pygame.K_r and game.is_game_over():
                        game.reset()
                        dirty = True
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            dirty = game.step(action).changed or dirty

            if dirty:
                renderer.draw(screen, game)

            clock.tick(config.tick_rate)
    finally:
        logger.info("Session ended: %s", game.get_game_stats())
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = GameConfig(
        width=args.width,
        height=args.height,
        gravity_interval=args.gravity,
        tick_rate=args.tick_rate,
        random_seed=args.seed,
    )
    run(config, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
