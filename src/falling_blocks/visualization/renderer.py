from __future__ import annotations

from typing import Tuple

import pygame

from falling_blocks.game import FallingBlockGame


PALETTE = {
    0: (20, 20, 26),
    1: (205, 49, 49),    # red
    2: (13, 188, 121),   # green
    3: (229, 229, 16),   # yellow
    4: (36, 114, 200),   # blue
    5: (188, 63, 188),   # magenta
    6: (17, 168, 205),   # cyan
    7: (229, 229, 229),  # white
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    return PALETTE.get(v, (200, 200, 200))


class Renderer:
    """Draws the visible rows of a game; never mutates it."""

    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font = None

    def window_size(self, game: FallingBlockGame) -> Tuple[int, int]:
        h, w = game.board_dimensions()
        # extra strip under the board for the score line
        return w * self.cell_size + self.margin * 2, h * self.cell_size + self.margin * 3

    def _grid_surface(self, game: FallingBlockGame) -> pygame.Surface:
        h, w = game.board_dimensions()
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(game.cell(y, x)), rect)
        return surf

    def draw(self, screen: pygame.Surface, game: FallingBlockGame) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        screen.fill((10, 10, 14))
        grid_surf = self._grid_surface(game)
        screen.blit(grid_surf, (self.margin, self.margin))
        score = self._font.render(f"score: {game.current_score()}", True, (230, 230, 230))
        screen.blit(score, (self.margin, self.margin + grid_surf.get_height() + 4))
        if game.is_game_over():
            text = self._font.render("GAME OVER", True, (255, 255, 255))
            rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)
        pygame.display.flip()
