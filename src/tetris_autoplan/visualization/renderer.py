from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from tetris_autoplan.game.grid import Cell
from tetris_autoplan.game.pieces import FigureKind


Color = Tuple[int, int, int]

CELL_COLORS = {
    Cell.EMPTY: (20, 20, 26),
    Cell.WALL: (110, 110, 120),
    Cell.FIGURE: (200, 200, 200),
}

KIND_COLORS = {
    FigureKind.I: (0, 240, 240),
    FigureKind.O: (240, 240, 0),
    FigureKind.L: (240, 160, 0),
    FigureKind.J: (0, 0, 240),
    FigureKind.S: (0, 240, 0),
    FigureKind.Z: (240, 0, 0),
    FigureKind.T: (160, 0, 240),
}


def _color_for_value(v: int, kind: Optional[FigureKind] = None) -> Color:
    if v == Cell.FIGURE and kind is not None:
        return KIND_COLORS[kind]
    return CELL_COLORS.get(Cell(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        return width * self.cell_size + self.margin * 2, height * self.cell_size + self.margin * 2

    def _grid_surface(self, state: np.ndarray, kind: Optional[FigureKind]) -> pygame.Surface:
        h, w = state.shape
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
                pygame.draw.rect(surf, _color_for_value(int(state[y, x]), kind), rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray, kind: Optional[FigureKind] = None) -> None:
        """Draw a world snapshot; FIGURE cells take the color of ``kind``."""
        grid_surf = self._grid_surface(state, kind)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
        pygame.display.flip()
