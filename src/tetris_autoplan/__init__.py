"""Tetris AutoPlan.

Finds a resting place for a falling tetromino in an obstacle grid and the
moves and rotations that carry it there.
"""

from .game import Cell, Figure, FigureKind, World
from .planning import Plan, Planner, solve
from .game.core import AutoPlayGame, GameConfig

__all__ = [
    "Cell",
    "Figure",
    "FigureKind",
    "World",
    "Plan",
    "Planner",
    "solve",
    "AutoPlayGame",
    "GameConfig",
]
