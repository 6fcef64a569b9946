"""Game model for Tetris AutoPlan.

Exports the board and piece primitives:
- World: Occupancy grid with placement checks
- Cell: Enum of cell states
- Figure: Immutable tetromino pose with rotation center
- FigureKind: Enum of the seven tetrominoes

The host session (``AutoPlayGame``) lives in ``game.core``.
"""

from .geometry import UnsupportedRotation
from .pieces import Figure, FigureKind, UnknownFigureKind
from .grid import Cell, World

__all__ = [
    "World",
    "Cell",
    "Figure",
    "FigureKind",
    "UnsupportedRotation",
    "UnknownFigureKind",
]
