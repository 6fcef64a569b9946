from __future__ import annotations

from contextlib import contextmanager
from enum import IntEnum
from typing import Iterator, List, Sequence

import numpy as np

from .geometry import Point
from .pieces import Figure


class Cell(IntEnum):
    EMPTY = 0
    WALL = 1
    FIGURE = 2


CELL_CHARS = {Cell.EMPTY: ".", Cell.WALL: "#", Cell.FIGURE: "@"}
CHAR_CELLS = {ch: cell for cell, ch in CELL_CHARS.items()}


class World:
    """Fixed-size occupancy grid.

    ``grid[y, x]`` holds a :class:`Cell` value; row 0 is the top row. The
    dimensions never change after construction.
    """

    def __init__(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"World dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    @classmethod
    def from_array(cls, cells: np.ndarray) -> "World":
        arr = np.asarray(cells)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D occupancy matrix, got shape {arr.shape}")
        valid = np.isin(arr, [int(c) for c in Cell])
        if not valid.all():
            raise ValueError(f"Cell values must be one of {[int(c) for c in Cell]}")
        world = cls(arr.shape[1], arr.shape[0])
        world.grid[:, :] = arr.astype(np.int8)
        return world

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "World":
        if not rows:
            raise ValueError("At least one row is required")
        width = len(rows[0])
        matrix: List[List[int]] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has length {len(row)}, expected {width}")
            try:
                matrix.append([int(CHAR_CELLS[ch]) for ch in row])
            except KeyError as exc:
                raise ValueError(f"Unknown cell character {exc.args[0]!r} in row {y}") from None
        return cls.from_array(np.array(matrix, dtype=np.int8))

    def reset(self) -> None:
        self.grid.fill(Cell.EMPTY)

    def in_bounds(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def figure_in_bounds(self, figure: Figure) -> bool:
        lo, hi = figure.bounds()
        return self.in_bounds(lo) and self.in_bounds(hi)

    def may_place(self, figure: Figure) -> bool:
        # Off-grid cells do not block; figure_in_bounds is the range check.
        for x, y in figure.points:
            if self.in_bounds((x, y)) and self.grid[y, x] != Cell.EMPTY:
                return False
        return True

    def is_legal(self, figure: Figure) -> bool:
        return self.figure_in_bounds(figure) and self.may_place(figure)

    def _stamp(self, figure: Figure, value: Cell) -> None:
        for x, y in figure.points:
            if self.in_bounds((x, y)):
                self.grid[y, x] = value

    def place(self, figure: Figure) -> None:
        self._stamp(figure, Cell.FIGURE)

    def clear(self, figure: Figure) -> None:
        self._stamp(figure, Cell.EMPTY)

    @contextmanager
    def occupied(self, figure: Figure) -> Iterator["World"]:
        """Mark ``figure`` on the grid for the duration of the block."""
        self.place(figure)
        try:
            yield self
        finally:
            self.clear(figure)

    def fix(self, figure: Figure) -> None:
        """Turn a landed figure into obstacles."""
        self._stamp(figure, Cell.WALL)

    def cell(self, point: Point) -> Cell:
        x, y = point
        return Cell(int(self.grid[y, x]))

    def empty_columns(self, row: int) -> List[int]:
        return [int(x) for x in np.flatnonzero(self.grid[row] == Cell.EMPTY)]

    def resample(
        self,
        rng: np.random.Generator,
        row_threshold: int,
        col_threshold: int,
        wall_probability: float = 0.5,
    ) -> None:
        """Replace the occupancy with random walls.

        Cells with ``row <= row_threshold`` or ``col <= col_threshold`` are
        kept EMPTY so the spawn area stays clear.
        """
        walls = rng.random((self.height, self.width)) < wall_probability
        rows = np.arange(self.height)[:, None]
        cols = np.arange(self.width)[None, :]
        walls &= (rows > row_threshold) & (cols > col_threshold)
        self.grid = np.where(walls, Cell.WALL, Cell.EMPTY).astype(np.int8)

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def snapshot(self, figure: Figure) -> np.ndarray:
        """Copy of the grid with ``figure`` overlaid as FIGURE cells."""
        state = self.clone_state()
        for x, y in figure.points:
            if self.in_bounds((x, y)):
                state[y, x] = Cell.FIGURE
        return state

    def copy(self) -> "World":
        return World.from_array(self.grid)

    def to_text(self, figure: Figure | None = None) -> str:
        state = self.snapshot(figure) if figure is not None else self.grid
        return "\n".join("".join(CELL_CHARS[Cell(int(v))] for v in row) for row in state)

    def __repr__(self) -> str:
        return f"World(width={self.width}, height={self.height})"
