from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np
from loguru import logger

from tetris_autoplan.planning.planner import Plan, Planner

from .grid import World
from .pieces import Figure, FigureKind


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_rows: int = 12
    spawn_columns: int = 0
    wall_probability: float = 0.5
    max_expansions: Optional[int] = None


class AutoPlayGame:
    """Spawns figures into a random obstacle field and lets the planner land them."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = np.random.default_rng(self.config.random_seed)
        self.world = World(self.config.width, self.config.height)
        self.planner = Planner(max_expansions=self.config.max_expansions)
        self.current_figure: Optional[Figure] = None
        self.figures_placed = 0
        self.steps_planned = 0
        self.game_over = False
        self.reset()

    def reset(self) -> None:
        self.world.resample(
            self.rng,
            row_threshold=self.config.spawn_rows - 1,
            col_threshold=self.config.spawn_columns - 1,
            wall_probability=self.config.wall_probability,
        )
        self.current_figure = None
        self.figures_placed = 0
        self.steps_planned = 0
        self.game_over = False

    def _random_kind(self) -> FigureKind:
        kinds = list(FigureKind)
        return kinds[int(self.rng.integers(len(kinds)))]

    def spawn_figure(self, kind: Union[FigureKind, str, None] = None) -> Figure:
        figure = Figure.create(kind if kind is not None else self._random_kind())
        (x0, y0), (x1, _) = figure.bounds()
        w = x1 - x0 + 1
        figure = figure.moved((self.world.width - w) // 2 - x0, -y0)
        self.current_figure = figure
        if not self.world.is_legal(figure):
            logger.warning(f"Spawn pose {figure} is blocked")
            self.game_over = True
        return figure

    def step(self, kind: Union[FigureKind, str, None] = None) -> Tuple[Plan, dict]:
        if self.game_over:
            return (), self.info()
        figure = self.spawn_figure(kind)
        if self.game_over:
            return (), self.info()

        plan = self.planner.solve(self.world, figure)
        if not plan:
            logger.warning(f"No placement found for {figure}, game over")
            self.game_over = True
            return plan, self.info()

        self.world.fix(plan[-1])
        self.current_figure = None
        self.figures_placed += 1
        self.steps_planned += len(plan) - 1
        return plan, self.info()

    def info(self) -> dict:
        return {
            "figures_placed": self.figures_placed,
            "steps_planned": self.steps_planned,
            "game_over": self.game_over,
        }

    def get_state(self) -> np.ndarray:
        if self.current_figure is not None and not self.game_over:
            return self.world.snapshot(self.current_figure)
        return self.world.clone_state()
