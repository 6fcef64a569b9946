from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from tetris_autoplan.game.core import AutoPlayGame, GameConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Let the planner drop tetrominoes into a random obstacle field")
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--spawn-rows", type=int, default=12)
    p.add_argument("--wall-probability", type=float, default=0.5)
    p.add_argument("--max-expansions", type=int, default=None)
    p.add_argument("--figures", type=int, default=10)
    p.add_argument("--kind", type=str, default=None, help="Always spawn this kind (I, O, L, J, S, Z, T)")
    p.add_argument("--fps", type=int, default=8)
    p.add_argument("--headless", action="store_true", help="Log boards as text instead of opening a window")
    p.add_argument("--log-level", type=str, default="INFO")
    return p


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=args.width,
        height=args.height,
        random_seed=args.seed,
        spawn_rows=args.spawn_rows,
        wall_probability=args.wall_probability,
        max_expansions=args.max_expansions,
    )


def run_headless(game: AutoPlayGame, figures: int, kind: Optional[str]) -> None:
    logger.info(f"Initial board:\n{game.world.to_text()}")
    for _ in range(figures):
        plan, info = game.step(kind)
        if info["game_over"]:
            break
        logger.info(f"Placed {plan[-1]} in {len(plan) - 1} steps:\n{game.world.to_text()}")
    logger.info(f"Done: {game.info()}")


def run_window(game: AutoPlayGame, figures: int, kind: Optional[str], fps: int) -> None:
    import pygame

    from .renderer import Renderer

    pygame.init()
    try:
        renderer = Renderer(cell_size=28)
        screen = pygame.display.set_mode(renderer.window_size(game.world.width, game.world.height))
        pygame.display.set_caption("Tetris AutoPlan")
        clock = pygame.time.Clock()

        placed = 0
        while placed < figures and not game.game_over:
            world_before = game.world.copy()
            plan, _ = game.step(kind)
            for pose in plan:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        return
                renderer.draw(screen, world_before.snapshot(pose), pose.kind)
                clock.tick(fps)
            placed += 1

        renderer.draw(screen, game.world.clone_state())
        # Hold the final board until the window is closed
        waiting = True
        while waiting:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                    waiting = False
            clock.tick(30)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    game = AutoPlayGame(config_from_args(args))
    if args.headless:
        run_headless(game, args.figures, args.kind)
    else:
        run_window(game, args.figures, args.kind, args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
