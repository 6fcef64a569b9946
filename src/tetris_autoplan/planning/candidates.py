from __future__ import annotations

from typing import Dict, Iterable, List

from tetris_autoplan.game.geometry import Point, Points
from tetris_autoplan.game.grid import World
from tetris_autoplan.game.pieces import Figure


QUARTER_TURNS = (90, 180, 270)


def poses_at(figure: Figure, point: Point) -> List[Figure]:
    """The figure centered on ``point`` at 0, 90, 180 and 270 degrees."""
    base = figure.translated(point)
    return [base] + [base.rotated(degrees) for degrees in QUARTER_TURNS]


def poses_at_many(figure: Figure, points: Iterable[Point]) -> List[Figure]:
    """``poses_at`` for every point, without repeated point sequences."""
    unique: Dict[Points, Figure] = {}
    for point in points:
        for pose in poses_at(figure, point):
            unique.setdefault(pose.key, pose)
    return list(unique.values())


def legal_subset(world: World, candidates: Iterable[Figure]) -> List[Figure]:
    return [c for c in candidates if world.figure_in_bounds(c) and world.may_place(c)]


def row_candidates(world: World, figure: Figure, row: int) -> List[Figure]:
    """Legal poses centered on the empty cells of ``row``."""
    points = [(x, row) for x in world.empty_columns(row)]
    return legal_subset(world, poses_at_many(figure, points))
