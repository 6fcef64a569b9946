from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

from loguru import logger

from tetris_autoplan.game.geometry import Point
from tetris_autoplan.game.grid import World
from tetris_autoplan.game.pieces import Figure

from .candidates import legal_subset, poses_at, row_candidates
from .evaluation import rank_candidates
from .search import SearchNode, astar_graph_search


Plan = Tuple[Figure, ...]

# One cell toward the floor, left, right. Moving back toward row 0 is not
# offered: a falling figure never rises.
SHIFTS: Tuple[Point, ...] = ((0, 1), (-1, 0), (1, 0))


def successor_poses(world: World, figure: Figure, shifts: Sequence[Point] = SHIFTS) -> Iterator[Figure]:
    """Legal poses one move or one in-place rotation away from ``figure``."""
    moves = [figure.moved(dx, dy) for dx, dy in shifts]
    turns = poses_at(figure, figure.center)
    yield from legal_subset(world, moves + turns)


def pose_distance(pose: Figure, goal: Figure) -> float:
    """Mean Manhattan distance between matching points of two poses."""
    total = sum(abs(px - gx) + abs(py - gy) for (px, py), (gx, gy) in zip(pose.points, goal.points))
    return total / len(goal.points)


def find_path(
    world: World,
    start: Figure,
    goal: Figure,
    *,
    shifts: Sequence[Point] = SHIFTS,
    max_expansions: Optional[int] = None,
) -> Plan:
    """A* from ``start`` to ``goal`` over moves and rotations.

    ``world`` must not have the moving figure marked on it. Returns the
    poses from start to goal inclusive, or an empty plan.
    """

    def successors(node: SearchNode[Figure]) -> Iterator[SearchNode[Figure]]:
        for pose in successor_poses(world, node.state, shifts):
            yield node.child(pose)

    found = astar_graph_search(
        SearchNode(state=start),
        identity=lambda node: node.state.key,
        h=lambda node: pose_distance(node.state, goal),
        is_goal=lambda node: node.state.key == goal.key,
        successors=successors,
        max_expansions=max_expansions,
    )
    if found is None:
        return ()
    return tuple(found.path())


def solve(world: World, figure: Figure, *, max_expansions: Optional[int] = None) -> Plan:
    """Choose a resting pose for ``figure`` and a way to get there.

    Rows are scanned from the bottom up. Within a row the legal candidates
    are tried best score first; the first reachable one wins.
    """
    for row in range(world.height - 1, -1, -1):
        candidates = row_candidates(world, figure, row)
        if not candidates:
            continue
        ranked = rank_candidates(world, figure, candidates)
        logger.debug(f"[planner] row {row}: {len(ranked)} candidates")
        for goal in ranked:
            plan = find_path(world, figure, goal, max_expansions=max_expansions)
            if plan:
                logger.info(f"[planner] {figure.kind.name} -> row {row} {goal}, {len(plan) - 1} steps")
                return plan
    logger.info(f"[planner] no reachable placement for {figure}")
    return ()


class Planner:
    """Holds planning options for repeated ``solve`` calls."""

    def __init__(self, max_expansions: Optional[int] = None) -> None:
        if max_expansions is not None and max_expansions <= 0:
            raise ValueError("max_expansions must be positive")
        self.max_expansions = max_expansions

    def solve(self, world: World, figure: Figure) -> Plan:
        return solve(world, figure, max_expansions=self.max_expansions)
