from __future__ import annotations

from typing import List, Optional, Sequence, Set

from tetris_autoplan.game.geometry import Point, neighbors
from tetris_autoplan.game.grid import Cell, World
from tetris_autoplan.game.pieces import Figure


def support_cells(world: World, figure: Figure) -> List[Point]:
    """In-bounds 4-neighbours of every figure cell, without repeats."""
    seen: Set[Point] = set()
    cells: List[Point] = []
    for point in figure.points:
        for n in neighbors(point):
            if n not in seen and world.in_bounds(n):
                seen.add(n)
                cells.append(n)
    return cells


def score(world: World, goal: Optional[Figure], candidate: Figure) -> float:
    """Rank a resting pose, higher is better.

    The first term is the share of occupied cells around the candidate
    (walls, plus the candidate's own cells once it is marked), the second
    is its mean row, so deeper poses win. ``goal`` is accepted but unused.
    """
    cells = support_cells(world, candidate)
    with world.occupied(candidate):
        filled = sum(1 for p in cells if world.cell(p) != Cell.EMPTY)
    density = filled / len(cells) if cells else 0.0
    depth = sum(y for _, y in candidate.points) / len(candidate.points)
    return density + depth


def rank_candidates(world: World, goal: Optional[Figure], candidates: Sequence[Figure]) -> List[Figure]:
    """Candidates ordered best first; ties keep their input order."""
    scored = [(score(world, goal, c), i, c) for i, c in enumerate(candidates)]
    scored.sort(key=lambda item: (-item[0], item[1]))
    return [c for _, _, c in scored]
