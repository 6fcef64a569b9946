"""Placement planning: candidate poses, scoring and A* move search."""

from .candidates import legal_subset, poses_at, poses_at_many
from .evaluation import rank_candidates, score
from .search import SearchNode, astar_graph_search, best_first_graph_search
from .planner import Plan, Planner, find_path, solve

__all__ = [
    "poses_at",
    "poses_at_many",
    "legal_subset",
    "score",
    "rank_candidates",
    "SearchNode",
    "best_first_graph_search",
    "astar_graph_search",
    "Plan",
    "Planner",
    "find_path",
    "solve",
]
