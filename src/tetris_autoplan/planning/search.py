"""Generic best-first graph search with an A* specialisation.

The search is agnostic of the domain: callers provide a hashable identity
for states, a goal test and a successor function. States are wrapped in
:class:`SearchNode` objects which form a tree rooted at the start state.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, Set, TypeVar

from loguru import logger


S = TypeVar("S")


@dataclass
class SearchNode(Generic[S]):
    state: S
    parent: Optional["SearchNode[S]"] = field(default=None, repr=False)
    path_cost: int = 0

    def child(self, state: S, step_cost: int = 1) -> "SearchNode[S]":
        return SearchNode(state=state, parent=self, path_cost=self.path_cost + step_cost)

    def path(self) -> List[S]:
        """States from the root down to this node."""
        states: List[S] = []
        node: Optional[SearchNode[S]] = self
        while node is not None:
            states.append(node.state)
            node = node.parent
        states.reverse()
        return states


class PriorityFrontier(Generic[S]):
    """Min-priority queue of nodes keyed by state identity.

    Removal marks the heap entry dead instead of re-heapifying; dead
    entries are skipped on pop.
    """

    _REMOVED = object()

    def __init__(self, identity: Callable[[SearchNode[S]], Hashable], f: Callable[[SearchNode[S]], float]) -> None:
        self._identity = identity
        self._f = f
        self._heap: List[list] = []
        self._entries: Dict[Hashable, list] = {}
        self._counter = itertools.count()

    def push(self, node: SearchNode[S]) -> None:
        key = self._identity(node)
        if key in self._entries:
            self.remove(node)
        entry = [self._f(node), next(self._counter), node]
        self._entries[key] = entry
        heapq.heappush(self._heap, entry)

    def pop(self) -> SearchNode[S]:
        while self._heap:
            _, _, node = heapq.heappop(self._heap)
            if node is not self._REMOVED:
                del self._entries[self._identity(node)]
                return node
        raise KeyError("pop from an empty frontier")

    def __contains__(self, node: SearchNode[S]) -> bool:
        return self._identity(node) in self._entries

    def get(self, node: SearchNode[S]) -> SearchNode[S]:
        return self._entries[self._identity(node)][2]

    def priority_of(self, node: SearchNode[S]) -> float:
        return self._entries[self._identity(node)][0]

    def remove(self, node: SearchNode[S]) -> None:
        entry = self._entries.pop(self._identity(node))
        entry[2] = self._REMOVED

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


def best_first_graph_search(
    root: SearchNode[S],
    *,
    identity: Callable[[SearchNode[S]], Hashable],
    f: Callable[[SearchNode[S]], float],
    is_goal: Callable[[SearchNode[S]], bool],
    successors: Callable[[SearchNode[S]], Iterable[SearchNode[S]]],
    max_expansions: Optional[int] = None,
) -> Optional[SearchNode[S]]:
    """Expand nodes in ascending ``f`` order until a goal node is popped.

    Returns the goal node or ``None`` when the frontier runs dry (or when
    ``max_expansions`` nodes were expanded without reaching the goal).
    """
    if is_goal(root):
        return root

    frontier: PriorityFrontier[S] = PriorityFrontier(identity, f)
    frontier.push(root)
    explored: Set[Hashable] = set()
    expanded = 0

    while frontier:
        node = frontier.pop()
        if is_goal(node):
            logger.debug(f"[search] goal reached: expanded={expanded}, explored={len(explored)}, frontier={len(frontier)}")
            return node
        if max_expansions is not None and expanded >= max_expansions:
            logger.warning(f"[search] gave up after {expanded} expansions, frontier={len(frontier)}")
            return None
        explored.add(identity(node))
        expanded += 1

        for child in successors(node):
            if child in frontier:
                if f(child) < frontier.priority_of(child):
                    frontier.remove(child)
                    frontier.push(child)
            elif identity(child) not in explored:
                frontier.push(child)

    logger.debug(f"[search] frontier exhausted: expanded={expanded}")
    return None


def astar_graph_search(
    root: SearchNode[S],
    *,
    identity: Callable[[SearchNode[S]], Hashable],
    h: Callable[[SearchNode[S]], float],
    is_goal: Callable[[SearchNode[S]], bool],
    successors: Callable[[SearchNode[S]], Iterable[SearchNode[S]]],
    max_expansions: Optional[int] = None,
) -> Optional[SearchNode[S]]:
    """Best-first search on ``f(n) = path_cost(n) + h(n)``."""

    def f(node: SearchNode[S]) -> float:
        return node.path_cost + h(node)

    return best_first_graph_search(
        root,
        identity=identity,
        f=f,
        is_goal=is_goal,
        successors=successors,
        max_expansions=max_expansions,
    )
