from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set

from knightpath.engine.board import MoveGraph
from knightpath.engine.square import Square


logger = logging.getLogger(__name__)

ALGORITHMS = ("bfs", "dfs")


@dataclass
class TraversalState:
    """Visited set and predecessor links for a single search."""

    visited: Set[Square] = field(default_factory=set)
    predecessor: Dict[Square, Optional[Square]] = field(default_factory=dict)

    def mark(self, square: Square, parent: Optional[Square]) -> None:
        self.visited.add(square)
        self.predecessor[square] = parent


@dataclass
class SearchResult:
    algorithm: str
    start: Square
    finish: Square
    found: Optional[Square]
    path: List[Square]
    nodes: int
    time_ms: int
    state: TraversalState = field(repr=False)

    @property
    def moves(self) -> Optional[int]:
        if self.found is None:
            return None
        return len(self.path) - 1


class PathSearchService:
    """Knight path search over a shared, read-only move graph.

    Every call allocates its own ``TraversalState``, so consecutive or
    concurrent searches on the same service never see each other's
    visited flags or predecessor links.
    """

    def __init__(self, graph: Optional[MoveGraph] = None) -> None:
        self.graph = graph if graph is not None else MoveGraph.build()

    def search(self, start: Square, finish: Square, algorithm: str = "bfs") -> SearchResult:
        if algorithm == "bfs":
            return self.bfs(start, finish)
        if algorithm == "dfs":
            return self.dfs(start, finish)
        raise ValueError(f"unknown algorithm: {algorithm!r}")

    def bfs(self, start: Square, finish: Square) -> SearchResult:
        """Breadth-first search from ``start`` to ``finish``.

        Stops as soon as ``finish`` is discovered (not when it is dequeued);
        its predecessor chain is already complete at that point. The path
        returned is a shortest one in number of knight moves.
        """
        self._check_args(start, finish)
        t0 = time.perf_counter()
        state = TraversalState()
        state.mark(start, None)
        found: Optional[Square] = start if start == finish else None

        queue: Deque[Square] = deque([start])
        while queue and found is None:
            node = queue.popleft()
            for child in self.graph.neighbors(node):
                if child in state.visited:
                    continue
                state.mark(child, node)
                queue.append(child)
                if child == finish:
                    found = child
                    break

        return self._result("bfs", start, finish, found, state, t0)

    def dfs(self, start: Square, finish: Square) -> SearchResult:
        """Non-backtracking depth-first search.

        Each round expands the node on top of the stack, pushing every
        unvisited neighbour. Nodes are never popped: once the top has no
        unvisited neighbours the search has stalled and reports no path,
        even if one exists. The path found, if any, need not be shortest.
        """
        self._check_args(start, finish)
        t0 = time.perf_counter()
        state = TraversalState()
        state.mark(start, None)
        found: Optional[Square] = start if start == finish else None

        stack: List[Square] = [start]
        while found is None:
            node = stack[-1]
            pushed = False
            for child in self.graph.neighbors(node):
                if child in state.visited:
                    continue
                state.mark(child, node)
                stack.append(child)
                pushed = True
                if child == finish:
                    found = child
                    break
            if not pushed:
                logger.debug("dfs stalled at %s after %d nodes", node, len(state.visited))
                break

        return self._result("dfs", start, finish, found, state, t0)

    def distance_table(self, start: Square) -> Dict[Square, int]:
        """Knight distance from ``start`` to every reachable square."""
        if start is None:
            raise ValueError("start square shouldn't be None")
        if start not in self.graph:
            raise ValueError(f"square not on board: {start}")
        dist: Dict[Square, int] = {start: 0}
        queue: Deque[Square] = deque([start])
        while queue:
            node = queue.popleft()
            for child in self.graph.neighbors(node):
                if child not in dist:
                    dist[child] = dist[node] + 1
                    queue.append(child)
        return dist

    def _check_args(self, start: Optional[Square], finish: Optional[Square]) -> None:
        if start is None:
            raise ValueError("start square shouldn't be None")
        if finish is None:
            raise ValueError("finish square shouldn't be None")
        for sq in (start, finish):
            if sq not in self.graph:
                raise ValueError(f"square not on board: {sq}")

    def _result(
        self,
        algorithm: str,
        start: Square,
        finish: Square,
        found: Optional[Square],
        state: TraversalState,
        t0: float,
    ) -> SearchResult:
        path = reconstruct(found, state) if found is not None else []
        res = SearchResult(
            algorithm=algorithm,
            start=start,
            finish=finish,
            found=found,
            path=path,
            nodes=len(state.visited),
            time_ms=int((time.perf_counter() - t0) * 1000),
            state=state,
        )
        logger.debug(
            "%s %s->%s found=%s moves=%s nodes=%d",
            algorithm,
            start,
            finish,
            found is not None,
            res.moves,
            res.nodes,
        )
        return res


def reconstruct(node: Square, state: TraversalState) -> List[Square]:
    """Follow predecessor links from ``node`` back to the search root.

    Returns:
        List[Square]: Path in root-to-node order.

    Raises:
        ValueError: If ``node`` was not reached by the search that produced
            ``state``.
    """
    if node not in state.predecessor:
        raise ValueError(f"square was not visited: {node}")
    path: List[Square] = []
    cur: Optional[Square] = node
    while cur is not None:
        path.append(cur)
        cur = state.predecessor[cur]
    path.reverse()
    return path
