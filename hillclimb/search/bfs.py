"""
Plain breadth-first search over a heightmap.

Every step costs 1, so the first time the end is dequeued its depth is the
shortest path cost. Kept as the reference the A* engine is checked against.
"""

import time
from collections import deque
from typing import Deque, Dict, Optional, Set, Tuple

from ..config import SearchConfig
from ..grid.heightmap import Heightmap, Position
from ..logger import logger
from .astar import (PathNotFound, SearchBudgetExceeded, SearchResult,
                    reconstruct_path)
from .successors import SuccessorRule, make_climbing_rule


class BFSSolver:
    """BFS solver for heightmap climbing."""

    def __init__(
        self,
        successors: Optional[SuccessorRule] = None,
        config: Optional[SearchConfig] = None,
    ):
        self.config = config or SearchConfig()
        self.successors = successors or make_climbing_rule(self.config.max_climb)
        self.logger = logger.bind(component="bfs")

    def solve(
        self,
        grid: Heightmap,
        start: Optional[Position] = None,
        end: Optional[Position] = None,
    ) -> SearchResult:
        """Find the shortest path using BFS.

        Raises:
            PathNotFound: if ``end`` cannot be reached
        """
        start_time = time.time()
        start = Position(*start) if start is not None else grid.start()
        end = Position(*end) if end is not None else grid.end()
        for pos in (start, end):
            if not grid.in_bounds(pos):
                raise ValueError(f"Position {pos} is outside the heightmap")

        # BFS queue: (position, depth)
        queue: Deque[Tuple[Position, int]] = deque([(start, 0)])
        visited: Set[Position] = {start}
        parents: Dict[Position, Position] = {}
        nodes_explored = 0

        while queue:
            pos, depth = queue.popleft()
            nodes_explored += 1

            if (
                self.config.max_nodes is not None
                and nodes_explored > self.config.max_nodes
            ):
                raise SearchBudgetExceeded(start, end, self.config.max_nodes)

            if pos == end:
                elapsed_ms = (time.time() - start_time) * 1000
                self.logger.debug(
                    f"Reached {tuple(end)} from {tuple(start)}: cost {depth}, "
                    f"{nodes_explored} nodes, {elapsed_ms:.1f}ms"
                )
                return SearchResult(
                    cost=depth,
                    path=reconstruct_path(parents, start, end),
                    nodes_explored=nodes_explored,
                    time_taken_ms=elapsed_ms,
                    success=True,
                )

            for nxt, step_cost in self.successors(grid, pos):
                if nxt not in visited:
                    visited.add(nxt)
                    parents[nxt] = pos
                    queue.append((nxt, depth + step_cost))

        self.logger.debug(
            f"No path from {tuple(start)} to {tuple(end)} after {nodes_explored} nodes"
        )
        raise PathNotFound(start, end, nodes_explored)
