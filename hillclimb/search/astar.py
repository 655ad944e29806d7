"""
Best-first (A*) search over a heightmap.

The graph is implicit: neighbours are generated on demand by a successor rule.
With the Manhattan heuristic this is A*; with the zero heuristic it expands in
plain cost order, which on this unit-cost graph is breadth-first order.
"""

import heapq
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..config import SearchConfig
from ..grid.heightmap import Heightmap, Position
from ..logger import logger
from .heuristics import Heuristic, manhattan_distance, zero_heuristic
from .successors import SuccessorRule, make_climbing_rule


class PathNotFound(LookupError):
    """Raised when a search exhausts its frontier without reaching the end."""

    def __init__(
        self,
        start: Optional[Position],
        end: Position,
        nodes_explored: int = 0,
        reason: str = "frontier exhausted",
    ):
        self.start = start
        self.end = end
        self.nodes_explored = nodes_explored
        self.reason = reason
        origin = f"from {tuple(start)} " if start is not None else ""
        super().__init__(f"No path {origin}to {tuple(end)} ({reason})")


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search uses up ``SearchConfig.max_nodes`` before finishing.

    Running out of budget says nothing about reachability, so this is kept
    apart from ``PathNotFound`` and is never filtered out by the multi-source
    scan.
    """

    def __init__(self, start: Position, end: Position, max_nodes: int):
        self.start = start
        self.end = end
        self.max_nodes = max_nodes
        super().__init__(
            f"Search from {tuple(start)} to {tuple(end)} exceeded "
            f"its budget of {max_nodes} nodes"
        )


@dataclass
class SearchResult:
    """Result of a single-source search."""

    cost: int
    path: List[Position] = field(default_factory=list)
    nodes_explored: int = 0
    time_taken_ms: float = 0.0
    success: bool = True


def reconstruct_path(
    parents: Dict[Position, Position], start: Position, end: Position
) -> List[Position]:
    path = [end]
    while path[-1] != start:
        path.append(parents[path[-1]])
    path.reverse()
    return path


class AStarSolver:
    """A* solver for heightmap climbing."""

    def __init__(
        self,
        successors: Optional[SuccessorRule] = None,
        heuristic: Optional[Heuristic] = None,
        config: Optional[SearchConfig] = None,
    ):
        """Initialize A* solver.

        Args:
            successors: Successor rule, defaults to the climbing rule with
                ``config.max_climb``
            heuristic: Remaining-cost estimate; must be consistent for the
                result to be optimal. Defaults to Manhattan distance, or the
                zero heuristic when ``config.use_heuristic`` is False
            config: Search configuration
        """
        self.config = config or SearchConfig()
        self.successors = successors or make_climbing_rule(self.config.max_climb)
        if heuristic is None:
            heuristic = (
                manhattan_distance if self.config.use_heuristic else zero_heuristic
            )
        self.heuristic = heuristic
        self.logger = logger.bind(component="astar")

    def solve(
        self,
        grid: Heightmap,
        start: Optional[Position] = None,
        end: Optional[Position] = None,
    ) -> SearchResult:
        """Find the cheapest path from ``start`` to ``end``.

        Args:
            grid: Heightmap to search
            start: Start position, defaults to the heightmap's start
            end: Goal position, defaults to the heightmap's end

        Returns:
            SearchResult with cost and path

        Raises:
            PathNotFound: if ``end`` cannot be reached
        """
        start_time = time.time()
        start = Position(*start) if start is not None else grid.start()
        end = Position(*end) if end is not None else grid.end()
        for pos in (start, end):
            if not grid.in_bounds(pos):
                raise ValueError(f"Position {pos} is outside the heightmap")

        # Frontier entries: (priority, sequence, cost, position). The sequence
        # number breaks priority ties in insertion order.
        sequence = 0
        frontier: List[Tuple[int, int, int, Position]] = [
            (self.heuristic(start, end), sequence, 0, start)
        ]
        best_cost: Dict[Position, int] = {start: 0}
        parents: Dict[Position, Position] = {}
        nodes_explored = 0

        while frontier:
            _, _, cost, pos = heapq.heappop(frontier)

            # Stale entry, a cheaper path was recorded after this was pushed
            if cost > best_cost[pos]:
                continue

            nodes_explored += 1
            if (
                self.config.max_nodes is not None
                and nodes_explored > self.config.max_nodes
            ):
                self.logger.debug(
                    f"Stopping search from {tuple(start)} after "
                    f"{self.config.max_nodes} nodes"
                )
                raise SearchBudgetExceeded(start, end, self.config.max_nodes)

            if pos == end:
                elapsed_ms = (time.time() - start_time) * 1000
                path = reconstruct_path(parents, start, end)
                self.logger.debug(
                    f"Reached {tuple(end)} from {tuple(start)}: cost {cost}, "
                    f"{nodes_explored} nodes, {elapsed_ms:.1f}ms"
                )
                return SearchResult(
                    cost=cost,
                    path=path,
                    nodes_explored=nodes_explored,
                    time_taken_ms=elapsed_ms,
                    success=True,
                )

            for nxt, step_cost in self.successors(grid, pos):
                new_cost = cost + step_cost
                if new_cost < best_cost.get(nxt, new_cost + 1):
                    best_cost[nxt] = new_cost
                    parents[nxt] = pos
                    sequence += 1
                    heapq.heappush(
                        frontier,
                        (new_cost + self.heuristic(nxt, end), sequence, new_cost, nxt),
                    )

        self.logger.debug(
            f"No path from {tuple(start)} to {tuple(end)} after {nodes_explored} nodes"
        )
        raise PathNotFound(start, end, nodes_explored)
