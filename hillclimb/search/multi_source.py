"""
Multi-source search: the cheapest climb to the end from any low point.

Each candidate start gets its own independent search with its own frontier,
so the searches can run sequentially or on a thread pool and the results are
combined with a plain minimum.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from tqdm import tqdm

from ..config import SearchConfig
from ..grid.heightmap import MIN_ELEVATION, Heightmap, Position
from ..logger import logger
from .astar import AStarSolver, PathNotFound, SearchResult


@dataclass
class MultiSourceResult:
    """Result of a multi-source search."""

    cost: int
    best_start: Position
    path: List[Position] = field(default_factory=list)
    candidates: int = 0
    reachable: int = 0
    time_taken_ms: float = 0.0


class MultiSourceSearch:
    """Runs one search per candidate start and keeps the cheapest."""

    def __init__(self, solver=None, config: Optional[SearchConfig] = None):
        """Initialize the orchestrator.

        Args:
            solver: Any object with ``solve(grid, start, end) -> SearchResult``,
                defaults to an ``AStarSolver`` built from ``config``
            config: Search configuration
        """
        self.config = config or SearchConfig()
        self.solver = solver or AStarSolver(config=self.config)
        self.logger = logger.bind(component="multi_source")

    @staticmethod
    def candidate_starts(grid: Heightmap) -> List[Position]:
        """The nominal start followed by every other lowest-elevation cell."""
        start = grid.start()
        low_points = grid.all_positions_with_score(MIN_ELEVATION)
        return [start] + [pos for pos in low_points if pos != start]

    def solve(
        self,
        grid: Heightmap,
        end: Optional[Position] = None,
        starts: Optional[Sequence[Position]] = None,
    ) -> MultiSourceResult:
        """Find the cheapest path to ``end`` from any candidate start.

        Unreachable candidates are skipped.

        Raises:
            PathNotFound: if no candidate reaches ``end``
            SearchBudgetExceeded: if any candidate runs out of node budget;
                a budget-limited start is never treated as unreachable
        """
        start_time = time.time()
        end = Position(*end) if end is not None else grid.end()
        starts = (
            [Position(*s) for s in starts]
            if starts is not None
            else self.candidate_starts(grid)
        )

        if self.config.num_workers > 1 and len(starts) > 1:
            results = self._solve_parallel(grid, starts, end)
        else:
            results = self._solve_sequential(grid, starts, end)

        best_start: Optional[Position] = None
        best: Optional[SearchResult] = None
        reachable = 0
        # Ties keep the earliest candidate in order
        for start, result in zip(starts, results):
            if result is None:
                continue
            reachable += 1
            if best is None or result.cost < best.cost:
                best_start, best = start, result

        elapsed_ms = (time.time() - start_time) * 1000
        if best is None:
            self.logger.info(
                f"None of {len(starts)} candidate starts reach {tuple(end)}"
            )
            raise PathNotFound(
                None, end, reason=f"all {len(starts)} starts unreachable"
            )

        self.logger.info(
            f"Best start {tuple(best_start)} with cost {best.cost} "
            f"({reachable}/{len(starts)} reachable, {elapsed_ms:.1f}ms)"
        )
        return MultiSourceResult(
            cost=best.cost,
            best_start=best_start,
            path=best.path,
            candidates=len(starts),
            reachable=reachable,
            time_taken_ms=elapsed_ms,
        )

    def _solve_one(
        self, grid: Heightmap, start: Position, end: Position
    ) -> Optional[SearchResult]:
        try:
            return self.solver.solve(grid, start, end)
        except PathNotFound as exc:
            self.logger.bind(id=str(tuple(start))).debug(f"Skipping start: {exc}")
            return None

    def _solve_sequential(
        self, grid: Heightmap, starts: Sequence[Position], end: Position
    ) -> List[Optional[SearchResult]]:
        results = []
        with tqdm(
            total=len(starts),
            desc="Candidate starts",
            unit="start",
            leave=False,
            ncols=100,
            disable=not self.config.show_progress,
        ) as pbar:
            for start in starts:
                results.append(self._solve_one(grid, start, end))
                pbar.update(1)
        return results

    def _solve_parallel(
        self, grid: Heightmap, starts: Sequence[Position], end: Position
    ) -> List[Optional[SearchResult]]:
        self.logger.debug(
            f"Dispatching {len(starts)} searches to {self.config.num_workers} workers"
        )
        with ThreadPoolExecutor(max_workers=self.config.num_workers) as executor:
            futures = [
                executor.submit(self._solve_one, grid, start, end) for start in starts
            ]
            results = []
            with tqdm(
                total=len(futures),
                desc="Candidate starts",
                unit="start",
                leave=False,
                ncols=100,
                disable=not self.config.show_progress,
            ) as pbar:
                for future in futures:
                    results.append(future.result())
                    pbar.update(1)
        return results
