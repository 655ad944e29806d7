"""
Top-level operations for answering heightmap climbing puzzles.
"""

from typing import Optional, Tuple

from .config import SearchConfig
from .grid.heightmap import Heightmap, Position
from .search.astar import AStarSolver
from .search.multi_source import MultiSourceSearch


def shortest_path(
    grid: Heightmap,
    start: Optional[Position] = None,
    end: Optional[Position] = None,
    config: Optional[SearchConfig] = None,
) -> int:
    """Cost of the cheapest climb from ``start`` to ``end``.

    Raises:
        PathNotFound: if ``end`` is unreachable from ``start``
    """
    return AStarSolver(config=config).solve(grid, start, end).cost


def shortest_path_from_any_low_point(
    grid: Heightmap,
    end: Optional[Position] = None,
    config: Optional[SearchConfig] = None,
) -> int:
    """Cost of the cheapest climb to ``end`` from the start or any 'a' cell.

    Raises:
        PathNotFound: if no low point reaches ``end``
    """
    return MultiSourceSearch(config=config).solve(grid, end).cost


def solve_puzzle(text: str, config: Optional[SearchConfig] = None) -> Tuple[int, int]:
    """Parse puzzle input and return (part one, part two)."""
    grid = Heightmap.from_text(text)
    return (
        shortest_path(grid, config=config),
        shortest_path_from_any_low_point(grid, config=config),
    )
