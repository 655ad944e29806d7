"""
Shortest-path search over heightmaps.

A* with a Manhattan heuristic, a reference BFS, and a multi-source scan over
every low point.
"""

from .astar import AStarSolver, PathNotFound, SearchBudgetExceeded, SearchResult
from .bfs import BFSSolver
from .heuristics import manhattan_distance, zero_heuristic
from .multi_source import MultiSourceResult, MultiSourceSearch
from .successors import (SuccessorRule, can_step_onto, climbing_successors,
                         is_admissible_step, make_climbing_rule)

__all__ = [
    "AStarSolver",
    "BFSSolver",
    "MultiSourceSearch",
    "MultiSourceResult",
    "PathNotFound",
    "SearchBudgetExceeded",
    "SearchResult",
    "SuccessorRule",
    "can_step_onto",
    "climbing_successors",
    "is_admissible_step",
    "make_climbing_rule",
    "manhattan_distance",
    "zero_heuristic",
]
