"""
Hill climbing: shortest paths across elevation heightmaps.
"""

from .api import shortest_path, shortest_path_from_any_low_point, solve_puzzle
from .config import HeightmapConfig, SearchConfig
from .grid import Heightmap, HeightmapGenerator, MalformedGrid, Position
from .search import (AStarSolver, BFSSolver, MultiSourceResult,
                     MultiSourceSearch, PathNotFound, SearchResult)

__version__ = "0.1.0"

__all__ = [
    "shortest_path",
    "shortest_path_from_any_low_point",
    "solve_puzzle",
    "Heightmap",
    "HeightmapGenerator",
    "MalformedGrid",
    "Position",
    "SearchConfig",
    "HeightmapConfig",
    "AStarSolver",
    "BFSSolver",
    "MultiSourceSearch",
    "MultiSourceResult",
    "PathNotFound",
    "SearchResult",
]
