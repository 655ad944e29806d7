"""
HeightmapGenerator for producing random heightmaps.

Used to drive property tests and the debug script with deterministic,
seeded terrain.
"""

import random
from typing import Optional

import numpy as np

from ..config import HeightmapConfig
from .heightmap import MAX_ELEVATION, MIN_ELEVATION, Heightmap, Position


class HeightmapGenerator:
    """Generates random heightmaps with smooth-ish terrain."""

    def __init__(self, config: HeightmapConfig, seed: Optional[int] = None):
        """Initialize generator with configuration.

        Args:
            config: Heightmap generation configuration
            seed: Random seed for deterministic generation
        """
        self.config = config
        self.rng = random.Random(seed)

    def generate(self) -> Heightmap:
        """Generate a complete heightmap.

        Returns:
            Heightmap: terrain with start and end markers placed
        """
        grid = self._generate_terrain()
        start, end = self._place_markers(grid)
        summit = self._place_summit(grid, start, end)
        self._place_low_points(grid, {start, end, summit})
        return Heightmap(grid, start, end)

    def generate_text(self) -> str:
        """Generate a heightmap and render it in puzzle input format."""
        return str(self.generate())

    def _generate_terrain(self) -> np.ndarray:
        """Fill the grid row by row, each cell drifting from its neighbours."""
        h, w = self.config.height, self.config.width
        step = self.config.max_step
        grid = np.zeros((h, w), dtype=int)

        for row in range(h):
            for col in range(w):
                neighbours = []
                if row > 0:
                    neighbours.append(grid[row - 1, col])
                if col > 0:
                    neighbours.append(grid[row, col - 1])

                if neighbours:
                    base = int(round(sum(neighbours) / len(neighbours)))
                else:
                    base = self.rng.randint(MIN_ELEVATION, MAX_ELEVATION // 2)

                value = base + self.rng.randint(-step, step)
                grid[row, col] = min(max(value, MIN_ELEVATION), MAX_ELEVATION)

        return grid

    def _place_markers(self, grid: np.ndarray):
        """Pick distinct start and end cells and give them their marker scores."""
        h, w = grid.shape
        cells = [Position(r, c) for r in range(h) for c in range(w)]
        start, end = self.rng.sample(cells, 2)
        grid[start.row, start.col] = MIN_ELEVATION
        grid[end.row, end.col] = MAX_ELEVATION
        return start, end

    def _place_summit(self, grid: np.ndarray, start: Position, end: Position):
        """Raise one neighbour of the end to 'z' so the end can be entered."""
        h, w = grid.shape
        neighbours = [
            Position(end.row + d_row, end.col + d_col)
            for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1))
            if 0 <= end.row + d_row < h and 0 <= end.col + d_col < w
        ]
        neighbours = [pos for pos in neighbours if pos != start]
        if not neighbours:
            return None
        summit = self.rng.choice(neighbours)
        grid[summit.row, summit.col] = MAX_ELEVATION
        return summit

    def _place_low_points(self, grid: np.ndarray, keep):
        """Force a share of the other cells down to the lowest elevation."""
        h, w = grid.shape
        cells = [
            Position(r, c)
            for r in range(h)
            for c in range(w)
            if Position(r, c) not in keep
        ]
        count = int(len(cells) * self.config.low_point_ratio)
        for pos in self.rng.sample(cells, count):
            grid[pos.row, pos.col] = MIN_ELEVATION
