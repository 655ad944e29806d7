"""
Configuration for heightmap searches and heightmap generation.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Configuration for single- and multi-source searches."""

    # Successor rule
    max_climb: int = 1  # Largest upward step allowed between neighbours

    # Search engine
    use_heuristic: bool = True  # False runs the engine with a zero heuristic
    max_nodes: Optional[int] = None  # Expansion cap per search, None = unbounded

    # Multi-source scan
    num_workers: int = 1  # >1 fans independent searches out to a thread pool
    show_progress: bool = False  # tqdm bar over candidate starts

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.max_climb < 0:
            raise ValueError("max_climb must be non-negative")
        if self.max_nodes is not None and self.max_nodes <= 0:
            raise ValueError("max_nodes must be positive")
        if self.num_workers < 1:
            raise ValueError("num_workers must be at least 1")


@dataclass
class HeightmapConfig:
    """Configuration for random heightmap generation."""

    width: int = 8
    height: int = 5
    max_step: int = 2  # Largest elevation jump between generated neighbours
    low_point_ratio: float = 0.1  # Share of extra cells forced down to 'a'

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Heightmap size must be positive, got {self.width}×{self.height}"
            )
        if self.width * self.height < 2:
            raise ValueError("Heightmap needs room for both start and end")
        if self.max_step < 0:
            raise ValueError("max_step must be non-negative")
        if not 0.0 <= self.low_point_ratio <= 1.0:
            raise ValueError("low_point_ratio must be in [0, 1]")
