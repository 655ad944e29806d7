"""
Heightmap grid model and random heightmap generation.
"""

from .generator import HeightmapGenerator
from .heightmap import (MAX_ELEVATION, MIN_ELEVATION, Heightmap, MalformedGrid,
                        Position, score_char)

__all__ = [
    "Heightmap",
    "HeightmapGenerator",
    "MalformedGrid",
    "Position",
    "score_char",
    "MIN_ELEVATION",
    "MAX_ELEVATION",
]
