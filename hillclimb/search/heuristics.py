from typing import Callable

from ..grid.heightmap import Position

Heuristic = Callable[[Position, Position], int]


def manhattan_distance(pos: Position, goal: Position) -> int:
    """Admissible and consistent for unit-cost 4-connected moves."""
    return abs(pos[0] - goal[0]) + abs(pos[1] - goal[1])


def zero_heuristic(pos: Position, goal: Position) -> int:
    return 0
