"""
Successor rule for walking a heightmap.

A step goes to an orthogonal neighbour and is allowed when it climbs at most
``max_climb`` levels. Descents of any size are always allowed. Every step
costs 1. The end cell is the one exception, see ``can_step_onto``.
"""

from typing import Callable, List, Tuple

from ..grid.heightmap import MAX_ELEVATION, Heightmap, Position

Successor = Tuple[Position, int]
SuccessorRule = Callable[[Heightmap, Position], List[Successor]]

STEP_COST = 1

# up, down, left, right as (d_row, d_col)
OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def can_step_onto(
    grid: Heightmap, current: int, dst: Position, max_climb: int = 1
) -> bool:
    """Whether a traveller at elevation ``current`` may step onto ``dst``.

    SPECIAL CASE, do not "fix": the end cell can only be entered from the
    maximum elevation, whatever value is stored under its marker and whatever
    ``max_climb`` is. A 'y' next to the end cannot finish the climb.
    """
    if dst == grid.end():
        return current == MAX_ELEVATION
    return grid.elevation(dst) <= current + max_climb


def climbing_successors(
    grid: Heightmap, pos: Position, max_climb: int = 1
) -> List[Successor]:
    """Return admissible neighbours of ``pos`` with their step cost."""
    current = grid.elevation(pos)
    successors = []
    for d_row, d_col in OFFSETS:
        nxt = Position(pos[0] + d_row, pos[1] + d_col)
        if grid.in_bounds(nxt) and can_step_onto(grid, current, nxt, max_climb):
            successors.append((nxt, STEP_COST))
    return successors


def make_climbing_rule(max_climb: int = 1) -> SuccessorRule:
    """Build a successor rule with a fixed climb limit."""

    def rule(grid: Heightmap, pos: Position) -> List[Successor]:
        return climbing_successors(grid, pos, max_climb)

    return rule


def is_admissible_step(
    grid: Heightmap, src: Position, dst: Position, max_climb: int = 1
) -> bool:
    """Whether a single step from ``src`` to ``dst`` follows the rule."""
    src, dst = Position(*src), Position(*dst)
    if src.manhattan(dst) != 1:
        return False
    if not grid.in_bounds(src) or not grid.in_bounds(dst):
        return False
    return can_step_onto(grid, grid.elevation(src), dst, max_climb)
