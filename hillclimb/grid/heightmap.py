"""
Heightmap model: an immutable grid of elevations with start and end markers.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple, Union

import numpy as np

from ..logger import logger

MIN_ELEVATION = 0
MAX_ELEVATION = 25

START_MARKER = "S"
END_MARKER = "E"


class MalformedGrid(ValueError):
    """Raised when a heightmap cannot be built from its input."""


class Position(NamedTuple):
    row: int
    col: int

    def manhattan(self, other: "Position") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)


def score_char(char: str) -> int:
    """Map a heightmap character to its elevation.

    'a'..'z' map to 0..25, the start marker scores as 'a' and the end marker
    scores as 'z'. Which cells may step onto the end is decided by the
    successor rule, not by this score.
    """
    if char == START_MARKER:
        return MIN_ELEVATION
    if char == END_MARKER:
        return MAX_ELEVATION
    if len(char) == 1 and "a" <= char <= "z":
        return ord(char) - ord("a")
    raise MalformedGrid(f"Unexpected heightmap character {char!r}")


class Heightmap:
    def __init__(
        self,
        elevations: Union[np.ndarray, Iterable[Iterable[int]]],
        start: Position,
        end: Position,
    ):
        try:
            grid = np.array(elevations, dtype=int)
        except ValueError as exc:
            raise MalformedGrid(f"Rows must all have the same length: {exc}") from exc

        if grid.ndim != 2 or grid.size == 0:
            raise MalformedGrid("Heightmap must be a non-empty rectangle")
        if grid.min() < MIN_ELEVATION or grid.max() > MAX_ELEVATION:
            raise MalformedGrid(
                f"Elevations must be between {MIN_ELEVATION} and {MAX_ELEVATION}"
            )

        grid.setflags(write=False)
        self.grid = grid
        self.height, self.width = grid.shape

        self._start = Position(*start)
        self._end = Position(*end)
        if not self.in_bounds(self._start):
            raise MalformedGrid(f"Start {self._start} is outside the heightmap")
        if not self.in_bounds(self._end):
            raise MalformedGrid(f"End {self._end} is outside the heightmap")

    @classmethod
    def from_text(cls, text: str) -> "Heightmap":
        """Parse a block of text, one row per line."""
        rows = [line.strip() for line in text.splitlines() if line.strip()]
        if not rows:
            raise MalformedGrid("Heightmap input is empty")

        width = len(rows[0])
        for row_index, row in enumerate(rows):
            if len(row) != width:
                raise MalformedGrid(
                    f"Row {row_index} has length {len(row)}, expected {width}"
                )

        starts: List[Position] = []
        ends: List[Position] = []
        elevations = []
        for row_index, row in enumerate(rows):
            scored = []
            for col_index, char in enumerate(row):
                if char == START_MARKER:
                    starts.append(Position(row_index, col_index))
                elif char == END_MARKER:
                    ends.append(Position(row_index, col_index))
                scored.append(score_char(char))
            elevations.append(scored)

        if not starts:
            raise MalformedGrid("Heightmap has no start marker 'S'")
        if len(ends) != 1:
            raise MalformedGrid(
                f"Heightmap must have exactly one end marker 'E', found {len(ends)}"
            )
        if len(starts) > 1:
            logger.bind(component="heightmap").debug(
                f"{len(starts)} start markers, using {starts[0]} as the nominal start"
            )

        return cls(elevations, starts[0], ends[0])

    @classmethod
    def from_file(cls, filename: Union[str, Path]) -> "Heightmap":
        with open(filename, "r") as f:
            return cls.from_text(f.read())

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.height and 0 <= col < self.width

    def elevation(self, pos: Position) -> int:
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} is outside the heightmap")
        return int(self.grid[pos[0], pos[1]])

    def start(self) -> Position:
        return self._start

    def end(self) -> Position:
        return self._end

    def positions(self) -> Iterator[Position]:
        """All positions in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield Position(row, col)

    def all_positions_with_score(self, score: int) -> List[Position]:
        """Every position with the given elevation, in row-major order."""
        if not MIN_ELEVATION <= score <= MAX_ELEVATION:
            raise ValueError(
                f"score must be between {MIN_ELEVATION} and {MAX_ELEVATION}"
            )
        rows, cols = np.nonzero(self.grid == score)
        return [Position(int(r), int(c)) for r, c in zip(rows, cols)]

    def copy_with_elevation(self, pos: Position, score: int) -> "Heightmap":
        """Return a new heightmap with one cell changed.

        The start and end cells keep their marker scores and cannot be changed.
        """
        pos = Position(*pos)
        if pos in (self._start, self._end):
            raise ValueError(f"Cannot change the elevation of marker cell {pos}")
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} is outside the heightmap")
        grid = self.grid.copy()
        grid[pos.row, pos.col] = score
        return Heightmap(grid, self._start, self._end)

    def _symbol(self, pos: Position) -> str:
        if pos == self._start:
            return START_MARKER
        if pos == self._end:
            return END_MARKER
        return chr(ord("a") + int(self.grid[pos.row, pos.col]))

    def render_path(self, path: Iterable[Position], marker: str = "#") -> str:
        """Render the heightmap with the interior of a path overlaid."""
        on_path = {Position(*p) for p in path} - {self._start, self._end}
        result = []
        for row in range(self.height):
            line = []
            for col in range(self.width):
                pos = Position(row, col)
                line.append(marker if pos in on_path else self._symbol(pos))
            result.append("".join(line))
        return "\n".join(result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Heightmap):
            return NotImplemented
        return (
            self._start == other._start
            and self._end == other._end
            and np.array_equal(self.grid, other.grid)
        )

    def __hash__(self) -> int:
        return hash((self._start, self._end, self.grid.tobytes()))

    def __str__(self) -> str:
        return self.render_path([])

    def __repr__(self) -> str:
        return (
            f"Heightmap({self.width}x{self.height}, "
            f"start={tuple(self._start)}, end={tuple(self._end)})"
        )
