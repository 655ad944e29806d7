import pytest

from hillclimb.grid.heightmap import Heightmap

EXAMPLE = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""

WALLED_OFF = """\
Saaaaa
aazzzz
aazEzz
aazzzz
"""


@pytest.fixture
def example_grid():
    return Heightmap.from_text(EXAMPLE)


@pytest.fixture
def walled_grid():
    return Heightmap.from_text(WALLED_OFF)


@pytest.fixture
def example_text():
    return EXAMPLE
