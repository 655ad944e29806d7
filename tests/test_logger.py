"""
Tests for the package log sink.
"""

import io

import pytest

from hillclimb.logger import configure, logger
from hillclimb.search.multi_source import MultiSourceSearch


@pytest.fixture
def stream():
    buffer = io.StringIO()
    configure(sink=buffer, colorize=False)
    yield buffer
    configure()


class TestConfigure:
    def test_info_shown_by_default(self, stream):
        logger.bind(component="astar").info("found it")
        assert "found it" in stream.getvalue()
        assert "astar" in stream.getvalue()

    def test_debug_hidden_by_default(self, stream):
        logger.bind(component="astar").debug("frontier detail")
        assert stream.getvalue() == ""

    def test_verbose_shows_debug(self, stream):
        configure(sink=stream, verbose=True, colorize=False)
        logger.bind(component="bfs").debug("frontier detail")
        assert "frontier detail" in stream.getvalue()

    def test_reconfigure_replaces_sink(self, stream):
        other = io.StringIO()
        configure(sink=other, colorize=False)
        logger.bind(component="cli").info("only once")
        assert "only once" in other.getvalue()
        assert stream.getvalue() == ""

    def test_id_tag(self, stream):
        logger.bind(component="multi_source", id="(4, 0)").info("tagged")
        line = stream.getvalue().strip()
        assert "multi_source" in line
        assert "(4, 0)" in line
        assert line.endswith("tagged")

    def test_skipped_starts_are_tagged(self, stream, walled_grid):
        configure(sink=stream, verbose=True, colorize=False)
        with pytest.raises(LookupError):
            MultiSourceSearch().solve(walled_grid)
        skipped = [
            line for line in stream.getvalue().splitlines() if "Skipping start" in line
        ]
        assert skipped
        assert "(0, 0)" in skipped[0]
