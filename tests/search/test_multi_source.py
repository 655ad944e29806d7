"""
Tests for the multi-source search.
"""

import pytest

from hillclimb.config import HeightmapConfig, SearchConfig
from hillclimb.grid.generator import HeightmapGenerator
from hillclimb.grid.heightmap import Heightmap, Position
from hillclimb.search.astar import (AStarSolver, PathNotFound,
                                     SearchBudgetExceeded)
from hillclimb.search.bfs import BFSSolver
from hillclimb.search.multi_source import MultiSourceSearch


class TestMultiSourceSearch:
    def test_candidate_starts(self, example_grid):
        assert MultiSourceSearch.candidate_starts(example_grid) == [
            Position(0, 0),
            Position(0, 1),
            Position(1, 0),
            Position(2, 0),
            Position(3, 0),
            Position(4, 0),
        ]

    def test_nominal_start_comes_first(self):
        grid = Heightmap.from_text("aabb\nbSbE")
        starts = MultiSourceSearch.candidate_starts(grid)
        assert starts[0] == Position(1, 1)
        assert starts[1:] == [Position(0, 0), Position(0, 1)]

    def test_example_cost(self, example_grid):
        result = MultiSourceSearch().solve(example_grid)
        assert result.cost == 29
        assert result.best_start == Position(4, 0)
        assert result.candidates == 6
        assert result.reachable == 6
        assert result.path[0] == result.best_start
        assert result.path[-1] == example_grid.end()
        assert len(result.path) == 30

    def test_unreachable_starts_are_skipped(self):
        # The right-hand 'a' is boxed in by 'c' cells
        grid = Heightmap.from_text(
            "SbcdefghijklmnopqrstuvwxyzEcac\n"
            "bbbbbbbbbbbbbbbbbbbbbbbbbbbccc"
        )
        result = MultiSourceSearch().solve(grid)
        assert result.cost == 26
        assert result.best_start == grid.start()
        assert result.reachable < result.candidates

    def test_all_unreachable(self, walled_grid):
        with pytest.raises(PathNotFound) as excinfo:
            MultiSourceSearch().solve(walled_grid)
        assert excinfo.value.start is None
        assert excinfo.value.end == walled_grid.end()

    def test_explicit_starts(self, example_grid):
        result = MultiSourceSearch().solve(example_grid, starts=[(0, 0), (0, 1)])
        assert result.candidates == 2
        assert result.cost == 30
        assert result.best_start == Position(0, 1)

    def test_ties_keep_first_candidate(self, example_grid):
        result = MultiSourceSearch().solve(example_grid, starts=[(4, 0), (4, 0)])
        assert result.best_start == Position(4, 0)
        assert result.reachable == 2

    def test_bfs_solver(self, example_grid):
        result = MultiSourceSearch(solver=BFSSolver()).solve(example_grid)
        assert result.cost == 29

    def test_threaded_matches_sequential(self, example_grid):
        sequential = MultiSourceSearch().solve(example_grid)
        threaded = MultiSourceSearch(config=SearchConfig(num_workers=4)).solve(
            example_grid
        )
        assert threaded.cost == sequential.cost
        assert threaded.best_start == sequential.best_start

    def test_progress_bar(self, example_grid):
        config = SearchConfig(show_progress=True)
        assert MultiSourceSearch(config=config).solve(example_grid).cost == 29

    @pytest.mark.parametrize("seed", range(25))
    def test_never_worse_than_single_source(self, seed):
        config = HeightmapConfig(width=10, height=6, max_step=1, low_point_ratio=0.2)
        grid = HeightmapGenerator(config, seed=seed).generate()

        try:
            single = AStarSolver().solve(grid).cost
        except PathNotFound:
            single = None

        try:
            multi = MultiSourceSearch().solve(grid).cost
        except PathNotFound:
            assert single is None
            return

        if single is not None:
            assert multi <= single

    @pytest.mark.parametrize("seed", range(10))
    def test_threaded_matches_sequential_generated(self, seed):
        config = HeightmapConfig(width=12, height=8, max_step=1, low_point_ratio=0.3)
        grid = HeightmapGenerator(config, seed=seed).generate()

        def run(search):
            try:
                return search.solve(grid).cost
            except PathNotFound:
                return None

        threaded = MultiSourceSearch(config=SearchConfig(num_workers=3))
        assert run(MultiSourceSearch()) == run(threaded)

    def test_budget_limited_start_is_not_skipped(self, example_grid):
        # (2, 4) fits in two expansions, (0, 0) does not. Dropping (0, 0)
        # would report cost 1 as if every start had been searched.
        search = MultiSourceSearch(config=SearchConfig(max_nodes=2))
        assert AStarSolver(config=SearchConfig(max_nodes=2)).solve(
            example_grid, start=(2, 4)
        ).cost == 1
        with pytest.raises(SearchBudgetExceeded) as excinfo:
            search.solve(example_grid, starts=[(2, 4), (0, 0)])
        assert excinfo.value.start == Position(0, 0)

    def test_budget_limited_start_threaded(self, example_grid):
        config = SearchConfig(max_nodes=2, num_workers=2)
        with pytest.raises(SearchBudgetExceeded):
            MultiSourceSearch(config=config).solve(
                example_grid, starts=[(2, 4), (0, 0)]
            )

    def test_budget_with_bfs_solver(self, example_grid):
        config = SearchConfig(max_nodes=5)
        search = MultiSourceSearch(solver=BFSSolver(config=config), config=config)
        with pytest.raises(SearchBudgetExceeded):
            search.solve(example_grid)
