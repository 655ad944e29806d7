"""
Tests for random heightmap generation.
"""

import pytest

from hillclimb.config import HeightmapConfig
from hillclimb.grid.generator import HeightmapGenerator
from hillclimb.grid.heightmap import Heightmap, Position


class TestHeightmapGenerator:
    def test_shape_and_markers(self):
        config = HeightmapConfig(width=12, height=6)
        grid = HeightmapGenerator(config, seed=42).generate()

        assert grid.width == 12
        assert grid.height == 6
        assert grid.start() != grid.end()
        assert grid.elevation(grid.start()) == 0
        assert grid.elevation(grid.end()) == 25
        assert 0 <= grid.grid.min() and grid.grid.max() <= 25

    def test_deterministic_with_seed(self):
        config = HeightmapConfig(width=10, height=5)
        first = HeightmapGenerator(config, seed=7).generate()
        second = HeightmapGenerator(config, seed=7).generate()
        assert first == second

    def test_different_seeds_differ(self):
        config = HeightmapConfig(width=10, height=5)
        grids = {HeightmapGenerator(config, seed=seed).generate() for seed in range(5)}
        assert len(grids) > 1

    def test_low_points(self):
        config = HeightmapConfig(width=10, height=10, low_point_ratio=0.5)
        grid = HeightmapGenerator(config, seed=3).generate()
        # 97 cells besides markers and summit, 48 forced low, plus the start
        assert len(grid.all_positions_with_score(0)) >= 48 + 1

    @pytest.mark.parametrize("seed", range(10))
    def test_end_has_a_summit_beside_it(self, seed):
        config = HeightmapConfig(width=8, height=5, low_point_ratio=0.9)
        grid = HeightmapGenerator(config, seed=seed).generate()
        end = grid.end()
        beside = [
            Position(end.row + d_row, end.col + d_col)
            for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1))
        ]
        assert any(
            grid.in_bounds(pos) and grid.elevation(pos) == 25 for pos in beside
        )

    def test_text_parses_back(self):
        config = HeightmapConfig(width=9, height=4)
        generator = HeightmapGenerator(config, seed=11)
        text = generator.generate_text()
        grid = Heightmap.from_text(text)
        assert grid.width == 9
        assert grid.height == 4
        assert text.count("S") == 1
        assert text.count("E") == 1

    def test_smallest_board(self):
        grid = HeightmapGenerator(HeightmapConfig(width=2, height=1), seed=0).generate()
        assert {grid.start(), grid.end()} == {(0, 0), (0, 1)}


class TestHeightmapConfig:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"width": 0},
            {"height": -1},
            {"width": 1, "height": 1},
            {"max_step": -1},
            {"low_point_ratio": 1.5},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            HeightmapConfig(**kwargs)
