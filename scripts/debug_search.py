#!/usr/bin/env python3
"""
Debug script for the heightmap solvers - runs A* and BFS side by side on a
generated heightmap and prints the paths and statistics.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import hillclimb
sys.path.insert(0, str(Path(__file__).parent.parent))

from hillclimb.config import HeightmapConfig, SearchConfig
from hillclimb.grid.generator import HeightmapGenerator
from hillclimb.logger import configure
from hillclimb.search.astar import AStarSolver, PathNotFound
from hillclimb.search.bfs import BFSSolver
from hillclimb.search.multi_source import MultiSourceSearch


def report(name, grid, solver):
    """Run one solver and print what it found."""
    print(f"\n=== {name} ===")
    try:
        result = solver.solve(grid)
    except PathNotFound as exc:
        print(f"❌ {exc}")
        print(f"Nodes explored: {exc.nodes_explored}")
        return None

    print(grid.render_path(result.path))
    print(f"Cost: {result.cost}")
    print(f"Nodes explored: {result.nodes_explored}")
    print(f"Time: {result.time_taken_ms:.1f}ms")
    return result


def main():
    """Run debug comparison."""
    parser = argparse.ArgumentParser(description="Debug heightmap solvers")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--width", type=int, default=20, help="Heightmap width")
    parser.add_argument("--height", type=int, default=10, help="Heightmap height")
    parser.add_argument(
        "--max-step", type=int, default=2, help="Largest generated elevation jump"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    if args.verbose:
        configure(verbose=True)

    print(f"Debugging solvers with seed {args.seed}")

    config = HeightmapConfig(
        width=args.width, height=args.height, max_step=args.max_step
    )
    grid = HeightmapGenerator(config, seed=args.seed).generate()

    print("Generated heightmap:")
    print(grid)
    print(f"Start: {tuple(grid.start())}  End: {tuple(grid.end())}")

    search_config = SearchConfig()
    astar = report("A*", grid, AStarSolver(config=search_config))
    bfs = report("BFS", grid, BFSSolver(config=search_config))

    if astar and bfs and astar.cost != bfs.cost:
        print(f"\nMISMATCH: A* cost {astar.cost} != BFS cost {bfs.cost}")

    print("\n=== Any low point ===")
    try:
        multi = MultiSourceSearch(config=search_config).solve(grid)
    except PathNotFound as exc:
        print(f"❌ {exc}")
        return

    print(grid.render_path(multi.path))
    print(f"Best start: {tuple(multi.best_start)}")
    print(f"Cost: {multi.cost}")
    print(f"Reachable starts: {multi.reachable}/{multi.candidates}")


if __name__ == "__main__":
    main()
