#!/usr/bin/env python3
"""
Hill Climbing Solver

Finds the fewest steps needed to climb a heightmap from its start marker
(part 1) and from any lowest-elevation cell (part 2).
"""

import argparse
import sys

from hillclimb.config import SearchConfig
from hillclimb.grid.heightmap import Heightmap, MalformedGrid
from hillclimb.logger import configure, logger
from hillclimb.search.astar import AStarSolver, PathNotFound
from hillclimb.search.bfs import BFSSolver
from hillclimb.search.multi_source import MultiSourceSearch


def build_solver(algorithm: str, config: SearchConfig):
    """Create the single-source solver named on the command line."""
    if algorithm == "bfs":
        return BFSSolver(config=config)
    return AStarSolver(config=config)


def run_part_one(grid: Heightmap, solver, show_path: bool = False) -> bool:
    """Climb from the start marker."""
    try:
        result = solver.solve(grid)
    except PathNotFound:
        print("Part 1: no path")
        return False

    print(f"Part 1: {result.cost}")
    if show_path:
        print(grid.render_path(result.path))
    return True


def run_part_two(
    grid: Heightmap, solver, config: SearchConfig, show_path: bool = False
) -> bool:
    """Climb from the best of all lowest-elevation cells."""
    try:
        result = MultiSourceSearch(solver=solver, config=config).solve(grid)
    except PathNotFound:
        print("Part 2: no path")
        return False

    print(f"Part 2: {result.cost}")
    if show_path:
        print(f"Best start: {tuple(result.best_start)}")
        print(grid.render_path(result.path))
    return True


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Hill Climbing Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py inputs/12.txt                     # Both parts with A*
  python main.py inputs/12.txt --part 2 --workers 4
  python main.py examples/12.txt --algorithm bfs --show-path
        """,
    )

    parser.add_argument("input", help="Heightmap file, one row per line")
    parser.add_argument(
        "--part", type=int, choices=[1, 2], default=None, help="Run only one part"
    )
    parser.add_argument(
        "--algorithm",
        choices=["astar", "bfs"],
        default="astar",
        help="Single-source search algorithm",
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="Threads for the part 2 scan"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar for part 2"
    )
    parser.add_argument(
        "--show-path", action="store_true", help="Print the heightmap with the path"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    cli_logger = logger.bind(component="cli")

    if args.verbose:
        configure(verbose=True)

    try:
        config = SearchConfig(num_workers=args.workers, show_progress=args.progress)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        grid = Heightmap.from_file(args.input)
    except FileNotFoundError:
        cli_logger.error(f"Input file not found: {args.input}")
        return 2
    except MalformedGrid as exc:
        cli_logger.error(f"Malformed heightmap: {exc}")
        return 2

    cli_logger.debug(f"Loaded {grid!r}")
    solver = build_solver(args.algorithm, config)

    ok = True
    if args.part in (None, 1):
        ok = run_part_one(grid, solver, args.show_path) and ok
    if args.part in (None, 2):
        ok = run_part_two(grid, solver, config, args.show_path) and ok

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
