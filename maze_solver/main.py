import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_solver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_solver.core.grid import Grid
from maze_solver.algo.dfs import generate
from maze_solver.algo.solvers import SOLVERS, mark_solution, path_length

DEFAULT_SIZE = 15
# The core has no upper bound; this only keeps terminal output readable
MAX_SIZE = 100

logger = logging.getLogger("maze_solver")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def capped(value: int, name: str) -> int:
    if value > MAX_SIZE:
        logger.warning(f"{name}={value} exceeds {MAX_SIZE}, using {MAX_SIZE}")
        return MAX_SIZE
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Solver: generate perfect mazes and solve them with BFS or DFS")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze and print it")
    gen_parser.add_argument("--rows", type=int, default=DEFAULT_SIZE, help="Maze rows (min 5)")
    gen_parser.add_argument("--cols", type=int, default=DEFAULT_SIZE, help="Maze columns (min 5)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Solve a maze (generated unless a file is given)")
    solve_parser.add_argument("input_file", nargs="?", help="Path to a maze text file")
    solve_parser.add_argument("--rows", type=int, default=DEFAULT_SIZE, help="Maze rows (min 5)")
    solve_parser.add_argument("--cols", type=int, default=DEFAULT_SIZE, help="Maze columns (min 5)")
    solve_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    solve_parser.add_argument("--algo", type=str, default="bfs", choices=sorted(SOLVERS), help="Solver algorithm")
    solve_parser.add_argument("--show-visited", action="store_true", help="Print the cells explored by the solver")

    return parser


def load_maze(path: str) -> Grid:
    with open(path, "r", encoding="utf-8") as f:
        return Grid.from_lines(f)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        rows, cols = capped(args.rows, "rows"), capped(args.cols, "cols")
        logger.info(f"Generating {rows}x{cols} maze...")
        grid = generate(rows, cols, seed=args.seed)
        print(grid)
        return 0

    # solve
    if args.input_file:
        logger.info(f"Loading {args.input_file}...")
        try:
            grid = load_maze(args.input_file)
        except (OSError, ValueError) as e:
            logger.error(f"Cannot read maze from {args.input_file}: {e}")
            return 2
    else:
        rows, cols = capped(args.rows, "rows"), capped(args.cols, "cols")
        logger.info(f"Generating {rows}x{cols} maze...")
        grid = generate(rows, cols, seed=args.seed)

    print("Generated Maze:" if not args.input_file else "Maze:")
    print(grid)

    logger.info(f"Solving with {args.algo.upper()}...")
    solver = SOLVERS[args.algo](grid)
    path = solver.solve()

    if args.show_visited:
        print("\nExplored:")
        print(solver.working)

    if path is None:
        print("\nNo solution found for the maze!")
        return 1

    solution = grid.copy()
    mark_solution(solution, path)
    print("\nSolution:")
    print(solution)
    print(f"\nPath length: {path_length(path)} steps")
    logger.debug(f"Visited {solver.visited_count} cells")
    return 0


if __name__ == "__main__":
    sys.exit(main())
