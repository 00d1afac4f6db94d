import logging
import random
from typing import Iterator, List, Tuple

from maze_solver.core.grid import DIRECTIONS, Grid, Position
from maze_solver.algo.base import Generator

logger = logging.getLogger(__name__)

MIN_SIZE = 5


class RecursiveBacktracker(Generator):
    """
    Randomized depth-first carving on the lattice of cells at even offsets
    from the start. Corridors between lattice points are one cell wide, so
    the carved passages form a tree.

    Uses an explicit stack of (position, directions left to try) frames
    instead of call recursion, so large grids do not hit the recursion limit.
    """

    def __init__(self, grid: Grid, seed: int = None, start: Tuple[int, int] = (1, 1)):
        super().__init__(grid, seed)
        self.start = Position(*start)

    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)
        grid = self.grid

        def shuffled() -> List[Tuple[int, int]]:
            dirs = list(DIRECTIONS)
            rng.shuffle(dirs)
            return dirs

        # A bare grid has no START marker; open the origin so it is never re-entered
        if grid.get(*self.start) == Grid.WALL:
            grid.set(*self.start, Grid.PASSAGE)

        stack: List[Tuple[Position, List[Tuple[int, int]]]] = [(self.start, shuffled())]

        while stack:
            (row, col), todo = stack[-1]

            if not todo:
                # Backtrack
                stack.pop()
                continue

            d_row, d_col = todo.pop()
            n_row, n_col = row + 2 * d_row, col + 2 * d_col

            if grid.in_bounds(n_row, n_col) and grid.get(n_row, n_col) == Grid.WALL:
                # Start / End may sit between two lattice points; keep them
                w_row, w_col = row + d_row, col + d_col
                if grid.get(w_row, w_col) == Grid.WALL:
                    grid.set(w_row, w_col, Grid.PASSAGE)
                grid.set(n_row, n_col, Grid.PASSAGE)

                stack.append((Position(n_row, n_col), shuffled()))
                self.step_count += 1

                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"

        yield "Done"


def ensure_path_to_end(grid: Grid, end: Position) -> bool:
    """
    Opens one wall next to `end` if none of its neighbours is a passage.
    Returns True when a wall was carved.
    """
    for n_row, n_col in grid.neighbors(*end):
        if grid.get(n_row, n_col) == Grid.PASSAGE:
            return False

    for n_row, n_col in grid.neighbors(*end):
        if grid.get(n_row, n_col) == Grid.WALL:
            grid.set(n_row, n_col, Grid.PASSAGE)
            return True
    return False


def generate(rows: int, cols: int, seed: int = None) -> Grid:
    """
    Builds a perfect maze of at least MIN_SIZE x MIN_SIZE cells.
    Start is (1, 1) and End is (rows - 2, cols - 2).
    """
    rows = max(rows, MIN_SIZE)
    cols = max(cols, MIN_SIZE)

    grid = Grid(rows, cols)
    start = Position(1, 1)
    end = Position(rows - 2, cols - 2)
    grid.set(*start, Grid.START)
    grid.set(*end, Grid.END)

    generator = RecursiveBacktracker(grid, seed=seed, start=start)
    generator.run_all()

    if ensure_path_to_end(grid, end):
        logger.debug(f"Opened a passage next to End {tuple(end)}")

    logger.debug(f"Generated {rows}x{cols} maze in {generator.step_count} carve steps")
    return grid
