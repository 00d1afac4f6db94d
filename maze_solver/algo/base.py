from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from maze_solver.core.grid import Grid, Position


class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None):
        self.grid = grid
        self.seed = seed
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass


class Solver(ABC):
    def __init__(self, grid: Grid):
        # The caller's grid is only read. All markings go to the working copy.
        self.grid = grid
        self.working = grid.copy()
        self.path: Optional[List[Position]] = None
        self.visited_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields progress strings. When exhausted, self.path holds the
        Start -> End path, or None when there is none.
        """
        pass

    def solve(self) -> Optional[List[Position]]:
        for _ in self.run():
            pass
        return self.path
