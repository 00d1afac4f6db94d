import logging
from abc import abstractmethod
from array import array
from collections import deque
from typing import Dict, Iterator, List, Optional

from maze_solver.core.grid import Grid, Position
from maze_solver.algo.base import Solver

logger = logging.getLogger(__name__)


class FrontierSearch(Solver):
    """
    Uninformed search from START to END. Subclasses only decide which end of
    the frontier the next node is taken from.
    """

    @abstractmethod
    def new_frontier(self, start: Position):
        pass

    @abstractmethod
    def take(self, frontier) -> Position:
        pass

    def run(self) -> Iterator[str]:
        self.path = None
        start = self.grid.find(Grid.START)
        end = self.grid.find(Grid.END)

        if start is None or end is None:
            logger.debug(f"{type(self).__name__}: grid has no START or END")
            yield "Invalid"
            return

        work = self.working
        cols = work.cols
        # Dense visited flags, same shape as the grid
        visited = array('B', [0] * (work.rows * cols))
        parents: Dict[Position, Position] = {}

        visited[start.row * cols + start.col] = 1
        self.visited_count = 1
        frontier = self.new_frontier(start)
        expanded = 0

        while frontier:
            current = self.take(frontier)

            if current == end:
                self.path = self.reconstruct_path(parents, start, end)
                logger.debug(f"{type(self).__name__}: path of {len(self.path) - 1} steps, "
                             f"{self.visited_count} cells visited")
                yield "Solved"
                return

            for n_row, n_col in work.neighbors(*current):
                idx = n_row * cols + n_col
                state = work.cells[idx]
                if state == Grid.WALL or visited[idx]:
                    continue

                visited[idx] = 1
                self.visited_count += 1
                if state != Grid.START and state != Grid.END:
                    work.cells[idx] = Grid.VISITED

                neighbor = Position(n_row, n_col)
                parents[neighbor] = current
                frontier.append(neighbor)

            expanded += 1
            if expanded % 100 == 0:
                yield f"Visited: {self.visited_count}"

        logger.debug(f"{type(self).__name__}: frontier exhausted after {self.visited_count} cells")
        yield "No Path"

    @staticmethod
    def reconstruct_path(parents: Dict[Position, Position], start: Position, end: Position) -> List[Position]:
        path = [end]
        curr = end
        while curr != start:
            curr = parents[curr]
            path.append(curr)
        path.reverse()
        return path


class BFS(FrontierSearch):
    """First in, first out. Returns a path with the fewest steps."""

    def new_frontier(self, start: Position):
        return deque([start])

    def take(self, frontier) -> Position:
        return frontier.popleft()


class DFS(FrontierSearch):
    """Last in, first out. Returns some valid path, not necessarily the shortest."""

    def new_frontier(self, start: Position):
        return [start]

    def take(self, frontier) -> Position:
        return frontier.pop()


SOLVERS = {
    "bfs": BFS,
    "dfs": DFS,
}


def solve_breadth_first(grid: Grid) -> Optional[List[Position]]:
    return BFS(grid).solve()


def solve_depth_first(grid: Grid) -> Optional[List[Position]]:
    return DFS(grid).solve()


def mark_solution(grid: Grid, path: List[Position]):
    """Stamps SOLUTION on every path cell except START and END. Mutates grid."""
    for row, col in path:
        idx = grid.get_index(row, col)
        if grid.cells[idx] != Grid.START and grid.cells[idx] != Grid.END:
            grid.cells[idx] = Grid.SOLUTION


def path_length(path: List[Position]) -> int:
    """Number of steps, i.e. cells on the path minus one."""
    return len(path) - 1
