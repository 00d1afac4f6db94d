from array import array
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np


class Position(NamedTuple):
    row: int
    col: int


# Up, Right, Down, Left as (d_row, d_col). Solvers scan in this order.
DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (0, 1), (1, 0), (0, -1)]


class Grid:
    # Cell States
    WALL = 0
    PASSAGE = 1
    START = 2
    END = 3
    # Presentation only, never present in a freshly generated maze
    VISITED = 4
    SOLUTION = 5

    SYMBOLS = {
        WALL: '#',
        PASSAGE: '.',
        START: 'S',
        END: 'E',
        VISITED: 'V',
        SOLUTION: '*',
    }
    STATES = {symbol: state for state, symbol in SYMBOLS.items()}

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        # 'B' (unsigned char) -> 1 byte per cell, every cell starts as WALL
        self.cells = array('B', [self.WALL] * (rows * cols))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def get(self, row: int, col: int) -> int:
        return self.cells[self.get_index(row, col)]

    def set(self, row: int, col: int, state: int):
        self.cells[self.get_index(row, col)] = state

    def is_open(self, row: int, col: int) -> bool:
        """True if (row, col) is inside the grid and not a wall."""
        return self.in_bounds(row, col) and self.cells[row * self.cols + col] != self.WALL

    def neighbors(self, row: int, col: int) -> Iterator[Position]:
        """
        Yields in-bounds orthogonal neighbours in DIRECTIONS order.
        Does NOT check walls.
        """
        for d_row, d_col in DIRECTIONS:
            n_row, n_col = row + d_row, col + d_col
            if self.in_bounds(n_row, n_col):
                yield Position(n_row, n_col)

    def find(self, state: int) -> Optional[Position]:
        try:
            idx = self.cells.index(state)
        except ValueError:
            return None
        return Position(*divmod(idx, self.cols))

    def count(self, state: int) -> int:
        return self.cells.count(state)

    def copy(self) -> "Grid":
        clone = Grid(self.rows, self.cols)
        clone.cells = array('B', self.cells)
        return clone

    def clean(self) -> "Grid":
        """Copy with VISITED / SOLUTION markers turned back into passages."""
        clone = self.copy()
        for idx, state in enumerate(clone.cells):
            if state == self.VISITED or state == self.SOLUTION:
                clone.cells[idx] = self.PASSAGE
        return clone

    def to_lines(self) -> List[str]:
        symbols = self.SYMBOLS
        lines = []
        for row in range(self.rows):
            start = row * self.cols
            lines.append(''.join(symbols[v] for v in self.cells[start:start + self.cols]))
        return lines

    def to_numpy(self) -> np.ndarray:
        """State codes as a (rows, cols) uint8 matrix. The result is a copy."""
        return np.frombuffer(self.cells.tobytes(), dtype=np.uint8).reshape(self.rows, self.cols).copy()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        rows = [line.strip() for line in lines]
        rows = [line for line in rows if line]
        if not rows:
            raise ValueError("Maze text is empty")

        width = len(rows[0])
        grid = cls(len(rows), width)
        for r, line in enumerate(rows):
            if len(line) != width:
                raise ValueError(f"Row {r} has {len(line)} cells, expected {width}")
            for c, symbol in enumerate(line):
                state = cls.STATES.get(symbol)
                if state is None:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({r}, {c})")
                grid.cells[r * width + c] = state
        return grid

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and self.cells == other.cells

    def __str__(self):
        return '\n'.join(self.to_lines())

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols})"
