import unittest
import sys
import os

import numpy as np

# Add project root to path so we can import maze_solver
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_solver.core.grid import Grid, Position


class TestGrid(unittest.TestCase):
    def test_initialization(self):
        rows, cols = 6, 9
        grid = Grid(rows, cols)
        self.assertEqual(len(grid.cells), rows * cols, f"Grid initialization size mismatch. Expected {rows*cols}, got {len(grid.cells)}")
        for val in grid.cells:
            self.assertEqual(val, Grid.WALL)

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            Grid(0, 5)
        with self.assertRaises(ValueError):
            Grid(5, -1)

    def test_coordinates(self):
        grid = Grid(5, 7)
        self.assertEqual(grid.get_index(2, 3), 17) # 2 * 7 + 3

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 7)

    def test_in_bounds(self):
        grid = Grid(5, 6)
        self.assertTrue(grid.in_bounds(0, 0))
        self.assertTrue(grid.in_bounds(4, 5))
        self.assertFalse(grid.in_bounds(5, 0))
        self.assertFalse(grid.in_bounds(0, 6))
        self.assertFalse(grid.in_bounds(-1, 2))

    def test_copy_is_independent(self):
        grid = Grid(5, 5)
        grid.set(1, 1, Grid.START)
        clone = grid.copy()
        self.assertEqual(grid, clone)

        clone.set(2, 2, Grid.PASSAGE)
        self.assertEqual(grid.get(2, 2), Grid.WALL)
        self.assertNotEqual(grid, clone)

    def test_neighbors(self):
        grid = Grid(3, 3)
        # Center cell has 4 neighbours, up/right/down/left
        self.assertEqual(list(grid.neighbors(1, 1)), [(0, 1), (1, 2), (2, 1), (1, 0)])

        # Corner cell (0,0) only has right and down
        self.assertEqual(list(grid.neighbors(0, 0)), [(0, 1), (1, 0)])

    def test_find(self):
        grid = Grid(5, 5)
        self.assertIsNone(grid.find(Grid.START))
        grid.set(3, 2, Grid.END)
        pos = grid.find(Grid.END)
        self.assertEqual(pos, Position(3, 2))
        self.assertEqual(pos.row, 3)
        self.assertEqual(pos.col, 2)

    def test_text_round_trip(self):
        lines = [
            "#####",
            "#S.V#",
            "#.#*#",
            "#..E#",
            "#####",
        ]
        grid = Grid.from_lines(lines)
        self.assertEqual((grid.rows, grid.cols), (5, 5))
        self.assertEqual(grid.get(1, 1), Grid.START)
        self.assertEqual(grid.get(1, 3), Grid.VISITED)
        self.assertEqual(grid.get(2, 3), Grid.SOLUTION)
        self.assertEqual(grid.get(3, 3), Grid.END)
        self.assertEqual(grid.to_lines(), lines)
        self.assertEqual(str(grid), "\n".join(lines))

    def test_from_lines_ignores_blank_lines(self):
        grid = Grid.from_lines(["", "#####\n", "#S.E#\n", "#####\n", "\n"])
        self.assertEqual((grid.rows, grid.cols), (3, 5))

    def test_from_lines_rejects_bad_input(self):
        with self.assertRaises(ValueError):
            Grid.from_lines([])
        with self.assertRaises(ValueError):
            Grid.from_lines(["#####", "#S#"])
        with self.assertRaises(ValueError):
            Grid.from_lines(["#####", "#S?E#", "#####"])

    def test_clean_removes_markers(self):
        grid = Grid.from_lines(["#####", "#SV*#", "#..E#", "#####"])
        cleaned = grid.clean()
        self.assertEqual(cleaned.to_lines(), ["#####", "#S..#", "#..E#", "#####"])
        # Source untouched
        self.assertEqual(grid.get(1, 2), Grid.VISITED)

    def test_to_numpy(self):
        grid = Grid.from_lines(["#####", "#S.E#", "#####"])
        arr = grid.to_numpy()
        self.assertEqual(arr.shape, (3, 5))
        self.assertEqual(arr.dtype, np.uint8)
        self.assertEqual(arr[1, 1], Grid.START)
        self.assertEqual(arr[1, 3], Grid.END)
        self.assertEqual(int((arr == Grid.WALL).sum()), 12)

        # Export is a copy
        arr[1, 2] = Grid.WALL
        self.assertEqual(grid.get(1, 2), Grid.PASSAGE)

    def test_memory_sanity(self):
        rows, cols = 2000, 2000
        grid = Grid(rows, cols)
        size_bytes = grid.cells.buffer_info()[1] * grid.cells.itemsize
        self.assertEqual(size_bytes, rows * cols) # 1 byte per cell

if __name__ == '__main__':
    unittest.main()
