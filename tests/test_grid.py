"""
Tests for the generic square grid.
"""
from unittest import TestCase, main

from tilemerge.core import SquareGrid


class TestSquareGrid(TestCase):
    def setUp(self):
        self.grid = SquareGrid(3, 0)

    def test_init(self):
        self.assertEqual(self.grid.dimension, 3)
        self.assertEqual(len(self.grid), 9)
        self.assertEqual(list(self.grid), [0] * 9)

    def test_row_major_storage(self):
        self.grid[1, 2] = 7
        self.assertEqual(self.grid[1, 2], 7)
        self.assertEqual(list(self.grid).index(7), 5)

    def test_positions(self):
        self.assertEqual(list(self.grid.positions())[:4], [(0, 0), (0, 1), (0, 2), (1, 0)])

    def test_fill(self):
        self.grid[0, 0] = 3
        self.grid.fill("x")
        self.assertEqual(set(self.grid), {"x"})

    def test_bounds(self):
        """Negative and overflowing coordinates both fail."""
        for position in [(3, 0), (0, 3), (-1, 0), (0, -1)]:
            with self.subTest(position=position):
                with self.assertRaises(IndexError):
                    self.grid[position]
                with self.assertRaises(IndexError):
                    self.grid[position] = 1

    def test_invalid_dimension(self):
        with self.assertRaises(ValueError):
            SquareGrid(0, None)


if __name__ == "__main__":
    main()
