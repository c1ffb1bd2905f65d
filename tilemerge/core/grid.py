# -*- coding: utf-8 -*-
"""
Generic square grid used to store the board cells.
"""
from typing import Generic, Iterator, TypeVar

from tilemerge.core.types import Position

T = TypeVar("T")


class SquareGrid(Generic[T]):
    """
    Fixed-size square container, stored row-major in a flat list.

    Parameters
    ----------
    dimension : int
        Number of cells along one side.
    initial : T
        Value stored in every cell at construction.

    Notes
    -----
    Negative indices are rejected: a coordinate outside ``[0, dimension)`` is a caller bug and
    raises ``IndexError`` instead of wrapping around.
    """

    def __init__(self, dimension: int, initial: T):
        if dimension <= 0:
            raise ValueError(f"dimension must be > 0, got {dimension}")
        self._dimension = dimension
        self._cells: list[T] = [initial] * (dimension * dimension)

    @property
    def dimension(self) -> int:
        """Get the number of cells along one side."""
        return self._dimension

    def _offset(self, position: Position) -> int:
        row, col = position
        if not (0 <= row < self._dimension and 0 <= col < self._dimension):
            raise IndexError(f"Position {position} out of range for dimension {self._dimension}")
        return row * self._dimension + col

    def __getitem__(self, position: Position) -> T:
        return self._cells[self._offset(position)]

    def __setitem__(self, position: Position, item: T) -> None:
        self._cells[self._offset(position)] = item

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells)

    def positions(self) -> Iterator[Position]:
        """Iterate over every coordinate in row-major order."""
        for row in range(self._dimension):
            for col in range(self._dimension):
                yield row, col

    def fill(self, item: T) -> None:
        """Set every cell to ``item``."""
        self._cells = [item] * len(self._cells)
