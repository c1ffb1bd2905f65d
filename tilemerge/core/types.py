# -*- coding: utf-8 -*-
"""
Set of types for the tile merge engine.

Cells, transformation tokens and move orders are tagged variants: plain immutable records that are
told apart with ``isinstance``.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Union

# ##: Board coordinates as (row, column).
Position = tuple[int, int]


class MoveDirection(IntEnum):
    """Swipe direction, numbered like the actions of the environment (0: left, 1: up, 2: right, 3: down)."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


@dataclass(frozen=True)
class Empty:
    """An empty cell."""

    def __repr__(self) -> str:
        return "EMPTY"


@dataclass(frozen=True)
class Tile:
    """A cell holding a tile of a positive value."""

    value: int

    def __post_init__(self):
        if self.value <= 0:
            raise ValueError(f"Tile value must be positive, got {self.value}")


EMPTY = Empty()

Cell = Union[Empty, Tile]


# ##: Transformation tokens, produced and consumed while resolving a single line.
class Stationary(NamedTuple):
    """Tile that has not moved and has no pending merge."""

    source: int
    value: int


class Slide(NamedTuple):
    """Tile moving into the next free slot of the line."""

    source: int
    value: int


class MergeFromStationary(NamedTuple):
    """Merge of a stationary tile with its successor; ``source`` is the successor's index."""

    source: int
    value: int


class MergeFromMoving(NamedTuple):
    """Merge of two tiles that were already sliding."""

    source: int
    second: int
    value: int


Token = Union[Stationary, Slide, MergeFromStationary, MergeFromMoving]


# ##: Move orders, the board-actionable output of a line resolution.
class SingleMove(NamedTuple):
    """One tile relocation, possibly carrying the value of a merge."""

    source: int
    destination: int
    value: int
    was_merge: bool


class DoubleMove(NamedTuple):
    """Two tiles moving into one destination. Always a merge."""

    first_source: int
    second_source: int
    destination: int
    value: int


MoveOrder = Union[SingleMove, DoubleMove]
