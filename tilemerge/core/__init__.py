# -*- coding: utf-8 -*-
"""
Core of the tile merge engine.

It includes the cell, token and move order types, the generic square grid, the three-step line
resolver (condense, collapse, convert) and the move utilities that build the lines swept by a move.
"""

from .gamemove import is_done, legal_directions, legal_directions_mask, line_coordinates, move_lines
from .grid import SquareGrid
from .resolver import collapse, condense, convert, resolve_line
from .types import (
    EMPTY,
    Cell,
    DoubleMove,
    Empty,
    MergeFromMoving,
    MergeFromStationary,
    MoveDirection,
    MoveOrder,
    Position,
    SingleMove,
    Slide,
    Stationary,
    Tile,
    Token,
)

__all__ = [
    "EMPTY",
    "Cell",
    "DoubleMove",
    "Empty",
    "MergeFromMoving",
    "MergeFromStationary",
    "MoveDirection",
    "MoveOrder",
    "Position",
    "SingleMove",
    "Slide",
    "SquareGrid",
    "Stationary",
    "Tile",
    "Token",
    "collapse",
    "condense",
    "convert",
    "is_done",
    "legal_directions",
    "legal_directions_mask",
    "line_coordinates",
    "move_lines",
    "resolve_line",
]
