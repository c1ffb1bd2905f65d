# -*- coding: utf-8 -*-
"""
Move-resolution engine of a 2048-style sliding tile puzzle.
"""

from .config import BoardConfiguration
from .core import EMPTY, MoveDirection, Tile, resolve_line
from .envs import Board, LoggingDelegate, MoveQueue, NullDelegate

__all__ = [
    "EMPTY",
    "Board",
    "BoardConfiguration",
    "LoggingDelegate",
    "MoveDirection",
    "MoveQueue",
    "NullDelegate",
    "Tile",
    "resolve_line",
]
