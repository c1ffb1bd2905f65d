# -*- coding: utf-8 -*-
"""
Stateful side of the tile merge game.

This module provides the `Board` class, which owns the tiles and the score, the delegates it
notifies, and the `MoveQueue` that serializes move requests.
"""

from .delegate import BoardDelegate, LoggingDelegate, NullDelegate
from .gameboard import Board
from .movequeue import MoveCommand, MoveQueue

__all__ = ["Board", "BoardDelegate", "LoggingDelegate", "MoveCommand", "MoveQueue", "NullDelegate"]
