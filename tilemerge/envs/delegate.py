# -*- coding: utf-8 -*-
"""
Collaborators notified by the board whenever its state changes.
"""
import logging
from typing import Protocol

from tilemerge.core.types import Position

logger = logging.getLogger(__name__)


class BoardDelegate(Protocol):
    """Receives the board notifications, synchronously, right after each mutation."""

    def on_score_changed(self, score: int) -> None:
        """The score now equals ``score``."""
        ...

    def on_tile_moved(self, source: Position, destination: Position, value: int) -> None:
        """One tile moved, possibly merging into ``destination`` with the resulting ``value``."""
        ...

    def on_tiles_merged(self, sources: tuple[Position, Position], destination: Position, value: int) -> None:
        """Two tiles moved into ``destination`` and merged."""
        ...

    def on_tile_inserted(self, position: Position, value: int) -> None:
        """A new tile was placed on an empty cell."""
        ...


class NullDelegate:
    """Delegate ignoring every notification."""

    def on_score_changed(self, score: int) -> None:
        pass

    def on_tile_moved(self, source: Position, destination: Position, value: int) -> None:
        pass

    def on_tiles_merged(self, sources: tuple[Position, Position], destination: Position, value: int) -> None:
        pass

    def on_tile_inserted(self, position: Position, value: int) -> None:
        pass


class LoggingDelegate:
    """
    Delegate writing every notification to a logger.

    Parameters
    ----------
    log : logging.Logger, optional
        Destination logger (default is this module's logger).
    level : int, optional
        Level of the records (default is ``logging.DEBUG``).
    """

    def __init__(self, log: logging.Logger | None = None, level: int = logging.DEBUG):
        self._log = log or logger
        self._level = level

    def on_score_changed(self, score: int) -> None:
        self._log.log(self._level, "Score: %d", score)

    def on_tile_moved(self, source: Position, destination: Position, value: int) -> None:
        self._log.log(self._level, "Tile %d moved from %s to %s", value, source, destination)

    def on_tiles_merged(self, sources: tuple[Position, Position], destination: Position, value: int) -> None:
        self._log.log(self._level, "Tiles at %s and %s merged into %d at %s", *sources, value, destination)

    def on_tile_inserted(self, position: Position, value: int) -> None:
        self._log.log(self._level, "Tile %d inserted at %s", value, position)
