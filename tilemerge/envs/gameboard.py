# -*- coding: utf-8 -*-
"""
Board of the tile merge game: grid state, score and move application.
"""
import logging
from typing import Optional

from numpy import array, int64, ndarray, zeros
from numpy.random import Generator, default_rng

from tilemerge.config import BoardConfiguration
from tilemerge.core.gamemove import is_done, legal_directions, legal_directions_mask, move_lines
from tilemerge.core.grid import SquareGrid
from tilemerge.core.resolver import resolve_line
from tilemerge.core.types import EMPTY, Cell, DoubleMove, MoveDirection, Position, SingleMove, Tile
from tilemerge.envs.delegate import BoardDelegate, NullDelegate

logger = logging.getLogger(__name__)


class Board:
    """
    Square board of tiles.

    The board owns the grid and the score. Every mutation is reported synchronously to the delegate
    injected at construction.

    Parameters
    ----------
    configuration : BoardConfiguration, optional
        Game constants (default is a 4x4 board won at 2048).
    delegate : BoardDelegate, optional
        Collaborator notified of each mutation (default ignores them).
    seed : int, optional
        Seed of the generator used for random tile insertion.
    """

    def __init__(
        self,
        configuration: Optional[BoardConfiguration] = None,
        delegate: Optional[BoardDelegate] = None,
        seed: Optional[int] = None,
    ):
        self._configuration = configuration or BoardConfiguration()
        self._delegate: BoardDelegate = delegate or NullDelegate()
        self._grid: SquareGrid[Cell] = SquareGrid(self._configuration.dimension, EMPTY)
        self._score = 0
        self._rng: Generator = default_rng(seed)

    @property
    def configuration(self) -> BoardConfiguration:
        """Get the game constants."""
        return self._configuration

    @property
    def dimension(self) -> int:
        """Get the size of the board."""
        return self._grid.dimension

    @property
    def score(self) -> int:
        """Get the cumulative score."""
        return self._score

    @property
    def filled_count(self) -> int:
        """Get the number of cells holding a tile."""
        return sum(1 for cell in self._grid if isinstance(cell, Tile))

    @property
    def observation(self) -> ndarray:
        """
        Get the tile values of the board.

        Returns
        -------
        ndarray
            A ``(dimension, dimension)`` array of ``int64``, 0 for an empty cell. The array is a copy.
        """
        state = zeros((self.dimension, self.dimension), dtype=int64)
        for position in self._grid.positions():
            cell = self._grid[position]
            if isinstance(cell, Tile):
                state[position] = cell.value
        return state

    def cell(self, position: Position) -> Cell:
        """Get the cell at ``position``, raising ``IndexError`` when out of range."""
        return self._grid[position]

    def _add_score(self, value: int) -> None:
        self._score += value
        self._delegate.on_score_changed(self._score)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Clear every cell and reset the score.

        Parameters
        ----------
        seed : int, optional
            New seed for random tile insertion. The generator is kept when not given.
        """
        if seed is not None:
            self._rng = default_rng(seed)
        self._grid.fill(EMPTY)
        self._score = 0
        self._delegate.on_score_changed(self._score)

    def place_tile(self, position: Position, value: int) -> None:
        """
        Place a tile on an empty cell.

        Parameters
        ----------
        position : Position
            Target cell.
        value : int
            Value of the new tile.

        Notes
        -----
        Placing on an occupied cell does nothing and notifies nobody.
        """
        if isinstance(self._grid[position], Tile):
            return
        self._grid[position] = Tile(value)
        self._delegate.on_tile_inserted(position, value)

    def empty_positions(self) -> list[Position]:
        """Get the coordinates of every empty cell, in row-major order."""
        return [position for position in self._grid.positions() if not isinstance(self._grid[position], Tile)]

    def insert_random_tile(self, value: Optional[int] = None) -> Optional[Position]:
        """
        Place a tile on a random empty cell.

        Parameters
        ----------
        value : int, optional
            Value of the new tile. Drawn from the spawn probabilities when not given.

        Returns
        -------
        Position, optional
            Where the tile was placed, None if the board is full.
        """
        # ##: Only if there are still available places.
        open_spots = self.empty_positions()
        if not open_spots:
            return None

        if value is None:
            values = list(self._configuration.spawn_probs)
            weights = array(list(self._configuration.spawn_probs.values()), dtype=float)
            value = int(self._rng.choice(values, p=weights / weights.sum()))

        position = open_spots[int(self._rng.integers(len(open_spots)))]
        self.place_tile(position, value)
        return position

    def resolve_move(self, direction: MoveDirection) -> bool:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : MoveDirection
            Direction tiles slide toward.

        Returns
        -------
        bool
            True if at least one tile moved or merged.

        Notes
        -----
        - Lines are resolved one by one; the orders of a line are all computed before any of its
          cells is written.
        - The score grows by the value of each merge, and the delegate hears about each order.
        """
        changed = False
        for coords in move_lines(direction, self.dimension):
            orders = resolve_line([self._grid[position] for position in coords])
            changed = changed or bool(orders)

            # ##: Write back the results.
            for order in orders:
                if isinstance(order, SingleMove):
                    source, destination = coords[order.source], coords[order.destination]
                    self._grid[source] = EMPTY
                    self._grid[destination] = Tile(order.value)
                    if order.was_merge:
                        self._add_score(order.value)
                    self._delegate.on_tile_moved(source, destination, order.value)
                else:
                    assert isinstance(order, DoubleMove), f"Unknown move order {order!r}"
                    first, second = coords[order.first_source], coords[order.second_source]
                    destination = coords[order.destination]
                    self._grid[first] = EMPTY
                    self._grid[second] = EMPTY
                    self._grid[destination] = Tile(order.value)
                    self._add_score(order.value)
                    self._delegate.on_tiles_merged((first, second), destination, order.value)

        logger.debug("Move %s: changed=%s, score=%d", direction.name, changed, self._score)
        return changed

    def can_move(self, direction: MoveDirection) -> bool:
        """Check whether a move in ``direction`` would change the board, without applying it."""
        return legal_directions_mask(self.observation)[direction]

    def legal_directions(self) -> list[MoveDirection]:
        """Get the directions that would change the board."""
        return legal_directions(self.observation)

    def has_won(self) -> tuple[bool, Optional[Position]]:
        """
        Look for a tile reaching the winning threshold.

        Returns
        -------
        tuple[bool, Position | None]
            Whether the game is won, and the first winning tile in row-major order.
        """
        for position in self._grid.positions():
            cell = self._grid[position]
            if isinstance(cell, Tile) and cell.value >= self._configuration.threshold:
                return True, position
        return False, None

    def has_lost(self) -> bool:
        """Check if the board is full with no two adjacent tiles of equal value."""
        return is_done(self.observation)

    def render(self) -> str:
        """Get the board as text, one row per line, 0 for an empty cell."""
        return "\n".join(" \t".join(map(str, row)) for row in self.observation.tolist())
