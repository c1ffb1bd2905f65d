# -*- coding: utf-8 -*-
"""
Serializing queue of move requests, paced by a fixed delay between moves that changed the board.
"""
import logging
from collections import deque
from typing import Any, Callable, NamedTuple, Optional

from tilemerge.config import BoardConfiguration
from tilemerge.core.types import MoveDirection
from tilemerge.envs.gameboard import Board

logger = logging.getLogger(__name__)

# ##: Called with the delay in seconds and the callback to run once it has elapsed.
Scheduler = Callable[[float, Callable[[], None]], Any]


class MoveCommand(NamedTuple):
    """A move request and the callback receiving whether it changed the board."""

    direction: MoveDirection
    completion: Callable[[bool], None]


class MoveQueue:
    """
    Queue of move requests applied one at a time to a board.

    Parameters
    ----------
    board : Board
        Board receiving the moves.
    configuration : BoardConfiguration, optional
        Source of ``max_commands`` and ``queue_delay`` (default is the board's configuration).
    scheduler : Scheduler, optional
        Runs a callback after a delay, e.g. a UI timer. Without one, the delay is over as soon as
        ``fire`` returns and the owner calls ``fire`` again when it sees fit.

    Notes
    -----
    Commands that do not change the board are consumed at once, so a single ``fire`` runs until a
    command changes the board or the queue is empty.
    """

    def __init__(
        self,
        board: Board,
        configuration: Optional[BoardConfiguration] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        self._board = board
        self._configuration = configuration or board.configuration
        self._scheduler = scheduler
        self._commands: deque[MoveCommand] = deque()
        self._waiting = False
        self._generation = 0

    @property
    def pending(self) -> int:
        """Get the number of commands not yet applied."""
        return len(self._commands)

    @property
    def waiting(self) -> bool:
        """Check whether the pacing delay is running."""
        return self._waiting

    def queue_move(self, direction: MoveDirection, completion: Callable[[bool], None]) -> bool:
        """
        Request a move.

        Parameters
        ----------
        direction : MoveDirection
            Direction of the move.
        completion : Callable[[bool], None]
            Called with whether the move changed the board, once it is applied.

        Returns
        -------
        bool
            False if the queue is full and the command was dropped.
        """
        if len(self._commands) > self._configuration.max_commands:
            logger.warning("Move queue is full (%d commands), dropping %s", len(self._commands), direction.name)
            return False

        self._commands.append(MoveCommand(direction=direction, completion=completion))

        # ##: No pacing delay running, so apply the move immediately.
        if not self._waiting:
            self.fire()
        return True

    def fire(self) -> None:
        """Apply queued commands until one changes the board, then start the pacing delay."""
        changed = False
        while self._commands:
            command = self._commands.popleft()
            changed = self._board.resolve_move(command.direction)
            command.completion(changed)
            if changed:
                break

        if changed and self._scheduler is not None:
            self._waiting = True
            generation = self._generation
            self._scheduler(self._configuration.queue_delay, lambda: self._delay_elapsed(generation))

    def _delay_elapsed(self, generation: int) -> None:
        # ##: Ignore timers started before the last reset.
        if generation != self._generation:
            return
        self._waiting = False
        self.fire()

    def reset(self) -> None:
        """Drop every pending command and stop the pacing delay."""
        self._commands.clear()
        self._waiting = False
        self._generation += 1
