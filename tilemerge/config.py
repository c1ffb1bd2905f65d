# -*- coding: utf-8 -*-
"""
Game configuration.
"""
from dataclasses import dataclass, field

# ##: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


@dataclass
class BoardConfiguration:
    """Constants of one game."""

    dimension: int = 4  # Cells along one side of the board
    threshold: int = 2048  # Tile value that wins the game

    # ##>: Move queue pacing.
    max_commands: int = 100  # Commands beyond this are dropped
    queue_delay: float = 0.3  # Seconds between two moves that changed the board

    spawn_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))

    def __post_init__(self):
        if self.dimension < 2:
            raise ValueError(f"dimension must be >= 2, got {self.dimension}")
        if self.threshold < 1:
            raise ValueError(f"threshold must be >= 1, got {self.threshold}")
        if self.max_commands < 1:
            raise ValueError(f"max_commands must be >= 1, got {self.max_commands}")
        if self.queue_delay < 0:
            raise ValueError(f"queue_delay must be >= 0, got {self.queue_delay}")
        if not self.spawn_probs or any(value <= 0 for value in self.spawn_probs):
            raise ValueError(f"spawn_probs must map positive tile values, got {self.spawn_probs}")
