"""
Game state snapshot and status definitions.

A GameState is an immutable point-in-time view of a game. Commands
never modify a snapshot; they build a new one with
``dataclasses.replace``.
"""
import random
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from .board import Board, generate_board
from .config import Configuration


# ============================================================================
# Constants
# ============================================================================

class Status(str, Enum):
    """Possible states of the game."""

    READY = "ready"
    PLAYING = "playing"
    WIN = "win"
    GAME_OVER = "game-over"

    @property
    def is_terminal(self) -> bool:
        return self in (Status.WIN, Status.GAME_OVER)


class Face(str, Enum):
    """Expression shown by the status indicator."""

    OKAY = "okay"
    SCARED = "scared"
    WIN = "win"
    LOSE = "lose"


# ============================================================================
# Game State
# ============================================================================

@dataclass(frozen=True)
class GameState:
    """
    Full context of a game.

    Attributes:
        config: Configuration the board was generated from.
        cells: The board.
        visited_cells: Indices already processed by flood fill.
        status: Current status.
        cells_revealed: Number of mine-free cells revealed by the player.
        flags_left: Flags still available to place.
        time_elapsed: Ticks counted since play started.
        player_is_revealing_cell: Pointer is held down over a cell.
    """

    config: Configuration
    cells: Board
    visited_cells: FrozenSet[int] = frozenset()
    status: Status = Status.READY
    cells_revealed: int = 0
    flags_left: int = 0
    time_elapsed: int = 0
    player_is_revealing_cell: bool = False

    @classmethod
    def new(
        cls, config: Configuration, rng: Optional[random.Random] = None
    ) -> "GameState":
        """Create the ready state for a freshly generated board."""
        return cls(
            config=config,
            cells=generate_board(config, rng),
            flags_left=config.mines,
        )

    # ========================================================================
    # Selectors
    # ========================================================================

    @property
    def can_interact(self) -> bool:
        """Check if commands may still change the game."""
        return not self.status.is_terminal

    @property
    def is_started(self) -> bool:
        return self.status == Status.PLAYING

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    @property
    def is_won(self) -> bool:
        return self.cells_revealed == self.config.safe_cells

    @property
    def face(self) -> Face:
        """Status indicator expression for the current state."""
        if self.status == Status.WIN:
            return Face.WIN
        if self.status == Status.GAME_OVER:
            return Face.LOSE
        if self.player_is_revealing_cell:
            return Face.SCARED
        return Face.OKAY
