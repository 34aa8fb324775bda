"""
Minesweeper engine module.

Provides the game engine: configuration validation, board generation,
flood-fill reveal, flag budget, status machine, clock and outcome events.
"""
from .cell import Cell, CellKind, CellState
from .config import (
    Configuration,
    ValidationError,
    validate,
    BEGINNER,
    INTERMEDIATE,
    ADVANCED,
    PRESETS,
)
from .board import (
    Board,
    generate_board,
    index_to_position,
    neighbor_indices,
    position_to_index,
)
from .events import EventNotifier, EventType, GameEvent
from .state import Face, GameState, Status
from .engine import GameEngine
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellKind",
    "CellState",
    "Configuration",
    "ValidationError",
    "validate",
    "BEGINNER",
    "INTERMEDIATE",
    "ADVANCED",
    "PRESETS",
    "Board",
    "generate_board",
    "index_to_position",
    "neighbor_indices",
    "position_to_index",
    "EventNotifier",
    "EventType",
    "GameEvent",
    "Face",
    "GameState",
    "Status",
    "GameEngine",
    "MinesweeperEnv",
]
