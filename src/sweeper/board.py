"""
Board module for Minesweeper game.

Implements the immutable board value, index/position arithmetic and
the board generator that places mines and computes adjacency counts.
"""
import random
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Set, Tuple

import numpy as np

from .cell import Cell
from .config import Configuration


# ============================================================================
# Index Utilities (Low-level)
# ============================================================================

def position_to_index(width: int, row: int, col: int) -> int:
    """Convert a (row, col) position to a flat cell index."""
    return row * width + col


def index_to_position(width: int, index: int) -> Tuple[int, int]:
    """Convert a flat cell index to a (row, col) position."""
    return divmod(index, width)


def neighbor_indices(width: int, height: int, index: int) -> List[int]:
    """
    Get valid neighboring cell indices.

    Args:
        width: Number of columns.
        height: Number of rows.
        index: Index of the center cell.

    Returns:
        Indices of the up to 8 cells sharing an edge or corner with
        the center cell, clipped at the board edges.
    """
    row, col = index_to_position(width, index)
    neighbors = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < height and 0 <= new_col < width:
                neighbors.append(position_to_index(width, new_row, new_col))
    return neighbors


# ============================================================================
# Board Value
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Minesweeper game board.

    An ordered, fixed-length tuple of cells addressed by a single
    index (``row * width + col``). Boards never change after
    construction; ``with_cells`` returns an updated copy.
    """

    config: Configuration
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        expected = self.config.total_cells
        if len(self.cells) != expected:
            raise ValueError(
                f"Number of cells must be config.width * config.height ({expected})"
            )

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def in_bounds(self, index: int) -> bool:
        """Check if index addresses a cell on this board."""
        return 0 <= index < len(self.cells)

    def neighbors(self, index: int) -> List[int]:
        """Get valid neighbor indices of a cell."""
        return neighbor_indices(self.width, self.height, index)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            return None
        return self.cells[position_to_index(self.width, row, col)]

    def with_cells(self, updates: Mapping[int, Cell]) -> "Board":
        """
        Copy the board with some cells replaced.

        Args:
            updates: Mapping of index to the replacement cell.

        Returns:
            A new board; this board is left untouched.
        """
        if not updates:
            return self
        cells = list(self.cells)
        for index, cell in updates.items():
            cells[index] = cell
        return Board(self.config, tuple(cells))

    # ========================================================================
    # Counts
    # ========================================================================

    @property
    def mine_indices(self) -> Set[int]:
        return {index for index, cell in enumerate(self.cells) if cell.mine}

    @property
    def revealed_count(self) -> int:
        return sum(1 for cell in self.cells if cell.revealed)

    @property
    def revealed_clear_count(self) -> int:
        return sum(1 for cell in self.cells if cell.revealed and not cell.mine)

    @property
    def flagged_count(self) -> int:
        return sum(1 for cell in self.cells if cell.flagged)

    @property
    def covered_count(self) -> int:
        return sum(1 for cell in self.cells if cell.covered)

    # ========================================================================
    # Observation
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = covered
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.to_observation() for cell in self.cells]
        return np.array(values, dtype=np.int8).reshape(self.height, self.width)

    def valid_actions(self) -> List[int]:
        """Indices of covered, unflagged cells."""
        return [index for index, cell in enumerate(self.cells) if cell.covered]


# ============================================================================
# Board Generator
# ============================================================================

def _place_mines(config: Configuration, rng) -> Set[int]:
    """
    Choose distinct mine indices by rejection sampling.

    A row and a column are drawn independently; draws landing on an
    index that already holds a mine are retried.
    """
    mine_indices: Set[int] = set()
    while len(mine_indices) < config.mines:
        row = rng.randrange(config.height)
        col = rng.randrange(config.width)
        mine_indices.add(position_to_index(config.width, row, col))
    return mine_indices


def _count_adjacent(
    config: Configuration, index: int, mine_indices: Iterable[int]
) -> int:
    return sum(
        1
        for neighbor in neighbor_indices(config.width, config.height, index)
        if neighbor in mine_indices
    )


def generate_board(
    config: Configuration, rng: Optional[random.Random] = None
) -> Board:
    """
    Build a fresh board with mines placed at random.

    Args:
        config: Validated board configuration.
        rng: Random source exposing ``randrange``. A fresh unseeded
            ``random.Random`` is used when omitted.

    Returns:
        A board with every cell covered.
    """
    if rng is None:
        rng = random.Random()

    mine_indices = _place_mines(config, rng)
    cells = []
    for index in range(config.total_cells):
        if index in mine_indices:
            cells.append(Cell(mine=True))
        else:
            cells.append(
                Cell(adjacent_mines=_count_adjacent(config, index, mine_indices))
            )
    return Board(config, tuple(cells))
