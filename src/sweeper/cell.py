"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(covered/flagged/revealed) and content (mine/number). Cells are
immutable: every transition returns a new cell.
"""
from dataclasses import dataclass, replace
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    COVERED = auto()
    FLAGGED = auto()
    REVEALED = auto()


class CellKind(Enum):
    """
    Exhaustive variants of a cell, combining state and content.

    Reveal and flag logic dispatch on this rather than on the raw
    booleans so every reachable combination is handled explicitly.
    """

    COVERED_CLEAR = auto()
    COVERED_MINE = auto()
    FLAGGED = auto()
    REVEALED_CLEAR = auto()
    REVEALED_MINE = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (covered, flagged or revealed).
    """

    mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.COVERED

    @property
    def kind(self) -> CellKind:
        """Tagged-union view of this cell."""
        if self.state == CellState.FLAGGED:
            return CellKind.FLAGGED
        if self.state == CellState.REVEALED:
            return CellKind.REVEALED_MINE if self.mine else CellKind.REVEALED_CLEAR
        return CellKind.COVERED_MINE if self.mine else CellKind.COVERED_CLEAR

    @property
    def covered(self) -> bool:
        """Check if cell is covered and unflagged."""
        return self.state == CellState.COVERED

    @property
    def revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def reveal(self) -> "Cell":
        """
        Reveal this cell.

        Returns:
            A revealed copy, or this cell unchanged if it is already
            revealed or flagged.
        """
        if self.state != CellState.COVERED:
            return self
        return replace(self, state=CellState.REVEALED)

    def toggle_flag(self) -> "Cell":
        """
        Toggle flag on this cell.

        Returns:
            A flagged or unflagged copy, or this cell unchanged if it
            is revealed.
        """
        if self.state == CellState.REVEALED:
            return self
        if self.state == CellState.COVERED:
            return replace(self, state=CellState.FLAGGED)
        return replace(self, state=CellState.COVERED)

    def expose(self) -> "Cell":
        """Force the cell open, clearing any flag. Used at game end."""
        if self.state == CellState.REVEALED:
            return self
        return replace(self, state=CellState.REVEALED)

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.COVERED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.mine:
            return 9
        return self.adjacent_mines
