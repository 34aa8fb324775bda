"""
Flag manager.

Flags are drawn from a budget equal to the mine count; placing a flag
spends one, removing it returns one.
"""
from dataclasses import replace

from .cell import CellKind
from .state import GameState, Status


def toggle_flag(state: GameState, index: int) -> GameState:
    """
    Toggle the flag on a covered cell.

    Args:
        state: Current snapshot; must allow interaction.
        index: In-bounds index of the target cell.

    Returns:
        The new snapshot, or ``state`` unchanged when the cell is
        revealed or the flag budget is exhausted.
    """
    cell = state.cells[index]
    kind = cell.kind

    if kind in (CellKind.REVEALED_CLEAR, CellKind.REVEALED_MINE):
        return state

    if kind == CellKind.FLAGGED:
        flags_left = state.flags_left + 1
    elif kind in (CellKind.COVERED_CLEAR, CellKind.COVERED_MINE):
        if state.flags_left == 0:
            return state
        flags_left = state.flags_left - 1
    else:
        raise ValueError(f"Unhandled cell kind: {kind}")

    status = Status.PLAYING if state.status == Status.READY else state.status
    return replace(
        state,
        cells=state.cells.with_cells({index: cell.toggle_flag()}),
        flags_left=flags_left,
        status=status,
    )
