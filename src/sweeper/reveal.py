"""
Reveal engine.

Decides what uncovering a cell does: a flood fill over zero-count
cells for mine-free targets, or exposing every mine when a mine is hit.
"""
from dataclasses import replace
from typing import Dict, FrozenSet, Optional, Tuple

from .board import Board
from .cell import Cell, CellKind
from .events import GameEvent
from .state import GameState, Status


def expose_mines(board: Board) -> Board:
    """Reveal every mine cell on the board, clearing flags on them."""
    updates = {
        index: cell.expose()
        for index, cell in enumerate(board)
        if cell.mine and not cell.revealed
    }
    return board.with_cells(updates)


def lose(state: GameState, cause: str) -> Tuple[GameState, GameEvent]:
    """
    End the game as lost, exposing every mine.

    Flags removed from exposed mines go back to the budget.
    """
    board = expose_mines(state.cells)
    lost = replace(
        state,
        cells=board,
        flags_left=state.config.mines - board.flagged_count,
        status=Status.GAME_OVER,
    )
    return lost, GameEvent.lose(cause)


def flood_fill(
    board: Board, index: int, visited: FrozenSet[int]
) -> Tuple[Board, FrozenSet[int], int]:
    """
    Reveal the connected region seeded at a mine-free cell.

    Zero-count cells propagate to all their neighbors; numbered cells
    are revealed but stop the fill. Flagged cells are never opened.

    Args:
        board: Board to reveal on.
        index: Seed cell index.
        visited: Indices processed by earlier fills.

    Returns:
        Tuple of (new board, new visited set, number of newly
        revealed cells).
    """
    updates: Dict[int, Cell] = {}
    seen = set(visited)
    stack = [index]

    while stack:
        current = stack.pop()
        cell = board[current]
        if current in seen or not cell.covered:
            continue

        seen.add(current)
        updates[current] = cell.reveal()

        if cell.adjacent_mines == 0:
            for neighbor in board.neighbors(current):
                if neighbor not in seen and not board[neighbor].flagged:
                    stack.append(neighbor)

    return board.with_cells(updates), frozenset(seen), len(updates)


def reveal(state: GameState, index: int) -> Tuple[GameState, Optional[GameEvent]]:
    """
    Reveal a cell and decide the consequences.

    Args:
        state: Current snapshot; must allow interaction.
        index: In-bounds index of the target cell.

    Returns:
        Tuple of (new snapshot, terminal event or None). The snapshot
        is returned unchanged when the target is flagged or revealed.
    """
    kind = state.cells[index].kind

    if kind in (CellKind.FLAGGED, CellKind.REVEALED_CLEAR, CellKind.REVEALED_MINE):
        return state, None

    if kind == CellKind.COVERED_MINE:
        return lose(state, "You hit a mine.")

    if kind == CellKind.COVERED_CLEAR:
        board, visited, revealed = flood_fill(state.cells, index, state.visited_cells)
        cells_revealed = state.cells_revealed + revealed
        won = cells_revealed == state.config.safe_cells
        new_state = replace(
            state,
            cells=board,
            visited_cells=visited,
            cells_revealed=cells_revealed,
            status=Status.WIN if won else Status.PLAYING,
        )
        return new_state, GameEvent.win() if won else None

    raise ValueError(f"Unhandled cell kind: {kind}")
