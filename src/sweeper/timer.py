"""
Game clock.

The engine never schedules anything itself; callers invoke ``tick``
on a fixed cadence, typically once per second.
"""
from dataclasses import replace
from typing import Optional, Tuple

from .events import GameEvent
from .reveal import lose
from .state import GameState, Status


def tick(state: GameState) -> Tuple[GameState, Optional[GameEvent]]:
    """
    Advance elapsed time by one unit.

    The clock only runs while the game is being played. When the
    configuration sets a time limit, reaching it loses the game.

    Returns:
        Tuple of (new snapshot, lose event or None).
    """
    # Clock waits for the first reveal or flag.
    if state.status != Status.PLAYING:
        return state, None

    time_elapsed = state.time_elapsed + 1
    time_limit = state.config.time_limit

    if time_limit is not None and time_elapsed >= time_limit:
        return lose(replace(state, time_elapsed=time_elapsed), "You ran out of time.")

    return replace(state, time_elapsed=time_elapsed), None
