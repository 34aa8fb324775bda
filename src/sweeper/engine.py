"""
Game engine: the command surface of a Minesweeper game.

The engine owns the only mutable reference to the current GameState.
Each command validates against the current status, delegates to the
reveal, flag or timer logic, swaps in the resulting snapshot and
notifies subscribers when the game ends.
"""
import logging
import operator
import random
from dataclasses import replace
from typing import Any, Callable, Mapping, Optional, Union

from .config import BEGINNER, Configuration, validate
from .events import EventNotifier, GameEvent, Listener
from .flags import toggle_flag
from .reveal import reveal
from .state import GameState
from .timer import tick


logger = logging.getLogger(__name__)


class GameEngine:
    """
    Single-player Minesweeper engine.

    All commands are synchronous and return the resulting snapshot.
    Disallowed commands (after the game ended, on flagged or revealed
    cells, past the flag budget) return the snapshot unchanged.
    """

    def __init__(
        self,
        config: Union[Configuration, Mapping[str, Any]] = BEGINNER,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the engine with a first game.

        Args:
            config: Board configuration (default: beginner preset).
            rng: Random source used for every board this engine
                generates. A fresh ``random.Random`` when omitted.
        """
        self._rng = rng if rng is not None else random.Random()
        self._notifier = EventNotifier()
        self._state: GameState = self._new_state(config)

    def _new_state(
        self, config: Union[Configuration, Mapping[str, Any]]
    ) -> GameState:
        config = validate(config)
        state = GameState.new(config, self._rng)
        logger.info(
            "New %dx%d game with %d mines", config.width, config.height, config.mines
        )
        return state

    # ========================================================================
    # Guards (Low-level)
    # ========================================================================

    def _can_interact(self, command: str) -> bool:
        if self._state.can_interact:
            return True
        logger.debug("Ignoring %s: game is %s", command, self._state.status.value)
        return False

    def _normalize_index(self, command: str, index: Any) -> Optional[int]:
        if not isinstance(index, bool):
            try:
                normalized = operator.index(index)
            except TypeError:
                normalized = None
            if normalized is not None and self._state.cells.in_bounds(normalized):
                return normalized
        logger.warning("Ignoring %s: index %r is out of range", command, index)
        return None

    def _commit(
        self, state: GameState, event: Optional[GameEvent] = None
    ) -> GameState:
        self._state = state
        if event is not None:
            logger.info("Game ended (%s): %s", event.type.value, event.cause)
            self._notifier.emit(event)
        return state

    # ========================================================================
    # Commands
    # ========================================================================

    def initialize(
        self, config: Union[Configuration, Mapping[str, Any]]
    ) -> GameState:
        """
        Start a new game, replacing the current state entirely.

        Args:
            config: Configuration for the new board.

        Returns:
            The ready snapshot of the new game.

        Raises:
            ValidationError: If the configuration is invalid. The
                current game is left untouched.
        """
        return self._commit(self._new_state(config))

    def reveal_cell(self, index: int) -> GameState:
        """
        Reveal the cell at ``index``.

        A mine-free cell opens its flood-fill region; a mine ends the
        game. The first accepted reveal starts play.
        """
        if not self._can_interact("reveal_cell"):
            return self._state
        index = self._normalize_index("reveal_cell", index)
        if index is None:
            return self._state

        logger.debug("Revealing cell %d", index)
        state, event = reveal(self._state, index)
        return self._commit(state, event)

    def toggle_flag(self, index: int) -> GameState:
        """Flag or unflag the cell at ``index`` within the flag budget."""
        if not self._can_interact("toggle_flag"):
            return self._state
        index = self._normalize_index("toggle_flag", index)
        if index is None:
            return self._state

        state = toggle_flag(self._state, index)
        if state is self._state:
            logger.debug("Flag toggle on cell %d had no effect", index)
        return self._commit(state)

    def set_is_player_revealing(self, to: bool) -> GameState:
        """Record whether the player is holding the pointer over a cell."""
        if not self._can_interact("set_is_player_revealing"):
            return self._state
        if self._state.player_is_revealing_cell == to:
            return self._state

        return self._commit(replace(self._state, player_is_revealing_cell=bool(to)))

    def tick(self) -> GameState:
        """Advance the clock by one unit."""
        if not self._can_interact("tick"):
            return self._state
        state, event = tick(self._state)
        return self._commit(state, event)

    # ========================================================================
    # Queries
    # ========================================================================

    def get_snapshot(self) -> GameState:
        """Get the current read-only snapshot."""
        return self._state

    @property
    def snapshot(self) -> GameState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Subscribe to win/lose events.

        Args:
            listener: Called once with the GameEvent when a game ends.

        Returns:
            A callable that removes the subscription.
        """
        return self._notifier.subscribe(listener)
