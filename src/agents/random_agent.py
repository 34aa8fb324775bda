"""Baseline agent that opens a random covered cell each turn."""
from typing import Optional

import numpy as np

from sweeper import GameState

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Reveals covered cells uniformly at random.

    Moves come either from an environment action mask or straight from
    an engine snapshot via ``choose_cell``.
    """

    def __init__(
        self, board_height: int, board_width: int, seed: Optional[int] = None
    ) -> None:
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def _pick(self, candidates) -> int:
        if len(candidates) == 0:
            raise ValueError("No covered cell left to reveal")
        return int(self.rng.choice(candidates))

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick a cell from the environment's action mask.

        Raises:
            ValueError: If no mask is given or it allows no action.
        """
        if valid_actions is None:
            raise ValueError("RandomAgent needs the environment's action mask")
        return self._pick(np.flatnonzero(valid_actions))

    def choose_cell(self, state: GameState) -> int:
        """Pick a covered cell index from an engine snapshot."""
        return self._pick(state.cells.valid_actions())
