"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameEngine through the standard RL interface so agents can
play complete games against the engine.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BEGINNER, Configuration
from .engine import GameEngine
from .state import Status


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell with index i.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[Configuration] = None,
        render_mode: Optional[str] = None,
        tick_per_step: bool = False,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: beginner preset).
            render_mode: How to render the environment.
            tick_per_step: Advance the game clock once per step, so a
                configured time limit can end the episode.
        """
        super().__init__()

        self.config = config or BEGINNER
        self.render_mode = render_mode
        self.tick_per_step = tick_per_step
        self.engine = GameEngine(self.config)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.engine = GameEngine(self.config, rng=random.Random(seed))
        else:
            self.engine.initialize(self.config)
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        reward = self._calculate_reward(int(action))

        truncated = False
        if self.tick_per_step and not self.engine.snapshot.is_over:
            self.engine.tick()
            # Running out of time is a truncation, not a played-out loss
            truncated = self.engine.snapshot.is_over

        terminated = self.engine.snapshot.is_over and not truncated
        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def _calculate_reward(self, action: int) -> float:
        """Reveal the cell at ``action`` and score the outcome."""
        board = self.engine.snapshot.cells
        if not board.in_bounds(action) or not board[action].covered:
            return -0.1

        state = self.engine.reveal_cell(action)

        if state.status == Status.WIN:
            return 10.0
        if state.status == Status.GAME_OVER:
            return -10.0
        return 1.0

    def _get_observation(self) -> np.ndarray:
        return self.engine.snapshot.cells.get_observation()

    def _get_info(self) -> Dict[str, Any]:
        state = self.engine.snapshot
        return {
            "steps": self._steps,
            "revealed": state.cells_revealed,
            "total_safe": self.config.safe_cells,
            "game_state": state.status.value,
            "time_elapsed": state.time_elapsed,
            "valid_actions": len(state.cells.valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        symbols = {-1: ".", -2: "F", 9: "*", 0: " "}
        lines = []
        for row in self._get_observation():
            lines.append(" ".join(symbols.get(int(val), str(val)) for val in row))
        return "\n".join(lines)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        mask[self.engine.snapshot.cells.valid_actions()] = True
        return mask
