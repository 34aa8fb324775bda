"""
Evaluation of agents against the Minesweeper engine.

Plays complete games through MinesweeperEnv and aggregates results.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from sweeper import BEGINNER, Configuration, MinesweeperEnv, Status

from .base_agent import BaseAgent


logger = logging.getLogger(__name__)


# ============================================================================
# Evaluation Configuration
# ============================================================================

@dataclass
class EvaluationConfig:
    """Settings for an evaluation run."""

    board: Configuration = field(default_factory=lambda: BEGINNER)
    num_episodes: int = 100
    max_steps: int = 1000
    seed: Optional[int] = None


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """Evaluate an agent over a number of games."""

    def __init__(self, config: Optional[EvaluationConfig] = None) -> None:
        self.config = config or EvaluationConfig()

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps and
            avg_revealed.
        """
        env = MinesweeperEnv(config=self.config.board)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.config.num_episodes):
            seed = None
            if self.config.seed is not None:
                seed = self.config.seed + episode
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.config.max_steps):
                action = agent.select_action(observation, env.get_action_mask())
                observation, reward, terminated, truncated, info = env.step(action)

                total_reward += float(reward)
                total_steps += 1

                if terminated or truncated:
                    break

            if info["game_state"] == Status.WIN.value:
                wins += 1
            total_revealed += info["revealed"]
            logger.debug("Episode %d finished: %s", episode, info["game_state"])

        episodes = max(self.config.num_episodes, 1)
        return {
            "win_rate": wins / episodes,
            "avg_reward": total_reward / episodes,
            "avg_steps": total_steps / episodes,
            "avg_revealed": total_revealed / episodes,
        }
