"""
Minesweeper agents module.

Provides agents that play complete games against the engine:
- RandomAgent: Baseline random selection
- Evaluator: Aggregates results over many games
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluator import EvaluationConfig, Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "EvaluationConfig",
    "Evaluator",
]
