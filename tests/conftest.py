"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Cell, Configuration, GameEngine


# ============================================================================
# Random Sources
# ============================================================================

class ScriptedRandom:
    """
    Random source replaying a fixed sequence of randrange results.

    The script repeats once exhausted, so re-initializing an engine
    rebuilds the same layout. Values are reduced modulo the requested
    range.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self.calls = 0

    def randrange(self, stop: int) -> int:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value % stop


# Mines at indices 10, 11, 15, 20 and 23 on a 5x5 board, drawn as
# (row, col) pairs. The repeated (2, 0) exercises collision retries.
#
#   . . . . .
#   . . . . .
#   * * . . .
#   * . . . .
#   * . . * .
REGRESSION_DRAWS = [2, 0, 2, 1, 2, 0, 3, 0, 4, 0, 4, 3]
REGRESSION_MINES = {10, 11, 15, 20, 23}


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def test_config() -> Configuration:
    """5x5 board with 5 mines and no time limit."""
    return Configuration(5, 5, 5)


@pytest.fixture
def timed_config() -> Configuration:
    """5x5 board with 5 mines and a 3 tick time limit."""
    return Configuration(5, 5, 5, time_limit=3)


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def regression_rng() -> ScriptedRandom:
    return ScriptedRandom(REGRESSION_DRAWS)


@pytest.fixture
def regression_draws() -> List[int]:
    return list(REGRESSION_DRAWS)


@pytest.fixture
def regression_mines() -> set:
    return set(REGRESSION_MINES)


@pytest.fixture
def scripted_random():
    """Factory for random sources replaying the given values."""
    return ScriptedRandom


@pytest.fixture
def engine(test_config: Configuration, regression_rng: ScriptedRandom) -> GameEngine:
    """Engine on the known 5x5 regression layout."""
    return GameEngine(test_config, rng=regression_rng)


@pytest.fixture
def timed_engine(timed_config: Configuration) -> GameEngine:
    """Engine on the regression layout with a time limit."""
    return GameEngine(timed_config, rng=ScriptedRandom(REGRESSION_DRAWS))


@pytest.fixture
def events(engine: GameEngine) -> list:
    """Events emitted by ``engine``, in order."""
    received = []
    engine.subscribe(received.append)
    return received


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    return Cell(mine=True)
