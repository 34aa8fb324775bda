"""
Configuration module for Minesweeper games.

Defines the board configuration, its validation rules and the
preset difficulty levels offered to players.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union


# ============================================================================
# Constants
# ============================================================================

MIN_SIZE = 2
MAX_SIZE = 50


class ValidationError(ValueError):
    """
    Raised when a configuration violates the board bounds.

    Attributes:
        field: Name of the offending configuration field.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


# ============================================================================
# Configuration Data Class
# ============================================================================

@dataclass(frozen=True)
class Configuration:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mines: Total mines to place.
        time_limit: Elapsed ticks after which the game is lost,
            or None to let the clock run forever.
    """

    width: int = 5
    height: int = 5
    mines: int = 5
    time_limit: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        _check_bounds(self.width, self.height, self.mines, self.time_limit)

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of mine-free cells a player must reveal to win."""
        return self.total_cells - self.mines


# ============================================================================
# Validation
# ============================================================================

def _require_int(field: str, value: Any) -> None:
    # bool is an int subclass but never a meaningful size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, f"{field} must be an integer, got {value!r}")


def _check_bounds(
    width: Any, height: Any, mines: Any, time_limit: Any
) -> None:
    """Raise ValidationError if any value is out of bounds."""
    for field, value in (("width", width), ("height", height), ("mines", mines)):
        _require_int(field, value)

    for field, value in (("width", width), ("height", height)):
        if not MIN_SIZE <= value <= MAX_SIZE:
            raise ValidationError(
                field, f"{field} must be between {MIN_SIZE} and {MAX_SIZE}"
            )

    if mines < 1:
        raise ValidationError("mines", "Board needs at least one mine")
    max_mines = width * height - 1
    if mines > max_mines:
        raise ValidationError(
            "mines",
            f"Cannot have more mines than cells in the grid (max {max_mines})",
        )

    if time_limit is not None:
        _require_int("time_limit", time_limit)
        if time_limit < 1:
            raise ValidationError("time_limit", "Time limit must be positive")


def validate(
    config: Union[Configuration, Mapping[str, Any]]
) -> Configuration:
    """
    Validate a configuration before a board is generated from it.

    Args:
        config: A Configuration, or a mapping with width, height,
            mines and an optional time_limit.

    Returns:
        The validated Configuration.

    Raises:
        ValidationError: If a value is missing or out of bounds.
    """
    if isinstance(config, Configuration):
        _check_bounds(config.width, config.height, config.mines, config.time_limit)
        return config

    if not isinstance(config, Mapping):
        raise ValidationError(
            "config", f"Expected a Configuration or mapping, got {config!r}"
        )

    for field in ("width", "height", "mines"):
        if field not in config:
            raise ValidationError(field, f"{field} is required")

    return Configuration(
        width=config["width"],
        height=config["height"],
        mines=config["mines"],
        time_limit=config.get("time_limit"),
    )


# Preset difficulty levels
BEGINNER = Configuration(5, 5, 5, time_limit=999)
INTERMEDIATE = Configuration(15, 15, 30, time_limit=999)
ADVANCED = Configuration(20, 20, 50, time_limit=999)

PRESETS: Dict[str, Configuration] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "advanced": ADVANCED,
}
