"""
Event notification for terminal game outcomes.

The engine emits exactly one event per completed game. Listeners are
plain callables invoked synchronously, in subscription order.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List


logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Terminal outcomes announced to subscribers."""

    WIN = "win"
    LOSE = "lose"


@dataclass(frozen=True)
class GameEvent:
    """
    A terminal outcome.

    Attributes:
        type: Whether the game was won or lost.
        cause: Human-readable reason, suitable for a toast message.
    """

    type: EventType
    cause: str = ""

    @classmethod
    def win(cls, cause: str = "You cleared all of the mines.") -> "GameEvent":
        return cls(EventType.WIN, cause)

    @classmethod
    def lose(cls, cause: str = "You hit a mine.") -> "GameEvent":
        return cls(EventType.LOSE, cause)


Listener = Callable[[GameEvent], None]


class EventNotifier:
    """Synchronous callback list for game events."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener.

        Args:
            listener: Called with each emitted GameEvent.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: GameEvent) -> None:
        """Deliver an event to every listener."""
        logger.debug("Emitting %s event to %d listener(s)", event.type.value, len(self))
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(event)
