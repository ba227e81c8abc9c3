"""Game events and listener subscriptions."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from jeopardy.models import BoardState, RevealStage

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """Base class for events published by a GameController."""

    type: str = field(default="event", init=False)


@dataclass
class LoadingChanged(GameEvent):
    """A run started (loading=True) or ended (loading=False)."""

    type: str = field(default="loading", init=False)
    loading: bool = False


@dataclass
class BoardRendered(GameEvent):
    """A run completed and the board is ready to draw."""

    type: str = field(default="board", init=False)
    board: BoardState = field(default_factory=BoardState)


@dataclass
class CellRevealed(GameEvent):
    """A cell advanced to a new stage and should display ``text``."""

    type: str = field(default="reveal", init=False)
    category_index: int = 0
    clue_index: int = 0
    stage: RevealStage = RevealStage.UNREVEALED
    text: str = ""


@dataclass
class RunFailed(GameEvent):
    """A run aborted; the board was left empty."""

    type: str = field(default="error", init=False)
    error: Exception | None = None


Listener = Callable[[GameEvent], None]


class Subscription:
    """Handle returned by subscribe(); dispose() stops delivery."""

    def __init__(self, hub: "EventHub", listener: Listener) -> None:
        self._hub = hub
        self._listener = listener
        self.active = True

    def dispose(self) -> None:
        if self.active:
            self._hub._remove(self._listener)
            self.active = False

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()


class EventHub:
    """Delivers events to listeners in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self, listener)

    def _remove(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def publish(self, event: GameEvent) -> None:
        # Copy so listeners may dispose themselves mid-delivery
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(f"Listener {listener!r} failed handling {event.type} event")
