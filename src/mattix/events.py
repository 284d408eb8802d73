"""
Events emitted after every accepted change of the game state, and the bus delivering them.

Listeners (console UI, GUI, loggers, test recorders) only observe: nothing they do feeds back into the rules.
Delivery is synchronous, in registration order. A listener must not call back into the GameManager while
it is being notified, and an exception raised by a listener propagates to whoever triggered the event.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from src.mattix.coordinate import Coordinate
from src.mattix.pieces import Piece

PlayerIndex = int
Scores = dict[PlayerIndex, int]


@dataclass(frozen=True)
class GameStarted:
    round: int = 1


@dataclass(frozen=True)
class RoundStarted:
    round: int


@dataclass(frozen=True)
class MoveMade:
    player: PlayerIndex
    origin: Coordinate
    target: Coordinate
    captured: Optional[Piece]


@dataclass(frozen=True)
class RoundOver:
    """Scores of the round that just ended, plus the running totals. No winner means the round was tied."""

    round: int
    round_scores: Scores
    total_scores: Scores
    winner: Optional[PlayerIndex]


@dataclass(frozen=True)
class GameOver:
    total_scores: Scores
    winners: tuple[PlayerIndex, ...]

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    @property
    def winner(self) -> Optional[PlayerIndex]:
        return self.winners[0] if len(self.winners) == 1 else None


GameEvent = GameStarted | RoundStarted | MoveMade | RoundOver | GameOver


class GameEventListener(Protocol):
    def on_event(self, event: GameEvent) -> None: ...


class EventBus:
    """Fan-out of events to the registered listeners"""

    def __init__(self) -> None:
        self.listeners: list[GameEventListener] = []

    def add_listener(self, listener: GameEventListener) -> None:
        self.listeners.append(listener)

    def notify(self, event: GameEvent) -> None:
        for listener in self.listeners:
            listener.on_event(event)
