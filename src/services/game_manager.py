"""
The GameManager is the only thing a UI talks to.

It binds one GameSession to the configuration chosen at construction, owns the listeners,
forwards move requests, and offers read-only views on the session for polling.
"""

from copy import deepcopy
from typing import Optional

from src.api.models import (
    GameConfig,
    GameStateResponse,
    MoveRequest,
    PlayerStateResponse,
)
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import Phase
from src.mattix.board import Board
from src.mattix.coordinate import Coordinate
from src.mattix.events import EventBus, GameEventListener, GameOver, Scores
from src.mattix.game import GameSession
from src.mattix.layout import LayoutStrategy
from src.mattix.moves import AcceptedMove
from src.mattix.player import Player

MoveTarget = tuple[int, int] | Coordinate | MoveRequest


class GameManager:
    """Facade over a single game session."""

    def __init__(
        self, config: GameConfig, layout: Optional[LayoutStrategy] = None
    ) -> None:
        self.config = config
        self._events = EventBus()
        self._session = GameSession.new_session(
            size=config.board_size,
            player_count=config.player_count,
            layout=layout,
            events=self._events,
        )

    # -- UI facing commands ---
    def add_listener(self, listener: GameEventListener) -> None:
        self._events.add_listener(listener)

    def start_game(self) -> None:
        self._session.start_game()

    def make_move(self, target: MoveTarget) -> AcceptedMove:
        """The only way to advance the game. Raises IllegalMoveError (state unchanged) if the cross cannot go there."""
        return self._session.make_move(_to_coordinate(target))

    def start_next_round(self) -> None:
        self._session.start_next_round()

    def end_game(self) -> GameOver:
        return self._session.end_game()

    # -- Read-only views (copies: changing them does not touch the game) ---
    @property
    def phase(self) -> Phase:
        return self._session.phase

    @property
    def round(self) -> int:
        return self._session.round

    @property
    def active_player(self) -> Player:
        return deepcopy(self._session.active_player)

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(deepcopy(self._session.players))

    @property
    def board(self) -> Optional[Board]:
        return deepcopy(self._session.board)

    @property
    def scores(self) -> Scores:
        return self._session.scores()

    @property
    def round_scores(self) -> Scores:
        return self._session.round_scores()

    def legal_moves(self) -> list[Coordinate]:
        return self._session.legal_moves()

    def state(self) -> GameStateResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by a UI to redraw the board / check whose turn it is.
        """
        session = self._session
        in_progress = session.phase == Phase.IN_PROGRESS
        return GameStateResponse(
            phase=session.phase,
            round=session.round,
            board_size=session.size,
            board=session.board.to_notation() if session.board else None,
            active_player=session.active_index if in_progress else None,
            players=[_player_state(player) for player in session.players],
            legal_moves=[move.to_tuple() for move in session.legal_moves()],
        )


# -- Internal helpers --
def _to_coordinate(target: MoveTarget) -> Coordinate:
    if isinstance(target, Coordinate):
        return target
    if isinstance(target, MoveRequest):
        return target.to_coordinate()
    try:
        coordinate = Coordinate.from_tuple(target)
    except (TypeError, ValueError) as e:
        raise IllegalMoveError(f"Cannot read {target!r} as a (row, col) target.") from e
    if not isinstance(coordinate.row, int) or not isinstance(coordinate.col, int):
        raise IllegalMoveError(f"Cannot read {target!r} as a (row, col) target.")
    return coordinate


def _player_state(player: Player) -> PlayerStateResponse:
    return PlayerStateResponse(
        index=player.index,
        name=player.name,
        axis=player.axis,
        score=player.score,
        round_score=player.round_score,
        captured=[piece.value for piece in player.captured],
    )
