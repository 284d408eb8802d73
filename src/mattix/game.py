"""
The GameSession is the entrypoint into the domain layer for the GameManager.
It orchestrates the rules needed to play a turn: checking the move, moving the cross, scoring the capture,
passing the turn on, and deciding when a round (or the whole game) is over.
Every accepted change of state is announced on the event bus.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    InvalidConfigurationError,
)
from src.core.shared_types import BoardSize, Phase
from src.mattix.board import Board
from src.mattix.coordinate import BOARD_DIMENSIONS, Coordinate
from src.mattix.events import (
    EventBus,
    GameOver,
    GameStarted,
    MoveMade,
    RoundOver,
    RoundStarted,
    Scores,
)
from src.mattix.layout import LayoutStrategy, ShuffledLayout
from src.mattix.moves import AcceptedMove, has_capture, legal_targets, validate_move
from src.mattix.player import Player, create_players

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    # --- DOMAIN LAYER API CALLED BY THE MANAGER ---

    size: BoardSize
    players: list[Player]
    layout: LayoutStrategy
    events: EventBus = field(default_factory=EventBus)
    board: Optional[Board] = None
    active_index: int = 0
    round: int = 1
    phase: Phase = Phase.NOT_STARTED
    moves: list[AcceptedMove] = field(default_factory=list)  # accepted moves of the current round

    @classmethod
    def new_session(
        cls,
        size: BoardSize,
        player_count: int,
        layout: Optional[LayoutStrategy] = None,
        events: Optional[EventBus] = None,
    ) -> Self:
        """A session waiting for start_game. The board only gets set up once the game starts."""
        if size not in BOARD_DIMENSIONS:
            raise InvalidConfigurationError(
                f"Unknown board size {size!r}. Pick one from {','.join(s.value for s in BoardSize)}."
            )
        return cls(
            size=size,
            players=create_players(player_count),
            layout=layout or ShuffledLayout(),
            events=events or EventBus(),
        )

    @property
    def active_player(self) -> Player:
        return self.players[self.active_index]

    def start_game(self) -> None:
        """Set up the first board. The first horizontal player (seat 0) opens."""
        if self.phase != Phase.NOT_STARTED:
            raise GameStateError(f"Game has already been started. phase: {self.phase}")

        self._set_up_round(self._build_board(), starting_index=0)
        logger.info(
            "Game started: %s players on a %s board", len(self.players), self.size
        )
        self.events.notify(GameStarted(self.round))
        self._update_round_status()

    def make_move(self, target: Coordinate) -> AcceptedMove:
        """
        Attempt to move the cross for the player whose turn it is
        -----

        1. check the move is legal (nothing changes if it is not)
        2. move the cross, taking the chip on the target (if any)
        3. credit the capture to the mover
        4. pass the turn to the next seat
        5. check if the round has ended
        """
        # make sure the round is (still) in progress
        if self.phase != Phase.IN_PROGRESS:
            raise GameStateError(f"Round is not in progress. phase: {self.phase}")

        board = self._current_board()
        player = self.active_player
        try:
            validate_move(board, player.axis, target)
        except IllegalMoveError as e:
            logger.debug("Rejected move by %s to %s: %s", player.name, target, e)
            raise

        # Store move info before update
        accepted_move = AcceptedMove.from_target_and_board(player.index, target, board)

        # update the board + the score
        captured = board.relocate_cross(target)
        if captured is not None:
            player.capture(captured)
        self.moves.append(accepted_move)

        # pass the turn on
        self._advance_turn()
        logger.debug(
            "%s moved the cross %s -> %s, captured %s",
            player.name,
            accepted_move.origin,
            target,
            captured.to_notation() if captured else "nothing",
        )
        self.events.notify(
            MoveMade(player.index, accepted_move.origin, target, captured)
        )

        # check for end of the round
        self._update_round_status()
        return accepted_move

    def start_next_round(self) -> None:
        """
        Fresh board, round scores back to zero (the totals stay).
        The opening seat rotates each round: round n is opened by seat (n - 1) mod player count.
        """
        if self.phase != Phase.ROUND_OVER:
            raise GameStateError(
                f"Can only start a new round once the current one is over. phase: {self.phase}"
            )

        # build the new board first: a failing layout leaves the finished round untouched
        board = self._build_board()
        self.round += 1
        for player in self.players:
            player.reset_round()
        self._set_up_round(board, starting_index=(self.round - 1) % len(self.players))
        logger.info("Round %s started", self.round)
        self.events.notify(RoundStarted(self.round))
        self._update_round_status()

    def end_game(self) -> GameOver:
        """Finish the game from whatever phase it is in and announce the overall result (ties included)."""
        if self.phase == Phase.GAME_OVER:
            raise GameStateError("Game is already over.")

        self._change_phase(Phase.GAME_OVER)
        result = GameOver(total_scores=self.scores(), winners=self.overall_winners())
        logger.info("Game over. winners: %s, scores: %s", result.winners, result.total_scores)
        self.events.notify(result)
        return result

    # --- QUERIES ---
    def legal_moves(self) -> list[Coordinate]:
        """Targets the cross can reach for the player to move. Can be shown to the user."""
        if self.phase != Phase.IN_PROGRESS:
            return []
        return legal_targets(self._current_board(), self.active_player.axis)

    def scores(self) -> Scores:
        """Totals over all rounds played so far"""
        return {player.index: player.score for player in self.players}

    def round_scores(self) -> Scores:
        return {player.index: player.round_score for player in self.players}

    def round_winner(self) -> Optional[int]:
        """Highest score this round. None while the round is still going or when the top score is shared."""
        if self.phase != Phase.ROUND_OVER:
            return None
        leaders = _leaders(self.round_scores())
        return leaders[0] if len(leaders) == 1 else None

    def overall_winners(self) -> tuple[int, ...]:
        """All seats sharing the highest total. More than one means a tie."""
        return _leaders(self.scores())

    # -- PRIVATE HELPERS ---
    def _current_board(self) -> Board:
        if self.board is None:
            raise GameStateError("No board yet: the game has not been started.")
        return self.board

    def _build_board(self) -> Board:
        board = self.layout.build(self.size)
        # a board we cannot play on is a bug in the layout, fail loudly
        board.cross_position()
        return board

    def _set_up_round(self, board: Board, starting_index: int) -> None:
        self.board = board
        self.moves = []
        self.active_index = starting_index
        self._change_phase(Phase.IN_PROGRESS)

    def _advance_turn(self) -> None:
        """Strict round-robin over the seats, no matter the axis"""
        self.active_index = (self.active_index + 1) % len(self.players)

    def _is_round_over(self) -> bool:
        """
        The round ends when
        * every numbered chip has been taken, or
        * the player to move cannot take anything along their axis (stalemate).
        """
        board = self._current_board()
        if board.pieces_remaining() == 0:
            return True
        return not has_capture(board, self.active_player.axis)

    def _update_round_status(self) -> None:
        if not self._is_round_over():
            return

        self._change_phase(Phase.ROUND_OVER)
        event = RoundOver(
            round=self.round,
            round_scores=self.round_scores(),
            total_scores=self.scores(),
            winner=self.round_winner(),
        )
        logger.info("Round %s over. round scores: %s", self.round, event.round_scores)
        self.events.notify(event)

    def _change_phase(self, new_phase: Phase) -> None:
        self.phase = new_phase


def _leaders(scores: Scores) -> tuple[int, ...]:
    highest = max(scores.values())
    return tuple(index for index, score in scores.items() if score == highest)
