"""Players, the axis they are bound to, and their score ledger"""

from dataclasses import dataclass, field
from typing import Self

from src.core.exceptions import InvalidConfigurationError
from src.core.shared_types import Axis
from src.mattix.pieces import Piece

SUPPORTED_PLAYER_COUNTS = (2, 4)


def seat_axis(index: int) -> Axis:
    """Seats alternate: 1st and 3rd player move horizontally, 2nd and 4th vertically"""
    return Axis.HORIZONTAL if index % 2 == 0 else Axis.VERTICAL


@dataclass
class Player:
    index: int
    axis: Axis
    score: int = 0
    round_score: int = 0
    captured: list[Piece] = field(default_factory=list)

    @classmethod
    def for_seat(cls, index: int) -> Self:
        return cls(index, seat_axis(index))

    @property
    def name(self) -> str:
        return f"Player {self.index + 1} ({self.axis.value.capitalize()})"

    def capture(self, piece: Piece) -> None:
        """Add a taken chip to the ledger. The value counts for both this round and the overall total."""
        self.captured.append(piece)
        self.round_score += piece.points
        self.score += piece.points

    def reset_round(self) -> None:
        """Called when a new board is set up: the overall score carries over"""
        self.captured = []
        self.round_score = 0


def create_players(player_count: int) -> list[Player]:
    if player_count not in SUPPORTED_PLAYER_COUNTS:
        raise InvalidConfigurationError(
            f"Mattix is played by {' or '.join(str(n) for n in SUPPORTED_PLAYER_COUNTS)} players, not {player_count}."
        )
    return [Player.for_seat(index) for index in range(player_count)]
