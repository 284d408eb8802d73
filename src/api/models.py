"""Requests and Response models exchanged with the GameManager (by any UI)"""

from typing import Any, Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidConfigurationError
from src.core.shared_types import Axis, BoardSize, Phase
from src.mattix.coordinate import Coordinate
from src.mattix.player import SUPPORTED_PLAYER_COUNTS

PlayerIndex = int
Cell = tuple[int, int]


# --- REQUEST MODELS ---
class GameConfig(BaseModel):
    """Chosen once, when the GameManager is created"""

    board_size: BoardSize = BoardSize.SMALL
    player_count: int = 2

    @field_validator("board_size", mode="before")
    @classmethod
    def validate_board_size(cls, value: Any) -> Any:
        available = [size.value for size in BoardSize]
        if isinstance(value, str) and value.lower() in available:
            return value.lower()
        raise InvalidConfigurationError(
            f"Unknown board size: {value!r}. Pick one from {','.join(available)}."
        )

    @field_validator("player_count")
    @classmethod
    def validate_player_count(cls, value: int) -> int:
        if value not in SUPPORTED_PLAYER_COUNTS:
            raise InvalidConfigurationError(
                f"Cannot play with {value} players. Pick one from {','.join(str(n) for n in SUPPORTED_PLAYER_COUNTS)}."
            )
        return value


class MoveRequest(BaseModel):
    row: int
    col: int

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.row, self.col)


# --- RESPONSE MODELS ---
class PlayerStateResponse(BaseModel):
    index: PlayerIndex
    name: str
    axis: Axis
    score: int
    round_score: int
    captured: list[int]


class GameStateResponse(BaseModel):
    """Snapshot used in a UI's polling loop"""

    phase: Phase
    round: int
    board_size: BoardSize
    board: Optional[str]  # board notation, None before the game starts
    active_player: Optional[PlayerIndex]
    players: list[PlayerStateResponse]
    legal_moves: list[Cell]
