import pytest

from src.api.models import GameConfig, MoveRequest
from src.core.exceptions import InvalidConfigurationError
from src.core.shared_types import BoardSize
from src.mattix.coordinate import Coordinate


# -- Validation - GameConfig --
def test_default_config() -> None:
    """Without options: two players on the small board"""
    config = GameConfig()
    assert config.board_size == BoardSize.SMALL
    assert config.player_count == 2


@pytest.mark.parametrize(
    "board_size, expected",
    [
        (BoardSize.LARGE, BoardSize.LARGE),
        ("small", BoardSize.SMALL),
        ("LARGE", BoardSize.LARGE),
    ],
)
def test_valid_board_size(board_size: str, expected: BoardSize) -> None:
    config = GameConfig(board_size=board_size, player_count=4)
    assert config.board_size == expected
    assert config.player_count == 4


@pytest.mark.parametrize("board_size", ["medium", "8x8", 4, None])
def test_invalid_board_size(board_size: object) -> None:
    with pytest.raises(InvalidConfigurationError):
        _ = GameConfig(board_size=board_size)  # type: ignore[arg-type]


@pytest.mark.parametrize("player_count", [0, 1, 3, 6])
def test_invalid_player_count(player_count: int) -> None:
    with pytest.raises(InvalidConfigurationError):
        _ = GameConfig(player_count=player_count)


# -- MoveRequest --
def test_move_request_to_coordinate() -> None:
    request = MoveRequest(row=2, col=3)
    assert request.to_coordinate() == Coordinate(2, 3)
