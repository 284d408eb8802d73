"""Unit tests for src/core/logging_config.py"""

import logging
from typing import Iterator

import pytest

from src.core.exceptions import IllegalMoveError
from src.core.logging_config import setup_logging
from src.core.shared_types import BoardSize
from src.mattix.coordinate import Coordinate
from src.mattix.game import GameSession
from src.mattix.layout import CatalogLayout


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """setup_logging replaces the root handlers, put pytest's back afterwards"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield root
    finally:
        root.handlers = handlers
        root.setLevel(level)


@pytest.mark.parametrize(
    "level, expected",
    [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("nonsense", logging.INFO)],
)
def test_setup_logging_level(
    restore_root_logger: logging.Logger, level: str, expected: int
) -> None:
    setup_logging(level)
    assert restore_root_logger.level == expected


def test_rejected_move_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """The catalog layout puts the cross bottom-right, so the top-left corner is off the horizontal axis"""
    session = GameSession.new_session(BoardSize.SMALL, 2, layout=CatalogLayout())
    session.start_game()
    with caplog.at_level(logging.DEBUG, logger="src.mattix.game"):
        with pytest.raises(IllegalMoveError):
            _ = session.make_move(Coordinate(0, 0))
    assert "Rejected move by Player 1 (Horizontal)" in caplog.text
