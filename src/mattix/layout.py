"""
Initial layout strategies

Key idea: use the strategy pattern so the session does not care whether a fresh board is shuffled,
laid out in a fixed order, or read from a prepared position.
"""

import random
from typing import Optional, Protocol

from src.core.exceptions import InvalidConfigurationError
from src.core.shared_types import BoardSize
from src.mattix.board import Board
from src.mattix.notation import infer_board_size
from src.mattix.pieces import build_catalog


class LayoutStrategy(Protocol):
    """Builds the board a round starts with"""

    def build(self, size: BoardSize) -> Board: ...


class ShuffledLayout:
    """The regular game: the full catalog placed in random order. Pass a seed for a reproducible board."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def build(self, size: BoardSize) -> Board:
        pieces = build_catalog(size)
        self.rng.shuffle(pieces)
        return Board.from_pieces(size, pieces)


class CatalogLayout:
    """The catalog in its listed order (numbers ascending, the cross in the bottom-right corner)"""

    def build(self, size: BoardSize) -> Board:
        return Board.from_pieces(size, build_catalog(size))


class NotationLayout:
    """Prepared positions in board notation. Round n gets the n-th position, starting over when they run out."""

    def __init__(self, *notations: str) -> None:
        if not notations:
            raise InvalidConfigurationError("Supply at least one position.")
        self.notations = notations
        self._built = 0

    def build(self, size: BoardSize) -> Board:
        # a rejected position stays next in line
        notation = self.notations[self._built % len(self.notations)]
        notation_size = infer_board_size(notation)
        if notation_size != size:
            raise InvalidConfigurationError(
                f"Position {notation!r} is a {notation_size} board, the game is played on a {size} board."
            )
        board = Board.from_notation(notation)
        self._built += 1
        return board
