"""Defines the Mattix chips and the set of chips each board size is played with"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidNotationError
from src.core.shared_types import BoardSize


class PieceKind(Enum):
    EMPTY = auto()
    NUMBER = auto()
    CROSS = auto()


CROSS_NOTATION = "X"
EMPTY_NOTATION = "."


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    value: int = 0

    @classmethod
    def number(cls, value: int) -> Self:
        return cls(PieceKind.NUMBER, value)

    @classmethod
    def cross(cls) -> Self:
        return cls(PieceKind.CROSS)

    @classmethod
    def empty(cls) -> Self:
        return cls(PieceKind.EMPTY)

    @property
    def points(self) -> int:
        # NOTE: the cross and an empty cell are worth nothing
        return self.value if self.kind == PieceKind.NUMBER else 0

    def is_empty(self) -> bool:
        return self.kind == PieceKind.EMPTY

    def is_cross(self) -> bool:
        return self.kind == PieceKind.CROSS

    def is_number(self) -> bool:
        return self.kind == PieceKind.NUMBER

    @classmethod
    def from_notation(cls, token: str) -> Self:
        """'X' is the cross, '.' an empty cell, anything else must be an integer (sign allowed)."""
        token = token.strip()
        if token.upper() == CROSS_NOTATION:
            return cls.cross()
        if token == EMPTY_NOTATION:
            return cls.empty()
        try:
            return cls.number(int(token))
        except ValueError as e:
            raise InvalidNotationError(f"Cannot interpret {token!r} as a chip.") from e

    def to_notation(self) -> str:
        if self.is_cross():
            return CROSS_NOTATION
        if self.is_empty():
            return EMPTY_NOTATION
        return str(self.value)

    def __str__(self) -> str:
        """Fixed width of three characters so rows of a board line up"""
        if self.is_cross():
            return f"{CROSS_NOTATION:>3}"
        if self.is_empty():
            return " " * 3
        return f"{self.value:>3}"


def _small_catalog() -> list[int]:
    """1-7 twice, a single 8"""
    return [value for value in range(1, 8) for _ in range(2)] + [8]


def _large_catalog() -> list[int]:
    """
    1-9 twice, -1 to -10 and +10 once.
    That only accounts for 30 chips (with the cross), the remaining 6 cells get one extra of 1-6 each.
    """
    values = [value for value in range(1, 10) for _ in range(2)]
    values.extend(-value for value in range(1, 11))
    values.append(10)
    values.extend(range(1, 7))
    return values


PIECE_CATALOG: dict[BoardSize, list[int]] = {
    BoardSize.SMALL: _small_catalog(),
    BoardSize.LARGE: _large_catalog(),
}


def build_catalog(size: BoardSize) -> list[Piece]:
    """Every chip needed to fill a board of the given size: the numbered chips followed by the single cross."""
    pieces = [Piece.number(value) for value in PIECE_CATALOG[size]]
    pieces.append(Piece.cross())
    return pieces
