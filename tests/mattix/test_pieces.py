"""Unit tests for /src/mattix/pieces.py"""

from collections import Counter

import pytest

from src.core.exceptions import InvalidNotationError
from src.core.shared_types import BoardSize
from src.mattix.coordinate import BOARD_DIMENSIONS
from src.mattix.pieces import PIECE_CATALOG, Piece, PieceKind, build_catalog


@pytest.mark.parametrize(
    "piece, rendered",
    [
        (Piece.number(5), "  5"),
        (Piece.number(-3), " -3"),
        (Piece.number(-10), "-10"),
        (Piece.cross(), "  X"),
        (Piece.empty(), "   "),
    ],
)
def test_piece_display(piece: Piece, rendered: str) -> None:
    """Cells are three characters wide so a row of the board lines up"""
    assert str(piece) == rendered


@pytest.mark.parametrize(
    "token, expected",
    [
        ("7", Piece.number(7)),
        ("-4", Piece.number(-4)),
        ("+10", Piece.number(10)),
        ("X", Piece.cross()),
        ("x", Piece.cross()),
        (".", Piece.empty()),
    ],
)
def test_piece_from_notation(token: str, expected: Piece) -> None:
    assert Piece.from_notation(token) == expected


@pytest.mark.parametrize("token", ["", "a", "1.5", "XX"])
def test_invalid_piece_notation(token: str) -> None:
    with pytest.raises(InvalidNotationError):
        _ = Piece.from_notation(token)


def test_points() -> None:
    """Only numbered chips are worth anything"""
    assert Piece.number(6).points == 6
    assert Piece.number(-6).points == -6
    assert Piece.cross().points == 0
    assert Piece.empty().points == 0


def test_pieces_are_immutable() -> None:
    piece = Piece.number(3)
    with pytest.raises(AttributeError):
        piece.value = 4  # type: ignore[misc]


def test_small_catalog() -> None:
    """1-7 twice, 8 once, and the cross"""
    catalog = build_catalog(BoardSize.SMALL)
    assert len(catalog) == BOARD_DIMENSIONS[BoardSize.SMALL] ** 2
    counts = Counter(PIECE_CATALOG[BoardSize.SMALL])
    assert all(counts[value] == 2 for value in range(1, 8))
    assert counts[8] == 1
    assert [piece.kind for piece in catalog].count(PieceKind.CROSS) == 1


def test_large_catalog() -> None:
    """1-9 at least twice, -1 to -10 and +10 once, the cross, and the board completely filled"""
    catalog = build_catalog(BoardSize.LARGE)
    assert len(catalog) == BOARD_DIMENSIONS[BoardSize.LARGE] ** 2
    counts = Counter(PIECE_CATALOG[BoardSize.LARGE])
    assert all(counts[value] >= 2 for value in range(1, 10))
    assert all(counts[-value] == 1 for value in range(1, 11))
    assert counts[10] == 1
    assert sum(1 for piece in catalog if piece.is_cross()) == 1
    assert not any(piece.is_empty() for piece in catalog)
