"""The Board holds the chips and guards the placement rules (bounds, one chip per cell, a single cross)"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import (
    EmptyCellError,
    InvalidNotationError,
    InvariantViolationError,
    OccupiedCellError,
    OutOfBoundsError,
)
from src.core.shared_types import BoardSize
from src.mattix.coordinate import BOARD_DIMENSIONS, Coordinate, Vector
from src.mattix.notation import parse_notation, position_to_notation
from src.mattix.pieces import Piece


@dataclass
class Board:
    size: BoardSize
    position: dict[Coordinate, Piece]

    @classmethod
    def empty(cls, size: BoardSize) -> Self:
        dimension = BOARD_DIMENSIONS[size]
        position = {
            Coordinate(row, col): Piece.empty()
            for row in range(dimension)
            for col in range(dimension)
        }
        return cls(size, position)

    @classmethod
    def from_pieces(cls, size: BoardSize, pieces: list[Piece]) -> Self:
        """Fill the board row by row, starting top-left. Needs exactly one piece per cell."""
        board = cls.empty(size)
        coordinates = board.coordinates()
        if len(pieces) != len(coordinates):
            raise InvariantViolationError(
                f"A {size} board needs {len(coordinates)} pieces, got {len(pieces)}."
            )
        for coordinate, piece in zip(coordinates, pieces):
            if not piece.is_empty():
                board.place(coordinate, piece)
        return board

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        Construct a board from its text notation (see src/mattix/notation.py), ex.
        X,1,2,3/4,5,6,7/1,2,3,4/5,6,7,8

        More than one cross is rejected here already. A position without a cross is allowed
        (useful to set up a board piece by piece), but cannot be played on.
        """
        size, position = parse_notation(notation)
        crosses = [piece for piece in position.values() if piece.is_cross()]
        if len(crosses) > 1:
            raise InvalidNotationError(
                f"Found {len(crosses)} crosses in {notation!r}. There is only a single cross."
            )
        return cls(size, position)

    def to_notation(self) -> str:
        return position_to_notation(self.position, self.size)

    def display(self) -> str:
        """Grid of fixed-width cells, one line per row (for debugging and console UIs)"""
        dimension = self.dimension
        return "\n".join(
            " ".join(
                str(self.occupant(Coordinate(row, col))) for col in range(dimension)
            )
            for row in range(dimension)
        )

    @property
    def dimension(self) -> int:
        return BOARD_DIMENSIONS[self.size]

    def coordinates(self) -> list[Coordinate]:
        """All cells, row-major"""
        dimension = self.dimension
        return [
            Coordinate(row, col) for row in range(dimension) for col in range(dimension)
        ]

    # --- PLACEMENT ---
    def occupant(self, coordinate: Coordinate) -> Piece:
        """What sits on the cell. An unoccupied cell returns the Empty marker."""
        self._assert_within_bounds(coordinate)
        return self.position[coordinate]

    def place(self, coordinate: Coordinate, piece: Piece) -> None:
        self._assert_within_bounds(coordinate)
        if not self.position[coordinate].is_empty():
            raise OccupiedCellError(
                f"Cannot place {piece.to_notation()} on {coordinate}: cell holds {self.position[coordinate].to_notation()}."
            )
        self.position[coordinate] = piece

    def remove(self, coordinate: Coordinate) -> Piece:
        self._assert_within_bounds(coordinate)
        piece = self.position[coordinate]
        if piece.is_empty():
            raise EmptyCellError(f"Nothing to remove on {coordinate}.")
        self.position[coordinate] = Piece.empty()
        return piece

    def is_occupied(self, coordinate: Coordinate) -> bool:
        return not self.occupant(coordinate).is_empty()

    # --- LOOKUPS ---
    def cross_position(self) -> Coordinate:
        crosses = [
            coordinate for coordinate, piece in self.position.items() if piece.is_cross()
        ]
        if len(crosses) != 1:
            raise InvariantViolationError(
                f"Expected exactly one cross on the board, found {len(crosses)}."
            )
        return crosses[0]

    def numbered_squares(self) -> list[Coordinate]:
        return [
            coordinate
            for coordinate, piece in self.position.items()
            if piece.is_number()
        ]

    def pieces_remaining(self) -> int:
        """Numbered chips still on the board (the cross does not count)"""
        return len(self.numbered_squares())

    def piece_count(self) -> int:
        """Every occupied cell, cross included"""
        return sum(1 for piece in self.position.values() if not piece.is_empty())

    def line(self, origin: Coordinate, direction: Vector) -> list[Coordinate]:
        """Cells from origin (exclusive) to the edge of the board in the given direction"""
        cells: list[Coordinate] = []
        current = origin.shifted(direction)
        while current.is_within_bounds(self.size):
            cells.append(current)
            current = current.shifted(direction)
        return cells

    # --- MOVING THE CROSS ---
    def relocate_cross(self, target: Coordinate) -> Optional[Piece]:
        """
        Move the cross onto target and return the chip that was taken from there (None if the cell was empty).
        NOTE: no legality checks here, that is the job of the move rules.
        """
        origin = self.cross_position()
        captured = self.remove(target) if self.is_occupied(target) else None
        cross = self.remove(origin)
        self.place(target, cross)
        return captured

    def _assert_within_bounds(self, coordinate: Coordinate) -> None:
        if not coordinate.is_within_bounds(self.size):
            raise OutOfBoundsError(
                f"{coordinate} is not on the {self.dimension}x{self.dimension} board."
            )
