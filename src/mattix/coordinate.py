"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.shared_types import Axis, BoardSize

# Mattix is played on a square grid of either size
BOARD_DIMENSIONS: dict[BoardSize, int] = {
    BoardSize.SMALL: 4,
    BoardSize.LARGE: 6,
}

Vector = tuple[int, int]

# The two directions the cross can slide along each axis
AXIS_DIRECTIONS: dict[Axis, tuple[Vector, Vector]] = {
    Axis.HORIZONTAL: ((0, -1), (0, 1)),
    Axis.VERTICAL: ((-1, 0), (1, 0)),
}


@dataclass(frozen=True)
class Coordinate:
    """Zero-based (row, col), row 0 is the top row."""

    row: int
    col: int

    @classmethod
    def from_tuple(cls, target: tuple[int, int]) -> Coordinate:
        row, col = target
        return cls(row, col)

    def to_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    def is_within_bounds(self, size: BoardSize) -> bool:
        dimension = BOARD_DIMENSIONS[size]
        return (0 <= self.row < dimension) and (0 <= self.col < dimension)

    def shifted(self, direction: Vector) -> Coordinate:
        dr, dc = direction
        return Coordinate(self.row + dr, self.col + dc)

    def is_on_axis(self, other: Coordinate, axis: Axis) -> bool:
        """Same row for a horizontal slide, same column for a vertical one"""
        if axis == Axis.HORIZONTAL:
            return self.row == other.row
        return self.col == other.col

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
