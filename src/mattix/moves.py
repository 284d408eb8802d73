"""
Movement and capturing rules of the cross

Key idea: the cross is a sliding piece restricted to the axis of the player to move.
We raycast from the cross in both directions of that axis: every empty cell along the ray is a
target, and so is the first occupied cell (landing there captures the chip). The ray stops there.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Self

from src.core.exceptions import IllegalMoveError
from src.core.shared_types import Axis, BoardSize
from src.mattix.coordinate import AXIS_DIRECTIONS, Coordinate, Vector
from src.mattix.pieces import Piece


class Board(Protocol):
    """Just the parts the movement rules need"""

    size: BoardSize

    def occupant(self, coordinate: Coordinate) -> Piece: ...
    def cross_position(self) -> Coordinate: ...
    def line(self, origin: Coordinate, direction: Vector) -> list[Coordinate]: ...


@dataclass(frozen=True)
class AcceptedMove:
    """Snapshot of a move that passed the rules: who moved the cross, from where, to where, and what got taken."""

    player: int
    origin: Coordinate
    target: Coordinate
    captured: Optional[Piece] = None

    @classmethod
    def from_target_and_board(cls, player: int, target: Coordinate, board: Board) -> Self:
        """Record the move BEFORE the board gets updated"""
        occupant = board.occupant(target)
        captured = occupant if occupant.is_number() else None
        return cls(player, board.cross_position(), target, captured)

    @property
    def points(self) -> int:
        return self.captured.points if self.captured else 0

    def is_capture(self) -> bool:
        return self.captured is not None


# --- MOVEMENT RULES ---
def raycasting_targets(origin: Coordinate, board: Board, directions: tuple[Vector, ...]) -> list[Coordinate]:
    """Slide along each direction until the edge of the board or the first occupied cell (which is included)"""
    targets: list[Coordinate] = []
    for direction in directions:
        for cell in board.line(origin, direction):
            targets.append(cell)
            if not board.occupant(cell).is_empty():
                break
    return targets


def legal_targets(board: Board, axis: Axis) -> list[Coordinate]:
    return raycasting_targets(board.cross_position(), board, AXIS_DIRECTIONS[axis])


def capture_targets(board: Board, axis: Axis) -> list[Coordinate]:
    """The subset of legal targets where a chip would be taken"""
    return [
        target
        for target in legal_targets(board, axis)
        if board.occupant(target).is_number()
    ]


def has_capture(board: Board, axis: Axis) -> bool:
    return bool(capture_targets(board, axis))


def validate_move(board: Board, axis: Axis, target: Coordinate) -> None:
    """
    Raise IllegalMoveError unless the cross can reach target:
    1. target must be on the board
    2. target must be on the same row (horizontal) / column (vertical) as the cross, but not the cross itself
    3. nothing may stand between the cross and the target
    """
    if not target.is_within_bounds(board.size):
        raise IllegalMoveError(f"Target {target} is not on the board.")

    origin = board.cross_position()
    if target == origin:
        raise IllegalMoveError(f"The cross already stands on {target}.")

    if not target.is_on_axis(origin, axis):
        raise IllegalMoveError(
            f"Target {target} is not on the {axis} line of the cross at {origin}."
        )

    if target not in legal_targets(board, axis):
        raise IllegalMoveError(
            f"Target {target} lies beyond the first chip between it and the cross at {origin}."
        )
