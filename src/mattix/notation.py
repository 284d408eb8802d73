"""
Text notation of a board position (in the spirit of FEN for chess).

Rows are written top to bottom and separated by slashes, cells within a row by commas:
* an integer is a numbered chip (negative values on the 6x6 board)
* 'X' is the cross
* '.' is an empty cell

ex. a 4x4 position with the cross in the top-left corner:
X,1,2,3/4,5,6,7/1,2,3,4/5,6,7,8
"""

from src.core.exceptions import InvalidNotationError
from src.core.shared_types import BoardSize
from src.mattix.coordinate import BOARD_DIMENSIONS, Coordinate
from src.mattix.pieces import Piece

ROW_SEPARATOR = "/"
CELL_SEPARATOR = ","

DIMENSION_TO_SIZE: dict[int, BoardSize] = {
    dimension: size for size, dimension in BOARD_DIMENSIONS.items()
}


def split_rows(notation: str) -> list[list[str]]:
    return [row.split(CELL_SEPARATOR) for row in notation.strip().split(ROW_SEPARATOR)]


def infer_board_size(notation: str) -> BoardSize:
    """The number of rows decides the board size, and every row must be just as long."""
    rows = split_rows(notation)
    dimension = len(rows)
    if dimension not in DIMENSION_TO_SIZE:
        raise InvalidNotationError(
            f"Board must have {' or '.join(str(d) for d in DIMENSION_TO_SIZE)} rows, got {dimension}: {notation!r}"
        )
    for row_idx, row in enumerate(rows):
        if len(row) != dimension:
            raise InvalidNotationError(
                f"Row {row_idx} has {len(row)} cells, expected {dimension}: {notation!r}"
            )
    return DIMENSION_TO_SIZE[dimension]


def is_valid_notation(notation: str) -> bool:
    try:
        parse_notation(notation)
    except InvalidNotationError:
        return False
    return True


def parse_notation(notation: str) -> tuple[BoardSize, dict[Coordinate, Piece]]:
    """Convert the notation into a board size and the full position (empty cells included)."""
    size = infer_board_size(notation)
    position: dict[Coordinate, Piece] = {}
    for row_idx, row in enumerate(split_rows(notation)):
        for col_idx, token in enumerate(row):
            position[Coordinate(row_idx, col_idx)] = Piece.from_notation(token)
    return size, position


def position_to_notation(position: dict[Coordinate, Piece], size: BoardSize) -> str:
    dimension = BOARD_DIMENSIONS[size]
    return ROW_SEPARATOR.join(
        CELL_SEPARATOR.join(
            position[Coordinate(row, col)].to_notation() for col in range(dimension)
        )
        for row in range(dimension)
    )
