"""Custom exceptions. Every layer raises (a subclass of) GameError so callers can catch a single type."""


class GameError(Exception):
    """Top-level exception for anything going wrong in the engine."""


# --- BOARD ---
class OutOfBoundsError(GameError):
    """Coordinate does not lie on the board."""


class OccupiedCellError(GameError):
    """Tried to place a piece on a cell that already holds one."""


class EmptyCellError(GameError):
    """Tried to remove a piece from a cell that holds none."""


class InvalidNotationError(GameError):
    """Board notation string could not be parsed."""


class InvariantViolationError(GameError):
    """
    The engine reached a state that should be impossible (ex. two crosses on the board).
    Indicates a bug: callers should not try to recover from this.
    """


# --- RULES ---
class IllegalMoveError(GameError):
    """Requested target is not reachable by the cross for the player to move."""


class GameStateError(GameError):
    """Operation not allowed in the current phase of the game."""


# --- CONFIGURATION ---
class InvalidConfigurationError(GameError):
    """Unsupported board size / player count."""
