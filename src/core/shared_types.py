"""
Type definitions used across layers
"""

from enum import StrEnum


class BoardSize(StrEnum):
    SMALL = "small"
    LARGE = "large"


class Axis(StrEnum):
    """The line along which a player may slide the cross."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Phase(StrEnum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    ROUND_OVER = "round over"
    GAME_OVER = "game over"
