"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

from src.mattix.events import GameEvent

# A full 4x4 board (the regular catalog) with the cross in the top-left corner
FULL_SMALL = "X,1,2,3/4,5,6,7/1,2,3,4/5,6,7,8"
# Taking the 5 clears the board
SINGLE_CHIP = "X,5,.,./.,.,.,./.,.,.,./.,.,.,."
# After the first player takes the 5, the vertical player has nothing in their column
STALEMATE_AFTER_ONE = "X,5,.,./.,.,.,./.,.,.,./.,.,.,3"
# First player has nothing to take in the top row
STALEMATE_AT_START = "X,.,.,./.,.,.,./.,.,.,./.,.,.,3"
# Both players can take a 3, then the round stalls
EQUAL_CAPTURES = "X,3,.,./.,3,.,./.,.,.,./.,.,.,1"
# The vertical player can take the 7 right away
VERTICAL_OPENER = "X,.,.,./7,.,.,./.,.,.,./.,.,.,."


class EventRecorder:
    """Listener that simply remembers everything it is told"""

    def __init__(self) -> None:
        self.events: list[GameEvent] = []

    def on_event(self, event: GameEvent) -> None:
        self.events.append(event)

    def types(self) -> list[type]:
        return [type(event) for event in self.events]


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()
