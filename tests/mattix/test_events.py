"""Unit tests for /src/mattix/events.py"""

from unittest.mock import Mock, call

import pytest

from src.mattix.events import EventBus, GameOver, GameStarted, RoundStarted


def test_listeners_notified_in_registration_order() -> None:
    """A shared parent mock records the order in which the children got called"""
    parent = Mock()
    bus = EventBus()
    bus.add_listener(parent.first)
    bus.add_listener(parent.second)

    event = GameStarted()
    bus.notify(event)

    assert parent.mock_calls == [call.first.on_event(event), call.second.on_event(event)]


def test_notify_without_listeners() -> None:
    EventBus().notify(RoundStarted(2))


def test_listener_exception_propagates() -> None:
    """Misbehaving listeners are the caller's problem, and later listeners are not reached"""
    failing = Mock()
    failing.on_event.side_effect = RuntimeError("boom")
    later = Mock()
    bus = EventBus()
    bus.add_listener(failing)
    bus.add_listener(later)

    with pytest.raises(RuntimeError):
        bus.notify(GameStarted())
    later.on_event.assert_not_called()


def test_game_over_single_winner() -> None:
    event = GameOver(total_scores={0: 12, 1: 9}, winners=(0,))
    assert not event.is_tie
    assert event.winner == 0


def test_game_over_tie() -> None:
    event = GameOver(total_scores={0: 9, 1: 9}, winners=(0, 1))
    assert event.is_tie
    assert event.winner is None
