"""
Tests for the input sources.
"""

import curses
import os
import sys
from unittest.mock import MagicMock

import pytest

# Add repo root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from termsnake.domain import Board, GameState, UP, DOWN, LEFT, RIGHT, RESTART, QUIT  # noqa: E402
from termsnake.players import KeyboardPlayer, Player, ScriptedPlayer  # noqa: E402


@pytest.fixture
def state():
    return GameState.new_round(Board.from_terminal_size(80, 24))


def keyboard_with(*keys):
    window = MagicMock()
    window.getch.side_effect = list(keys)
    return KeyboardPlayer(window, poll_timeout_ms=15), window


class TestPlayerBase:
    """Tests for the Player interface."""

    def test_get_move_not_implemented(self, state):
        """The base class has no input of its own."""
        with pytest.raises(NotImplementedError):
            Player().get_move(state)


class TestKeyboardPlayer:
    """Tests for KeyboardPlayer."""

    def test_sets_poll_timeout(self):
        """The window is switched to a bounded wait on construction."""
        _, window = keyboard_with()
        window.timeout.assert_called_once_with(15)
        window.keypad.assert_called_once_with(True)

    def test_wasd_map_to_directions(self, state):
        """w/a/s/d steer the snake."""
        player, _ = keyboard_with(ord("w"), ord("a"), ord("s"), ord("d"))
        assert [player.get_move(state) for _ in range(4)] == [UP, LEFT, DOWN, RIGHT]

    def test_quit_key(self, state):
        """q asks to quit."""
        player, _ = keyboard_with(ord("q"))
        assert player.get_move(state) == QUIT

    def test_enter_keys_restart(self, state):
        """Every flavour of Enter asks for a restart."""
        player, _ = keyboard_with(10, 13, curses.KEY_ENTER)
        assert [player.get_move(state) for _ in range(3)] == [RESTART] * 3

    def test_no_key_pressed(self, state):
        """A timed out poll yields no command."""
        player, _ = keyboard_with(-1)
        assert player.get_move(state) is None

    def test_unbound_keys_are_ignored(self, state):
        """Keys outside the bindings yield no command."""
        player, _ = keyboard_with(ord("x"), curses.KEY_UP, ord("W"))
        assert [player.get_move(state) for _ in range(3)] == [None, None, None]

    def test_reads_one_key_per_call(self, state):
        """Each poll consumes a single key press."""
        player, window = keyboard_with(ord("w"), ord("d"))
        player.get_move(state)
        assert window.getch.call_count == 1


class TestScriptedPlayer:
    """Tests for ScriptedPlayer."""

    def test_replays_commands_in_order(self, state):
        """Commands come back one per call, then the fallback."""
        player = ScriptedPlayer([UP, None, LEFT])
        moves = [player.get_move(state) for _ in range(5)]
        assert moves == [UP, None, LEFT, QUIT, QUIT]
        assert player.calls == 5

    def test_custom_fallback(self, state):
        """The fallback after the script can be chosen."""
        player = ScriptedPlayer([], then=None)
        assert player.get_move(state) is None

    def test_rejects_unknown_commands(self):
        """Typos in a script are caught up front."""
        with pytest.raises(ValueError):
            ScriptedPlayer(["JUMP"])
