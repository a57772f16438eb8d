"""
Keyboard player - polls a curses window for key presses.
"""

import curses
import logging
from typing import Dict, Optional

from termsnake.domain.constants import UP, DOWN, LEFT, RIGHT, RESTART, QUIT, POLL_TIMEOUT_MS
from termsnake.domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[int, str] = {
    ord("w"): UP,
    ord("s"): DOWN,
    ord("a"): LEFT,
    ord("d"): RIGHT,
    ord("q"): QUIT,
    curses.KEY_ENTER: RESTART,
    10: RESTART,
    13: RESTART,
}


class KeyboardPlayer(Player):
    """
    Reads at most one key per tick, waiting no longer than the poll timeout.
    Keys without a binding are ignored.
    """

    def __init__(self, window, poll_timeout_ms: int = POLL_TIMEOUT_MS):
        self.window = window
        self.poll_timeout_ms = poll_timeout_ms
        self.window.keypad(True)
        self.window.timeout(poll_timeout_ms)

    def get_move(self, game_state: GameState) -> Optional[str]:
        key = self.window.getch()
        if key == -1:
            return None
        command = KEY_BINDINGS.get(key)
        if command is None:
            logger.debug("Ignoring key %d", key)
        return command
