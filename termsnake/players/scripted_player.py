"""
Scripted player - replays a fixed list of commands, one per tick.
"""

from typing import Iterable, List, Optional

from termsnake.domain.constants import QUIT, VALID_COMMANDS
from termsnake.domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Feeds a prepared command sequence to the loop. `None` entries stand for
    ticks without input. Once the script runs out the player answers with
    `then` (QUIT by default, so a scripted run always terminates).
    """

    def __init__(self, commands: Iterable[Optional[str]], then: Optional[str] = QUIT):
        self.commands: List[Optional[str]] = list(commands)
        for command in self.commands + [then]:
            if command is not None and command not in VALID_COMMANDS:
                raise ValueError(f"Unknown command: {command}")
        self.then = then
        self.calls = 0

    def get_move(self, game_state: GameState) -> Optional[str]:
        self.calls += 1
        if self.commands:
            return self.commands.pop(0)
        return self.then
