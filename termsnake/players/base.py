"""
Base player interface for the game engine.
"""

from typing import Optional

from termsnake.domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    The game loop asks the player for at most one command per tick.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return the next command, or None when nothing is pending.

        Args:
            game_state: Current state of the game

        Returns:
            One of "UP", "DOWN", "LEFT", "RIGHT", "RESTART", "QUIT", or None
        """
        raise NotImplementedError
