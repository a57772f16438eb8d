"""
Target entity - the item the snake eats to grow.
"""

import logging
import random
from typing import Optional, Tuple

from .board import Board
from .constants import SPAWN_ATTEMPTS
from .snake import Snake

logger = logging.getLogger(__name__)


class Target:
    """
    The single growth item on the board.

    Attributes:
        cell: (x, y) of the target, None until the first spawn
        dirty: True when the target has to be repositioned before the next frame
    """

    def __init__(self, cell: Optional[Tuple[int, int]] = None):
        self.cell = cell
        self.dirty = cell is None

    def respawn(
        self,
        board: Board,
        snake: Snake,
        rng: Optional[random.Random] = None,
        max_attempts: int = SPAWN_ATTEMPTS,
    ) -> bool:
        """
        Move the target to a random free cell of the inner rectangle.

        Draws up to `max_attempts` random cells, then falls back to scanning
        the board for any free cell so a crowded board still gets a target.

        Returns:
            False if every playable cell is covered by the snake. The target
            is left untouched in that case.
        """
        rng = rng or random
        occupied = set(snake.positions)

        for _ in range(max_attempts):
            x = rng.randint(board.min_x + 1, board.max_x - 1)
            y = rng.randint(board.min_y + 1, board.max_y - 1)
            if (x, y) not in occupied:
                self._place((x, y))
                return True

        logger.debug("No free cell after %d draws, scanning the board", max_attempts)
        for cell in board.cells():
            if cell not in occupied:
                self._place(cell)
                return True

        return False

    def _place(self, cell: Tuple[int, int]) -> None:
        self.cell = cell
        self.dirty = False
        logger.debug("Target spawned at %s", cell)

    def __repr__(self):
        return f"<Target cell={self.cell} dirty={self.dirty}>"
