"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Optional, Tuple

from .board import Board
from .constants import LEFT, OPPOSITES, VALID_MOVES


class Snake:
    """
    Represents the player's snake.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        head_dir: direction the head moved on the last tick
        score: targets eaten this round, never decreases
    """

    def __init__(self, positions: List[Tuple[int, int]], head_dir: str = LEFT):
        if len(positions) < 2:
            raise ValueError("A snake needs at least two segments.")
        if head_dir not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {head_dir}")
        self.positions = deque(positions)
        self.head_dir = head_dir
        self.score = 0

    @classmethod
    def spawn(cls, board: Board) -> "Snake":
        """Two-segment snake centred on the board, heading left."""
        head_x, head_y = board.center
        return cls([(head_x, head_y), (head_x + 1, head_y)], head_dir=LEFT)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def set_direction(self, direction: str) -> bool:
        """
        Steer the snake. Reversing straight into the neck is refused.

        Returns:
            True if the heading changed
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction}")
        if direction == OPPOSITES[self.head_dir] or direction == self.head_dir:
            return False
        self.head_dir = direction
        return True

    def next_head(self, board: Board, direction: Optional[str] = None) -> Tuple[int, int]:
        return board.step(self.head, direction or self.head_dir)

    def advance(self, board: Board, direction: Optional[str] = None) -> Tuple[int, int]:
        """
        Move one cell: new head in front, tail dropped. Length is unchanged.

        Returns the vacated tail cell.
        """
        if direction is not None:
            self.set_direction(direction)
        self.positions.appendleft(self.next_head(board))
        return self.positions.pop()

    def grow(self, board: Board) -> Tuple[int, int]:
        """Move one cell keeping the tail, so the snake gets one segment longer."""
        new_head = self.next_head(board)
        self.positions.appendleft(new_head)
        return new_head

    def check_failure(self) -> bool:
        """True if the head overlaps any other body segment."""
        head = self.head
        return any(segment == head for segment in list(self.positions)[1:])

    def __repr__(self):
        return f"<Snake head={self.head} dir={self.head_dir} len={len(self)} score={self.score}>"
