"""
GameState entity - everything one round of the game owns.
"""

from typing import Optional

from .board import Board
from .snake import Snake
from .target import Target

PLAYING = "PLAYING"
GAME_OVER = "GAME_OVER"
QUITTING = "QUITTING"


class GameState:
    """
    The mutable state of a round. Only the game loop writes to it, and a
    restart replaces it with a fresh instance.

    Attributes:
        board: bounds shared by every round of the session
        snake: the player's snake
        target: the growth item
        status: PLAYING, GAME_OVER or QUITTING
        tick: number of moves played this round
        end_reason: None while playing, 'self' or 'board_full' once over
    """

    def __init__(self, board: Board, snake: Snake, target: Target):
        self.board = board
        self.snake = snake
        self.target = target
        self.status = PLAYING
        self.tick = 0
        self.end_reason: Optional[str] = None

    @classmethod
    def new_round(cls, board: Board) -> "GameState":
        return cls(board, Snake.spawn(board), Target())

    @property
    def score(self) -> int:
        return self.snake.score

    @property
    def playing(self) -> bool:
        return self.status == PLAYING

    def print_board(self) -> str:
        """
        Returns a string representation of the play area with:
        . = empty space
        * = target
        @ = snake head
        o = snake body
        """
        board = self.board
        rows = [['.' for _ in range(board.inner_width)] for _ in range(board.inner_height)]

        def put(cell, glyph):
            x, y = cell
            rows[y - board.min_y - 1][x - board.min_x - 1] = glyph

        if self.target.cell is not None:
            put(self.target.cell, '*')

        for idx, cell in enumerate(self.snake.positions):
            put(cell, '@' if idx == 0 else 'o')

        return "\n".join("".join(row) for row in rows)

    def __repr__(self):
        return (
            f"<GameState status={self.status}, tick={self.tick}, "
            f"score={self.score}, target={self.target.cell}>"
        )
