"""
Board entity - the fixed rectangle the snake lives on.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .constants import BOARD_MARGIN, DELTAS, MIN_COLS, MIN_ROWS

Cell = Tuple[int, int]


class TerminalTooSmallError(Exception):
    """Raised when the terminal cannot hold a playable board."""


@dataclass(frozen=True)
class Board:
    """
    Bounds of the play area in terminal coordinates.

    The border ring sits on min_x/max_x and min_y/max_y; the snake and the
    target only ever occupy the inner rectangle
    [min_x + 1, max_x - 1] x [min_y + 1, max_y - 1].
    """

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @classmethod
    def from_terminal_size(cls, cols: int, rows: int) -> "Board":
        if cols < MIN_COLS or rows < MIN_ROWS:
            raise TerminalTooSmallError(
                f"terminal is {cols}x{rows}, need at least {MIN_COLS}x{MIN_ROWS}"
            )
        return cls(
            min_x=BOARD_MARGIN,
            max_x=cols - BOARD_MARGIN,
            min_y=BOARD_MARGIN,
            max_y=rows - BOARD_MARGIN,
        )

    @property
    def inner_width(self) -> int:
        return self.max_x - self.min_x - 1

    @property
    def inner_height(self) -> int:
        return self.max_y - self.min_y - 1

    @property
    def center(self) -> Cell:
        return ((self.min_x + self.max_x) // 2, (self.min_y + self.max_y) // 2)

    @property
    def status_row(self) -> int:
        """Row of the status line, just below the bottom margin."""
        return self.max_y + BOARD_MARGIN - 1

    def contains(self, cell: Cell) -> bool:
        """True if the cell lies inside the playable inner rectangle."""
        x, y = cell
        return self.min_x < x < self.max_x and self.min_y < y < self.max_y

    def cells(self) -> Iterator[Cell]:
        """Iterate every playable cell, row by row."""
        for y in range(self.min_y + 1, self.max_y):
            for x in range(self.min_x + 1, self.max_x):
                yield (x, y)

    def step(self, cell: Cell, direction: str) -> Cell:
        """
        Return the neighbour of `cell` in `direction`, wrapping around the
        inner rectangle: leaving through the top comes back in on the bottom
        row, and so on for every edge.
        """
        dx, dy = DELTAS[direction]
        x, y = cell[0] + dx, cell[1] + dy

        if x <= self.min_x:
            x = self.max_x - 1
        elif x >= self.max_x:
            x = self.min_x + 1

        if y <= self.min_y:
            y = self.max_y - 1
        elif y >= self.max_y:
            y = self.min_y + 1

        return (x, y)
