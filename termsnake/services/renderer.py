"""
Terminal renderer for termsnake.

Draws a frame onto a curses window:
- Border ring around the play area
- Snake (distinct head glyph) and target
- Status line with controls, score and session best
- Game over box centred on the board, drawn once per game over
"""

import curses
import logging
from typing import Dict, List

from termsnake.domain.board import Board
from termsnake.domain.constants import BODY_GLYPH, HEAD_GLYPH, TARGET_GLYPH
from termsnake.domain.game_state import GameState

logger = logging.getLogger(__name__)

CONTROLS = "w/a/s/d move  q quit"


class ColorScheme:
    """Color pairs as (pair number, foreground, background)"""

    BORDER = (1, curses.COLOR_WHITE, -1)
    SNAKE = (2, curses.COLOR_GREEN, -1)
    TARGET = (3, curses.COLOR_RED, -1)
    STATUS = (4, curses.COLOR_BLACK, curses.COLOR_CYAN)
    BANNER = (5, curses.COLOR_WHITE, curses.COLOR_RED)


# Attributes used when the terminal has no colors (and in tests, where
# curses is never initialised).
MONOCHROME_PALETTE: Dict[str, int] = {
    "border": curses.A_NORMAL,
    "head": curses.A_BOLD,
    "body": curses.A_NORMAL,
    "target": curses.A_BOLD,
    "status": curses.A_REVERSE,
    "banner": curses.A_REVERSE | curses.A_BOLD,
}


def build_palette() -> Dict[str, int]:
    """
    Register the color pairs and return role -> attribute.

    Must run after curses has been initialised.
    """
    if not curses.has_colors():
        return dict(MONOCHROME_PALETTE)

    curses.start_color()
    try:
        curses.use_default_colors()
    except curses.error:
        logger.debug("Terminal has no default colors, using black background")

    def pair(scheme) -> int:
        number, fg, bg = scheme
        try:
            curses.init_pair(number, fg, bg)
        except curses.error:
            curses.init_pair(number, fg, curses.COLOR_BLACK)
        return curses.color_pair(number)

    return {
        "border": pair(ColorScheme.BORDER),
        "head": pair(ColorScheme.SNAKE) | curses.A_BOLD,
        "body": pair(ColorScheme.SNAKE),
        "target": pair(ColorScheme.TARGET) | curses.A_BOLD,
        "status": pair(ColorScheme.STATUS),
        "banner": pair(ColorScheme.BANNER) | curses.A_BOLD,
    }


def game_over_lines(state: GameState) -> List[str]:
    """Text of the game over box, border characters included."""
    title = "BOARD CLEARED" if state.end_reason == "board_full" else "GAME OVER"
    body = [title, f"SCORE {state.score:04d}", "enter restart  q quit"]
    width = max(len(line) for line in body) + 4
    edge = "+" + "-" * (width - 2) + "+"
    return [edge] + ["|" + line.center(width - 2) + "|" for line in body] + [edge]


class TerminalRenderer:
    """Writes game frames to a curses window."""

    def __init__(self, window, board: Board, palette: Dict[str, int] = None):
        self.window = window
        self.board = board
        self.palette = palette or dict(MONOCHROME_PALETTE)

    def _put(self, x: int, y: int, text: str, role: str) -> None:
        self.window.addstr(y, x, text, self.palette[role])

    def draw_frame(self, state: GameState, best_score: int = 0) -> None:
        """Clear the screen and draw a full frame. No-op unless playing."""
        if not state.playing:
            return

        self.window.erase()
        self._draw_border()
        self._draw_status(state, best_score)

        snake = state.snake
        for idx, (x, y) in enumerate(snake.positions):
            if idx == 0:
                self._put(x, y, HEAD_GLYPH, "head")
            else:
                self._put(x, y, BODY_GLYPH, "body")

        if state.target.cell is not None:
            tx, ty = state.target.cell
            self._put(tx, ty, TARGET_GLYPH, "target")

        self.window.refresh()

    def draw_game_over(self, state: GameState) -> None:
        """Overlay the game over box on whatever the last frame left on screen."""
        lines = game_over_lines(state)
        cx, cy = self.board.center
        left = cx - len(lines[0]) // 2
        top = cy - len(lines) // 2
        for offset, line in enumerate(lines):
            self._put(left, top + offset, line, "banner")
        self.window.refresh()

    def _draw_border(self) -> None:
        b = self.board
        horizontal = "+" + "-" * (b.max_x - b.min_x - 1) + "+"
        self._put(b.min_x, b.min_y, horizontal, "border")
        self._put(b.min_x, b.max_y, horizontal, "border")
        for y in range(b.min_y + 1, b.max_y):
            self._put(b.min_x, y, "|", "border")
            self._put(b.max_x, y, "|", "border")

    def _draw_status(self, state: GameState, best_score: int) -> None:
        b = self.board
        width = b.max_x - b.min_x + 1
        text = f" {CONTROLS}  score {state.score:04d}  best {best_score:04d} "
        self._put(b.min_x, b.status_row, text[:width].ljust(width), "status")
