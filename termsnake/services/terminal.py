"""
Terminal session: puts the terminal into full-screen cbreak mode for the
lifetime of the game and puts it back afterwards, on every exit path.
"""

import curses
import locale
import logging
from typing import Tuple

logger = logging.getLogger(__name__)


class TerminalSession:
    """
    Context manager around the curses screen.

    Entering switches to the alternate screen, disables echo and line
    buffering and hides the cursor. Leaving undoes all of it even when the
    body raised; each restore step is attempted independently.
    """

    def __init__(self):
        self.window = None

    def __enter__(self) -> "TerminalSession":
        locale.setlocale(locale.LC_ALL, "")
        self.window = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self.window.keypad(True)
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal cannot hide the cursor")
        except Exception:
            self.restore()
            raise
        logger.info("Terminal session started (%dx%d)", *self.size())
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore()
        return False

    def size(self) -> Tuple[int, int]:
        """Return (cols, rows) of the screen."""
        rows, cols = self.window.getmaxyx()
        return cols, rows

    def restore(self) -> None:
        steps = [
            lambda: self.window.keypad(False),
            curses.nocbreak,
            curses.echo,
            lambda: curses.curs_set(1),
            curses.endwin,
        ]
        for step in steps:
            try:
                step()
            except Exception as exc:  # noqa: BLE001 - keep restoring
                logger.warning("Terminal restore step failed: %s", exc)
        logger.info("Terminal session restored")
