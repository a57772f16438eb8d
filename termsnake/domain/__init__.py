"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
the terminal (curses window, key codes, colors).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, RESTART, QUIT, VALID_COMMANDS
from .board import Board, Cell, TerminalTooSmallError
from .snake import Snake
from .target import Target
from .speed import tick_delay_ms
from .game_state import GameState, PLAYING, GAME_OVER, QUITTING

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'RESTART', 'QUIT', 'VALID_COMMANDS',
    'Board', 'Cell', 'TerminalTooSmallError',
    'Snake',
    'Target',
    'tick_delay_ms',
    'GameState', 'PLAYING', 'GAME_OVER', 'QUITTING',
]
