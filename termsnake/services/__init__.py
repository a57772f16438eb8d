"""
Terminal-facing services: the curses session and the frame renderer.
"""

from .renderer import TerminalRenderer, ColorScheme, build_palette, game_over_lines
from .terminal import TerminalSession

__all__ = [
    'TerminalRenderer',
    'ColorScheme',
    'build_palette',
    'game_over_lines',
    'TerminalSession',
]
