"""
Input sources for termsnake.

A player turns whatever drives the snake (the keyboard, a script)
into one command per tick.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, KEY_BINDINGS
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'KEY_BINDINGS',
    'ScriptedPlayer',
]
