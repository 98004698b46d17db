"""
Player implementations for termsnake.

This module contains the input collaborators that decide the snake's
heading before each tick.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'RandomPlayer',
    'ScriptedPlayer',
]
