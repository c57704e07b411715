"""Keyboard input for Break the Bricks."""

from .keyboard import HeldKeys, KeyboardSource, WATCHED_KEYS

__all__ = [
    'HeldKeys',
    'KeyboardSource',
    'WATCHED_KEYS',
]
