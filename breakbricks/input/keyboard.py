"""
Keyboard Source - Polls the keys the game cares about.

Input is polled once per frame rather than queued, so a key held for
several frames is reported on every one of them.
"""
from typing import Callable, Dict, FrozenSet, Optional, Sequence

import pygame

from .. import config

HeldKeys = FrozenSet[str]

# pygame key code -> name used by the game
WATCHED_KEYS: Dict[int, str] = {
    pygame.K_RETURN: config.KEY_START,
    pygame.K_KP_ENTER: config.KEY_START,
    pygame.K_LEFT: config.KEY_LEFT,
    pygame.K_RIGHT: config.KEY_RIGHT,
    pygame.K_r: config.KEY_RESTART,
    pygame.K_p: config.KEY_PAUSE,
    pygame.K_c: config.KEY_CONTINUE,
}


class KeyboardSource:
    """Reports the set of currently held keys.

    Args:
        get_pressed: Returns the pressed-state sequence indexed by key code.
            Defaults to ``pygame.key.get_pressed``; tests pass a stub.
    """

    def __init__(self, get_pressed: Optional[Callable[[], Sequence[bool]]] = None):
        self._get_pressed = get_pressed or pygame.key.get_pressed

    def poll(self) -> HeldKeys:
        """Get the names of all watched keys held down right now."""
        pressed = self._get_pressed()
        return frozenset(name for code, name in WATCHED_KEYS.items() if pressed[code])
