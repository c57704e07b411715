"""Full-screen entities: the table background and the instructions gate."""

from typing import TYPE_CHECKING, AbstractSet, Callable, List, Optional, Tuple

import pygame

from ...audio import SoundBoard
from ...config import KEY_START
from ...logging import get_logger
from .base import Entity

if TYPE_CHECKING:
    from ..skins.base import BreakBricksSkin

log = get_logger('screens')

# (text, font role, x, y) in table pixels
INSTRUCTION_LINES: List[Tuple[str, str, int, int]] = [
    ("Welcome to Break the Bricks!", 'title', 200, 100),
    ("The objective is simple: break all the bricks and score points!", 'body', 150, 150),
    ("Use the paddle to bounce the ball and destroy the bricks.", 'body', 150, 180),
    ("The more bricks you break, the higher your score.", 'body', 150, 210),
    ("Press Enter to Start", 'title', 200, 250),
    ("Press P to Pause", 'title', 200, 280),
    ("Press C to Continue", 'title', 200, 310),
    ("Use Left and Right Arrow Keys to Move the Paddle", 'title', 200, 340),
    ("Avoid letting the ball fall off the bottom of the screen!", 'body', 150, 380),
    ("The game ends when all bricks are destroyed or if you run out of lives.", 'body', 150, 410),
    ("Can you break all the bricks and reach the highest score?", 'body', 150, 440),
]


class Background(Entity):
    """Draws the table behind everything else."""

    def update(self, keys: AbstractSet[str]) -> None:
        pass

    def draw(self, screen: pygame.Surface, skin: 'BreakBricksSkin') -> None:
        skin.render_background(screen)


class InstructionsScreen(Entity):
    """One-shot gate shown before the first game.

    While showing, the loop driver updates nothing else. Holding the start
    key hides the screen for the rest of the session, starts the background
    music and runs the ``on_dismiss`` callback (which lays out the bricks).
    """

    def __init__(
        self,
        audio: SoundBoard,
        on_dismiss: Optional[Callable[[], None]] = None,
    ):
        self._audio = audio
        self.on_dismiss = on_dismiss
        self.showing = True

    def update(self, keys: AbstractSet[str]) -> None:
        if not self.showing or KEY_START not in keys:
            return

        self.showing = False
        log.info("Instructions dismissed, starting game")
        self._audio.play_music(loop=True)
        if self.on_dismiss is not None:
            self.on_dismiss()

    def draw(self, screen: pygame.Surface, skin: 'BreakBricksSkin') -> None:
        if self.showing:
            skin.render_instructions(INSTRUCTION_LINES, screen)
