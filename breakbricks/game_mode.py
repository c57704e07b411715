"""Break the Bricks - the per-frame loop driver.

Each frame the driver looks at the game state once and picks one branch:

- game over / won: wait for R, show the end screen
- instructions showing: only the instructions screen is updated
- paused (P while the ball is in flight): nothing is updated and the music
  is paused until C
- otherwise: every entity is updated, then every entity is drawn
"""

from typing import AbstractSet, Optional

import pygame

from .config import KEY_CONTINUE, KEY_PAUSE, KEY_RESTART
from .game.skins.classic import GAME_OVER_MESSAGE, GAME_WON_MESSAGE, PAUSED_MESSAGE
from .game_state import GameState
from .logging import get_logger
from .session import GameSession, create_session

log = get_logger('game')


class BreakBricksGame:
    """Owns a session and drives it one frame at a time.

    Usage:
        game = BreakBricksGame()
        while running:
            game.update(keyboard.poll())
            game.render(screen)
    """

    NAME = "Break the Bricks"
    DESCRIPTION = "Bounce the ball, break every brick, survive three phases."
    VERSION = "1.0.0"

    def __init__(self, session: Optional[GameSession] = None):
        """Initialize the game.

        Args:
            session: Pre-built session (default: ``create_session()``)
        """
        self._session = session or create_session()
        self._paused = False

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> GameState:
        """Current game state, as held by the ball."""
        return self._session.ball.state

    @property
    def paused(self) -> bool:
        return self._paused

    def get_score(self) -> int:
        """Get current score."""
        return self._session.ball.score

    def update(self, keys: AbstractSet[str]) -> None:
        """Advance the game by one frame.

        Args:
            keys: Names of the keys currently held down
        """
        session = self._session
        state = session.ball.state

        if state.is_finished:
            if KEY_RESTART in keys:
                self.reset()
            return

        if session.instructions.showing:
            session.instructions.update(keys)
            return

        if self._paused:
            if KEY_CONTINUE in keys:
                self._paused = False
                session.audio.play_music()
                log.info("Resumed")
            return

        if KEY_PAUSE in keys and state is GameState.PLAYING:
            self._paused = True
            session.audio.pause_music()
            log.info("Paused")
            return

        for entity in session.entities:
            entity.update(keys)

    def render(self, screen: pygame.Surface) -> None:
        """Draw the current frame.

        Args:
            screen: Pygame surface to draw on
        """
        session = self._session
        skin = session.skin
        state = session.ball.state

        if state is GameState.GAME_OVER:
            skin.render_background(screen)
            skin.render_centered_message(GAME_OVER_MESSAGE, screen)
            return

        if state is GameState.WON:
            skin.render_background(screen)
            skin.render_centered_message(GAME_WON_MESSAGE, screen)
            return

        for entity in session.entities:
            entity.draw(screen, skin)

        if self._paused:
            skin.render_centered_message(PAUSED_MESSAGE, screen)

    def reset(self) -> None:
        """Start a new game."""
        self._paused = False
        self._session.resetter.reset()
