"""Ball entity and the phase state machine.

The ball moves at constant velocity, one step per frame. It owns the score,
the difficulty phase and the game state: losing the last life ends the game,
reaching the winning score wins it.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, AbstractSet, Tuple

import pygame

from ...audio import BRICK_BREAK, GAME_LOST, GAME_WON, LIFE_LOST, PADDLE_HIT, SoundBoard
from ...config import (
    BALL_RADIUS, BALL_START_OFFSET, KEY_START, PADDLE_SHRINK_SCORE, WIN_SCORE,
)
from ...game_state import GameState
from ...logging import get_logger
from ..phases import PADDLE_SHRUNK_MESSAGE, GamePhase
from ..physics import apply_wall_rules, check_fell_below, check_paddle_collision
from .base import Entity
from .paddle import Paddle

if TYPE_CHECKING:
    from ...session import TableSize
    from ..skins.base import BreakBricksSkin

log = get_logger('ball')


@dataclass
class BallConfig:
    """Ball configuration."""

    radius: float = BALL_RADIUS
    start_offset: float = BALL_START_OFFSET  # Served this far above the paddle top
    win_score: int = WIN_SCORE
    shrink_score: int = PADDLE_SHRINK_SCORE


class Ball(Entity):
    """Ball with constant-velocity movement and fixed-direction wall rules.

    Each frame while playing, ``advance`` applies the wall rules, checks for
    a lost ball and a paddle hit, moves the ball, then checks the phase and
    win thresholds, in that order.
    """

    def __init__(
        self,
        config: BallConfig,
        paddle: Paddle,
        table: 'TableSize',
        audio: SoundBoard,
    ):
        """Initialize ball at the paddle's corner, not yet in play.

        Args:
            config: Ball configuration
            paddle: The player's paddle
            table: Table dimensions
            audio: Sound board for hit, life and end-of-game sounds
        """
        self._config = config
        self._paddle = paddle
        self._table = table
        self._audio = audio

        self.x = paddle.x
        self.y = paddle.y
        self.state = GameState.READY
        self.score = 0
        self.phase = GamePhase.PHASE_1
        self.phase_message = self.phase.label
        self.vx = 0.0
        self.vy = 0.0
        self.initialize_speed()

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.radius

    @property
    def paddle(self) -> Paddle:
        """The paddle this ball bounces off."""
        return self._paddle

    @property
    def velocity(self) -> Tuple[float, float]:
        """Get (vx, vy)."""
        return (self.vx, self.vy)

    @property
    def is_playing(self) -> bool:
        """True while the ball is in flight."""
        return self.state is GameState.PLAYING

    @property
    def is_game_over(self) -> bool:
        """True once all lives are lost."""
        return self.state is GameState.GAME_OVER

    @property
    def is_game_won(self) -> bool:
        """True once the winning score is reached."""
        return self.state is GameState.WON

    def update(self, keys: AbstractSet[str]) -> None:
        """Serve on the start key, then advance if in play."""
        self.start(keys)
        self.advance()

    def start(self, keys: AbstractSet[str]) -> bool:
        """Put the ball in play if it is waiting and the start key is held.

        Returns:
            True if the ball was served
        """
        if self.state is not GameState.READY or KEY_START not in keys:
            return False

        self.state = GameState.PLAYING
        self.place_on_paddle()
        self.initialize_speed()
        log.debug("Ball served at (%.1f, %.1f) with velocity %s", self.x, self.y, self.velocity)
        return True

    def place_on_paddle(self) -> None:
        """Move the ball just above the paddle center."""
        self.x = self._paddle.center_x
        self.y = self._paddle.y - self._config.start_offset

    def initialize_speed(self) -> None:
        """Set velocity up and to the right at the current phase's speed."""
        self.vx = self.phase.speed
        self.vy = -self.phase.speed

    def advance(self) -> None:
        """Move the ball one frame. Does nothing unless the ball is in play."""
        if self.state is not GameState.PLAYING:
            return

        self.vx, self.vy = apply_wall_rules(self, self._table)

        if check_fell_below(self, self._table):
            self._lose_life()
            return

        if check_paddle_collision(self, self._paddle):
            self.vy = -self.vy
            self._audio.play(PADDLE_HIT)

        self.x += self.vx
        self.y += self.vy

        self._handle_phase()
        self._check_win()

    def bounce_off_brick(self) -> None:
        """Reverse vertical direction and score one point for a broken brick."""
        self.vy = -self.vy
        self.score += 1
        self._audio.play(BRICK_BREAK)
        log.debug("Brick broken, score %d", self.score)

    def _lose_life(self) -> None:
        """Handle the ball dropping past the bottom of the table."""
        self.state = GameState.READY
        self._paddle.lives -= 1
        self._audio.play(LIFE_LOST)
        log.info("Life lost, %d remaining", self._paddle.lives)

        if self._paddle.lives == 0:
            self.state = GameState.GAME_OVER
            self._audio.stop_music()
            self._audio.play(GAME_LOST)
            log.info("Game over with score %d", self.score)
        else:
            # Phase is kept across lives
            self.initialize_speed()

    def _handle_phase(self) -> None:
        """Advance the phase and shrink the paddle at the score thresholds."""
        if self.score >= GamePhase.PHASE_2.score_threshold and self.phase is GamePhase.PHASE_1:
            self.phase = GamePhase.PHASE_2
            self.phase_message = self.phase.label
            self._increase_speed()
            log.info("%s (score %d)", self.phase.label, self.score)

        # Speed was already raised by phase 2
        if self.score >= GamePhase.PHASE_3.score_threshold and self.phase is GamePhase.PHASE_2:
            self.phase = GamePhase.PHASE_3
            self.phase_message = self.phase.label
            log.info("%s (score %d)", self.phase.label, self.score)

        if self.score >= self._config.shrink_score and not self._paddle.is_shrunk:
            self._paddle.shrink()
            self.phase_message = PADDLE_SHRUNK_MESSAGE
            log.info("Paddle shrunk to %.1f", self._paddle.width)

    def _increase_speed(self) -> None:
        """Raise both velocity components to the current phase speed.

        The ball is sent right; the vertical direction is kept.
        """
        self.vx = self.phase.speed
        self.vy = math.copysign(self.phase.speed, self.vy)

    def _check_win(self) -> None:
        if self.score >= self._config.win_score:
            self.state = GameState.WON
            self._audio.stop_music()
            self._audio.play(GAME_WON)
            log.info("Game won with score %d", self.score)

    def draw(self, screen: pygame.Surface, skin: 'BreakBricksSkin') -> None:
        skin.render_ball(self, screen)
