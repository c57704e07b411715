"""Single entry point for starting a new game."""

from ..audio import SoundBoard
from ..config import BASE_SPEED, STARTING_LIVES
from ..game_state import GameState
from ..logging import get_logger
from .entities.ball import Ball
from .entities.brick_field import BrickField
from .phases import GamePhase

log = get_logger('resetter')


class GameResetter:
    """Restores ball, paddle, bricks, lives and phase to their initial values.

    Every restart goes through ``reset()``; nothing else resets part of the
    game.
    """

    def __init__(self, ball: Ball, brick_field: BrickField, audio: SoundBoard):
        self._ball = ball
        self._brick_field = brick_field
        self._audio = audio

    def reset(self) -> None:
        """Start a new game."""
        ball = self._ball
        paddle = ball.paddle

        ball.state = GameState.READY
        ball.score = 0
        self._brick_field.reset_bricks()

        ball.place_on_paddle()
        ball.vx = BASE_SPEED
        ball.vy = -BASE_SPEED

        paddle.restore_width()

        ball.phase = GamePhase.PHASE_1
        ball.phase_message = GamePhase.PHASE_1.label

        paddle.lives = STARTING_LIVES

        self._audio.play_music(loop=True)
        log.info("Game reset")
