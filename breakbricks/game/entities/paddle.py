"""Player paddle, steered with the left/right arrow keys.

The paddle also carries the player's remaining lives.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, AbstractSet, Callable, Tuple

import pygame

from ...config import (
    KEY_LEFT, KEY_RIGHT,
    PADDLE_HEIGHT, PADDLE_MAX_X, PADDLE_MIN_X, PADDLE_SPEED, PADDLE_WIDTH,
    PADDLE_X_DIVISOR, PADDLE_Y_DIVISOR, STARTING_LIVES,
)
from .base import Entity

if TYPE_CHECKING:
    from ...session import TableSize
    from ..skins.base import BreakBricksSkin


@dataclass
class PaddleConfig:
    """Paddle dimensions and movement lane."""

    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT
    speed: float = PADDLE_SPEED
    min_x: float = PADDLE_MIN_X
    max_x: float = PADDLE_MAX_X


class Paddle(Entity):
    """Horizontal paddle positioned by its top-left corner.

    Movement stops once the game is over. The paddle can shrink to half its
    original width and is restored by the game resetter.
    """

    def __init__(
        self,
        config: PaddleConfig,
        table: 'TableSize',
        is_game_over: Callable[[], bool] = lambda: False,
        lives: int = STARTING_LIVES,
    ):
        """Initialize paddle.

        Args:
            config: Paddle configuration
            table: Table dimensions
            is_game_over: Returns True when input should be ignored
            lives: Starting lives
        """
        self._config = config
        self._is_game_over = is_game_over
        self.x = table.width / PADDLE_X_DIVISOR
        self.y = table.height / PADDLE_Y_DIVISOR
        self.width = config.width
        self.height = config.height
        self.lives = lives

    @property
    def original_width(self) -> float:
        """Width the paddle started with."""
        return self._config.width

    @property
    def move_speed(self) -> float:
        """Pixels moved per frame while a direction key is held."""
        return self._config.speed

    @property
    def center_x(self) -> float:
        """Get paddle center X."""
        return self.x + self.width / 2

    @property
    def is_shrunk(self) -> bool:
        """True once the paddle has been halved."""
        return self.width != self._config.width

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def shrink(self) -> None:
        """Halve the paddle width. Only the first call has any effect."""
        if self.width == self._config.width:
            self.width = self._config.width / 2

    def restore_width(self) -> None:
        """Return the paddle to its original width."""
        self.width = self._config.width

    def update(self, keys: AbstractSet[str]) -> None:
        """Move left or right while the matching key is held."""
        if self._is_game_over():
            return

        if KEY_RIGHT in keys and self.x < self._config.max_x:
            self.x += self.move_speed

        if KEY_LEFT in keys and self.x >= self._config.min_x:
            self.x -= self.move_speed

    def draw(self, screen: pygame.Surface, skin: 'BreakBricksSkin') -> None:
        skin.render_paddle(self, screen)
