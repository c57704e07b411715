"""Animated HUD decorations: the lives hearts and the score coin."""

from typing import TYPE_CHECKING, AbstractSet, Tuple

import pygame

from ...config import ANIMATION_FRAMES, ANIMATION_SPEED, COIN_SCALE, COIN_SIZE, HEART_SIZE, HEART_SPACING
from .base import Entity, FrameAnimation

if TYPE_CHECKING:
    from ..skins.base import BreakBricksSkin
    from .paddle import Paddle


class HeartRow(Entity):
    """One pulsing heart per remaining life, left to right."""

    def __init__(self, x: float, y: float, paddle: 'Paddle', size: int = HEART_SIZE):
        self.x = x
        self.y = y
        self.size = size
        self._paddle = paddle
        self.animation = FrameAnimation(ANIMATION_FRAMES, ANIMATION_SPEED)

    @property
    def count(self) -> int:
        """Number of hearts to draw."""
        return max(0, self._paddle.lives)

    def heart_position(self, index: int) -> Tuple[float, float]:
        """Top-left corner of the heart at ``index``."""
        return (self.x + index * (self.size + HEART_SPACING), self.y)

    def update(self, keys: AbstractSet[str]) -> None:
        self.animation.tick()

    def draw(self, screen: pygame.Surface, skin: 'BreakBricksSkin') -> None:
        skin.render_hearts(self, screen)


class SpinningCoin(Entity):
    """Coin icon beside the score, spinning through its frames."""

    def __init__(self, x: float, y: float, size: int = COIN_SIZE, scale: float = COIN_SCALE):
        self.x = x
        self.y = y
        self.size = size
        self.scale = scale
        self.animation = FrameAnimation(ANIMATION_FRAMES, ANIMATION_SPEED)

    @property
    def drawn_size(self) -> float:
        """On-screen size after scaling."""
        return self.size * self.scale

    def update(self, keys: AbstractSet[str]) -> None:
        self.animation.tick()

    def draw(self, screen: pygame.Surface, skin: 'BreakBricksSkin') -> None:
        skin.render_coin(self, screen)
