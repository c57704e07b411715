"""Brick entity.

A brick tests itself against the ball every frame and breaks on the first
overlap. Broken bricks stay in the field, invisible and inert, until the
whole field is regenerated.
"""

from typing import TYPE_CHECKING, AbstractSet, Tuple

import pygame

from ...config import ANIMATION_FRAMES, ANIMATION_SPEED, BRICK_HEIGHT, BRICK_WIDTH
from ..physics import check_brick_collision
from .base import Entity, FrameAnimation

if TYPE_CHECKING:
    from ..skins.base import BreakBricksSkin
    from .ball import Ball


class Brick(Entity):
    """One destructible rectangle, positioned by its top-left corner."""

    def __init__(
        self,
        x: float,
        y: float,
        ball: 'Ball',
        width: float = BRICK_WIDTH,
        height: float = BRICK_HEIGHT,
    ):
        """Initialize brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            ball: The ball that can break this brick
            width: Brick width
            height: Brick height
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.is_broken = False
        self._ball = ball
        self.animation = FrameAnimation(ANIMATION_FRAMES, ANIMATION_SPEED)

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get brick rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    @property
    def frame_index(self) -> int:
        """Current shimmer frame."""
        return self.animation.frame_index

    def update(self, keys: AbstractSet[str]) -> None:
        """Animate, then break if the ball overlaps this brick."""
        if self._ball.is_game_over:
            return

        self.animation.tick()

        if check_brick_collision(self._ball, self):
            self.is_broken = True
            self._ball.bounce_off_brick()

    def draw(self, screen: pygame.Surface, skin: 'BreakBricksSkin') -> None:
        if not self.is_broken:
            skin.render_brick(self, screen)
