"""Base class for Break the Bricks skins.

Skins handle ALL rendering - the entities only manage state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Tuple

import pygame

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.brick import Brick
    from ..entities.hud import HeartRow, SpinningCoin
    from ..entities.paddle import Paddle


class BreakBricksSkin(ABC):
    """Base class for game skins.

    The loop driver and entities decide *what* is on screen; skins decide
    how it looks.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_background(self, screen: pygame.Surface) -> None:
        """Render the table background.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render the ball, or the message that stands in for it.

        Args:
            ball: Ball to render (access ball.state for what to show)
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render an unbroken brick.

        Args:
            brick: Brick to render
            screen: Pygame surface to draw on
        """
        pass

    def render_hearts(self, hearts: 'HeartRow', screen: pygame.Surface) -> None:
        """Render one heart per remaining life."""
        pass

    def render_coin(self, coin: 'SpinningCoin', screen: pygame.Surface) -> None:
        """Render the score coin."""
        pass

    def render_instructions(
        self,
        lines: List[Tuple[str, str, int, int]],
        screen: pygame.Surface,
    ) -> None:
        """Render the instructions screen.

        Args:
            lines: (text, font role, x, y) for each line
            screen: Pygame surface to draw on
        """
        pass

    def render_centered_message(self, text: str, screen: pygame.Surface) -> None:
        """Render a one-line message centered on the table."""
        pass
