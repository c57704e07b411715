"""Classic skin - white paddle, orange ball, shimmering red bricks."""

from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

import pygame

from ... import config
from ...game_state import GameState
from ...logging import get_logger
from .base import BreakBricksSkin

if TYPE_CHECKING:
    from ...session import TableSize
    from ..entities.ball import Ball
    from ..entities.brick import Brick
    from ..entities.hud import HeartRow, SpinningCoin
    from ..entities.paddle import Paddle

log = get_logger('skin')

GAME_OVER_MESSAGE = "GAME OVER - PRESS R TO RESTART"
GAME_WON_MESSAGE = "YOU WON! - PRESS R TO RESTART"
START_MESSAGE = "PRESS ENTER TO PLAY"
PAUSED_MESSAGE = "PAUSED - PRESS C TO CONTINUE"

# Brightness of each shimmer frame
_SHIMMER = (1.0, 0.92, 0.85, 0.92)


class ClassicSkin(BreakBricksSkin):
    """Renders the game with simple shapes over an optional background image.

    - Background: image scaled to the table, or a flat color if the image
      is not configured or cannot be loaded
    - Paddle: white rectangle
    - Ball: orange circle, with score and phase text
    - Bricks: red rectangles that shimmer through four shades
    - Hearts and coin: small pulsing / spinning shapes
    """

    NAME = "classic"
    DESCRIPTION = "Shapes over the table image"

    def __init__(self, table: 'TableSize', background_image: Optional[Path] = None):
        """Initialize classic skin.

        Args:
            table: Table dimensions, used for centering and text placement
            background_image: Optional image drawn behind the table
        """
        self._table = table
        self._background_path = background_image
        self._background: Optional[pygame.Surface] = None
        self._background_tried = False
        self._fonts: Dict[str, pygame.font.Font] = {}

    def _font(self, role: str) -> pygame.font.Font:
        """Get a font by role, creating it on first use."""
        if role not in self._fonts:
            pygame.font.init()
            sizes = {
                'hud': config.FONT_SIZE_HUD,
                'title': config.FONT_SIZE_TITLE,
                'body': config.FONT_SIZE_BODY,
            }
            self._fonts[role] = pygame.font.Font(None, sizes.get(role, config.FONT_SIZE_BODY))
        return self._fonts[role]

    def _get_background(self) -> Optional[pygame.Surface]:
        """Load the background image once; None if unavailable."""
        if self._background_tried:
            return self._background
        self._background_tried = True

        if self._background_path is None:
            return None

        try:
            image = pygame.image.load(str(self._background_path))
            self._background = pygame.transform.scale(
                image, (self._table.width, self._table.height)
            )
        except (pygame.error, FileNotFoundError) as e:
            log.warning("Background image %s not loaded: %s", self._background_path, e)
            self._background = None

        return self._background

    def _text(self, text: str, position: Tuple[float, float], screen: pygame.Surface,
              role: str = 'hud') -> None:
        surface = self._font(role).render(text, True, config.TEXT_COLOR)
        screen.blit(surface, (int(position[0]), int(position[1])))

    def measure_text(self, text: str, role: str = 'hud') -> int:
        """Width in pixels of ``text`` rendered with the given font role."""
        return self._font(role).size(text)[0]

    def centered_x(self, text: str, role: str = 'hud') -> float:
        """X that centers ``text`` horizontally on the table."""
        return (self._table.width - self.measure_text(text, role)) / 2

    def render_background(self, screen: pygame.Surface) -> None:
        background = self._get_background()
        if background is None:
            screen.fill(config.BACKGROUND_COLOR)
        else:
            screen.blit(background, (0, 0))

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render paddle as a white rectangle."""
        pygame.draw.rect(screen, config.PADDLE_COLOR, pygame.Rect(*paddle.rect))

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render the end/start message, or the ball with score and phase."""
        if ball.state is GameState.GAME_OVER:
            self.render_centered_message(GAME_OVER_MESSAGE, screen)
            return

        if ball.state is GameState.WON:
            self.render_centered_message(GAME_WON_MESSAGE, screen)
            return

        if ball.state is GameState.READY and ball.paddle.lives == config.STARTING_LIVES:
            self.render_centered_message(START_MESSAGE, screen)
            return

        width, height = self._table.width, self._table.height
        self._text(f"Score: {ball.score}", (width / 8, height / 7), screen)

        pygame.draw.circle(
            screen, config.BALL_COLOR, (int(ball.x), int(ball.y)), int(ball.radius)
        )

        self._text(f"Current Phase: {ball.phase_message}", (width / 8, height / 6), screen)

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render brick as a rectangle shaded by its shimmer frame."""
        shade = _SHIMMER[brick.frame_index % len(_SHIMMER)]
        color = tuple(int(c * shade) for c in config.BRICK_COLOR)
        rect = pygame.Rect(*brick.rect)
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, (255, 255, 255), rect, 1)

    def render_hearts(self, hearts: 'HeartRow', screen: pygame.Surface) -> None:
        """Render each heart as two circles over a triangle, pulsing in size."""
        pulse = (0, 1, 2, 1)[hearts.animation.frame_index % 4]
        for i in range(hearts.count):
            x, y = hearts.heart_position(i)
            size = hearts.size - 6 + pulse * 2
            cx = x + hearts.size / 2
            cy = y + hearts.size / 2
            lobe = size / 4
            pygame.draw.circle(screen, config.HEART_COLOR, (int(cx - lobe), int(cy - lobe / 2)), int(lobe + 1))
            pygame.draw.circle(screen, config.HEART_COLOR, (int(cx + lobe), int(cy - lobe / 2)), int(lobe + 1))
            pygame.draw.polygon(screen, config.HEART_COLOR, [
                (cx - size / 2, cy - lobe / 4),
                (cx + size / 2, cy - lobe / 4),
                (cx, cy + size / 2),
            ])

    def render_coin(self, coin: 'SpinningCoin', screen: pygame.Surface) -> None:
        """Render the coin as an ellipse that narrows as it spins."""
        widths = (1.0, 0.6, 0.15, 0.6)
        size = coin.drawn_size
        width = max(2, int(size * widths[coin.animation.frame_index % 4]))
        rect = pygame.Rect(0, 0, width, int(size))
        rect.center = (int(coin.x + size / 2), int(coin.y + size / 2))
        pygame.draw.ellipse(screen, config.COIN_COLOR, rect)

    def render_instructions(
        self,
        lines: List[Tuple[str, str, int, int]],
        screen: pygame.Surface,
    ) -> None:
        self.render_background(screen)
        for text, role, x, y in lines:
            self._text(text, (x, y), screen, role)

    def render_centered_message(self, text: str, screen: pygame.Surface) -> None:
        x = self.centered_x(text)
        y = self._table.height / 2
        self._text(text, (x, y), screen)
