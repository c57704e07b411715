"""Collision detection for Break the Bricks.

Handles ball-wall, ball-paddle and ball-brick checks. All tests are
axis-aligned; the ball is treated as its enclosing box vertically and as
its center point horizontally.
"""

from typing import TYPE_CHECKING, Tuple

from ...config import (
    BOTTOM_MARGIN, SIDE_WALL_MARGIN, TOP_WALL_Y, WALL_BOUNCE_SPEED,
)

if TYPE_CHECKING:
    from ...session import TableSize
    from ..entities.ball import Ball
    from ..entities.brick import Brick
    from ..entities.paddle import Paddle


def apply_wall_rules(ball: 'Ball', table: 'TableSize') -> Tuple[float, float]:
    """Compute the ball velocity after the wall rules.

    The walls do not reflect the ball. Each wall forces a fixed outgoing
    direction, whatever the incoming velocity was.

    Args:
        ball: Ball to check
        table: Table dimensions

    Returns:
        Tuple of (vx, vy) after the rules are applied
    """
    vx, vy = ball.vx, ball.vy

    if ball.y + ball.radius < TOP_WALL_Y:
        vy = WALL_BOUNCE_SPEED
    if ball.x + ball.radius < SIDE_WALL_MARGIN:
        vx = WALL_BOUNCE_SPEED
    if ball.x + ball.radius > table.width - SIDE_WALL_MARGIN:
        vx = -WALL_BOUNCE_SPEED

    return vx, vy


def check_fell_below(ball: 'Ball', table: 'TableSize') -> bool:
    """Check if the ball has dropped past the bottom of the table."""
    return ball.y - ball.radius > table.height - BOTTOM_MARGIN


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball collides with paddle.

    The ball center must be strictly inside the paddle's horizontal span and
    the ball's bottom edge below the paddle's top edge. There is no check
    against the paddle's bottom edge.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if ball hits paddle
    """
    return (
        paddle.x < ball.x < paddle.x + paddle.width
        and ball.y + ball.radius > paddle.y
    )


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if ball overlaps a brick.

    Broken bricks never collide.

    Args:
        ball: Ball to check
        brick: Brick to check against

    Returns:
        True if ball hits brick
    """
    if brick.is_broken:
        return False

    return (
        ball.y - ball.radius < brick.y + brick.height
        and ball.y + ball.radius > brick.y
        and brick.x < ball.x < brick.x + brick.width
    )
