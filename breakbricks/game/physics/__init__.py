"""Break the Bricks physics and collision detection."""

from .collision import (
    apply_wall_rules,
    check_fell_below,
    check_paddle_collision,
    check_brick_collision,
)

__all__ = [
    'apply_wall_rules',
    'check_fell_below',
    'check_paddle_collision',
    'check_brick_collision',
]
