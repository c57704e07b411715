"""Break the Bricks game entities."""

from .base import Entity, FrameAnimation
from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig
from .brick import Brick
from .brick_field import BrickField, generate_layout
from .hud import HeartRow, SpinningCoin
from .screens import Background, InstructionsScreen

__all__ = [
    'Entity', 'FrameAnimation',
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig',
    'Brick', 'BrickField', 'generate_layout',
    'HeartRow', 'SpinningCoin',
    'Background', 'InstructionsScreen',
]
