"""The field of bricks.

The layout is fixed: four rows of six bricks. Columns are laid out by
stepping a float column index by 0.6, and each row after the first is
pulled up by 0.8 of a row spacing, which packs the rows 32 pixels apart.
The float accumulation is part of the layout and must not be replaced by
integer arithmetic.
"""

from typing import TYPE_CHECKING, AbstractSet, List

import pygame

from ...config import (
    BRICK_COLUMN_LIMIT, BRICK_COLUMN_STEP, BRICK_HEIGHT, BRICK_ROW_OFFSET_STEP,
    BRICK_ROWS, BRICK_WIDTH, BRICK_X_SPACING, BRICK_Y_SPACING,
)
from ...logging import get_logger
from .base import Entity
from .brick import Brick

if TYPE_CHECKING:
    from ..skins.base import BreakBricksSkin
    from .ball import Ball
    from .screens import InstructionsScreen

log = get_logger('bricks')


def generate_layout(ball: 'Ball') -> List[Brick]:
    """Build a fresh set of bricks in the standard layout."""
    bricks: List[Brick] = []
    offset = 0.0

    for row in range(1, BRICK_ROWS + 1):
        column = 1.0
        while column <= BRICK_COLUMN_LIMIT:
            bricks.append(Brick(
                column * BRICK_X_SPACING,
                (row + offset) * BRICK_Y_SPACING,
                ball,
                BRICK_WIDTH,
                BRICK_HEIGHT,
            ))
            if column % BRICK_COLUMN_LIMIT == 0:
                offset -= BRICK_ROW_OFFSET_STEP
            column += BRICK_COLUMN_STEP

    return bricks


class BrickField(Entity):
    """Owns the current bricks and regenerates them on demand."""

    def __init__(self, ball: 'Ball', instructions: 'InstructionsScreen'):
        """Initialize an empty field.

        Args:
            ball: The ball the bricks test against
            instructions: While this is showing, resets are ignored
        """
        self._ball = ball
        self._instructions = instructions
        self.bricks: List[Brick] = []

    @property
    def remaining(self) -> int:
        """Number of bricks not yet broken."""
        return sum(1 for brick in self.bricks if not brick.is_broken)

    def reset_bricks(self) -> None:
        """Discard every brick and lay out a complete new field.

        Does nothing while the instructions screen is still showing.
        """
        if self._instructions.showing:
            return

        self.bricks = generate_layout(self._ball)
        log.debug("Laid out %d bricks", len(self.bricks))

    def update(self, keys: AbstractSet[str]) -> None:
        for brick in self.bricks:
            brick.update(keys)

    def draw(self, screen: pygame.Surface, skin: 'BreakBricksSkin') -> None:
        for brick in self.bricks:
            brick.draw(screen, skin)
