"""
Game session - everything one play session shares.

The session replaces module-level globals: the table size, the sound board
and every entity live here, and the loop driver owns the session. Entities
are wired to each other once, in ``create_session``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from . import config
from .audio import SoundBoard
from .game.entities import (
    Background, Ball, BallConfig, BrickField, Entity, HeartRow,
    InstructionsScreen, Paddle, PaddleConfig, SpinningCoin,
)
from .game.resetter import GameResetter
from .game.skins import BreakBricksSkin, ClassicSkin


class TableSize(BaseModel):
    """Playing area in pixels.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> TableSize(width=800, height=600).width
        800
    """
    width: int = Field(config.TABLE_WIDTH, gt=0)
    height: int = Field(config.TABLE_HEIGHT, gt=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"TableSize({self.width}x{self.height})"


@dataclass
class GameSession:
    """Shared state for one play session.

    Attributes:
        table: Table dimensions
        audio: Sound board
        skin: Renderer for every entity
        background: Table background
        paddle: Player paddle (also holds the lives)
        ball: Ball (holds score, phase and game state)
        hearts: Lives display
        coin: Score coin
        instructions: Start gate
        brick_field: Current bricks
        resetter: New-game entry point
    """
    table: TableSize
    audio: SoundBoard
    skin: BreakBricksSkin
    background: Background
    paddle: Paddle
    ball: Ball
    hearts: HeartRow
    coin: SpinningCoin
    instructions: InstructionsScreen
    brick_field: BrickField
    resetter: GameResetter

    @property
    def entities(self) -> List[Entity]:
        """All entities in update and draw order. Later entries draw on top."""
        return [
            self.background,
            self.paddle,
            self.ball,
            self.hearts,
            self.coin,
            self.instructions,
            self.brick_field,
        ]


def create_session(
    table: Optional[TableSize] = None,
    audio: Optional[SoundBoard] = None,
    skin: Optional[BreakBricksSkin] = None,
    background_image: Optional[Path] = config.BACKGROUND_IMAGE,
) -> GameSession:
    """Build and wire every entity for a new session.

    Args:
        table: Table dimensions (default from config)
        audio: Sound board (default: a new one using config settings)
        skin: Renderer (default: ClassicSkin)
        background_image: Background image for the default skin

    Returns:
        A session showing the instructions screen
    """
    table = table or TableSize()
    audio = audio if audio is not None else SoundBoard(audio_enabled=config.AUDIO_ENABLED)
    skin = skin or ClassicSkin(table, background_image)

    # The paddle only asks about game over after the ball exists
    paddle = Paddle(PaddleConfig(), table, is_game_over=lambda: ball.is_game_over)
    ball = Ball(BallConfig(), paddle, table, audio)

    instructions = InstructionsScreen(audio)
    brick_field = BrickField(ball, instructions)
    instructions.on_dismiss = brick_field.reset_bricks
    brick_field.reset_bricks()

    hearts = HeartRow(*config.HEART_POSITION, paddle)
    coin = SpinningCoin(table.width / 8, table.height / 6)

    return GameSession(
        table=table,
        audio=audio,
        skin=skin,
        background=Background(),
        paddle=paddle,
        ball=ball,
        hearts=hearts,
        coin=coin,
        instructions=instructions,
        brick_field=brick_field,
        resetter=GameResetter(ball, brick_field, audio),
    )
