"""Configuration for Break the Bricks.

Contains table dimensions, physics constants, phase thresholds, audio
settings and colors. Display and audio settings can be overridden from the
environment or a ``.env`` file beside this module.
"""
import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_path(key: str) -> Optional[Path]:
    """Get optional path from environment."""
    val = os.getenv(key, '')
    return Path(val).expanduser() if val else None


# Display settings
TABLE_WIDTH = _get_int('TABLE_WIDTH', 800)
TABLE_HEIGHT = _get_int('TABLE_HEIGHT', 600)
FPS = _get_int('FPS', 60)
WINDOW_TITLE = "Break the Bricks"
BACKGROUND_IMAGE = _get_path('BACKGROUND_IMAGE')

# Audio settings
AUDIO_ENABLED = _get_bool('AUDIO_ENABLED', True)
MASTER_VOLUME = _get_float('MASTER_VOLUME', 0.5)
SAMPLE_RATE = 22050

# Lives
STARTING_LIVES: int = 3

# Ball
BALL_RADIUS: float = 8.0
BALL_START_OFFSET: float = 15.0   # Distance above the paddle top on serve
BASE_SPEED: float = 2.0
INCREASED_SPEED: float = 6.0

# Wall rules: hard clamps that fix the outgoing velocity
TOP_WALL_Y: float = 140.0
SIDE_WALL_MARGIN: float = 130.0
WALL_BOUNCE_SPEED: float = 2.0
BOTTOM_MARGIN: float = 145.0      # Ball is lost below table_height - margin

# Paddle
PADDLE_WIDTH: float = 90.0
PADDLE_HEIGHT: float = 10.0
PADDLE_SPEED: float = 5.0
PADDLE_X_DIVISOR: float = 2.25    # Initial x = table_width / divisor
PADDLE_Y_DIVISOR: float = 1.3     # Initial y = table_height / divisor
PADDLE_MIN_X: float = 120.62
PADDLE_MAX_X: float = 590.0

# Scoring
PHASE_2_SCORE: int = 5
PADDLE_SHRINK_SCORE: int = 10
PHASE_3_SCORE: int = 15
WIN_SCORE: int = 24

# Brick grid
BRICK_WIDTH: float = 70.0
BRICK_HEIGHT: float = 20.0
BRICK_ROWS: int = 4
BRICK_COLUMN_LIMIT: float = 4.0
BRICK_COLUMN_STEP: float = 0.6
BRICK_X_SPACING: float = 148.0
BRICK_Y_SPACING: float = 160.0
BRICK_ROW_OFFSET_STEP: float = 0.8

# Sprite animation
ANIMATION_FRAMES: int = 4
ANIMATION_SPEED: int = 10         # Updates per animation frame
HEART_SIZE: int = 32
HEART_SPACING: int = 5
HEART_POSITION: Tuple[int, int] = (20, 20)
COIN_SIZE: int = 32
COIN_SCALE: float = 1.5

# Colors
BACKGROUND_COLOR: Tuple[int, int, int] = (18, 24, 38)
TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)
PADDLE_COLOR: Tuple[int, int, int] = (255, 255, 255)
BALL_COLOR: Tuple[int, int, int] = (245, 127, 40)
BRICK_COLOR: Tuple[int, int, int] = (178, 84, 62)
HEART_COLOR: Tuple[int, int, int] = (220, 40, 60)
COIN_COLOR: Tuple[int, int, int] = (255, 200, 40)

# Fonts
FONT_SIZE_HUD = 24
FONT_SIZE_TITLE = 28
FONT_SIZE_BODY = 24

# Key names as reported by pygame.key.name()
KEY_START = 'return'
KEY_LEFT = 'left'
KEY_RIGHT = 'right'
KEY_RESTART = 'r'
KEY_PAUSE = 'p'
KEY_CONTINUE = 'c'
