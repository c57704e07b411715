"""Break the Bricks skins for rendering."""

from .base import BreakBricksSkin
from .classic import ClassicSkin

__all__ = [
    'BreakBricksSkin',
    'ClassicSkin',
]
