"""Base class for everything the game loop updates and draws."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, AbstractSet

import pygame

if TYPE_CHECKING:
    from ..skins.base import BreakBricksSkin


class Entity(ABC):
    """Something that is advanced once per frame and drawn once per frame.

    The loop driver calls ``update`` on every entity, then ``draw`` on every
    entity, both in registration order. Draw order is layer order.
    """

    @abstractmethod
    def update(self, keys: AbstractSet[str]) -> None:
        """Advance one frame.

        Args:
            keys: Names of the keys currently held down
        """
        pass

    @abstractmethod
    def draw(self, screen: pygame.Surface, skin: 'BreakBricksSkin') -> None:
        """Draw the entity.

        Args:
            screen: Pygame surface to draw on
            skin: Skin that knows how this entity looks
        """
        pass


class FrameAnimation:
    """Cycles through sprite frames, advancing every ``speed`` updates."""

    def __init__(self, frame_count: int, speed: int):
        self.frame_count = frame_count
        self.speed = speed
        self.frame_index = 0
        self._counter = 0

    def tick(self) -> None:
        """Count one update and move to the next frame when due."""
        self._counter += 1
        if self._counter >= self.speed:
            self.frame_index = (self.frame_index + 1) % self.frame_count
            self._counter = 0
