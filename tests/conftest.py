"""Pytest fixtures shared by the Break the Bricks tests."""
import os

# Headless SDL before pygame is imported anywhere
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from unittest.mock import Mock

import pygame
import pytest

from breakbricks.audio import SoundBoard
from breakbricks.config import KEY_START
from breakbricks.game.skins import ClassicSkin
from breakbricks.session import TableSize, create_session


@pytest.fixture
def pygame_init():
    """Initialize pygame for testing."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def table():
    """Standard 800x600 table."""
    return TableSize(width=800, height=600)


@pytest.fixture
def audio():
    """Sound board stand-in that records every call."""
    return Mock(spec=SoundBoard)


@pytest.fixture
def session(table, audio):
    """Fresh session, instructions still showing."""
    return create_session(
        table=table,
        audio=audio,
        skin=ClassicSkin(table),
        background_image=None,
    )


@pytest.fixture
def started_session(session):
    """Session with the instructions dismissed and bricks laid out."""
    session.instructions.update({KEY_START})
    return session


@pytest.fixture
def screen(pygame_init, table):
    """Off-screen surface the size of the table."""
    return pygame.Surface((table.width, table.height))
