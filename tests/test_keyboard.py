"""Tests for KeyboardSource."""

from collections import defaultdict

import pygame

from breakbricks.config import KEY_LEFT, KEY_RIGHT, KEY_START
from breakbricks.input import KeyboardSource


def pressed(*codes):
    """Stub for pygame.key.get_pressed with the given keys held."""
    state = defaultdict(bool)
    for code in codes:
        state[code] = True
    return lambda: state


class TestKeyboardSource:

    def test_nothing_held(self):
        assert KeyboardSource(pressed()).poll() == frozenset()

    def test_arrow_keys(self):
        source = KeyboardSource(pressed(pygame.K_LEFT, pygame.K_RIGHT))
        assert source.poll() == {KEY_LEFT, KEY_RIGHT}

    def test_both_enter_keys_start(self):
        assert KeyboardSource(pressed(pygame.K_RETURN)).poll() == {KEY_START}
        assert KeyboardSource(pressed(pygame.K_KP_ENTER)).poll() == {KEY_START}

    def test_unwatched_keys_ignored(self):
        source = KeyboardSource(pressed(pygame.K_SPACE, pygame.K_a))
        assert source.poll() == frozenset()

    def test_held_key_reported_every_poll(self):
        source = KeyboardSource(pressed(pygame.K_RIGHT))
        assert [source.poll() for _ in range(3)] == [{KEY_RIGHT}] * 3

    def test_poll_returns_immutable_set(self):
        keys = KeyboardSource(pressed(pygame.K_p)).poll()
        assert isinstance(keys, frozenset)
