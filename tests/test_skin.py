"""Tests for the classic skin."""

import pytest

from breakbricks import config
from breakbricks.game.skins import ClassicSkin
from breakbricks.game.skins.classic import GAME_OVER_MESSAGE


class TestClassicSkin:

    def test_centered_x(self, pygame_init, table):
        skin = ClassicSkin(table)
        width = skin.measure_text(GAME_OVER_MESSAGE)

        assert skin.centered_x(GAME_OVER_MESSAGE) == pytest.approx((table.width - width) / 2)

    def test_missing_background_falls_back_to_fill(self, screen, table, tmp_path):
        skin = ClassicSkin(table, tmp_path / 'missing.png')

        skin.render_background(screen)

        assert tuple(screen.get_at((5, 5)))[:3] == tuple(config.BACKGROUND_COLOR)[:3]

    def test_no_background_configured(self, screen, table):
        skin = ClassicSkin(table, None)

        skin.render_background(screen)

        assert tuple(screen.get_at((400, 300)))[:3] == tuple(config.BACKGROUND_COLOR)[:3]

    def test_paddle_drawn_at_rect(self, screen, session):
        skin = session.skin
        paddle = session.paddle
        screen.fill((0, 0, 0))

        skin.render_paddle(paddle, screen)

        inside = (int(paddle.x) + 5, int(paddle.y) + 5)
        assert tuple(screen.get_at(inside))[:3] == tuple(config.PADDLE_COLOR)[:3]

    def test_broken_brick_not_drawn(self, screen, started_session):
        brick = started_session.brick_field.bricks[0]
        brick.is_broken = True
        screen.fill((0, 0, 0))

        brick.draw(screen, started_session.skin)

        inside = (int(brick.x) + 10, int(brick.y) + 10)
        assert tuple(screen.get_at(inside))[:3] == (0, 0, 0)
