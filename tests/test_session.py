"""Tests for session wiring and TableSize."""

import pytest
from pydantic import ValidationError

from breakbricks.session import TableSize, create_session


class TestTableSize:

    def test_defaults(self):
        assert TableSize() == TableSize(width=800, height=600)

    def test_rejects_non_positive(self):
        with pytest.raises(ValidationError):
            TableSize(width=0, height=600)

    def test_frozen(self):
        table = TableSize()
        with pytest.raises(ValidationError):
            table.width = 1024

    def test_str(self):
        assert str(TableSize(width=640, height=480)) == "TableSize(640x480)"


class TestCreateSession:

    def test_shared_collaborators(self, session):
        assert session.ball.paddle is session.paddle
        assert session.hearts.count == session.paddle.lives

    def test_paddle_sees_game_over_through_ball(self, session):
        from breakbricks.game_state import GameState

        x = session.paddle.x
        session.ball.state = GameState.GAME_OVER
        session.paddle.update({'right'})

        assert session.paddle.x == x

    def test_coin_position_follows_table(self, audio):
        session = create_session(
            table=TableSize(width=1600, height=1200), audio=audio, background_image=None
        )
        assert (session.coin.x, session.coin.y) == (200, 200)

    def test_default_sound_board_created(self, monkeypatch):
        monkeypatch.setattr('breakbricks.config.AUDIO_ENABLED', False)
        session = create_session(background_image=None)
        assert session.audio.audio_enabled is False
