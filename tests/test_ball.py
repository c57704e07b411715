"""
Tests for the ball and its phase state machine.

Tests cover:
- Serving from the paddle
- Constant-velocity movement and the fixed-direction wall rules
- Losing lives and game over
- Phase transitions, paddle shrink and the win condition
"""

import pytest

from breakbricks.audio import GAME_LOST, GAME_WON, LIFE_LOST, PADDLE_HIT
from breakbricks.config import KEY_START
from breakbricks.game.phases import PADDLE_SHRUNK_MESSAGE, GamePhase
from breakbricks.game_state import GameState


@pytest.fixture
def ball(started_session):
    """Ball served from the paddle, in flight."""
    ball = started_session.ball
    ball.update({KEY_START})
    return ball


def put_in_open_space(ball):
    """Move the ball somewhere no wall, paddle or brick rule applies."""
    ball.x = 400.0
    ball.y = 350.0


class TestServe:
    """Test putting the ball in play."""

    def test_waits_for_start_key(self, started_session):
        """Ball stays READY until the start key is held."""
        ball = started_session.ball
        ball.update(set())

        assert ball.state is GameState.READY
        assert ball.is_playing is False

    def test_serve_position_and_velocity(self, started_session):
        """Ball starts above paddle center moving up-right at base speed."""
        ball = started_session.ball
        paddle = started_session.paddle

        served = ball.start({KEY_START})

        assert served is True
        assert ball.is_playing
        assert ball.x == paddle.x + paddle.width / 2
        assert ball.y == paddle.y - 15
        assert ball.velocity == (2, -2)
        assert ball.phase is GamePhase.PHASE_1

    def test_start_ignored_while_playing(self, ball):
        """Holding start during play does not re-serve."""
        put_in_open_space(ball)
        assert ball.start({KEY_START}) is False
        assert (ball.x, ball.y) == (400.0, 350.0)

    def test_serve_in_later_phase_uses_increased_speed(self, started_session):
        """Phase 2 and 3 serves use the increased speed."""
        ball = started_session.ball
        ball.phase = GamePhase.PHASE_3

        ball.start({KEY_START})

        assert ball.velocity == (6, -6)


class TestMovement:
    """Test constant-velocity integration and wall rules."""

    def test_position_advances_by_velocity(self, ball):
        """After advance(), position equals previous position plus velocity."""
        for _ in range(20):
            x, y = ball.x, ball.y
            ball.advance()
            assert ball.x == x + ball.vx
            assert ball.y == y + ball.vy

    def test_top_wall_forces_downward(self, ball):
        """Above the top threshold vy becomes +2 regardless of speed."""
        ball.x, ball.y = 400.0, 120.0
        ball.vx, ball.vy = 6.0, -6.0

        ball.advance()

        assert ball.vy == 2
        assert ball.vx == 6

    def test_left_wall_forces_right(self, ball):
        """Past the left threshold vx becomes +2."""
        ball.x, ball.y = 115.0, 350.0
        ball.vx, ball.vy = -6.0, -6.0

        ball.advance()

        assert ball.vx == 2

    def test_right_wall_forces_left(self, ball):
        """Past the right threshold vx becomes -2."""
        ball.x, ball.y = 665.0, 350.0
        ball.vx, ball.vy = 2.0, 2.0

        ball.advance()

        assert ball.vx == -2

    def test_paddle_hit_reverses_vertical(self, ball, audio):
        """Ball over the paddle with its bottom past the paddle top bounces."""
        paddle = ball.paddle
        ball.x = paddle.center_x
        ball.y = paddle.y - 5
        ball.vx, ball.vy = 2.0, 2.0

        ball.advance()

        assert ball.vy == -2
        audio.play.assert_any_call(PADDLE_HIT)

    def test_ball_beside_paddle_does_not_bounce(self, ball):
        """Horizontal span is strict: no bounce outside the paddle."""
        paddle = ball.paddle
        ball.x = paddle.x
        ball.y = paddle.y - 5
        ball.vy = 2.0

        ball.advance()

        assert ball.vy == 2

    def test_advance_does_nothing_when_ready(self, started_session):
        """A ball that has not been served does not move."""
        ball = started_session.ball
        x, y = ball.x, ball.y

        ball.advance()

        assert (ball.x, ball.y) == (x, y)


class TestLives:
    """Test losing the ball off the bottom of the table."""

    def test_losing_ball_costs_a_life(self, ball, audio):
        """Dropping out loses one life and waits for a new serve."""
        ball.x, ball.y = 200.0, 470.0

        ball.advance()

        assert ball.paddle.lives == 2
        assert ball.state is GameState.READY
        audio.play.assert_any_call(LIFE_LOST)

    def test_phase_speed_kept_after_life_lost(self, ball):
        """Velocity is reinitialized from the current phase."""
        ball.phase = GamePhase.PHASE_2
        ball.x, ball.y = 200.0, 470.0
        ball.vx, ball.vy = -2.0, 2.0

        ball.advance()

        assert ball.velocity == (6, -6)
        assert ball.phase is GamePhase.PHASE_2

    def test_last_life_ends_game(self, ball, audio):
        """Lives 1 -> 0 sets game over and stops the music."""
        ball.paddle.lives = 1
        ball.x, ball.y = 200.0, 470.0

        ball.advance()

        assert ball.paddle.lives == 0
        assert ball.is_game_over
        assert not ball.is_playing
        assert not ball.is_game_won
        audio.stop_music.assert_called_once()
        audio.play.assert_any_call(GAME_LOST)

    def test_no_mutation_after_game_over(self, ball):
        """advance() is a no-op once the game is over."""
        ball.paddle.lives = 1
        ball.x, ball.y = 200.0, 470.0
        ball.advance()

        snapshot = (ball.x, ball.y, ball.vx, ball.vy, ball.score, ball.paddle.lives)
        for _ in range(5):
            ball.advance()
            ball.update({KEY_START})

        assert (ball.x, ball.y, ball.vx, ball.vy, ball.score, ball.paddle.lives) == snapshot


class TestPhases:
    """Test phase transitions and the paddle shrink."""

    def test_phase_two_at_score_five(self, ball):
        """Score 5 moves to phase 2 and raises speed to 6."""
        put_in_open_space(ball)
        ball.score = 5

        ball.advance()

        assert ball.phase is GamePhase.PHASE_2
        assert ball.velocity == (6, -6)
        assert ball.phase_message == GamePhase.PHASE_2.label

    def test_phase_two_sends_ball_right_keeping_vertical(self, ball):
        """The speed-up sets vx to +6 and keeps the sign of vy."""
        put_in_open_space(ball)
        ball.vx, ball.vy = -2.0, 2.0
        ball.score = 5

        ball.advance()

        assert ball.velocity == (6, 6)

    def test_phase_two_moving_up_left(self, ball):
        put_in_open_space(ball)
        ball.vx, ball.vy = -2.0, -2.0
        ball.score = 5

        ball.advance()

        assert ball.phase is GamePhase.PHASE_2
        assert ball.velocity == (6, -6)

    def test_below_threshold_stays_in_phase_one(self, ball):
        put_in_open_space(ball)
        ball.score = 4

        ball.advance()

        assert ball.phase is GamePhase.PHASE_1
        assert ball.velocity == (2, -2)

    def test_phase_three_keeps_speed(self, ball):
        """Phase 3 does not change velocity."""
        put_in_open_space(ball)
        ball.phase = GamePhase.PHASE_2
        ball.vx, ball.vy = 2.0, -6.0
        ball.score = 15

        ball.advance()

        assert ball.phase is GamePhase.PHASE_3
        assert ball.velocity == (2, -6)

    def test_jump_to_fifteen_passes_through_both_phases(self, ball):
        """Both transitions are checked in the same frame."""
        put_in_open_space(ball)
        ball.score = 15

        ball.advance()

        assert ball.phase is GamePhase.PHASE_3

    def test_phase_never_decreases(self, ball):
        """Dropping below a threshold does not lower the phase."""
        put_in_open_space(ball)
        ball.score = 5
        ball.advance()
        ball.score = 0

        ball.advance()

        assert ball.phase is GamePhase.PHASE_2

    def test_paddle_halves_once_at_ten(self, ball):
        """Paddle width halves at score 10 and stays halved."""
        paddle = ball.paddle
        original = paddle.original_width
        put_in_open_space(ball)
        ball.score = 10

        ball.advance()
        assert paddle.width == original / 2
        assert ball.phase_message == PADDLE_SHRUNK_MESSAGE

        put_in_open_space(ball)
        ball.advance()
        assert paddle.width == original / 2


class TestWin:
    """Test the win condition."""

    def test_score_24_wins(self, ball, audio):
        put_in_open_space(ball)
        ball.score = 24

        ball.advance()

        assert ball.is_game_won
        assert not ball.is_game_over
        audio.stop_music.assert_called_once()
        audio.play.assert_any_call(GAME_WON)

    def test_win_side_effects_fire_once(self, ball, audio):
        """Further frames after winning do not replay the win."""
        put_in_open_space(ball)
        ball.score = 24
        ball.advance()

        for _ in range(5):
            ball.update({KEY_START})

        wins = [c for c in audio.play.call_args_list if c.args == (GAME_WON,)]
        assert len(wins) == 1
        assert audio.stop_music.call_count == 1
