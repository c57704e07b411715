"""GameState enum for Break the Bricks.

A single enumerated value replaces separate playing / game-over / won flags,
so invalid combinations (over and won at once) cannot be represented.
"""
from enum import Enum


class GameState(Enum):
    """Lifecycle of a play session, owned by the ball.

    States:
        READY: Ball parked above the paddle, waiting for the start key.
            Entered at session start, after each lost life and after a reset.
        PLAYING: Ball in flight
        GAME_OVER: All lives lost
        WON: Winning score reached

    Transitions:
        READY -> PLAYING        start key held
        PLAYING -> READY        ball lost, lives remain
        PLAYING -> GAME_OVER    ball lost, no lives remain
        PLAYING -> WON          winning score reached
        any -> READY            GameResetter.reset()
    """
    READY = "ready"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def is_finished(self) -> bool:
        """True for the two end-of-game states."""
        return self in (GameState.GAME_OVER, GameState.WON)
