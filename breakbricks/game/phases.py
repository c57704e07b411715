"""Difficulty phases.

Each phase carries the ball speed used when the ball is (re)served, the score
at which the phase begins and the label shown in the HUD.
"""

from enum import Enum

from ..config import (
    BASE_SPEED, INCREASED_SPEED, PHASE_2_SCORE, PHASE_3_SCORE,
)


class GamePhase(Enum):
    """Difficulty tier, progressing one way within a session."""

    PHASE_1 = (1, BASE_SPEED, 0, "Phase 1: The Beginning")
    PHASE_2 = (2, INCREASED_SPEED, PHASE_2_SCORE, "Phase 2: Speed Up!")
    PHASE_3 = (3, INCREASED_SPEED, PHASE_3_SCORE, "Phase 3: Final Challenge!")

    def __init__(self, number: int, speed: float, score_threshold: int, label: str):
        self.number = number
        self.speed = speed
        self.score_threshold = score_threshold
        self.label = label


PADDLE_SHRUNK_MESSAGE = "Paddle Shrunk: Half Size!"
