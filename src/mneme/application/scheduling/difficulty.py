"""Difficulty updates with mean reversion toward the Good anchor."""

from mneme.domain.constants import D_MAX, D_MIN
from mneme.domain.scheduling.models import Rating
from mneme.domain.scheduling.weights import FSRS_4_5, WeightSet


def clamp_difficulty(d: float) -> float:
    return min(D_MAX, max(D_MIN, d))


class DifficultyUpdater:
    def __init__(self, weights: WeightSet = FSRS_4_5):
        self.weights = weights

    def initial_difficulty(self, rating: Rating | int) -> float:
        """D0(G) = w4 - w5 * (G - 3), clamped to [1, 10]."""
        w = self.weights
        return clamp_difficulty(w[4] - w[5] * (rating - 3))

    def next_difficulty(self, difficulty: float, rating: Rating) -> float:
        """
        D' = w6 * D0(3) + (1 - w6) * (D - w7 * (G - 3)), clamped to [1, 10].

        Applies to every review after the first, success or lapse.
        """
        w = self.weights
        anchor = self.initial_difficulty(Rating.GOOD)
        d = w[6] * anchor + (1 - w[6]) * (difficulty - w[7] * (rating - 3))
        return clamp_difficulty(d)
