"""
Stability updates for the three review paths: first review, recall, lapse.

Formulas follow FSRS-4.5. All coefficients come from one WeightSet.
"""

import math

from mneme.domain.constants import S_MIN
from mneme.domain.scheduling.models import Rating
from mneme.domain.scheduling.weights import FSRS_4_5, WeightSet


class StabilityUpdater:
    """
    Produces new stability values.

    Stateless apart from the bound weight set.
    """

    def __init__(self, weights: WeightSet = FSRS_4_5):
        self.weights = weights

    def initial_stability(self, rating: Rating) -> float:
        """
        Stability after the first review of a NEW card.

        S0(G) = w[G - 1], floored at S_MIN.
        """
        return max(S_MIN, self.weights[rating - 1])

    def after_recall(
        self,
        difficulty: float,
        stability: float,
        retrievability: float,
        rating: Rating,
    ) -> float:
        """
        Stability after a successful review (Hard, Good or Easy).

        S'r = S * (e^w8 * (11 - D) * S^-w9 * (e^(w10 * (1 - R)) - 1) * hard * easy + 1)

        where hard = w15 for Hard and easy = w16 for Easy, 1 otherwise.
        The result never drops below the prior stability.
        """
        w = self.weights
        hard_penalty = w[15] if rating == Rating.HARD else 1.0
        easy_bonus = w[16] if rating == Rating.EASY else 1.0

        growth = (
            math.exp(w[8])
            * (11 - difficulty)
            * stability ** (-w[9])
            * (math.exp(w[10] * (1 - retrievability)) - 1)
            * hard_penalty
            * easy_bonus
        )
        return max(stability, stability * (growth + 1))

    def after_lapse(
        self,
        difficulty: float,
        stability: float,
        retrievability: float,
    ) -> float:
        """
        Stability after a lapse (Again on a LEARNED card).

        S'f = w11 * D^-w12 * ((S + 1)^w13 - 1) * e^(w14 * (1 - R))

        No floor relative to the prior value; only the global S_MIN applies.
        """
        w = self.weights
        s = (
            w[11]
            * difficulty ** (-w[12])
            * ((stability + 1) ** w[13] - 1)
            * math.exp(w[14] * (1 - retrievability))
        )
        return max(S_MIN, s)
