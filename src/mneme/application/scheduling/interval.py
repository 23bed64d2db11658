"""Converts memory stability into a whole-day review interval."""

import math

from mneme.domain.constants import MIN_INTERVAL_DAYS

from .retrievability import RetrievabilityModel


class IntervalPlanner:
    """
    Plans the interval at which recall probability falls to the target.

    Solving R(I, S) = target for I gives

        I(S) = S / FACTOR * (target ^ (1 / DECAY) - 1)

    Since FACTOR is itself defined as target ^ (1 / DECAY) - 1, the two terms
    cancel and I(S) == S for the current constants. The cancellation only holds
    while the planner and the forgetting curve share target and decay, so the
    full expression is kept rather than returning S directly.
    """

    def __init__(self, model: RetrievabilityModel | None = None):
        self._model = model or RetrievabilityModel()

    def raw_interval(self, stability: float) -> float:
        m = self._model
        return stability / m.factor * (m.target ** (1 / m.decay) - 1)

    def next_interval(self, stability: float) -> int:
        """Whole days until the next review, rounded half-up, at least one day."""
        # Round first to absorb float error left by the cancelled factor.
        days = math.floor(round(self.raw_interval(stability), 9) + 0.5)
        return max(MIN_INTERVAL_DAYS, days)
