"""
Power-law forgetting curve.

This is a pure computation module with no I/O.
"""

from mneme.domain.constants import DECAY, RETRIEVABILITY_TARGET


class RetrievabilityModel:
    """
    Computes recall probability from elapsed time and stability.

    R(t, S) = (1 + FACTOR * t / S) ^ DECAY, with FACTOR chosen so that
    R(S, S) equals the retrievability target. With the default target (0.9)
    and decay (-1) this is R = 1 / (1 + t / (9 * S)).
    """

    def __init__(self, target: float = RETRIEVABILITY_TARGET, decay: float = DECAY):
        if not 0 < target < 1:
            raise ValueError(f"Retrievability target must be in (0, 1), got {target}")
        if decay >= 0:
            raise ValueError(f"Decay must be negative, got {decay}")
        self.target = target
        self.decay = decay
        self.factor = target ** (1 / decay) - 1

    def retrievability(self, elapsed_days: float, stability: float) -> float:
        """
        Probability of recall after `elapsed_days` for a memory of `stability`.

        A non-positive stability (never reviewed, or corrupt) counts as fully
        forgotten and returns 0.
        """
        if stability <= 0:
            return 0.0
        return (1 + self.factor * elapsed_days / stability) ** self.decay
