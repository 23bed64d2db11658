"""
Calibrated FSRS weight tables.

A weight table is an immutable, versioned value. Recalibration means
registering a new version, never editing an existing one, so a card's
history is never scheduled with mixed calibrations.
"""

from dataclasses import dataclass

from mneme.domain.constants import WEIGHT_COUNT

from .errors import UnknownWeightSetError


@dataclass(frozen=True)
class WeightSet:
    """
    A versioned 17-parameter FSRS weight vector.

    Index layout (FSRS-4.5):
        w[0..3]   initial stability for ratings 1-4
        w[4..5]   initial difficulty (anchor, slope)
        w[6..7]   difficulty mean reversion, per-rating drift
        w[8..10]  stability growth after recall
        w[11..14] stability after a lapse
        w[15]     hard penalty
        w[16]     easy bonus
    """

    version: str
    w: tuple[float, ...]

    def __post_init__(self):
        if len(self.w) != WEIGHT_COUNT:
            raise ValueError(
                f"Weight set {self.version!r} needs {WEIGHT_COUNT} weights, got {len(self.w)}"
            )

    def __getitem__(self, index: int) -> float:
        return self.w[index]


FSRS_4_5 = WeightSet(
    version="fsrs-4.5",
    w=(
        0.4, 0.6, 2.4, 5.8,
        4.93, 0.94, 0.86, 0.01,
        1.49, 0.14, 0.94,
        2.18, 0.05, 0.34, 1.26,
        0.29, 2.61,
    ),
)

_REGISTRY: dict[str, WeightSet] = {FSRS_4_5.version: FSRS_4_5}


def get_weight_set(version: str) -> WeightSet:
    """Look up a registered weight set by version."""
    try:
        return _REGISTRY[version]
    except KeyError:
        raise UnknownWeightSetError(version, known_versions()) from None


def known_versions() -> list[str]:
    return sorted(_REGISTRY)
