"""mneme: FSRS-4.5 spaced-repetition scheduling engine."""

from mneme.application.scheduling import SchedulingEngine
from mneme.consts import VERSION
from mneme.domain.scheduling import (
    CardPhase,
    InvalidQualityError,
    MemoryCard,
    Rating,
    SchedulingResult,
    new_card,
)

__version__ = VERSION

__all__ = [
    "SchedulingEngine",
    "MemoryCard",
    "SchedulingResult",
    "Rating",
    "CardPhase",
    "InvalidQualityError",
    "new_card",
]
