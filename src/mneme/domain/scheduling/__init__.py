# Domain Scheduling Package
from .errors import InvalidQualityError, SchedulingError, UnknownWeightSetError
from .models import CardPhase, MemoryCard, Rating, SchedulingResult, new_card
from .ports import Clock
from .weights import FSRS_4_5, WeightSet, get_weight_set

__all__ = [
    "CardPhase",
    "MemoryCard",
    "Rating",
    "SchedulingResult",
    "new_card",
    "Clock",
    "WeightSet",
    "FSRS_4_5",
    "get_weight_set",
    "SchedulingError",
    "InvalidQualityError",
    "UnknownWeightSetError",
]
