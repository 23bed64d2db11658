# Application Scheduling Package
from .difficulty import DifficultyUpdater
from .engine import SchedulingEngine
from .interval import IntervalPlanner
from .retrievability import RetrievabilityModel
from .stability import StabilityUpdater

__all__ = [
    "RetrievabilityModel",
    "IntervalPlanner",
    "StabilityUpdater",
    "DifficultyUpdater",
    "SchedulingEngine",
]
