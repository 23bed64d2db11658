# Infrastructure Adapters Package
from .clock import FixedClock, SystemClock

__all__ = ["SystemClock", "FixedClock"]
