"""
Ports (interfaces) for the scheduling engine.

The engine reads the current moment through this abstraction instead of a
global clock so that due dates are deterministic under test.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """
    Port for reading the current moment.

    Implementations:
        - SystemClock: Wall-clock time in UTC.
        - FixedClock: A pinned instant, for tests and replays.
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Return the current moment.

        Returns:
            A timezone-aware datetime.
        """
        pass
