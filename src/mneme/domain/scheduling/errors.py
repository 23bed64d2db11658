"""Domain errors raised by the scheduling engine."""

from typing import Any


class SchedulingError(Exception):
    """Base class for scheduling failures."""


class InvalidQualityError(SchedulingError, ValueError):
    """
    Raised when a review rating is not an integer in 1..4.

    Attributes:
        quality: The offending value, exactly as the caller passed it.
    """

    def __init__(self, quality: Any):
        self.quality = quality
        super().__init__(f"Quality must be an integer 1-4, received: {quality!r}")


class UnknownWeightSetError(SchedulingError, KeyError):
    """Raised when a weight table version is not registered."""

    def __init__(self, version: str, known: list[str]):
        self.version = version
        self.known = known
        super().__init__(f"Unknown weight set {version!r} (known: {', '.join(known)})")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])
