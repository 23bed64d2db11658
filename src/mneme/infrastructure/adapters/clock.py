"""Clock adapters implementing the scheduling Clock port."""

from datetime import datetime, timedelta, timezone

from mneme.domain.scheduling.ports import Clock


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """
    Always returns the same instant.

    Naive datetimes are interpreted as UTC.
    """

    def __init__(self, moment: datetime):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def advance(self, **kwargs) -> "FixedClock":
        """Return a new clock moved forward by a timedelta built from kwargs."""
        return FixedClock(self._moment + timedelta(**kwargs))
