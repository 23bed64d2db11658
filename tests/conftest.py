from datetime import datetime, timezone

import pytest

from mneme.application.scheduling.engine import SchedulingEngine
from mneme.infrastructure.adapters.clock import FixedClock

REVIEW_MOMENT = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return FixedClock(REVIEW_MOMENT)


@pytest.fixture
def engine(fixed_clock):
    return SchedulingEngine(clock=fixed_clock)


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Isolate config files and MNEME_* overrides from the developer's machine
    monkeypatch.setenv("HOME", str(home))
    for var in ("MNEME_WEIGHTS_VERSION", "MNEME_TIMEZONE", "MNEME_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
    return home
