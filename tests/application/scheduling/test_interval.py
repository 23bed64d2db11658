import math

import pytest

from mneme.application.scheduling.interval import IntervalPlanner
from mneme.application.scheduling.retrievability import RetrievabilityModel


@pytest.fixture
def planner():
    return IntervalPlanner()


@pytest.mark.parametrize(
    "stability, expected",
    [
        (0.1, 1),
        (0.4, 1),
        (0.6, 1),
        (1.49, 1),
        (2.4, 2),
        (2.5, 3),
        (5.8, 6),
        (29.0087, 29),
        (100.5, 101),
        (365.7, 366),
    ],
)
def test_interval_is_rounded_stability(planner, stability, expected):
    assert planner.next_interval(stability) == expected


@pytest.mark.parametrize("stability", [0.1, 0.33, 1.0, 2.4, 7.77, 42.0, 1234.56])
def test_simplification_holds_for_current_constants(planner, stability):
    # With the 0.9 target and -1 decay the derived formula collapses to
    # max(1, round_half_up(S)).
    assert planner.raw_interval(stability) == pytest.approx(stability)
    assert planner.next_interval(stability) == max(1, math.floor(stability + 0.5))


@pytest.mark.parametrize("stability", [0, 0.01, 0.49])
def test_minimum_one_day(planner, stability):
    assert planner.next_interval(stability) == 1


def test_interval_lands_on_target_retrievability():
    model = RetrievabilityModel(target=0.8, decay=-0.5)
    planner = IntervalPlanner(model)

    ivl = planner.raw_interval(20.0)
    assert model.retrievability(ivl, 20.0) == pytest.approx(0.8)


def test_interval_is_monotonic_in_stability(planner):
    stabilities = [0.1, 0.5, 1, 1.5, 2.4, 5.8, 10, 100]
    intervals = [planner.next_interval(s) for s in stabilities]
    assert intervals == sorted(intervals)
