import math

import pytest

from mneme.application.scheduling.stability import StabilityUpdater
from mneme.domain.scheduling.models import Rating
from mneme.domain.scheduling.weights import FSRS_4_5, WeightSet

W = FSRS_4_5.w


@pytest.fixture
def updater():
    return StabilityUpdater()


class TestInitialStability:
    @pytest.mark.parametrize(
        "rating, expected",
        [(Rating.AGAIN, 0.4), (Rating.HARD, 0.6), (Rating.GOOD, 2.4), (Rating.EASY, 5.8)],
    )
    def test_table_lookup(self, updater, rating, expected):
        assert updater.initial_stability(rating) == expected

    def test_floored_at_minimum(self):
        tiny = WeightSet(version="tiny", w=(0.01,) + W[1:])
        assert StabilityUpdater(tiny).initial_stability(Rating.AGAIN) == 0.1


class TestAfterRecall:
    def test_reference_formula(self, updater):
        d, s, r = 5.0, 10.0, 0.9
        expected = s * (
            math.exp(W[8]) * (11 - d) * s ** (-W[9]) * (math.exp(W[10] * (1 - r)) - 1) + 1
        )

        assert updater.after_recall(d, s, r, Rating.GOOD) == pytest.approx(expected)
        assert expected == pytest.approx(29.0087, rel=1e-3)

    def test_hard_dampens_and_easy_boosts(self, updater):
        hard = updater.after_recall(5.0, 10.0, 0.8, Rating.HARD)
        good = updater.after_recall(5.0, 10.0, 0.8, Rating.GOOD)
        easy = updater.after_recall(5.0, 10.0, 0.8, Rating.EASY)

        assert 10.0 <= hard < good < easy

    def test_no_growth_when_recall_was_certain(self, updater):
        # R == 1 makes the growth term vanish; stability is kept, not shrunk
        assert updater.after_recall(5.0, 10.0, 1.0, Rating.EASY) == 10.0

    @pytest.mark.parametrize("stability", [0.1, 1.0, 10.0, 365.0, 5000.0])
    @pytest.mark.parametrize("difficulty", [1.0, 5.0, 10.0])
    @pytest.mark.parametrize("retrievability", [0.0, 0.5, 0.9, 1.0])
    @pytest.mark.parametrize("rating", [Rating.HARD, Rating.GOOD, Rating.EASY])
    def test_never_shrinks(self, updater, stability, difficulty, retrievability, rating):
        assert updater.after_recall(difficulty, stability, retrievability, rating) >= stability

    def test_harder_cards_grow_slower(self, updater):
        easy_card = updater.after_recall(2.0, 10.0, 0.9, Rating.GOOD)
        hard_card = updater.after_recall(9.0, 10.0, 0.9, Rating.GOOD)
        assert easy_card > hard_card


class TestAfterLapse:
    def test_reference_formula(self, updater):
        d, s, r = 5.0, 10.0, 0.9
        expected = W[11] * d ** (-W[12]) * ((s + 1) ** W[13] - 1) * math.exp(W[14] * (1 - r))

        assert updater.after_lapse(d, s, r) == pytest.approx(expected)
        assert expected == pytest.approx(2.874, rel=1e-3)

    def test_lapse_can_reduce_stability(self, updater):
        assert updater.after_lapse(5.0, 10.0, 0.9) < 10.0

    @pytest.mark.parametrize("stability", [0.0, 0.01, 0.1])
    def test_floored_at_minimum(self, updater, stability):
        assert updater.after_lapse(10.0, stability, 1.0) >= 0.1

    def test_later_lapse_hurts_less(self, updater):
        # Forgetting at low R was expected, so less stability is lost
        assert updater.after_lapse(5.0, 10.0, 0.3) > updater.after_lapse(5.0, 10.0, 0.9)
