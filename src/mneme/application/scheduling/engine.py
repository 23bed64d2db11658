"""
FSRS Scheduling Engine: application layer orchestrator.

Coordinates the forgetting curve, interval planner and the stability and
difficulty updaters into a single review operation.
"""

import logging
from dataclasses import replace
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

from mneme.domain.constants import D_MAX, D_MIN, MIN_INTERVAL_DAYS, S_MIN
from mneme.domain.scheduling.errors import InvalidQualityError
from mneme.domain.scheduling.models import (
    CardPhase,
    MemoryCard,
    Rating,
    SchedulingResult,
)
from mneme.domain.scheduling.ports import Clock
from mneme.domain.scheduling.weights import FSRS_4_5, WeightSet
from mneme.infrastructure.adapters.clock import SystemClock

from .difficulty import DifficultyUpdater, clamp_difficulty
from .interval import IntervalPlanner
from .retrievability import RetrievabilityModel
from .stability import StabilityUpdater

logger = logging.getLogger(__name__)


def parse_quality(quality: Any) -> Rating:
    """
    Validate a raw rating and convert it to a Rating.

    Only true integers are accepted: bools, floats (even 3.0) and strings
    are rejected.

    Raises:
        InvalidQualityError: If quality is not an int in 1..4.
    """
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidQualityError(quality)
    if not Rating.AGAIN <= quality <= Rating.EASY:
        raise InvalidQualityError(quality)
    return Rating(quality)


class SchedulingEngine:
    """
    Computes the next memory state and due date for a reviewed card.

    Stateless and side-effect free: every call is a pure function of the
    card, the rating and the clock. Safe to share across threads.
    """

    def __init__(
        self,
        weights: WeightSet = FSRS_4_5,
        clock: Clock | None = None,
        tz: tzinfo = timezone.utc,
        model: RetrievabilityModel | None = None,
    ):
        """
        Args:
            weights: Calibrated weight table shared by every updater.
            clock: Source of "now"; defaults to the system clock.
            tz: Timezone whose midnight marks a due date.
            model: Optional custom forgetting curve.
        """
        self.weights = weights
        self._clock = clock or SystemClock()
        self._tz = tz
        self._model = model or RetrievabilityModel()
        self._planner = IntervalPlanner(self._model)
        self._stability = StabilityUpdater(weights)
        self._difficulty = DifficultyUpdater(weights)

    def retrievability(self, elapsed_days: float, stability: float) -> float:
        return self._model.retrievability(elapsed_days, stability)

    def review(
        self,
        card: MemoryCard,
        quality: int,
        now: datetime | None = None,
    ) -> SchedulingResult:
        """
        Apply one rating to a card.

        Args:
            card: Current memory state. Never modified.
            quality: 1=Again, 2=Hard, 3=Good, 4=Easy.
            now: Overrides the engine clock for this call.

        Returns:
            SchedulingResult with the new card and its due date.

        Raises:
            InvalidQualityError: If quality is not an integer in 1..4.
        """
        rating = parse_quality(quality)

        if card.phase is CardPhase.NEW:
            updated, r = self._review_new(card, rating), None
        else:
            updated, r = self._review_learned(card, rating)

        due_date = self._due_date(updated.scheduled_days, now)
        logger.debug(
            "Reviewed card (%s, rating=%s): S %.4f -> %.4f, D %.4f -> %.4f, due in %d day(s)",
            card.phase.value,
            rating.name,
            card.stability,
            updated.stability,
            card.difficulty,
            updated.difficulty,
            updated.scheduled_days,
        )
        return SchedulingResult(card=updated, due_date=due_date, retrievability=r)

    def _review_new(self, card: MemoryCard, rating: Rating) -> MemoryCard:
        stability = self._stability.initial_stability(rating)
        difficulty = self._difficulty.initial_difficulty(rating)

        if rating == Rating.AGAIN:
            # Failing a never-reviewed card is not a lapse and does not graduate it.
            return replace(
                card,
                stability=stability,
                difficulty=difficulty,
                scheduled_days=MIN_INTERVAL_DAYS,
            )

        return replace(
            card,
            stability=stability,
            difficulty=difficulty,
            scheduled_days=self._planner.next_interval(stability),
            reps=card.reps + 1,
        )

    def _review_learned(
        self, card: MemoryCard, rating: Rating
    ) -> tuple[MemoryCard, float]:
        stability, difficulty = self._sanitize(card)
        r = self._model.retrievability(card.elapsed_days, stability)
        new_difficulty = self._difficulty.next_difficulty(difficulty, rating)

        if rating == Rating.AGAIN:
            new_stability = self._stability.after_lapse(difficulty, stability, r)
            updated = replace(
                card,
                stability=new_stability,
                difficulty=new_difficulty,
                scheduled_days=MIN_INTERVAL_DAYS,
                lapses=card.lapses + 1,
            )
            return updated, r

        new_stability = self._stability.after_recall(difficulty, stability, r, rating)
        updated = replace(
            card,
            stability=new_stability,
            difficulty=new_difficulty,
            scheduled_days=self._planner.next_interval(new_stability),
            reps=card.reps + 1,
        )
        return updated, r

    def _sanitize(self, card: MemoryCard) -> tuple[float, float]:
        """Bring a corrupt LEARNED card back inside the model's domain."""
        stability = card.stability
        difficulty = card.difficulty

        if stability <= 0:
            logger.warning(
                "Learned card has non-positive stability %s; using %s", stability, S_MIN
            )
            stability = S_MIN
        if not D_MIN <= difficulty <= D_MAX:
            logger.warning("Card difficulty %s outside [%s, %s]; clamping", difficulty, D_MIN, D_MAX)
            difficulty = clamp_difficulty(difficulty)

        return stability, difficulty

    def _due_date(self, scheduled_days: int, now: datetime | None) -> datetime:
        """Midnight (engine timezone) of the day `scheduled_days` after now."""
        moment = now or self._clock.now()
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        local = moment.astimezone(self._tz) + timedelta(days=scheduled_days)
        return local.replace(hour=0, minute=0, second=0, microsecond=0)
