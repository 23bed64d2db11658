"""
Domain models for FSRS scheduling.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from mneme.domain.constants import NEW_CARD_DIFFICULTY, NEW_CARD_STABILITY


class Rating(IntEnum):
    """Learner's self-rated recall outcome for one review."""

    AGAIN = 1  # Recall failed
    HARD = 2
    GOOD = 3
    EASY = 4


class CardPhase(str, Enum):
    """
    Scheduling phase of a card.

    NEW cards have never had a successful review (reps == 0); everything
    else is LEARNED. Lapses do not change the phase.
    """

    NEW = "new"
    LEARNED = "learned"


@dataclass(frozen=True)
class MemoryCard:
    """
    FSRS memory state for a card.

    Attributes:
        stability: Days until recall probability drops to 90%. 0 means never reviewed.
        difficulty: Intrinsic item difficulty on a 1-10 scale.
        elapsed_days: Days since the review that produced the current stability.
        scheduled_days: Interval planned at the last review.
        reps: Successful or neutral reviews. Not incremented on a lapse.
        lapses: Recall failures after the card left the NEW phase.
    """

    stability: float
    difficulty: float
    elapsed_days: float = 0
    scheduled_days: int = 0
    reps: int = 0
    lapses: int = 0

    @property
    def phase(self) -> CardPhase:
        return CardPhase.NEW if self.reps == 0 else CardPhase.LEARNED

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SchedulingResult:
    """
    Outcome of a single review.

    Attributes:
        card: The updated memory state (a new value; the input is untouched).
        due_date: Start of the day on which the card is next due (timezone-aware).
        retrievability: Recall probability at review time, None for NEW cards.
    """

    card: MemoryCard
    due_date: datetime
    retrievability: float | None = None

    @property
    def stability(self) -> float:
        return self.card.stability

    @property
    def difficulty(self) -> float:
        return self.card.difficulty

    @property
    def elapsed_days(self) -> float:
        return self.card.elapsed_days

    @property
    def scheduled_days(self) -> int:
        return self.card.scheduled_days

    @property
    def reps(self) -> int:
        return self.card.reps

    @property
    def lapses(self) -> int:
        return self.card.lapses

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a JSON-ready dict for the card store."""
        d = self.card.to_dict()
        d["due_date"] = self.due_date.isoformat()
        d["retrievability"] = self.retrievability
        return d


def new_card() -> MemoryCard:
    """Create a card in the NEW state (never reviewed)."""
    return MemoryCard(
        stability=NEW_CARD_STABILITY,
        difficulty=NEW_CARD_DIFFICULTY,
        elapsed_days=0,
        scheduled_days=0,
        reps=0,
        lapses=0,
    )
