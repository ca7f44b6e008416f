"""
Progress - Per-Card Learning State

Defines the progress record tracked for each (learner, card) pair and the
derived quantities the scheduler and selectors need.

Key concepts:
- Status: new -> learning -> review (-> mastered, set by the caller)
- Success rate: correct / max(1, correct + incorrect)
- Due: no next review date yet, or next review date has passed
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
import math

from prepcards.srs.constants import CardStatus, SECONDS_PER_DAY


@dataclass
class CardProgress:
    """
    Learning state for a single card.

    Records are treated as values: the scheduler returns a new record
    instead of modifying the one it was given.
    """
    card_id: str
    status: CardStatus
    last_reviewed: datetime
    correct_count: int = 0
    incorrect_count: int = 0
    next_review_date: Optional[datetime] = None

    def __post_init__(self):
        """Accept plain status strings (e.g. from storage)."""
        if not isinstance(self.status, CardStatus):
            self.status = CardStatus(self.status)

    @property
    def review_count(self) -> int:
        return self.correct_count + self.incorrect_count

    @property
    def success_rate(self) -> float:
        return self.correct_count / max(1, self.review_count)


def new_progress(card_id: str, now: Optional[datetime] = None) -> CardProgress:
    """
    Create the pre-review record for a card that has never been studied.

    Args:
        card_id: Card identifier
        now: Creation timestamp (defaults to now)

    Returns:
        CardProgress in NEW status with zero counters and no next review date
    """
    if now is None:
        now = datetime.now(timezone.utc)

    return CardProgress(
        card_id=card_id,
        status=CardStatus.NEW,
        last_reviewed=now,
    )


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive timestamps from storage as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def elapsed_days(since: datetime, now: datetime) -> float:
    """Fractional days between two timestamps (negative if since is later)."""
    return (now - since).total_seconds() / SECONDS_PER_DAY


def days_since_last_review(last_reviewed: datetime, now: datetime) -> int:
    """
    Whole days since the last review, rounded up.

    Rounding up means any review from an earlier moment counts as at least
    one day, so interval bases never collapse to zero for stale cards.
    Clock skew (last_reviewed after now) is measured as an absolute gap.
    """
    return math.ceil(abs(elapsed_days(last_reviewed, now)))


def overdue_seconds(progress: CardProgress, now: datetime) -> float:
    """
    How far past its next review date a card is.

    Unscheduled cards count as 0; not-yet-due cards are negative.
    """
    if progress.next_review_date is None:
        return 0.0
    return (now - progress.next_review_date).total_seconds()


def is_due(progress: CardProgress, now: datetime) -> bool:
    """A card is due when unscheduled or its next review date has passed."""
    if progress.next_review_date is None:
        return True
    return progress.next_review_date <= now
