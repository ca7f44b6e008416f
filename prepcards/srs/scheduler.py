"""
Scheduler - Spaced Repetition Algorithm Logic

Pure scheduling and state updates (no storage calls).

Main workflow:
1. Load progress records (caller's responsibility)
2. Look up the transition for (status, outcome)
3. Compute and clamp the next interval
4. Return the updated record
5. Save progress records (caller's responsibility)

This module handles ONLY the algorithm logic.
Storage I/O is handled by the persistence and database modules.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from prepcards.logging_config import get_logger
from prepcards.srs.constants import (
    CardStatus,
    ReviewOutcome,
    SchedulingConfig,
    DEFAULT_CONFIG,
)
from prepcards.srs.progress import CardProgress, days_since_last_review
from prepcards.srs.transitions import get_transition

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReviewSchedule:
    """Outcome of scheduling one review."""
    next_review_date: datetime
    new_status: CardStatus
    interval_days: float


def calculate_next_review(
    progress: CardProgress,
    result: ReviewOutcome,
    now: Optional[datetime] = None,
    config: SchedulingConfig = DEFAULT_CONFIG
) -> ReviewSchedule:
    """
    Compute the next status and review date for a card after a review.

    The interval depends on the card's current status and the outcome;
    for cards past the NEW stage it also grows with the (rounded up) days
    since the last review. Intervals are clamped to
    [config.min_interval, config.max_interval] before being added to now.

    Args:
        progress: Current progress record for the card
        result: Review outcome (AGAIN, HARD, GOOD, EASY)
        now: Review timestamp (defaults to now)
        config: Scheduling parameters

    Returns:
        ReviewSchedule with next_review_date, new_status and interval_days
    """
    if now is None:
        now = datetime.now(timezone.utc)

    result = ReviewOutcome(result)
    transition = get_transition(progress.status, result)

    days_elapsed = days_since_last_review(progress.last_reviewed, now)
    raw_interval = transition.interval.compute(config, days_elapsed)
    interval_days = config.clamp(raw_interval)
    new_status = transition.resolve_status(progress.correct_count)

    logger.debug(
        "card=%s %s + %s -> %s, interval %s = %.2f (clamped %.2f)",
        progress.card_id,
        progress.status.value,
        result.value,
        new_status.value,
        transition.interval.describe(),
        raw_interval,
        interval_days,
    )

    return ReviewSchedule(
        next_review_date=now + timedelta(days=interval_days),
        new_status=new_status,
        interval_days=interval_days,
    )


def update_progress(
    progress: CardProgress,
    result: ReviewOutcome,
    now: Optional[datetime] = None,
    config: SchedulingConfig = DEFAULT_CONFIG
) -> CardProgress:
    """
    Apply a review to a progress record and return the new record.

    AGAIN counts as incorrect; every other outcome counts as correct.
    The input record is left unchanged.

    Args:
        progress: Current progress record for the card
        result: Review outcome
        now: Review timestamp (defaults to now)
        config: Scheduling parameters

    Returns:
        New CardProgress with status, counters, last_reviewed and
        next_review_date updated
    """
    if now is None:
        now = datetime.now(timezone.utc)

    result = ReviewOutcome(result)
    schedule = calculate_next_review(progress, result, now=now, config=config)
    failed = result == ReviewOutcome.AGAIN

    return replace(
        progress,
        status=schedule.new_status,
        last_reviewed=now,
        next_review_date=schedule.next_review_date,
        correct_count=progress.correct_count if failed else progress.correct_count + 1,
        incorrect_count=progress.incorrect_count + 1 if failed else progress.incorrect_count,
    )
