"""
Review queue helpers: due cards, priority ordering and study statistics.

All functions work on in-memory progress snapshots (no storage calls).
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from prepcards.srs.constants import CardStatus, STATUS_PRIORITY
from prepcards.srs.progress import CardProgress, is_due, overdue_seconds


def get_due_cards(
    progress_list: list[CardProgress],
    now: Optional[datetime] = None
) -> list[CardProgress]:
    """
    Get cards eligible for review right now.

    Cards without a next review date are always due.

    Args:
        progress_list: Progress snapshot
        now: Reference time (defaults to now)

    Returns:
        Due records, in input order
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return [p for p in progress_list if is_due(p, now)]


def sort_cards_by_priority(
    progress_list: list[CardProgress],
    now: Optional[datetime] = None
) -> list[CardProgress]:
    """
    Order cards for study, most urgent first.

    Sort keys:
    1. Overdue-ness (now - next_review_date), largest first. Unscheduled
       cards count as exactly 0, so they follow overdue cards and precede
       cards not yet due.
    2. Status: new > learning > review > mastered
    3. Success rate, lowest first

    The sort is stable, so full ties keep their input order.

    Args:
        progress_list: Progress snapshot
        now: Reference time (defaults to now)

    Returns:
        New sorted list (input is not modified)
    """
    if now is None:
        now = datetime.now(timezone.utc)

    return sorted(
        progress_list,
        key=lambda p: (
            -overdue_seconds(p, now),
            -STATUS_PRIORITY[p.status],
            p.success_rate,
        ),
    )


@dataclass(frozen=True)
class StudyStats:
    """Counts by status plus due / overdue totals."""
    total: int
    new: int
    learning: int
    review: int
    mastered: int
    due: int
    overdue: int


def get_study_stats(
    progress_list: list[CardProgress],
    now: Optional[datetime] = None
) -> StudyStats:
    """
    Summarize a progress snapshot for dashboards.

    A card is overdue when its next review date is strictly in the past;
    unscheduled cards are due but never overdue.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    by_status = {status: 0 for status in CardStatus}
    due = 0
    overdue = 0
    for progress in progress_list:
        by_status[progress.status] += 1
        if is_due(progress, now):
            due += 1
            if progress.next_review_date is not None and progress.next_review_date < now:
                overdue += 1

    return StudyStats(
        total=len(progress_list),
        new=by_status[CardStatus.NEW],
        learning=by_status[CardStatus.LEARNING],
        review=by_status[CardStatus.REVIEW],
        mastered=by_status[CardStatus.MASTERED],
        due=due,
        overdue=overdue,
    )
