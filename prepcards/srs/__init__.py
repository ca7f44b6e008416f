"""
SRS - Spaced Repetition Scheduler

Main API for flashcard review scheduling.

This module implements a simplified SM-2 style scheduler with:
- Four learning stages: new -> learning -> review (-> mastered)
- An explicit (status, outcome) transition table
- Interval growth from days since the last review, clamped to config bounds
- Due-card queries and priority ordering over progress snapshots

Quick start:
    from prepcards import srs

    # Process a review (algorithm only, no storage calls)
    progress = srs.update_progress(progress, srs.ReviewOutcome.GOOD)

    # Build the review queue
    queue = srs.sort_cards_by_priority(srs.get_due_cards(progress_list))

Storage lives in prepcards.srs.persistence (JSON) and prepcards.srs.database (SQL).
"""

# Core scheduler API (algorithm logic)
from prepcards.srs.scheduler import (
    ReviewSchedule,
    calculate_next_review,
    update_progress,
)

# Review queue
from prepcards.srs.queue import (
    StudyStats,
    get_due_cards,
    get_study_stats,
    sort_cards_by_priority,
)

# Constants and parameters
from prepcards.srs.constants import (
    CardStatus,
    ReviewOutcome,
    DifficultyLevel,
    SchedulingConfig,
    AdaptiveConfig,
    DEFAULT_CONFIG,
    DEFAULT_ADAPTIVE_CONFIG,
    STATUS_PRIORITY,
)

# Progress records
from prepcards.srs.progress import (
    CardProgress,
    new_progress,
    days_since_last_review,
    is_due,
)

from prepcards.srs.transitions import TRANSITIONS, get_transition


__all__ = [
    # Core algorithm
    "ReviewSchedule",
    "calculate_next_review",
    "update_progress",

    # Queue
    "StudyStats",
    "get_due_cards",
    "get_study_stats",
    "sort_cards_by_priority",

    # Enums
    "CardStatus",
    "ReviewOutcome",
    "DifficultyLevel",

    # Progress
    "CardProgress",
    "new_progress",
    "days_since_last_review",
    "is_due",

    # Transitions
    "TRANSITIONS",
    "get_transition",

    # Parameters
    "SchedulingConfig",
    "AdaptiveConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_ADAPTIVE_CONFIG",
    "STATUS_PRIORITY",
]
