"""
Difficulty progression based on learner performance.

A learner moves up a difficulty tier once enough cards are mastered and
those mastered cards were answered accurately overall.
"""

from __future__ import annotations

from prepcards.srs.constants import (
    CardStatus,
    DifficultyLevel,
    DIFFICULTY_ORDER,
    MIN_MASTERED_COUNT,
    MIN_SUCCESS_RATE,
)
from prepcards.srs.progress import CardProgress


def mastered_success_rate(progress_list: list[CardProgress]) -> float:
    """Aggregate success rate over mastered cards (0 when there are no attempts)."""
    mastered = [p for p in progress_list if p.status == CardStatus.MASTERED]
    total_attempts = sum(p.review_count for p in mastered)
    if total_attempts == 0:
        return 0.0
    return sum(p.correct_count for p in mastered) / total_attempts


def should_progress_difficulty(
    progress_list: list[CardProgress],
    min_mastered_count: int = MIN_MASTERED_COUNT,
    min_success_rate: float = MIN_SUCCESS_RATE
) -> bool:
    """
    Decide whether the learner is ready for harder cards.

    Args:
        progress_list: The learner's progress records
        min_mastered_count: Mastered cards required before progressing
        min_success_rate: Required aggregate success rate on mastered cards

    Returns:
        True if both thresholds are met
    """
    mastered_count = sum(1 for p in progress_list if p.status == CardStatus.MASTERED)
    if mastered_count < min_mastered_count:
        return False
    return mastered_success_rate(progress_list) >= min_success_rate


def get_recommended_difficulty(
    progress_list: list[CardProgress],
    current_level: DifficultyLevel = DifficultyLevel.BEGINNER
) -> DifficultyLevel:
    """Recommend the next tier up when ready, otherwise stay (capped at expert)."""
    current_level = DifficultyLevel(current_level)
    if not should_progress_difficulty(progress_list):
        return current_level

    index = DIFFICULTY_ORDER.index(current_level)
    return DIFFICULTY_ORDER[min(index + 1, len(DIFFICULTY_ORDER) - 1)]
