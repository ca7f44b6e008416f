"""
Print a study report for a learner's flashcard progress.

Shows status counts, the prioritized due queue, whether the learner is ready
for harder cards and, given a card pool, the next adaptive session.

Usage:
    python -m scripts.study_report --progress data/progress.json
    python -m scripts.study_report --progress data/progress.json --pool cards.json --size 20
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Optional

from prepcards import srs
from prepcards.schemas import Flashcard
from prepcards.session_builders import (
    generate_adaptive_flashcards,
    get_recommended_difficulty,
    should_progress_difficulty,
)
from prepcards.srs.constants import DEFAULT_SESSION_SIZE, DifficultyLevel
from prepcards.srs.persistence import JsonProgressRepository


def load_pool(path: Path) -> list[Flashcard]:
    """Load a JSON list of flashcards."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return [Flashcard.model_validate(item) for item in data]


def print_report(
    progress_list: list[srs.CardProgress],
    pool: Optional[list[Flashcard]],
    size: int,
    level: DifficultyLevel,
    limit: int
) -> None:
    stats = srs.get_study_stats(progress_list)

    print("=" * 60)
    print("Study Report")
    print("=" * 60)
    print(f"Total cards: {stats.total}")
    print(f"  new: {stats.new}  learning: {stats.learning}  review: {stats.review}  mastered: {stats.mastered}")
    print(f"Due now: {stats.due} ({stats.overdue} overdue)")

    queue = srs.sort_cards_by_priority(srs.get_due_cards(progress_list))
    print(f"\nReview queue (top {min(limit, len(queue))}):")
    for i, progress in enumerate(queue[:limit], 1):
        due = progress.next_review_date.isoformat() if progress.next_review_date else "unscheduled"
        print(
            f"  {i}. {progress.card_id} [{progress.status.value}] "
            f"due {due}, success {progress.success_rate:.0%}"
        )

    ready = should_progress_difficulty(progress_list)
    recommended = get_recommended_difficulty(progress_list, level)
    print(f"\nReady for harder cards: {'yes' if ready else 'no'} (recommended: {recommended.value})")

    if pool is not None:
        session = generate_adaptive_flashcards(pool, progress_list, target_count=size)
        print(f"\nNext adaptive session ({len(session)} of {size}):")
        for card in session:
            print(f"  - {card.id}: {card.question}")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print a flashcard study report")
    parser.add_argument(
        "--progress",
        type=Path,
        default=None,
        help="Progress JSON file (default: PROGRESS_FILE or data/progress.json)"
    )
    parser.add_argument(
        "--pool",
        type=Path,
        default=None,
        help="JSON list of flashcards to build an adaptive session from"
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SESSION_SIZE,
        help=f"Adaptive session size (default: {DEFAULT_SESSION_SIZE})"
    )
    parser.add_argument(
        "--level",
        choices=[level.value for level in DifficultyLevel],
        default=DifficultyLevel.BEGINNER.value,
        help="Current difficulty tier"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Number of queue entries to show"
    )
    args = parser.parse_args(argv)

    progress_list = JsonProgressRepository(args.progress).load_progress()
    pool = load_pool(args.pool) if args.pool else None
    print_report(progress_list, pool, args.size, DifficultyLevel(args.level), args.limit)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
