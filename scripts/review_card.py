"""
Record one review for a card in a JSON progress file.

Cards without a progress record start as new.

Usage:
    python -m scripts.review_card --progress data/progress.json flashcard-q-event-loop good
"""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from prepcards import srs
from prepcards.srs.persistence import JsonProgressRepository


def review_card(
    repository: JsonProgressRepository,
    card_id: str,
    outcome: srs.ReviewOutcome,
    now: Optional[datetime] = None
) -> srs.CardProgress:
    """
    Load progress, apply one review to card_id, save, and return the new record.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    progress_list = repository.load_progress()
    by_id = {p.card_id: p for p in progress_list}
    current = by_id.get(card_id) or srs.new_progress(card_id, now)

    updated = srs.update_progress(current, outcome, now=now)
    by_id[card_id] = updated
    repository.save_progress(list(by_id.values()))
    return updated


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Record a flashcard review")
    parser.add_argument("card_id", help="Card identifier")
    parser.add_argument(
        "outcome",
        choices=[outcome.value for outcome in srs.ReviewOutcome],
        help="Review outcome"
    )
    parser.add_argument(
        "--progress",
        type=Path,
        default=None,
        help="Progress JSON file (default: PROGRESS_FILE or data/progress.json)"
    )
    args = parser.parse_args(argv)

    updated = review_card(
        JsonProgressRepository(args.progress),
        args.card_id,
        srs.ReviewOutcome(args.outcome),
    )
    print(
        f"{updated.card_id}: {updated.status.value}, "
        f"next review {updated.next_review_date.isoformat()} "
        f"({updated.correct_count} correct / {updated.incorrect_count} incorrect)"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
