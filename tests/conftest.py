from datetime import datetime, timedelta, timezone

import pytest

from prepcards.srs.constants import CardStatus
from prepcards.srs.progress import CardProgress


NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_progress(
    card_id="card",
    status=CardStatus.NEW,
    days_ago=0.0,
    correct=0,
    incorrect=0,
    due_in_days=None,
    now=NOW,
):
    """Build a progress record relative to a fixed 'now'."""
    return CardProgress(
        card_id=card_id,
        status=status,
        last_reviewed=now - timedelta(days=days_ago),
        correct_count=correct,
        incorrect_count=incorrect,
        next_review_date=None if due_in_days is None else now + timedelta(days=due_in_days),
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from real progress files and databases."""
    monkeypatch.setenv("PROGRESS_FILE", str(tmp_path / "progress.json"))
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'progress.db'}")
    monkeypatch.delenv("TEST_MODE", raising=False)
