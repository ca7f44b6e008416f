import json
from datetime import datetime, timedelta, timezone

import pytest

from prepcards.srs.constants import CardStatus
from prepcards.srs.progress import as_utc
from prepcards.srs.persistence import (
    JsonProgressRepository,
    ProgressStoreError,
    dump_progress,
    parse_progress,
)

from conftest import NOW, make_progress


@pytest.fixture
def repo(tmp_path):
    return JsonProgressRepository(tmp_path / "store" / "progress.json")


def test_missing_file_loads_empty(repo):
    assert repo.load_progress() == []


def test_round_trip_preserves_records(repo):
    records = [
        make_progress("fresh", CardStatus.NEW),
        make_progress("known", CardStatus.REVIEW, days_ago=3, correct=4, incorrect=1, due_in_days=5),
    ]

    repo.save_progress(records)

    assert repo.load_progress() == records


def test_file_uses_camel_case_and_iso_dates(repo):
    repo.save_progress([make_progress("c1", CardStatus.LEARNING, correct=1, due_in_days=1)])

    data = json.loads(repo.path.read_text(encoding="utf-8"))
    record = data["flashcardProgress"][0]

    assert set(record) == {
        "cardId", "status", "lastReviewed", "correctCount", "incorrectCount", "nextReviewDate"
    }
    assert record["status"] == "learning"
    assert record["lastReviewed"].startswith("2024-01-01T12:00:00")
    assert record["nextReviewDate"].startswith("2024-01-02T12:00:00")


def test_save_leaves_no_temp_files(repo):
    repo.save_progress([make_progress("c1")])
    repo.save_progress([make_progress("c2")])

    assert [p.name for p in repo.path.parent.iterdir()] == ["progress.json"]


def test_parse_accepts_browser_style_timestamps():
    data = {
        "flashcardProgress": [{
            "cardId": "flashcard-q-1",
            "status": "review",
            "lastReviewed": "2024-01-01T12:00:00.000Z",
            "correctCount": 3,
            "incorrectCount": 0,
            "nextReviewDate": "2024-01-03T12:00:00.000Z",
        }]
    }

    [progress] = parse_progress(data)

    assert progress.status == CardStatus.REVIEW
    assert progress.last_reviewed == NOW
    assert progress.next_review_date.tzinfo is not None


def test_naive_timestamps_are_read_as_utc():
    data = {"flashcardProgress": [{"cardId": "c", "lastReviewed": "2024-01-01T12:00:00"}]}

    [progress] = parse_progress(data)

    assert progress.last_reviewed == NOW
    assert progress.last_reviewed.tzinfo == timezone.utc
    assert progress.status == CardStatus.NEW
    assert progress.next_review_date is None


def test_as_utc_only_fills_missing_timezone():
    aware = datetime(2024, 1, 1, 12, tzinfo=timezone(timedelta(hours=2)))

    assert as_utc(None) is None
    assert as_utc(aware) is aware
    assert as_utc(NOW.replace(tzinfo=None)) == NOW


def test_dump_of_empty_list():
    assert dump_progress([]) == {"flashcardProgress": []}


def test_invalid_json_raises_store_error(repo):
    repo.path.parent.mkdir(parents=True)
    repo.path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ProgressStoreError, match="not valid JSON"):
        repo.load_progress()


def test_invalid_record_raises_store_error():
    data = {"flashcardProgress": [{"cardId": "c", "lastReviewed": "2024-01-01", "correctCount": -1}]}

    with pytest.raises(ProgressStoreError, match="Invalid progress document"):
        parse_progress(data)


def test_default_path_comes_from_environment(tmp_path):
    assert JsonProgressRepository().path == tmp_path / "progress.json"
