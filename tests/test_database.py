from dataclasses import replace

import pytest
from sqlalchemy import inspect

from prepcards.srs import database
from prepcards.srs.constants import CardStatus
from prepcards.srs.database import SqlProgressRepository
from prepcards.srs.scheduler import update_progress

from conftest import NOW, make_progress


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'db' / 'progress.db'}"


def test_init_creates_progress_table(db_url):
    repo = SqlProgressRepository("alice", database_url=db_url)

    assert "card_progress" in inspect(repo.engine).get_table_names()


def test_save_and_load_round_trip(db_url):
    repo = SqlProgressRepository("alice", database_url=db_url)
    records = [
        make_progress("a", CardStatus.NEW),
        make_progress("b", CardStatus.MASTERED, days_ago=40, correct=12, incorrect=2, due_in_days=-3),
    ]

    repo.save_progress(records)

    assert repo.load_progress() == records


def test_save_updates_existing_rows(db_url):
    repo = SqlProgressRepository("alice", database_url=db_url)
    original = make_progress("a", CardStatus.LEARNING, days_ago=1, correct=1)
    repo.save_progress([original])

    reviewed = update_progress(original, "good", now=NOW)
    repo.save_progress([reviewed])

    [loaded] = repo.load_progress()
    assert loaded == reviewed
    assert loaded.status == CardStatus.REVIEW


def test_users_are_isolated(db_url):
    alice = SqlProgressRepository("alice", database_url=db_url)
    bob = SqlProgressRepository("bob", database_url=db_url)

    alice.save_progress([make_progress("shared", CardStatus.REVIEW, correct=3)])

    assert bob.load_progress() == []
    assert bob.load_card("shared") is None
    assert alice.load_card("shared").status == CardStatus.REVIEW


def test_saving_nothing_is_a_no_op(db_url):
    repo = SqlProgressRepository("alice", database_url=db_url)

    repo.save_progress([])

    assert repo.load_progress() == []


def test_reset_db_clears_rows(db_url):
    repo = SqlProgressRepository("alice", database_url=db_url)
    repo.save_progress([make_progress("a")])

    database.reset_db(repo.engine)

    assert repo.load_progress() == []


def test_default_user_and_url_come_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DEFAULT_USER_ID", "carol")

    repo = SqlProgressRepository()
    repo.save_progress([replace(make_progress("a"), status=CardStatus.LEARNING)])

    assert repo.user_id == "carol"
    assert (tmp_path / "progress.db").exists()
