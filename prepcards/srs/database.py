"""
Database - SQL Progress Storage

Handles all database operations for progress records.
Uses SQLAlchemy ORM; SQLite by default, Postgres via DATABASE_URL.

This module handles ONLY database I/O.
Algorithm logic is handled by the scheduler module.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from prepcards import config
from prepcards.logging_config import get_logger
from prepcards.srs.models import Base, CardProgressRow
from prepcards.srs.progress import CardProgress, as_utc

logger = get_logger(__name__)


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Get SQLAlchemy engine for database connection.

    Args:
        database_url: Connection string (defaults to config.get_database_url())

    Returns:
        SQLAlchemy Engine instance
    """
    url = database_url or config.get_database_url()
    if url.startswith("sqlite:///"):
        db_path = url[len("sqlite:///"):]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(url, echo=False)

    return create_engine(
        url,
        pool_size=5,           # Keep 5 connections open
        max_overflow=10,       # Allow up to 10 extra connections
        pool_pre_ping=True,    # Verify connections before use
        echo=False
    )


def init_db(engine: Engine) -> None:
    """
    Initialize database schema if the progress table doesn't exist.

    Safe to call multiple times - only creates tables if they don't exist.
    """
    existing_tables = inspect(engine).get_table_names()
    if CardProgressRow.__tablename__ not in existing_tables:
        Base.metadata.create_all(engine)
        logger.info("Created table %s", CardProgressRow.__tablename__)


def reset_db(engine: Engine) -> None:
    """
    DANGEROUS: Delete all data and recreate tables.

    Only use this for testing or when you want to start fresh.
    All review history will be lost!
    """
    Base.metadata.drop_all(engine)
    logger.warning("All progress tables dropped")
    init_db(engine)


def _row_to_progress(row: CardProgressRow) -> CardProgress:
    # SQLite drops tzinfo on the way back
    return CardProgress(
        card_id=row.card_id,
        status=row.status,
        last_reviewed=as_utc(row.last_reviewed),
        correct_count=row.correct_count,
        incorrect_count=row.incorrect_count,
        next_review_date=as_utc(row.next_review_date),
    )


class SqlProgressRepository:
    """
    Progress records for one user, stored in the card_progress table.
    """

    def __init__(self, user_id: Optional[str] = None, database_url: Optional[str] = None):
        self.user_id = user_id or config.get_default_user_id()
        self.engine = get_engine(database_url)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        init_db(self.engine)

    def get_session(self) -> Session:
        return self._session_factory()

    def load_progress(self) -> list[CardProgress]:
        session = self.get_session()
        try:
            rows = session.query(CardProgressRow).filter(
                CardProgressRow.user_id == self.user_id
            ).order_by(CardProgressRow.card_id).all()
            progress_list = [_row_to_progress(row) for row in rows]
        finally:
            session.close()

        logger.info("Loaded %d progress records for user %s", len(progress_list), self.user_id)
        return progress_list

    def load_card(self, card_id: str) -> Optional[CardProgress]:
        """
        Load a single card's progress.

        Returns:
            CardProgress if found, None if the card was never reviewed
        """
        session = self.get_session()
        try:
            row = session.get(CardProgressRow, (self.user_id, card_id))
            return _row_to_progress(row) if row is not None else None
        finally:
            session.close()

    def save_progress(self, progress_list: list[CardProgress]) -> None:
        """
        Insert or update progress records in a single transaction.
        """
        if not progress_list:
            return

        session = self.get_session()
        try:
            for progress in progress_list:
                row = session.get(CardProgressRow, (self.user_id, progress.card_id))
                if row is None:
                    row = CardProgressRow(user_id=self.user_id, card_id=progress.card_id)
                    session.add(row)

                row.status = progress.status.value
                row.last_reviewed = progress.last_reviewed
                row.next_review_date = progress.next_review_date
                row.correct_count = progress.correct_count
                row.incorrect_count = progress.incorrect_count

            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

        logger.info("Saved %d progress records for user %s", len(progress_list), self.user_id)
