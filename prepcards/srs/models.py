"""
SQLAlchemy ORM Models for the Progress Database

Defines the CardProgress table used by the SQL progress repository.
"""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CardProgressRow(Base):
    """
    Persistent progress for a single card, scoped to one user.
    """
    __tablename__ = 'card_progress'

    # Primary key: composite of user_id and card_id
    user_id = Column(String(255), primary_key=True, nullable=False)
    card_id = Column(String(255), primary_key=True, nullable=False)

    status = Column(String(20), nullable=False)  # new, learning, review, mastered

    # Review tracking
    last_reviewed = Column(DateTime(timezone=True), nullable=False)
    next_review_date = Column(DateTime(timezone=True), nullable=True)  # NULL until first review
    correct_count = Column(Integer, nullable=False, default=0)
    incorrect_count = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<CardProgressRow({self.user_id}, {self.card_id}, {self.status})>"
