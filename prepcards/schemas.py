"""
Pydantic models for flashcards and persisted progress.

These models define the JSON layout shared with the study UI: camelCase keys
and ISO-8601 timestamps. The scheduling engine itself works on the
CardProgress dataclass; convert at the storage boundary.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from prepcards.srs.constants import CardStatus, DifficultyLevel
from prepcards.srs.progress import CardProgress, as_utc


# ---- Flashcards ----

class Flashcard(BaseModel):
    """A question/answer card. Only id matters to the schedulers."""
    id: str = Field(..., description="Stable card identifier")
    question: str = ""
    answer: str = ""
    category: str = ""
    difficulty: DifficultyLevel = DifficultyLevel.BEGINNER
    tags: list[str] = Field(default_factory=list)


# ---- Progress Records ----

class CardProgressRecord(BaseModel):
    """
    Persisted form of one card's progress.

    Dumped with by_alias=True to get the camelCase keys used on disk.
    """
    card_id: str = Field(..., alias="cardId")
    status: CardStatus = CardStatus.NEW
    last_reviewed: datetime = Field(..., alias="lastReviewed")
    correct_count: int = Field(default=0, ge=0, alias="correctCount")
    incorrect_count: int = Field(default=0, ge=0, alias="incorrectCount")
    next_review_date: Optional[datetime] = Field(default=None, alias="nextReviewDate")

    class Config:
        populate_by_name = True

    @classmethod
    def from_progress(cls, progress: CardProgress) -> "CardProgressRecord":
        return cls(
            card_id=progress.card_id,
            status=progress.status,
            last_reviewed=progress.last_reviewed,
            correct_count=progress.correct_count,
            incorrect_count=progress.incorrect_count,
            next_review_date=progress.next_review_date,
        )

    def to_progress(self) -> CardProgress:
        return CardProgress(
            card_id=self.card_id,
            status=self.status,
            last_reviewed=as_utc(self.last_reviewed),
            correct_count=self.correct_count,
            incorrect_count=self.incorrect_count,
            next_review_date=as_utc(self.next_review_date),
        )


class ProgressDocument(BaseModel):
    """Top-level JSON document holding a learner's flashcard progress."""
    flashcard_progress: list[CardProgressRecord] = Field(
        default_factory=list, alias="flashcardProgress"
    )

    class Config:
        populate_by_name = True
