"""
Persistence Layer - File-Based Progress Storage

Defines the repository interface the application uses to load and save
progress records, and a JSON-file implementation of it.

File layout:
    {"flashcardProgress": [{"cardId": ..., "status": ..., "lastReviewed": ISO-8601,
                            "correctCount": ..., "incorrectCount": ...,
                            "nextReviewDate": ISO-8601 | null}, ...]}

The scheduling engine never calls these; callers load, schedule, then save.
"""

from __future__ import annotations
import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol, Union

from pydantic import ValidationError

from prepcards import config
from prepcards.logging_config import get_logger
from prepcards.schemas import CardProgressRecord, ProgressDocument
from prepcards.srs.progress import CardProgress

logger = get_logger(__name__)


class ProgressStoreError(Exception):
    """Raised when stored progress cannot be read back."""


class ProgressRepository(Protocol):
    """Storage interface for a learner's progress records."""

    def load_progress(self) -> list[CardProgress]:
        ...

    def save_progress(self, progress_list: list[CardProgress]) -> None:
        ...


# ---- Serialization ----

def dump_progress(progress_list: list[CardProgress]) -> dict:
    """Convert progress records to a JSON-ready document."""
    document = ProgressDocument(
        flashcard_progress=[CardProgressRecord.from_progress(p) for p in progress_list]
    )
    return document.model_dump(mode="json", by_alias=True)


def parse_progress(data: dict) -> list[CardProgress]:
    """
    Parse a progress document back into records.

    Raises:
        ProgressStoreError: If the document does not validate
    """
    try:
        document = ProgressDocument.model_validate(data)
    except ValidationError as exc:
        raise ProgressStoreError(f"Invalid progress document: {exc}") from exc
    return [record.to_progress() for record in document.flashcard_progress]


# ---- JSON File Repository ----

class JsonProgressRepository:
    """
    Progress stored as a single JSON document on disk.

    A missing file loads as empty progress. Saves write a temporary file
    next to the target and rename it into place.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else config.get_progress_file()

    def load_progress(self) -> list[CardProgress]:
        if not self.path.exists():
            logger.info("No progress file at %s, starting empty", self.path)
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ProgressStoreError(f"Progress file {self.path} is not valid JSON") from exc

        progress_list = parse_progress(data)
        logger.info("Loaded %d progress records from %s", len(progress_list), self.path)
        return progress_list

    def save_progress(self, progress_list: list[CardProgress]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(dump_progress(progress_list), indent=2)

        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info("Saved %d progress records to %s", len(progress_list), self.path)
