"""
Pool utilities for session builders.

These helpers provide shared, minimal primitives for building and reasoning
about session pools without enforcing a single selection policy.
"""

from __future__ import annotations
from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar

from prepcards.srs.progress import CardProgress, elapsed_days


T = TypeVar("T")


def card_id_of(card: Any) -> str:
    """
    Read a card's id from a model with an `id` attribute or a mapping with an "id" key.
    """
    if isinstance(card, Mapping):
        return card["id"]
    return card.id


def take(items: list[T], fraction: float, target_size: int) -> list[T]:
    """
    Take floor(target_size * fraction) items from the front, capped by availability.
    """
    count = int(target_size * fraction)
    if count <= 0:
        return []
    return items[:count]


def fill_in_order(
    pools: dict[str, list[T]],
    order: list[str],
    target_size: int
) -> list[T]:
    """
    Fill a session by walking pools in order until target_size is reached.
    """
    session: list[T] = []
    for name in order:
        for item in pools.get(name, []):
            if len(session) >= target_size:
                return session
            session.append(item)
    return session


def whole_days_since_review(progress: CardProgress, now: datetime) -> int:
    """Whole days since last review, rounded down (0 if reviewed in the future)."""
    return max(0, int(elapsed_days(progress.last_reviewed, now)))
