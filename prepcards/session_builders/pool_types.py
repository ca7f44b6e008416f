"""
Typed pool models shared across session builders.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Literal


PoolName = Literal["struggling", "new", "mastered_review", "other"]


@dataclass
class PoolState:
    """
    Launch-scoped pool state for an adaptive session.

    Pools hold card ids in candidate-pool order; card_map resolves them
    back to the caller's card objects.
    """
    card_map: dict[str, Any]
    struggling: list[str] = field(default_factory=list)
    new: list[str] = field(default_factory=list)
    mastered_review: list[str] = field(default_factory=list)
    other: list[str] = field(default_factory=list)

    def pool(self, name: PoolName) -> list[str]:
        return getattr(self, name)

    def move_to(self, card_id: str, target: PoolName) -> None:
        """
        Move a card_id to the end of the target pool, removing it from others.
        """
        for name in ("struggling", "new", "mastered_review", "other"):
            ids = self.pool(name)
            if card_id in ids:
                ids.remove(card_id)
        self.pool(target).append(card_id)

    def cards(self, card_ids: list[str]) -> list[Any]:
        return [self.card_map[card_id] for card_id in card_ids if card_id in self.card_map]
