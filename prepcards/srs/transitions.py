"""
Transitions - Status Machine for the Scheduling Engine

Every (status, outcome) pair maps to exactly one Transition: the status the
card moves to and the rule used to compute its next interval.

Interval rules are data, not code: a base interval taken from the config,
optionally raised to the days elapsed since the last review, optionally
scaled by one of the config multipliers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Final, Optional

from prepcards.srs.constants import (
    CardStatus,
    ReviewOutcome,
    SchedulingConfig,
    GRADUATION_CORRECT_COUNT,
)


@dataclass(frozen=True)
class IntervalRule:
    """
    interval = max(elapsed?, config.<base>) * config.<multiplier>?
    """
    base: str
    multiplier: Optional[str] = None
    uses_elapsed: bool = False

    def compute(self, config: SchedulingConfig, days_elapsed: int) -> float:
        interval = getattr(config, self.base)
        if self.uses_elapsed:
            interval = max(days_elapsed, interval)
        if self.multiplier is not None:
            interval *= getattr(config, self.multiplier)
        return interval

    def describe(self) -> str:
        base = f"max(elapsed, {self.base})" if self.uses_elapsed else self.base
        return f"{base} * {self.multiplier}" if self.multiplier else base


@dataclass(frozen=True)
class Transition:
    """
    Target status and interval rule for one (status, outcome) pair.

    graduates_to is set only where the target depends on the card's history:
    the card moves there instead of next_status once it has accumulated
    enough correct answers (counting the current one).
    """
    next_status: CardStatus
    interval: IntervalRule
    graduates_to: Optional[CardStatus] = None

    def resolve_status(self, correct_count: int) -> CardStatus:
        if self.graduates_to is not None and correct_count + 1 >= GRADUATION_CORRECT_COUNT:
            return self.graduates_to
        return self.next_status


def _elapsed(base: str, multiplier: str) -> IntervalRule:
    return IntervalRule(base=base, multiplier=multiplier, uses_elapsed=True)


_INITIAL = IntervalRule("initial_interval")
_EASY = IntervalRule("easy_interval")


TRANSITIONS: Final[dict[tuple[CardStatus, ReviewOutcome], Transition]] = {
    # ---- NEW ----
    (CardStatus.NEW, ReviewOutcome.AGAIN): Transition(
        CardStatus.NEW, IntervalRule("initial_interval", "again_multiplier")
    ),
    (CardStatus.NEW, ReviewOutcome.HARD): Transition(CardStatus.LEARNING, _INITIAL),
    (CardStatus.NEW, ReviewOutcome.GOOD): Transition(
        CardStatus.LEARNING, IntervalRule("graduating_interval")
    ),
    (CardStatus.NEW, ReviewOutcome.EASY): Transition(CardStatus.LEARNING, _EASY),

    # ---- LEARNING ----
    (CardStatus.LEARNING, ReviewOutcome.AGAIN): Transition(
        CardStatus.LEARNING, _elapsed("initial_interval", "again_multiplier")
    ),
    (CardStatus.LEARNING, ReviewOutcome.HARD): Transition(
        CardStatus.LEARNING, _elapsed("initial_interval", "hard_multiplier")
    ),
    (CardStatus.LEARNING, ReviewOutcome.GOOD): Transition(
        CardStatus.LEARNING,
        _elapsed("initial_interval", "good_multiplier"),
        graduates_to=CardStatus.REVIEW,
    ),
    (CardStatus.LEARNING, ReviewOutcome.EASY): Transition(CardStatus.REVIEW, _EASY),

    # ---- REVIEW ----
    (CardStatus.REVIEW, ReviewOutcome.AGAIN): Transition(CardStatus.LEARNING, _INITIAL),
    (CardStatus.REVIEW, ReviewOutcome.HARD): Transition(
        CardStatus.REVIEW, _elapsed("graduating_interval", "hard_multiplier")
    ),
    (CardStatus.REVIEW, ReviewOutcome.GOOD): Transition(
        CardStatus.REVIEW, _elapsed("graduating_interval", "good_multiplier")
    ),
    (CardStatus.REVIEW, ReviewOutcome.EASY): Transition(
        CardStatus.REVIEW, _elapsed("graduating_interval", "easy_multiplier")
    ),

    # ---- MASTERED ----
    (CardStatus.MASTERED, ReviewOutcome.AGAIN): Transition(CardStatus.LEARNING, _INITIAL),
    (CardStatus.MASTERED, ReviewOutcome.HARD): Transition(
        CardStatus.MASTERED, _elapsed("easy_interval", "hard_multiplier")
    ),
    (CardStatus.MASTERED, ReviewOutcome.GOOD): Transition(
        CardStatus.MASTERED, _elapsed("easy_interval", "good_multiplier")
    ),
    (CardStatus.MASTERED, ReviewOutcome.EASY): Transition(
        CardStatus.MASTERED, _elapsed("easy_interval", "easy_multiplier")
    ),
}


def get_transition(status: CardStatus, outcome: ReviewOutcome) -> Transition:
    """Look up the transition for a (status, outcome) pair."""
    return TRANSITIONS[(CardStatus(status), ReviewOutcome(outcome))]
