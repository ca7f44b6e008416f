"""
SRS Constants and Parameters

All configurable parameters for the scheduling engine in one place.
The default values reproduce the simplified SM-2 schedule used by the
flashcard dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Final


# ---- Card Status ----

class CardStatus(str, Enum):
    """Learning stage of a single card."""
    NEW = "new"             # Never reviewed (or only ever failed)
    LEARNING = "learning"   # Short intervals, not yet graduated
    REVIEW = "review"       # Graduated, intervals grow with each success
    MASTERED = "mastered"   # Long-term material, reviewed sparsely


# ---- Review Outcomes ----

class ReviewOutcome(str, Enum):
    """Learner's self-assessed recall quality for one review."""
    AGAIN = "again"  # Forgot
    HARD = "hard"    # Recalled with difficulty
    GOOD = "good"    # Recalled correctly
    EASY = "easy"    # Recalled effortlessly


# Higher value = studied earlier when other criteria tie
STATUS_PRIORITY: Final[dict[CardStatus, int]] = {
    CardStatus.NEW: 4,
    CardStatus.LEARNING: 3,
    CardStatus.REVIEW: 2,
    CardStatus.MASTERED: 1,
}

# Cards graduate out of LEARNING on GOOD once they reach this many correct answers
GRADUATION_CORRECT_COUNT: Final[int] = 2

SECONDS_PER_DAY: Final[float] = 86400.0


# ---- Scheduling Parameters ----

@dataclass(frozen=True)
class SchedulingConfig:
    """
    Interval parameters for the scheduling engine (all intervals in days).
    """
    initial_interval: float = 1.0
    graduating_interval: float = 1.0
    easy_interval: float = 4.0

    again_multiplier: float = 0.5
    hard_multiplier: float = 1.2
    good_multiplier: float = 2.0
    easy_multiplier: float = 2.5

    min_interval: float = 1.0
    max_interval: float = 365.0

    def __post_init__(self):
        """
        Raises:
            ValueError: On negative parameters or inverted interval bounds
        """
        negative = [f.name for f in fields(self) if getattr(self, f.name) < 0]
        if negative:
            raise ValueError(f"Scheduling parameters must be non-negative: {', '.join(negative)}")
        if self.min_interval > self.max_interval:
            raise ValueError(
                f"min_interval ({self.min_interval}) exceeds max_interval ({self.max_interval})"
            )

    @classmethod
    def from_overrides(cls, **overrides: float) -> "SchedulingConfig":
        """
        Build a config from the defaults plus keyword overrides.

        Raises:
            ValueError: On unknown parameter names or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown scheduling parameters: {', '.join(unknown)}")

        return replace(cls(), **overrides)

    def clamp(self, interval_days: float) -> float:
        """Clamp an interval to [min_interval, max_interval]."""
        return max(self.min_interval, min(interval_days, self.max_interval))


DEFAULT_CONFIG: Final[SchedulingConfig] = SchedulingConfig()


# ---- Adaptive Selection Parameters ----

@dataclass(frozen=True)
class AdaptiveConfig:
    """
    Session mix for adaptive flashcard selection.

    Mastered cards fill whatever the struggling and new buckets leave over.
    """
    struggling_fraction: float = 0.4
    new_fraction: float = 0.5
    struggling_threshold: float = 0.6   # Success rate below this = struggling
    mastered_review_days: int = 30      # Reinforcement cadence for mastered cards


DEFAULT_ADAPTIVE_CONFIG: Final[AdaptiveConfig] = AdaptiveConfig()

DEFAULT_SESSION_SIZE: Final[int] = 20


# ---- Difficulty Progression ----

class DifficultyLevel(str, Enum):
    """Difficulty tiers for flashcard content, easiest first."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


DIFFICULTY_ORDER: Final[list[DifficultyLevel]] = [
    DifficultyLevel.BEGINNER,
    DifficultyLevel.INTERMEDIATE,
    DifficultyLevel.ADVANCED,
    DifficultyLevel.EXPERT,
]

MIN_MASTERED_COUNT: Final[int] = 10
MIN_SUCCESS_RATE: Final[float] = 0.8
