"""Session builder modules for adaptive flashcard study."""

from prepcards.session_builders.adaptive_builder import (
    build_adaptive_pool_state,
    classify_card,
    create_adaptive_session,
    generate_adaptive_flashcards,
    update_pool_after_review,
)
from prepcards.session_builders.difficulty import (
    get_recommended_difficulty,
    mastered_success_rate,
    should_progress_difficulty,
)
from prepcards.session_builders.pool_types import PoolState

__all__ = [
    "build_adaptive_pool_state",
    "classify_card",
    "create_adaptive_session",
    "generate_adaptive_flashcards",
    "update_pool_after_review",
    "get_recommended_difficulty",
    "mastered_success_rate",
    "should_progress_difficulty",
    "PoolState",
]
