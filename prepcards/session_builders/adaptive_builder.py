"""
Adaptive Session Builder - Three-Pool Logic

Creates study sessions from three distinct pools:
1. Struggling pool: Reviewed cards with success rate < 60%, not mastered
2. New pool: Cards never reviewed
3. Mastered-review pool: Mastered cards last reviewed 30+ days ago

Session Logic:
- Fill struggling up to STRUGGLING_FRACTION of the session
- Fill new up to NEW_FRACTION of the session
- Top up the remainder from mastered-review
- Slots a pool cannot fill stay empty (no cross-pool backfill)
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from prepcards.logging_config import get_logger
from prepcards.session_builders.pool_types import PoolName, PoolState
from prepcards.session_builders.pool_utils import (
    card_id_of,
    fill_in_order,
    take,
    whole_days_since_review,
)
from prepcards.srs.constants import (
    AdaptiveConfig,
    CardStatus,
    DEFAULT_ADAPTIVE_CONFIG,
    DEFAULT_SESSION_SIZE,
)
from prepcards.srs.progress import CardProgress

logger = get_logger(__name__)


def classify_card(
    progress: Optional[CardProgress],
    now: datetime,
    config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG
) -> PoolName:
    """
    Decide which adaptive pool a card belongs to.

    Args:
        progress: The card's progress, or None if never reviewed
        now: Reference time for the mastered-review cadence
        config: Adaptive selection parameters

    Returns:
        "new", "struggling", "mastered_review" or "other" (not selectable)
    """
    if progress is None:
        return "new"

    if progress.status == CardStatus.MASTERED:
        if whole_days_since_review(progress, now) >= config.mastered_review_days:
            return "mastered_review"
        return "other"

    if progress.success_rate < config.struggling_threshold:
        return "struggling"
    return "other"


def build_adaptive_pool_state(
    pool: Sequence[Any],
    progress_list: list[CardProgress],
    now: Optional[datetime] = None,
    config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG
) -> PoolState:
    """
    Partition candidate cards into adaptive pools.

    Args:
        pool: Candidate cards (objects with .id or mappings with "id")
        progress_list: The learner's progress records
        now: Reference time (defaults to now)
        config: Adaptive selection parameters

    Returns:
        PoolState with card ids per pool, in candidate order.
        Only the first card with a given id is kept.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    progress_by_id = {p.card_id: p for p in progress_list}
    state = PoolState(card_map={})

    for card in pool:
        card_id = card_id_of(card)
        if card_id in state.card_map:
            logger.warning("Skipping repeated card id %s", card_id)
            continue
        state.card_map[card_id] = card
        state.pool(classify_card(progress_by_id.get(card_id), now, config)).append(card_id)

    logger.debug(
        "Adaptive pools: struggling=%d new=%d mastered_review=%d other=%d",
        len(state.struggling),
        len(state.new),
        len(state.mastered_review),
        len(state.other),
    )
    return state


def create_adaptive_session(
    pool_state: PoolState,
    target_count: int = DEFAULT_SESSION_SIZE,
    config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG
) -> list[Any]:
    """
    Create a study session from prepared pools.

    Args:
        pool_state: Launch-scoped pool state
        target_count: Maximum number of cards in the session
        config: Adaptive selection parameters

    Returns:
        Cards ordered struggling, then new, then mastered-review
    """
    if target_count <= 0:
        return []

    session_ids = take(pool_state.struggling, config.struggling_fraction, target_count)
    session_ids += take(pool_state.new, config.new_fraction, target_count)

    remaining = target_count - len(session_ids)
    session_ids += fill_in_order(
        {"mastered_review": pool_state.mastered_review}, ["mastered_review"], remaining
    )

    return pool_state.cards(session_ids)


def generate_adaptive_flashcards(
    pool: Sequence[Any],
    progress_list: list[CardProgress],
    target_count: int = DEFAULT_SESSION_SIZE,
    now: Optional[datetime] = None,
    config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG
) -> list[Any]:
    """
    Select a study set balancing weak cards, new material and reinforcement.

    Args:
        pool: All available cards (objects with .id or mappings with "id")
        progress_list: The learner's progress records
        target_count: Desired session size
        now: Reference time (defaults to now)
        config: Adaptive selection parameters

    Returns:
        At most target_count cards from the pool
    """
    pool_state = build_adaptive_pool_state(pool, progress_list, now=now, config=config)
    session = create_adaptive_session(pool_state, target_count=target_count, config=config)
    logger.debug("Adaptive session: %d of %d requested cards", len(session), max(target_count, 0))
    return session


def update_pool_after_review(
    pool_state: PoolState,
    progress: CardProgress,
    now: Optional[datetime] = None,
    config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG
) -> PoolName:
    """
    Re-file a card after it is reviewed mid-session.

    Returns:
        The pool the card now belongs to
    """
    if now is None:
        now = datetime.now(timezone.utc)

    target = classify_card(progress, now, config)
    if progress.card_id in pool_state.card_map:
        pool_state.move_to(progress.card_id, target)
    return target
