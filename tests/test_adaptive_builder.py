import pytest

from prepcards.schemas import Flashcard
from prepcards.session_builders import (
    build_adaptive_pool_state,
    classify_card,
    generate_adaptive_flashcards,
    update_pool_after_review,
)
from prepcards.srs.constants import AdaptiveConfig, CardStatus

from conftest import NOW, make_progress


def cards(prefix, count):
    return [Flashcard(id=f"{prefix}{i}", question=f"Q {prefix}{i}") for i in range(count)]


def struggling(card_id):
    return make_progress(card_id, CardStatus.LEARNING, days_ago=1, correct=1, incorrect=3)


def stale_mastered(card_id, days_ago=45):
    return make_progress(card_id, CardStatus.MASTERED, days_ago=days_ago, correct=10, incorrect=1)


def ids(selection):
    return [card.id for card in selection]


def test_empty_inputs_give_empty_session():
    assert generate_adaptive_flashcards([], [], target_count=20, now=NOW) == []


@pytest.mark.parametrize("target", [0, -3])
def test_non_positive_target_gives_empty_session(target):
    assert generate_adaptive_flashcards(cards("n", 5), [], target_count=target, now=NOW) == []


def test_session_mix_follows_40_50_remainder_split():
    weak = cards("s", 10)
    fresh = cards("n", 10)
    old = cards("m", 10)
    progress = [struggling(c.id) for c in weak] + [stale_mastered(c.id) for c in old]

    session = generate_adaptive_flashcards(old + fresh + weak, progress, target_count=20, now=NOW)

    assert ids(session) == (
        [f"s{i}" for i in range(8)]
        + [f"n{i}" for i in range(10)]
        + ["m0", "m1"]
    )


def test_mastered_cards_absorb_unused_slots():
    weak = cards("s", 2)
    old = cards("m", 30)
    progress = [struggling(c.id) for c in weak] + [stale_mastered(c.id) for c in old]

    session = generate_adaptive_flashcards(weak + old, progress, target_count=10, now=NOW)

    assert ids(session) == ["s0", "s1"] + [f"m{i}" for i in range(8)]


def test_under_supplied_pools_leave_slots_empty():
    fresh = cards("n", 3)

    session = generate_adaptive_flashcards(fresh, [], target_count=20, now=NOW)

    assert ids(session) == ["n0", "n1", "n2"]


@pytest.mark.parametrize("target", [1, 2, 3, 7, 20, 50])
def test_session_never_exceeds_target(target):
    pool = cards("s", 15) + cards("n", 15) + cards("m", 15)
    progress = [struggling(f"s{i}") for i in range(15)] + [stale_mastered(f"m{i}") for i in range(15)]

    session = generate_adaptive_flashcards(pool, progress, target_count=target, now=NOW)

    assert len(session) <= target


def test_mastered_cards_need_thirty_days_since_review():
    pool = cards("m", 2)
    progress = [stale_mastered("m0", days_ago=29.9), stale_mastered("m1", days_ago=30)]

    session = generate_adaptive_flashcards(pool, progress, target_count=10, now=NOW)

    assert ids(session) == ["m1"]


def test_two_card_session_takes_only_the_new_card():
    # 2 slots: floor(0.8) struggling, floor(1.0) new, remainder mastered
    pool = [Flashcard(id="card1"), Flashcard(id="card3"), Flashcard(id="card4")]
    progress = [
        make_progress("card1", CardStatus.MASTERED, correct=10, incorrect=2, due_in_days=0),
        make_progress("card2", CardStatus.MASTERED, correct=8, incorrect=1, due_in_days=0),
        make_progress("card3", CardStatus.LEARNING, correct=3, incorrect=4, due_in_days=0),
    ]

    session = generate_adaptive_flashcards(pool, progress, target_count=2, now=NOW)

    assert ids(session) == ["card4"]


def test_classification():
    assert classify_card(None, NOW) == "new"
    assert classify_card(struggling("x"), NOW) == "struggling"
    assert classify_card(stale_mastered("x"), NOW) == "mastered_review"
    assert classify_card(stale_mastered("x", days_ago=3), NOW) == "other"
    # Mastered cards are never struggling, even with a poor record
    weak_mastered = make_progress("x", CardStatus.MASTERED, days_ago=3, correct=1, incorrect=9)
    assert classify_card(weak_mastered, NOW) == "other"
    # Solid learners are not selected by the adaptive mix
    solid = make_progress("x", CardStatus.REVIEW, days_ago=2, correct=6, incorrect=4)
    assert classify_card(solid, NOW) == "other"


def test_reviewed_card_without_answers_counts_as_struggling():
    # success rate 0 / max(1, 0) == 0
    untouched = make_progress("x", CardStatus.LEARNING)
    assert classify_card(untouched, NOW) == "struggling"


def test_custom_adaptive_config():
    config = AdaptiveConfig(struggling_fraction=0.0, new_fraction=1.0)
    pool = cards("s", 3) + cards("n", 3)
    progress = [struggling(f"s{i}") for i in range(3)]

    session = generate_adaptive_flashcards(pool, progress, target_count=4, now=NOW, config=config)

    assert ids(session) == ["n0", "n1", "n2"]


def test_repeated_card_ids_keep_first_card():
    pool = [
        Flashcard(id="x", question="first"),
        Flashcard(id="x", question="second"),
        Flashcard(id="y", question="other"),
    ]

    session = generate_adaptive_flashcards(pool, [], target_count=4, now=NOW)

    assert [card.question for card in session] == ["first", "other"]


def test_mapping_cards_are_supported():
    pool = [{"id": "a", "question": "?"}, {"id": "b", "question": "?"}]

    session = generate_adaptive_flashcards(pool, [], target_count=4, now=NOW)

    assert session == pool


def test_pool_state_and_review_update():
    pool = cards("n", 2)
    state = build_adaptive_pool_state(pool, [], now=NOW)
    assert state.new == ["n0", "n1"]

    failed = make_progress("n0", CardStatus.NEW, incorrect=1, due_in_days=1)
    target = update_pool_after_review(state, failed, now=NOW)

    assert target == "struggling"
    assert state.new == ["n1"]
    assert state.struggling == ["n0"]
