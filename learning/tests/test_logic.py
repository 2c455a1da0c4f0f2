import pytest
from datetime import datetime, timedelta, timezone

from learning.domain import ReviewState, compute_next_review
from learning.domain.logic import (
    clamp_quality,
    is_correct,
    is_mastered,
    lesson_choice_to_quality,
    next_consecutive_correct,
    quality_label,
    quiz_result_to_quality,
    round_half_up,
    xp_for_review,
)

NOW = datetime(2024, 3, 10, 14, 30, tzinfo=timezone.utc)


def state(interval, reps, ease):
    return ReviewState(interval_days=interval, repetitions=reps, ease_factor=ease)


def test_first_easy_review():
    """New item rated 5: interval 1, one repetition, ease unchanged."""
    new = compute_next_review(5, ReviewState(), NOW)
    assert new.interval_days == 1
    assert new.repetitions == 1
    assert new.ease_factor == pytest.approx(2.5)
    assert new.next_review_at == NOW + timedelta(days=1)


def test_failure_after_two_successes_resets():
    new = compute_next_review(2, state(6, 2, 2.5), NOW)
    assert new.interval_days == 1
    assert new.repetitions == 0
    assert new.ease_factor == pytest.approx(1.96)
    assert new.ease_factor < 2.5


@pytest.mark.parametrize("quality,expected", [
    (1, 1.7),
    (2, 1.96),
    (3, 2.18),
    (4, 2.36),
    (5, 2.5),
])
def test_ease_factor_adapts_on_every_review(quality, expected):
    assert compute_next_review(quality, ReviewState(), NOW).ease_factor == pytest.approx(expected)


def test_ease_factor_floor_after_repeated_failures():
    current = ReviewState()
    for _ in range(10):
        current = compute_next_review(1, current, NOW)
        assert current.ease_factor >= 1.3
    assert current.ease_factor == pytest.approx(1.3)


@pytest.mark.parametrize("quality", [1, 2])
@pytest.mark.parametrize("reps,interval", [(0, 0), (1, 1), (4, 40), (9, 200)])
def test_failure_always_resets(quality, reps, interval):
    new = compute_next_review(quality, state(interval, reps, 2.1), NOW)
    assert new.repetitions == 0
    assert new.interval_days == 1


@pytest.mark.parametrize("quality", [3, 4, 5])
def test_success_tiers(quality):
    first = compute_next_review(quality, state(0, 0, 2.5), NOW)
    assert (first.repetitions, first.interval_days) == (1, 1)

    second = compute_next_review(quality, state(1, 1, 2.5), NOW)
    assert (second.repetitions, second.interval_days) == (2, 6)

    third = compute_next_review(quality, state(6, 2, 2.5), NOW)
    assert third.repetitions == 3
    assert third.interval_days == round_half_up(6 * third.ease_factor)


def test_third_success_multiplies_interval():
    assert compute_next_review(5, state(6, 2, 2.5), NOW).interval_days == 15
    assert compute_next_review(4, state(6, 2, 2.5), NOW).interval_days == 14  # 6 * 2.36


def test_interval_rounds_half_up():
    assert compute_next_review(5, state(5, 2, 2.5), NOW).interval_days == 13


def test_next_review_keeps_time_of_day():
    new = compute_next_review(5, state(6, 2, 2.5), NOW)
    assert new.next_review_at == datetime(2024, 3, 25, 14, 30, tzinfo=timezone.utc)


def test_interval_at_least_one_once_repeated():
    current = ReviewState()
    for quality in [3, 3, 3, 3, 3, 3]:
        current = compute_next_review(quality, current, NOW)
        assert current.repetitions >= 1
        assert current.interval_days >= 1


def test_pure_function():
    prior = state(6, 2, 2.5)
    assert compute_next_review(4, prior, NOW) == compute_next_review(4, prior, NOW)
    assert prior == state(6, 2, 2.5)


def test_out_of_range_quality_is_clamped():
    assert compute_next_review(0, ReviewState(), NOW) == compute_next_review(1, ReviewState(), NOW)
    assert compute_next_review(9, ReviewState(), NOW) == compute_next_review(5, ReviewState(), NOW)
    assert clamp_quality(-3) == 1
    assert clamp_quality(7) == 5


def test_missing_fields_fall_back_to_defaults():
    assert ReviewState.from_values(None, None, None) == ReviewState()


def test_consecutive_correct_is_left_to_caller():
    prior = ReviewState(interval_days=6, repetitions=2, consecutive_correct=4)
    assert compute_next_review(1, prior, NOW).consecutive_correct == 4


def test_quiz_and_lesson_quality_mapping():
    assert quiz_result_to_quality(True) == 5
    assert quiz_result_to_quality(False) == 2
    assert [lesson_choice_to_quality(c) for c in ("hard", "medium", "easy")] == [1, 3, 5]
    assert quality_label(2) == "hard"


def test_mastery_tracking():
    streak = 0
    for correct in [True, True, False, True, True, True]:
        streak = next_consecutive_correct(streak, correct)
    assert streak == 3
    assert is_mastered(streak)
    assert not is_mastered(2)
    assert is_correct(3) and not is_correct(2)


def test_xp_ignores_quality():
    assert {xp_for_review(q) for q in range(1, 6)} == {10}
