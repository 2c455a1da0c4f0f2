import math
from dataclasses import replace
from datetime import datetime, timedelta

from .enums import LESSON_CHOICES, QUALITY_LABELS, Quality
from .states import ReviewState
from ..config import (
    FAILED_INTERVAL_DAYS,
    FIRST_INTERVAL_DAYS,
    MASTERY_THRESHOLD,
    MAX_QUALITY,
    MIN_EASE_FACTOR,
    MIN_QUALITY,
    PASSING_QUALITY,
    QUIZ_CORRECT_QUALITY,
    QUIZ_INCORRECT_QUALITY,
    SECOND_INTERVAL_DAYS,
    XP_PER_REVIEW,
)


def clamp_quality(quality: int) -> int:
    """Out-of-range ratings are pulled into [1, 5]; 0 behaves like 1."""
    return max(MIN_QUALITY, min(MAX_QUALITY, int(quality)))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def next_ease_factor(ease_factor: float, quality: int) -> float:
    # SM-2 works on a 0-5 scale, ratings come in on 1-5
    q = max(0, quality - 1)
    miss = 5 - q
    return max(MIN_EASE_FACTOR, ease_factor + (0.1 - miss * (0.08 + miss * 0.02)))


def compute_next_review(quality: int, state: ReviewState, now: datetime) -> ReviewState:
    """
    SM-2 step for a single review event.

    The ease factor adapts on every review, failed ones included. A failed
    review (quality < 3) resets repetitions and schedules the item for the
    next day. ``next_review_at`` is ``now`` plus the new interval, keeping
    the time of day. ``consecutive_correct`` is carried over untouched; the
    caller owns it.
    """
    quality = clamp_quality(quality)
    ease = next_ease_factor(state.ease_factor, quality)

    if quality < PASSING_QUALITY:
        repetitions = 0
        interval = FAILED_INTERVAL_DAYS
    else:
        repetitions = state.repetitions + 1
        if repetitions == 1:
            interval = FIRST_INTERVAL_DAYS
        elif repetitions == 2:
            interval = SECOND_INTERVAL_DAYS
        else:
            interval = round_half_up(state.interval_days * ease)

    return replace(
        state,
        interval_days=interval,
        repetitions=repetitions,
        ease_factor=ease,
        next_review_at=now + timedelta(days=interval),
    )


def quiz_result_to_quality(is_correct: bool) -> int:
    return QUIZ_CORRECT_QUALITY if is_correct else QUIZ_INCORRECT_QUALITY


def lesson_choice_to_quality(choice: str) -> int:
    return int(LESSON_CHOICES[choice])


def is_correct(quality: int) -> bool:
    return clamp_quality(quality) >= PASSING_QUALITY


def next_consecutive_correct(previous: int, correct: bool) -> int:
    return (previous or 0) + 1 if correct else 0


def is_mastered(consecutive_correct: int) -> bool:
    return (consecutive_correct or 0) >= MASTERY_THRESHOLD


def xp_for_review(quality: int) -> int:
    # Flat award; the rating does not change it.
    return XP_PER_REVIEW


def quality_label(quality: int) -> str:
    return QUALITY_LABELS[Quality(clamp_quality(quality))]
