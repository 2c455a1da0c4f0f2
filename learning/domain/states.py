from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..config import DEFAULT_EASE_FACTOR


@dataclass(frozen=True)
class ReviewState:
    """Scheduling state of one learning item for one learner."""

    interval_days: int = 0
    repetitions: int = 0
    ease_factor: float = DEFAULT_EASE_FACTOR
    next_review_at: Optional[datetime] = None
    consecutive_correct: int = 0

    @classmethod
    def from_values(cls, interval_days=None, repetitions=None, ease_factor=None,
                    next_review_at=None, consecutive_correct=None):
        # Missing fields mean the item has never been reviewed.
        return cls(
            interval_days=interval_days or 0,
            repetitions=repetitions or 0,
            ease_factor=ease_factor or DEFAULT_EASE_FACTOR,
            next_review_at=next_review_at,
            consecutive_correct=consecutive_correct or 0,
        )


@dataclass(frozen=True)
class StreakState:
    """Daily engagement state of one learner."""

    streak_count: int = 0
    last_streak_date: Optional[date] = None
    questions_completed_today: int = 0

    @classmethod
    def from_values(cls, streak_count=None, last_streak_date=None,
                    questions_completed_today=None):
        return cls(
            streak_count=streak_count or 0,
            last_streak_date=last_streak_date,
            questions_completed_today=questions_completed_today or 0,
        )
