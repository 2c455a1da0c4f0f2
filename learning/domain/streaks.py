from datetime import date, datetime
from typing import Union

from .states import StreakState
from ..config import MINIMUM_DAILY_QUESTIONS


def to_calendar_date(value: Union[date, datetime]) -> date:
    """Drop the time of day; aware datetimes keep their own zone's date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def meets_daily_minimum(count: int) -> bool:
    return count >= MINIMUM_DAILY_QUESTIONS


def update_streak(prior: StreakState, completed_count: int, now: Union[date, datetime]) -> StreakState:
    """
    Fold one study-session event into the learner's streak.

    A day counts once its running total reaches MINIMUM_DAILY_QUESTIONS.
    Same day: the streak grows only on the call that crosses the threshold.
    Next day: a streak earned yesterday is kept while today is still short,
    and grows as soon as today qualifies. Any longer gap starts over.
    """
    completed_count = max(0, int(completed_count or 0))
    today = to_calendar_date(now)

    if prior.last_streak_date is None:
        return StreakState(
            streak_count=1 if meets_daily_minimum(completed_count) else 0,
            last_streak_date=today,
            questions_completed_today=completed_count,
        )

    diff_days = abs((today - to_calendar_date(prior.last_streak_date)).days)

    if diff_days == 0:
        total = prior.questions_completed_today + completed_count
        crossed = not meets_daily_minimum(prior.questions_completed_today) and meets_daily_minimum(total)
        return StreakState(
            streak_count=prior.streak_count + 1 if crossed else prior.streak_count,
            last_streak_date=today,
            questions_completed_today=total,
        )

    if diff_days == 1:
        met_yesterday = meets_daily_minimum(prior.questions_completed_today)
        met_today = meets_daily_minimum(completed_count)
        if met_yesterday and met_today:
            streak = prior.streak_count + 1
        elif met_yesterday:
            # still pending today's activity
            streak = prior.streak_count
        else:
            streak = 1 if met_today else 0
        return StreakState(
            streak_count=streak,
            last_streak_date=today,
            questions_completed_today=completed_count,
        )

    return StreakState(
        streak_count=1 if meets_daily_minimum(completed_count) else 0,
        last_streak_date=today,
        questions_completed_today=completed_count,
    )
