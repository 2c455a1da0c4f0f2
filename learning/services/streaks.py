from django.db import transaction
from django.utils import timezone
import structlog
from ..config import MODE_WEIGHT_FACTORS
from ..data.repos import get_or_create_profile_for_update, log_activity
from ..domain.enums import StudyMode
from ..domain.states import StreakState
from ..domain.streaks import update_streak
from ..utils.time import ensure_aware

logger = structlog.get_logger()


def record_session(user_id, mode, completed_count: int, cards_completed: int,
                   xp_earned: int = 0, now=None):
    """
    Close a study session: fold its qualifying completions into the
    learner's streak and append an activity record.

    Only quiz answers qualify, so lessons-mode sessions always count 0.
    Day boundaries follow the configured TIME_ZONE.
    """
    now = ensure_aware(now or timezone.now())
    if mode == StudyMode.LESSONS:
        completed_count = 0
    completed_count = max(0, completed_count)

    logger.info("session_received",
        user_id=str(user_id),
        mode=str(mode),
        completed_count=completed_count,
        cards_completed=cards_completed,
    )

    with transaction.atomic():
        profile = get_or_create_profile_for_update(user_id)
        prior = StreakState.from_values(
            streak_count=profile.streak_count,
            last_streak_date=profile.last_streak_date,
            questions_completed_today=profile.questions_completed_today,
        )
        state = update_streak(prior, completed_count, timezone.localtime(now))

        profile.streak_count = state.streak_count
        profile.last_streak_date = state.last_streak_date
        profile.questions_completed_today = state.questions_completed_today
        profile.save(update_fields=[
            "streak_count", "last_streak_date", "questions_completed_today", "updated_at",
        ])

        log_activity(
            user_id,
            mode,
            {
                "mode": str(mode),
                "cards_completed": cards_completed,
                "questions_completed": completed_count,
                "xp_earned": xp_earned,
                "weighted_effort": cards_completed * MODE_WEIGHT_FACTORS[str(mode)],
            },
            now,
        )

    logger.info("streak_updated",
        user_id=str(user_id),
        previous_streak=prior.streak_count,
        streak_count=state.streak_count,
        last_streak_date=state.last_streak_date.isoformat(),
        questions_completed_today=state.questions_completed_today,
    )
    return profile
