from dataclasses import dataclass
from django.db import IntegrityError, transaction
from django.utils import timezone
import structlog
from ..data.repos import (
    due_card_ids,
    get_existing_idempotent,
    get_or_create_profile_for_update,
    get_or_create_schedule_for_update,
    persist_review,
    progress_counts,
)
from ..domain.logic import (
    clamp_quality,
    compute_next_review,
    is_correct,
    is_mastered,
    next_consecutive_correct,
    round_half_up,
    xp_for_review,
)
from ..domain.states import ReviewState
from ..utils.time import ensure_aware, to_local_iso

logger = structlog.get_logger()


@dataclass
class ReviewOutcome:
    user_id: object
    card_id: object
    quality: int
    interval_days: int
    repetitions: int
    ease_factor: float
    consecutive_correct: int
    next_review_at: object
    xp_earned: int
    mastered: bool
    idempotent: bool

    @classmethod
    def from_log(cls, log, idempotent):
        return cls(
            user_id=log.user_id,
            card_id=log.card_id,
            quality=log.quality,
            interval_days=log.interval_days,
            repetitions=log.repetitions,
            ease_factor=log.ease_factor,
            consecutive_correct=log.consecutive_correct,
            next_review_at=log.next_review_at,
            xp_earned=log.xp_earned,
            mastered=is_mastered(log.consecutive_correct),
            idempotent=idempotent,
        )


def _reuse(log):
    logger.info("idempotent_reuse",
        user_id=str(log.user_id),
        card_id=str(log.card_id),
        next_review_utc=log.next_review_at.isoformat(),
        next_review_local=to_local_iso(log.next_review_at),
    )
    return ReviewOutcome.from_log(log, idempotent=True)


def record_review(user_id, card_id, card_type, quality: int, idempotency_key: str, now=None):
    """
    Apply one review event to the (user, card) schedule.

    The schedule row stays locked from read to write, so concurrent
    submissions for the same card are applied one after the other. A
    repeated ``idempotency_key`` returns the stored result unchanged.
    """
    quality = clamp_quality(quality)
    logger.info("review_received",
        user_id=str(user_id),
        card_id=str(card_id),
        card_type=str(card_type),
        quality=quality,
        idempotency_key=idempotency_key,
    )

    # Fast path: return previous result if same idempotency_key
    existing = get_existing_idempotent(user_id, card_id, idempotency_key)
    if existing:
        return _reuse(existing)

    now = ensure_aware(now or timezone.now())
    try:
        with transaction.atomic():
            sched = get_or_create_schedule_for_update(user_id, card_id, card_type)

            # A duplicate may have committed while we waited for the lock
            existing = get_existing_idempotent(user_id, card_id, idempotency_key)
            if existing:
                return _reuse(existing)

            prior = ReviewState.from_values(
                interval_days=sched.interval_days,
                repetitions=sched.repetitions,
                ease_factor=sched.ease_factor,
                consecutive_correct=sched.consecutive_correct,
            )
            state = compute_next_review(quality, prior, now)

            sched.card_type = card_type
            sched.interval_days = state.interval_days
            sched.repetitions = state.repetitions
            sched.ease_factor = state.ease_factor
            sched.next_review_at = state.next_review_at
            sched.consecutive_correct = next_consecutive_correct(
                prior.consecutive_correct, is_correct(quality)
            )
            sched.last_review_at = now
            sched.save()

            xp = xp_for_review(quality)
            profile = get_or_create_profile_for_update(user_id)
            profile.xp += xp
            profile.save(update_fields=["xp", "updated_at"])

            log = persist_review(
                user_id, card_id, quality, idempotency_key, sched, xp, now
            )
    except IntegrityError:
        # Duplicate idempotency key: schedule and XP writes were rolled back
        existing = get_existing_idempotent(user_id, card_id, idempotency_key)
        if existing is None:
            raise
        return _reuse(existing)

    logger.info("review_scheduled",
        user_id=str(user_id),
        card_id=str(card_id),
        interval_days=log.interval_days,
        repetitions=log.repetitions,
        ease_factor=log.ease_factor,
        consecutive_correct=log.consecutive_correct,
        xp_earned=log.xp_earned,
        next_review_utc=log.next_review_at.isoformat(),
        next_review_local=to_local_iso(log.next_review_at),
    )

    return ReviewOutcome.from_log(log, idempotent=False)


def learner_progress(user_id, now=None):
    """Mastered, due and reviewed counts, plus the share of reviewed cards mastered."""
    counts = progress_counts(user_id, ensure_aware(now or timezone.now()))
    reviewed = counts["reviewed"]
    return {
        **counts,
        "completion_rate": round_half_up(counts["mastered"] * 100 / reviewed) if reviewed else 0,
    }
