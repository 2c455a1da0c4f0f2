from django.db import transaction, IntegrityError
from django.db.models import Count, Q
from django.utils import timezone
from ..config import MASTERY_THRESHOLD
from .models import Activity, LearnerProfile, ReviewLog, ReviewSchedule


def _lock_or_create(model, lookup, defaults):
    """
    Fetch a row keyed by ``lookup`` and lock it for update. Create it if
    missing; when a concurrent insert wins the unique constraint, lock the
    winner's row instead. Must run inside ``transaction.atomic()``.
    """
    try:
        return model.objects.select_for_update().get(**lookup)
    except model.DoesNotExist:
        pass
    try:
        with transaction.atomic():
            created = model.objects.create(**lookup, **defaults)
    except IntegrityError:
        return model.objects.select_for_update().get(**lookup)
    return model.objects.select_for_update().get(pk=created.pk)


def get_or_create_schedule_for_update(user_id, card_id, card_type):
    return _lock_or_create(
        ReviewSchedule,
        {"user_id": user_id, "card_id": card_id},
        {"card_type": card_type, "next_review_at": timezone.now()},
    )


def get_or_create_profile_for_update(user_id):
    return _lock_or_create(LearnerProfile, {"user_id": user_id}, {})


def get_profile(user_id):
    return LearnerProfile.objects.filter(user_id=user_id).first()


def get_existing_idempotent(user_id, card_id, idem_key):
    return ReviewLog.objects.filter(
        user_id=user_id, card_id=card_id, idempotency_key=idem_key
    ).first()


def persist_review(user_id, card_id, quality, idem_key, sched, xp_earned, created_at):
    """
    Insert ReviewLog. A duplicate idempotency key raises IntegrityError so
    the caller's whole transaction rolls back.
    """
    return ReviewLog.objects.create(
        user_id=user_id, card_id=card_id, quality=quality,
        idempotency_key=idem_key, created_at=created_at,
        interval_days=sched.interval_days,
        repetitions=sched.repetitions,
        ease_factor=sched.ease_factor,
        consecutive_correct=sched.consecutive_correct,
        next_review_at=sched.next_review_at,
        xp_earned=xp_earned,
    )


def log_activity(user_id, mode, details, created_at):
    return Activity.objects.create(
        user_id=user_id, mode=mode, details=details, created_at=created_at
    )


def due_card_ids(user_id, until):
    return list(
        ReviewSchedule.objects.filter(user_id=user_id, next_review_at__lte=until)
        .order_by("next_review_at")
        .values_list("card_id", flat=True)
    )


def progress_counts(user_id, now):
    """Reviewed, mastered and due-now card counts for one learner."""
    return ReviewSchedule.objects.filter(user_id=user_id).aggregate(
        reviewed=Count("id"),
        mastered=Count("id", filter=Q(consecutive_correct__gte=MASTERY_THRESHOLD)),
        due=Count("id", filter=Q(next_review_at__lte=now)),
    )
