from django.db import models
from django.utils import timezone

from ..config import DEFAULT_EASE_FACTOR
from ..domain.enums import CardType, StudyMode


class ReviewSchedule(models.Model):
    user_id = models.UUIDField()
    card_id = models.UUIDField()
    card_type = models.CharField(max_length=16, choices=CardType.choices, default=CardType.QUIZ)
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)
    interval_days = models.PositiveIntegerField(default=0)
    repetitions = models.PositiveIntegerField(default=0)
    consecutive_correct = models.PositiveIntegerField(default=0)
    next_review_at = models.DateTimeField(default=timezone.now)  # UTC
    last_review_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "learning"
        unique_together = (("user_id", "card_id"),)
        indexes = [
            models.Index(fields=["user_id", "next_review_at"], name="learning_re_user_id_3f0c1a_idx"),
        ]


class ReviewLog(models.Model):
    user_id = models.UUIDField()
    card_id = models.UUIDField()
    quality = models.SmallIntegerField()
    idempotency_key = models.CharField(max_length=64)
    created_at = models.DateTimeField(default=timezone.now)
    interval_days = models.PositiveIntegerField()
    repetitions = models.PositiveIntegerField()
    ease_factor = models.FloatField()
    consecutive_correct = models.PositiveIntegerField()
    next_review_at = models.DateTimeField()
    xp_earned = models.PositiveIntegerField(default=0)

    class Meta:
        app_label = "learning"
        unique_together = (("user_id", "card_id", "idempotency_key"),)
        indexes = [
            models.Index(fields=["user_id", "card_id", "created_at"], name="learning_re_user_id_8b2d4e_idx"),
        ]


class LearnerProfile(models.Model):
    user_id = models.UUIDField(unique=True)
    xp = models.PositiveIntegerField(default=0)
    streak_count = models.PositiveIntegerField(default=0)
    last_streak_date = models.DateField(null=True, blank=True)
    questions_completed_today = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "learning"


class Activity(models.Model):
    """Append-only history of study sessions."""

    user_id = models.UUIDField()
    activity_type = models.CharField(max_length=32, default="study_session")
    mode = models.CharField(max_length=16, choices=StudyMode.choices)
    details = models.JSONField(default=dict)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "learning"
        indexes = [
            models.Index(fields=["user_id", "created_at"], name="learning_ac_user_id_5e7a9c_idx"),
        ]
