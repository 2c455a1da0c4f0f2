from enum import IntEnum

from django.db import models


class Quality(IntEnum):
    BLACKOUT = 1
    HARD = 2
    MEDIUM = 3
    GOOD = 4
    EASY = 5


QUALITY_LABELS = {
    Quality.BLACKOUT: "forgot",
    Quality.HARD: "hard",
    Quality.MEDIUM: "medium",
    Quality.GOOD: "good",
    Quality.EASY: "easy",
}

# Three-button lesson UI
LESSON_CHOICES = {
    "hard": Quality.BLACKOUT,
    "medium": Quality.MEDIUM,
    "easy": Quality.EASY,
}
LESSON_QUALITIES = {int(q) for q in LESSON_CHOICES.values()}


class CardType(models.TextChoices):
    LESSON = "lesson"
    QUIZ = "quiz"


class StudyMode(models.TextChoices):
    LEARN = "learn"
    LESSONS = "lessons"
    QUIZ = "quiz"
