# Django discovers models through <app>.models
from .data.models import Activity, LearnerProfile, ReviewLog, ReviewSchedule  # noqa: F401
