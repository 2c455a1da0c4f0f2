from .logic import compute_next_review
from .states import ReviewState, StreakState
from .streaks import update_streak

__all__ = [
    "compute_next_review",
    "update_streak",
    "ReviewState",
    "StreakState",
]
