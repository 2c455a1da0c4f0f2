from django.urls import path
from .views import DueCardsView, ProgressView, ReviewView, SessionView, StreakView

urlpatterns = [
    path("reviews", ReviewView.as_view(), name="review"),
    path("sessions", SessionView.as_view(), name="session"),
    path("users/<uuid:user_id>/due-cards", DueCardsView.as_view(), name="due-cards"),
    path("users/<uuid:user_id>/streak", StreakView.as_view(), name="streak"),
    path("users/<uuid:user_id>/progress", ProgressView.as_view(), name="progress"),
]
