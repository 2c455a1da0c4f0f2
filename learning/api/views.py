from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..data.repos import get_profile
from ..domain.logic import quality_label
from ..services.reviews import due_card_ids, learner_progress, record_review
from ..services.streaks import record_session
from ..utils.time import to_local_iso
from .serializers import DueQuerySerializer, ReviewInSerializer, SessionInSerializer

base_logger = structlog.get_logger()


def _streak_payload(user_id, profile):
    return {
        "user_id": str(user_id),
        "streak_count": profile.streak_count if profile else 0,
        "last_streak_date": (
            profile.last_streak_date.isoformat()
            if profile and profile.last_streak_date else None
        ),
        "questions_completed_today": profile.questions_completed_today if profile else 0,
        "xp": profile.xp if profile else 0,
    }


class ReviewView(views.APIView):
    def post(self, request):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        user_id = s.validated_data["user_id"]
        card_id = s.validated_data["card_id"]
        card_type = s.validated_data["card_type"]
        quality = s.validated_data["quality"]
        idem = s.validated_data["idempotency_key"]

        outcome = record_review(user_id, card_id, card_type, quality, idem)
        status_code = status.HTTP_200_OK if outcome.idempotent else status.HTTP_201_CREATED

        logger.info(
            "review_api_response",
            user_id=str(user_id),
            card_id=str(card_id),
            quality=quality,
            idempotent=outcome.idempotent,
            interval_days=outcome.interval_days,
            next_review_utc=outcome.next_review_at.isoformat(),
            status=status_code,
        )

        return Response(
            {
                "interval_days": outcome.interval_days,
                "repetitions": outcome.repetitions,
                "ease_factor": outcome.ease_factor,
                "next_review_utc": outcome.next_review_at.isoformat(),
                "next_review_local": to_local_iso(outcome.next_review_at),
                "consecutive_correct": outcome.consecutive_correct,
                "mastered": outcome.mastered,
                "xp_earned": outcome.xp_earned,
                "quality_label": quality_label(outcome.quality),
                "idempotent": outcome.idempotent,
            },
            status=status_code,
        )


class SessionView(views.APIView):
    def post(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = SessionInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        profile = record_session(
            data["user_id"],
            data["mode"],
            data["completed_count"],
            data["cards_completed"],
            xp_earned=data["xp_earned"],
        )

        logger.info(
            "session_api_response",
            user_id=str(data["user_id"]),
            mode=data["mode"],
            streak_count=profile.streak_count,
            questions_completed_today=profile.questions_completed_today,
        )

        return Response(_streak_payload(data["user_id"], profile), status=status.HTTP_201_CREATED)


class StreakView(views.APIView):
    def get(self, request, user_id):
        return Response(_streak_payload(user_id, get_profile(user_id)))


class DueCardsView(views.APIView):
    def get(self, request, user_id):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        until = qs.validated_data["until"]

        results = [str(card_id) for card_id in due_card_ids(user_id, until)]

        logger.info(
            "due_cards_api_response",
            user_id=str(user_id),
            until_utc=until.isoformat(),
            card_count=len(results),
        )

        return Response(
            {
                "user_id": str(user_id),
                "until_utc": until.isoformat(),
                "until_local": to_local_iso(until),
                "card_ids": results,
            }
        )


class ProgressView(views.APIView):
    def get(self, request, user_id):
        progress = learner_progress(user_id)
        base_logger.info("progress_api_response", user_id=str(user_id), **progress)
        return Response({"user_id": str(user_id), **progress})
