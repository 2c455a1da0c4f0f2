from rest_framework import serializers

from ..config import MAX_QUALITY, MIN_QUALITY
from ..domain.enums import LESSON_CHOICES, LESSON_QUALITIES, CardType, StudyMode
from ..domain.logic import lesson_choice_to_quality, quiz_result_to_quality

class ReviewInSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    card_id = serializers.UUIDField()
    card_type = serializers.ChoiceField(choices=CardType.choices, default=CardType.QUIZ)
    quality = serializers.IntegerField(min_value=MIN_QUALITY, max_value=MAX_QUALITY, required=False)
    choice = serializers.ChoiceField(choices=list(LESSON_CHOICES), required=False)
    correct = serializers.BooleanField(required=False)
    idempotency_key = serializers.CharField(max_length=64)

    def validate(self, attrs):
        if attrs["card_type"] == CardType.QUIZ:
            if "correct" not in attrs or "quality" in attrs or "choice" in attrs:
                raise serializers.ValidationError("Quiz reviews send 'correct' only.")
            # Quiz answers collapse to a fixed rating
            attrs["quality"] = quiz_result_to_quality(attrs.pop("correct"))
            return attrs

        if "correct" in attrs:
            raise serializers.ValidationError("Lesson reviews send 'choice' or 'quality', not 'correct'.")
        if ("quality" in attrs) == ("choice" in attrs):
            raise serializers.ValidationError("Send exactly one of 'quality' or 'choice'.")
        if "choice" in attrs:
            attrs["quality"] = lesson_choice_to_quality(attrs.pop("choice"))
        elif attrs["quality"] not in LESSON_QUALITIES:
            raise serializers.ValidationError(
                {"quality": f"Lesson quality must be one of {sorted(LESSON_QUALITIES)}."}
            )
        return attrs

class SessionInSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    mode = serializers.ChoiceField(choices=StudyMode.choices)
    completed_count = serializers.IntegerField(min_value=0)
    cards_completed = serializers.IntegerField(min_value=0, default=0)
    xp_earned = serializers.IntegerField(min_value=0, default=0)

class DueQuerySerializer(serializers.Serializer):
    until = serializers.DateTimeField()  # ISO-8601
