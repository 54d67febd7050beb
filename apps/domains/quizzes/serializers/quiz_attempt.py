# apps/domains/quizzes/serializers/quiz_attempt.py
from rest_framework import serializers

from apps.domains.quizzes.models import QuizAttempt


class QuizAttemptSerializer(serializers.ModelSerializer):
    quiz_id = serializers.UUIDField(read_only=True)
    student_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = QuizAttempt
        fields = (
            "id",
            "quiz_id",
            "student_id",
            "responses",
            "is_submitted",
            "submission_status",
            "submitted_at",
            "ip",
            "violations",
            "started_at",
            "ends_at",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields
