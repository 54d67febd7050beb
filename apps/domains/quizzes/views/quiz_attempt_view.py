# PATH: apps/domains/quizzes/views/quiz_attempt_view.py
from __future__ import annotations

from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from apps.domains.quizzes.filters import QuizAttemptFilter
from apps.domains.quizzes.models import QuizAttempt
from apps.domains.quizzes.serializers.quiz_attempt import QuizAttemptSerializer
from apps.domains.quizzes.serializers.quiz_request import QuizIdSerializer
from apps.domains.quizzes.views.base import StudentQuizAPIMixin, error_response
from apps.domains.quizzes.views.quiz_draft_view import QUIZ_ID_PARAM


class QuizResponseView(StudentQuizAPIMixin, APIView):
    """
    GET /api/v1/quiz/response/?quizId=

    본인 attempt 조회. 없으면 {"response": null}
    """

    @swagger_auto_schema(manual_parameters=[QUIZ_ID_PARAM])
    def get(self, request):
        serializer = QuizIdSerializer(data=request.query_params)
        if not serializer.is_valid():
            return error_response(
                "Invalid request: missing quizId",
                status.HTTP_400_BAD_REQUEST,
                fields=serializer.errors,
            )

        attempt = (
            QuizAttempt.objects
            .filter(student=request.user, quiz_id=serializer.validated_data["quizId"])
            .first()
        )
        data = QuizAttemptSerializer(attempt).data if attempt else None
        return Response({"response": data}, status=status.HTTP_200_OK)


class MyQuizAttemptListView(StudentQuizAPIMixin, generics.ListAPIView):
    """
    GET /api/v1/quiz/attempts/?quiz=&is_submitted=&submission_status=
    """

    serializer_class = QuizAttemptSerializer
    filterset_class = QuizAttemptFilter

    def get_queryset(self):
        return QuizAttempt.objects.filter(student=self.request.user).order_by("-created_at")
