# PATH: apps/domains/quizzes/views/quiz_answer_view.py
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from apps.domains.quizzes.exceptions import QuizWorkflowError
from apps.domains.quizzes.serializers.quiz_attempt import QuizAttemptSerializer
from apps.domains.quizzes.serializers.quiz_request import QuizAnswerSerializer
from apps.domains.quizzes.services import QuizAttemptService
from apps.domains.quizzes.views.base import (
    StudentQuizAPIMixin,
    error_response,
    workflow_error_response,
)

logger = logging.getLogger(__name__)


class QuizAnswerView(StudentQuizAPIMixin, APIView):
    """
    POST /api/v1/quiz/answer/

    body: {"quizId": "<uuid>", "responsePatch": {"<questionId>": <answer>}}

    진행 중 attempt 에 답안 병합 저장. 제출 후 / 개별 마감 후에는 403.
    """

    @swagger_auto_schema(request_body=QuizAnswerSerializer)
    def post(self, request):
        serializer = QuizAnswerSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid request: missing quizId or responsePatch",
                status.HTTP_400_BAD_REQUEST,
                fields=serializer.errors,
            )
        data = serializer.validated_data

        try:
            attempt = QuizAttemptService.save_answer(
                student=request.user,
                quiz_id=data["quizId"],
                response_patch=data["responsePatch"],
            )
        except QuizWorkflowError as e:
            return workflow_error_response(e)
        except Exception:
            logger.exception(
                "answer save failed quiz_id=%s student_id=%s",
                data["quizId"],
                request.user.pk,
            )
            return error_response("Failed to save response", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            {"success": True, "data": QuizAttemptSerializer(attempt).data},
            status=status.HTTP_200_OK,
        )
