# PATH: apps/domains/quizzes/views/quiz_start_view.py
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from apps.api.common.client_ip import get_client_ip
from apps.domains.quizzes.exceptions import QuizWorkflowError
from apps.domains.quizzes.serializers.quiz_attempt import QuizAttemptSerializer
from apps.domains.quizzes.serializers.quiz_request import QuizStartSerializer
from apps.domains.quizzes.services import QuizAttemptService
from apps.domains.quizzes.views.base import (
    StudentQuizAPIMixin,
    error_response,
    workflow_error_response,
)

logger = logging.getLogger(__name__)


class QuizStartView(StudentQuizAPIMixin, APIView):
    """
    POST /api/v1/quiz/start/

    body: {"quizId": "<uuid>", "password": "..."}

    attempt 생성(최초) 또는 재진입. 제출 API는 이 단계가 만든 attempt 를 전제로 한다.
    """

    @swagger_auto_schema(request_body=QuizStartSerializer)
    def post(self, request):
        serializer = QuizStartSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid request: missing quizId",
                status.HTTP_400_BAD_REQUEST,
                fields=serializer.errors,
            )
        data = serializer.validated_data

        try:
            attempt, resumed = QuizAttemptService.start(
                student=request.user,
                quiz_id=data["quizId"],
                password=data.get("password"),
                client_address=get_client_ip(request),
            )
        except QuizWorkflowError as e:
            return workflow_error_response(e)
        except Exception:
            logger.exception(
                "quiz start failed quiz_id=%s student_id=%s",
                data["quizId"],
                request.user.pk,
            )
            return error_response("Failed to start quiz", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            {
                "success": True,
                "resumed": resumed,
                "data": QuizAttemptSerializer(attempt).data,
            },
            status=status.HTTP_200_OK,
        )
