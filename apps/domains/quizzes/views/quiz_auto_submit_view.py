# PATH: apps/domains/quizzes/views/quiz_auto_submit_view.py
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from apps.domains.quizzes.exceptions import QuizWorkflowError
from apps.domains.quizzes.serializers.quiz_request import QuizIdSerializer
from apps.domains.quizzes.services import QuizSubmissionService
from apps.domains.quizzes.views.base import (
    StudentQuizAPIMixin,
    error_response,
    workflow_error_response,
)

logger = logging.getLogger(__name__)


class QuizAutoSubmitView(StudentQuizAPIMixin, APIView):
    """
    POST /api/v1/quiz/auto-submit/

    클라이언트 타이머 만료 시 호출. 서버 시각 기준으로 개별 마감이 지났고
    quiz.auto_submit 이 켜져 있으면 AUTO_SUBMITTED 로 닫는다.
    """

    @swagger_auto_schema(request_body=QuizIdSerializer)
    def post(self, request):
        serializer = QuizIdSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid request: missing quizId",
                status.HTTP_400_BAD_REQUEST,
                fields=serializer.errors,
            )
        quiz_id = serializer.validated_data["quizId"]

        try:
            auto_submitted = QuizSubmissionService.auto_submit_if_expired(
                student_id=request.user.pk,
                quiz_id=quiz_id,
            )
        except QuizWorkflowError as e:
            return workflow_error_response(e)
        except Exception:
            logger.exception("auto submit check failed quiz_id=%s student_id=%s", quiz_id, request.user.pk)
            return error_response("Failed to check auto submit", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"autoSubmitted": auto_submitted}, status=status.HTTP_200_OK)
