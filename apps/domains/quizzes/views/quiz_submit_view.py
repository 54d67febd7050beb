# PATH: apps/domains/quizzes/views/quiz_submit_view.py
"""
최종 제출 진입점

설계 원칙:
- ❌ draft(Redis) 읽기 금지, body.responses 만 기록
- ✔ 검증/커밋은 QuizSubmissionService.finalize 단일 진실
- ✔ 내부 오류 메시지는 로그에만
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from apps.api.common.client_ip import get_client_ip
from apps.domains.quizzes.exceptions import QuizWorkflowError
from apps.domains.quizzes.serializers.quiz_attempt import QuizAttemptSerializer
from apps.domains.quizzes.serializers.quiz_request import QuizSubmitSerializer
from apps.domains.quizzes.services import QuizSubmissionService
from apps.domains.quizzes.views.base import (
    StudentQuizAPIMixin,
    error_response,
    workflow_error_response,
)

logger = logging.getLogger(__name__)


class QuizSubmitView(StudentQuizAPIMixin, APIView):
    """
    POST /api/v1/quiz/submit/

    body:
    {
        "quizId": "<uuid>",
        "responses": {"<questionId>": <answer>, ...},
        "violations": "tab-switch x2"   # optional
    }
    """

    @swagger_auto_schema(request_body=QuizSubmitSerializer)
    def post(self, request):
        serializer = QuizSubmitSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid request: missing quizId or responses",
                status.HTTP_400_BAD_REQUEST,
                fields=serializer.errors,
            )
        data = serializer.validated_data

        client_ip = get_client_ip(request)

        try:
            attempt = QuizSubmissionService.finalize(
                student_id=request.user.pk,
                quiz_id=data["quizId"],
                responses=data["responses"],
                violations=data.get("violations"),
                client_address=client_ip,
            )
        except QuizWorkflowError as e:
            logger.info(
                "quiz submit rejected quiz_id=%s student_id=%s reason=%s",
                data["quizId"],
                request.user.pk,
                e.message,
            )
            return workflow_error_response(e)
        except Exception:
            logger.exception(
                "quiz submit failed quiz_id=%s student_id=%s",
                data["quizId"],
                request.user.pk,
            )
            return error_response("Failed to save quiz", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            {"success": True, "data": QuizAttemptSerializer(attempt).data},
            status=status.HTTP_200_OK,
        )
