# PATH: apps/domains/quizzes/views/quiz_draft_view.py
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema

from apps.domains.quizzes.exceptions import QuizWorkflowError
from apps.domains.quizzes.serializers.quiz_request import QuizDraftSerializer, QuizIdSerializer
from apps.domains.quizzes.services import QuizDraftService
from apps.domains.quizzes.views.base import (
    StudentQuizAPIMixin,
    error_response,
    workflow_error_response,
)

logger = logging.getLogger(__name__)

QUIZ_ID_PARAM = openapi.Parameter(
    "quizId",
    openapi.IN_QUERY,
    type=openapi.TYPE_STRING,
    format=openapi.FORMAT_UUID,
    required=True,
)


class QuizDraftView(StudentQuizAPIMixin, APIView):
    """
    POST /api/v1/quiz/draft/   자동저장 (Redis, last-write-wins)
    GET  /api/v1/quiz/draft/?quizId=   재진입 시 draft 복원
    """

    @swagger_auto_schema(request_body=QuizDraftSerializer)
    def post(self, request):
        serializer = QuizDraftSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid request: missing quizId or responses",
                status.HTTP_400_BAD_REQUEST,
                fields=serializer.errors,
            )
        data = serializer.validated_data

        try:
            stored = QuizDraftService.save_draft(
                student_id=request.user.pk,
                quiz_id=data["quizId"],
                responses=data["responses"],
            )
        except QuizWorkflowError as e:
            return workflow_error_response(e)
        except Exception:
            logger.exception(
                "draft save failed quiz_id=%s student_id=%s",
                data["quizId"],
                request.user.pk,
            )
            return error_response("Failed to update response", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"success": stored}, status=status.HTTP_200_OK)

    @swagger_auto_schema(manual_parameters=[QUIZ_ID_PARAM])
    def get(self, request):
        serializer = QuizIdSerializer(data=request.query_params)
        if not serializer.is_valid():
            return error_response(
                "Invalid request: missing quizId",
                status.HTTP_400_BAD_REQUEST,
                fields=serializer.errors,
            )
        quiz_id = serializer.validated_data["quizId"]

        try:
            responses = QuizDraftService.load_draft(
                student_id=request.user.pk,
                quiz_id=quiz_id,
            )
        except QuizWorkflowError as e:
            return workflow_error_response(e)
        except Exception:
            logger.exception("draft load failed quiz_id=%s student_id=%s", quiz_id, request.user.pk)
            return error_response("Failed to fetch response", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"responses": responses}, status=status.HTTP_200_OK)
