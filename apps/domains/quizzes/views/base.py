# PATH: apps/domains/quizzes/views/base.py
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    NotAuthenticated,
    ParseError,
    PermissionDenied,
)
from rest_framework.response import Response

from apps.core.permissions import IsStudent
from apps.domains.quizzes.exceptions import QuizWorkflowError

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int, **extra) -> Response:
    return Response({"error": message, **extra}, status=status_code)


def workflow_error_response(exc: QuizWorkflowError) -> Response:
    return error_response(exc.message, exc.status_code)


class StudentQuizAPIMixin:
    """
    학생 응시 API 공통

    - 미인증 / 학생 아닌 role → 401 {"error": "Unauthorized"} (프론트 계약)
    - JSON 파싱 실패 → 400
    """

    permission_classes = [IsStudent]

    def handle_exception(self, exc):
        if isinstance(exc, (NotAuthenticated, AuthenticationFailed, PermissionDenied)):
            return error_response("Unauthorized", status.HTTP_401_UNAUTHORIZED)
        if isinstance(exc, ParseError):
            return error_response("Invalid JSON in request body", status.HTTP_400_BAD_REQUEST)
        return super().handle_exception(exc)
