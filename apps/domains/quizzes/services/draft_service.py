# apps/domains/quizzes/services/draft_service.py
from __future__ import annotations

import logging
from typing import Any, Optional

from django.conf import settings

from apps.domains.quizzes.exceptions import DraftCacheUnavailable, InvalidQuizInput
from apps.domains.quizzes.services._ids import parse_quiz_id
from libs.redis.quiz_draft import (
    DEFAULT_DRAFT_TTL_SECONDS,
    DraftBufferUnavailable,
    read_draft,
    write_draft,
)

logger = logging.getLogger(__name__)


class QuizDraftService:
    """
    응시 중 자동저장 draft

    - QuizAttempt 와 무관 (제출 여부 검사 없음, 제출 가드가 읽지 않음)
    - 제출 이후 도착한 draft 도 그대로 저장되며 무시된다
    """

    @staticmethod
    def _ttl() -> int:
        return int(getattr(settings, "QUIZ_DRAFT_TTL_SECONDS", DEFAULT_DRAFT_TTL_SECONDS))

    @staticmethod
    def save_draft(*, student_id: int, quiz_id: Any, responses: Any) -> bool:
        """
        Returns:
            True: 저장됨
            False: 빈 응답 → no-op (기존 draft 유지)
        """
        if not isinstance(responses, dict):
            raise InvalidQuizInput("Invalid request: responses must be an object")
        if not responses:
            return False

        quiz_pk = parse_quiz_id(quiz_id)
        try:
            write_draft(quiz_pk, student_id, responses, ttl_seconds=QuizDraftService._ttl())
        except DraftBufferUnavailable as e:
            raise DraftCacheUnavailable() from e
        return True

    @staticmethod
    def load_draft(*, student_id: int, quiz_id: Any) -> Optional[dict[str, Any]]:
        quiz_pk = parse_quiz_id(quiz_id)
        try:
            return read_draft(quiz_pk, student_id)
        except DraftBufferUnavailable as e:
            raise DraftCacheUnavailable("Failed to fetch response") from e
