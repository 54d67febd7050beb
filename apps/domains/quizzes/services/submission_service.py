# PATH: apps/domains/quizzes/services/submission_service.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.api.common.client_ip import UNKNOWN_IP
from apps.domains.quizzes.exceptions import (
    NoQuizAttempt,
    QuizAlreadySubmitted,
    QuizNotFound,
    SubmissionWindowClosed,
)
from apps.domains.quizzes.models import Quiz, QuizAttempt
from apps.domains.quizzes.services._ids import parse_quiz_id

logger = logging.getLogger(__name__)


class QuizSubmissionService:
    """
    최종 제출 가드 (student, quiz) 당 정확히 1회

    🔥 Critical:
    - 1~6 단계 전체가 단일 transaction (부분 쓰기 없음)
    - 커밋은 조건부 UPDATE (WHERE is_submitted = false) + affected row 확인
      → 동시 finalize 2건이 모두 false를 보고 둘 다 커밋하는 경우 차단
    - draft(Redis)는 읽지 않는다. 클라이언트가 보낸 responses만 기록
    """

    @staticmethod
    @transaction.atomic
    def finalize(
        *,
        student_id: int,
        quiz_id: Any,
        responses: dict[str, Any],
        violations: Optional[str] = None,
        client_address: str = UNKNOWN_IP,
        now: Optional[datetime] = None,
    ) -> QuizAttempt:
        quiz_pk = parse_quiz_id(quiz_id)

        # -------------------------------------------------
        # 1️⃣ QuizWindow 로딩
        # -------------------------------------------------
        window = (
            Quiz.objects
            .filter(id=quiz_pk)
            .values("start_time", "end_time")
            .first()
        )
        if window is None:
            raise QuizNotFound()

        # -------------------------------------------------
        # 2️⃣ 시간 검사 (start_time 만 강제, end_time 은 설정으로)
        # -------------------------------------------------
        now = now or timezone.now()
        if now < window["start_time"]:
            raise SubmissionWindowClosed()
        if getattr(settings, "QUIZ_ENFORCE_END_TIME", False) and now > window["end_time"]:
            raise SubmissionWindowClosed()

        # -------------------------------------------------
        # 3️⃣ attempt 존재 확인 (row lock: postgres 등)
        # -------------------------------------------------
        attempt = (
            QuizAttempt.objects
            .select_for_update()
            .filter(student_id=student_id, quiz_id=quiz_pk)
            .only("id", "is_submitted")
            .first()
        )
        if attempt is None:
            raise NoQuizAttempt()

        # -------------------------------------------------
        # 4️⃣ 단방향 latch
        # -------------------------------------------------
        if attempt.is_submitted:
            raise QuizAlreadySubmitted()

        # -------------------------------------------------
        # 5️⃣ + 6️⃣ 조건부 커밋
        # -------------------------------------------------
        updated = (
            QuizAttempt.objects
            .filter(pk=attempt.pk, is_submitted=False)
            .update(
                responses=responses,
                violations=violations or "",
                submitted_at=now,
                ip=client_address or UNKNOWN_IP,
                is_submitted=True,
                submission_status=QuizAttempt.SubmissionStatus.SUBMITTED,
                updated_at=now,
            )
        )
        if updated != 1:
            # 다른 요청이 먼저 커밋함
            raise QuizAlreadySubmitted()

        logger.info(
            "QUIZ_SUBMITTED quiz_id=%s student_id=%s ip=%s",
            quiz_pk,
            student_id,
            client_address,
        )
        return QuizAttempt.objects.get(pk=attempt.pk)

    @staticmethod
    @transaction.atomic
    def auto_submit_if_expired(
        *,
        student_id: int,
        quiz_id: Any,
        now: Optional[datetime] = None,
    ) -> bool:
        """
        개별 마감(ends_at)이 지난 미제출 attempt 를 AUTO_SUBMITTED 로 닫는다.
        quiz.auto_submit 이 꺼져 있으면 아무것도 하지 않음.

        Returns:
            True: 이번 호출로 자동 제출됨
        """
        quiz_pk = parse_quiz_id(quiz_id)
        now = now or timezone.now()

        attempt = (
            QuizAttempt.objects
            .select_for_update()
            .select_related("quiz")
            .filter(student_id=student_id, quiz_id=quiz_pk, is_submitted=False)
            .first()
        )
        if attempt is None:
            return False

        if not attempt.quiz.auto_submit:
            return False
        if attempt.ends_at is None or attempt.ends_at > now:
            return False

        updated = (
            QuizAttempt.objects
            .filter(pk=attempt.pk, is_submitted=False)
            .update(
                is_submitted=True,
                submission_status=QuizAttempt.SubmissionStatus.AUTO_SUBMITTED,
                submitted_at=now,
                updated_at=now,
            )
        )
        if updated == 1:
            logger.info("QUIZ_AUTO_SUBMITTED quiz_id=%s student_id=%s", quiz_pk, student_id)
        return updated == 1
