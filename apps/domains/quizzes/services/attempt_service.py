# apps/domains/quizzes/services/attempt_service.py
from __future__ import annotations

import hmac
import logging
from datetime import datetime
from typing import Any, Optional

from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.api.common.client_ip import UNKNOWN_IP, is_client_in_lab_subnets
from apps.domains.quizzes.exceptions import (
    AttemptClosed,
    InvalidQuizInput,
    NoQuizAttempt,
    QuizNotFound,
    QuizStartForbidden,
)
from apps.domains.quizzes.models import Quiz, QuizAttempt
from apps.domains.quizzes.services._ids import parse_quiz_id

logger = logging.getLogger(__name__)


class QuizAttemptService:
    """
    QuizAttempt 생성/재진입 전담

    - 제출 가드가 요구하는 "attempt 존재" 전제를 만드는 유일한 진입점
    - (student, quiz) unique 제약 위에서 동작: 동시 시작 요청은 같은 행으로 수렴
    """

    @staticmethod
    def _check_policy(quiz: Quiz, *, student, password: Optional[str], client_address: str, now: datetime) -> None:
        if now < quiz.start_time:
            raise QuizStartForbidden("Quiz has not started yet")
        if now >= quiz.end_time:
            raise QuizStartForbidden("Quiz has already ended")

        if quiz.requires_password:
            given = (password or "").encode()
            if not hmac.compare_digest(given, quiz.password.encode()):
                raise QuizStartForbidden("Invalid quiz password")

        if not quiz.students.filter(pk=student.pk).exists():
            raise QuizStartForbidden("You don't have access to this quiz")

        subnets = quiz.active_lab_subnets()
        if subnets and not is_client_in_lab_subnets(client_address, subnets):
            logger.info(
                "QUIZ_START_BLOCKED lab quiz_id=%s student_id=%s ip=%s",
                quiz.id,
                student.pk,
                client_address,
            )
            raise QuizStartForbidden("You must be in an authorized lab to start this quiz")

    @staticmethod
    def _resume(attempt: QuizAttempt, client_address: str) -> QuizAttempt:
        if attempt.is_submitted:
            raise QuizStartForbidden("Quiz already submitted")

        # 재진입 시 timing 은 유지, 주소만 누적
        ips = list(attempt.start_ips or [])
        if client_address and client_address != UNKNOWN_IP and client_address not in ips:
            ips.append(client_address)
            attempt.start_ips = ips
            attempt.save(update_fields=["start_ips", "updated_at"])

        logger.info(
            "QUIZ_RESUMED quiz_id=%s student_id=%s",
            attempt.quiz_id,
            attempt.student_id,
        )
        return attempt

    @staticmethod
    @transaction.atomic
    def start(
        *,
        student,
        quiz_id: Any,
        password: Optional[str] = None,
        client_address: str = UNKNOWN_IP,
        now: Optional[datetime] = None,
    ) -> tuple[QuizAttempt, bool]:
        """
        응시 시작 또는 재진입.

        Returns:
            (attempt, resumed)
        """
        quiz_pk = parse_quiz_id(quiz_id)
        now = now or timezone.now()

        quiz = Quiz.objects.filter(id=quiz_pk, is_published=True).first()
        if quiz is None:
            raise QuizNotFound("Quiz not found or not published")

        QuizAttemptService._check_policy(
            quiz,
            student=student,
            password=password,
            client_address=client_address,
            now=now,
        )

        existing = (
            QuizAttempt.objects
            .select_for_update()
            .filter(student=student, quiz=quiz)
            .first()
        )
        if existing is not None:
            return QuizAttemptService._resume(existing, client_address), True

        # 개별 마감 = min(퀴즈 종료, 시작 + duration)
        ends_at = min(quiz.end_time, now + quiz.duration)

        try:
            with transaction.atomic():
                attempt = QuizAttempt.objects.create(
                    student=student,
                    quiz=quiz,
                    started_at=now,
                    ends_at=ends_at,
                    start_ips=[client_address] if client_address and client_address != UNKNOWN_IP else [],
                )
        except IntegrityError:
            # 동시 시작 요청이 먼저 행을 만들었음 → 재진입으로 처리
            attempt = QuizAttempt.objects.select_for_update().get(student=student, quiz=quiz)
            return QuizAttemptService._resume(attempt, client_address), True

        logger.info(
            "QUIZ_STARTED quiz_id=%s student_id=%s ip=%s ends_at=%s",
            quiz.id,
            student.pk,
            client_address,
            ends_at.isoformat(),
        )
        return attempt, False

    @staticmethod
    @transaction.atomic
    def save_answer(
        *,
        student,
        quiz_id: Any,
        response_patch: dict[str, Any],
        now: Optional[datetime] = None,
    ) -> QuizAttempt:
        """
        응시 중 답안을 attempt.responses 에 반영 (shallow merge, patch 키가 덮어씀).

        Redis draft 와 달리 DB 에 남으므로 자동 제출(AUTO_SUBMITTED) 시에도 답안이 보존된다.
        최종 제출(finalize)은 body.responses 로 전체를 다시 기록한다.
        """
        if not isinstance(response_patch, dict):
            raise InvalidQuizInput("Invalid request: responsePatch must be an object")

        quiz_pk = parse_quiz_id(quiz_id)
        now = now or timezone.now()

        attempt = (
            QuizAttempt.objects
            .select_for_update()
            .filter(student=student, quiz_id=quiz_pk)
            .first()
        )
        if attempt is None:
            raise NoQuizAttempt("No active quiz attempt found")

        if attempt.is_submitted:
            raise AttemptClosed("Quiz already submitted")
        if attempt.ends_at is not None and now > attempt.ends_at:
            raise AttemptClosed("Quiz time has ended")

        attempt.responses = {**(attempt.responses or {}), **response_patch}
        attempt.save(update_fields=["responses", "updated_at"])

        logger.info(
            "QUIZ_ANSWER_SAVED quiz_id=%s student_id=%s keys=%s",
            quiz_pk,
            attempt.student_id,
            len(response_patch),
        )
        return attempt
