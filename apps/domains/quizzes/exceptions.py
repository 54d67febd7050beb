# PATH: apps/domains/quizzes/exceptions.py
"""
퀴즈 응시/제출 워크플로우 예외

서비스는 이 예외만 던지고, 뷰가 {"error": message} + status_code 로 변환한다.
그 외 예외는 뷰에서 500 (일반 메시지) 처리.
"""
from __future__ import annotations

from typing import Optional


class QuizWorkflowError(Exception):
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# --------------------------------------------------
# 400
# --------------------------------------------------

class InvalidQuizInput(QuizWorkflowError):
    status_code = 400
    default_message = "Invalid request"


class QuizAlreadySubmitted(QuizWorkflowError):
    """단방향 latch: 이미 최종 제출됨. UX상 '성공에 준하는' 종결 상태."""
    status_code = 400
    default_message = "Quiz already submitted"


# --------------------------------------------------
# 403
# --------------------------------------------------

class SubmissionWindowClosed(QuizWorkflowError):
    status_code = 403
    default_message = "Quiz submission window closed"


class QuizStartForbidden(QuizWorkflowError):
    """응시 시작 정책 위반 (시간/비밀번호/배정/lab). message로 사유 구분"""
    status_code = 403
    default_message = "You don't have access to this quiz"


class AttemptClosed(QuizWorkflowError):
    """제출 완료 또는 개별 마감(ends_at) 경과 → 답안 저장 불가"""
    status_code = 403
    default_message = "Quiz already submitted"


# --------------------------------------------------
# 404
# --------------------------------------------------

class QuizNotFound(QuizWorkflowError):
    status_code = 404
    default_message = "Quiz not found"


class NoQuizAttempt(QuizWorkflowError):
    status_code = 404
    default_message = "No quiz attempt found"


# --------------------------------------------------
# 500 (복구 가능)
# --------------------------------------------------

class DraftCacheUnavailable(QuizWorkflowError):
    """Redis 장애. 응시는 계속 가능, draft 저장만 실패."""
    status_code = 500
    default_message = "Failed to update response"
