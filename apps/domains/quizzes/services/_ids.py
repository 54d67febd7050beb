# PATH: apps/domains/quizzes/services/_ids.py
from __future__ import annotations

import uuid
from typing import Any

from apps.domains.quizzes.exceptions import QuizNotFound


def parse_quiz_id(quiz_id: Any) -> uuid.UUID:
    """quizId 문자열 → UUID. 형식 오류는 존재하지 않는 퀴즈와 동일 취급."""
    if isinstance(quiz_id, uuid.UUID):
        return quiz_id
    try:
        return uuid.UUID(str(quiz_id))
    except (TypeError, ValueError):
        raise QuizNotFound()
