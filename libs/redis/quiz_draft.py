"""
퀴즈 응시 중 draft 응답 버퍼

- 클라이언트 자동저장 tick마다 현재 답안 전체를 덮어쓴다 (merge 없음, last-write-wins)
- key: response:{quiz_id}:{student_id}
- value: JSON 직렬화된 {question_id: answer} 매핑
- TTL: settings.QUIZ_DRAFT_TTL_SECONDS (기본 6,000,000초)
- DB(QuizAttempt)와 트랜잭션으로 묶이지 않음. 제출 가드는 이 키를 읽지 않는다.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import redis

from libs.redis.client import get_redis_client

logger = logging.getLogger(__name__)

DEFAULT_DRAFT_TTL_SECONDS = 6_000_000

KEY_FORMAT = "response:{quiz_id}:{student_id}"


class DraftBufferUnavailable(Exception):
    """Redis 미설정 또는 명령 실패"""


def draft_key(quiz_id: Any, student_id: Any) -> str:
    return KEY_FORMAT.format(quiz_id=quiz_id, student_id=student_id)


def write_draft(
    quiz_id: Any,
    student_id: Any,
    responses: dict[str, Any],
    *,
    ttl_seconds: int = DEFAULT_DRAFT_TTL_SECONDS,
) -> None:
    """draft 덮어쓰기 (SET key value EX ttl)"""
    client = get_redis_client()
    if not client:
        raise DraftBufferUnavailable("redis not configured")

    key = draft_key(quiz_id, student_id)
    payload = json.dumps(responses, ensure_ascii=False, default=str)
    try:
        client.set(key, payload, ex=ttl_seconds)
    except redis.RedisError as e:
        logger.warning("Redis draft write failed key=%s: %s", key, e)
        raise DraftBufferUnavailable(str(e)) from e

    logger.debug("draft saved key=%s size=%s", key, len(payload))


def read_draft(quiz_id: Any, student_id: Any) -> Optional[dict[str, Any]]:
    """draft 조회. 없으면 None. 깨진 값은 None 취급."""
    client = get_redis_client()
    if not client:
        raise DraftBufferUnavailable("redis not configured")

    key = draft_key(quiz_id, student_id)
    try:
        raw = client.get(key)
    except redis.RedisError as e:
        logger.warning("Redis draft read failed key=%s: %s", key, e)
        raise DraftBufferUnavailable(str(e)) from e

    if not raw:
        return None

    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("corrupt draft payload key=%s, ignoring", key)
        return None

    return value if isinstance(value, dict) else None
