"""
Redis 보호 레이어

DB(QuizAttempt)가 단일 진실. Redis는 "응시 중 draft 응답 보관" 목적으로만 사용.

- 자동저장 draft (last-write-wins, TTL)
- 제출 가드는 Redis를 읽지 않는다

Redis 미설정/장애 시 client는 None → 호출부가 draft 기능만 비활성 처리.
"""

from libs.redis.client import get_redis_client, is_redis_available, reset_redis_state

__all__ = [
    "get_redis_client",
    "is_redis_available",
    "reset_redis_state",
]
