"""
Redis 클라이언트 - Fallback 지원

Redis 미설정 또는 장애 시 None 반환.
호출부에서 None 체크 후 draft 기능만 비활성 처리 (응시 자체는 계속).

- 미설정: 프로세스 수명 동안 비활성
- 연결 실패: RECONNECT_INTERVAL_SECONDS 동안 비활성 후 재시도
"""

from __future__ import annotations

import logging
import os
import time
from typing import Optional

import redis

logger = logging.getLogger(__name__)

RECONNECT_INTERVAL_SECONDS = 30

_redis_client: Optional[redis.Redis] = None
_redis_available: Optional[bool] = None
_retry_after: float = 0.0


def _build_client() -> Optional[redis.Redis]:
    url = os.getenv("REDIS_URL")
    if url:
        return redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=5,
            socket_connect_timeout=5,
        )

    host = os.getenv("REDIS_HOST")
    if not host:
        return None

    return redis.Redis(
        host=host,
        port=int(os.getenv("REDIS_PORT", "6379")),
        password=os.getenv("REDIS_PASSWORD") or None,
        db=int(os.getenv("REDIS_DB", "0")),
        decode_responses=True,
        socket_timeout=5,
        socket_connect_timeout=5,
    )


def get_redis_client() -> Optional[redis.Redis]:
    """
    Redis 클라이언트 반환.
    REDIS_URL / REDIS_HOST 미설정 또는 연결 실패 시 None.
    """
    global _redis_client, _redis_available, _retry_after

    if _redis_available is False:
        return None

    if _redis_client is not None:
        return _redis_client

    if time.monotonic() < _retry_after:
        return None

    client = _build_client()
    if client is None:
        logger.debug("REDIS_URL/REDIS_HOST not set, Redis disabled")
        _redis_available = False
        return None

    try:
        client.ping()
    except redis.RedisError as e:
        logger.warning(
            "Redis connection failed, drafts disabled for %ss: %s",
            RECONNECT_INTERVAL_SECONDS,
            e,
        )
        _retry_after = time.monotonic() + RECONNECT_INTERVAL_SECONDS
        return None

    _redis_client = client
    _redis_available = True
    logger.info("Redis connected")
    return client


def is_redis_available() -> bool:
    """Redis 사용 가능 여부"""
    return get_redis_client() is not None


def reset_redis_state():
    """테스트용: Redis 상태 리셋"""
    global _redis_client, _redis_available, _retry_after
    _redis_client = None
    _redis_available = None
    _retry_after = 0.0
