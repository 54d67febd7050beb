"""
공통 API 뷰
"""
import logging

from django.db import connection
from django.http import JsonResponse

from libs.redis import is_redis_available

logger = logging.getLogger(__name__)


def health_check(request):
    """
    헬스체크 엔드포인트

    Returns:
        - 200: DB 정상 (redis 는 draft 전용이므로 degraded 로만 표시)
        - 503: 데이터베이스 연결 실패
    """
    redis_status = "connected" if is_redis_available() else "unavailable"

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except Exception:
        logger.exception("Health check: database unreachable")
        return JsonResponse({
            "status": "unhealthy",
            "service": "evalify-api",
            "database": "disconnected",
            "redis": redis_status,
        }, status=503)

    return JsonResponse({
        "status": "healthy" if redis_status == "connected" else "degraded",
        "service": "evalify-api",
        "database": "connected",
        "redis": redis_status,
    }, status=200)
