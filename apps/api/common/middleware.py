# apps/api/common/middleware.py
# 뷰 밖으로 새어나온 예외 → 500 JSON. 예외 내용은 로그에만.
# process_exception 응답은 CorsMiddleware 를 다시 거치지 않으므로 CORS 헤더를 직접 붙인다.
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse

from apps.api.common.client_ip import get_client_ip

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


def _cors_origin_for(request) -> str | None:
    origin = (request.META.get("HTTP_ORIGIN") or "").strip()
    if not origin:
        return None
    if getattr(settings, "CORS_ALLOW_ALL_ORIGINS", False):
        return origin
    if origin in (getattr(settings, "CORS_ALLOWED_ORIGINS", None) or []):
        return origin
    return None


class UnhandledExceptionMiddleware:
    """
    최후 방어선. 퀴즈 뷰는 자체적으로 500 을 만들기 때문에
    여기까지 오는 건 라우팅/미들웨어 단계 오류 정도.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        user = getattr(request, "user", None)
        logger.exception(
            "Unhandled exception: %s %s user_id=%s ip=%s",
            request.method,
            request.path,
            getattr(user, "pk", None),
            get_client_ip(request),
        )

        response = JsonResponse({"error": GENERIC_ERROR_MESSAGE}, status=500)
        origin = _cors_origin_for(request)
        if origin:
            response["Access-Control-Allow-Origin"] = origin
            if getattr(settings, "CORS_ALLOW_CREDENTIALS", False):
                response["Access-Control-Allow-Credentials"] = "true"
        return response
