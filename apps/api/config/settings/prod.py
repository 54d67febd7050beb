# PATH: apps/api/config/settings/prod.py
from .base import *
import os

# ==================================================
# PROD MODE (외부 공개 API 서버 기준)
# ==================================================

DEBUG = False

SECRET_KEY = os.environ["DJANGO_SECRET_KEY"]

# ==================================================
# SECURITY
# ==================================================

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# ==================================================
# ALLOWED HOSTS
# ==================================================
# prod에서는 "*" 절대 금지

ALLOWED_HOSTS = [
    h.strip()
    for h in os.environ.get("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if h.strip()
]

# ==================================================
# CORS (Frontend ↔ API 계약)
# ==================================================

CORS_ALLOW_ALL_ORIGINS = False

CORS_ALLOWED_ORIGINS = [
    o.strip()
    for o in os.environ.get("CORS_ALLOWED_ORIGINS", "").split(",")
    if o.strip()
]

CORS_ALLOW_CREDENTIALS = True

CSRF_TRUSTED_ORIGINS = list(CORS_ALLOWED_ORIGINS)

# ==================================================
# STATIC
# ==================================================
# gunicorn + nginx + CDN 전제
# Django는 서빙 책임 없음

STATIC_ROOT = BASE_DIR / "staticfiles"
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.ManifestStaticFilesStorage"},
}

# ==================================================
# FINAL ASSERTIONS (운영 안정성)
# ==================================================

assert DEBUG is False, "prod.py must run with DEBUG=False"
assert "*" not in ALLOWED_HOSTS, "ALLOWED_HOSTS must not contain '*' in prod"
