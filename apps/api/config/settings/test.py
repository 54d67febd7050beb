# apps/api/config/settings/test.py
from .base import *

DEBUG = False

# 동시 제출 테스트는 스레드별 커넥션이 필요하므로 파일 기반 sqlite 사용.
# IMMEDIATE: 트랜잭션 시작 시 write 락 확보 → 동시 writer 직렬화
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test.sqlite3",
        "OPTIONS": {
            "timeout": 30,
            "transaction_mode": "IMMEDIATE",
        },
        "TEST": {
            "NAME": BASE_DIR / "test_evalify.sqlite3",
        },
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

QUIZ_DRAFT_TTL_SECONDS = 6000000
QUIZ_ENFORCE_END_TIME = False
CLIENT_IP_HEADER_POLICY = ()

LOGGING["root"]["level"] = "WARNING"
