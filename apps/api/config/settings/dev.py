# apps/api/config/settings/dev.py
from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 🔴 DB_NAME 미설정 시 로컬 sqlite 로 동작 (postgres 없이 개발 가능)
if not os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

LOGGING["root"]["level"] = "DEBUG"
