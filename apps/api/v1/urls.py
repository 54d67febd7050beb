# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Domain APIs
    # =========================
    path("quiz/", include("apps.domains.quizzes.urls")),

    # =========================
    # Core
    # =========================
    path("core/", include("apps.core.urls")),
]
