# apps/api/config/urls.py
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from rest_framework_simplejwt.views import TokenRefreshView

from drf_yasg import openapi
from drf_yasg.views import get_schema_view

from apps.api.common.auth_jwt import RoleAwareTokenObtainPairView
from apps.api.common.views import health_check


schema_view = get_schema_view(
    openapi.Info(
        title="Evalify API",
        default_version="v1",
        description="Quiz taking / submission API",
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)


urlpatterns = [
    # =========================
    # Admin
    # =========================
    path("admin/", admin.site.urls),

    # =========================
    # Health
    # =========================
    path("health/", health_check, name="health-check"),

    # =========================
    # Auth (JWT)
    # =========================
    path("api/v1/token/", RoleAwareTokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/v1/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),

    # =========================
    # API v1
    # =========================
    path("api/v1/", include("apps.api.v1.urls")),

    # =========================
    # Swagger
    # =========================
    path("swagger/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger-ui"),
]
