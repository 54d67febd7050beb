# JWT 발급 시 role 클레임 포함. 프론트는 토큰만으로 학생/교직원 화면 분기.
from __future__ import annotations

from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView


class RoleAwareTokenObtainPairSerializer(TokenObtainPairSerializer):
    """access/refresh 토큰에 role, name 포함. 비활성 계정은 발급 거부."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = getattr(user, "role", None)
        token["name"] = getattr(user, "name", None) or ""
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        if not self.user.is_active:
            raise serializers.ValidationError(
                {"detail": "Account is disabled."},
                code="authorization",
            )
        data["role"] = self.user.role
        return data


class RoleAwareTokenObtainPairView(TokenObtainPairView):
    serializer_class = RoleAwareTokenObtainPairSerializer
