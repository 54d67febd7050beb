# apps/core/permissions.py

from rest_framework.permissions import BasePermission


class IsStudent(BasePermission):
    """
    퀴즈 응시 API 전용
    - 로그인 + role == STUDENT (User.is_student)
    - 거부 시 응답 형태(401)는 apps.domains.quizzes.views.base 에서 통일
    """

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return bool(getattr(user, "is_student", False))
