# PATH: apps/domains/quizzes/models/quiz.py
from __future__ import annotations

from datetime import timedelta

from django.conf import settings
from django.db import models

from apps.api.common.models import UUIDModel


class Quiz(UUIDModel):
    """
    퀴즈 정의 (메타 + 응시 가능 구간)

    ✅ QuizWindow
    - start_time / end_time: 전체 응시 허용 구간 (제출 가드는 읽기만 함)
    - duration: 학생 1인당 응시 시간. 개별 마감 = min(end_time, 시작 + duration)
    """

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    instructions = models.TextField(blank=True)

    start_time = models.DateTimeField(db_index=True)
    end_time = models.DateTimeField(db_index=True)
    duration = models.DurationField(default=timedelta(hours=1))

    # 빈 값이면 비밀번호 없음
    password = models.CharField(max_length=255, blank=True)

    is_published = models.BooleanField(default=False, db_index=True)
    auto_submit = models.BooleanField(default=False)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_quizzes",
    )

    # 직접 배정된 응시 대상자
    students = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="assigned_quizzes",
    )

    labs = models.ManyToManyField(
        "quizzes.Lab",
        blank=True,
        related_name="quizzes",
    )

    class Meta:
        db_table = "quizzes_quiz"
        ordering = ["-start_time"]

    def __str__(self):
        return self.name

    @property
    def requires_password(self) -> bool:
        return bool(self.password)

    def active_lab_subnets(self) -> list[str]:
        return list(
            self.labs.filter(is_active=True).values_list("ip_subnet", flat=True)
        )
