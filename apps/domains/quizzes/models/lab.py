# PATH: apps/domains/quizzes/models/lab.py
from django.db import models

from apps.api.common.models import UUIDModel


class Lab(UUIDModel):
    """
    전산실(Lab)

    - 퀴즈에 lab이 지정되면 해당 lab subnet 안에서만 응시 시작 가능
    - is_active=False 인 lab은 검사 대상에서 제외
    """

    name = models.CharField(max_length=255)
    block = models.CharField(max_length=100)

    # CIDR (예: 10.12.16.0/24)
    ip_subnet = models.CharField(max_length=50, db_index=True)

    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = "quizzes_lab"
        ordering = ["block", "name"]

    def __str__(self):
        return f"{self.block} / {self.name} ({self.ip_subnet})"
