# PATH: apps/api/common/models.py
import uuid

from django.db import models


class TimestampModel(models.Model):
    """
    생성 / 수정 시간 자동 기록 추상 모델
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class UUIDModel(TimestampModel):
    """
    외부(프론트/URL)에 id가 노출되는 엔티티용 베이스.

    - quizId 처럼 클라이언트가 들고 다니는 식별자는 순번 노출 방지를 위해 UUID
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True
