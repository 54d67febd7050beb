# PATH: apps/domains/quizzes/models/quiz_attempt.py
from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel


class QuizAttempt(TimestampModel):
    """
    학생 1명 ↔ 퀴즈 1개의 응시 기록

    🔥 핵심 책임
    - (student, quiz) 당 1행 (DB unique 제약)
    - 최종 제출은 1회만: is_submitted 는 False → True 단방향 latch

    ✅ 설계 고정 사항
    --------------------------------------------------
    1) 생성은 응시 시작(QuizAttemptService.start)에서만.
    2) 제출 가드(QuizSubmissionService.finalize)가 정확히 1회 갱신.
       is_submitted=True 이후 이 워크플로우는 행을 다시 쓰지 않는다.
    3) 채점 등 이후 갱신은 별도 도메인 책임.
    4) 이 워크플로우는 행을 삭제하지 않는다.
    """

    class SubmissionStatus(models.TextChoices):
        NOT_SUBMITTED = "NOT_SUBMITTED", "Not submitted"
        SUBMITTED = "SUBMITTED", "Submitted"
        AUTO_SUBMITTED = "AUTO_SUBMITTED", "Auto submitted"

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="quiz_attempts",
    )
    quiz = models.ForeignKey(
        "quizzes.Quiz",
        on_delete=models.CASCADE,
        related_name="attempts",
    )

    # {question_id: answer}: 문항 유형별 shape은 이 워크플로우에서 해석하지 않음
    responses = models.JSONField(default=dict, blank=True)

    is_submitted = models.BooleanField(default=False, db_index=True)
    submission_status = models.CharField(
        max_length=20,
        choices=SubmissionStatus.choices,
        default=SubmissionStatus.NOT_SUBMITTED,
        db_index=True,
    )
    submitted_at = models.DateTimeField(null=True, blank=True)

    # 제출 시점 클라이언트 주소 (감사용, 1회 기록)
    ip = models.CharField(max_length=64, blank=True)

    # proctoring 메타 (탭 전환, 전체화면 이탈 등), 자유 형식
    violations = models.TextField(blank=True)

    # 응시 시작/재진입 시점 주소 목록
    start_ips = models.JSONField(default=list, blank=True)

    started_at = models.DateTimeField(null=True, blank=True)
    ends_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="개별 마감 시각 = min(quiz.end_time, started_at + quiz.duration)",
    )

    class Meta:
        db_table = "quizzes_quiz_attempt"
        constraints = [
            models.UniqueConstraint(
                fields=["student", "quiz"],
                name="uniq_quiz_attempt_student_quiz",
            ),
        ]
        indexes = [
            models.Index(
                fields=["quiz", "submission_status"],
                name="quiz_attempt_quiz_status_idx",
            ),
        ]
        ordering = ["-created_at"]

    def __str__(self):
        return (
            f"QuizAttempt quiz={self.quiz_id} "
            f"student={self.student_id} "
            f"status={self.submission_status}"
        )
