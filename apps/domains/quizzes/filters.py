import django_filters

from apps.domains.quizzes.models import QuizAttempt


class QuizAttemptFilter(django_filters.FilterSet):
    """
    학생 본인 attempt 목록 필터
    - quiz 기준 조회
    - 제출 여부 / 제출 상태
    """

    quiz = django_filters.UUIDFilter(field_name="quiz_id")
    is_submitted = django_filters.BooleanFilter(field_name="is_submitted")
    submission_status = django_filters.ChoiceFilter(
        field_name="submission_status",
        choices=QuizAttempt.SubmissionStatus.choices,
    )

    class Meta:
        model = QuizAttempt
        fields = [
            "quiz",
            "is_submitted",
            "submission_status",
        ]
