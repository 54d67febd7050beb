# apps/domains/quizzes/serializers/quiz_request.py
"""
요청 body 검증 전용 (camelCase 키는 프론트 계약 그대로 유지)
"""
from rest_framework import serializers


class QuizIdSerializer(serializers.Serializer):
    quizId = serializers.UUIDField()


class QuizSubmitSerializer(QuizIdSerializer):
    responses = serializers.DictField(allow_empty=True)
    violations = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
        trim_whitespace=False,
    )

    def validate_violations(self, value):
        return value or ""


class QuizDraftSerializer(QuizIdSerializer):
    # 빈 dict 허용: 서비스에서 no-op 처리
    responses = serializers.DictField(allow_empty=True)


class QuizStartSerializer(QuizIdSerializer):
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )


class QuizAnswerSerializer(QuizIdSerializer):
    responsePatch = serializers.DictField(allow_empty=True)
