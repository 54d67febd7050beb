"""
테스트 공용 fixture 헬퍼
"""
from datetime import timedelta

import redis
from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.domains.quizzes.models import Lab, Quiz, QuizAttempt

User = get_user_model()


class FakeRedis:
    """draft 버퍼가 쓰는 명령만 흉내내는 in-memory client"""

    def __init__(self):
        self.store = {}
        self.expiry = {}
        self.set_calls = 0

    def ping(self):
        return True

    def set(self, key, value, ex=None):
        self.set_calls += 1
        self.store[key] = value
        self.expiry[key] = ex
        return True

    def get(self, key):
        return self.store.get(key)


class FailingRedis:
    def ping(self):
        return True

    def set(self, key, value, ex=None):
        raise redis.ConnectionError("connection refused")

    def get(self, key):
        raise redis.ConnectionError("connection refused")


def make_user(username, role=User.Role.STUDENT, password="testpass123"):
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password=password,
        role=role,
    )


def make_quiz(students=(), *, start_offset=timedelta(hours=-1), end_offset=timedelta(hours=1), **kwargs):
    now = timezone.now()
    defaults = {
        "name": "Midterm",
        "start_time": now + start_offset,
        "end_time": now + end_offset,
        "duration": timedelta(minutes=30),
        "is_published": True,
    }
    defaults.update(kwargs)
    quiz = Quiz.objects.create(**defaults)
    if students:
        quiz.students.add(*students)
    return quiz


def make_attempt(student, quiz, **kwargs):
    now = timezone.now()
    defaults = {
        "started_at": now,
        "ends_at": min(quiz.end_time, now + quiz.duration),
    }
    defaults.update(kwargs)
    return QuizAttempt.objects.create(student=student, quiz=quiz, **defaults)


def make_lab(subnet, **kwargs):
    defaults = {"name": "Lab 1", "block": "A", "ip_subnet": subnet}
    defaults.update(kwargs)
    return Lab.objects.create(**defaults)
