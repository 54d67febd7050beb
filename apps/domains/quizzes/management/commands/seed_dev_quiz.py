# PATH: apps/domains/quizzes/management/commands/seed_dev_quiz.py
"""
로컬 개발용 학생/스태프 계정 + 지금 응시 가능한 퀴즈 1개 생성.

- username 이 이미 있으면 비밀번호/role 만 맞춘다
- 퀴즈는 매 실행마다 새로 만든다 (start=지금-5분, end=지금+duration)
- --lab-subnet 지정 시 Lab 을 만들어 퀴즈에 연결

사용:
  python manage.py seed_dev_quiz --student=student1 --password=devpass123
  python manage.py seed_dev_quiz --lab-subnet=127.0.0.0/8
"""
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from apps.domains.quizzes.models import Lab, Quiz


class Command(BaseCommand):
    help = "Ensure dev student/staff users and create an open, published quiz assigned to the student."

    def add_arguments(self, parser):
        parser.add_argument("--student", type=str, default="student1", help="Student username (default: student1)")
        parser.add_argument("--staff", type=str, default="staff1", help="Staff username (default: staff1)")
        parser.add_argument("--password", type=str, default="devpass123", help="Password for both users")
        parser.add_argument("--minutes", type=int, default=60, help="Attempt duration in minutes (default: 60)")
        parser.add_argument("--quiz-password", type=str, default="", help="Optional quiz password")
        parser.add_argument("--lab-subnet", type=str, default="", help="Restrict start to this CIDR (optional)")

    def _ensure_user(self, User, username: str, password: str, role: str):
        user, created = User.objects.get_or_create(
            username=username,
            defaults={"name": username, "role": role},
        )
        user.role = role
        user.is_active = True
        user.set_password(password)
        user.save()
        self.stdout.write(f"{'Created' if created else 'Updated'} user {username} (role={role})")
        return user

    def handle(self, *args, **options):
        password = (options["password"] or "").strip()
        if not password:
            raise CommandError("--password must not be empty")
        minutes = options["minutes"]
        if minutes <= 0:
            raise CommandError("--minutes must be positive")

        User = get_user_model()
        now = timezone.now()

        with transaction.atomic():
            student = self._ensure_user(User, options["student"].strip(), password, User.Role.STUDENT)
            staff = self._ensure_user(User, options["staff"].strip(), password, User.Role.STAFF)

            quiz = Quiz.objects.create(
                name=f"Dev quiz {now:%Y-%m-%d %H:%M}",
                instructions="Answer every question before the timer runs out.",
                start_time=now - timedelta(minutes=5),
                end_time=now + timedelta(minutes=minutes),
                duration=timedelta(minutes=minutes),
                password=options["quiz_password"] or "",
                is_published=True,
                auto_submit=True,
                created_by=staff,
            )
            quiz.students.add(student)

            subnet = (options["lab_subnet"] or "").strip()
            if subnet:
                lab = Lab.objects.create(name="Dev lab", block="DEV", ip_subnet=subnet)
                quiz.labs.add(lab)
                self.stdout.write(f"Lab {lab.ip_subnet} attached")

        self.stdout.write(self.style.SUCCESS(f"Quiz ready: id={quiz.id} student={student.username}"))
