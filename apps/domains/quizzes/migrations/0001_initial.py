import datetime
import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Lab",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("block", models.CharField(max_length=100)),
                ("ip_subnet", models.CharField(db_index=True, max_length=50)),
                ("is_active", models.BooleanField(db_index=True, default=True)),
            ],
            options={
                "db_table": "quizzes_lab",
                "ordering": ["block", "name"],
            },
        ),
        migrations.CreateModel(
            name="Quiz",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("instructions", models.TextField(blank=True)),
                ("start_time", models.DateTimeField(db_index=True)),
                ("end_time", models.DateTimeField(db_index=True)),
                ("duration", models.DurationField(default=datetime.timedelta(seconds=3600))),
                ("password", models.CharField(blank=True, max_length=255)),
                ("is_published", models.BooleanField(db_index=True, default=False)),
                ("auto_submit", models.BooleanField(default=False)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="created_quizzes",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                ("labs", models.ManyToManyField(blank=True, related_name="quizzes", to="quizzes.lab")),
                (
                    "students",
                    models.ManyToManyField(blank=True, related_name="assigned_quizzes", to=settings.AUTH_USER_MODEL),
                ),
            ],
            options={
                "db_table": "quizzes_quiz",
                "ordering": ["-start_time"],
            },
        ),
        migrations.CreateModel(
            name="QuizAttempt",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("responses", models.JSONField(blank=True, default=dict)),
                ("is_submitted", models.BooleanField(db_index=True, default=False)),
                (
                    "submission_status",
                    models.CharField(
                        choices=[
                            ("NOT_SUBMITTED", "Not submitted"),
                            ("SUBMITTED", "Submitted"),
                            ("AUTO_SUBMITTED", "Auto submitted"),
                        ],
                        db_index=True,
                        default="NOT_SUBMITTED",
                        max_length=20,
                    ),
                ),
                ("submitted_at", models.DateTimeField(blank=True, null=True)),
                ("ip", models.CharField(blank=True, max_length=64)),
                ("violations", models.TextField(blank=True)),
                ("start_ips", models.JSONField(blank=True, default=list)),
                ("started_at", models.DateTimeField(blank=True, null=True)),
                (
                    "ends_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="개별 마감 시각 = min(quiz.end_time, started_at + quiz.duration)",
                        null=True,
                    ),
                ),
                (
                    "quiz",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attempts",
                        to="quizzes.quiz",
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="quiz_attempts",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "quizzes_quiz_attempt",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["quiz", "submission_status"], name="quiz_attempt_quiz_status_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("student", "quiz"), name="uniq_quiz_attempt_student_quiz"),
                ],
            },
        ),
    ]
