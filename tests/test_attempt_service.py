import uuid
from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from apps.domains.quizzes.exceptions import AttemptClosed, NoQuizAttempt, QuizNotFound, QuizStartForbidden
from apps.domains.quizzes.models import QuizAttempt
from apps.domains.quizzes.services import QuizAttemptService, QuizSubmissionService
from tests.helpers import make_lab, make_quiz, make_user


class QuizStartTest(TestCase):
    def setUp(self):
        self.student = make_user("student1")
        self.quiz = make_quiz([self.student])

    def _start(self, quiz=None, **kwargs):
        return QuizAttemptService.start(
            student=self.student,
            quiz_id=(quiz or self.quiz).id,
            **kwargs,
        )

    def test_creates_attempt_with_individual_deadline(self):
        now = timezone.now()
        attempt, resumed = self._start(client_address="10.0.0.5", now=now)

        self.assertFalse(resumed)
        self.assertEqual(attempt.started_at, now)
        self.assertEqual(attempt.ends_at, now + self.quiz.duration)
        self.assertEqual(attempt.start_ips, ["10.0.0.5"])
        self.assertEqual(attempt.submission_status, QuizAttempt.SubmissionStatus.NOT_SUBMITTED)

    def test_deadline_capped_by_quiz_end(self):
        quiz = make_quiz([self.student], end_offset=timedelta(minutes=5))
        attempt, _ = self._start(quiz)
        self.assertEqual(attempt.ends_at, quiz.end_time)

    def test_resume_keeps_timing_and_tracks_addresses(self):
        first, _ = self._start(client_address="10.0.0.5")
        second, resumed = self._start(client_address="10.0.0.9")

        self.assertTrue(resumed)
        self.assertEqual(second.pk, first.pk)
        self.assertEqual(second.started_at, first.started_at)
        self.assertEqual(second.start_ips, ["10.0.0.5", "10.0.0.9"])
        self.assertEqual(QuizAttempt.objects.count(), 1)

    def test_submitted_attempt_cannot_resume(self):
        self._start()
        QuizSubmissionService.finalize(student_id=self.student.pk, quiz_id=self.quiz.id, responses={"q1": "A"})

        with self.assertRaises(QuizStartForbidden) as ctx:
            self._start()
        self.assertEqual(ctx.exception.message, "Quiz already submitted")

    def test_unpublished_quiz(self):
        quiz = make_quiz([self.student], is_published=False)
        with self.assertRaises(QuizNotFound) as ctx:
            self._start(quiz)
        self.assertEqual(ctx.exception.message, "Quiz not found or not published")

    def test_unknown_quiz(self):
        with self.assertRaises(QuizNotFound):
            QuizAttemptService.start(student=self.student, quiz_id=uuid.uuid4())

    def test_not_started_yet(self):
        quiz = make_quiz([self.student], start_offset=timedelta(minutes=10))
        with self.assertRaises(QuizStartForbidden) as ctx:
            self._start(quiz)
        self.assertEqual(ctx.exception.message, "Quiz has not started yet")

    def test_already_ended(self):
        quiz = make_quiz([self.student], start_offset=timedelta(hours=-2), end_offset=timedelta(minutes=-1))
        with self.assertRaises(QuizStartForbidden) as ctx:
            self._start(quiz)
        self.assertEqual(ctx.exception.message, "Quiz has already ended")

    def test_password(self):
        quiz = make_quiz([self.student], password="s3cret")

        with self.assertRaises(QuizStartForbidden) as ctx:
            self._start(quiz, password="wrong")
        self.assertEqual(ctx.exception.message, "Invalid quiz password")

        with self.assertRaises(QuizStartForbidden):
            self._start(quiz)

        attempt, _ = self._start(quiz, password="s3cret")
        self.assertEqual(attempt.quiz_id, quiz.id)

    def test_not_assigned(self):
        other = make_user("student2")
        with self.assertRaises(QuizStartForbidden) as ctx:
            QuizAttemptService.start(student=other, quiz_id=self.quiz.id)
        self.assertEqual(ctx.exception.message, "You don't have access to this quiz")
        self.assertFalse(QuizAttempt.objects.exists())

    def test_lab_subnet_enforced(self):
        self.quiz.labs.add(make_lab("10.12.16.0/24"))

        with self.assertRaises(QuizStartForbidden) as ctx:
            self._start(client_address="192.168.0.4")
        self.assertEqual(ctx.exception.message, "You must be in an authorized lab to start this quiz")

        attempt, _ = self._start(client_address="10.12.16.77")
        self.assertEqual(attempt.start_ips, ["10.12.16.77"])

    def test_inactive_lab_ignored(self):
        self.quiz.labs.add(make_lab("10.12.16.0/24", is_active=False))
        attempt, resumed = self._start(client_address="192.168.0.4")
        self.assertFalse(resumed)
        self.assertIsNotNone(attempt.pk)


class SaveAnswerTest(TestCase):
    def setUp(self):
        self.student = make_user("student1")
        self.quiz = make_quiz([self.student])

    def test_shallow_merge(self):
        QuizAttemptService.start(student=self.student, quiz_id=self.quiz.id)

        QuizAttemptService.save_answer(
            student=self.student,
            quiz_id=self.quiz.id,
            response_patch={"q1": "A", "q2": {"lang": "py", "code": "print(1)"}},
        )
        attempt = QuizAttemptService.save_answer(
            student=self.student,
            quiz_id=str(self.quiz.id),
            response_patch={"q2": {"lang": "c"}, "q3": ["x"]},
        )

        attempt.refresh_from_db()
        self.assertEqual(attempt.responses, {"q1": "A", "q2": {"lang": "c"}, "q3": ["x"]})
        self.assertFalse(attempt.is_submitted)

    def test_no_attempt(self):
        with self.assertRaises(NoQuizAttempt) as ctx:
            QuizAttemptService.save_answer(student=self.student, quiz_id=self.quiz.id, response_patch={"q1": "A"})
        self.assertEqual(ctx.exception.status_code, 404)

    def test_rejected_after_submit(self):
        QuizAttemptService.start(student=self.student, quiz_id=self.quiz.id)
        QuizSubmissionService.finalize(student_id=self.student.pk, quiz_id=self.quiz.id, responses={"q1": "final"})

        with self.assertRaises(AttemptClosed) as ctx:
            QuizAttemptService.save_answer(student=self.student, quiz_id=self.quiz.id, response_patch={"q1": "late"})
        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.message, "Quiz already submitted")
        self.assertEqual(QuizAttempt.objects.get().responses, {"q1": "final"})

    def test_rejected_after_individual_deadline(self):
        attempt, _ = QuizAttemptService.start(student=self.student, quiz_id=self.quiz.id)

        with self.assertRaises(AttemptClosed) as ctx:
            QuizAttemptService.save_answer(
                student=self.student,
                quiz_id=self.quiz.id,
                response_patch={"q1": "A"},
                now=attempt.ends_at + timedelta(seconds=1),
            )
        self.assertEqual(ctx.exception.message, "Quiz time has ended")
        attempt.refresh_from_db()
        self.assertEqual(attempt.responses, {})

    def test_auto_submit_keeps_saved_answers(self):
        start = timezone.now()
        attempt, _ = QuizAttemptService.start(student=self.student, quiz_id=self.quiz.id, now=start)
        self.quiz.auto_submit = True
        self.quiz.save(update_fields=["auto_submit"])

        QuizAttemptService.save_answer(
            student=self.student,
            quiz_id=self.quiz.id,
            response_patch={"q1": "A", "q2": "B"},
            now=start + timedelta(minutes=1),
        )

        auto_submitted = QuizSubmissionService.auto_submit_if_expired(
            student_id=self.student.pk,
            quiz_id=self.quiz.id,
            now=start + timedelta(hours=2),
        )

        self.assertTrue(auto_submitted)
        attempt.refresh_from_db()
        self.assertEqual(attempt.submission_status, QuizAttempt.SubmissionStatus.AUTO_SUBMITTED)
        self.assertEqual(attempt.responses, {"q1": "A", "q2": "B"})
