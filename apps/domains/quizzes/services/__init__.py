from .attempt_service import QuizAttemptService
from .draft_service import QuizDraftService
from .submission_service import QuizSubmissionService

__all__ = [
    "QuizAttemptService",
    "QuizDraftService",
    "QuizSubmissionService",
]
