from .quiz_attempt_view import MyQuizAttemptListView, QuizResponseView
from .quiz_answer_view import QuizAnswerView
from .quiz_auto_submit_view import QuizAutoSubmitView
from .quiz_draft_view import QuizDraftView
from .quiz_start_view import QuizStartView
from .quiz_submit_view import QuizSubmitView

__all__ = [
    "MyQuizAttemptListView",
    "QuizAnswerView",
    "QuizAutoSubmitView",
    "QuizDraftView",
    "QuizResponseView",
    "QuizStartView",
    "QuizSubmitView",
]
