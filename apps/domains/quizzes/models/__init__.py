# apps/domains/quizzes/models/__init__.py
from .lab import Lab
from .quiz import Quiz
from .quiz_attempt import QuizAttempt

__all__ = [
    "Lab",
    "Quiz",
    "QuizAttempt",
]
