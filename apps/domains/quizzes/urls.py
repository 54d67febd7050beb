# apps/domains/quizzes/urls.py
from django.urls import path

from .views import (
    MyQuizAttemptListView,
    QuizAnswerView,
    QuizAutoSubmitView,
    QuizDraftView,
    QuizResponseView,
    QuizStartView,
    QuizSubmitView,
)

urlpatterns = [
    path("start/", QuizStartView.as_view(), name="quiz-start"),
    path("draft/", QuizDraftView.as_view(), name="quiz-draft"),
    path("answer/", QuizAnswerView.as_view(), name="quiz-answer"),
    path("submit/", QuizSubmitView.as_view(), name="quiz-submit"),
    path("auto-submit/", QuizAutoSubmitView.as_view(), name="quiz-auto-submit"),
    path("response/", QuizResponseView.as_view(), name="quiz-response"),
    path("attempts/", MyQuizAttemptListView.as_view(), name="quiz-attempts"),
]
