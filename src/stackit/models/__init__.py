# src/stackit/models/__init__.py
"""SQLAlchemy models for the StackIt application."""

from .answer import Answer
from .notification import Notification
from .question import Question, question_tag
from .tag import Tag
from .user import User
from .vote import AnswerVote, QuestionVote

__all__ = [
    "Answer",
    "Notification",
    "Question", "question_tag",
    "Tag",
    "User",
    "AnswerVote", "QuestionVote",
]
