"""Schemas for tags, user directory, profiles, search and public stats."""

from datetime import datetime

from .common import APIModel, Pagination
from .question import AnswerWithQuestionOut, QuestionOut
from .user import UserPublic


class TagOut(APIModel):
    """Tag with its usage count."""

    id: int
    name: str
    description: str
    color: str
    question_count: int
    is_official: bool
    created_at: datetime


class TagListResponse(APIModel):
    """List of tags."""

    tags: list[TagOut]


class UserListResponse(APIModel):
    """Paged user directory."""

    users: list[UserPublic]
    pagination: Pagination


class ProfileActivity(APIModel):
    """Activity block of a profile; which keys are set depends on the tab."""

    recent_questions: list[QuestionOut] | None = None
    recent_answers: list[AnswerWithQuestionOut] | None = None
    questions: list[QuestionOut] | None = None
    answers: list[AnswerWithQuestionOut] | None = None
    pagination: Pagination | None = None


class ProfileResponse(APIModel):
    """Public profile with activity."""

    user: UserPublic
    activity: ProfileActivity


class SearchResponse(APIModel):
    """Search results across questions, users and tags."""

    questions: list[QuestionOut]
    users: list[UserPublic]
    tags: list[TagOut]
    pagination: Pagination


class PublicStats(APIModel):
    """Public platform totals."""

    total_users: int
    total_questions: int
    total_answers: int
