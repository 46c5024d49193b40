"""Question- and answer-related Pydantic schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import field_validator

from .common import APIModel, Pagination
from .user import AuthorSummary


class QuestionCreate(APIModel):
    """Schema for asking a new question.

    Length rules are enforced by the endpoint so that violations map to 400.
    """

    title: str
    content: str
    tags: list[str]


class QuestionOut(APIModel):
    """Question as returned by list and detail endpoints."""

    id: int
    title: str
    slug: str | None
    content: str
    author: AuthorSummary
    tags: list[str]
    views: int
    vote_score: int
    upvote_count: int
    downvote_count: int
    answer_count: int
    accepted_answer_id: int | None
    is_resolved: bool
    is_pinned: bool
    is_locked: bool
    created_at: datetime
    updated_at: datetime
    last_activity: datetime

    @field_validator("tags", mode="before")
    @classmethod
    def _tag_names(cls, value: Any) -> Any:
        return [getattr(tag, "name", tag) for tag in value]


class QuestionDetailResponse(APIModel):
    """Envelope for a single question, with the caller's vote when signed in."""

    question: QuestionOut
    user_vote: Literal["up", "down"] | None = None


class QuestionCreatedResponse(APIModel):
    """Envelope returned after a question is created."""

    message: str
    question: QuestionOut


class QuestionListResponse(APIModel):
    """Paged list of questions."""

    questions: list[QuestionOut]
    pagination: Pagination


class QuestionRef(APIModel):
    """Reference to the parent question of an answer."""

    id: int
    title: str
    slug: str | None


class AnswerCreate(APIModel):
    """Schema for posting an answer."""

    content: str


class AnswerOut(APIModel):
    """Answer as returned by the API."""

    id: int
    content: str
    author: AuthorSummary
    question_id: int
    is_accepted: bool
    vote_score: int
    upvote_count: int
    downvote_count: int
    created_at: datetime
    updated_at: datetime


class AnswerWithQuestionOut(AnswerOut):
    """Answer including its parent question, for profile activity."""

    question: QuestionRef


class AnswerCreatedResponse(APIModel):
    """Envelope returned after an answer is created."""

    message: str
    answer: AnswerOut


class AnswerListResponse(APIModel):
    """Paged list of answers for a question."""

    answers: list[AnswerOut]
    pagination: Pagination
