"""Admin moderation Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .common import APIModel, Pagination
from .user import AuthorSummary, UserStats


class BulkActionRequest(APIModel):
    """Bulk moderation request applied to every listed item."""

    action: str = Field(..., min_length=1)
    items: list[int] = Field(..., min_length=1)
    reason: str = ""
    type: Literal["users", "questions", "answers"]


class BulkActionItemResult(APIModel):
    """Outcome for a single item of a bulk action."""

    id: int
    success: bool
    error: str | None = None


class BulkActionResponse(APIModel):
    """Summary of a bulk action."""

    message: str
    results: list[BulkActionItemResult]
    success_count: int
    failure_count: int


class AdminStats(APIModel):
    """Platform totals shown on the admin dashboard."""

    total_users: int
    total_questions: int
    total_answers: int
    banned_users: int
    locked_questions: int
    hidden_content: int
    deleted_content: int


class AdminUserOut(APIModel):
    """User row for the admin user table; includes the email address."""

    id: int
    username: str
    email: str
    role: str
    reputation: int
    is_active: bool
    is_banned: bool
    ban_reason: str | None
    joined_at: datetime
    stats: UserStats


class AdminUserListResponse(APIModel):
    """Paged admin user table."""

    users: list[AdminUserOut]
    pagination: Pagination


class AdminContentOut(APIModel):
    """Question or answer row for the admin content table."""

    id: int
    type: Literal["question", "answer"]
    title: str
    content: str
    author: AuthorSummary
    vote_score: int
    is_locked: bool
    is_pinned: bool = False
    is_hidden: bool
    is_deleted: bool
    created_at: datetime


class AdminContentListResponse(APIModel):
    """Paged admin content table."""

    content: list[AdminContentOut]
    pagination: Pagination


class CreateAdminRequest(APIModel):
    """Schema for creating another administrator."""

    username: str
    email: str
    password: str
    reason: str | None = None
