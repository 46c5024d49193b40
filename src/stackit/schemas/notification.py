"""Notification-related Pydantic schemas."""

from datetime import datetime

from .common import APIModel, Pagination
from .user import AuthorSummary


class NotificationOut(APIModel):
    """Notification as shown to its recipient."""

    id: int
    type: str
    title: str
    message: str
    sender: AuthorSummary
    related_question_id: int | None
    related_answer_id: int | None
    is_read: bool
    created_at: datetime


class NotificationListResponse(APIModel):
    """Paged notifications plus the caller's unread total."""

    notifications: list[NotificationOut]
    pagination: Pagination
    unread_count: int
