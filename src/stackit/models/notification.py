# src/stackit/models/notification.py
"""SQLAlchemy model for user notifications."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from stackit.db.session import Base
from stackit.db.time import utcnow

if TYPE_CHECKING:
    from .user import User

NOTIFICATION_TYPES = ("answer", "mention", "vote", "accepted_answer", "system")


class Notification(Base):
    """Message delivered to a member about activity on their content."""

    __tablename__ = "notification"
    __table_args__ = (Index("ix_notification_recipient_read", "recipient_id", "is_read"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipient_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("user_account.id", ondelete="CASCADE"), nullable=False
    )
    sender_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("user_account.id", ondelete="CASCADE"), nullable=False
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    message: Mapped[str] = mapped_column(String(500), nullable=False)
    related_question_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("question.id", ondelete="SET NULL"), nullable=True
    )
    related_answer_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("answer.id", ondelete="SET NULL"), nullable=True
    )
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )

    sender: Mapped[User] = relationship("User", foreign_keys="Notification.sender_id")

    @validates("type")
    def _validate_type(self, key: str, type_: str) -> str:
        if type_ not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type: {type_}")
        return type_
