# src/stackit/models/user.py
"""SQLAlchemy models for forum members."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from stackit.db.session import Base
from stackit.db.time import utcnow

ROLE_USER = "user"
ROLE_MODERATOR = "moderator"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_MODERATOR, ROLE_ADMIN)


class User(Base):
    """Registered member; the author of questions and answers."""

    __tablename__ = "user_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(30), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(254), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=ROLE_USER)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    # Mutated only by vote transitions and answer acceptance.
    reputation: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)

    joined_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    last_active: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    is_banned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    ban_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    banned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    banned_by_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("user_account.id"), nullable=True
    )
    role_changed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    role_changed_by_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("user_account.id"), nullable=True
    )

    questions_asked: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    answers_given: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    upvotes_received: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvotes_received: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    accepted_answers: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    @property
    def is_admin(self) -> bool:
        """Return True for accounts holding the admin role."""
        return self.role == ROLE_ADMIN

    @validates("role")
    def _validate_role(self, key: str, role: str) -> str:
        if role not in ROLES:
            raise ValueError(f"Unknown role: {role}")
        return role

    @property
    def stats(self) -> dict[str, int]:
        """Return the activity counters grouped for API responses."""
        return {
            "questions_asked": self.questions_asked,
            "answers_given": self.answers_given,
            "upvotes_received": self.upvotes_received,
            "downvotes_received": self.downvotes_received,
            "accepted_answers": self.accepted_answers,
        }
