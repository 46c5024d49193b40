# src/stackit/models/tag.py
"""SQLAlchemy model for question tags."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stackit.db.session import Base
from stackit.db.time import utcnow

from .question import question_tag

if TYPE_CHECKING:
    from .question import Question


class Tag(Base):
    """Topic label attached to questions."""

    __tablename__ = "tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    color: Mapped[str] = mapped_column(String(7), nullable=False, default="#3b82f6")
    question_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    created_by_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("user_account.id"), nullable=False
    )
    is_official: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    questions: Mapped[list[Question]] = relationship(
        "Question",
        secondary=question_tag,
        back_populates="tags",
    )
