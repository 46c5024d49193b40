# src/stackit/models/answer.py
"""SQLAlchemy models for answers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stackit.db.session import Base

from .content import VotableContentMixin

if TYPE_CHECKING:
    from .question import Question
    from .user import User


class Answer(VotableContentMixin, Base):
    """An answer posted to a question."""

    __tablename__ = "answer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("question.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    author: Mapped[User] = relationship("User", foreign_keys="Answer.author_id")
    question: Mapped[Question] = relationship("Question")
