# src/stackit/models/question.py
"""SQLAlchemy models for questions and their tags."""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stackit.db.session import Base
from stackit.db.time import utcnow

from .content import VotableContentMixin

if TYPE_CHECKING:
    from .tag import Tag
    from .user import User

question_tag = Table(
    "question_tag",
    Base.metadata,
    Column("question_id", ForeignKey("question.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True),
)

_SLUG_STRIP = re.compile(r"[^a-z0-9\s-]")
_SLUG_SPACES = re.compile(r"\s+")
_SLUG_DASHES = re.compile(r"-+")


def slugify(title: str, suffix: int | str) -> str:
    """Build a URL slug from a title and a disambiguating suffix."""
    base = _SLUG_STRIP.sub("", title.lower())
    base = _SLUG_SPACES.sub("-", base.strip())
    base = _SLUG_DASHES.sub("-", base).strip("-")
    return f"{base}-{suffix}" if base else str(suffix)


class Question(VotableContentMixin, Base):
    """A question asked by a member."""

    __tablename__ = "question"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    answer_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Plain integer to avoid a question <-> answer foreign key cycle.
    accepted_answer_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_pinned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    last_activity: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )

    author: Mapped[User] = relationship("User", foreign_keys="Question.author_id")
    tags: Mapped[list[Tag]] = relationship(
        "Tag",
        secondary=question_tag,
        back_populates="questions",
        order_by="Tag.name",
    )

    def generate_slug(self) -> str:
        """Assign and return a slug; requires the primary key to be populated."""
        self.slug = slugify(self.title, self.id)
        return self.slug

    def touch(self) -> None:
        """Record activity on the question thread."""
        self.last_activity = utcnow()
