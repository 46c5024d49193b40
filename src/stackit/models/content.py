# src/stackit/models/content.py
"""Columns shared by votable content (questions and answers)."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from stackit.db.time import utcnow


class VotableContentMixin:
    """Author, vote counters and moderation flags for a content item.

    ``upvote_count``/``downvote_count`` track the size of the two vote sets;
    each vote moves them by an in-database increment.
    """

    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        nullable=False,
        index=True,
    )
    upvote_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvote_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    is_locked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    @property
    def vote_score(self) -> int:
        """Upvotes minus downvotes."""
        return self.upvote_count - self.downvote_count

    @property
    def is_visible(self) -> bool:
        """Return True when the item is neither hidden nor deleted."""
        return not (self.is_hidden or self.is_deleted)
