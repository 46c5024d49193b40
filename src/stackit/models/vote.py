# src/stackit/models/vote.py
"""Models capturing voting interactions on questions and answers."""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from stackit.db.session import Base

DIRECTION_UP = 1
DIRECTION_DOWN = -1


class QuestionVote(Base):
    """Per-user vote on a question.

    The composite primary key keeps a voter in at most one of the up/down
    sets for a given question.
    """

    __tablename__ = "question_vote"
    __table_args__ = (
        CheckConstraint("direction IN (1, -1)", name="ck_question_vote_direction"),
    )

    content_id: Mapped[int] = mapped_column(
        "question_id",
        Integer,
        ForeignKey("question.id", ondelete="CASCADE"),
        primary_key=True,
    )
    voter_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        primary_key=True,
        index=True,
    )
    # 1 = upvote, -1 = downvote.
    direction: Mapped[int] = mapped_column(SmallInteger, nullable=False)


class AnswerVote(Base):
    """Per-user vote on an answer."""

    __tablename__ = "answer_vote"
    __table_args__ = (
        CheckConstraint("direction IN (1, -1)", name="ck_answer_vote_direction"),
    )

    content_id: Mapped[int] = mapped_column(
        "answer_id",
        Integer,
        ForeignKey("answer.id", ondelete="CASCADE"),
        primary_key=True,
    )
    voter_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        primary_key=True,
        index=True,
    )
    direction: Mapped[int] = mapped_column(SmallInteger, nullable=False)
