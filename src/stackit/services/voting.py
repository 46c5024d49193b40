# src/stackit/services/voting.py
"""Vote reconciliation and the reputation ledger.

A voter holds at most one vote per question or answer. Requesting the vote
already held toggles it off; requesting the opposite vote switches it. The
author's reputation moves by the difference between the value of the new
vote and the value of the vote it replaced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from sqlalchemy import update
from sqlalchemy.orm import Session

from stackit.core.settings import settings
from stackit.models import Answer, AnswerVote, Question, QuestionVote, User
from stackit.models.vote import DIRECTION_DOWN, DIRECTION_UP
from stackit.services.notifications import notify_upvote

logger = logging.getLogger(__name__)

__all__ = [
    "VoteDirection",
    "VoteTransition",
    "VoteOutcome",
    "VotingError",
    "SelfVoteError",
    "reconcile_vote",
    "VotingService",
]


class VoteDirection(str, Enum):
    """Direction of a vote as exposed by the API."""

    UP = "up"
    DOWN = "down"

    @property
    def stored(self) -> int:
        """Return the value kept in the ``direction`` column."""
        return DIRECTION_UP if self is VoteDirection.UP else DIRECTION_DOWN

    @classmethod
    def from_stored(cls, direction: int | None) -> VoteDirection | None:
        """Map a stored direction (or a missing row) back to the enum."""
        if direction is None:
            return None
        return cls.UP if direction == DIRECTION_UP else cls.DOWN


class VotingError(Exception):
    """Base exception for rejected votes."""


class SelfVoteError(VotingError):
    """Raised when a member votes on their own question or answer."""


@dataclass(frozen=True)
class VoteTransition:
    """Result of reconciling a requested vote against the current one."""

    current: VoteDirection | None
    requested: VoteDirection
    new: VoteDirection | None
    reputation_delta: int

    @property
    def toggled_off(self) -> bool:
        return self.new is None

    @property
    def upvote_change(self) -> int:
        """Change in the size of the upvote set: -1, 0 or 1."""
        return int(self.new is VoteDirection.UP) - int(self.current is VoteDirection.UP)

    @property
    def downvote_change(self) -> int:
        """Change in the size of the downvote set: -1, 0 or 1."""
        return int(self.new is VoteDirection.DOWN) - int(self.current is VoteDirection.DOWN)

    @property
    def is_fresh_upvote(self) -> bool:
        """True when the voter moved into the upvote set with this request."""
        return self.new is VoteDirection.UP and self.current is not VoteDirection.UP


@dataclass(frozen=True)
class VoteOutcome:
    """What the caller sees after a vote: the score and their own vote."""

    vote_score: int
    user_vote: VoteDirection | None
    transition: VoteTransition


def _points(
    direction: VoteDirection | None, upvote_value: int, downvote_value: int
) -> int:
    if direction is VoteDirection.UP:
        return upvote_value
    if direction is VoteDirection.DOWN:
        return downvote_value
    return 0


def reconcile_vote(
    current: VoteDirection | None,
    requested: VoteDirection,
    *,
    upvote_value: int | None = None,
    downvote_value: int | None = None,
) -> VoteTransition:
    """Compute the new vote and the author's reputation delta.

    Args:
        current: The vote the voter holds now, or None.
        requested: The vote being requested.
        upvote_value: Points an upvote is worth; defaults to settings.
        downvote_value: Points a downvote is worth; defaults to settings.

    Returns:
        The transition, including the reputation change for the author.
    """
    up = settings.reputation_upvote if upvote_value is None else upvote_value
    down = settings.reputation_downvote if downvote_value is None else downvote_value

    new = None if current is requested else requested
    delta = _points(new, up, down) - _points(current, up, down)
    return VoteTransition(current=current, requested=requested, new=new, reputation_delta=delta)


_VOTE_MODELS: dict[type, type[QuestionVote] | type[AnswerVote]] = {
    Question: QuestionVote,
    Answer: AnswerVote,
}


def _vote_model_for(content: Question | Answer) -> type[QuestionVote] | type[AnswerVote]:
    try:
        return _VOTE_MODELS[type(content)]
    except KeyError as err:
        raise TypeError(f"{type(content).__name__} is not votable") from err


class VotingService:
    """Service applying vote transitions to questions and answers."""

    @staticmethod
    def vote_state(db: Session, content: Question | Answer, voter: User) -> VoteDirection | None:
        """Return the vote ``voter`` currently holds on ``content``."""
        vote_model = _vote_model_for(content)
        row = db.get(vote_model, (content.id, voter.id))
        return VoteDirection.from_stored(row.direction if row is not None else None)

    @staticmethod
    def cast_vote(
        db: Session,
        content: Question | Answer,
        voter: User,
        direction: VoteDirection,
    ) -> VoteOutcome:
        """Apply ``direction`` from ``voter`` to ``content`` and commit.

        The vote row, the content's vote counters, the author's reputation
        and received-vote counters, and any notification are written in one
        transaction. Counters are changed with in-database
        increments, never overwritten with absolute values.

        Raises:
            SelfVoteError: If the voter authored the content.
        """
        if content.author_id == voter.id:
            raise SelfVoteError("Cannot vote on your own content")

        vote_model = _vote_model_for(content)
        row = db.get(vote_model, (content.id, voter.id))
        current = VoteDirection.from_stored(row.direction if row is not None else None)
        transition = reconcile_vote(current, direction)

        if transition.toggled_off:
            if row is not None:
                db.delete(row)
        elif row is None:
            db.add(vote_model(content_id=content.id, voter_id=voter.id, direction=transition.new.stored))
        else:
            row.direction = transition.new.stored
        db.flush()

        VotingService._apply_to_content(db, content, transition)
        VotingService._apply_to_author(db, content.author_id, transition)

        if transition.is_fresh_upvote:
            notify_upvote(db, content, voter)

        db.commit()
        db.refresh(content)

        logger.info(
            "Vote on %s %s by user %s: %s -> %s (reputation %+d for user %s)",
            type(content).__name__.lower(),
            content.id,
            voter.id,
            current.value if current else "none",
            transition.new.value if transition.new else "none",
            transition.reputation_delta,
            content.author_id,
        )
        return VoteOutcome(
            vote_score=content.vote_score,
            user_vote=transition.new,
            transition=transition,
        )

    @staticmethod
    def _apply_to_content(db: Session, content: Question | Answer, transition: VoteTransition) -> None:
        """Increment the vote counters of ``content`` in the database."""
        content_model = type(content)
        db.execute(
            update(content_model)
            .where(content_model.id == content.id)
            .values(
                upvote_count=content_model.upvote_count + transition.upvote_change,
                downvote_count=content_model.downvote_count + transition.downvote_change,
            )
            .execution_options(synchronize_session=False)
        )

    @staticmethod
    def _apply_to_author(db: Session, author_id: int, transition: VoteTransition) -> None:
        """Increment the author's reputation and received-vote counters in the database."""
        db.execute(
            update(User)
            .where(User.id == author_id)
            .values(
                reputation=User.reputation + transition.reputation_delta,
                upvotes_received=User.upvotes_received + transition.upvote_change,
                downvotes_received=User.downvotes_received + transition.downvote_change,
            )
            .execution_options(synchronize_session=False)
        )
