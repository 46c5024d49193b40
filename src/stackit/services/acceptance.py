# src/stackit/services/acceptance.py
"""Accepting and un-accepting answers, and the reputation that goes with it."""

from __future__ import annotations

import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from stackit.core.settings import settings
from stackit.models import Answer, Question, User
from stackit.services.notifications import notify_accepted_answer

logger = logging.getLogger(__name__)

__all__ = ["AcceptanceError", "NotQuestionAuthorError", "accept_answer", "unaccept_answer"]


class AcceptanceError(Exception):
    """Raised when an answer cannot change acceptance state."""


class NotQuestionAuthorError(AcceptanceError):
    """Raised when someone other than the question author accepts an answer."""


def _grant(db: Session, user_id: int, points: int, accepted: int) -> None:
    db.execute(
        update(User)
        .where(User.id == user_id)
        .values(
            reputation=User.reputation + points,
            accepted_answers=User.accepted_answers + accepted,
        )
        .execution_options(synchronize_session=False)
    )


def _check_author(question: Question, user: User) -> None:
    if question.author_id != user.id:
        raise NotQuestionAuthorError("Only the question author can change the accepted answer")


def accept_answer(db: Session, answer: Answer, user: User) -> Question:
    """Mark ``answer`` as the accepted answer of its question.

    Any previously accepted answer loses its acceptance and the bonus that
    came with it.

    Raises:
        NotQuestionAuthorError: If ``user`` did not ask the question.
        AcceptanceError: If the answer is already accepted.
    """
    question = answer.question
    _check_author(question, user)
    if answer.is_accepted:
        raise AcceptanceError("Answer is already accepted")

    bonus = settings.reputation_accepted_answer
    previous = db.query(Answer).filter(
        Answer.question_id == question.id,
        Answer.is_accepted.is_(True),
        Answer.id != answer.id,
    ).all()
    for other in previous:
        other.is_accepted = False
        _grant(db, other.author_id, -bonus, -1)

    answer.is_accepted = True
    question.accepted_answer_id = answer.id
    question.is_resolved = True
    question.touch()
    _grant(db, answer.author_id, bonus, 1)
    notify_accepted_answer(db, question, answer, user)

    db.commit()
    logger.info(
        "Answer %s accepted on question %s (replaced %s)",
        answer.id,
        question.id,
        [other.id for other in previous] or "none",
    )
    return question


def unaccept_answer(db: Session, answer: Answer, user: User) -> Question:
    """Withdraw acceptance from ``answer``.

    Raises:
        NotQuestionAuthorError: If ``user`` did not ask the question.
        AcceptanceError: If the answer is not accepted.
    """
    question = answer.question
    _check_author(question, user)
    if not answer.is_accepted:
        raise AcceptanceError("Answer is not accepted")

    answer.is_accepted = False
    question.accepted_answer_id = None
    question.is_resolved = False
    question.touch()
    _grant(db, answer.author_id, -settings.reputation_accepted_answer, -1)

    db.commit()
    logger.info("Answer %s unaccepted on question %s", answer.id, question.id)
    return question
