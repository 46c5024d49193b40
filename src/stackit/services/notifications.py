# src/stackit/services/notifications.py
"""Notification fan-out helpers.

Notifications are added to the caller's session and committed together with
the action that produced them.
"""

from __future__ import annotations

import logging
import re

from sqlalchemy import func
from sqlalchemy.orm import Session

from stackit.models import Answer, Notification, Question, User

logger = logging.getLogger(__name__)

MENTION_PATTERN = re.compile(r"(?<![\w@])@([A-Za-z0-9_]{3,30})\b")

TITLE_MAX_LENGTH = 100
MESSAGE_MAX_LENGTH = 500

__all__ = [
    "create_notification",
    "notify_new_answer",
    "notify_upvote",
    "notify_accepted_answer",
    "notify_mentions",
    "notify_system",
    "extract_mentions",
]


def create_notification(
    db: Session,
    *,
    recipient_id: int,
    sender_id: int,
    type_: str,
    title: str,
    message: str,
    question_id: int | None = None,
    answer_id: int | None = None,
    allow_self: bool = False,
) -> Notification | None:
    """Queue a notification for ``recipient_id``.

    Returns:
        The pending notification, or None when the recipient is the sender.
    """
    if recipient_id == sender_id and not allow_self:
        return None

    notification = Notification(
        recipient_id=recipient_id,
        sender_id=sender_id,
        type=type_,
        title=title[:TITLE_MAX_LENGTH],
        message=message[:MESSAGE_MAX_LENGTH],
        related_question_id=question_id,
        related_answer_id=answer_id,
        is_read=False,
    )
    db.add(notification)
    logger.debug("Queued %s notification for user %s", type_, recipient_id)
    return notification


def notify_new_answer(db: Session, question: Question, answer: Answer, author: User) -> Notification | None:
    """Tell the question author that ``author`` answered."""
    return create_notification(
        db,
        recipient_id=question.author_id,
        sender_id=author.id,
        type_="answer",
        title="New answer to your question",
        message=f'{author.username} answered your question "{question.title}"',
        question_id=question.id,
        answer_id=answer.id,
    )


def notify_upvote(db: Session, content: Question | Answer, voter: User) -> Notification | None:
    """Tell a content author that ``voter`` upvoted their question or answer."""
    if isinstance(content, Answer):
        kind = "answer"
        question_id = content.question_id
        answer_id: int | None = content.id
        title = content.question.title if content.question is not None else ""
    else:
        kind = "question"
        question_id = content.id
        answer_id = None
        title = content.title

    suffix = f' "{title}"' if title else ""
    return create_notification(
        db,
        recipient_id=content.author_id,
        sender_id=voter.id,
        type_="vote",
        title=f"Your {kind} received an upvote",
        message=f"{voter.username} upvoted your {kind}{suffix}",
        question_id=question_id,
        answer_id=answer_id,
    )


def notify_accepted_answer(
    db: Session, question: Question, answer: Answer, question_author: User
) -> Notification | None:
    """Tell the answer author that their answer was accepted."""
    return create_notification(
        db,
        recipient_id=answer.author_id,
        sender_id=question_author.id,
        type_="accepted_answer",
        title="Your answer was accepted!",
        message=f'{question_author.username} accepted your answer to "{question.title}"',
        question_id=question.id,
        answer_id=answer.id,
    )


def extract_mentions(text: str) -> list[str]:
    """Return the distinct ``@username`` handles in ``text``, in order of appearance."""
    seen: dict[str, None] = {}
    for match in MENTION_PATTERN.finditer(text):
        seen.setdefault(match.group(1).lower(), None)
    return list(seen)


def notify_mentions(
    db: Session,
    text: str,
    author: User,
    question: Question,
    answer: Answer | None = None,
) -> list[Notification]:
    """Notify every existing user mentioned in ``text`` once."""
    handles = extract_mentions(text)
    if not handles:
        return []

    users = db.query(User).filter(func.lower(User.username).in_(handles)).all()
    kind = "answer" if answer is not None else "question"
    created: list[Notification] = []
    for user in users:
        notification = create_notification(
            db,
            recipient_id=user.id,
            sender_id=author.id,
            type_="mention",
            title=f"You were mentioned in a {kind}",
            message=f'{author.username} mentioned you in a {kind} "{question.title}"',
            question_id=question.id,
            answer_id=answer.id if answer is not None else None,
        )
        if notification is not None:
            created.append(notification)
    return created


def notify_system(
    db: Session, recipient: User, title: str, message: str, sender: User | None = None
) -> Notification | None:
    """Send a system notice; without a sender it is attributed to the recipient."""
    return create_notification(
        db,
        recipient_id=recipient.id,
        sender_id=sender.id if sender is not None else recipient.id,
        type_="system",
        title=title,
        message=message,
        allow_self=True,
    )
