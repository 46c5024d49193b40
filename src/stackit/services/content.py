# src/stackit/services/content.py
"""Creating questions and answers."""

from __future__ import annotations

import logging
import re

from sqlalchemy import update
from sqlalchemy.orm import Session

from stackit.models import Answer, Question, Tag, User
from stackit.services.notifications import notify_mentions, notify_new_answer

logger = logging.getLogger(__name__)

TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 20
MAX_TAGS = 5
TAG_PATTERN = re.compile(r"^[a-z0-9\-._+#]{2,30}$")


class ContentValidationError(ValueError):
    """Raised when a question or answer is malformed."""


class QuestionLockedError(Exception):
    """Raised when answering a locked question."""


def normalize_tags(tags: list[str]) -> list[str]:
    """Lowercase, trim and de-duplicate tag names, keeping their order.

    Raises:
        ContentValidationError: For an empty list, more than five tags, or a
            malformed name.
    """
    names = list(dict.fromkeys(tag.strip().lower() for tag in tags if tag.strip()))
    if not names or len(names) > MAX_TAGS:
        raise ContentValidationError(f"Must have between 1 and {MAX_TAGS} tags")
    for name in names:
        if not TAG_PATTERN.match(name):
            raise ContentValidationError(f"Invalid tag name: {name}")
    return names


def validate_question(title: str, content: str, tags: list[str]) -> list[str]:
    """Check a new question and return its normalised tag names."""
    title = title.strip()
    if not title or not content.strip():
        raise ContentValidationError("Title, content, and tags are required")
    if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        raise ContentValidationError(
            f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
        )
    validate_answer(content)
    return normalize_tags(tags)


def validate_answer(content: str) -> None:
    if len(content.strip()) < CONTENT_MIN_LENGTH:
        raise ContentValidationError(f"Content must be at least {CONTENT_MIN_LENGTH} characters")


def _resolve_tags(db: Session, names: list[str], author: User) -> list[Tag]:
    existing = {tag.name: tag for tag in db.query(Tag).filter(Tag.name.in_(names)).all()}
    tags: list[Tag] = []
    for name in names:
        tag = existing.get(name)
        if tag is None:
            tag = Tag(name=name, created_by_id=author.id, question_count=0)
            db.add(tag)
        tag.question_count = (tag.question_count or 0) + 1
        tags.append(tag)
    return tags


def create_question(
    db: Session, author: User, title: str, content: str, tags: list[str]
) -> Question:
    """Validate and store a question, its tags and the author's counters."""
    names = validate_question(title, content, tags)

    question = Question(
        title=title.strip(),
        content=content,
        author_id=author.id,
        tags=_resolve_tags(db, names, author),
    )
    db.add(question)
    db.flush()
    question.generate_slug()

    db.execute(
        update(User)
        .where(User.id == author.id)
        .values(questions_asked=User.questions_asked + 1)
        .execution_options(synchronize_session=False)
    )
    notify_mentions(db, content, author, question)

    db.commit()
    db.refresh(question)
    logger.info("User %s asked question %s", author.id, question.id)
    return question


def create_answer(db: Session, question: Question, author: User, content: str) -> Answer:
    """Validate and store an answer, then notify the question author.

    Raises:
        QuestionLockedError: If the question no longer accepts answers.
        ContentValidationError: If the content is too short.
    """
    if question.is_locked:
        raise QuestionLockedError("Question is locked")
    validate_answer(content)

    answer = Answer(content=content, question_id=question.id, author_id=author.id)
    db.add(answer)
    db.flush()

    question.answer_count = (question.answer_count or 0) + 1
    question.touch()
    db.execute(
        update(User)
        .where(User.id == author.id)
        .values(answers_given=User.answers_given + 1)
        .execution_options(synchronize_session=False)
    )
    notify_new_answer(db, question, answer, author)
    notify_mentions(db, content, author, question, answer)

    db.commit()
    db.refresh(answer)
    logger.info("User %s answered question %s with answer %s", author.id, question.id, answer.id)
    return answer
