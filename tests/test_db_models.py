# mypy: ignore-errors
"""Tests for model-level constraints."""

from __future__ import annotations

import pytest
from fastapi import status

from stackit.models import Notification, User
from stackit.models.notification import NOTIFICATION_TYPES
from stackit.models.user import ROLE_MODERATOR, ROLES


def test_user_role_must_be_known(password_hash) -> None:
    moderator = User(
        username="mod", email="mod@example.com", password_hash=password_hash, role=ROLE_MODERATOR
    )
    assert moderator.role == "moderator"
    assert "guest" not in ROLES

    with pytest.raises(ValueError, match="Unknown role: superuser"):
        User(username="x_user", email="x@example.com", password_hash=password_hash, role="superuser")


def test_role_change_is_validated(author) -> None:
    with pytest.raises(ValueError):
        author.role = "guest"


def test_notification_type_must_be_known(author, voter) -> None:
    for type_ in NOTIFICATION_TYPES:
        Notification(recipient_id=author.id, sender_id=voter.id, type=type_, title="t", message="m")

    with pytest.raises(ValueError, match="Unknown notification type: comment"):
        Notification(recipient_id=author.id, sender_id=voter.id, type="comment", title="t", message="m")


def test_content_visibility(db_session, question, answer) -> None:
    assert question.is_visible
    assert answer.is_visible

    answer.is_hidden = True
    question.is_deleted = True
    assert not answer.is_visible
    assert not question.is_visible


def test_hidden_answer_is_not_served(client, db_session, answer) -> None:
    answer.is_hidden = True
    db_session.commit()

    response = client.get(f"/api/v1/answers/{answer.id}")
    assert response.status_code == status.HTTP_404_NOT_FOUND
