# mypy: ignore-errors
"""Unit tests for account and content validation helpers."""

from __future__ import annotations

import pytest

from stackit.services.content import ContentValidationError, normalize_tags, validate_question
from stackit.services.user_service import (
    AccountValidationError,
    DuplicateAccountError,
    create_account,
    find_login_user,
    is_valid_email,
    is_valid_username,
    validate_account,
)


@pytest.mark.parametrize(
    ("email", "valid"),
    [
        ("dev@example.com", True),
        ("first.last+tag@sub.example.org", True),
        ("no-at-sign.example.com", False),
        ("two@@example.com", False),
        ("spaces in@example.com", False),
    ],
)
def test_is_valid_email(email, valid) -> None:
    assert is_valid_email(email) is valid


@pytest.mark.parametrize(
    ("username", "valid"),
    [("ab", False), ("abc", True), ("under_score_9", True), ("has-dash", False), ("x" * 31, False)],
)
def test_is_valid_username(username, valid) -> None:
    assert is_valid_username(username) is valid


def test_validate_account_messages() -> None:
    with pytest.raises(AccountValidationError, match="All fields are required"):
        validate_account("", "a@b.co", "secret1")
    with pytest.raises(AccountValidationError, match="at least 6 characters"):
        validate_account("valid_name", "a@b.co", "12345")


def test_normalize_tags_dedupes_in_order() -> None:
    assert normalize_tags([" Python ", "c++", "python", "", "c#"]) == ["python", "c++", "c#"]


def test_normalize_tags_rejects_bad_names() -> None:
    with pytest.raises(ContentValidationError, match="Invalid tag name: a"):
        normalize_tags(["a"])
    with pytest.raises(ContentValidationError, match="between 1 and 5"):
        normalize_tags(["   "])


def test_validate_question_title_bounds() -> None:
    content = "A body that is comfortably long enough."
    with pytest.raises(ContentValidationError, match="Title must be between"):
        validate_question("x" * 201, content, ["python"])
    assert validate_question("x" * 10, content, ["Python"]) == ["python"]


def test_create_account_and_login_lookup(db_session) -> None:
    user = create_account(db_session, username="  grace ", email=" Grace@Example.com ", password="hopper1")

    assert user.username == "grace"
    assert user.email == "grace@example.com"
    assert find_login_user(db_session, "GRACE", None).id == user.id
    assert find_login_user(db_session, None, "GRACE@example.com").id == user.id
    assert find_login_user(db_session, None, None) is None

    with pytest.raises(DuplicateAccountError, match="Username already taken"):
        create_account(db_session, username="Grace", email="other@example.com", password="hopper1")
