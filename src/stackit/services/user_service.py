"""Account creation, validation and lookup helpers."""
from __future__ import annotations

import re

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from stackit.core import security
from stackit.models.user import ROLE_USER, User

__all__ = [
    "AccountError",
    "AccountValidationError",
    "DuplicateAccountError",
    "is_valid_email",
    "is_valid_username",
    "is_valid_password",
    "validate_account",
    "get_user",
    "get_user_by_username",
    "find_login_user",
    "create_account",
]

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]{3,30}$")
MIN_PASSWORD_LENGTH = 6


class AccountError(ValueError):
    """Base exception for account problems."""


class AccountValidationError(AccountError):
    """Raised when submitted account fields are malformed."""


class DuplicateAccountError(AccountError):
    """Raised when the username or email is already registered."""


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def is_valid_username(username: str) -> bool:
    return bool(USERNAME_PATTERN.match(username))


def is_valid_password(password: str) -> bool:
    return len(password) >= MIN_PASSWORD_LENGTH


def validate_account(username: str, email: str, password: str) -> None:
    """Check the fields of a new account.

    Raises:
        AccountValidationError: On the first field that fails.
    """
    if not (username and email and password):
        raise AccountValidationError("All fields are required")
    if not is_valid_email(email):
        raise AccountValidationError("Invalid email format")
    if not is_valid_username(username):
        raise AccountValidationError(
            "Username must be 3-30 characters long and contain only letters, "
            "numbers, and underscores"
        )
    if not is_valid_password(password):
        raise AccountValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )


def get_user(db: Session, user_id: int) -> User | None:
    """Return a single user by primary key."""
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> User | None:
    """Return the user with ``username``, ignoring case."""
    return db.query(User).filter(func.lower(User.username) == username.lower()).first()


def find_login_user(db: Session, username: str | None, email: str | None) -> User | None:
    """Return the account addressed by a login form."""
    if email:
        return db.query(User).filter(User.email == email.strip().lower()).first()
    if username:
        return get_user_by_username(db, username.strip())
    return None


def create_account(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
    role: str = ROLE_USER,
    is_verified: bool = False,
    reputation: int = 0,
) -> User:
    """Validate and persist a new account with a hashed password.

    Raises:
        AccountValidationError: If a field is malformed.
        DuplicateAccountError: If the email or username is taken.
    """
    username = username.strip()
    email = email.strip().lower()
    validate_account(username, email, password)

    existing = db.query(User).filter(
        or_(User.email == email, func.lower(User.username) == username.lower())
    ).first()
    if existing is not None:
        if existing.email == email:
            raise DuplicateAccountError("Email already registered")
        raise DuplicateAccountError("Username already taken")

    user = User(
        username=username,
        email=email,
        password_hash=security.hash_password(password),
        role=role,
        is_verified=is_verified,
        reputation=reputation,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
