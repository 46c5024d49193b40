"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field, model_validator

from .common import APIModel


class UserStats(APIModel):
    """Activity counters shown on profiles."""

    questions_asked: int = 0
    answers_given: int = 0
    upvotes_received: int = 0
    downvotes_received: int = 0
    accepted_answers: int = 0


class AuthorSummary(APIModel):
    """Minimal author block embedded in questions, answers and notifications."""

    id: int
    username: str
    avatar: str | None = None
    reputation: int = 0


class UserPublic(APIModel):
    """Public profile; never includes the email address."""

    id: int
    username: str
    avatar: str | None = None
    bio: str = ""
    role: str
    reputation: int
    joined_at: datetime
    stats: UserStats


class UserPrivate(UserPublic):
    """Profile returned to the account owner."""

    email: str
    is_verified: bool
    last_active: datetime


class RegisterRequest(APIModel):
    """Schema for account registration."""

    username: str = Field(..., description="3-30 letters, digits or underscores")
    email: str
    password: str
    confirm_password: str


class LoginRequest(APIModel):
    """Schema for password login by username or email."""

    username: str | None = None
    email: str | None = None
    password: str

    @model_validator(mode="after")
    def _require_identifier(self) -> "LoginRequest":
        if not (self.username or self.email):
            raise ValueError("Either username or email is required")
        return self


class AuthResponse(APIModel):
    """Response returned after registration or login."""

    message: str
    user: UserPrivate
    access_token: str
    token_type: str = "bearer"


class CurrentUserResponse(APIModel):
    """Envelope for ``GET /auth/me``."""

    user: UserPrivate
