# src/stackit/api/v1/endpoints/auth.py
"""Authentication endpoints for the StackIt API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from stackit.core.security import create_access_token, verify_password
from stackit.core.settings import settings
from stackit.db.time import utcnow
from stackit.models import User
from stackit.schemas.common import MessageResponse
from stackit.schemas.user import AuthResponse, CurrentUserResponse, LoginRequest, RegisterRequest
from stackit.services.user_service import (
    AccountValidationError,
    DuplicateAccountError,
    create_account,
    find_login_user,
)

from ..dependencies import CurrentUserDep, SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


def _issue_token(response: Response, user: User) -> str:
    """Mint an access token and store it in the auth cookie."""
    token = create_access_token(user.id)
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="strict",
        max_age=settings.access_token_expire_minutes * 60,
    )
    return token


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, response: Response, db: SessionDep) -> dict[str, object]:
    """Create an account and sign it in."""
    if payload.password != payload.confirm_password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Passwords do not match")

    try:
        user = create_account(
            db,
            username=payload.username,
            email=payload.email,
            password=payload.password,
        )
    except AccountValidationError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except DuplicateAccountError as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err)) from err

    token = _issue_token(response, user)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return {"message": "User registered successfully", "user": user, "access_token": token}


@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest, response: Response, db: SessionDep) -> dict[str, object]:
    """Sign in with a username or email and a password."""
    user = find_login_user(db, payload.username, payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    if user.is_banned:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is banned")

    user.last_active = utcnow()
    db.commit()
    db.refresh(user)

    token = _issue_token(response, user)
    return {"message": "Login successful", "user": user, "access_token": token}


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> dict[str, str]:
    """Clear the auth cookie."""
    response.delete_cookie(settings.auth_cookie_name)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=CurrentUserResponse)
async def me(current_user: CurrentUserDep, db: SessionDep) -> dict[str, object]:
    """Return the signed-in user's own profile."""
    current_user.last_active = utcnow()
    db.commit()
    db.refresh(current_user)
    return {"user": current_user}
