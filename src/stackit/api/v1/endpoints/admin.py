# src/stackit/api/v1/endpoints/admin.py
"""Administrator dashboard and moderation endpoints."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import or_

from stackit.core.settings import settings
from stackit.models import Answer, Question, User
from stackit.models.user import ROLE_ADMIN, ROLE_MODERATOR
from stackit.schemas.admin import (
    AdminContentListResponse,
    AdminStats,
    AdminUserListResponse,
    AdminUserOut,
    BulkActionRequest,
    BulkActionResponse,
    CreateAdminRequest,
)
from stackit.schemas.common import Pagination
from stackit.services.moderation import BulkActionError, ModerationService
from stackit.services.user_service import (
    AccountValidationError,
    DuplicateAccountError,
    create_account,
)

from ..dependencies import AdminUserDep, SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

UserStatus = Literal["all", "active", "banned", "admin", "moderator"]
ContentType = Literal["question", "answer"]
ContentStatus = Literal["all", "active", "locked", "hidden", "deleted"]

CONTENT_PREVIEW_LENGTH = 200


def _preview(text: str) -> str:
    if len(text) <= CONTENT_PREVIEW_LENGTH:
        return text
    return text[:CONTENT_PREVIEW_LENGTH] + "..."


@router.get("/stats", response_model=AdminStats)
async def admin_stats(admin: AdminUserDep, db: SessionDep) -> dict[str, int]:
    """Return platform totals for the dashboard."""
    hidden = (
        db.query(Question).filter(Question.is_hidden.is_(True)).count()
        + db.query(Answer).filter(Answer.is_hidden.is_(True)).count()
    )
    deleted = (
        db.query(Question).filter(Question.is_deleted.is_(True)).count()
        + db.query(Answer).filter(Answer.is_deleted.is_(True)).count()
    )
    return {
        "total_users": db.query(User).count(),
        "total_questions": db.query(Question).count(),
        "total_answers": db.query(Answer).count(),
        "banned_users": db.query(User).filter(User.is_banned.is_(True)).count(),
        "locked_questions": db.query(Question).filter(Question.is_locked.is_(True)).count(),
        "hidden_content": hidden,
        "deleted_content": deleted,
    }


@router.get("/users", response_model=AdminUserListResponse)
async def admin_users(
    admin: AdminUserDep,
    db: SessionDep,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    search: str | None = Query(None, description="Match against username and email"),
    status_filter: UserStatus = Query("all", alias="status"),
) -> dict[str, object]:
    """List every account, including banned ones."""
    query = db.query(User)
    if search:
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(User.username.ilike(pattern), User.email.ilike(pattern)))

    if status_filter == "active":
        query = query.filter(User.is_banned.is_(False), User.is_active.is_(True))
    elif status_filter == "banned":
        query = query.filter(User.is_banned.is_(True))
    elif status_filter == "admin":
        query = query.filter(User.role == ROLE_ADMIN)
    elif status_filter == "moderator":
        query = query.filter(User.role == ROLE_MODERATOR)

    total = query.count()
    users = (
        query.order_by(User.joined_at.desc(), User.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return {"users": users, "pagination": Pagination.build(page, limit, total)}


@router.get("/content", response_model=AdminContentListResponse)
async def admin_content(
    admin: AdminUserDep,
    db: SessionDep,
    content_type: ContentType = Query("question", alias="type"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    search: str | None = Query(None),
    status_filter: ContentStatus = Query("all", alias="status"),
) -> dict[str, object]:
    """List questions or answers regardless of moderation state."""
    model = Question if content_type == "question" else Answer
    query = db.query(model)

    if search:
        pattern = f"%{search.strip()}%"
        if model is Question:
            query = query.filter(or_(Question.title.ilike(pattern), Question.content.ilike(pattern)))
        else:
            query = query.filter(Answer.content.ilike(pattern))

    if status_filter == "active":
        query = query.filter(
            model.is_locked.is_(False),
            model.is_hidden.is_(False),
            model.is_deleted.is_(False),
        )
    elif status_filter == "locked":
        query = query.filter(model.is_locked.is_(True))
    elif status_filter == "hidden":
        query = query.filter(model.is_hidden.is_(True))
    elif status_filter == "deleted":
        query = query.filter(model.is_deleted.is_(True))

    total = query.count()
    items = (
        query.order_by(model.created_at.desc(), model.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    content = []
    for item in items:
        if isinstance(item, Question):
            title, pinned = item.title, item.is_pinned
        else:
            title, pinned = item.question.title, False
        content.append({
            "id": item.id,
            "type": content_type,
            "title": title,
            "content": _preview(item.content),
            "author": item.author,
            "vote_score": item.vote_score,
            "is_locked": item.is_locked,
            "is_pinned": pinned,
            "is_hidden": item.is_hidden,
            "is_deleted": item.is_deleted,
            "created_at": item.created_at,
        })
    return {"content": content, "pagination": Pagination.build(page, limit, total)}


@router.post("/bulk-action", response_model=BulkActionResponse)
async def bulk_action(
    payload: BulkActionRequest,
    admin: AdminUserDep,
    db: SessionDep,
) -> dict[str, object]:
    """Apply one moderation action to many users or content items."""
    try:
        results = ModerationService.apply_bulk_action(
            db,
            admin,
            payload.type,
            payload.action,
            payload.items,
            payload.reason,
        )
    except BulkActionError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err

    success_count = sum(1 for result in results if result.success)
    failure_count = len(results) - success_count
    return {
        "message": f"Bulk action completed: {success_count} successful, {failure_count} failed",
        "results": [
            {"id": result.id, "success": result.success, "error": result.error}
            for result in results
        ],
        "success_count": success_count,
        "failure_count": failure_count,
    }


@router.post("/create-admin", response_model=AdminUserOut, status_code=status.HTTP_201_CREATED)
async def create_admin(
    payload: CreateAdminRequest,
    admin: AdminUserDep,
    db: SessionDep,
) -> User:
    """Create another verified administrator account."""
    try:
        user = create_account(
            db,
            username=payload.username,
            email=payload.email,
            password=payload.password,
            role=ROLE_ADMIN,
            is_verified=True,
            reputation=settings.admin_starting_reputation,
        )
    except (AccountValidationError, DuplicateAccountError) as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err

    logger.info("Admin %s created admin account %s (%s)", admin.id, user.id, payload.reason or "-")
    return user
