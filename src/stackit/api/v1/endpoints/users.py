# src/stackit/api/v1/endpoints/users.py
"""Member directory and profile endpoints."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import or_

from stackit.models import Answer, Question, User
from stackit.schemas.browse import ProfileResponse, UserListResponse
from stackit.schemas.common import Pagination
from stackit.services.user_service import get_user_by_username

from ..dependencies import SessionDep

router = APIRouter(prefix="/users", tags=["users"])

UserSort = Literal["reputation", "newest", "oldest", "name"]
ProfileTab = Literal["overview", "questions", "answers"]

OVERVIEW_ITEMS = 5

_USER_ORDER = {
    "reputation": (User.reputation.desc(), User.id.asc()),
    "newest": (User.joined_at.desc(), User.id.desc()),
    "oldest": (User.joined_at.asc(), User.id.asc()),
    "name": (User.username.asc(),),
}


@router.get("", response_model=UserListResponse)
async def list_users(
    db: SessionDep,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    sort: UserSort = Query("reputation"),
    search: str | None = Query(None, description="Match against username and bio"),
) -> dict[str, object]:
    """List active members."""
    query = db.query(User).filter(User.is_active.is_(True))
    if search:
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(User.username.ilike(pattern), User.bio.ilike(pattern)))

    total = query.count()
    users = query.order_by(*_USER_ORDER[sort]).offset((page - 1) * limit).limit(limit).all()
    return {"users": users, "pagination": Pagination.build(page, limit, total)}


@router.get("/{username}", response_model=ProfileResponse, response_model_exclude_none=True)
async def get_profile(
    username: str,
    db: SessionDep,
    tab: ProfileTab = Query("overview"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> dict[str, object]:
    """Return a public profile and the activity for the requested tab."""
    user = get_user_by_username(db, username)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    questions = db.query(Question).filter(
        Question.author_id == user.id,
        Question.is_deleted.is_(False),
        Question.is_hidden.is_(False),
    ).order_by(Question.created_at.desc(), Question.id.desc())
    answers = db.query(Answer).filter(
        Answer.author_id == user.id,
        Answer.is_deleted.is_(False),
        Answer.is_hidden.is_(False),
    ).order_by(Answer.created_at.desc(), Answer.id.desc())

    activity: dict[str, object]
    if tab == "questions":
        total = questions.count()
        activity = {
            "questions": questions.offset((page - 1) * limit).limit(limit).all(),
            "pagination": Pagination.build(page, limit, total),
        }
    elif tab == "answers":
        total = answers.count()
        activity = {
            "answers": answers.offset((page - 1) * limit).limit(limit).all(),
            "pagination": Pagination.build(page, limit, total),
        }
    else:
        activity = {
            "recent_questions": questions.limit(OVERVIEW_ITEMS).all(),
            "recent_answers": answers.limit(OVERVIEW_ITEMS).all(),
        }

    return {"user": user, "activity": activity}
