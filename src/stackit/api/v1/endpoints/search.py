# src/stackit/api/v1/endpoints/search.py
"""Site-wide search across questions, users and tags."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import or_

from stackit.models import Question, Tag, User
from stackit.schemas.browse import SearchResponse
from stackit.schemas.common import Pagination

from ..dependencies import SessionDep

router = APIRouter(prefix="/search", tags=["search"])

SearchType = Literal["all", "questions", "users", "tags"]
SearchSort = Literal["relevance", "newest", "oldest", "most-voted"]

MIN_QUERY_LENGTH = 2
# Per-kind caps when searching everything at once.
ALL_LIMITS = {"questions": 5, "users": 3, "tags": 5}


@router.get("", response_model=SearchResponse)
async def search(
    db: SessionDep,
    q: str = Query("", description="Search text"),
    type: SearchType = Query("all"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort: SearchSort = Query("relevance"),
) -> dict[str, object]:
    """Search questions, users and tags by substring."""
    term = q.strip()
    if len(term) < MIN_QUERY_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Search query must be at least {MIN_QUERY_LENGTH} characters",
        )
    pattern = f"%{term}%"

    questions = db.query(Question).filter(
        Question.is_hidden.is_(False),
        Question.is_deleted.is_(False),
        or_(
            Question.title.ilike(pattern),
            Question.content.ilike(pattern),
            Question.tags.any(Tag.name.ilike(pattern)),
        ),
    )
    if sort == "oldest":
        questions = questions.order_by(Question.created_at.asc(), Question.id.asc())
    elif sort == "most-voted":
        questions = questions.order_by(
            (Question.upvote_count - Question.downvote_count).desc(), Question.id.desc()
        )
    else:
        questions = questions.order_by(Question.created_at.desc(), Question.id.desc())

    users = db.query(User).filter(
        User.is_active.is_(True),
        or_(User.username.ilike(pattern), User.bio.ilike(pattern)),
    ).order_by(User.reputation.desc(), User.id.asc())

    tags = db.query(Tag).filter(
        or_(Tag.name.ilike(pattern), Tag.description.ilike(pattern))
    ).order_by(Tag.question_count.desc(), Tag.name.asc())

    results: dict[str, list[object]] = {"questions": [], "users": [], "tags": []}
    if type == "all":
        results["questions"] = questions.limit(ALL_LIMITS["questions"]).all()
        results["users"] = users.limit(ALL_LIMITS["users"]).all()
        results["tags"] = tags.limit(ALL_LIMITS["tags"]).all()
        found = sum(len(items) for items in results.values())
        pagination = Pagination(page=1, limit=limit, total=found, pages=1 if found else 0)
    else:
        query = {"questions": questions, "users": users, "tags": tags}[type]
        total = query.count()
        results[type] = query.offset((page - 1) * limit).limit(limit).all()
        pagination = Pagination.build(page, limit, total)

    return {**results, "pagination": pagination}
