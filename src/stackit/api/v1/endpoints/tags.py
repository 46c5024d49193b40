# src/stackit/api/v1/endpoints/tags.py
"""Tag listing endpoint."""

from typing import Literal

from fastapi import APIRouter, Query
from sqlalchemy import or_

from stackit.models import Tag
from stackit.schemas.browse import TagListResponse

from ..dependencies import SessionDep

router = APIRouter(prefix="/tags", tags=["tags"])

TagSort = Literal["popular", "name", "newest"]


@router.get("", response_model=TagListResponse)
async def list_tags(
    db: SessionDep,
    sort: TagSort = Query("popular"),
    search: str | None = Query(None, description="Match against name and description"),
    limit: int = Query(100, ge=1, le=500),
) -> dict[str, object]:
    """List tags by popularity, name or age."""
    query = db.query(Tag)
    if search:
        pattern = f"%{search.strip().lower()}%"
        query = query.filter(or_(Tag.name.ilike(pattern), Tag.description.ilike(pattern)))

    if sort == "name":
        query = query.order_by(Tag.name.asc())
    elif sort == "newest":
        query = query.order_by(Tag.created_at.desc(), Tag.id.desc())
    else:
        query = query.order_by(Tag.question_count.desc(), Tag.name.asc())

    return {"tags": query.limit(limit).all()}
