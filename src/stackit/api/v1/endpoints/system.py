"""Public platform statistics for the StackIt API."""

from fastapi import APIRouter

from stackit.core.settings import settings
from stackit.models import Answer, Question, User
from stackit.schemas.browse import PublicStats

from ..dependencies import SessionDep

router = APIRouter(tags=["system"])


@router.get("/stats", response_model=PublicStats)
async def get_stats(db: SessionDep) -> dict[str, int]:
    """Return counts of active users and non-deleted questions and answers."""
    return {
        "total_users": db.query(User).filter(User.is_active.is_(True)).count(),
        "total_questions": db.query(Question).filter(Question.is_deleted.is_(False)).count(),
        "total_answers": db.query(Answer).filter(Answer.is_deleted.is_(False)).count(),
    }


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a sanitized snapshot of public runtime configuration.

    Excludes secrets and connection strings.
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
            "access_token_expire_minutes": settings.access_token_expire_minutes,
        },
        "reputation": {
            "upvote": settings.reputation_upvote,
            "downvote": settings.reputation_downvote,
            "accepted_answer": settings.reputation_accepted_answer,
        },
    }
