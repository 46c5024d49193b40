# src/stackit/api/v1/endpoints/answers.py
"""Answer acceptance endpoints for the StackIt API."""

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.orm import Session

from stackit.models import Answer
from stackit.schemas.common import MessageResponse
from stackit.schemas.question import AnswerOut
from stackit.services.acceptance import (
    AcceptanceError,
    NotQuestionAuthorError,
    accept_answer,
    unaccept_answer,
)

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/answers", tags=["answers"])


def _get_answer_or_404(db: Session, answer_id: int) -> Answer:
    answer = db.query(Answer).filter(
        Answer.id == answer_id,
        Answer.is_deleted.is_(False),
    ).first()
    if answer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Answer not found")
    return answer


@router.get("/{answer_id}", response_model=AnswerOut)
async def get_answer(answer_id: int, db: SessionDep) -> Answer:
    """Return a single answer."""
    answer = _get_answer_or_404(db, answer_id)
    if not answer.is_visible:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Answer not found")
    return answer


@router.post("/{answer_id}/accept", response_model=MessageResponse)
async def accept(
    answer_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, str]:
    """Accept an answer; only the question author may do this."""
    answer = _get_answer_or_404(db, answer_id)
    try:
        accept_answer(db, answer, current_user)
    except NotQuestionAuthorError as err:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the question author can accept answers",
        ) from err
    except AcceptanceError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return {"message": "Answer accepted successfully"}


@router.delete("/{answer_id}/accept", response_model=MessageResponse)
async def unaccept(
    answer_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, str]:
    """Withdraw acceptance from an answer."""
    answer = _get_answer_or_404(db, answer_id)
    try:
        unaccept_answer(db, answer, current_user)
    except NotQuestionAuthorError as err:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the question author can unaccept answers",
        ) from err
    except AcceptanceError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return {"message": "Answer unaccepted successfully"}
