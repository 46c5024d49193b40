# src/stackit/api/v1/endpoints/votes.py
"""Vote-related endpoints for the StackIt API."""

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.orm import Session

from stackit.models import Answer, Question, User
from stackit.schemas.vote import VoteCreate, VoteResponse
from stackit.services.voting import SelfVoteError, VoteDirection, VotingService

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(tags=["votes"])


def _get_question_or_404(db: Session, question_id: int) -> Question:
    question = db.query(Question).filter(
        Question.id == question_id,
        Question.is_deleted.is_(False),
    ).first()
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return question


def _get_answer_or_404(db: Session, answer_id: int) -> Answer:
    answer = db.query(Answer).filter(
        Answer.id == answer_id,
        Answer.is_deleted.is_(False),
    ).first()
    if answer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Answer not found")
    return answer


def _cast(
    db: Session, content: Question | Answer, voter: User, vote_data: VoteCreate
) -> dict[str, object]:
    try:
        outcome = VotingService.cast_vote(db, content, voter, VoteDirection(vote_data.type))
    except SelfVoteError as err:
        kind = "question" if isinstance(content, Question) else "answer"
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot vote on your own {kind}",
        ) from err

    return {
        "message": "Vote updated successfully",
        "vote_score": outcome.vote_score,
        "user_vote": outcome.user_vote.value if outcome.user_vote else None,
    }


def _state(db: Session, content: Question | Answer, voter: User) -> dict[str, object]:
    direction = VotingService.vote_state(db, content, voter)
    return {
        "message": "Current vote",
        "vote_score": content.vote_score,
        "user_vote": direction.value if direction else None,
    }


@router.post("/questions/{question_id}/vote", response_model=VoteResponse)
async def vote_on_question(
    question_id: int,
    vote_data: VoteCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, object]:
    """Cast, switch or withdraw a vote on a question."""
    question = _get_question_or_404(db, question_id)
    return _cast(db, question, current_user, vote_data)


@router.post("/answers/{answer_id}/vote", response_model=VoteResponse)
async def vote_on_answer(
    answer_id: int,
    vote_data: VoteCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, object]:
    """Cast, switch or withdraw a vote on an answer."""
    answer = _get_answer_or_404(db, answer_id)
    return _cast(db, answer, current_user, vote_data)


@router.get("/questions/{question_id}/vote", response_model=VoteResponse)
async def get_my_question_vote(
    question_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, object]:
    """Get the current user's vote on a question."""
    return _state(db, _get_question_or_404(db, question_id), current_user)


@router.get("/answers/{answer_id}/vote", response_model=VoteResponse)
async def get_my_answer_vote(
    answer_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, object]:
    """Get the current user's vote on an answer."""
    return _state(db, _get_answer_or_404(db, answer_id), current_user)
