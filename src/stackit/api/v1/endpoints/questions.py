# src/stackit/api/v1/endpoints/questions.py
"""Question-related endpoints for the StackIt API."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import or_
from sqlalchemy.orm import Query as OrmQuery
from sqlalchemy.orm import Session

from stackit.models import Answer, Question, Tag
from stackit.schemas.common import Pagination
from stackit.schemas.question import (
    AnswerCreate,
    AnswerCreatedResponse,
    AnswerListResponse,
    QuestionCreate,
    QuestionCreatedResponse,
    QuestionDetailResponse,
    QuestionListResponse,
)
from stackit.services.content import (
    ContentValidationError,
    QuestionLockedError,
    create_answer,
    create_question,
)
from stackit.services.voting import VotingService

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep

router = APIRouter(prefix="/questions", tags=["questions"])

QuestionSort = Literal["newest", "oldest", "active", "unanswered", "most-voted"]
AnswerSort = Literal["votes", "newest", "oldest"]


def _visible_questions(db: Session) -> OrmQuery[Question]:
    return db.query(Question).filter(
        Question.is_hidden.is_(False),
        Question.is_deleted.is_(False),
    )


def get_visible_question_or_404(db: Session, question_id: int) -> Question:
    """Return a question that is neither hidden nor deleted."""
    question = _visible_questions(db).filter(Question.id == question_id).first()
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return question


def _apply_question_sort(query: OrmQuery[Question], sort: str) -> OrmQuery[Question]:
    # Pinned questions always lead the listing.
    query = query.order_by(Question.is_pinned.desc())
    if sort == "oldest":
        return query.order_by(Question.created_at.asc(), Question.id.asc())
    if sort == "active":
        return query.order_by(Question.last_activity.desc(), Question.id.desc())
    if sort == "most-voted":
        return query.order_by(
            (Question.upvote_count - Question.downvote_count).desc(),
            Question.created_at.desc(),
            Question.id.desc(),
        )
    return query.order_by(Question.created_at.desc(), Question.id.desc())


@router.get("", response_model=QuestionListResponse)
async def list_questions(
    db: SessionDep,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort: QuestionSort = Query("newest"),
    tag: str | None = Query(None, description="Only questions carrying this tag"),
    search: str | None = Query(None, description="Match against title and content"),
) -> dict[str, object]:
    """List visible questions with paging, sorting and filters."""
    query = _visible_questions(db)
    if tag:
        query = query.filter(Question.tags.any(Tag.name == tag.strip().lower()))
    if search:
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(Question.title.ilike(pattern), Question.content.ilike(pattern)))
    if sort == "unanswered":
        query = query.filter(Question.answer_count == 0)

    total = query.count()
    questions = _apply_question_sort(query, sort).offset((page - 1) * limit).limit(limit).all()
    return {"questions": questions, "pagination": Pagination.build(page, limit, total)}


@router.post("", response_model=QuestionCreatedResponse, status_code=status.HTTP_201_CREATED)
async def ask_question(
    payload: QuestionCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, object]:
    """Create a question with 1-5 tags."""
    try:
        question = create_question(db, current_user, payload.title, payload.content, payload.tags)
    except ContentValidationError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return {"message": "Question created successfully", "question": question}


@router.get("/{question_id}", response_model=QuestionDetailResponse)
async def get_question(
    question_id: int,
    db: SessionDep,
    current_user: OptionalUserDep,
) -> dict[str, object]:
    """Return a question and count the view."""
    question = get_visible_question_or_404(db, question_id)
    question.views = Question.views + 1
    db.commit()
    db.refresh(question)

    user_vote = None
    if current_user is not None:
        direction = VotingService.vote_state(db, question, current_user)
        user_vote = direction.value if direction else None
    return {"question": question, "user_vote": user_vote}


@router.get("/{question_id}/answers", response_model=AnswerListResponse)
async def list_answers(
    question_id: int,
    db: SessionDep,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort: AnswerSort = Query("votes"),
) -> dict[str, object]:
    """List the visible answers of a question."""
    get_visible_question_or_404(db, question_id)
    query = db.query(Answer).filter(
        Answer.question_id == question_id,
        Answer.is_hidden.is_(False),
        Answer.is_deleted.is_(False),
    )
    total = query.count()

    if sort == "newest":
        query = query.order_by(Answer.created_at.desc(), Answer.id.desc())
    elif sort == "oldest":
        query = query.order_by(Answer.created_at.asc(), Answer.id.asc())
    else:
        query = query.order_by(
            Answer.is_accepted.desc(),
            (Answer.upvote_count - Answer.downvote_count).desc(),
            Answer.created_at.asc(),
        )

    answers = query.offset((page - 1) * limit).limit(limit).all()
    return {"answers": answers, "pagination": Pagination.build(page, limit, total)}


@router.post(
    "/{question_id}/answers",
    response_model=AnswerCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_answer(
    question_id: int,
    payload: AnswerCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, object]:
    """Answer a question that is not locked."""
    question = get_visible_question_or_404(db, question_id)
    try:
        answer = create_answer(db, question, current_user, payload.content)
    except QuestionLockedError as err:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(err)) from err
    except ContentValidationError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return {"message": "Answer posted successfully", "answer": answer}
