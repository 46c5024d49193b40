# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-stackit")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from stackit.core.security import create_access_token, hash_password
from stackit.db.session import Base
from stackit.db.session import get_db as app_get_session
from stackit.main import app as fastapi_app
from stackit.models import Answer, Question, Tag, User
from stackit.models.user import ROLE_ADMIN, ROLE_USER

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "password123"

_USER_COUNTER = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory database for every test."""
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(scope="session")
def password_hash() -> str:
    """Hash the shared test password once; Argon2 is deliberately slow."""
    return hash_password(TEST_PASSWORD)


@pytest.fixture()
def make_user(db_session: Session, password_hash: str) -> Callable[..., User]:
    """Return a factory that persists users."""

    def _make_user(
        username: str | None = None,
        *,
        role: str = ROLE_USER,
        reputation: int = 0,
        is_banned: bool = False,
        bio: str = "",
    ) -> User:
        number = next(_USER_COUNTER)
        username = username or f"user_{number}"
        user = User(
            username=username,
            email=f"{username.lower()}@example.com",
            password_hash=password_hash,
            role=role,
            reputation=reputation,
            is_banned=is_banned,
            bio=bio,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


def bearer(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Return a helper that builds bearer headers for any user."""
    return bearer


@pytest.fixture()
def author(make_user: Callable[..., User]) -> User:
    """The member who asks questions."""
    return make_user("alice")


@pytest.fixture()
def voter(make_user: Callable[..., User]) -> User:
    """A member who votes on other people's content."""
    return make_user("bob")


@pytest.fixture()
def answerer(make_user: Callable[..., User]) -> User:
    """A member who answers questions."""
    return make_user("carol")


@pytest.fixture()
def admin_user(make_user: Callable[..., User]) -> User:
    return make_user("root_admin", role=ROLE_ADMIN, reputation=1000)


@pytest.fixture()
def author_headers(author: User) -> dict[str, str]:
    return bearer(author)


@pytest.fixture()
def voter_headers(voter: User) -> dict[str, str]:
    return bearer(voter)


@pytest.fixture()
def answerer_headers(answerer: User) -> dict[str, str]:
    return bearer(answerer)


@pytest.fixture()
def admin_headers(admin_user: User) -> dict[str, str]:
    return bearer(admin_user)


@pytest.fixture()
def make_question(db_session: Session) -> Callable[..., Question]:
    """Return a factory that persists questions with tags."""

    def _make_question(
        author: User,
        title: str = "How do I reverse a list in Python?",
        content: str = "I have a list of integers and need it in reverse order.",
        tags: tuple[str, ...] = ("python",),
        **fields: object,
    ) -> Question:
        tag_rows = []
        for name in tags:
            tag = db_session.query(Tag).filter(Tag.name == name).first()
            if tag is None:
                tag = Tag(name=name, created_by_id=author.id, question_count=0)
                db_session.add(tag)
            tag.question_count += 1
            tag_rows.append(tag)
        question = Question(
            title=title,
            content=content,
            author_id=author.id,
            tags=tag_rows,
            **fields,
        )
        db_session.add(question)
        db_session.flush()
        question.generate_slug()
        db_session.commit()
        db_session.refresh(question)
        return question

    return _make_question


@pytest.fixture()
def question(make_question: Callable[..., Question], author: User) -> Question:
    return make_question(author)


@pytest.fixture()
def make_answer(db_session: Session) -> Callable[..., Answer]:
    """Return a factory that persists answers."""

    def _make_answer(
        question: Question,
        author: User,
        content: str = "Use slicing: my_list[::-1] returns a reversed copy.",
        **fields: object,
    ) -> Answer:
        answer = Answer(content=content, question_id=question.id, author_id=author.id, **fields)
        db_session.add(answer)
        question.answer_count += 1
        db_session.commit()
        db_session.refresh(answer)
        return answer

    return _make_answer


@pytest.fixture()
def answer(make_answer: Callable[..., Answer], question: Question, answerer: User) -> Answer:
    return make_answer(question, answerer)
