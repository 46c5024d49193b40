# mypy: ignore-errors
"""Tests for health, root and public statistics endpoints."""

from __future__ import annotations

import logging

from fastapi import status
from fastapi.testclient import TestClient

from stackit.services.voting import VotingService


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_root(client) -> None:
    data = client.get("/").json()
    assert data["name"] == "StackIt API"
    assert data["docs"] == "/docs"


def test_public_stats(client, db_session, question, answer, make_question, author) -> None:
    make_question(author, title="Deleted question does not count", is_deleted=True)

    response = client.get("/api/v1/stats")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"totalUsers": 2, "totalQuestions": 1, "totalAnswers": 1}


def test_public_config_has_no_secrets(client) -> None:
    data = client.get("/api/v1/config").json()
    assert data["reputation"] == {"upvote": 10, "downvote": -2, "accepted_answer": 15}
    assert "secret_key" not in str(data)
    assert "database_url" not in str(data)


def test_unhandled_error_returns_generic_500(app, question, voter_headers, monkeypatch, caplog) -> None:
    """Unexpected failures are logged and reported without internal details."""

    def _explode(*args, **kwargs):
        raise RuntimeError("database on fire")

    monkeypatch.setattr(VotingService, "cast_vote", staticmethod(_explode))

    with TestClient(app, base_url="http://test", raise_server_exceptions=False) as client:
        with caplog.at_level(logging.ERROR, logger="stackit.main"):
            response = client.post(
                f"/api/v1/questions/{question.id}/vote",
                json={"type": "up"},
                headers=voter_headers,
            )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Internal server error"}
    assert "database on fire" not in response.text
    assert "Unhandled error on POST" in caplog.text
