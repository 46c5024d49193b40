# mypy: ignore-errors
"""Tests for vote endpoints."""

from __future__ import annotations

from fastapi import status


def test_upvote_question(client, db_session, question, author, voter_headers) -> None:
    """An upvote returns the new score and the caller's vote."""
    response = client.post(
        f"/api/v1/questions/{question.id}/vote",
        json={"type": "up"},
        headers=voter_headers,
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["message"] == "Vote updated successfully"
    assert data["voteScore"] == 1
    assert data["userVote"] == "up"

    db_session.refresh(author)
    assert author.reputation == 10


def test_upvote_twice_toggles_off(client, db_session, question, author, voter_headers) -> None:
    url = f"/api/v1/questions/{question.id}/vote"
    client.post(url, json={"type": "up"}, headers=voter_headers)
    response = client.post(url, json={"type": "up"}, headers=voter_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["voteScore"] == 0
    assert response.json()["userVote"] is None

    db_session.refresh(author)
    assert author.reputation == 0


def test_switch_downvote_to_upvote_on_answer(
    client, db_session, answer, answerer, voter_headers
) -> None:
    url = f"/api/v1/answers/{answer.id}/vote"
    down = client.post(url, json={"type": "down"}, headers=voter_headers)
    assert down.json() == {
        "message": "Vote updated successfully",
        "voteScore": -1,
        "userVote": "down",
    }
    db_session.refresh(answerer)
    assert answerer.reputation == -2

    up = client.post(url, json={"type": "up"}, headers=voter_headers)
    assert up.json()["voteScore"] == 1
    assert up.json()["userVote"] == "up"
    db_session.refresh(answerer)
    assert answerer.reputation == 10


def test_cannot_vote_on_own_question(client, question, author_headers) -> None:
    response = client.post(
        f"/api/v1/questions/{question.id}/vote",
        json={"type": "up"},
        headers=author_headers,
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Cannot vote on your own question"


def test_cannot_vote_on_own_answer(client, answer, answerer_headers) -> None:
    response = client.post(
        f"/api/v1/answers/{answer.id}/vote",
        json={"type": "down"},
        headers=answerer_headers,
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Cannot vote on your own answer"


def test_vote_requires_authentication(client, question) -> None:
    response = client.post(f"/api/v1/questions/{question.id}/vote", json={"type": "up"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_vote_with_invalid_token(client, question) -> None:
    response = client.post(
        f"/api/v1/questions/{question.id}/vote",
        json={"type": "up"},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_vote_with_invalid_type(client, question, voter_headers) -> None:
    response = client.post(
        f"/api/v1/questions/{question.id}/vote",
        json={"type": "sideways"},
        headers=voter_headers,
    )
    assert response.status_code == 422


def test_vote_on_missing_content(client, voter_headers) -> None:
    response = client.post("/api/v1/questions/999/vote", json={"type": "up"}, headers=voter_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND

    response = client.post("/api/v1/answers/999/vote", json={"type": "up"}, headers=voter_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_vote_via_cookie(client, question, voter_headers) -> None:
    """The auth cookie is accepted when no Authorization header is sent."""
    token = voter_headers["Authorization"].removeprefix("Bearer ")
    client.cookies.set("token", token)

    response = client.post(f"/api/v1/questions/{question.id}/vote", json={"type": "down"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["userVote"] == "down"


def test_banned_user_cannot_vote(client, question, make_user, auth_headers) -> None:
    banned = make_user("banned_bob", is_banned=True)
    response = client.post(
        f"/api/v1/questions/{question.id}/vote",
        json={"type": "up"},
        headers=auth_headers(banned),
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_get_my_vote(client, question, voter_headers) -> None:
    url = f"/api/v1/questions/{question.id}/vote"
    assert client.get(url, headers=voter_headers).json()["userVote"] is None

    client.post(url, json={"type": "up"}, headers=voter_headers)
    data = client.get(url, headers=voter_headers).json()
    assert data["userVote"] == "up"
    assert data["voteScore"] == 1


def test_distinct_voters_score(client, question, make_user, auth_headers) -> None:
    url = f"/api/v1/questions/{question.id}/vote"
    for vote in ("up", "up", "down", "up"):
        response = client.post(url, json={"type": vote}, headers=auth_headers(make_user()))
        assert response.status_code == status.HTTP_200_OK

    assert response.json()["voteScore"] == 2
