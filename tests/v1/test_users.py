# mypy: ignore-errors
"""Tests for the member directory and public profiles."""

from __future__ import annotations

from fastapi import status


def test_list_users_by_reputation(client, make_user) -> None:
    low = make_user("low_rep", reputation=5)
    high = make_user("high_rep", reputation=500)

    response = client.get("/api/v1/users")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [u["id"] for u in data["users"]] == [high.id, low.id]
    assert data["pagination"]["total"] == 2
    assert "email" not in data["users"][0]


def test_list_users_sorted_by_name(client, make_user) -> None:
    make_user("zed")
    make_user("amy")

    data = client.get("/api/v1/users", params={"sort": "name"}).json()
    assert [u["username"] for u in data["users"]] == ["amy", "zed"]


def test_search_users_matches_bio(client, make_user) -> None:
    make_user("pythonista")
    rustacean = make_user("crab", bio="Writes Rust for fun")

    data = client.get("/api/v1/users", params={"search": "rust"}).json()
    assert [u["id"] for u in data["users"]] == [rustacean.id]


def test_profile_overview(client, author, question, answer) -> None:
    response = client.get(f"/api/v1/users/{author.username.upper()}")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["user"]["username"] == author.username
    assert "email" not in data["user"]
    assert [q["id"] for q in data["activity"]["recentQuestions"]] == [question.id]
    assert data["activity"]["recentAnswers"] == []
    assert "pagination" not in data["activity"]


def test_profile_answers_tab(client, answerer, question, answer) -> None:
    response = client.get(f"/api/v1/users/{answerer.username}", params={"tab": "answers"})

    data = response.json()
    assert [a["id"] for a in data["activity"]["answers"]] == [answer.id]
    assert data["activity"]["pagination"]["total"] == 1
    assert "questions" not in data["activity"]


def test_profile_hides_hidden_questions(client, make_question, author) -> None:
    visible = make_question(author, title="A visible question here")
    make_question(author, title="A hidden question here", is_hidden=True)

    data = client.get(f"/api/v1/users/{author.username}", params={"tab": "questions"}).json()
    assert [q["id"] for q in data["activity"]["questions"]] == [visible.id]


def test_unknown_profile(client) -> None:
    response = client.get("/api/v1/users/nobody_at_all")
    assert response.status_code == status.HTTP_404_NOT_FOUND
