# mypy: ignore-errors
"""Tests for vote reconciliation and the reputation ledger."""

from __future__ import annotations

import pytest

from stackit.models import AnswerVote, Notification, QuestionVote
from stackit.services.voting import (
    SelfVoteError,
    VoteDirection,
    VotingService,
    reconcile_vote,
)

UP = VoteDirection.UP
DOWN = VoteDirection.DOWN


@pytest.mark.parametrize(
    ("current", "requested", "expected_new", "expected_delta"),
    [
        (None, UP, UP, 10),
        (None, DOWN, DOWN, -2),
        (UP, UP, None, -10),
        (DOWN, DOWN, None, 2),
        (DOWN, UP, UP, 12),
        (UP, DOWN, DOWN, -12),
    ],
)
def test_reconcile_vote_transition_table(current, requested, expected_new, expected_delta) -> None:
    """Every (current, requested) pair lands on the documented state and delta."""
    transition = reconcile_vote(current, requested)

    assert transition.new is expected_new
    assert transition.reputation_delta == expected_delta


def test_reconcile_vote_uses_supplied_point_values() -> None:
    transition = reconcile_vote(DOWN, UP, upvote_value=5, downvote_value=-1)
    assert transition.reputation_delta == 6


def test_repeated_request_toggles_back_to_baseline() -> None:
    first = reconcile_vote(None, UP)
    second = reconcile_vote(first.new, UP)

    assert second.new is None
    assert first.reputation_delta + second.reputation_delta == 0


def test_fresh_upvote_flag() -> None:
    assert reconcile_vote(None, UP).is_fresh_upvote
    assert reconcile_vote(DOWN, UP).is_fresh_upvote
    assert not reconcile_vote(UP, UP).is_fresh_upvote
    assert not reconcile_vote(None, DOWN).is_fresh_upvote


def test_cast_vote_rejects_self_vote(db_session, question, author) -> None:
    with pytest.raises(SelfVoteError):
        VotingService.cast_vote(db_session, question, author, UP)

    assert db_session.query(QuestionVote).count() == 0


def test_cast_vote_upvote_updates_score_and_reputation(db_session, question, author, voter) -> None:
    outcome = VotingService.cast_vote(db_session, question, voter, UP)

    db_session.refresh(author)
    assert outcome.vote_score == 1
    assert outcome.user_vote is UP
    assert author.reputation == 10
    assert author.upvotes_received == 1


def test_cast_vote_up_twice_restores_baseline(db_session, question, author, voter) -> None:
    VotingService.cast_vote(db_session, question, voter, UP)
    outcome = VotingService.cast_vote(db_session, question, voter, UP)

    db_session.refresh(author)
    assert outcome.vote_score == 0
    assert outcome.user_vote is None
    assert author.reputation == 0
    assert author.upvotes_received == 0
    assert db_session.query(QuestionVote).count() == 0


def test_cast_vote_down_then_up_nets_twelve(db_session, question, author, voter) -> None:
    VotingService.cast_vote(db_session, question, voter, DOWN)
    db_session.refresh(author)
    assert author.reputation == -2
    assert author.downvotes_received == 1

    outcome = VotingService.cast_vote(db_session, question, voter, UP)

    db_session.refresh(author)
    assert outcome.transition.reputation_delta == 12
    assert outcome.vote_score == 1
    assert author.reputation == 10
    assert author.upvotes_received == 1
    assert author.downvotes_received == 0


def test_score_equals_upvotes_minus_downvotes(db_session, make_user, question, author) -> None:
    directions = [UP, UP, DOWN, UP, DOWN, DOWN, DOWN, UP, UP]
    for direction in directions:
        VotingService.cast_vote(db_session, question, make_user(), direction)

    db_session.refresh(question)
    db_session.refresh(author)
    ups = directions.count(UP)
    downs = directions.count(DOWN)
    assert question.upvote_count == ups
    assert question.downvote_count == downs
    assert question.vote_score == ups - downs
    assert author.reputation == ups * 10 - downs * 2


def test_voter_is_never_in_both_sets(db_session, question, voter) -> None:
    for direction in (UP, DOWN, DOWN, UP, DOWN, UP, UP):
        VotingService.cast_vote(db_session, question, voter, direction)
        rows = db_session.query(QuestionVote).filter(QuestionVote.voter_id == voter.id).all()
        assert len(rows) <= 1
        db_session.refresh(question)
        assert question.upvote_count + question.downvote_count == len(rows)


def test_answer_votes_use_answer_vote_rows(db_session, answer, answerer, voter) -> None:
    outcome = VotingService.cast_vote(db_session, answer, voter, DOWN)

    db_session.refresh(answerer)
    assert outcome.vote_score == -1
    assert answerer.reputation == -2
    assert db_session.query(AnswerVote).count() == 1
    assert db_session.query(QuestionVote).count() == 0


def test_vote_state_reports_current_vote(db_session, question, voter) -> None:
    assert VotingService.vote_state(db_session, question, voter) is None

    VotingService.cast_vote(db_session, question, voter, DOWN)
    assert VotingService.vote_state(db_session, question, voter) is DOWN


def test_only_fresh_upvotes_notify_the_author(db_session, question, author, voter) -> None:
    VotingService.cast_vote(db_session, question, voter, DOWN)
    assert db_session.query(Notification).count() == 0

    VotingService.cast_vote(db_session, question, voter, UP)
    notifications = db_session.query(Notification).all()
    assert len(notifications) == 1
    assert notifications[0].recipient_id == author.id
    assert notifications[0].sender_id == voter.id
    assert notifications[0].type == "vote"
    assert notifications[0].title == "Your question received an upvote"

    # Withdrawing the upvote sends nothing further.
    VotingService.cast_vote(db_session, question, voter, UP)
    assert db_session.query(Notification).count() == 1


def test_counters_move_by_increment_not_recount(db_session, question, voter) -> None:
    """A vote adjusts the stored counters instead of overwriting them.

    The stored counts stand in for rows committed by another voter's
    transaction that this session cannot see yet.
    """
    question.upvote_count = 4
    question.downvote_count = 1
    db_session.commit()

    outcome = VotingService.cast_vote(db_session, question, voter, UP)
    db_session.refresh(question)
    assert question.upvote_count == 5
    assert question.downvote_count == 1
    assert outcome.vote_score == 4

    VotingService.cast_vote(db_session, question, voter, DOWN)
    db_session.refresh(question)
    assert (question.upvote_count, question.downvote_count) == (4, 2)


@pytest.mark.parametrize(
    ("current", "requested", "up_change", "down_change"),
    [
        (None, UP, 1, 0),
        (None, DOWN, 0, 1),
        (UP, UP, -1, 0),
        (DOWN, DOWN, 0, -1),
        (DOWN, UP, 1, -1),
        (UP, DOWN, -1, 1),
    ],
)
def test_transition_set_size_changes(current, requested, up_change, down_change) -> None:
    transition = reconcile_vote(current, requested)

    assert transition.upvote_change == up_change
    assert transition.downvote_change == down_change
    assert transition.toggled_off is (current is requested)
