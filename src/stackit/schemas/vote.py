"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import Field

from .common import APIModel


class VoteCreate(APIModel):
    """Schema for casting a vote on a question or an answer."""

    type: Literal["up", "down"] = Field(..., description="Requested vote direction")


class VoteResponse(APIModel):
    """Result of a vote: the new score and the caller's resulting vote."""

    message: str = "Vote updated successfully"
    vote_score: int
    user_vote: Literal["up", "down"] | None
