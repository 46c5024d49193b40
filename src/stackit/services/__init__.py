# src/stackit/services/__init__.py
"""Business logic services for the StackIt application."""

from .moderation import ModerationService
from .voting import VoteDirection, VotingService, reconcile_vote

__all__ = [
    "ModerationService",
    "VoteDirection",
    "VotingService",
    "reconcile_vote",
]
