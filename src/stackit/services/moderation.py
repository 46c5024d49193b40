# src/stackit/services/moderation.py
"""Moderation services for StackIt."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from stackit.db.time import utcnow
from stackit.models import Answer, Question, User
from stackit.models.user import ROLE_MODERATOR, ROLE_USER

logger = logging.getLogger(__name__)

TARGET_USERS = "users"
TARGET_QUESTIONS = "questions"
TARGET_ANSWERS = "answers"

USER_ACTIONS = frozenset({"ban", "unban", "promote", "demote"})
CONTENT_ACTIONS = frozenset({"lock", "unlock", "hide", "show", "delete"})
QUESTION_ONLY_ACTIONS = frozenset({"pin", "unpin"})

_CONTENT_FLAGS: dict[str, tuple[str, bool]] = {
    "lock": ("is_locked", True),
    "unlock": ("is_locked", False),
    "hide": ("is_hidden", True),
    "show": ("is_hidden", False),
    "delete": ("is_deleted", True),
    "pin": ("is_pinned", True),
    "unpin": ("is_pinned", False),
}


class BulkActionError(ValueError):
    """Raised when a bulk action request is invalid as a whole."""


class BulkItemError(Exception):
    """Raised when a single item of a bulk action cannot be processed."""


@dataclass
class BulkItemResult:
    """Outcome of a bulk action for one item."""

    id: int
    success: bool
    error: str | None = None


def allowed_actions(target: str) -> frozenset[str]:
    """Return the actions valid for ``target``."""
    if target == TARGET_USERS:
        return USER_ACTIONS
    if target == TARGET_QUESTIONS:
        return CONTENT_ACTIONS | QUESTION_ONLY_ACTIONS
    if target == TARGET_ANSWERS:
        return CONTENT_ACTIONS
    raise BulkActionError(f"Unknown target type: {target}")


class ModerationService:
    """Service applying administrator actions to users and content."""

    @staticmethod
    def validate(target: str, action: str, reason: str) -> None:
        """Reject a request before any item is touched.

        Raises:
            BulkActionError: If the reason is blank or the action does not
                apply to ``target``.
        """
        if not reason or not reason.strip():
            raise BulkActionError("Reason is required for all admin actions")
        if action not in allowed_actions(target):
            raise BulkActionError(f"Action '{action}' is not valid for {target}")

    @staticmethod
    def apply_bulk_action(
        db: Session,
        admin: User,
        target: str,
        action: str,
        items: Sequence[int],
        reason: str,
    ) -> list[BulkItemResult]:
        """Apply ``action`` to every item; each item succeeds or fails on its own."""
        ModerationService.validate(target, action, reason)

        results: list[BulkItemResult] = []
        for item_id in items:
            try:
                if target == TARGET_USERS:
                    ModerationService._apply_user_action(db, admin, action, item_id, reason)
                else:
                    ModerationService._apply_content_action(db, target, action, item_id)
            except BulkItemError as err:
                results.append(BulkItemResult(id=item_id, success=False, error=str(err)))
            else:
                results.append(BulkItemResult(id=item_id, success=True))

        db.commit()

        succeeded = sum(1 for result in results if result.success)
        logger.info(
            "Admin %s applied %s to %d %s (%d failed): %s",
            admin.id,
            action,
            succeeded,
            target,
            len(results) - succeeded,
            reason,
        )
        return results

    @staticmethod
    def _apply_user_action(
        db: Session, admin: User, action: str, user_id: int, reason: str
    ) -> None:
        user = db.get(User, user_id)
        if user is None:
            raise BulkItemError("User not found")
        if user.id == admin.id:
            raise BulkItemError("Cannot apply this action to your own account")

        now = utcnow()
        if action == "ban":
            user.is_banned = True
            user.ban_reason = reason
            user.banned_at = now
            user.banned_by_id = admin.id
        elif action == "unban":
            user.is_banned = False
            user.ban_reason = None
            user.banned_at = None
            user.banned_by_id = None
        else:
            user.role = ROLE_MODERATOR if action == "promote" else ROLE_USER
            user.role_changed_at = now
            user.role_changed_by_id = admin.id

    @staticmethod
    def _apply_content_action(db: Session, target: str, action: str, item_id: int) -> None:
        model = Question if target == TARGET_QUESTIONS else Answer
        item = db.get(model, item_id)
        if item is None:
            raise BulkItemError(f"{model.__name__} not found")

        attribute, value = _CONTENT_FLAGS[action]
        setattr(item, attribute, value)
