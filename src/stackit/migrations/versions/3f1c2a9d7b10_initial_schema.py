"""initial schema

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _content_columns() -> list[sa.Column]:
    """Columns shared by question and answer."""
    return [
        sa.Column("author_id", sa.Integer(), sa.ForeignKey("user_account.id"), nullable=False),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_locked", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_hidden", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Create every StackIt table."""
    op.create_table(
        "user_account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False, server_default="user"),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("bio", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("reputation", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_active", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_banned", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("ban_reason", sa.Text(), nullable=True),
        sa.Column("banned_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("banned_by_id", sa.Integer(), sa.ForeignKey("user_account.id"), nullable=True),
        sa.Column("role_changed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "role_changed_by_id", sa.Integer(), sa.ForeignKey("user_account.id"), nullable=True
        ),
        sa.Column("questions_asked", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("answers_given", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("upvotes_received", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes_received", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("accepted_answers", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_user_account_username", "user_account", ["username"], unique=True)
    op.create_index("ix_user_account_email", "user_account", ["email"], unique=True)
    op.create_index("ix_user_account_reputation", "user_account", ["reputation"])

    op.create_table(
        "question",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("answer_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("accepted_answer_id", sa.Integer(), nullable=True),
        sa.Column("is_resolved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_pinned", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("last_activity", sa.DateTime(timezone=True), nullable=True),
        *_content_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index("ix_question_author_id", "question", ["author_id"])
    op.create_index("ix_question_created_at", "question", ["created_at"])
    op.create_index("ix_question_last_activity", "question", ["last_activity"])

    op.create_table(
        "tag",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=30), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("color", sa.String(length=7), nullable=False, server_default="#3b82f6"),
        sa.Column("question_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_by_id", sa.Integer(), sa.ForeignKey("user_account.id"), nullable=False),
        sa.Column("is_official", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_tag_question_count", "tag", ["question_count"])

    op.create_table(
        "question_tag",
        sa.Column(
            "question_id",
            sa.Integer(),
            sa.ForeignKey("question.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("tag_id", sa.Integer(), sa.ForeignKey("tag.id", ondelete="CASCADE"), nullable=False),
        sa.PrimaryKeyConstraint("question_id", "tag_id"),
    )

    op.create_table(
        "answer",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "question_id",
            sa.Integer(),
            sa.ForeignKey("question.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("is_accepted", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_content_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_answer_question_id", "answer", ["question_id"])
    op.create_index("ix_answer_author_id", "answer", ["author_id"])
    op.create_index("ix_answer_created_at", "answer", ["created_at"])

    for table, content_column, target in (
        ("question_vote", "question_id", "question.id"),
        ("answer_vote", "answer_id", "answer.id"),
    ):
        op.create_table(
            table,
            sa.Column(
                content_column,
                sa.Integer(),
                sa.ForeignKey(target, ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column("voter_id", sa.Integer(), sa.ForeignKey("user_account.id"), nullable=False),
            sa.Column("direction", sa.SmallInteger(), nullable=False),
            sa.CheckConstraint("direction IN (1, -1)", name=f"ck_{table}_direction"),
            sa.PrimaryKeyConstraint(content_column, "voter_id"),
        )
        op.create_index(f"ix_{table}_voter_id", table, ["voter_id"])

    op.create_table(
        "notification",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "recipient_id",
            sa.Integer(),
            sa.ForeignKey("user_account.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "sender_id",
            sa.Integer(),
            sa.ForeignKey("user_account.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("message", sa.String(length=500), nullable=False),
        sa.Column(
            "related_question_id",
            sa.Integer(),
            sa.ForeignKey("question.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "related_answer_id",
            sa.Integer(),
            sa.ForeignKey("answer.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_notification_created_at", "notification", ["created_at"])
    op.create_index("ix_notification_recipient_read", "notification", ["recipient_id", "is_read"])


def downgrade() -> None:
    """Drop every StackIt table."""
    op.drop_table("notification")
    op.drop_table("answer_vote")
    op.drop_table("question_vote")
    op.drop_table("answer")
    op.drop_table("question_tag")
    op.drop_table("tag")
    op.drop_table("question")
    op.drop_table("user_account")
