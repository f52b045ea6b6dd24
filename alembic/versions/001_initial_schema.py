"""Initial schema: users, quotas, content, answers, progress ledger, billing events.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("(CURRENT_TIMESTAMP)"),
        nullable=False,
    )


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("is_subscribed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("payment_customer_id", sa.String(255), nullable=True),
        sa.Column("payment_subscription_id", sa.String(255), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("payment_customer_id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(
        op.f("ix_users_payment_subscription_id"),
        "users",
        ["payment_subscription_id"],
        unique=False,
    )

    op.create_table(
        "usage_quotas",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("content_type", sa.String(20), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reset_date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "content_type", name="uq_usage_quota_user_content_type"),
        sa.CheckConstraint("count >= 0", name="ck_usage_quota_count_non_negative"),
    )
    op.create_index(op.f("ix_usage_quotas_id"), "usage_quotas", ["id"], unique=False)
    op.create_index(op.f("ix_usage_quotas_user_id"), "usage_quotas", ["user_id"], unique=False)

    op.create_table(
        "content_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("content_type", sa.String(20), nullable=False),
        sa.Column("subject", sa.String(100), nullable=False),
        sa.Column("topic", sa.String(200), nullable=False),
        sa.Column("exam_board", sa.String(100), nullable=True),
        sa.Column("title", sa.String(500), nullable=False),
        _timestamp("created_at"),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_content_items_id"), "content_items", ["id"], unique=False)
    op.create_index(op.f("ix_content_items_user_id"), "content_items", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_content_items_content_type"), "content_items", ["content_type"], unique=False
    )

    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("content_item_id", sa.Integer(), nullable=False),
        sa.Column("number", sa.Integer(), nullable=False),
        sa.Column("prompt", sa.Text(), nullable=False),
        sa.Column("grading_model", sa.String(10), nullable=False),
        sa.Column("marks", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("options", sa.JSON(), nullable=True),
        sa.Column("correct_option", sa.String(1), nullable=True),
        sa.Column("answer", sa.Text(), nullable=True),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("sample_answer", sa.Text(), nullable=True),
        sa.Column("rubric", sa.JSON(), nullable=True),
        sa.ForeignKeyConstraint(["content_item_id"], ["content_items.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("content_item_id", "number", name="uq_question_item_number"),
        sa.CheckConstraint("marks > 0", name="ck_question_marks_positive"),
    )
    op.create_index(op.f("ix_questions_id"), "questions", ["id"], unique=False)
    op.create_index(
        op.f("ix_questions_content_item_id"), "questions", ["content_item_id"], unique=False
    )

    op.create_table(
        "answer_records",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("content_item_id", sa.Integer(), nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("attempt", sa.Integer(), nullable=False),
        sa.Column("submitted_value", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("max_marks", sa.Integer(), nullable=False),
        sa.Column("marks_awarded", sa.Integer(), nullable=True),
        sa.Column("is_correct", sa.Boolean(), nullable=True),
        sa.Column("graded_by", sa.Integer(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["content_item_id"], ["content_items.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["graded_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("question_id", "attempt", name="uq_answer_record_question_attempt"),
        sa.CheckConstraint(
            "marks_awarded IS NULL OR (marks_awarded >= 0 AND marks_awarded <= max_marks)",
            name="ck_answer_record_marks_in_range",
        ),
    )
    op.create_index(op.f("ix_answer_records_id"), "answer_records", ["id"], unique=False)
    op.create_index(
        op.f("ix_answer_records_content_item_id"),
        "answer_records",
        ["content_item_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_answer_records_question_id"), "answer_records", ["question_id"], unique=False
    )

    op.create_table(
        "progress_ledger",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("content_item_id", sa.Integer(), nullable=False),
        sa.Column("subject", sa.String(100), nullable=False),
        sa.Column("topic", sa.String(200), nullable=False),
        sa.Column("content_type", sa.String(20), nullable=False),
        sa.Column("event_kind", sa.String(20), nullable=False),
        sa.Column("marks_earned", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("marks_possible", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("occurred_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["content_item_id"], ["content_items.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "content_item_id", "event_kind", name="uq_progress_ledger_item_event"
        ),
    )
    op.create_index(op.f("ix_progress_ledger_id"), "progress_ledger", ["id"], unique=False)
    op.create_index(
        op.f("ix_progress_ledger_user_id"), "progress_ledger", ["user_id"], unique=False
    )

    op.create_table(
        "subscription_events",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("event_id", sa.String(255), nullable=False),
        sa.Column("event_type", sa.String(100), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("event_id"),
    )
    op.create_index(
        op.f("ix_subscription_events_id"), "subscription_events", ["id"], unique=False
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f("ix_subscription_events_id"), table_name="subscription_events")
    op.drop_table("subscription_events")
    op.drop_index(op.f("ix_progress_ledger_user_id"), table_name="progress_ledger")
    op.drop_index(op.f("ix_progress_ledger_id"), table_name="progress_ledger")
    op.drop_table("progress_ledger")
    op.drop_index(op.f("ix_answer_records_question_id"), table_name="answer_records")
    op.drop_index(op.f("ix_answer_records_content_item_id"), table_name="answer_records")
    op.drop_index(op.f("ix_answer_records_id"), table_name="answer_records")
    op.drop_table("answer_records")
    op.drop_index(op.f("ix_questions_content_item_id"), table_name="questions")
    op.drop_index(op.f("ix_questions_id"), table_name="questions")
    op.drop_table("questions")
    op.drop_index(op.f("ix_content_items_content_type"), table_name="content_items")
    op.drop_index(op.f("ix_content_items_user_id"), table_name="content_items")
    op.drop_index(op.f("ix_content_items_id"), table_name="content_items")
    op.drop_table("content_items")
    op.drop_index(op.f("ix_usage_quotas_user_id"), table_name="usage_quotas")
    op.drop_index(op.f("ix_usage_quotas_id"), table_name="usage_quotas")
    op.drop_table("usage_quotas")
    op.drop_index(op.f("ix_users_payment_subscription_id"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
