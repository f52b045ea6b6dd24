"""Flashcard self-reviews and soft deletion of content items.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Add content_items.deleted_at and the flashcard_reviews table."""
    with op.batch_alter_table("content_items") as batch_op:
        batch_op.add_column(sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True))

    op.create_table(
        "flashcard_reviews",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("content_item_id", sa.Integer(), nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("remembered", sa.Boolean(), nullable=False),
        sa.Column(
            "reviewed_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["content_item_id"], ["content_items.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flashcard_reviews_id"), "flashcard_reviews", ["id"], unique=False)
    op.create_index(
        op.f("ix_flashcard_reviews_question_id"),
        "flashcard_reviews",
        ["question_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop flashcard_reviews and content_items.deleted_at."""
    op.drop_index(op.f("ix_flashcard_reviews_question_id"), table_name="flashcard_reviews")
    op.drop_index(op.f("ix_flashcard_reviews_id"), table_name="flashcard_reviews")
    op.drop_table("flashcard_reviews")

    with op.batch_alter_table("content_items") as batch_op:
        batch_op.drop_column("deleted_at")
