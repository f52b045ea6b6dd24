"""Database models."""

from datetime import date, datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from examelement.database import Base


class User(Base):
    """User known to the study engine. Credentials live with the identity provider."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    is_subscribed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    payment_customer_id: Mapped[str | None] = mapped_column(
        String(255), unique=True, nullable=True
    )
    payment_subscription_id: Mapped[str | None] = mapped_column(
        String(255), index=True, nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email='{self.email}', subscribed={self.is_subscribed})>"


class UsageQuota(Base):
    """Daily generation counter for one (user, content type) quota key."""

    __tablename__ = "usage_quotas"
    __table_args__ = (
        UniqueConstraint("user_id", "content_type", name="uq_usage_quota_user_content_type"),
        CheckConstraint("count >= 0", name="ck_usage_quota_count_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    content_type: Mapped[str] = mapped_column(String(20), nullable=False)
    count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    reset_date: Mapped[date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        """String representation of UsageQuota."""
        return (
            f"<UsageQuota(user_id={self.user_id}, content_type='{self.content_type}', "
            f"count={self.count}, reset_date={self.reset_date})>"
        )


class ContentItem(Base):
    """Generated flashcard set, quiz or mock exam."""

    __tablename__ = "content_items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    content_type: Mapped[str] = mapped_column(String(20), index=True, nullable=False)
    subject: Mapped[str] = mapped_column(String(100), nullable=False)
    topic: Mapped[str] = mapped_column(String(200), nullable=False)
    exam_board: Mapped[str | None] = mapped_column(String(100), nullable=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    submitted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    # Set when a flashcard set is deleted; the row stays so ledger entries keep their item
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    questions: Mapped[list["Question"]] = relationship(
        back_populates="content_item",
        cascade="all, delete-orphan",
        order_by="Question.number",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of ContentItem."""
        return f"<ContentItem(id={self.id}, type='{self.content_type}', title='{self.title}')>"


class Question(Base):
    """One question of a content item."""

    __tablename__ = "questions"
    __table_args__ = (
        UniqueConstraint("content_item_id", "number", name="uq_question_item_number"),
        CheckConstraint("marks > 0", name="ck_question_marks_positive"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    content_item_id: Mapped[int] = mapped_column(
        ForeignKey("content_items.id", ondelete="CASCADE"), index=True, nullable=False
    )
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    grading_model: Mapped[str] = mapped_column(String(10), nullable=False)
    marks: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    options: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    correct_option: Mapped[str | None] = mapped_column(String(1), nullable=True)
    answer: Mapped[str | None] = mapped_column(Text, nullable=True)
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True)
    sample_answer: Mapped[str | None] = mapped_column(Text, nullable=True)
    rubric: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    content_item: Mapped[ContentItem] = relationship(back_populates="questions")

    def __repr__(self) -> str:
        """String representation of Question."""
        return f"<Question(id={self.id}, item={self.content_item_id}, number={self.number})>"


class AnswerRecord(Base):
    """Answer to one question on one attempt. Rows are never updated."""

    __tablename__ = "answer_records"
    __table_args__ = (
        UniqueConstraint("question_id", "attempt", name="uq_answer_record_question_attempt"),
        CheckConstraint(
            "marks_awarded IS NULL OR (marks_awarded >= 0 AND marks_awarded <= max_marks)",
            name="ck_answer_record_marks_in_range",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    content_item_id: Mapped[int] = mapped_column(
        ForeignKey("content_items.id", ondelete="CASCADE"), index=True, nullable=False
    )
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), index=True, nullable=False
    )
    attempt: Mapped[int] = mapped_column(Integer, nullable=False)
    submitted_value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    max_marks: Mapped[int] = mapped_column(Integer, nullable=False)
    marks_awarded: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_correct: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    graded_by: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of AnswerRecord."""
        return (
            f"<AnswerRecord(question_id={self.question_id}, attempt={self.attempt}, "
            f"status='{self.status}')>"
        )


class FlashcardReview(Base):
    """A student's own remembered/forgotten verdict on one flashcard. Insert-only."""

    __tablename__ = "flashcard_reviews"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    content_item_id: Mapped[int] = mapped_column(
        ForeignKey("content_items.id", ondelete="CASCADE"), nullable=False
    )
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), index=True, nullable=False
    )
    remembered: Mapped[bool] = mapped_column(Boolean, nullable=False)
    reviewed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of FlashcardReview."""
        return (
            f"<FlashcardReview(question_id={self.question_id}, "
            f"remembered={self.remembered})>"
        )


class ProgressLedgerEntry(Base):
    """Append-only progress fact. The only source for dashboard numbers."""

    __tablename__ = "progress_ledger"
    __table_args__ = (
        UniqueConstraint("content_item_id", "event_kind", name="uq_progress_ledger_item_event"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    content_item_id: Mapped[int] = mapped_column(
        ForeignKey("content_items.id", ondelete="CASCADE"), nullable=False
    )
    subject: Mapped[str] = mapped_column(String(100), nullable=False)
    topic: Mapped[str] = mapped_column(String(200), nullable=False)
    content_type: Mapped[str] = mapped_column(String(20), nullable=False)
    event_kind: Mapped[str] = mapped_column(String(20), nullable=False)
    marks_earned: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    marks_possible: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of ProgressLedgerEntry."""
        return (
            f"<ProgressLedgerEntry(user_id={self.user_id}, item={self.content_item_id}, "
            f"kind='{self.event_kind}')>"
        )


class SubscriptionEvent(Base):
    """Payment processor event that has been applied."""

    __tablename__ = "subscription_events"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    event_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    event_type: Mapped[str] = mapped_column(String(100), nullable=False)
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of SubscriptionEvent."""
        return f"<SubscriptionEvent(event_id='{self.event_id}', type='{self.event_type}')>"
