"""AnswerRecord entity: one graded or pending answer to one question."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from examelement.domain.common.entity import Entity
from examelement.domain.common.exceptions import InvariantViolationError, ValidationError
from examelement.domain.common.value_objects.ids import (
    AnswerRecordId,
    ContentItemId,
    QuestionId,
    UserId,
)
from examelement.domain.study.exceptions import AnswerNotPendingReviewError


class AnswerStatus(StrEnum):
    GRADED = "graded"
    PENDING_REVIEW = "pending_review"


@dataclass(frozen=True)
class AnswerRecord(Entity[AnswerRecordId]):
    """
    The answer given to a question on one submission attempt.

    Records are never rewritten. A reviewer's grade produces a new record
    with the next attempt number which supersedes the pending one; the
    latest attempt per question is the effective answer.

    Business Rules:
    - attempt is 1-based and unique per question
    - graded records carry 0 <= marks_awarded <= max_marks
    - pending records carry no mark
    """

    id: AnswerRecordId
    item_id: ContentItemId
    question_id: QuestionId
    attempt: int
    submitted_value: str
    status: AnswerStatus
    max_marks: int
    marks_awarded: int | None = None
    is_correct: bool | None = None
    graded_by: UserId | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.attempt < 1:
            raise InvariantViolationError("AnswerRecord", "attempt must be positive")
        if self.status is AnswerStatus.PENDING_REVIEW:
            if self.marks_awarded is not None:
                raise InvariantViolationError("AnswerRecord", "pending answers carry no mark")
            return
        if self.marks_awarded is None:
            raise InvariantViolationError("AnswerRecord", "graded answers carry a mark")
        if not 0 <= self.marks_awarded <= self.max_marks:
            raise InvariantViolationError(
                "AnswerRecord", f"marks_awarded must be within 0..{self.max_marks}"
            )

    @property
    def is_pending(self) -> bool:
        return self.status is AnswerStatus.PENDING_REVIEW

    def review(self, marks: int, grader_id: UserId, at: datetime) -> "AnswerRecord":
        """
        Grade a pending answer, producing the superseding record.

        Args:
            marks: Marks awarded by the reviewer
            grader_id: The trusted grader
            at: When the grade was given

        Returns:
            New AnswerRecord with the next attempt number

        Raises:
            AnswerNotPendingReviewError: If this answer is already graded
            ValidationError: If marks fall outside 0..max_marks
        """
        if not self.is_pending:
            raise AnswerNotPendingReviewError(self.question_id.value)
        if not 0 <= marks <= self.max_marks:
            raise ValidationError(
                f"Marks must be between 0 and {self.max_marks}", field="marks_awarded", value=marks
            )
        return AnswerRecord(
            id=AnswerRecordId.generate(),
            item_id=self.item_id,
            question_id=self.question_id,
            attempt=self.attempt + 1,
            submitted_value=self.submitted_value,
            status=AnswerStatus.GRADED,
            max_marks=self.max_marks,
            marks_awarded=marks,
            graded_by=grader_id,
            created_at=at,
        )
