"""Study domain exceptions."""

from examelement.domain.common.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


class AlreadySubmittedError(BusinessRuleViolationError):
    """Raised when answers are submitted for an item that was already submitted."""

    def __init__(self, item_id: int) -> None:
        super().__init__(
            "single_submission",
            f"Content item {item_id} has already been submitted",
        )
        self.item_id = item_id


class AnswerNotPendingReviewError(BusinessRuleViolationError):
    """Raised when a reviewer grades an answer that is not awaiting review."""

    def __init__(self, question_id: int) -> None:
        super().__init__(
            "grade_pending_only",
            f"Answer for question {question_id} is not pending review",
        )
        self.question_id = question_id


class ContentNotGradableError(ValidationError):
    """Raised when answers are submitted for content that cannot be graded."""

    def __init__(self, content_type: str) -> None:
        super().__init__(
            f"{content_type} content cannot be submitted for grading",
            field="content_type",
            value=content_type,
        )


class InvalidGeneratedContentError(ValidationError):
    """
    Raised when generator output does not have the expected shape.

    The reason is kept for logging; callers only ever see a generic message.
    """

    def __init__(self, reason: str) -> None:
        super().__init__("Generated content was malformed", field="generated_content")
        self.reason = reason


class QuestionNotFoundError(EntityNotFoundError):
    """Raised when a question id does not belong to the item being graded."""

    def __init__(self, question_id: int) -> None:
        super().__init__("Question", question_id)


class ResultsNotAvailableError(EntityNotFoundError):
    """Raised when results are requested for an item that has not been submitted."""

    def __init__(self, item_id: int) -> None:
        super().__init__("Results for content item", item_id)


class DuplicateAnswerAttemptError(BusinessRuleViolationError):
    """Raised when two writers race to record the same attempt of an answer."""

    def __init__(self) -> None:
        super().__init__(
            "attempt_recorded_once", "This answer was changed by another request; reload it"
        )


class ContentNotReviewableError(ValidationError):
    """Raised when a self-review targets anything but a flashcard set."""

    def __init__(self, content_type: str) -> None:
        super().__init__(
            f"{content_type} content cannot be self-reviewed",
            field="content_type",
            value=content_type,
        )


class ContentNotDeletableError(BusinessRuleViolationError):
    """Raised when deleting a quiz or mock exam, whose results feed progress."""

    def __init__(self, content_type: str) -> None:
        super().__init__(
            "delete_flashcards_only",
            f"{content_type} content cannot be deleted",
        )
        self.content_type = content_type
