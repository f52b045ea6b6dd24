"""Protocol for FlashcardReview repository."""

from typing import Protocol

from examelement.domain.common.value_objects.ids import QuestionId
from examelement.domain.study.entities.flashcard_review import FlashcardReview, ReviewTally


class FlashcardReviewRepositoryProtocol(Protocol):
    def add(self, review: FlashcardReview) -> FlashcardReview:
        """Insert a review. Flushes; the caller commits."""
        ...

    def tally(self, question_id: QuestionId) -> ReviewTally:
        """Review and remembered counts of one card; zeros if it was never reviewed."""
        ...
