"""FlashcardReview entity: a student's own verdict on one flashcard."""

from dataclasses import dataclass
from datetime import datetime

from examelement.domain.common.entity import Entity
from examelement.domain.common.value_object import ValueObject
from examelement.domain.common.value_objects.ids import (
    ContentItemId,
    FlashcardReviewId,
    QuestionId,
    UserId,
)


@dataclass(frozen=True)
class FlashcardReview(Entity[FlashcardReviewId]):
    """
    One self-review of a flashcard. Reviews are appended, never changed.

    Self-reviews carry no marks and never reach the progress ledger.
    """

    id: FlashcardReviewId
    item_id: ContentItemId
    question_id: QuestionId
    user_id: UserId
    remembered: bool
    reviewed_at: datetime | None = None

    @classmethod
    def record(
        cls,
        item_id: ContentItemId,
        question_id: QuestionId,
        user_id: UserId,
        remembered: bool,
        at: datetime,
    ) -> "FlashcardReview":
        return cls(
            id=FlashcardReviewId.generate(),
            item_id=item_id,
            question_id=question_id,
            user_id=user_id,
            remembered=remembered,
            reviewed_at=at,
        )


@dataclass(frozen=True)
class ReviewTally(ValueObject):
    """How often a card has been reviewed and how often it was remembered."""

    question_id: QuestionId
    reviews: int = 0
    remembered: int = 0

    @property
    def forgotten(self) -> int:
        return self.reviews - self.remembered
